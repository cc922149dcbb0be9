"""FastAPI entrypoint for the In-N-Out Books API."""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from in_n_out_books import __version__
from in_n_out_books.config import Settings, get_settings
from in_n_out_books.db.seed import build_book_store, build_user_store
from in_n_out_books.db.store import RecordStore
from in_n_out_books.errors import PublicFiles, register_error_handlers
from in_n_out_books.routers import pages
from in_n_out_books.routers import router as api_router
from in_n_out_books.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    book_store: Optional[RecordStore] = None,
    user_store: Optional[RecordStore] = None,
) -> FastAPI:
    """Build the application. Stores default to freshly seeded in-memory ones."""
    settings = settings or get_settings()
    set_log_level(settings.log_level)

    app = FastAPI(
        title="In-N-Out Books API",
        version=__version__,
        description="Books catalog and user authentication over an in-memory store.",
    )
    app.state.settings = settings
    app.state.book_store = book_store or build_book_store(seed=settings.seed_data)
    app.state.user_store = user_store or build_user_store(
        seed=settings.seed_data, rounds=settings.bcrypt_rounds
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(pages.router)
    app.include_router(api_router)
    # Mounted last so it only sees paths no route claimed
    app.mount("/", PublicFiles(directory=settings.public_dir, check_dir=False), name="public")

    logger.info("Application ready (env=%s)", settings.app_env)
    return app


app = create_app()
