"""Landing page, health check and the diagnostic error route.

These routes are not wrapped by ``FaultBoundaryRoute``: ``/error`` exists to
exercise the application-wide fault handler.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from in_n_out_books.config import Settings
from in_n_out_books.utils.dependencies import get_app_settings

router = APIRouter()

LANDING_PAGE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>In-N-Out Books</title>
    <link rel="stylesheet" href="/styles.css">
</head>
<body>
    <header>
        <h1>Welcome to In-N-Out Books</h1>
    </header>
    <main>
        <p>Your one-stop shop for all the books you love!</p>
        <a href="/api/books">View our catalog</a>
    </main>
    <footer>
        <p>&copy; 2024 In-N-Out Books</p>
    </footer>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page():
    return LANDING_PAGE


@router.get("/health", tags=["health"])
async def healthcheck(settings: Settings = Depends(get_app_settings)):
    """Basic health check."""
    return {"status": "ok", "env": settings.app_env}


@router.get("/error", include_in_schema=False)
async def force_error():
    raise RuntimeError("Test error")
