"""Authentication endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends

from in_n_out_books.db.store import RecordStore
from in_n_out_books.errors import FaultBoundaryRoute
from in_n_out_books.models.user_model import UserLogin
from in_n_out_books.services import auth_service
from in_n_out_books.utils.dependencies import get_user_store
from in_n_out_books.utils.validation import require, validate_login_payload

router = APIRouter(route_class=FaultBoundaryRoute)


@router.post("/login")
async def login(body: Any = Body(default=None), store: RecordStore = Depends(get_user_store)):
    """Check an email/password pair. Neither the password nor its hash is echoed back."""
    require(validate_login_payload(body))
    credentials = UserLogin(email=body["email"], password=body["password"])
    await auth_service.login_user(store, credentials.email, credentials.password)
    return {"message": "Authentication successful"}
