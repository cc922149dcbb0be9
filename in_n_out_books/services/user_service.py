"""User service helpers."""
from typing import Optional

from in_n_out_books.db.store import RecordStore
from in_n_out_books.models.user_model import User


async def get_user_by_email(store: RecordStore, email: str) -> Optional[User]:
    record = await store.find_one(email)
    if record is None:
        return None
    return User(**record)
