"""Book service helpers."""
from typing import List

from in_n_out_books.db.store import RecordStore
from in_n_out_books.errors import NotFoundError
from in_n_out_books.models.book_model import Book, BookPayload


async def list_books(store: RecordStore) -> List[Book]:
    """Return every book. No pagination or filtering."""
    return [Book(**record) for record in await store.find_all()]


async def get_book_by_id(store: RecordStore, book_id: int) -> Book:
    record = await store.find_one(book_id)
    if record is None:
        raise NotFoundError()
    return Book(**record)


async def create_book(store: RecordStore, payload: BookPayload) -> Book:
    """Insert a new book; the store assigns the id."""
    record = await store.insert_with_next_id(payload.model_dump())
    return Book(**record)


async def update_book(store: RecordStore, book_id: int, payload: BookPayload) -> None:
    # Updating a missing id is a silent no-op, unlike delete
    await store.update_one(book_id, payload.model_dump(exclude_unset=True))


async def delete_book(store: RecordStore, book_id: int) -> None:
    deleted = await store.delete_one(book_id)
    if not deleted:
        raise NotFoundError()
