"""Book endpoints."""
from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from in_n_out_books.db.store import RecordStore
from in_n_out_books.errors import FaultBoundaryRoute, to_response
from in_n_out_books.models.book_model import Book, BookPayload
from in_n_out_books.models.outcome_model import Success
from in_n_out_books.services import book_service
from in_n_out_books.utils.dependencies import get_book_store
from in_n_out_books.utils.validation import parse_book_id, require, validate_book_payload

router = APIRouter(route_class=FaultBoundaryRoute)


def _payload(body: Any) -> BookPayload:
    require(validate_book_payload(body))
    return BookPayload.model_validate(body)


@router.get("", response_model=List[Book])
@router.get("/", response_model=List[Book], include_in_schema=False)
async def list_books(store: RecordStore = Depends(get_book_store)):
    """List every book in the catalog."""
    return await book_service.list_books(store)


@router.get("/{book_id}", response_model=Book)
@router.get("/{book_id}/", response_model=Book, include_in_schema=False)
async def get_book(book_id: str, store: RecordStore = Depends(get_book_store)):
    """Get book details by ID."""
    return await book_service.get_book_by_id(store, parse_book_id(book_id))


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Book, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_book(body: Any = Body(default=None), store: RecordStore = Depends(get_book_store)):
    """Create a book. Any client-supplied id is ignored."""
    return await book_service.create_book(store, _payload(body))


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.put("/{book_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
async def update_book(
    book_id: str,
    body: Any = Body(default=None),
    store: RecordStore = Depends(get_book_store),
):
    """Replace a book's title (and author when given)."""
    parsed_id = parse_book_id(book_id)
    await book_service.update_book(store, parsed_id, _payload(body))
    return to_response(Success(status_code=status.HTTP_204_NO_CONTENT))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.delete("/{book_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
async def delete_book(book_id: str, store: RecordStore = Depends(get_book_store)):
    await book_service.delete_book(store, parse_book_id(book_id))
    return to_response(Success(status_code=status.HTTP_204_NO_CONTENT))
