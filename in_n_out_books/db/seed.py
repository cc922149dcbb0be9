"""Sample catalog and user accounts loaded into fresh in-memory stores."""
from typing import List

from in_n_out_books.db.store import InMemoryStore, Record
from in_n_out_books.utils.security import DEFAULT_ROUNDS, hash_password

BOOKS: List[Record] = [
    {"id": 1, "title": "The Fellowship of the Ring", "author": "J.R.R. Tolkien"},
    {"id": 2, "title": "Harry Potter and the Philosopher's Stone", "author": "J.K. Rowling"},
    {"id": 3, "title": "The Two Towers", "author": "J.R.R. Tolkien"},
    {"id": 4, "title": "Harry Potter and the Chamber of Secrets", "author": "J.K. Rowling"},
    {"id": 5, "title": "The Return of the King", "author": "J.R.R. Tolkien"},
]

# Plaintext passwords are hashed when the store is built
USERS: List[Record] = [
    {
        "id": 1007,
        "first_name": "Harry",
        "last_name": "Potter",
        "email": "harry@hogwarts.edu",
        "password": "potter",
        "security_questions": [
            {"question": "What is your pet's name?", "answer": "Hedwig"},
            {"question": "What is your favorite book?", "answer": "Quidditch Through the Ages"},
            {"question": "What is your mother's maiden name?", "answer": "Evans"},
        ],
    },
    {
        "id": 1008,
        "first_name": "Hermione",
        "last_name": "Granger",
        "email": "hermione@hogwarts.edu",
        "password": "granger",
        "security_questions": [
            {"question": "What is your pet's name?", "answer": "Crookshanks"},
            {"question": "What is your favorite book?", "answer": "Hogwarts: A History"},
            {"question": "What is your mother's maiden name?", "answer": "Granger"},
        ],
    },
]


def build_book_store(seed: bool = True) -> InMemoryStore:
    return InMemoryStore(BOOKS if seed else [], key_field="id")


def build_user_store(seed: bool = True, rounds: int = DEFAULT_ROUNDS) -> InMemoryStore:
    users = []
    if seed:
        users = [{**user, "password": hash_password(user["password"], rounds)} for user in USERS]
    return InMemoryStore(users, key_field="email")
