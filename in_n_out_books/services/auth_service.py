"""Authentication helpers."""
from typing import List

from in_n_out_books.db.store import RecordStore
from in_n_out_books.errors import AuthError
from in_n_out_books.models.user_model import SecurityAnswer, User
from in_n_out_books.services import user_service
from in_n_out_books.utils.logger import get_logger
from in_n_out_books.utils.security import verify_password

logger = get_logger(__name__)


async def login_user(store: RecordStore, email: str, password: str) -> User:
    user = await user_service.get_user_by_email(store, email)
    if user is None or not verify_password(password, user.password):
        logger.info("Login rejected for %s", email)
        raise AuthError()
    return user


def answers_match(user: User, answers: List[SecurityAnswer]) -> bool:
    """Every stored answer must equal the submitted one at the same position."""
    stored = user.security_questions
    if len(stored) != len(answers):
        return False
    return all(q.answer == a.answer for q, a in zip(stored, answers))


async def verify_security_answers(store: RecordStore, email: str, answers: List[SecurityAnswer]) -> User:
    user = await user_service.get_user_by_email(store, email)
    if user is None or not answers_match(user, answers):
        logger.info("Security question check failed for %s", email)
        raise AuthError()
    return user
