"""Account business logic: password hashing, signup and login."""
import logging

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from drinklog.errors import Conflict, InvalidIncomeData, Unauthorized
from drinklog.models.user import User

logger = logging.getLogger(__name__)


def normalize_username(username: str) -> str:
    return (username or "").strip().lower()


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if len(password) > 72:
        raise InvalidIncomeData("password longer than 72 bytes")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def signup(db: Session, username: str, password: str) -> User:
    name = normalize_username(username)
    if db.query(User).filter(User.username == name).first():
        raise Conflict("username taken", f"username {name!r} already registered")

    user = User(username=name, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("username taken", f"username {name!r} already registered")
    db.refresh(user)
    logger.info("Created user %s (%s)", user.user_id, user.username)
    return user


def login(db: Session, username: str, password: str) -> User:
    name = normalize_username(username)
    user = db.query(User).filter(User.username == name).first()
    # Same answer for unknown user and wrong password.
    if user is None or not verify_password(password, user.password_hash):
        raise Unauthorized(f"bad credentials for {name!r}")
    logger.info("User %s logged in", user.user_id)
    return user
