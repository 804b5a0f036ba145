"""
CRUD operations for users: registration and password authentication.
"""

import logging
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


def _to_dict(user: User) -> Dict[str, Any]:
    return {
        "username": user.username,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "email": user.email,
        "isAdmin": user.is_admin,
    }


def register(
    db: Session,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False,
) -> Dict[str, Any]:
    """
    Create a user with a bcrypt-hashed password.

    Returns:
        {username, firstName, lastName, email, isAdmin} (never the hash)

    Raises:
        BadRequestError: If the username is taken
    """
    if db.get(User, username) is not None:
        raise BadRequestError(f"Duplicate username: {username}")

    user = User(
        username=username,
        password=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        email=email,
        is_admin=is_admin,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration of the same username
        db.rollback()
        raise BadRequestError(f"Duplicate username: {username}") from e
    db.refresh(user)

    logger.info(f"Registered user {username}")
    return _to_dict(user)


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user does not exist or the password is wrong
    """
    user = db.get(User, username)
    if user is None or not verify_password(password, user.password):
        logger.warning(f"Failed login for {username}")
        raise UnauthorizedError("Invalid username/password")

    return _to_dict(user)
