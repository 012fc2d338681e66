"""
Current-user resolution and password hashing.

There is no session or token handling: the "current user" is always the user
whose id is settings.mock_user_id. Routes depend on get_current_user so a real
auth layer can replace it without touching handlers.
"""

import logging

import bcrypt
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.models.user import User

logger = logging.getLogger(__name__)


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode(), hashed.encode())
    except ValueError:
        # Malformed stored hash
        logger.warning("Stored password hash could not be parsed")
        return False


def get_current_user(db: Session = Depends(get_db)) -> User:
    """
    Resolve the current user (mock: fixed id from settings).

    Raises:
        HTTPException 401: If the mock user does not exist yet (e.g. nobody registered).
    """
    user = db.query(User).filter(User.id == settings.mock_user_id).first()
    if not user:
        logger.debug(f"Mock user id={settings.mock_user_id} not found")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return user
