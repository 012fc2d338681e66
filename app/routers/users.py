import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.auth import get_current_user, hash_password, verify_password
from app.db.session import get_db
from app.models.user import User
from app.schemas.review import ReviewRead
from app.schemas.user import LoginRequest, UserCreate, UserRead, UserUpdate
from app.services.review_service import list_reviews_for_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(func.lower(User.username) == username.lower()).first()


def _get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


@router.post("/register", response_model=UserRead, status_code=201)
def register(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user. Username and email are unique (case-insensitive)."""
    if _get_user_by_username(db, user.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if _get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already exists")

    data = user.model_dump(exclude={"password"})
    now = datetime.now(timezone.utc)
    db_user = User(**data, password_hash=hash_password(user.password), created_at=now, last_login=now)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Registration conflict for username={user.username!r}")
        raise HTTPException(status_code=400, detail="Username or email already exists")
    db.refresh(db_user)
    logger.info(f"Registered user id={db_user.id} username={db_user.username!r}")
    return db_user


@router.post("/login", response_model=UserRead)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Check username/password and stamp last_login.
    Simple credential check only; no session or token is issued.
    """
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    user = _get_user_by_username(db, credentials.username)
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login for username={credentials.username!r}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    user.last_login = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)
    return user


@router.get("/user", response_model=UserRead)
def get_me(current_user: User = Depends(get_current_user)):
    """Get the current user."""
    return current_user


@router.patch("/user", response_model=UserRead)
def update_me(
    changes: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Partially update the current user's profile. Only fields present in the body change."""
    data = changes.model_dump(exclude_unset=True)
    if data.get("email"):
        other = _get_user_by_email(db, data["email"])
        if other and other.id != current_user.id:
            raise HTTPException(status_code=400, detail="Email already exists")
    elif "email" in data:
        # email is required on the model
        raise HTTPException(status_code=400, detail="Email cannot be empty")

    for field, value in data.items():
        setattr(current_user, field, value)
    db.commit()
    db.refresh(current_user)
    logger.info(f"Updated profile for user id={current_user.id}: fields={list(data.keys())}")
    return current_user


@router.get("/user/reviews", response_model=list[ReviewRead])
def get_my_reviews(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Reviews written by the current user, newest first."""
    return list_reviews_for_user(db, current_user.id)
