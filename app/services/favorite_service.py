"""User favorites: a unique (user, venue) association."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.favorite import Favorite
from app.models.venue import Venue

logger = logging.getLogger(__name__)


def get_favorite(db: Session, user_id: int, venue_id: int) -> Optional[Favorite]:
    return (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id, Favorite.venue_id == venue_id)
        .first()
    )


def list_favorite_venues(db: Session, user_id: int) -> list[Venue]:
    """Venues the user has favorited, in the order they were added."""
    return (
        db.query(Venue)
        .join(Favorite, Favorite.venue_id == Venue.id)
        .filter(Favorite.user_id == user_id)
        .order_by(Favorite.id)
        .all()
    )


def add_favorite(db: Session, user_id: int, venue_id: int) -> Favorite:
    """Add a favorite. Idempotent: an existing favorite is returned unchanged."""
    existing = get_favorite(db, user_id, venue_id)
    if existing:
        return existing

    favorite = Favorite(user_id=user_id, venue_id=venue_id)
    db.add(favorite)
    try:
        db.commit()
    except IntegrityError:
        # Inserted concurrently by another request
        db.rollback()
        existing = get_favorite(db, user_id, venue_id)
        if existing:
            return existing
        raise
    db.refresh(favorite)
    logger.info(f"User id={user_id} favorited venue id={venue_id}")
    return favorite


def remove_favorite(db: Session, user_id: int, venue_id: int) -> bool:
    """Returns False if there was nothing to remove."""
    favorite = get_favorite(db, user_id, venue_id)
    if not favorite:
        return False
    db.delete(favorite)
    db.commit()
    logger.info(f"User id={user_id} unfavorited venue id={venue_id}")
    return True
