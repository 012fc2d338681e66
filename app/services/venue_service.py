"""
Venue queries: listing, type and feature filters, search and the nearby filter.

Listings are ordered by overall_rating descending, with unrated venues treated
as 0, then by id so ties keep insertion order.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from app.core.geo import approx_distance_km
from app.models.venue import Venue, FEATURE_FIELDS
from app.schemas.venue import VenueCreate, VenueUpdate

logger = logging.getLogger(__name__)


class UnknownFeatureError(ValueError):
    """Raised when a feature filter names something that is not a venue feature."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"Unknown feature(s): {', '.join(names)}")


def _escape_like(term: str) -> str:
    """Make % and _ in user input match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _by_rating(query: Query) -> Query:
    return query.order_by(func.coalesce(Venue.overall_rating, 0).desc(), Venue.id)


def _rating_key(venue: Venue) -> tuple[float, int]:
    return (-(venue.overall_rating or 0), venue.id)


def _apply_filters(
    query: Query,
    search: Optional[str] = None,
    features: Optional[Iterable[str]] = None,
    min_rating: Optional[float] = None,
) -> Query:
    """Narrow a venue query by search term, required features and minimum rating."""
    if search:
        pattern = f"%{_escape_like(search.strip())}%"
        query = query.filter(
            or_(
                Venue.name.ilike(pattern, escape="\\"),
                Venue.description.ilike(pattern, escape="\\"),
            )
        )
    if features:
        features = list(features)
        unknown = [f for f in features if f not in FEATURE_FIELDS]
        if unknown:
            raise UnknownFeatureError(unknown)
        for feature in features:
            query = query.filter(getattr(Venue, feature).is_(True))
    if min_rating is not None:
        query = query.filter(func.coalesce(Venue.overall_rating, 0) >= min_rating)
    return query


def get_venue(db: Session, venue_id: int) -> Optional[Venue]:
    return db.query(Venue).filter(Venue.id == venue_id).first()


def list_venues(
    db: Session,
    limit: int = 20,
    offset: int = 0,
    search: Optional[str] = None,
    features: Optional[Iterable[str]] = None,
    min_rating: Optional[float] = None,
) -> list[Venue]:
    """Top-rated venues, paged."""
    query = _apply_filters(db.query(Venue), search, features, min_rating)
    return _by_rating(query).offset(offset).limit(limit).all()


def list_venues_by_type(
    db: Session,
    venue_type: str,
    search: Optional[str] = None,
    features: Optional[Iterable[str]] = None,
    min_rating: Optional[float] = None,
) -> list[Venue]:
    """All venues of exactly this type (case-sensitive), top-rated first. Not paged."""
    query = db.query(Venue).filter(Venue.type == venue_type)
    query = _apply_filters(query, search, features, min_rating)
    return _by_rating(query).all()


def find_venues_near(
    db: Session,
    latitude: float,
    longitude: float,
    radius_km: float,
) -> list[tuple[Venue, float]]:
    """
    Venues within radius_km of a point, top-rated first, each with its distance.

    Distance is the flat approximation from app.core.geo, computed in Python so
    it behaves the same on every database backend.
    """
    matching: list[tuple[Venue, float]] = []
    for venue in db.query(Venue).all():
        distance = approx_distance_km(latitude, longitude, venue.latitude, venue.longitude)
        if distance <= radius_km:
            matching.append((venue, distance))
    matching.sort(key=lambda pair: _rating_key(pair[0]))
    logger.debug(
        f"Nearby search lat={latitude} lng={longitude} radius_km={radius_km}: {len(matching)} venue(s)"
    )
    return matching


def create_venue(db: Session, venue: VenueCreate) -> Venue:
    """Create a venue; review_count always starts at 0."""
    db_venue = Venue(**venue.model_dump(), review_count=0)
    db.add(db_venue)
    db.commit()
    db.refresh(db_venue)
    logger.info(f"Created venue id={db_venue.id} name={db_venue.name!r}")
    return db_venue


def update_venue(db: Session, venue: Venue, changes: VenueUpdate) -> Venue:
    """Apply only the fields that were sent. Rolls back and re-raises on a constraint failure."""
    venue_id = venue.id
    for field, value in changes.model_dump(exclude_unset=True).items():
        setattr(venue, field, value)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Update of venue id={venue_id} violated a constraint")
        raise
    db.refresh(venue)
    return venue
