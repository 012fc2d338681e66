"""
Reviews and venue rating aggregation.

Every new review recomputes the venue's review_count and its six average
ratings from all of the venue's reviews. A category rating left out of a
review counts as 0 in that category's average.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.review import Review
from app.models.venue import Venue, RATING_FIELDS
from app.schemas.review import ReviewCreate

logger = logging.getLogger(__name__)


def get_review(db: Session, review_id: int) -> Optional[Review]:
    return db.query(Review).filter(Review.id == review_id).first()


def list_reviews_for_venue(db: Session, venue_id: int) -> list[Review]:
    """Newest first."""
    return (
        db.query(Review)
        .filter(Review.venue_id == venue_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )


def list_reviews_for_user(db: Session, user_id: int) -> list[Review]:
    """Newest first."""
    return (
        db.query(Review)
        .filter(Review.user_id == user_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )


def average_ratings(reviews: list[Review]) -> dict[str, Optional[float]]:
    """
    Average each rating field across reviews.

    Missing values count as 0 and the divisor is always len(reviews), so a
    category most reviewers skip averages low. With no reviews every average
    is None.
    """
    if not reviews:
        return {field: None for field in RATING_FIELDS}
    count = len(reviews)
    return {
        field: sum((getattr(r, field) or 0) for r in reviews) / count
        for field in RATING_FIELDS
    }


def recompute_venue_ratings(db: Session, venue: Venue) -> Venue:
    """Refresh review_count and average ratings from the venue's stored reviews."""
    reviews = db.query(Review).filter(Review.venue_id == venue.id).all()
    venue.review_count = len(reviews)
    for field, value in average_ratings(reviews).items():
        setattr(venue, field, value)
    db.commit()
    db.refresh(venue)
    logger.info(
        f"Venue id={venue.id} ratings updated: review_count={venue.review_count}, "
        f"overall_rating={venue.overall_rating}"
    )
    return venue


def create_review(db: Session, review: ReviewCreate) -> Review:
    """Store a review, then update the reviewed venue's averages."""
    db_review = Review(**review.model_dump(), helpful_votes=0)
    db.add(db_review)
    db.commit()
    db.refresh(db_review)

    venue = db.query(Venue).filter(Venue.id == db_review.venue_id).first()
    if venue:
        recompute_venue_ratings(db, venue)
    else:
        logger.warning(f"Review id={db_review.id} references missing venue id={db_review.venue_id}")
    return db_review


def add_helpful_votes(db: Session, review: Review, increment: int = 1) -> Review:
    review.helpful_votes = (review.helpful_votes or 0) + increment
    db.commit()
    db.refresh(review)
    return review
