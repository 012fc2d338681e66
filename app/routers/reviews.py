from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.schemas.review import ReviewCreate, ReviewRead
from app.services import review_service
from app.services.venue_service import get_venue

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewRead, status_code=201)
def create_review(review: ReviewCreate, db: Session = Depends(get_db)):
    """Submit a review. The venue's review count and average ratings are recomputed."""
    # Verify venue and user exist
    if not get_venue(db, review.venue_id):
        raise HTTPException(status_code=404, detail="Venue not found")
    user = db.query(User).filter(User.id == review.user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return review_service.create_review(db, review)


@router.get("/{review_id}", response_model=ReviewRead)
def get_review(review_id: int, db: Session = Depends(get_db)):
    """Get review by ID."""
    review = review_service.get_review(db, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.post("/{review_id}/helpful", response_model=ReviewRead)
def mark_review_helpful(review_id: int, db: Session = Depends(get_db)):
    """Add one helpful vote to a review."""
    review = review_service.get_review(db, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review_service.add_helpful_votes(db, review, 1)
