from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.auth import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.favorite import FavoriteCreate, FavoriteRead
from app.schemas.venue import VenueRead
from app.services import favorite_service
from app.services.venue_service import get_venue

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[VenueRead])
def list_favorites(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Venues favorited by the current user."""
    return favorite_service.list_favorite_venues(db, current_user.id)


@router.post("", response_model=FavoriteRead, status_code=201)
def add_favorite(favorite: FavoriteCreate, db: Session = Depends(get_db)):
    """Favorite a venue. Adding the same venue twice returns the existing favorite."""
    # Verify user and venue exist
    user = db.query(User).filter(User.id == favorite.user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if not get_venue(db, favorite.venue_id):
        raise HTTPException(status_code=404, detail="Venue not found")

    return favorite_service.add_favorite(db, favorite.user_id, favorite.venue_id)


@router.delete("/{venue_id}")
def remove_favorite(
    venue_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Remove a venue from the current user's favorites."""
    if not favorite_service.remove_favorite(db, current_user.id, venue_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return {"message": "Favorite removed successfully"}
