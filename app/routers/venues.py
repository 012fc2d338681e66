import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.review import ReviewRead
from app.schemas.venue import NearbyVenueRead, VenueCreate, VenueRead, VenueUpdate
from app.services import venue_service
from app.services.review_service import list_reviews_for_venue

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/venues", tags=["venues"])


@router.get("", response_model=list[VenueRead])
def list_venues(
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    venue_type: Optional[str] = Query(None, alias="type", description="Exact venue type, e.g. Café"),
    q: Optional[str] = Query(None, description="Search name and description"),
    feature: Optional[list[str]] = Query(None, description="Required baby-friendly feature(s)"),
    min_rating: Optional[float] = Query(None, ge=0, le=5),
    db: Session = Depends(get_db),
):
    """
    List venues, top-rated first.
    With `type` every venue of that type is returned and limit/offset are ignored;
    otherwise the list is paged.
    """
    try:
        if venue_type:
            return venue_service.list_venues_by_type(
                db, venue_type, search=q, features=feature, min_rating=min_rating
            )
        return venue_service.list_venues(
            db, limit=limit, offset=offset, search=q, features=feature, min_rating=min_rating
        )
    except venue_service.UnknownFeatureError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/nearby", response_model=list[NearbyVenueRead])
def list_nearby_venues(
    latitude: Optional[float] = Query(None, description="Latitude"),
    longitude: Optional[float] = Query(None, description="Longitude"),
    radius: float = Query(settings.nearby_default_radius_km, gt=0, description="Radius in km"),
    db: Session = Depends(get_db),
):
    """Venues within `radius` km of a point (flat approximation), top-rated first."""
    if (
        latitude is None
        or longitude is None
        or math.isnan(latitude)
        or math.isnan(longitude)
    ):
        raise HTTPException(status_code=400, detail="Valid latitude and longitude are required")

    results = venue_service.find_venues_near(db, latitude, longitude, radius)
    return [
        NearbyVenueRead(**VenueRead.model_validate(venue).model_dump(), distance_km=distance)
        for venue, distance in results
    ]


@router.post("", response_model=VenueRead, status_code=201)
def create_venue(venue: VenueCreate, db: Session = Depends(get_db)):
    """Create a new venue."""
    return venue_service.create_venue(db, venue)


@router.get("/{venue_id}", response_model=VenueRead)
def get_venue(venue_id: int, db: Session = Depends(get_db)):
    """Get venue by ID."""
    venue = venue_service.get_venue(db, venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return venue


@router.patch("/{venue_id}", response_model=VenueRead)
def update_venue(venue_id: int, changes: VenueUpdate, db: Session = Depends(get_db)):
    """Partially update a venue. Ratings and review_count are derived from reviews and not editable."""
    venue = venue_service.get_venue(db, venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    try:
        return venue_service.update_venue(db, venue, changes)
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Venue update conflicts with existing data")


@router.get("/{venue_id}/reviews", response_model=list[ReviewRead])
def get_venue_reviews(venue_id: int, db: Session = Depends(get_db)):
    """List reviews for a venue, newest first."""
    # Verify venue exists
    venue = venue_service.get_venue(db, venue_id)
    if not venue:
        raise HTTPException(status_code=404, detail="Venue not found")
    return list_reviews_for_venue(db, venue_id)
