from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.offer import OfferCreate, OfferRead
from app.services import offer_service

router = APIRouter(prefix="/offers", tags=["offers"])


@router.get("", response_model=list[OfferRead])
def list_offers(
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    offer_type: Optional[str] = Query(None, alias="type", description="Offer type, e.g. class or meal"),
    db: Session = Depends(get_db),
):
    """List offers, featured first. With `type` all matching offers are returned (no paging)."""
    if offer_type:
        return offer_service.list_offers_by_type(db, offer_type)
    return offer_service.list_offers(db, limit=limit, offset=offset)


@router.get("/featured", response_model=list[OfferRead])
def list_featured_offers(db: Session = Depends(get_db)):
    """Featured offers, newest first."""
    return offer_service.list_featured_offers(db)


@router.post("", response_model=OfferRead, status_code=201)
def create_offer(offer: OfferCreate, db: Session = Depends(get_db)):
    """Create a new offer."""
    return offer_service.create_offer(db, offer)


@router.get("/{offer_id}", response_model=OfferRead)
def get_offer(offer_id: int, db: Session = Depends(get_db)):
    """Get offer by ID."""
    offer = offer_service.get_offer(db, offer_id)
    if not offer:
        raise HTTPException(status_code=404, detail="Offer not found")
    return offer
