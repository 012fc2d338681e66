"""Offer listings. Featured offers sort ahead of the rest; otherwise insertion order."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.offer import Offer
from app.schemas.offer import OfferCreate

logger = logging.getLogger(__name__)


def get_offer(db: Session, offer_id: int) -> Optional[Offer]:
    return db.query(Offer).filter(Offer.id == offer_id).first()


def list_offers(db: Session, limit: int = 20, offset: int = 0) -> list[Offer]:
    return (
        db.query(Offer)
        .order_by(Offer.featured.desc(), Offer.id)
        .offset(offset)
        .limit(limit)
        .all()
    )


def list_offers_by_type(db: Session, offer_type: str) -> list[Offer]:
    return (
        db.query(Offer)
        .filter(Offer.type == offer_type)
        .order_by(Offer.featured.desc(), Offer.id)
        .all()
    )


def list_featured_offers(db: Session) -> list[Offer]:
    """Featured offers, newest first."""
    return (
        db.query(Offer)
        .filter(Offer.featured.is_(True))
        .order_by(Offer.created_at.desc(), Offer.id.desc())
        .all()
    )


def create_offer(db: Session, offer: OfferCreate) -> Offer:
    db_offer = Offer(**offer.model_dump())
    db.add(db_offer)
    db.commit()
    db.refresh(db_offer)
    logger.info(f"Created offer id={db_offer.id} title={db_offer.title!r}")
    return db_offer
