from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON

from app.db.base import Base, utcnow


class Offer(Base):
    __tablename__ = "offers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    provider = Column(String, nullable=False)
    type = Column(String, nullable=False, index=True)  # class, activity, product, meal, etc.
    target_ages = Column(JSON, nullable=True)
    location = Column(String, nullable=True)
    valid_from = Column(DateTime(timezone=True), nullable=True)
    valid_to = Column(DateTime(timezone=True), nullable=True)
    terms = Column(Text, nullable=True)
    link = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
