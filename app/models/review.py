from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    venue_id = Column(Integer, ForeignKey("venues.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    visit_date = Column(DateTime(timezone=True), nullable=True)
    child_age = Column(String, nullable=True)
    overall_rating = Column(Integer, nullable=False)
    changing_facilities_rating = Column(Integer, nullable=True)
    high_chairs_rating = Column(Integer, nullable=True)
    pram_access_rating = Column(Integer, nullable=True)
    staff_friendliness_rating = Column(Integer, nullable=True)
    noise_level_rating = Column(Integer, nullable=True)
    content = Column(Text, nullable=False)
    photos = Column(JSON, nullable=True)
    helpful_votes = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    venue = relationship("Venue", back_populates="reviews")
    user = relationship("User", back_populates="reviews")
