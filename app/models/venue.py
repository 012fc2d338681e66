from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime, JSON
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow

# Baby-friendly feature flags stored on a venue
FEATURE_FIELDS = (
    "changing_facilities",
    "high_chairs",
    "pram_access",
    "quiet_space",
    "breastfeeding_area",
    "bottle_warming",
)

# Averaged from reviews; same names exist on Review as integer scores
RATING_FIELDS = (
    "overall_rating",
    "changing_facilities_rating",
    "high_chairs_rating",
    "pram_access_rating",
    "staff_friendliness_rating",
    "noise_level_rating",
)


class Venue(Base):
    __tablename__ = "venues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False, index=True)  # Café, Restaurant, Play Area, etc.
    address = Column(Text, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    phone = Column(String, nullable=True)
    website = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    photos = Column(JSON, nullable=True)
    hours = Column(JSON, nullable=True)  # {"monday-friday": "8:00-18:00", ...}

    # Baby-friendly features
    changing_facilities = Column(Boolean, default=False, nullable=False)
    high_chairs = Column(Boolean, default=False, nullable=False)
    pram_access = Column(Boolean, default=False, nullable=False)
    quiet_space = Column(Boolean, default=False, nullable=False)
    breastfeeding_area = Column(Boolean, default=False, nullable=False)
    bottle_warming = Column(Boolean, default=False, nullable=False)

    # Average ratings
    overall_rating = Column(Float, nullable=True)
    changing_facilities_rating = Column(Float, nullable=True)
    high_chairs_rating = Column(Float, nullable=True)
    pram_access_rating = Column(Float, nullable=True)
    staff_friendliness_rating = Column(Float, nullable=True)
    noise_level_rating = Column(Float, nullable=True)
    review_count = Column(Integer, default=0, nullable=False)

    verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    reviews = relationship("Review", back_populates="venue", cascade="all, delete-orphan")
    favorites = relationship("Favorite", back_populates="venue", cascade="all, delete-orphan")
