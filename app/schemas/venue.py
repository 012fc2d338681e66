from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Any, Optional, Dict, List


class VenueBase(BaseModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    address: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    photos: Optional[List[str]] = None
    hours: Optional[Dict[str, str]] = None
    changing_facilities: bool = False
    high_chairs: bool = False
    pram_access: bool = False
    quiet_space: bool = False
    breastfeeding_area: bool = False
    bottle_warming: bool = False
    overall_rating: Optional[float] = None
    changing_facilities_rating: Optional[float] = None
    high_chairs_rating: Optional[float] = None
    pram_access_rating: Optional[float] = None
    staff_friendliness_rating: Optional[float] = None
    noise_level_rating: Optional[float] = None
    verified: bool = False


class VenueCreate(VenueBase):
    pass


class VenueUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    photos: Optional[List[str]] = None
    hours: Optional[Dict[str, str]] = None
    changing_facilities: Optional[bool] = None
    high_chairs: Optional[bool] = None
    pram_access: Optional[bool] = None
    quiet_space: Optional[bool] = None
    breastfeeding_area: Optional[bool] = None
    bottle_warming: Optional[bool] = None
    verified: Optional[bool] = None

    @field_validator(
        "name",
        "type",
        "address",
        "latitude",
        "longitude",
        "changing_facilities",
        "high_chairs",
        "pram_access",
        "quiet_space",
        "breastfeeding_area",
        "bottle_warming",
        "verified",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """These columns are NOT NULL: omit the field to leave it unchanged, never send null."""
        if value is None:
            raise ValueError("may be omitted but cannot be null")
        return value


class VenueRead(VenueBase):
    id: int
    review_count: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NearbyVenueRead(VenueRead):
    """Venue plus its approximate distance from the search point."""
    distance_km: float
