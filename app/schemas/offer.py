from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List


class OfferBase(BaseModel):
    title: str = Field(min_length=1)
    description: str
    provider: str
    type: str  # class, activity, product, meal, etc.
    target_ages: Optional[List[str]] = None
    location: Optional[str] = None
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    terms: Optional[str] = None
    link: Optional[str] = None
    image_url: Optional[str] = None
    featured: bool = False


class OfferCreate(OfferBase):
    pass


class OfferRead(OfferBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
