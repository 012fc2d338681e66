from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List


class ReviewBase(BaseModel):
    venue_id: int
    user_id: int
    visit_date: Optional[datetime] = None
    child_age: Optional[str] = None
    overall_rating: int = Field(ge=1, le=5)
    changing_facilities_rating: Optional[int] = Field(default=None, ge=1, le=5)
    high_chairs_rating: Optional[int] = Field(default=None, ge=1, le=5)
    pram_access_rating: Optional[int] = Field(default=None, ge=1, le=5)
    staff_friendliness_rating: Optional[int] = Field(default=None, ge=1, le=5)
    noise_level_rating: Optional[int] = Field(default=None, ge=1, le=5)
    content: str = Field(min_length=1)
    photos: Optional[List[str]] = None


class ReviewCreate(ReviewBase):
    pass


class ReviewRead(ReviewBase):
    id: int
    helpful_votes: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
