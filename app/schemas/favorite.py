from pydantic import BaseModel, ConfigDict
from datetime import datetime


class FavoriteCreate(BaseModel):
    user_id: int
    venue_id: int


class FavoriteRead(FavoriteCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
