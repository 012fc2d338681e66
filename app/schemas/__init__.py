from app.schemas.user import UserCreate, UserRead, UserUpdate, LoginRequest
from app.schemas.venue import VenueCreate, VenueRead, VenueUpdate, NearbyVenueRead
from app.schemas.review import ReviewCreate, ReviewRead
from app.schemas.offer import OfferCreate, OfferRead
from app.schemas.favorite import FavoriteCreate, FavoriteRead

__all__ = [
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "LoginRequest",
    "VenueCreate",
    "VenueRead",
    "VenueUpdate",
    "NearbyVenueRead",
    "ReviewCreate",
    "ReviewRead",
    "OfferCreate",
    "OfferRead",
    "FavoriteCreate",
    "FavoriteRead",
]
