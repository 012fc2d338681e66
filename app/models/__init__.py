from app.models.user import User
from app.models.venue import Venue
from app.models.review import Review
from app.models.offer import Offer
from app.models.favorite import Favorite

__all__ = [
    "User",
    "Venue",
    "Review",
    "Offer",
    "Favorite",
]
