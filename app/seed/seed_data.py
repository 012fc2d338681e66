import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.auth import hash_password
from app.core.config import settings
from app.models.user import User
from app.models.venue import Venue
from app.models.review import Review
from app.models.offer import Offer
from app.models.favorite import Favorite

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo_parent"
DEMO_PASSWORD = "toddlespot"

SEED_VENUES = [
    {
        "name": "Cozy Corner Café",
        "type": "Café",
        "address": "123 Main Street, Islington, London",
        "latitude": 51.5362,
        "longitude": -0.1033,
        "phone": "020-1234-5678",
        "website": "https://example.com/cozycorner",
        "description": "A family-friendly café with a dedicated quiet space for parents and babies.",
        "photos": [
            "https://images.unsplash.com/photo-1544148103-0773bf10d330?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ],
        "hours": {"monday-friday": "8:00-18:00", "saturday-sunday": "9:00-17:00"},
        "changing_facilities": True,
        "high_chairs": True,
        "pram_access": True,
        "quiet_space": True,
        "breastfeeding_area": True,
        "bottle_warming": True,
        "overall_rating": 4.8,
        "changing_facilities_rating": 4.0,
        "high_chairs_rating": 5.0,
        "pram_access_rating": 4.0,
        "staff_friendliness_rating": 5.0,
        "noise_level_rating": 4.0,
        "verified": True,
    },
    {
        "name": "Little Paws Playcentre",
        "type": "Play Area",
        "address": "45 Child Street, Camden, London",
        "latitude": 51.5322,
        "longitude": -0.1230,
        "phone": "020-8765-4321",
        "website": "https://example.com/littlepaws",
        "description": "Indoor play area specially designed for babies and toddlers.",
        "photos": [
            "https://images.unsplash.com/photo-1574936611677-f231616a9089?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ],
        "hours": {"monday-sunday": "10:00-18:00"},
        "changing_facilities": True,
        "high_chairs": True,
        "pram_access": True,
        "quiet_space": False,
        "breastfeeding_area": True,
        "bottle_warming": True,
        "overall_rating": 4.5,
        "changing_facilities_rating": 4.5,
        "high_chairs_rating": 4.0,
        "pram_access_rating": 4.5,
        "staff_friendliness_rating": 4.5,
        "noise_level_rating": 3.5,
        "verified": True,
    },
    {
        "name": "Green Garden Restaurant",
        "type": "Restaurant",
        "address": "789 Park Road, Hackney, London",
        "latitude": 51.5344,
        "longitude": -0.0500,
        "phone": "020-2468-1357",
        "website": "https://example.com/greengarden",
        "description": "Family restaurant with a garden area, perfect for families with babies.",
        "photos": [
            "https://images.unsplash.com/photo-1564758866811-4890819ed2d3?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ],
        "hours": {"monday-sunday": "11:00-22:00"},
        "changing_facilities": False,
        "high_chairs": True,
        "pram_access": True,
        "quiet_space": False,
        "breastfeeding_area": False,
        "bottle_warming": False,
        "overall_rating": 4.2,
        "changing_facilities_rating": 2.0,
        "high_chairs_rating": 4.5,
        "pram_access_rating": 4.0,
        "staff_friendliness_rating": 4.0,
        "noise_level_rating": 3.0,
        "verified": True,
    },
]


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


SEED_OFFERS = [
    {
        "title": "Baby Sensory Classes - First Session Free",
        "description": "Perfect for 0-12 month olds. Develop your baby's senses through play.",
        "provider": "Baby Sensory London",
        "type": "class",
        "target_ages": ["0-12 months"],
        "location": "Multiple locations across London",
        "valid_from": _utc(2023, 7, 1),
        "valid_to": _utc(2023, 9, 30),
        "terms": "One free session per baby. New customers only.",
        "link": "https://example.com/babysensory",
        "image_url": "https://images.unsplash.com/photo-1596464598937-1a481d21d61b?ixlib=rb-1.2.1&auto=format&fit=crop&w=300&q=80",
        "featured": True,
    },
    {
        "title": "Parent & Baby Yoga - 20% Off",
        "description": "Bond with your baby through gentle yoga poses designed for both of you.",
        "provider": "Zen Baby Yoga",
        "type": "class",
        "target_ages": ["3-12 months"],
        "location": "Islington Community Center",
        "valid_from": _utc(2023, 7, 15),
        "valid_to": _utc(2023, 10, 15),
        "terms": "Must book in advance. Subject to availability.",
        "link": "https://example.com/babyyoga",
        "image_url": "https://images.unsplash.com/photo-1571172964276-91faaa704e1f?ixlib=rb-1.2.1&auto=format&fit=crop&w=300&q=80",
        "featured": False,
    },
    {
        "title": "Kids Eat Free at Family Bistro",
        "description": "One free kids meal with every adult main course purchased.",
        "provider": "Family Bistro",
        "type": "meal",
        "target_ages": ["0-5 years"],
        "location": "5 locations across London",
        "valid_from": _utc(2023, 6, 1),
        "valid_to": _utc(2023, 12, 31),
        "terms": "Valid weekdays 11am-5pm. One free kids meal per adult main course.",
        "link": "https://example.com/familybistro",
        "image_url": "https://images.unsplash.com/photo-1558599249-46c436deb339?ixlib=rb-1.2.1&auto=format&fit=crop&w=300&q=80",
        "featured": False,
    },
    {
        "title": "Baby Swimming Lessons - Trial Class",
        "description": "Introduce your baby to water in a fun, safe environment.",
        "provider": "Splash Babies",
        "type": "activity",
        "target_ages": ["3-18 months"],
        "location": "Camden Leisure Centre",
        "valid_from": _utc(2023, 8, 1),
        "valid_to": _utc(2023, 11, 30),
        "terms": "One trial class per baby. Advance booking required.",
        "link": "https://example.com/splashbabies",
        "image_url": "https://images.unsplash.com/photo-1566454419290-57a0589c9b17?ixlib=rb-1.2.1&auto=format&fit=crop&w=300&q=80",
        "featured": False,
    },
]


def seed_db(db: Session) -> None:
    """Seed the database with sample data, replacing whatever is there."""

    # Clear existing data
    db.query(Favorite).delete()
    db.query(Review).delete()
    db.query(Offer).delete()
    db.query(Venue).delete()
    db.query(User).delete()
    db.commit()

    # Demo user; takes the mock user id so /user and /favorites resolve to it
    demo_user = User(
        id=settings.mock_user_id,
        username=DEMO_USERNAME,
        password_hash=hash_password(DEMO_PASSWORD),
        email="demo@toddlespot.example",
        display_name="Demo Parent",
        profile_type="parent",
        child_ages=["9 months"],
        location="London",
    )
    db.add(demo_user)

    # Venues start with seeded averages and no reviews
    for data in SEED_VENUES:
        db.add(Venue(**data, review_count=0))

    for data in SEED_OFFERS:
        db.add(Offer(**data))

    db.commit()
    _sync_user_id_sequence(db)

    logger.info(
        f"Database seeded: 1 user, {len(SEED_VENUES)} venues, {len(SEED_OFFERS)} offers"
    )


def _sync_user_id_sequence(db: Session) -> None:
    """
    Move the users id sequence past the explicitly inserted demo user.

    SQLite picks max(id) + 1 on its own; PostgreSQL sequences do not see
    explicit ids, so the next registration would reuse the mock user id.
    """
    if db.get_bind().dialect.name != "postgresql":
        return
    db.execute(
        text(
            "SELECT setval(pg_get_serial_sequence('users', 'id'), "
            "(SELECT MAX(id) FROM users))"
        )
    )
    db.commit()


def seed_if_empty(db: Session) -> bool:
    """
    Seed only into an empty database (no users, venues or offers).
    Returns True if it seeded. seed_db wipes existing rows, so any data at all
    means the database belongs to someone and is left alone.
    """
    for model in (User, Venue, Offer):
        if db.query(model).first() is not None:
            logger.info(f"Database already has {model.__tablename__}; skipping seed")
            return False
    seed_db(db)
    return True
