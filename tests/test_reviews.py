"""Tests for /api/reviews and venue rating recomputation."""

import pytest
from fastapi import status

from app.core.config import settings

COZY = "Cozy Corner Café"


def _review(venue_id: int, **overrides) -> dict:
    data = {
        "venue_id": venue_id,
        "user_id": settings.mock_user_id,
        "overall_rating": 4,
        "content": "Lovely changing room and friendly staff.",
    }
    data.update(overrides)
    return data


def test_create_review(seeded_client, venue_ids):
    response = seeded_client.post(
        "/api/reviews",
        json=_review(venue_ids[COZY], child_age="9 months", photos=["https://example.com/p.jpg"]),
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["venue_id"] == venue_ids[COZY]
    assert data["helpful_votes"] == 0
    assert data["child_age"] == "9 months"
    assert "id" in data and "created_at" in data


def test_first_review_replaces_seeded_averages(seeded_client, venue_ids):
    venue_id = venue_ids[COZY]
    seeded_client.post(
        "/api/reviews",
        json=_review(venue_id, overall_rating=4, high_chairs_rating=5),
    )

    venue = seeded_client.get(f"/api/venues/{venue_id}").json()
    assert venue["review_count"] == 1
    assert venue["overall_rating"] == pytest.approx(4.0)
    assert venue["high_chairs_rating"] == pytest.approx(5.0)
    # Category left out of the only review counts as 0
    assert venue["changing_facilities_rating"] == pytest.approx(0.0)


def test_averages_are_recomputed_on_each_review(seeded_client, venue_ids):
    venue_id = venue_ids[COZY]
    seeded_client.post("/api/reviews", json=_review(venue_id, overall_rating=5, noise_level_rating=4))
    seeded_client.post("/api/reviews", json=_review(venue_id, overall_rating=2, noise_level_rating=2))
    seeded_client.post("/api/reviews", json=_review(venue_id, overall_rating=2))

    venue = seeded_client.get(f"/api/venues/{venue_id}").json()
    assert venue["review_count"] == 3
    assert venue["overall_rating"] == pytest.approx(3.0)
    assert venue["noise_level_rating"] == pytest.approx(2.0)


def test_review_changes_listing_order(seeded_client, venue_ids):
    """A poor first review drops a venue below the others."""
    seeded_client.post("/api/reviews", json=_review(venue_ids[COZY], overall_rating=1))
    names = [v["name"] for v in seeded_client.get("/api/venues").json()]
    assert names[-1] == COZY


def test_create_review_unknown_venue(seeded_client):
    response = seeded_client.post("/api/reviews", json=_review(9999))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Venue not found"


def test_create_review_unknown_user(seeded_client, venue_ids):
    response = seeded_client.post("/api/reviews", json=_review(venue_ids[COZY], user_id=9999))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "User not found"


@pytest.mark.parametrize(
    "overrides",
    [
        {"overall_rating": 0},
        {"overall_rating": 6},
        {"pram_access_rating": 7},
        {"content": ""},
    ],
)
def test_create_review_validation(seeded_client, venue_ids, overrides):
    response = seeded_client.post("/api/reviews", json=_review(venue_ids[COZY], **overrides))
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_create_review_requires_overall_rating(seeded_client, venue_ids):
    payload = _review(venue_ids[COZY])
    del payload["overall_rating"]
    response = seeded_client.post("/api/reviews", json=payload)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_venue_reviews_newest_first(seeded_client, venue_ids):
    venue_id = venue_ids[COZY]
    first = seeded_client.post("/api/reviews", json=_review(venue_id, content="first")).json()
    second = seeded_client.post("/api/reviews", json=_review(venue_id, content="second")).json()

    response = seeded_client.get(f"/api/venues/{venue_id}/reviews")
    assert response.status_code == status.HTTP_200_OK
    assert [r["id"] for r in response.json()] == [second["id"], first["id"]]


def test_get_review(seeded_client, venue_ids):
    created = seeded_client.post("/api/reviews", json=_review(venue_ids[COZY])).json()
    response = seeded_client.get(f"/api/reviews/{created['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["content"] == created["content"]


def test_get_review_not_found(client):
    response = client.get("/api/reviews/9999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Review not found"


def test_mark_review_helpful(seeded_client, venue_ids):
    created = seeded_client.post("/api/reviews", json=_review(venue_ids[COZY])).json()

    seeded_client.post(f"/api/reviews/{created['id']}/helpful")
    response = seeded_client.post(f"/api/reviews/{created['id']}/helpful")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["helpful_votes"] == 2


def test_mark_review_helpful_not_found(client):
    response = client.post("/api/reviews/9999/helpful")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_current_user_reviews(seeded_client, venue_ids):
    seeded_client.post("/api/reviews", json=_review(venue_ids[COZY], content="one"))
    seeded_client.post("/api/reviews", json=_review(venue_ids["Little Paws Playcentre"], content="two"))

    response = seeded_client.get("/api/user/reviews")
    assert response.status_code == status.HTTP_200_OK
    assert [r["content"] for r in response.json()] == ["two", "one"]
