"""Tests for /api/offers."""

from fastapi import status


def test_list_offers_featured_first(seeded_client):
    response = seeded_client.get("/api/offers")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 4
    assert data[0]["featured"] is True
    assert data[0]["title"] == "Baby Sensory Classes - First Session Free"
    assert all(not o["featured"] for o in data[1:])


def test_list_offers_paging(seeded_client):
    response = seeded_client.get("/api/offers", params={"limit": 2, "offset": 1})
    titles = [o["title"] for o in response.json()]
    assert titles == ["Parent & Baby Yoga - 20% Off", "Kids Eat Free at Family Bistro"]


def test_list_offers_by_type(seeded_client):
    response = seeded_client.get("/api/offers", params={"type": "class"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [o["provider"] for o in data] == ["Baby Sensory London", "Zen Baby Yoga"]


def test_list_offers_by_type_featured_first(seeded_client):
    seeded_client.post(
        "/api/offers",
        json={
            "title": "Messy Play Morning",
            "description": "Sensory messy play for crawlers.",
            "provider": "Messy Makers",
            "type": "activity",
            "featured": True,
        },
    )
    response = seeded_client.get("/api/offers", params={"type": "activity"})
    assert [o["title"] for o in response.json()] == [
        "Messy Play Morning",
        "Baby Swimming Lessons - Trial Class",
    ]


def test_featured_offers_newest_first(seeded_client):
    created = seeded_client.post(
        "/api/offers",
        json={
            "title": "Free Babyccino",
            "description": "A free babyccino with any coffee.",
            "provider": "Cozy Corner Café",
            "type": "meal",
            "featured": True,
        },
    ).json()

    response = seeded_client.get("/api/offers/featured")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [o["id"] for o in data][0] == created["id"]
    assert len(data) == 2
    assert all(o["featured"] for o in data)


def test_create_and_get_offer(client):
    response = client.post(
        "/api/offers",
        json={
            "title": "Buggy Fit - Two Weeks Free",
            "description": "Outdoor fitness with your pram.",
            "provider": "Buggy Fit",
            "type": "class",
            "target_ages": ["0-2 years"],
            "valid_from": "2026-01-01T00:00:00Z",
            "valid_to": "2026-03-31T00:00:00Z",
        },
    )
    assert response.status_code == status.HTTP_201_CREATED
    offer_id = response.json()["id"]
    assert response.json()["featured"] is False

    response = client.get(f"/api/offers/{offer_id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["target_ages"] == ["0-2 years"]


def test_get_offer_not_found(client):
    response = client.get("/api/offers/9999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Offer not found"
