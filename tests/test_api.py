from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from api.main import app
from insights.config import PALM_CONFIG


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Destiny Scanner API"


def test_destiny(client):
    response = client.post("/api/destiny", json={"birth_date": "1990-05-07"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["number"] == 4
    assert body["data"]["is_master_number"] is False


def test_destiny_rejects_future_date(client):
    future = (date.today() + timedelta(days=10)).isoformat()
    response = client.post("/api/destiny", json={"birth_date": future})
    assert response.status_code == 400
    assert "future" in response.json()["detail"]


def test_destiny_rejects_impossible_date(client):
    response = client.post("/api/destiny", json={"birth_date": "1990-02-30"})
    assert response.status_code == 422


def test_numerology(client):
    response = client.post("/api/numerology", json={"birth_date": "1990-05-29"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["mulank"]["number"] == 11
    assert data["ruling_planet"]["name"]


@pytest.mark.parametrize("month, day, expected", [(4, 19, "Aries"), (4, 20, "Taurus"), (12, 31, "Capricorn")])
def test_zodiac(client, month, day, expected):
    response = client.get("/api/zodiac", params={"month": month, "day": day})
    assert response.status_code == 200
    assert response.json()["data"]["name"] == expected


def test_zodiac_rejects_impossible_date(client):
    response = client.get("/api/zodiac", params={"month": 4, "day": 31})
    assert response.status_code == 400


def test_zodiac_requires_parameters(client):
    assert client.get("/api/zodiac", params={"month": 4}).status_code == 422


def test_astrology(client):
    response = client.post("/api/astrology", json={
        "birth_date": "1990-05-07", "birth_time": "14:30", "birth_location": "Delhi"
    })
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["sun_sign"]["name"] == "Taurus"
    assert data["moon_sign"]["name"] == "Gemini Moon"
    assert data["ascendant_sign"]["name"] == "Scorpio Ascendant"


def test_reading(client):
    response = client.post("/api/reading", json={"birth_date": "1990-05-07", "name": "Asha"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["birth_data"]["name"] == "Asha"
    assert data["destiny"]["number"] == 4
    assert data["numerology"]["power_number"]["number"] == 11
    assert data["astrology"]["moon_sign"] is None


def test_reading_rejects_invalid_time(client):
    response = client.post("/api/reading", json={"birth_date": "1990-05-07", "birth_time": "25:00"})
    assert response.status_code == 400


def test_reading_report(client):
    response = client.post("/api/reading/report", json={"birth_date": "1990-05-07"})
    assert response.status_code == 200
    body = response.json()
    assert "DESTINY SCANNER REPORT" in body["report"]
    assert len(body["insights"]) == 3
    assert body["enhanced"]["source"] == "local"


def test_reading_pdf(client):
    response = client.post("/api/reading/pdf", json={"birth_date": "1990-05-07"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")


def test_reading_visual(client):
    response = client.post("/api/reading/visual", json={"birth_date": "1990-05-07"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_reading_visual_rejects_future_date(client):
    future = (date.today() + timedelta(days=1)).isoformat()
    assert client.post("/api/reading/visual", json={"birth_date": future}).status_code == 400


def test_enhanced(client):
    response = client.post("/api/enhanced", json={"birth_date": "2009-02-09"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["destiny_number"] == 22
    assert data["compatibility"] == [4, 11, 22, 33]


def test_palm_upload(client, palm_image):
    response = client.post(
        "/api/palm",
        files={"image": ("palm.png", palm_image, "image/png")},
        data={"advanced": "true"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["confidence"] == 0.92
    assert body["data"]["palm_features"] is not None


def test_palm_upload_undecodable_image(client):
    response = client.post("/api/palm", files={"image": ("palm.png", b"not an image", "image/png")})
    assert response.status_code == 200
    assert response.json()["success"] is False


def test_palm_upload_empty(client):
    response = client.post("/api/palm", files={"image": ("palm.png", b"", "image/png")})
    assert response.status_code == 400


def test_palm_upload_oversized_image(client, monkeypatch, palm_image):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    response = client.post("/api/palm", files={"image": ("palm.png", palm_image, "image/png")})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["data"]["error"] == "Palm image is too large"


def test_palm_upload_over_pixel_limit(client, monkeypatch, palm_image):
    monkeypatch.setitem(PALM_CONFIG, "max_pixels", 1000)

    response = client.post("/api/palm", files={"image": ("palm.png", palm_image, "image/png")})

    assert response.status_code == 200
    assert response.json()["success"] is False
