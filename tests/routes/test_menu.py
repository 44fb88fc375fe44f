import pytest
from fastapi.testclient import TestClient

from menu_ocr.main import app
from menu_ocr.routes import menu as menu_routes


client = TestClient(app)

APPETIZER_TEXT = """APPETIZERS
Wings $12.99
Buffalo wings with ranch 🍗
Nachos $8.99
Loaded with cheese"""


def _parse(text: str, restaurant_name: str = "Test Restaurant", confidence: float = 0.95):
    return client.post(
        "/menu/parse",
        json={
            "ocr_result": {
                "text": text,
                "confidence": confidence,
                "bounding_boxes": [],
            },
            "restaurant_name": restaurant_name,
        },
    )


def test_health_endpoint():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_menu_returns_structured_menu():
    response = _parse(APPETIZER_TEXT)

    assert response.status_code == 200
    payload = response.json()
    assert payload["item_count"] == 2
    assert payload["section_count"] == 1
    assert payload["message"] == "Successfully parsed 2 menu items from 1 sections"

    menu = payload["parsed_menu"]
    assert menu["restaurant_name"] == "Test Restaurant"
    assert menu["source"] == "ocr"
    section = menu["sections"][0]
    assert section["name"] == "Appetizers"
    assert section["id"] == "section-1"
    assert section["items"][0]["name"] == "Wings"
    assert section["items"][0]["price"] == "$12.99"
    assert section["items"][0]["description"] == "Buffalo wings with ranch"
    assert section["items"][1]["is_available"] is True


def test_parse_menu_accepts_bounding_boxes():
    response = client.post(
        "/menu/parse",
        json={
            "ocr_result": {
                "text": "Wings $12.99",
                "confidence": 0.4,
                "bounding_boxes": [
                    {
                        "x": 0,
                        "y": 0,
                        "width": 120,
                        "height": 18,
                        "text": "Wings $12.99",
                        "confidence": 0.4,
                    }
                ],
            },
            "restaurant_name": "Test Restaurant",
        },
    )

    assert response.status_code == 200
    assert response.json()["parsed_menu"]["sections"][0]["name"] == "Other"


def test_parse_menu_rejects_text_without_items():
    response = _parse("THE RUSTY ANCHOR\nRandom text")

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error"] == "Menu parsing failed"
    assert "At least one menu section is required" in detail["details"]
    assert detail["parsed_menu"]["sections"] == []


def test_parse_menu_rejects_blank_restaurant_name():
    response = _parse(APPETIZER_TEXT, restaurant_name="  ")

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["details"] == ["Restaurant name is required"]
    assert len(detail["parsed_menu"]["sections"]) == 1


def test_parse_menu_rejects_oversized_text(monkeypatch):
    monkeypatch.setattr(menu_routes.settings, "max_ocr_text_chars", 10)

    response = _parse(APPETIZER_TEXT)

    assert response.status_code == 413
    assert response.json()["detail"] == "OCR text exceeds the maximum allowed length"


def test_parse_menu_requires_ocr_result():
    response = client.post("/menu/parse", json={"restaurant_name": "Test Restaurant"})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "items, expected_valid",
    [
        ([{"id": "1", "name": "Wings", "price": "$12.99", "category": "Appetizers"}], True),
        ([{"id": "1", "name": "", "price": "", "category": "Appetizers"}], False),
    ],
)
def test_validate_endpoint(items, expected_valid):
    response = client.post(
        "/menu/validate",
        json={
            "id": "menu-1",
            "restaurant_name": "Test Restaurant",
            "sections": [
                {"id": "section-1", "name": "Appetizers", "items": items, "order": 0}
            ],
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["is_valid"] is expected_valid
    assert bool(payload["errors"]) is not expected_valid


def test_validate_endpoint_reports_missing_names():
    response = client.post(
        "/menu/validate",
        json={
            "id": "menu-1",
            "sections": [
                {
                    "id": "section-1",
                    "items": [
                        {"id": "1", "name": "Wings", "price": "$12.99", "category": "Other"}
                    ],
                }
            ],
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["is_valid"] is False
    assert payload["errors"] == [
        "Restaurant name is required",
        "Section 1 name is required",
    ]


def test_vocabulary_lists_sections_and_allergens():
    response = client.get("/menu/vocabulary")

    assert response.status_code == 200
    payload = response.json()
    assert payload["sections"][0] == "Appetizers"
    assert "Kids Menu" in payload["sections"]
    assert len(payload["sections"]) == 31
    assert "gluten" in payload["allergens"]
