"""
Tests for the promotions HTTP surface.
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from promo_parser.core.dependencies.promotions import get_promotion_service


@pytest.fixture
def client(promotion_service):
    app.dependency_overrides[get_promotion_service] = lambda: promotion_service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestPromotionRoutes:
    """Request and response shapes of the promotions router."""

    def test_create_parses_bulk_text_and_drops_scratch_fields(self, client):
        response = client.post(
            "/promotions",
            json={
                "model_slug": "atto3",
                "start_date": "2025-01-10",
                "benefitsBulk": "- ลด 50,000 บาท",
                "conditionsBulk": "1. ต้องจองภายในวันที่ 31 มกราคม 2568",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["slug"] == "atto3-jan-2025"
        assert body["benefits"][0]["value"] == "50000"
        assert body["benefits"][0]["category"] == "freebie"
        assert body["conditions"] == [{"text": "ต้องจองภายในวันที่ 31 มกราคม 2568", "sort": 1}]
        assert "benefitsBulk" not in body
        assert "benefits_bulk" not in body

    def test_unknown_promotion_is_404(self, client):
        assert client.get("/promotions/999").status_code == 404

    def test_preview(self, client, rever_table):
        response = client.post("/promotions/bulk/preview", json={"benefitsHtml": rever_table})

        assert response.status_code == 200
        assert response.json()["new_benefits"] == 3

    def test_delete(self, client):
        created = client.post("/promotions", json={"model_slug": "seal"}).json()

        assert client.delete(f"/promotions/{created['id']}").status_code == 204
        assert client.get(f"/promotions/{created['id']}").status_code == 404

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
