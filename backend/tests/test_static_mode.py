"""
Tests for serving the catalog from the in-memory registry
"""

import pytest

from gallery.catalog.registry import COMPONENT_REGISTRY
from gallery.config.settings import get_settings
from gallery.core.database import get_db
from gallery.main import app


@pytest.fixture
def static_mode(monkeypatch):
    monkeypatch.setattr(get_settings(), "CATALOG_SOURCE", "static")


@pytest.mark.usefixtures("static_mode")
class TestStaticCatalog:

    async def test_lists_registry(self, client):
        response = await client.get("/api/components/", params={"page_size": 100})

        data = response.json()
        assert data["total"] == len(COMPONENT_REGISTRY)
        assert [item["id"] for item in data["items"]] == [entry.id for entry in COMPONENT_REGISTRY]

    async def test_search_and_filters(self, client):
        response = await client.get("/api/components/", params={"search": "card"})
        assert [item["id"] for item in response.json()["items"]] == ["pricing-three-tier", "card-profile", "card-glass"]

        response = await client.get("/api/components/", params={"category": "Cards", "tag": "glass"})
        assert [item["id"] for item in response.json()["items"]] == ["card-glass"]

    async def test_sort_by_name(self, client):
        response = await client.get("/api/components/", params={"sort": "name", "page_size": 100})

        names = [item["name"] for item in response.json()["items"]]
        assert names == sorted(names, key=str.lower)

    async def test_detail_and_copy(self, client):
        response = await client.get("/api/components/button-shimmer")
        assert response.status_code == 200
        assert response.json()["dependencies"] == ["framer-motion"]

        response = await client.post("/api/components/button-shimmer/copy")
        assert response.status_code == 200
        assert "ShimmerButton" in response.json()["code"]

        response = await client.get("/api/components/nope")
        assert response.status_code == 404

    async def test_categories(self, client):
        response = await client.get("/api/components/categories")
        assert response.json()["category_counts"]["Cards"] == 2

    async def test_writes_rejected(self, client, admin_headers):
        response = await client.delete("/api/components/card-glass", headers=admin_headers)

        assert response.status_code == 405
        assert response.json()["error_code"] == "CATALOG_READ_ONLY"

    async def test_favorites_and_users_unavailable(self, client, member_headers):
        assert (await client.get("/api/favorites/", headers=member_headers)).status_code == 405
        assert (await client.get("/api/users/me", headers=member_headers)).status_code == 405
        assert (await client.get("/api/components/card-glass/versions")).status_code == 405

    async def test_health_reports_source(self, client):
        response = await client.get("/api/health/")
        assert response.json()["catalog_source"] == "static"

    async def test_reads_never_open_a_session(self, client):
        opened = []

        async def counting_get_db():
            opened.append(True)
            yield None

        app.dependency_overrides[get_db] = counting_get_db

        assert (await client.get("/api/components/")).status_code == 200
        assert (await client.get("/api/components/card-glass")).status_code == 200
        assert (await client.get("/api/components/tags")).status_code == 200
        assert (await client.get("/api/health/ready")).json()["database"] == "not used"
        assert opened == []
