"""
Tests for the component catalog endpoints (database mode)
"""

import pytest
from sqlalchemy import func, select

from gallery.catalog.registry import COMPONENT_REGISTRY
from gallery.catalog.search import filter_components
from gallery.models import Component, ComponentVersion, Favorite

NEW_COMPONENT = {
    "id": "toast-stack",
    "name": "Toast Stack",
    "description": "Stacked notifications",
    "category": "Feedback",
    "tags": ["toast", " notification ", "Toast", ""],
    "file_path": "src/components/gallery/feedback/ToastStack.tsx",
    "component_path": "@/components/gallery/feedback/ToastStack",
    "code": "export default function ToastStack() { return null; }",
}


class TestListComponents:

    async def test_lists_seeded_components(self, client, seeded):
        response = await client.get("/api/components/", params={"page_size": 100})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == len(COMPONENT_REGISTRY)
        assert len(data["items"]) == len(COMPONENT_REGISTRY)
        assert "code" not in data["items"][0]

    async def test_pagination(self, client, seeded):
        response = await client.get("/api/components/", params={"page": 2, "page_size": 3, "sort": "name"})

        data = response.json()
        assert data["total"] == len(COMPONENT_REGISTRY)
        assert len(data["items"]) == 3
        assert data["has_next"] is True
        assert data["has_prev"] is True

        names = sorted(entry.name for entry in COMPONENT_REGISTRY)
        assert [item["name"] for item in data["items"]] == names[3:6]

    async def test_search_matches_name_and_tags_only(self, client, seeded):
        response = await client.get("/api/components/", params={"search": "CARD", "sort": "name"})

        ids = [item["id"] for item in response.json()["items"]]
        assert ids == ["card-glass", "card-profile", "pricing-three-tier"]

        response = await client.get("/api/components/", params={"search": "pinterest"})
        assert response.json()["total"] == 0

    async def test_search_escapes_wildcards(self, client, seeded):
        response = await client.get("/api/components/", params={"search": "%"})
        assert response.json()["total"] == 0

    @pytest.mark.parametrize("query", [",", '"', '", "', "[", "{"])
    async def test_search_ignores_stored_array_punctuation(self, client, seeded, query):
        response = await client.get("/api/components/", params={"search": query})

        assert response.json()["total"] == len(filter_components(COMPONENT_REGISTRY, search=query)) == 0

    @pytest.mark.parametrize("query", ["card", "CTA", "grid", "ay", "navigation"])
    async def test_search_agrees_with_registry_filter(self, client, seeded, query):
        response = await client.get("/api/components/", params={"search": query, "page_size": 100})

        found = {item["id"] for item in response.json()["items"]}
        assert found == {entry.id for entry in filter_components(COMPONENT_REGISTRY, search=query)}

    async def test_search_and_filter_non_ascii_tag(self, client, admin_headers):
        payload = dict(NEW_COMPONENT, id="menu-cafe", name="Menu Board", tags=["café", "menu"])
        await client.post("/api/components/", json=payload, headers=admin_headers)

        for params in ({"search": "café"}, {"search": "afé"}, {"tag": "café"}):
            response = await client.get("/api/components/", params=params)
            assert [item["id"] for item in response.json()["items"]] == ["menu-cafe"], params

        response = await client.get("/api/components/", params={"search": "u00e9"})
        assert response.json()["total"] == 0

    async def test_category_filter(self, client, seeded):
        response = await client.get("/api/components/", params={"category": "cards", "sort": "name"})
        assert [item["id"] for item in response.json()["items"]] == ["card-glass", "card-profile"]

        response = await client.get("/api/components/", params={"category": "all"})
        assert response.json()["total"] == len(COMPONENT_REGISTRY)

    async def test_tag_filter_is_exact(self, client, seeded):
        response = await client.get("/api/components/", params={"tag": "Card", "sort": "name"})
        assert [item["id"] for item in response.json()["items"]] == ["card-glass", "card-profile"]

    async def test_invalid_sort_rejected(self, client, seeded):
        response = await client.get("/api/components/", params={"sort": "random"})
        assert response.status_code == 422

    async def test_categories_and_tags(self, client, seeded):
        categories = (await client.get("/api/components/categories")).json()
        assert categories["category_counts"]["Cards"] == 2
        assert categories["categories"] == sorted(categories["categories"])

        tags = (await client.get("/api/components/tags")).json()
        assert tags["tags"][:4] == ["card", "cta", "grid", "layout"]
        assert tags["tag_counts"]["card"] == 2


class TestComponentDetail:

    async def test_get_component(self, client, seeded):
        response = await client.get("/api/components/hero-gradient")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Gradient Hero"
        assert "GradientHero" in data["code"]

    async def test_missing_component(self, client, seeded):
        response = await client.get("/api/components/nope")
        assert response.status_code == 404

    async def test_view_and_copy_counters(self, client, seeded):
        await client.post("/api/components/navbar-sticky/view")
        response = await client.post("/api/components/navbar-sticky/view")
        assert response.json()["views"] == 2

        response = await client.post("/api/components/navbar-sticky/copy")
        data = response.json()
        assert data["copies"] == 1
        assert "StickyNavbar" in data["code"]

        popular = (await client.get("/api/components/", params={"sort": "popular"})).json()
        assert popular["items"][0]["id"] == "navbar-sticky"

    async def test_counter_on_missing_component(self, client, seeded):
        response = await client.post("/api/components/nope/copy")
        assert response.status_code == 404


class TestComponentWrites:

    async def test_create_requires_user_header(self, client, seeded):
        response = await client.post("/api/components/", json=NEW_COMPONENT)
        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTHENTICATION_REQUIRED"

    async def test_create_requires_admin(self, client, member_headers):
        response = await client.post("/api/components/", json=NEW_COMPONENT, headers=member_headers)
        assert response.status_code == 403
        assert response.json()["error_code"] == "INSUFFICIENT_PERMISSIONS"
        assert response.json()["required_role"] == "admin"

    async def test_create_by_unknown_user(self, client, users):
        response = await client.post("/api/components/", json=NEW_COMPONENT, headers={"X-User-Id": "ghost"})
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNKNOWN_USER"

    async def test_create_component(self, client, admin_headers):
        response = await client.post("/api/components/", json=NEW_COMPONENT, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "toast-stack"
        assert data["tags"] == ["toast", "notification"]
        assert data["responsive"] is True
        assert data["views"] == 0
        assert data["created_at"] is not None

    async def test_create_generates_id(self, client, admin_headers):
        payload = {key: value for key, value in NEW_COMPONENT.items() if key != "id"}
        response = await client.post("/api/components/", json=payload, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["id"]

    async def test_create_duplicate_id(self, client, seeded, admin_headers):
        payload = dict(NEW_COMPONENT, id="hero-gradient")
        response = await client.post("/api/components/", json=payload, headers=admin_headers)
        assert response.status_code == 409

    async def test_create_validates_payload(self, client, admin_headers):
        payload = dict(NEW_COMPONENT, name="")
        response = await client.post("/api/components/", json=payload, headers=admin_headers)
        assert response.status_code == 422

    async def test_update_component(self, client, seeded, admin_headers):
        response = await client.put(
            "/api/components/card-glass",
            json={"description": "Updated", "dark_mode": True},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["description"] == "Updated"
        assert data["dark_mode"] is True
        assert data["name"] == "Glassmorphism Card"

    async def test_update_missing(self, client, admin_headers):
        response = await client.put("/api/components/nope", json={"name": "x"}, headers=admin_headers)
        assert response.status_code == 404

    async def test_update_without_changes(self, client, seeded, admin_headers):
        response = await client.put("/api/components/card-glass", json={"name": None}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "No fields to update"

    async def test_delete_cascades(self, client, seeded, admin_headers, member_headers, session_factory):
        await client.post("/api/favorites/", json={"component_id": "stats-grid"}, headers=member_headers)
        await client.post(
            "/api/components/stats-grid/versions",
            json={"version": "1.0.0", "changelog": "initial"},
            headers=admin_headers,
        )

        response = await client.delete("/api/components/stats-grid", headers=admin_headers)
        assert response.status_code == 200

        assert (await client.get("/api/components/stats-grid")).status_code == 404
        async with session_factory() as session:
            favorites = await session.execute(select(func.count()).select_from(Favorite))
            versions = await session.execute(select(func.count()).select_from(ComponentVersion))
            assert favorites.scalar_one() == 0
            assert versions.scalar_one() == 0

    async def test_delete_missing(self, client, admin_headers):
        response = await client.delete("/api/components/nope", headers=admin_headers)
        assert response.status_code == 404


class TestVersions:

    async def test_create_snapshot_of_current_code(self, client, seeded, admin_headers):
        response = await client.post(
            "/api/components/modal-confirm/versions",
            json={"version": "1.0.0"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["component_id"] == "modal-confirm"
        assert "ConfirmDialog" in data["code"]
        assert data["changelog"] is None

    async def test_apply_replaces_component_code(self, client, seeded, admin_headers):
        response = await client.post(
            "/api/components/modal-confirm/versions",
            json={"version": "2.0.0", "code": "export default () => <dialog />;", "changelog": "native", "apply": True},
            headers=admin_headers,
        )
        assert response.status_code == 201

        component = (await client.get("/api/components/modal-confirm")).json()
        assert component["code"] == "export default () => <dialog />;"

    async def test_duplicate_version_label(self, client, seeded, admin_headers):
        url = "/api/components/modal-confirm/versions"
        await client.post(url, json={"version": "1.0.0"}, headers=admin_headers)
        response = await client.post(url, json={"version": "1.0.0"}, headers=admin_headers)
        assert response.status_code == 409

    async def test_list_versions_newest_first(self, client, seeded, admin_headers):
        url = "/api/components/modal-confirm/versions"
        labels = ["1.0.0", "1.1.0", "1.2.0", "1.3.0"]
        for label in labels:
            response = await client.post(url, json={"version": label}, headers=admin_headers)
            assert response.status_code == 201

        response = await client.get(url)
        assert response.status_code == 200
        assert [v["version"] for v in response.json()] == list(reversed(labels))

    async def test_versions_of_missing_component(self, client, seeded):
        response = await client.get("/api/components/nope/versions")
        assert response.status_code == 404

    async def test_create_version_requires_admin(self, client, seeded, member_headers):
        response = await client.post(
            "/api/components/modal-confirm/versions",
            json={"version": "1.0.0"},
            headers=member_headers,
        )
        assert response.status_code == 403


class TestNullArrayColumns:

    @pytest.fixture
    async def untagged(self, session_factory, seeded):
        async with session_factory() as session:
            session.add(Component(
                id="legacy-banner",
                name="Legacy Banner",
                description="Imported before tags existed",
                category="Hero",
                tags=None,
                file_path="src/components/gallery/hero/LegacyBanner.tsx",
                component_path="@/components/gallery/hero/LegacyBanner",
                code="export default function LegacyBanner() { return null; }",
                dependencies=None,
            ))
            await session.commit()

    async def test_detail_reports_empty_lists(self, client, untagged):
        response = await client.get("/api/components/legacy-banner")

        assert response.status_code == 200
        assert response.json()["tags"] == []
        assert response.json()["dependencies"] == []

    async def test_listing_search_and_tags(self, client, untagged):
        response = await client.get("/api/components/", params={"search": "legacy"})
        assert [item["id"] for item in response.json()["items"]] == ["legacy-banner"]

        response = await client.get("/api/components/", params={"tag": "hero"})
        assert [item["id"] for item in response.json()["items"]] == ["hero-gradient"]

        tags = (await client.get("/api/components/tags")).json()
        assert tags["tag_counts"]["card"] == 2
