"""
Tests for schema constraints: uniqueness, cascades and server defaults
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from gallery.models import Component, ComponentVersion, Favorite, User


async def _count(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


def _component(id="btn-1", **overrides) -> Component:
    data = dict(
        id=id,
        name="Button",
        description="A button",
        category="Buttons",
        tags=["button"],
        file_path="src/Button.tsx",
        component_path="@/Button",
        code="export default function Button() { return <button />; }",
    )
    data.update(overrides)
    return Component(**data)


class TestComponent:

    async def test_defaults_applied(self, db_session):
        db_session.add(_component())
        await db_session.commit()

        component = await db_session.get(Component, "btn-1", populate_existing=True)
        assert component.responsive is True
        assert component.dark_mode is True
        assert component.views == 0
        assert component.copies == 0
        assert component.dependencies == []
        assert component.created_at is not None
        assert component.updated_at is not None

    async def test_tags_round_trip_as_list(self, db_session):
        db_session.add(_component(tags=["a", "b", "c"]))
        await db_session.commit()

        tags = (await db_session.execute(select(Component.tags))).scalar_one()
        assert tags == ["a", "b", "c"]

    async def test_array_columns_accept_null(self, db_session):
        db_session.add(_component(tags=None, dependencies=None))
        await db_session.commit()

        result = await db_session.execute(
            select(func.count()).select_from(Component).where(
                Component.tags.is_(None), Component.dependencies.is_(None)
            )
        )
        assert result.scalar_one() == 1

    async def test_created_at_orders_rows_within_a_second(self, db_session):
        for index in range(3):
            db_session.add(_component(id=f"btn-{index}"))
            await db_session.commit()

        result = await db_session.execute(select(Component.id).order_by(Component.created_at.desc()))
        assert result.scalars().all() == ["btn-2", "btn-1", "btn-0"]


class TestFavorite:

    async def test_duplicate_pair_rejected(self, db_session):
        db_session.add(_component())
        await db_session.commit()

        db_session.add(Favorite(user_id="u1", component_id="btn-1"))
        await db_session.commit()

        db_session.add(Favorite(user_id="u1", component_id="btn-1"))
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

        assert await _count(db_session, Favorite) == 1

    async def test_same_component_for_different_users(self, db_session):
        db_session.add(_component())
        await db_session.commit()

        db_session.add_all([
            Favorite(user_id="u1", component_id="btn-1"),
            Favorite(user_id="u2", component_id="btn-1"),
        ])
        await db_session.commit()

        assert await _count(db_session, Favorite) == 2

    async def test_requires_existing_component(self, db_session):
        db_session.add(Favorite(user_id="u1", component_id="missing"))
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()


class TestCascade:

    async def test_deleting_component_removes_favorites_and_versions(self, db_session):
        db_session.add_all([_component("keep"), _component("drop")])
        await db_session.commit()

        db_session.add_all([
            Favorite(user_id="u1", component_id="drop"),
            Favorite(user_id="u2", component_id="drop"),
            Favorite(user_id="u1", component_id="keep"),
            ComponentVersion(component_id="drop", version="1.0.0", code="v1"),
            ComponentVersion(component_id="drop", version="1.1.0", code="v2", changelog="tweak"),
            ComponentVersion(component_id="keep", version="1.0.0", code="v1"),
        ])
        await db_session.commit()

        component = await db_session.get(Component, "drop")
        await db_session.delete(component)
        await db_session.commit()

        favorites = (await db_session.execute(select(Favorite.component_id))).scalars().all()
        versions = (await db_session.execute(select(ComponentVersion.component_id))).scalars().all()
        assert favorites == ["keep"]
        assert versions == ["keep"]


class TestUser:

    async def test_email_unique(self, db_session):
        db_session.add(User(email="a@example.com"))
        await db_session.commit()

        db_session.add(User(email="a@example.com"))
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    async def test_role_defaults_to_user(self, db_session):
        db_session.add(User(id="u1", email="b@example.com"))
        await db_session.commit()

        user = await db_session.get(User, "u1", populate_existing=True)
        assert user.role == "user"
        assert user.is_admin is False
