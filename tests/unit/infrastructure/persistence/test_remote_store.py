"""SqlAlchemyRemoteStore against an in-memory SQLite database."""

from datetime import UTC, datetime

import pytest
import pytest_asyncio

from studio.config import DatabaseConfig
from studio.infrastructure.persistence.adapter.remote_store import (
    InMemoryRemoteStore,
    SqlAlchemyRemoteStore,
)
from studio.infrastructure.persistence.database import create_db_engine, create_schema


@pytest_asyncio.fixture
async def remote():
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    await create_schema(engine)
    yield SqlAlchemyRemoteStore(engine)
    await engine.dispose()


def _project(id: str, title: str = "T", owner: str = "u1") -> dict:
    return {
        "id": id,
        "title": title,
        "is_featured": False,
        "is_public": True,
        "created_by": owner,
    }


def _favorite(user: str, content_id: str) -> dict:
    return {
        "user_id": user,
        "content_id": content_id,
        "content_type": "gradient",
        "metadata": {"title": content_id},
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }


class TestSqlAlchemyRemoteStore:
    @pytest.mark.asyncio
    async def test_upsert_then_select(self, remote: SqlAlchemyRemoteStore) -> None:
        assert await remote.upsert("projects", [_project("p1"), _project("p2")]) is None
        response = await remote.select("projects", {"created_by": "u1"})
        assert response.error is None
        assert sorted(r["id"] for r in response.data) == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_upsert_same_id_updates(self, remote: SqlAlchemyRemoteStore) -> None:
        await remote.upsert("projects", [_project("p1", title="Old")])
        await remote.upsert("projects", [_project("p1", title="New")])
        response = await remote.select("projects", {"id": "p1"})
        assert [r["title"] for r in response.data] == ["New"]

    @pytest.mark.asyncio
    async def test_favorites_composite_conflict(self, remote: SqlAlchemyRemoteStore) -> None:
        conflict = "user_id,content_id,content_type"
        await remote.upsert("user_favorites", [_favorite("u1", "1"), _favorite("u2", "1")], conflict)
        await remote.upsert("user_favorites", [_favorite("u1", "1")], conflict)
        response = await remote.select("user_favorites", {"content_id": "1"})
        assert sorted(r["user_id"] for r in response.data) == ["u1", "u2"]

    @pytest.mark.asyncio
    async def test_select_limit(self, remote: SqlAlchemyRemoteStore) -> None:
        await remote.upsert("projects", [_project(f"p{i}") for i in range(3)])
        response = await remote.select("projects", {"created_by": "u1"}, limit=1)
        assert len(response.data) == 1

    @pytest.mark.asyncio
    async def test_json_columns_round_trip(self, remote: SqlAlchemyRemoteStore) -> None:
        row = {**_project("p1"), "tags": ["a", "b"], "content": [{"title": "Intro"}]}
        await remote.upsert("projects", [row])
        (stored,) = (await remote.select("projects", {"id": "p1"})).data
        assert stored["tags"] == ["a", "b"]
        assert stored["content"] == [{"title": "Intro"}]

    @pytest.mark.asyncio
    async def test_unknown_table_is_error_value(self, remote: SqlAlchemyRemoteStore) -> None:
        error = await remote.upsert("nope", [{"id": "x"}])
        assert error is not None
        assert error.code == "unknown_table"
        assert (await remote.select("nope", {})).error is not None

    @pytest.mark.asyncio
    async def test_unknown_filter_column(self, remote: SqlAlchemyRemoteStore) -> None:
        response = await remote.select("projects", {"owner": "u1"})
        assert response.error is not None
        assert response.data == []

    @pytest.mark.asyncio
    async def test_constraint_violation_is_error_value(self, remote: SqlAlchemyRemoteStore) -> None:
        # title is NOT NULL
        error = await remote.upsert("projects", [{"id": "p1", "title": None}])
        assert error is not None

    @pytest.mark.asyncio
    async def test_empty_rows_is_noop(self, remote: SqlAlchemyRemoteStore) -> None:
        assert await remote.upsert("projects", []) is None


class TestInMemoryRemoteStore:
    @pytest.mark.asyncio
    async def test_merges_on_conflict_key(self) -> None:
        store = InMemoryRemoteStore()
        await store.upsert("projects", [_project("p1", title="Old")])
        await store.upsert("projects", [_project("p1", title="New")])
        assert [r["title"] for r in store.rows("projects")] == ["New"]

    @pytest.mark.asyncio
    async def test_missing_conflict_column(self) -> None:
        store = InMemoryRemoteStore()
        error = await store.upsert("user_favorites", [{"user_id": "u1"}], "user_id,content_id")
        assert error is not None
        assert store.rows("user_favorites") == []

    @pytest.mark.asyncio
    async def test_select_filters(self) -> None:
        store = InMemoryRemoteStore()
        await store.upsert("projects", [_project("p1"), _project("p2", owner="u2")])
        response = await store.select("projects", {"created_by": "u2"})
        assert [r["id"] for r in response.data] == ["p2"]
