"""Remote store adapters: SQLAlchemy Core for real databases, a dict for demo mode."""

import logging
from typing import Any

from sqlalchemy import Table, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from studio.domain.shared.port.remote_store import RemoteError, RemoteResponse, RemoteStore
from studio.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)

_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


def _conflict_columns(on_conflict: str) -> list[str]:
    return [c.strip() for c in on_conflict.split(",") if c.strip()]


class SqlAlchemyRemoteStore(RemoteStore):
    """Remote store over the tables in ``tables.metadata``.

    Upserts use the dialect's INSERT .. ON CONFLICT DO UPDATE, so re-sending
    the same rows converges instead of duplicating. Failures are returned as
    ``RemoteError`` values, never raised.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    def _table(self, name: str) -> Table | None:
        return metadata.tables.get(name)

    async def upsert(
        self,
        table: str,
        rows: list[dict[str, Any]],
        on_conflict: str = "id",
    ) -> RemoteError | None:
        tbl = self._table(table)
        if tbl is None:
            return RemoteError(message=f"Unknown table: {table}", code="unknown_table")
        if not rows:
            return None

        insert = _INSERTS.get(self.engine.dialect.name)
        if insert is None:
            return RemoteError(
                message=f"Upsert not supported on {self.engine.dialect.name}",
                code="unsupported_dialect",
            )

        keys = _conflict_columns(on_conflict)
        columns = set(tbl.c.keys())
        unknown = [k for k in keys if k not in columns]
        if unknown:
            return RemoteError(message=f"Unknown conflict column(s): {', '.join(unknown)}")

        values = [{k: v for k, v in row.items() if k in columns} for row in rows]
        stmt = insert(tbl)
        updates = {c: stmt.excluded[c] for c in values[0] if c not in keys}
        if updates:
            stmt = stmt.on_conflict_do_update(index_elements=keys, set_=updates)
        else:
            stmt = stmt.on_conflict_do_nothing(index_elements=keys)

        try:
            async with self.engine.begin() as conn:
                await conn.execute(stmt, values)
        except SQLAlchemyError as e:
            logger.error("Upsert into %s failed: %s", table, e)
            return RemoteError(message=str(getattr(e, "orig", None) or e), code=type(e).__name__)
        logger.debug("Upserted %d row(s) into %s", len(values), table)
        return None

    async def select(
        self,
        table: str,
        filters: dict[str, Any],
        limit: int | None = None,
    ) -> RemoteResponse:
        tbl = self._table(table)
        if tbl is None:
            return RemoteResponse(error=RemoteError(message=f"Unknown table: {table}", code="unknown_table"))
        unknown = [k for k in filters if k not in tbl.c.keys()]
        if unknown:
            return RemoteResponse(error=RemoteError(message=f"Unknown column(s): {', '.join(unknown)}"))

        stmt = select(tbl).where(*(tbl.c[k] == v for k, v in filters.items()))
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                data = [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.error("Select from %s failed: %s", table, e)
            return RemoteResponse(error=RemoteError(message=str(e), code=type(e).__name__))
        return RemoteResponse(data=data)


class InMemoryRemoteStore(RemoteStore):
    """Demo-mode remote store: tables are dicts keyed by the conflict columns."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[tuple[Any, ...], dict[str, Any]]] = {}

    async def upsert(
        self,
        table: str,
        rows: list[dict[str, Any]],
        on_conflict: str = "id",
    ) -> RemoteError | None:
        keys = _conflict_columns(on_conflict)
        for row in rows:
            if any(k not in row for k in keys):
                return RemoteError(message=f"Row missing conflict column(s) {keys} for {table}")
        stored = self._tables.setdefault(table, {})
        for row in rows:
            key = tuple(row[k] for k in keys)
            stored[key] = {**stored.get(key, {}), **row}
        return None

    async def select(
        self,
        table: str,
        filters: dict[str, Any],
        limit: int | None = None,
    ) -> RemoteResponse:
        matches = [
            dict(row)
            for row in self._tables.get(table, {}).values()
            if all(row.get(k) == v for k, v in filters.items())
        ]
        return RemoteResponse(data=matches[:limit] if limit is not None else matches)

    def rows(self, table: str) -> list[dict[str, Any]]:
        return [dict(row) for row in self._tables.get(table, {}).values()]
