"""
Supabase (hosted Postgres) integration.

This module provides the Record Store used by every resource handler:
a thin wrapper around a single ``supabase`` client that supports a
filtered select with an exact row count, insert, update and delete.
The ``supabase`` SDK is synchronous, so each statement runs on a small
dedicated thread pool and the calling request simply awaits it.

Filters are described with :class:`Filter` so that the query builder
in ``services.pagination`` does not depend on the SDK's fluent API.
"""

import asyncio
import concurrent.futures
import logging
import re
from dataclasses import dataclass
from functools import partial
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from .config import Settings
from .errors import UpstreamFailure

logger = logging.getLogger(__name__)

CONTAINS = "contains"
EQ = "eq"

# Bounded pool so concurrent requests cannot exhaust the default executor.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


async def run_blocking(func, *args, **kwargs):
    """Run a synchronous SDK call on the database thread pool."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_db_executor, partial(func, *args, **kwargs))


def substring_pattern(value: Any) -> str:
    """Case-insensitive regex (PostgREST ``imatch``) matching ``value`` literally.

    ``ilike`` cannot express every literal: PostgREST rewrites ``*`` to
    ``%`` before Postgres sees the pattern.  Escaping the value as a
    regex keeps ``%``, ``_`` and ``*`` ordinary characters.
    """
    return re.escape(str(value))


@dataclass(frozen=True)
class Filter:
    """A single predicate applied to a select.

    ``op`` is either ``"contains"`` (case-insensitive literal substring)
    or ``"eq"`` (exact match).
    """

    column: str
    op: str
    value: Any


@dataclass(frozen=True)
class Ordering:
    column: str
    descending: bool = False


class SelectResult(NamedTuple):
    rows: List[Dict[str, Any]]
    count: int


class SupabaseRecordStore:
    """Record Store backed by Supabase tables."""

    def __init__(self, client: Client) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseRecordStore":
        logger.info("Connecting record store to %s", settings.supabase_url or "<unset>")
        return cls(create_client(settings.supabase_url, settings.supabase_key))

    @property
    def client(self) -> Client:
        return self._client

    # ------------------------------------------------------------------
    # statement builders (synchronous, run on the executor)
    # ------------------------------------------------------------------

    def _select_sync(
        self,
        table: str,
        filters: Sequence[Filter],
        ordering: Optional[Ordering],
        row_range: Optional[Tuple[int, int]],
    ) -> SelectResult:
        query = self._client.table(table).select("*", count="exact")
        for flt in filters:
            if flt.op == CONTAINS:
                query = query.filter(flt.column, "imatch", substring_pattern(flt.value))
            elif flt.op == EQ:
                query = query.eq(flt.column, flt.value)
            else:
                raise ValueError(f"Unsupported filter operator: {flt.op}")
        if ordering is not None:
            query = query.order(ordering.column, desc=ordering.descending)
        if row_range is not None:
            query = query.range(row_range[0], row_range[1])
        response = query.execute()
        rows = response.data or []
        count = response.count if response.count is not None else len(rows)
        return SelectResult(rows=rows, count=count)

    def _insert_sync(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        response = self._client.table(table).insert(values).execute()
        return response.data[0] if response.data else dict(values)

    def _update_sync(self, table: str, record_id: int, values: Dict[str, Any]) -> List[Dict[str, Any]]:
        response = self._client.table(table).update(values).eq("id", record_id).execute()
        return response.data or []

    def _delete_sync(self, table: str, record_id: int) -> None:
        self._client.table(table).delete().eq("id", record_id).execute()

    # ------------------------------------------------------------------
    # async API used by the services
    # ------------------------------------------------------------------

    async def _call(self, func, *args) -> Any:
        try:
            return await run_blocking(func, *args)
        except (APIError, httpx.HTTPError) as exc:
            raise UpstreamFailure("database") from exc

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        ordering: Optional[Ordering] = None,
        row_range: Optional[Tuple[int, int]] = None,
    ) -> SelectResult:
        return await self._call(self._select_sync, table, list(filters), ordering, row_range)

    async def insert(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        return await self._call(self._insert_sync, table, values)

    async def update(self, table: str, record_id: int, values: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._call(self._update_sync, table, record_id, values)

    async def delete(self, table: str, record_id: int) -> None:
        await self._call(self._delete_sync, table, record_id)
