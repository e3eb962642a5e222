"""In-memory stand-ins for the external collaborators.

They mirror the behaviour the services rely on: ``contains`` filters are
case-insensitive literal substring matches, ``eq`` filters compare exactly,
ranges are zero-based and inclusive, and ``count`` ignores the range.
"""

import base64
import hashlib
import hmac
import json
import re
import time
from collections import defaultdict
from datetime import datetime, timedelta
from itertools import count
from typing import Any, Dict, List, Optional

from academy_api.app.core.db import CONTAINS, EQ, SelectResult, substring_pattern
from academy_api.app.core.errors import Unauthorized, UpstreamFailure
from academy_api.app.services.media_service import UploadedMedia

JWT_SECRET = "test-jwt-secret"


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def make_token(
    claims: Optional[Dict[str, Any]] = None,
    secret: str = JWT_SECRET,
    expires_in: int = 3600,
    alg: str = "HS256",
) -> str:
    payload = {
        "sub": "7f1c0c52-1a7e-4a0f-9a37-2a2f0f4b9e10",
        "email": "pelatih@akademi.id",
        "role": "authenticated",
        "aud": "authenticated",
        "exp": int(time.time()) + expires_in,
    }
    payload.update(claims or {})
    header_b64 = _b64(json.dumps({"alg": alg, "typ": "JWT"}).encode())
    payload_b64 = _b64(json.dumps(payload).encode())
    signature = hmac.new(secret.encode(), f"{header_b64}.{payload_b64}".encode(), hashlib.sha256).digest()
    return f"{header_b64}.{payload_b64}.{_b64(signature)}"


class InMemoryRecordStore:
    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.calls: List[tuple] = []
        self._ids = count(1)
        self._clock = count()

    def seed(self, table: str, **values: Any) -> Dict[str, Any]:
        row = {
            "id": next(self._ids),
            "created_at": (datetime(2025, 1, 1) + timedelta(minutes=next(self._clock))).isoformat(),
        }
        row.update(values)
        self.tables[table].append(row)
        return dict(row)

    def get(self, table: str, record_id: int) -> Optional[Dict[str, Any]]:
        for row in self.tables[table]:
            if row["id"] == record_id:
                return row
        return None

    @staticmethod
    def _matches(row: Dict[str, Any], flt) -> bool:
        current = row.get(flt.column)
        if flt.op == CONTAINS:
            return re.search(substring_pattern(flt.value), str(current or ""), re.IGNORECASE) is not None
        if flt.op == EQ:
            return current is not None and str(current) == str(flt.value)
        raise ValueError(flt.op)

    async def select(self, table, filters=(), ordering=None, row_range=None) -> SelectResult:
        self.calls.append(("select", table, list(filters), ordering, row_range))
        rows = [row for row in self.tables[table] if all(self._matches(row, f) for f in filters)]
        if ordering is not None:
            rows.sort(key=lambda r: str(r.get(ordering.column) or ""), reverse=ordering.descending)
        total = len(rows)
        if row_range is not None:
            rows = rows[row_range[0]:row_range[1] + 1]
        return SelectResult(rows=[dict(r) for r in rows], count=total)

    async def insert(self, table, values):
        self.calls.append(("insert", table, dict(values)))
        return self.seed(table, **values)

    async def update(self, table, record_id, values):
        self.calls.append(("update", table, record_id, dict(values)))
        row = self.get(table, record_id)
        if row is None:
            return []
        row.update(values)
        return [dict(row)]

    async def delete(self, table, record_id):
        self.calls.append(("delete", table, record_id))
        self.tables[table] = [row for row in self.tables[table] if row["id"] != record_id]

    @property
    def writes(self) -> List[tuple]:
        return [call for call in self.calls if call[0] != "select"]


class BrokenRecordStore(InMemoryRecordStore):
    """Every write fails the way an unreachable database would."""

    @staticmethod
    def _refused() -> UpstreamFailure:
        failure = UpstreamFailure("database")
        failure.__cause__ = ConnectionError("connection to db.internal:5432 refused")
        return failure

    async def insert(self, table, values):
        self.calls.append(("insert", table, dict(values)))
        raise self._refused()

    async def update(self, table, record_id, values):
        self.calls.append(("update", table, record_id, dict(values)))
        raise self._refused()


class FakeMediaUploader:
    def __init__(self) -> None:
        self.uploaded: List[UploadedMedia] = []
        self.discarded: List[UploadedMedia] = []

    async def upload(self, upload, subfolder: str = "") -> UploadedMedia:
        index = len(self.uploaded) + 1
        public_id = f"akademi/{subfolder}/{index}"
        media = UploadedMedia(
            url=f"https://res.cloudinary.com/demo/image/upload/{public_id}/{upload.filename}",
            public_id=public_id,
        )
        self.uploaded.append(media)
        return media

    async def discard(self, media: UploadedMedia) -> None:
        self.discarded.append(media)


class FakeCredentialStore:
    def __init__(self, users: Optional[Dict[str, str]] = None) -> None:
        self.users = users or {"admin@akademi.id": "rahasia123"}

    async def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        if self.users.get(email) != password:
            raise Unauthorized("Email atau password salah")
        return {
            "session": {"access_token": make_token({"email": email}), "token_type": "bearer"},
            "user": {"id": "user-1", "email": email},
        }
