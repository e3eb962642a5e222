"""
Business logic for the match schedule (``jadwal``).

Unlike players and coaches, the schedule is small enough to be listed
in one go: entries are returned in kick-off order (ascending
``tanggal``) without pagination, wrapped in the shared page envelope.
"""

from typing import Optional

from academy_api.app.core.db import Ordering
from academy_api.app.schemas.common import PageEnvelope
from academy_api.app.schemas.schedule import ScheduleRead
from academy_api.app.services.pagination import contains, fetch_all
from academy_api.app.services.resource_service import ResourceService

BY_MATCH_DATE = Ordering("tanggal", descending=False)


class ScheduleService(ResourceService):
    table = "jadwal"
    model = ScheduleRead
    label = "Jadwal"

    @classmethod
    async def list_schedule(cls, store, lawan: Optional[str] = None) -> PageEnvelope:
        return await fetch_all(
            store,
            cls.table,
            cls.model,
            filters=[contains("lawan", lawan)],
            ordering=BY_MATCH_DATE,
        )
