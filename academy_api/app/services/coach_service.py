"""
Business logic for coaches (``pelatih``).
"""

from typing import Optional

from academy_api.app.schemas.coach import CoachRead
from academy_api.app.schemas.common import PageEnvelope
from academy_api.app.services.pagination import contains, equals, fetch_page
from academy_api.app.services.resource_service import ResourceService


class CoachService(ResourceService):
    table = "pelatih"
    model = CoachRead
    label = "Pelatih"

    @classmethod
    async def list_coaches(
        cls,
        store,
        page: int = 1,
        page_size: int = 10,
        nama: Optional[str] = None,
        lisensi: Optional[str] = None,
    ) -> PageEnvelope:
        return await fetch_page(
            store,
            cls.table,
            cls.model,
            filters=[contains("nama", nama), equals("lisensi", lisensi)],
            page=page,
            page_size=page_size,
        )
