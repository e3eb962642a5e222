"""
Business logic for players (``pemain``).
"""

from datetime import date
from typing import Optional

from academy_api.app.schemas.common import PageEnvelope
from academy_api.app.schemas.player import PlayerRead
from academy_api.app.services.pagination import contains, equals, fetch_page
from academy_api.app.services.resource_service import ResourceService


class PlayerService(ResourceService):
    """Players: paginated list filtered by name and birth date."""

    table = "pemain"
    model = PlayerRead
    label = "Pemain"

    @classmethod
    async def list_players(
        cls,
        store,
        page: int = 1,
        page_size: int = 10,
        nama: Optional[str] = None,
        tanggal: Optional[date] = None,
    ) -> PageEnvelope:
        """Newest players first; ``tanggal`` matches ``tanggal_lahir`` exactly."""
        return await fetch_page(
            store,
            cls.table,
            cls.model,
            filters=[contains("nama", nama), equals("tanggal_lahir", tanggal)],
            page=page,
            page_size=page_size,
        )
