import logging
from typing import Any, Dict, List, Optional

from channelsite.core.errors import BackendError
from channelsite.database.gateway import BackendGateway
from channelsite.modules.credentials.definitions import CREDENTIAL_PANELS
from channelsite.modules.overview.schemas import CredentialSummary, OverviewStats, UsageRow
from channelsite.modules.projects.schemas import PROJECT_STATUSES
from channelsite.panels.base import Section, LOADING, READY

logger = logging.getLogger(__name__)


async def _fetch(gateway: BackendGateway, table: str, order_column: str = "created_at") -> List[Dict[str, Any]]:
    try:
        return await gateway.select_all(table, order_column=order_column)
    except BackendError as e:
        logger.error(f"Error fetching {table} for overview: {e.message}")
        return []


class OverviewSection(Section):
    """Counts across the dashboard tables, computed once per mount."""

    kind = "overview"

    def __init__(self, gateway: BackendGateway):
        super().__init__("overview", "Dashboard Overview", "Monitor your system performance and key metrics")
        self.gateway = gateway
        self.state = LOADING
        self.stats: Optional[OverviewStats] = None

    async def mount(self) -> None:
        await super().mount()
        await self.load()

    async def load(self) -> None:
        stats = OverviewStats(projects={status: 0 for status in PROJECT_STATUSES})
        for definition in CREDENTIAL_PANELS:
            rows = await _fetch(self.gateway, definition.table)
            stats.credentials.append(CredentialSummary(
                section=definition.section_id,
                title=definition.title,
                total=len(rows),
                enabled=sum(1 for row in rows if row.get("enabled")),
            ))
        for project in await _fetch(self.gateway, "projects"):
            status = project.get("status")
            stats.projects[status] = stats.projects.get(status, 0) + 1
        for service in await _fetch(self.gateway, "system_status", order_column="last_checked"):
            if service.get("status"):
                stats.services_up += 1
            else:
                stats.services_down += 1
        if not self.mounted:
            return
        self.stats = stats
        self.state = READY

    def view_data(self) -> Dict[str, Any]:
        return {"stats": self.stats.model_dump() if self.stats else None}


class UsageAnalyticsSection(Section):
    """Per-credential usage against its limit, for every credential table that counts usage."""

    kind = "analytics"

    def __init__(self, gateway: BackendGateway):
        super().__init__("analytics", "Analytics Dashboard", "Monitor usage metrics and performance")
        self.gateway = gateway
        self.state = LOADING
        self.usage: List[UsageRow] = []

    async def mount(self) -> None:
        await super().mount()
        await self.load()

    async def load(self) -> None:
        usage = []
        for definition in CREDENTIAL_PANELS:
            if not definition.usage_field:
                continue
            for row in await _fetch(self.gateway, definition.table):
                usage.append(UsageRow(
                    section=definition.section_id,
                    name=row.get(definition.name_field),
                    enabled=row.get("enabled"),
                    used=row.get(definition.usage_field) or 0,
                    limit=row.get(definition.limit_field) if definition.limit_field else None,
                ))
        if not self.mounted:
            return
        self.usage = usage
        self.state = READY

    def view_data(self) -> Dict[str, Any]:
        return {
            "usage": [dict(row.model_dump(), percent=row.percent) for row in self.usage],
            "total_used": sum(row.used for row in self.usage),
        }
