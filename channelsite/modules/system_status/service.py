import logging
from typing import Dict, Optional

from channelsite.core.errors import BackendError
from channelsite.database.gateway import BackendGateway
from channelsite.panels.resource_panel import PanelDefinition, ResourcePanel

logger = logging.getLogger(__name__)


SYSTEM_STATUS = PanelDefinition(
    section_id="monitoring",
    title="System Monitoring",
    description="Monitor system health and performance",
    table="system_status",
    noun="system status",
    order_column="last_checked",
    name_field="service",
    deletable=False,
)


class SystemStatusPanel(ResourcePanel):
    """Read-only view of the per-service health rows."""

    def __init__(self, gateway: BackendGateway, mask_char: str = "•", section_id: Optional[str] = None):
        definition = SYSTEM_STATUS
        if section_id and section_id != SYSTEM_STATUS.section_id:
            definition = SYSTEM_STATUS.model_copy(update={"section_id": section_id})
        super().__init__(definition, gateway, mask_char)

    async def refresh(self) -> bool:
        """Ask the backend to re-check every service; rows arrive via the change feed."""
        try:
            await self.gateway.rpc("update_system_status")
        except BackendError as e:
            logger.error(f"Error refreshing system status: {e.message}")
            self.notifier.error(e.message, title="Failed to refresh status")
            return False
        self.notifier.success("System status refreshed")
        await self.load()
        return True

    def service_health(self) -> Dict[str, bool]:
        return {row["service"]: bool(row.get("status")) for row in self.rows if row.get("service")}

    def view_data(self) -> Dict[str, Dict[str, bool]]:
        return {"health": self.service_health()}
