import logging
from typing import Any, Dict, List

from channelsite.core.errors import BackendError
from channelsite.database.gateway import BackendGateway
from channelsite.modules.projects.schemas import PROJECT_STATUSES, ALL_STATUSES
from channelsite.panels.resource_panel import PanelDefinition, ResourcePanel

logger = logging.getLogger(__name__)


PROJECTS = PanelDefinition(
    section_id="projects",
    title="Project Approval",
    description="Review and approve user project submissions",
    table="projects",
    noun="project",
    options={"statuses": PROJECT_STATUSES},
)


class ProjectApprovalPanel(ResourcePanel):
    """Project queue with admin status changes and a status filter."""

    def __init__(self, gateway: BackendGateway, mask_char: str = "•"):
        super().__init__(PROJECTS, gateway, mask_char)
        self.status_filter = ALL_STATUSES

    async def set_status(self, project_id: str, status: str) -> bool:
        if status not in PROJECT_STATUSES:
            self.notifier.error(f"Unknown project status '{status}'")
            return False
        try:
            await self.gateway.update(PROJECTS.table, project_id, {"status": status})
        except BackendError as e:
            logger.error(f"Error setting project {project_id} to {status}: {e.message}")
            self.notifier.error(e.message, title="Failed to update project")
            return False
        self.notifier.success(f"Project marked as {status}")
        await self.load()
        return True

    def set_filter(self, status: str) -> None:
        if status != ALL_STATUSES and status not in PROJECT_STATUSES:
            self.notifier.error(f"Unknown project status '{status}'")
            return
        self.status_filter = status

    def visible_rows(self) -> List[Dict[str, Any]]:
        if self.status_filter == ALL_STATUSES:
            return self.rows
        return [row for row in self.rows if row.get("status") == self.status_filter]

    def view_data(self) -> Dict[str, Any]:
        data = super().view_data()
        data["filter"] = self.status_filter
        return data
