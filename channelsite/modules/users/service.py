import logging
from typing import Any, Dict, List

from channelsite.database.gateway import BackendGateway
from channelsite.panels.resource_panel import PanelDefinition, ResourcePanel

logger = logging.getLogger(__name__)


USERS = PanelDefinition(
    section_id="users",
    title="User Management",
    description="Manage user accounts and permissions",
    table="auth.users",
    noun="user",
    name_field="email",
    realtime=False,
)


class UserManagementPanel(ResourcePanel):
    """Auth users: list, search and delete. Invites are not wired up."""

    def __init__(self, gateway: BackendGateway, mask_char: str = "•"):
        super().__init__(USERS, gateway, mask_char)
        self.search_term = ""

    async def fetch_rows(self) -> List[Dict[str, Any]]:
        users = await self.gateway.list_users()
        return sorted(users, key=lambda u: str(u.get("created_at") or ""), reverse=True)

    async def remove_row(self, row_id: str) -> None:
        await self.gateway.delete_user(row_id)

    async def invite(self, email: str) -> bool:
        logger.info(f"Invite requested for {email}; invites are not implemented")
        self.notifier.info("Invites unavailable", "Inviting users is not available yet")
        return False

    def search(self, term: str) -> None:
        self.search_term = (term or "").strip()

    def visible_rows(self) -> List[Dict[str, Any]]:
        if not self.search_term:
            return self.rows
        needle = self.search_term.lower()
        return [row for row in self.rows if needle in (row.get("email") or "").lower()]

    def view_data(self) -> Dict[str, Any]:
        return {"search": self.search_term}
