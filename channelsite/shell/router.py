import logging
from typing import Optional

from channelsite.database.gateway import BackendGateway
from channelsite.shell.portal import PortalShell, creator_portal, developer_portal
from channelsite.shell.schemas import DashboardView

logger = logging.getLogger(__name__)

LANDING = "landing"
CREATOR = "creator"
DEVELOPER = "developer"
VIEWS = (LANDING, CREATOR, DEVELOPER)

PORTALS = {CREATOR: creator_portal, DEVELOPER: developer_portal}


class Dashboard:
    """Landing / creator / developer switch. No history: home() discards everything."""

    def __init__(self, gateway: BackendGateway, mask_char: str = "•"):
        self.gateway = gateway
        self.mask_char = mask_char
        self.view = LANDING
        self.shell: Optional[PortalShell] = None

    async def enter(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view '{view}'")
        if view == LANDING:
            await self.home()
            return
        await self._close_shell()
        self.shell = PORTALS[view](self.gateway, self.mask_char)
        self.view = view
        await self.shell.open()
        logger.info(f"Entered {view} portal")

    async def home(self) -> None:
        await self._close_shell()
        self.view = LANDING

    async def _close_shell(self) -> None:
        if self.shell is not None:
            shell, self.shell = self.shell, None
            await shell.close()

    def snapshot(self) -> DashboardView:
        if self.shell is None:
            return DashboardView(view=self.view)
        return DashboardView(
            view=self.view,
            portal=self.shell.title,
            menu=self.shell.menu(),
            selected=self.shell.selected,
            panel=self.shell.active.snapshot() if self.shell.active else None,
        )
