import logging
from typing import Dict, List, Optional

from channelsite.database.gateway import BackendGateway
from channelsite.panels.base import Section
from channelsite.shell.schemas import MenuItem
from channelsite.shell.sections import SectionEntry, DEVELOPER_SECTIONS, CREATOR_SECTIONS

logger = logging.getLogger(__name__)


class PortalShell:
    """Holds the selected section and the one section instance mounted for it.

    Switching sections tears the current instance down and mounts a fresh
    one, so returning to a section always reloads it from scratch.
    """

    def __init__(
        self,
        name: str,
        title: str,
        entries: List[SectionEntry],
        default_section: str,
        gateway: BackendGateway,
        mask_char: str = "•"
    ):
        self.name = name
        self.title = title
        self.entries: Dict[str, SectionEntry] = {e.section_id: e for e in entries}
        self.order = [e.section_id for e in entries]
        self.default_section = default_section
        self.gateway = gateway
        self.mask_char = mask_char
        self.selected: Optional[str] = None
        self.active: Optional[Section] = None

    def menu(self) -> List[MenuItem]:
        return [MenuItem(id=sid, label=self.entries[sid].label) for sid in self.order]

    async def open(self) -> Section:
        return await self.select(self.default_section)

    async def select(self, section_id: str) -> Section:
        # Unknown ids fall back to the default section
        entry = self.entries.get(section_id) or self.entries[self.default_section]
        await self.close()
        section = entry.factory(self.gateway, self.mask_char)
        self.selected = entry.section_id
        self.active = section
        await section.mount()
        return section

    async def close(self) -> None:
        if self.active is not None:
            section, self.active = self.active, None
            await section.teardown()


def developer_portal(gateway: BackendGateway, mask_char: str = "•") -> PortalShell:
    return PortalShell("developer", "AI Developer Portal", DEVELOPER_SECTIONS, "overview", gateway, mask_char)


def creator_portal(gateway: BackendGateway, mask_char: str = "•") -> PortalShell:
    return PortalShell("creator", "Creator Workspace", CREATOR_SECTIONS, "workspace", gateway, mask_char)
