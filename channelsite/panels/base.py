import logging
from typing import Any, Dict, Optional

from channelsite.core.notifications import Notifier
from channelsite.panels.schemas import SectionView

logger = logging.getLogger(__name__)

LOADING = "loading"
READY = "ready"


class Section:
    """Anything a portal shell can mount: a resource panel or a static view."""

    kind = "static"

    def __init__(self, section_id: str, title: str, description: Optional[str] = None):
        self.section_id = section_id
        self.title = title
        self.description = description
        self.state = READY
        self.mounted = False
        self.notifier = Notifier()

    async def mount(self) -> None:
        self.mounted = True

    async def teardown(self) -> None:
        self.mounted = False

    def view_data(self) -> Dict[str, Any]:
        return {}

    def snapshot(self) -> SectionView:
        return SectionView(
            section=self.section_id,
            title=self.title,
            description=self.description,
            kind=self.kind,
            state=self.state,
            notifications=self.notifier.drain(),
            data=self.view_data(),
        )


class StaticSection(Section):
    """Placeholder page with a heading and a one-line description only."""
    pass
