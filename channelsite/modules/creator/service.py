import logging
from typing import Any, Dict, List

from channelsite.database.gateway import BackendGateway
from channelsite.modules.creator.schemas import ChatMessage, PREVIEW_MODES, LIVE
from channelsite.modules.system_status.service import SystemStatusPanel
from channelsite.panels.base import Section

logger = logging.getLogger(__name__)

GREETING = "Hi! I'm ready to help you build your website. What's your YouTube channel URL?"
ACKNOWLEDGEMENT = "Great! I'm analyzing your channel and building your website..."

PLACEHOLDER_CODE = """// Your generated code will appear here
import React from 'react';

const YourWebsite = () => {
  return (
    <div className="min-h-screen bg-white">
      <h1>Your YouTube Website</h1>
      {/* AI-generated content */}
    </div>
  );
};

export default YourWebsite;"""

# indicator -> system_status.service
INDICATORS = {"youtube": "youtube", "ai": "openai", "github": "github"}


class CreatorWorkspace(Section):
    """Chat transcript, preview pane and API status lights for creators."""

    kind = "workspace"

    def __init__(self, gateway: BackendGateway, mask_char: str = "•"):
        super().__init__("workspace", "Creator Workspace", "Describe your website and watch it being built")
        self.messages: List[ChatMessage] = [ChatMessage(type="bot", content=GREETING)]
        self.preview_mode = LIVE
        self.status = SystemStatusPanel(gateway, mask_char)

    async def mount(self) -> None:
        await super().mount()
        await self.status.mount()

    async def teardown(self) -> None:
        await self.status.teardown()
        await super().teardown()

    def send_message(self, content: str) -> bool:
        content = (content or "").strip()
        if not content:
            return False
        self.messages.append(ChatMessage(type="user", content=content))
        self.messages.append(ChatMessage(type="bot", content=ACKNOWLEDGEMENT))
        return True

    def set_preview_mode(self, mode: str) -> None:
        if mode not in PREVIEW_MODES:
            self.notifier.error(f"Unknown preview mode '{mode}'")
            return
        self.preview_mode = mode

    def indicators(self) -> Dict[str, bool]:
        health = self.status.service_health()
        return {name: health.get(service, False) for name, service in INDICATORS.items()}

    def view_data(self) -> Dict[str, Any]:
        return {
            "messages": [m.model_dump() for m in self.messages],
            "preview_mode": self.preview_mode,
            "code": PLACEHOLDER_CODE if self.preview_mode != LIVE else None,
            "indicators": self.indicators(),
        }
