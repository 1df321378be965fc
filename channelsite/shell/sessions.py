import logging
import uuid
from typing import Dict, Optional, Tuple

from channelsite.database.gateway import BackendGateway
from channelsite.shell.router import Dashboard

logger = logging.getLogger(__name__)


class DashboardSessions:
    """In-memory dashboards keyed by session cookie; oldest are dropped past max_sessions."""

    def __init__(self, gateway: BackendGateway, mask_char: str = "•", max_sessions: int = 500):
        self.gateway = gateway
        self.mask_char = mask_char
        self.max_sessions = max_sessions
        self._sessions: Dict[str, Dashboard] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    async def get(self, session_id: Optional[str]) -> Tuple[str, Dashboard]:
        if session_id and session_id in self._sessions:
            return session_id, self._sessions[session_id]
        while len(self._sessions) >= self.max_sessions:
            oldest = next(iter(self._sessions))
            await self._sessions.pop(oldest).home()
            logger.info(f"Evicted dashboard session {oldest}")
        new_id = uuid.uuid4().hex
        self._sessions[new_id] = Dashboard(self.gateway, self.mask_char)
        return new_id, self._sessions[new_id]

    async def close_all(self) -> None:
        for dashboard in self._sessions.values():
            await dashboard.home()
        self._sessions.clear()
