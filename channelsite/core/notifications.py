from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field


DEFAULT = "default"
DESTRUCTIVE = "destructive"


class Toast(BaseModel):
    title: str
    description: Optional[str] = None
    variant: str = DEFAULT  # default | destructive
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier:
    """Short-lived notifications for one panel; drained on every render."""

    def __init__(self):
        self._pending: List[Toast] = []

    def success(self, description: str, title: str = "Success") -> Toast:
        return self._push(Toast(title=title, description=description))

    def info(self, title: str, description: Optional[str] = None) -> Toast:
        return self._push(Toast(title=title, description=description))

    def error(self, description: str, title: str = "Error") -> Toast:
        return self._push(Toast(title=title, description=description, variant=DESTRUCTIVE))

    def drain(self) -> List[Toast]:
        toasts, self._pending = self._pending, []
        return toasts

    def _push(self, toast: Toast) -> Toast:
        self._pending.append(toast)
        return toast
