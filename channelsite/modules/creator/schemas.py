from pydantic import BaseModel
from typing import List

LIVE = "live"
CODE = "code"
PREVIEW_MODES: List[str] = [LIVE, CODE]


class ChatMessage(BaseModel):
    type: str  # bot | user
    content: str


class MessageRequest(BaseModel):
    content: str


class PreviewModeRequest(BaseModel):
    mode: str
