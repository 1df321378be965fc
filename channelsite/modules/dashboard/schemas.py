from pydantic import BaseModel
from typing import Any, Dict
from channelsite.panels.schemas import SectionView


class CreateRowRequest(BaseModel):
    fields: Dict[str, Any]


class ToggleEnabledRequest(BaseModel):
    enabled: bool


class FormStateRequest(BaseModel):
    open: bool


class CopyResponse(BaseModel):
    value: str
    panel: SectionView
