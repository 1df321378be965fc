from pydantic import BaseModel, Field
from typing import Optional, List
from channelsite.panels.schemas import SectionView


class MenuItem(BaseModel):
    id: str
    label: str


class DashboardView(BaseModel):
    view: str
    portal: Optional[str] = None
    menu: List[MenuItem] = Field(default_factory=list)
    selected: Optional[str] = None
    panel: Optional[SectionView] = None
