from pydantic import BaseModel, Field
from typing import Optional, List, Dict


class CredentialSummary(BaseModel):
    section: str
    title: str
    total: int = 0
    enabled: int = 0


class OverviewStats(BaseModel):
    credentials: List[CredentialSummary] = Field(default_factory=list)
    projects: Dict[str, int] = Field(default_factory=dict)
    services_up: int = 0
    services_down: int = 0


class UsageRow(BaseModel):
    section: str
    name: Optional[str] = None
    enabled: Optional[bool] = None
    used: int = 0
    limit: Optional[int] = None

    @property
    def percent(self) -> Optional[float]:
        if not self.limit:
            return None
        return round(100.0 * self.used / self.limit, 1)
