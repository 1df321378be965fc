from pydantic import BaseModel
from typing import List

PROJECT_STATUSES: List[str] = ["draft", "review", "approved", "rejected"]
ALL_STATUSES = "all"


class ProjectStatusUpdate(BaseModel):
    status: str


class ProjectFilter(BaseModel):
    status: str = ALL_STATUSES
