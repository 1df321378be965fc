from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class QueryRequest(BaseModel):
    sql: str


class QueryResult(BaseModel):
    sql: str
    columns: List[str] = Field(default_factory=list)
    rows: Optional[List[Dict[str, Any]]] = None  # None when the query failed
    error: Optional[str] = None

    @property
    def row_count(self) -> int:
        return len(self.rows or [])
