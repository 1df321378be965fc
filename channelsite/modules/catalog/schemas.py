from pydantic import BaseModel
from typing import Optional, List


class ColumnInfo(BaseModel):
    column_name: str
    data_type: str
    is_nullable: Optional[str] = None
    column_default: Optional[str] = None


class TableColumns(BaseModel):
    table: str
    columns: List[ColumnInfo]
