from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from channelsite.core.notifications import Toast


class FormView(BaseModel):
    open: bool = False
    values: Dict[str, Any] = Field(default_factory=dict)


class RecordView(BaseModel):
    """One row as rendered by a panel.

    The generic credential shape (display name, secret, enabled flag, usage
    counter and limit) is lifted out of the table's own columns; every other
    column is passed through in ``fields``. The secret column itself never
    appears in ``fields``.
    """
    id: str
    display_name: Optional[str] = None
    secret: Optional[str] = None
    secret_visible: bool = False
    enabled: Optional[bool] = None
    usage_counter: Optional[int] = None
    usage_limit: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    fields: Dict[str, Any] = Field(default_factory=dict)


class SectionView(BaseModel):
    section: str
    title: str
    description: Optional[str] = None
    kind: str
    state: str
    rows: List[RecordView] = Field(default_factory=list)
    form: Optional[FormView] = None
    notifications: List[Toast] = Field(default_factory=list)
    data: Dict[str, Any] = Field(default_factory=dict)
