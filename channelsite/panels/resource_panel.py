"""
Realtime-synchronised resource panel.

A panel binds one backend table to a visible list. It loads every row on
mount, keeps one realtime channel open on the table and reloads the whole
list whenever that channel reports an insert, update or delete. Mutations
are forwarded straight to the backend and followed by a full reload; the
visible list only ever changes when a load resolves.

Loads are not serialised. Whichever load resolves last wins, so a slow load
started before a create can briefly hide the new row until the next change
notification arrives. Loads that resolve after teardown are discarded.
"""

import asyncio
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Set, Type

from pydantic import BaseModel, Field, ValidationError

from channelsite.core.errors import BackendError, RowNotFound, UnsupportedOperation
from channelsite.database.gateway import BackendGateway
from channelsite.panels.base import Section, LOADING, READY
from channelsite.panels.schemas import FormView, RecordView, SectionView

logger = logging.getLogger(__name__)

DEFAULT_MASK_CHAR = "•"


class PanelDefinition(BaseModel):
    """Declarative description of one table-backed panel."""
    section_id: str
    title: str
    description: Optional[str] = None
    table: str
    noun: str  # used in toasts, e.g. "AI API key"
    order_column: str = "created_at"
    name_field: str = "name"
    secret_field: Optional[str] = None
    usage_field: Optional[str] = None
    limit_field: Optional[str] = None
    # Pydantic model describing the insert form; None means rows cannot be added here
    create_schema: Optional[Type[BaseModel]] = None
    # Field whose value is passed to generate_unique_provider_name; the result lands in "name"
    unique_name_source: Optional[str] = None
    toggleable: bool = False
    deletable: bool = True
    realtime: bool = True
    # Choices offered by the form, e.g. provider list; passed through to the view
    options: Dict[str, Any] = Field(default_factory=dict)

    @property
    def channel_name(self) -> str:
        return f"{self.table.replace('_', '-')}-changes"

    @property
    def creatable(self) -> bool:
        return self.create_schema is not None

    @property
    def required_fields(self) -> List[str]:
        if self.create_schema is None:
            return []
        return [name for name, field in self.create_schema.model_fields.items() if field.is_required()]

    @property
    def noun_title(self) -> str:
        return self.noun[:1].upper() + self.noun[1:]


class PanelForm:
    def __init__(self):
        self.open = False
        self.values: Dict[str, Any] = {}

    def reset(self):
        self.open = False
        self.values = {}

    def view(self) -> FormView:
        return FormView(open=self.open, values=dict(self.values))


def mask_secret_value(secret: Optional[str], mask_char: str = DEFAULT_MASK_CHAR) -> str:
    # Same length as the secret; the length itself is not hidden.
    return mask_char * len(secret or "")


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class ResourcePanel(Section):
    kind = "resource"

    def __init__(self, definition: PanelDefinition, gateway: BackendGateway, mask_char: str = DEFAULT_MASK_CHAR):
        super().__init__(definition.section_id, definition.title, definition.description)
        self.definition = definition
        self.gateway = gateway
        self.mask_char = mask_char
        self.state = LOADING
        self.rows: List[Dict[str, Any]] = []
        self.visible_secrets: Set[str] = set()
        self.form = PanelForm()
        self.last_copied: Optional[str] = None
        # Realtime topics must be unique per panel instance
        self.channel_name = f"{definition.channel_name}-{uuid.uuid4().hex}"
        self._channel = None
        self._pending: Set[asyncio.Task] = set()

    # -- lifecycle ---------------------------------------------------------

    async def mount(self) -> None:
        self.mounted = True
        self.state = LOADING
        await self.subscribe_to_changes()
        await self.load()
        logger.info(f"Mounted panel {self.section_id}")

    async def teardown(self) -> None:
        self.mounted = False
        if self._channel is not None:
            channel, self._channel = self._channel, None
            try:
                await self.gateway.unsubscribe(channel)
            except BackendError as e:
                logger.error(f"Error removing channel for {self.definition.table}: {e.message}")
        logger.info(f"Tore down panel {self.section_id}")

    async def fetch_rows(self) -> List[Dict[str, Any]]:
        d = self.definition
        return await self.gateway.select_all(d.table, order_column=d.order_column, desc=True)

    async def load(self) -> None:
        """Replace the visible list with a fresh copy of the table."""
        try:
            rows = await self.fetch_rows()
        except BackendError as e:
            logger.error(f"Error fetching {self.definition.table}: {e.message}")
            if self.mounted:
                self.state = READY
            return
        if not self.mounted:
            logger.debug(f"Discarding {self.definition.table} rows fetched after teardown")
            return
        self.rows = rows
        self.state = READY

    async def subscribe_to_changes(self) -> None:
        if not self.definition.realtime or self._channel is not None:
            return
        try:
            self._channel = await self.gateway.subscribe(
                self.definition.table, self._on_change, self.channel_name
            )
        except BackendError as e:
            logger.error(f"Error subscribing to {self.definition.table}: {e.message}")

    def _on_change(self, payload: Dict[str, Any]) -> None:
        if not self.mounted:
            return
        logger.debug(f"{self.definition.table} changed, reloading")
        task = asyncio.ensure_future(self.load())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def settle(self) -> None:
        """Wait for reloads scheduled by change notifications."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    # -- mutations ---------------------------------------------------------

    def open_form(self) -> None:
        self._require(self.definition.creatable, "create")
        self.form.open = True

    def close_form(self) -> None:
        self.form.reset()

    async def create(self, fields: Dict[str, Any]) -> bool:
        d = self.definition
        self._require(d.creatable, "create")
        self.form.open = True
        self.form.values = dict(fields)

        try:
            row = self._prepare_insert(fields)
        except ValidationError as e:
            self.notifier.error(_validation_message(e), title="Invalid input")
            return False
        missing = [f for f in d.required_fields if row.get(f) in (None, "")]
        if missing:
            self.notifier.error(f"Missing required fields: {', '.join(missing)}")
            return False

        if d.unique_name_source:
            row["name"] = await self._generate_unique_name(row[d.unique_name_source])

        try:
            await self.gateway.insert(d.table, row)
        except BackendError as e:
            logger.error(f"Error adding {d.noun}: {e.message}")
            self.notifier.error(e.message, title=f"Failed to add {d.noun}")
            return False

        self.notifier.success(f"{d.noun_title} added successfully")
        self.form.reset()
        await self.load()
        return True

    def _prepare_insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Validate against the create schema; undeclared keys (id, timestamps, counters) are dropped."""
        d = self.definition
        values = d.create_schema.model_validate(fields).model_dump()
        row = {}
        for name, value in values.items():
            if isinstance(value, str):
                value = value.strip()
            if value == "" and name not in d.required_fields:
                value = None
            row[name] = value
        return row

    async def _generate_unique_name(self, provider: str) -> str:
        try:
            name = await self.gateway.generate_unique_provider_name(provider)
        except BackendError as e:
            logger.error(f"Error generating unique name for {provider}: {e.message}")
            return provider
        return name or provider

    async def toggle_enabled(self, row_id: str, enabled: bool) -> bool:
        d = self.definition
        self._require(d.toggleable, "toggle")
        try:
            await self.gateway.update(d.table, row_id, {"enabled": enabled})
        except BackendError as e:
            logger.error(f"Error updating {d.noun} {row_id}: {e.message}")
            self.notifier.error(e.message, title=f"Failed to update {d.noun}")
            return False
        self.notifier.success(f"{d.noun_title} {'enabled' if enabled else 'disabled'}")
        await self.load()
        return True

    async def delete(self, row_id: str) -> bool:
        d = self.definition
        self._require(d.deletable, "delete")
        try:
            await self.remove_row(row_id)
        except BackendError as e:
            logger.error(f"Error deleting {d.noun} {row_id}: {e.message}")
            self.notifier.error(e.message, title=f"Failed to delete {d.noun}")
            return False
        self.visible_secrets.discard(row_id)
        self.notifier.success(f"{d.noun_title} deleted successfully")
        await self.load()
        return True

    async def remove_row(self, row_id: str) -> None:
        await self.gateway.delete(self.definition.table, row_id)

    # -- secrets (view state only) -------------------------------------------

    def reveal_secret(self, row_id: str) -> None:
        self._secret_row(row_id)
        self.visible_secrets.add(row_id)

    def mask_secret(self, row_id: str) -> None:
        self._secret_row(row_id)
        self.visible_secrets.discard(row_id)

    def toggle_secret(self, row_id: str) -> None:
        if row_id in self.visible_secrets:
            self.mask_secret(row_id)
        else:
            self.reveal_secret(row_id)

    def display_secret(self, row_id: str) -> str:
        return self._rendered_secret(self._secret_row(row_id), row_id)

    def _rendered_secret(self, row: Dict[str, Any], row_id: str) -> str:
        secret = row.get(self.definition.secret_field) or ""
        if row_id in self.visible_secrets:
            return secret
        return mask_secret_value(secret, self.mask_char)

    def copy_secret(self, row_id: str) -> str:
        secret = self._secret_row(row_id).get(self.definition.secret_field) or ""
        self.last_copied = secret
        self.notifier.success(f"{self.definition.noun_title} copied to clipboard", title="Copied")
        return secret

    def _secret_row(self, row_id: str) -> Dict[str, Any]:
        self._require(self.definition.secret_field is not None, "secrets")
        return self.find_row(row_id)

    # -- rendering ---------------------------------------------------------

    def find_row(self, row_id: str) -> Dict[str, Any]:
        for row in self.rows:
            if str(row.get("id")) == row_id:
                return row
        raise RowNotFound(row_id)

    def visible_rows(self) -> List[Dict[str, Any]]:
        return self.rows

    def render_row(self, row: Dict[str, Any]) -> RecordView:
        d = self.definition
        row_id = str(row.get("id"))
        fields = {k: v for k, v in row.items() if k not in ("id", d.secret_field)}
        return RecordView(
            id=row_id,
            display_name=_as_text(row.get(d.name_field)),
            secret=self._rendered_secret(row, row_id) if d.secret_field else None,
            secret_visible=row_id in self.visible_secrets,
            enabled=row.get("enabled"),
            usage_counter=row.get(d.usage_field) if d.usage_field else None,
            usage_limit=row.get(d.limit_field) if d.limit_field else None,
            created_at=_as_text(row.get("created_at")),
            updated_at=_as_text(row.get("updated_at")),
            fields=fields,
        )

    def view_data(self) -> Dict[str, Any]:
        if self.definition.options:
            return {"options": self.definition.options}
        return {}

    def snapshot(self) -> SectionView:
        view = super().snapshot()
        if self.state == READY:
            view.rows = [self.render_row(row) for row in self.visible_rows()]
        if self.definition.creatable:
            view.form = self.form.view()
        return view

    def _require(self, supported: bool, operation: str) -> None:
        if not supported:
            raise UnsupportedOperation(self.section_id, operation)
