"""Shared fixtures: an in-memory backend standing in for Supabase."""

import asyncio
import copy
import os
import uuid
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("RATE_LIMIT", "10000/minute")

import pytest  # noqa: E402

from channelsite.core.errors import BackendError  # noqa: E402
from channelsite.database.gateway import BackendGateway  # noqa: E402

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)

# Column defaults the real tables get from Postgres
TABLE_DEFAULTS = {
    "ai_api_keys": {"enabled": True, "requests_used": 0},
    "youtube_api_keys": {"enabled": True, "quota_used": 0},
    "github_tokens": {"enabled": True, "commits_count": 0},
    "netlify_api_keys": {"enabled": True, "deployments_count": 0},
    "api_keys": {"enabled": True},
    "projects": {"status": "draft"},
}


class FakeChannel:
    def __init__(self, name: str, table: str, callback: Callable[[Dict[str, Any]], None]):
        self.name = name
        self.table = table
        self.callback = callback


class FakeBackend(BackendGateway):
    """In-memory gateway.

    Rows live in plain lists per table. Every write notifies the channels
    open on that table synchronously, the way a realtime broadcast would.
    ``fail(op, message)`` makes one kind of call raise until ``recover(op)``.
    ``hold_selects()`` makes selects snapshot their rows and then wait until
    ``release_selects()`` is called.
    """

    def __init__(self):
        super().__init__(client=None)
        self.tables: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.users: List[Dict[str, Any]] = []
        self.channels: List[FakeChannel] = []
        self.failures: Dict[str, BackendError] = {}
        self.sql_responses: Dict[str, Any] = {}
        self.calls: List[tuple] = []
        self._clock = 0
        self._select_gate: Optional[asyncio.Event] = None

    # -- test controls -----------------------------------------------------

    def fail(self, op: str, message: str = "backend unavailable", error_cls=BackendError):
        self.failures[op] = error_cls(message)

    def recover(self, op: str):
        self.failures.pop(op, None)

    def hold_selects(self) -> asyncio.Event:
        self._select_gate = asyncio.Event()
        return self._select_gate

    def release_selects(self):
        gate, self._select_gate = self._select_gate, None
        if gate is not None:
            gate.set()

    def seed(self, table: str, **row) -> Dict[str, Any]:
        """Insert a row without notifying anyone."""
        return self._store(table, row)

    def external_insert(self, table: str, **row) -> Dict[str, Any]:
        """A row written by someone else; subscribers hear about it."""
        stored = self._store(table, row)
        self._notify(table, "INSERT", stored)
        return stored

    def add_user(self, email: str, **fields) -> Dict[str, Any]:
        user = {
            "id": fields.pop("id", str(uuid.uuid4())),
            "email": email,
            "created_at": self._tick().isoformat(),
            "last_sign_in_at": None,
            "email_confirmed_at": None,
        }
        user.update(fields)
        self.users.append(user)
        return user

    def count_calls(self, op: str) -> int:
        return sum(1 for call in self.calls if call[0] == op)

    # -- gateway interface -------------------------------------------------

    async def select_all(self, table, order_column="created_at", desc=True):
        self._record("select", table)
        rows = [copy.deepcopy(r) for r in self.tables[table]]
        rows.sort(key=lambda r: str(r.get(order_column) or ""), reverse=desc)
        if self._select_gate is not None:
            await self._select_gate.wait()
        return rows

    async def insert(self, table, row):
        self._record("insert", table, row)
        stored = self._store(table, row)
        self._notify(table, "INSERT", stored)
        return copy.deepcopy(stored)

    async def update(self, table, row_id, patch):
        self._record("update", table, row_id, patch)
        updated = []
        for row in self.tables[table]:
            if str(row["id"]) == str(row_id):
                row.update(patch)
                row["updated_at"] = self._tick().isoformat()
                updated.append(copy.deepcopy(row))
                self._notify(table, "UPDATE", row)
        return updated

    async def delete(self, table, row_id):
        self._record("delete", table, row_id)
        removed = [r for r in self.tables[table] if str(r["id"]) == str(row_id)]
        self.tables[table] = [r for r in self.tables[table] if str(r["id"]) != str(row_id)]
        for row in removed:
            self._notify(table, "DELETE", row)
        return removed

    async def rpc(self, function, params=None):
        self._record("rpc", function, params)
        params = params or {}
        if function == "execute_sql":
            response = self.sql_responses.get(params["sql_query"].strip(), [])
            return response(params["sql_query"]) if callable(response) else copy.deepcopy(response)
        if function == "generate_unique_provider_name":
            provider = params["provider_type"]
            taken = {r.get("name") for r in self.tables["ai_api_keys"]}
            n = 1
            while f"{provider}-{n}" in taken:
                n += 1
            return f"{provider}-{n}"
        if function == "update_system_status":
            for row in self.tables["system_status"]:
                row["last_checked"] = self._tick().isoformat()
                self._notify("system_status", "UPDATE", row)
            return None
        raise BackendError(f"function {function} does not exist")

    async def subscribe(self, table, on_change, channel_name=None):
        self._record("subscribe", table)
        name = channel_name or f"{table}-changes"
        # the realtime client reuses a registered topic and refuses a second subscribe
        if any(c.name == name for c in self.channels):
            raise BackendError("Tried to subscribe multiple times")
        channel = FakeChannel(name, table, on_change)
        self.channels.append(channel)
        return channel

    async def unsubscribe(self, channel):
        self._record("unsubscribe", channel.table)
        self.channels.remove(channel)

    async def list_users(self):
        self._record("list_users")
        return [copy.deepcopy(u) for u in self.users]

    async def delete_user(self, user_id):
        self._record("delete_user", user_id)
        self.users = [u for u in self.users if u["id"] != user_id]

    # -- internals ---------------------------------------------------------

    def _record(self, op: str, *args):
        self.calls.append((op,) + args)
        error = self.failures.get(op)
        if error is not None:
            raise error

    def _tick(self) -> datetime:
        self._clock += 1
        return EPOCH + timedelta(seconds=self._clock)

    def _store(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        stored = dict(TABLE_DEFAULTS.get(table, {}))
        stored.update(row)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", self._tick().isoformat())
        self.tables[table].append(stored)
        return stored

    def _notify(self, table: str, event: str, row: Dict[str, Any]):
        for channel in list(self.channels):
            if channel.table == table:
                channel.callback({"eventType": event, "table": table, "new": copy.deepcopy(row)})


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api_client(backend):
    """TestClient over the real app with the fake backend wired in."""
    from fastapi.testclient import TestClient
    from channelsite.main import app
    from channelsite.shell.sessions import DashboardSessions

    app.state.gateway = backend
    app.state.sessions = DashboardSessions(backend, "•", max_sessions=10)
    with TestClient(app) as client:
        yield client
    app.state.gateway = None
    app.state.sessions = None
