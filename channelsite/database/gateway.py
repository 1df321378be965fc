"""
Backend gateway: the only place that talks to Supabase.

One instance is built at startup and handed to every panel. It wraps the
async supabase client (PostgREST tables, RPC, realtime, auth admin) and turns
SDK exceptions into the error types in channelsite.core.errors.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from channelsite.core.errors import (
    BackendError, BackendRejectedError, EmbeddedQueryError, TransportError
)

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Dict[str, Any]], None]

USER_FIELDS = ("id", "email", "created_at", "last_sign_in_at", "email_confirmed_at")


def _translate(exc: Exception) -> BackendError:
    if isinstance(exc, BackendError):
        return exc
    if isinstance(exc, httpx.HTTPError):
        return TransportError(str(exc) or exc.__class__.__name__)
    if isinstance(exc, APIError):
        return BackendRejectedError(exc.message or str(exc))
    return BackendRejectedError(str(exc))


class BackendGateway:
    def __init__(self, client: AsyncClient, service_client: Optional[AsyncClient] = None):
        self.client = client
        self.service_client = service_client or client

    async def select_all(self, table: str, order_column: str = "created_at", desc: bool = True) -> List[Dict[str, Any]]:
        """select * from <table> order by <order_column> desc"""
        try:
            result = await self.client.table(table)\
                .select("*")\
                .order(order_column, desc=desc)\
                .execute()
            return result.data or []
        except Exception as e:
            raise _translate(e) from e

    async def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = await self.client.table(table).insert(row).execute()
        except Exception as e:
            raise _translate(e) from e
        if not result.data:
            raise BackendRejectedError(f"Insert into {table} returned no row")
        return result.data[0]

    async def update(self, table: str, row_id: str, patch: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            result = await self.client.table(table)\
                .update(patch)\
                .eq("id", row_id)\
                .execute()
            return result.data or []
        except Exception as e:
            raise _translate(e) from e

    async def delete(self, table: str, row_id: str) -> List[Dict[str, Any]]:
        try:
            result = await self.client.table(table)\
                .delete()\
                .eq("id", row_id)\
                .execute()
            return result.data or []
        except Exception as e:
            raise _translate(e) from e

    async def rpc(self, function: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            result = await self.client.rpc(function, params or {}).execute()
            return result.data
        except Exception as e:
            raise _translate(e) from e

    async def generate_unique_provider_name(self, provider_type: str) -> str:
        return await self.rpc("generate_unique_provider_name", {"provider_type": provider_type})

    async def execute_sql(self, sql_query: str) -> List[Dict[str, Any]]:
        """Run SQL through the execute_sql procedure.

        The procedure reports SQL errors inside a successful response as
        ``{"error": "..."}``, so the payload has to be inspected as well as
        the transport result.
        """
        data = await self.rpc("execute_sql", {"sql_query": sql_query})
        if isinstance(data, dict):
            if data.get("error"):
                raise EmbeddedQueryError(str(data["error"]))
            return [data]
        return data or []

    async def subscribe(self, table: str, on_change: ChangeCallback, channel_name: Optional[str] = None):
        """Open a postgres_changes channel for every event on one table."""
        try:
            channel = self.client.channel(channel_name or f"{table}-changes")
            channel.on_postgres_changes("*", callback=on_change, table=table, schema="public")
            await channel.subscribe()
            logger.info(f"Subscribed to changes on {table}")
            return channel
        except Exception as e:
            raise _translate(e) from e

    async def unsubscribe(self, channel) -> None:
        try:
            await self.client.remove_channel(channel)
        except Exception as e:
            raise _translate(e) from e

    async def list_users(self) -> List[Dict[str, Any]]:
        try:
            users = await self.service_client.auth.admin.list_users()
        except Exception as e:
            raise _translate(e) from e
        return [{field: getattr(user, field, None) for field in USER_FIELDS} for user in users]

    async def delete_user(self, user_id: str) -> None:
        try:
            await self.service_client.auth.admin.delete_user(user_id)
        except Exception as e:
            raise _translate(e) from e
