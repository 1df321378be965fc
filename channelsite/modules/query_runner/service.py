import logging
from typing import Any, Dict, Optional

from channelsite.core.errors import BackendError
from channelsite.database.gateway import BackendGateway
from channelsite.modules.query_runner.schemas import QueryResult
from channelsite.panels.base import Section

logger = logging.getLogger(__name__)


class QueryRunner(Section):
    """Administrative SQL console backed by the execute_sql procedure."""

    kind = "query"

    def __init__(self, gateway: BackendGateway):
        super().__init__("query", "Query Runner", "Execute SQL queries directly on the database")
        self.gateway = gateway
        self.last_result: Optional[QueryResult] = None

    async def run(self, sql: str) -> Optional[QueryResult]:
        sql = (sql or "").strip()
        if not sql:
            self.notifier.error("Enter a SQL query to execute")
            return None
        try:
            rows = await self.gateway.execute_sql(sql)
        except BackendError as e:
            # Embedded execute_sql errors and transport failures are shown the same way
            logger.error(f"Query failed: {e.message}")
            self.notifier.error(e.message, title="Query failed")
            result = QueryResult(sql=sql, error=e.message)
        else:
            rows = [row if isinstance(row, dict) else {"value": row} for row in rows]
            columns = list(rows[0].keys()) if rows else []
            result = QueryResult(sql=sql, columns=columns, rows=rows)
        self.last_result = result
        return result

    def view_data(self) -> Dict[str, Any]:
        return {"result": self.last_result.model_dump() if self.last_result else None}
