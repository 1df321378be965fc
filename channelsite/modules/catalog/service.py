"""
Database catalog: the public tables with their row counts, sizes and change
counters, read through execute_sql from the Postgres statistics views.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from channelsite.core.errors import BackendError
from channelsite.database.gateway import BackendGateway
from channelsite.modules.catalog.schemas import ColumnInfo, TableColumns
from channelsite.panels.resource_panel import PanelDefinition, ResourcePanel

logger = logging.getLogger(__name__)

IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

TABLE_STATS_SQL = """
select relname as name,
       n_live_tup as records,
       pg_size_pretty(pg_total_relation_size(relid)) as size,
       n_tup_ins as inserts,
       n_tup_upd as updates,
       n_tup_del as deletes,
       greatest(last_vacuum, last_autovacuum, last_analyze, last_autoanalyze) as last_updated
from pg_stat_user_tables
where schemaname = 'public'
order by relname
"""

COLUMNS_SQL = """
select column_name, data_type, is_nullable, column_default
from information_schema.columns
where table_schema = 'public' and table_name = '{table}'
order by ordinal_position
"""

CATALOG = PanelDefinition(
    section_id="database",
    title="Database Management",
    description="Monitor and manage database tables",
    table="pg_stat_user_tables",
    noun="table",
    name_field="name",
    usage_field="records",
    deletable=False,
    realtime=False,
)


class DatabaseCatalogPanel(ResourcePanel):
    def __init__(self, gateway: BackendGateway, mask_char: str = "•"):
        super().__init__(CATALOG, gateway, mask_char)
        self.inspected: Optional[TableColumns] = None

    async def fetch_rows(self) -> List[Dict[str, Any]]:
        rows = await self.gateway.execute_sql(TABLE_STATS_SQL)
        return [{"id": row["name"], **row} for row in rows if row.get("name")]

    async def columns(self, table: str) -> Optional[TableColumns]:
        if not IDENTIFIER.match(table or ""):
            self.notifier.error(f"'{table}' is not a valid table name")
            return None
        try:
            rows = await self.gateway.execute_sql(COLUMNS_SQL.format(table=table))
        except BackendError as e:
            logger.error(f"Error reading columns of {table}: {e.message}")
            self.notifier.error(e.message, title="Failed to read columns")
            return None
        self.inspected = TableColumns(table=table, columns=[ColumnInfo(**row) for row in rows])
        return self.inspected

    def view_data(self) -> Dict[str, Any]:
        return {"inspected": self.inspected.model_dump() if self.inspected else None}
