"""
Obtener monitoreos (capturas de redes sociales) por id desde `recent_scrapes`.
"""
import asyncio
from typing import Any, Dict, List, Optional

from supabase import Client

from sondeo_core.interfaces import MonitoringSource
from sondeo_core.models import RecentScrape


class SupabaseMonitoringSource(MonitoringSource):
    def __init__(self, client: Optional[Client]):
        self.client = client

    def _query(self, scrape_id: str) -> List[Dict[str, Any]]:
        resp = self.client.table("recent_scrapes").select("*").eq("id", scrape_id).limit(1).execute()
        return resp.data or []

    async def get_recent_scrape_by_id(self, scrape_id: str) -> Optional[RecentScrape]:
        if self.client is None:
            return None
        rows = await asyncio.to_thread(self._query, scrape_id)
        if not rows:
            return None
        row = dict(rows[0])
        row["id"] = str(row["id"])
        row["query_original"] = row.get("query_original") or ""
        return RecentScrape(**row)
