"""
Historial de sondeos del usuario (tabla `sondeos`). Solo lectura: las filas las crea el backend.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from sondeo_core.interfaces import HistorySource
from sondeo_core.models import SondeoHistorialEntry

logger = logging.getLogger(__name__)


class SupabaseHistorySource(HistorySource):
    def __init__(self, client: Optional[Client]):
        self.client = client

    def _query(self, user_email: str) -> List[Dict[str, Any]]:
        resp = (
            self.client.table("sondeos")
            .select("*")
            .eq("email_usuario", user_email)
            .order("created_at", desc=True)
            .execute()
        )
        return resp.data or []

    async def get_sondeos_by_user(self, user_email: str) -> List[SondeoHistorialEntry]:
        if self.client is None:
            return []
        rows = await asyncio.to_thread(self._query, user_email)
        logger.info(f"🗂️ get_sondeos_by_user: {len(rows)} sondeos")
        return [SondeoHistorialEntry(**r) for r in rows]
