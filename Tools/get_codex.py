"""
Obtener documentos del codex personal del usuario (tabla `codex_items`).
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from sondeo_core.interfaces import CodexSource
from sondeo_core.models import CodexItem

logger = logging.getLogger(__name__)


def map_codex_row(row: Dict[str, Any]) -> CodexItem:
    return CodexItem(
        id=str(row["id"]) if row.get("id") is not None else None,
        title=row.get("title") or row.get("titulo") or "",
        content=row.get("content") or row.get("description"),
        tags=row.get("tags") or [],
        created_at=row.get("created_at"),
    )


class SupabaseCodexSource(CodexSource):
    def __init__(self, client: Optional[Client]):
        self.client = client

    def _query(self, user_id: str) -> List[Dict[str, Any]]:
        resp = (
            self.client.table("codex_items")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return resp.data or []

    async def get_codex_items_by_user(self, user_id: str) -> List[CodexItem]:
        if self.client is None:
            return []
        rows = await asyncio.to_thread(self._query, user_id)
        logger.info(f"📚 get_codex_items_by_user: {len(rows)} documentos")
        return [map_codex_row(r) for r in rows]
