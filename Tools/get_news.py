"""
Obtener noticias - Últimas noticias de la tabla `news` en Supabase.
"""
import asyncio
import logging
import re
from typing import Any, Dict, List, Optional

from supabase import Client

from sondeo_core.interfaces import NewsSource
from sondeo_core.models import NewsItem

logger = logging.getLogger(__name__)

_HTML_TAG = re.compile(r"<[^>]*>")
_APPEARED_FIRST = re.compile(r"The post .* appeared first on .*")
_SPACES = re.compile(r"\s+")


def clean_text(text: Optional[str]) -> str:
    """Quita HTML y restos de feeds RSS del resumen."""
    if not text:
        return ""
    text = _HTML_TAG.sub("", text)
    text = text.replace("[&#8230;]", "...")
    text = _APPEARED_FIRST.sub("", text)
    return _SPACES.sub(" ", text).strip()


def map_news_row(row: Dict[str, Any]) -> NewsItem:
    return NewsItem(
        id=str(row["id"]) if row.get("id") is not None else None,
        title=row.get("titulo") or "",
        source=row.get("fuente"),
        date=row.get("fecha"),
        excerpt=clean_text(row.get("resumen")),
        category=row.get("categoria"),
        keywords=row.get("keywords") or [],
        url=row.get("url"),
    )


class SupabaseNewsSource(NewsSource):
    def __init__(self, client: Optional[Client]):
        self.client = client

    def _query(self, limit: int) -> List[Dict[str, Any]]:
        resp = self.client.table("news").select("*").order("fecha", desc=True).limit(limit).execute()
        return resp.data or []

    async def get_latest_news(self, limit: int = 10) -> List[NewsItem]:
        if self.client is None:
            return []
        # supabase-py es síncrono: se ejecuta en un thread para no bloquear el loop
        rows = await asyncio.to_thread(self._query, limit)
        logger.info(f"📊 get_latest_news: {len(rows)} filas")
        return [map_news_row(r) for r in rows]
