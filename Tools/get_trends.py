"""
Obtener tendencias - Última foto de tendencias desde ExtractorW, con respaldo en Supabase.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
from supabase import Client

from sondeo_core.config import EXTRACTORW_API_URL
from sondeo_core.interfaces import TrendsSource
from sondeo_core.models import TrendKeyword, TrendsSnapshot

logger = logging.getLogger(__name__)


def fix_keyword_volumes(keywords: List[Dict[str, Any]], word_cloud: List[Any]) -> List[Dict[str, Any]]:
    """
    Si todas las keywords vienen con count=1, toma el volumen real de wordCloudData
    (match por texto sin distinguir mayúsculas).
    """
    if not keywords or not word_cloud or not all(k.get("count") == 1 for k in keywords):
        return keywords

    volumenes: Dict[str, Any] = {}
    for item in word_cloud:
        if isinstance(item, dict) and item.get("text"):
            volumenes[str(item["text"]).lower()] = item.get("value") or item.get("volume") or 1

    return [
        {**k, "count": volumenes.get(str(k.get("keyword", "")).lower()) or k.get("count") or 1}
        for k in keywords
    ]


def build_snapshot(
    top_keywords: Optional[List[Dict[str, Any]]],
    word_cloud: Optional[List[Any]],
    category_data: Optional[List[Any]],
    about: Optional[List[Any]],
    timestamp: Optional[str],
) -> TrendsSnapshot:
    word_cloud = word_cloud or []
    keywords = fix_keyword_volumes(top_keywords or [], word_cloud)
    return TrendsSnapshot(
        topKeywords=[TrendKeyword(keyword=k["keyword"], count=k.get("count") or 1) for k in keywords if k.get("keyword")],
        wordCloudData=word_cloud,
        categoryData=category_data or [],
        about=about or [],
        timestamp=timestamp,
    )


class ExtractorWTrendsSource(TrendsSource):
    def __init__(
        self,
        client: Optional[Client],
        base_url: str = EXTRACTORW_API_URL,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    async def _from_extractorw(self) -> Optional[TrendsSnapshot]:
        async with httpx.AsyncClient(timeout=30.0, transport=self.transport) as client:
            r = await client.get(f"{self.base_url}/latestTrends")
        if r.status_code == 404:
            logger.info("📭 No hay tendencias previas en ExtractorW")
            return None
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, dict):
            logger.warning(f"⚠️ Respuesta inesperada de ExtractorW /latestTrends: {type(data).__name__}")
            return None
        return build_snapshot(
            data.get("topKeywords"),
            data.get("wordCloudData"),
            data.get("categoryData"),
            data.get("about"),
            data.get("timestamp"),
        )

    def _query_supabase(self) -> Optional[Dict[str, Any]]:
        resp = self.client.table("trends").select("*").order("timestamp", desc=True).limit(1).execute()
        return resp.data[0] if resp.data else None

    async def get_latest_trends(self) -> Optional[TrendsSnapshot]:
        try:
            snapshot = await self._from_extractorw()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ Error obteniendo tendencias de ExtractorW: {e}")
            snapshot = None
        if snapshot is not None:
            logger.info(f"✅ Tendencias obtenidas de ExtractorW: {len(snapshot.topKeywords)} keywords")
            return snapshot

        if self.client is None:
            return None
        logger.info("🔄 Fallback a Supabase para tendencias...")
        row = await asyncio.to_thread(self._query_supabase)
        if row is None:
            logger.info("📭 No se encontraron datos de tendencias en Supabase")
            return None
        return build_snapshot(
            row.get("top_keywords"),
            row.get("word_cloud_data"),
            row.get("category_data"),
            row.get("about"),
            row.get("timestamp"),
        )
