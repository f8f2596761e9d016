"""
Armado del contexto de un sondeo a partir de las fuentes seleccionadas.
"""
import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import MAX_ITEMS_POR_CATEGORIA, MONITOREO_CONCURRENCY, NEWS_LIMIT
from .errors import PartialFetchError
from .interfaces import CodexSource, MonitoringSource, NewsSource, TrendsSource
from .mappers import CATEGORY_MAPPERS, RELEVANCE_TEXT
from .models import AggregatedContext, Category, RecentScrape
from .text_utils import is_relevant
from .trace import tr

logger = logging.getLogger(__name__)


def parse_categories(categorias: Iterable["str | Category"]) -> List[Category]:
    """Parsea y deduplica conservando el orden de selección."""
    vistas: List[Category] = []
    for c in categorias:
        cat = Category.parse(c)
        if cat not in vistas:
            vistas.append(cat)
    return vistas


def build_tipo_contexto(categorias: Sequence[Category]) -> str:
    return "+".join(sorted(c.value for c in categorias))


class ContextAggregator:
    """
    Consulta cada fuente habilitada, filtra por relevancia y arma un
    AggregatedContext. Las fuentes se consultan en paralelo; si una falla
    se registra y su categoría se omite del resultado.
    """

    def __init__(
        self,
        news: NewsSource,
        codex: CodexSource,
        trends: TrendsSource,
        monitoring: MonitoringSource,
        *,
        news_limit: int = NEWS_LIMIT,
        monitoreo_concurrency: int = MONITOREO_CONCURRENCY,
    ):
        self.news = news
        self.codex = codex
        self.trends = trends
        self.monitoring = monitoring
        self.news_limit = news_limit
        self.monitoreo_concurrency = max(1, monitoreo_concurrency)

    async def aggregate(
        self,
        consulta: str,
        categorias: Iterable["str | Category"],
        user_id: str,
        monitoreos: Optional[Sequence[str]] = None,
        tendencias: Optional[Sequence[str]] = None,
    ) -> AggregatedContext:
        seleccionadas = parse_categories(categorias)
        tr(f"Armando contexto categorias={[c.value for c in seleccionadas]} consulta='{consulta[:120]}'")
        logger.info(
            f"🎯 Armando contexto: categorias={[c.value for c in seleccionadas]}, "
            f"monitoreos={len(monitoreos or [])}, tendencias_explicitas={len(tendencias or [])}"
        )

        tareas: Dict[Category, Any] = {}
        if Category.TRENDS in seleccionadas:
            tareas[Category.TRENDS] = self._fetch_trends(tendencias)
        if Category.NEWS in seleccionadas:
            tareas[Category.NEWS] = self._fetch_news(consulta)
        if Category.CODEX in seleccionadas:
            tareas[Category.CODEX] = self._fetch_codex(consulta, user_id)
        if Category.MONITORING in seleccionadas and monitoreos:
            tareas[Category.MONITORING] = self._fetch_monitoreos(monitoreos)

        resultados = await asyncio.gather(*tareas.values(), return_exceptions=True)

        campos: Dict[str, Any] = {}
        fallidas: List[str] = []
        for categoria, resultado in zip(tareas, resultados):
            if isinstance(resultado, BaseException):
                if not isinstance(resultado, Exception):
                    raise resultado
                error = PartialFetchError(categoria.value, resultado)
                logger.error(f"❌ {error}")
                tr(f"Categoría {categoria.value} omitida: {resultado}")
                fallidas.append(categoria.value)
                continue
            campos.update(resultado)

        contexto = AggregatedContext(
            input=consulta,
            contextos_seleccionados=[c.value for c in seleccionadas],
            tipo_contexto=build_tipo_contexto(seleccionadas),
            tema_consulta=consulta,
            metadata={"categorias_fallidas": fallidas},
            **campos,
        )
        logger.info(
            "✅ Contexto armado: "
            + ", ".join(f"{c.value}={len(v)}" for c, v in contexto.categorias_presentes.items())
        )
        return contexto

    async def _fetch_trends(self, seleccion: Optional[Sequence[str]]) -> Dict[str, Any]:
        # La selección del usuario ya está curada: no se filtra por relevancia
        if seleccion:
            logger.info(f"📊 Usando tendencias seleccionadas por el usuario: {len(seleccion)}")
            return {"tendencias": list(seleccion), "wordcloud": [], "about": []}

        logger.info("📊 Obteniendo tendencias automáticamente...")
        snapshot = await self.trends.get_latest_trends()
        if snapshot is None:
            return {"tendencias": [], "wordcloud": [], "about": []}
        return {
            "tendencias": [k.keyword for k in snapshot.topKeywords],
            "wordcloud": snapshot.wordCloudData,
            "about": snapshot.about,
        }

    async def _fetch_news(self, consulta: str) -> Dict[str, Any]:
        logger.info("📰 Obteniendo noticias...")
        items = await self.news.get_latest_news(self.news_limit)
        texto = RELEVANCE_TEXT[Category.NEWS]
        relevantes = [CATEGORY_MAPPERS[Category.NEWS](n) for n in items if is_relevant(texto(n), consulta)]
        logger.info(f"✅ Noticias: {len(items)} obtenidas, {len(relevantes)} relevantes")
        return {"noticias": relevantes[:MAX_ITEMS_POR_CATEGORIA]}

    async def _fetch_codex(self, consulta: str, user_id: str) -> Dict[str, Any]:
        logger.info("📚 Obteniendo documentos de codex...")
        items = await self.codex.get_codex_items_by_user(user_id)
        texto = RELEVANCE_TEXT[Category.CODEX]
        relevantes = [CATEGORY_MAPPERS[Category.CODEX](d) for d in items if is_relevant(texto(d), consulta)]
        logger.info(f"✅ Documentos de codex: {len(items)} obtenidos, {len(relevantes)} relevantes")
        return {"documentos": relevantes[:MAX_ITEMS_POR_CATEGORIA]}

    async def _fetch_monitoreos(self, ids: Sequence[str]) -> Dict[str, Any]:
        logger.info(f"🔍 Obteniendo {len(ids)} monitoreos seleccionados...")
        semaforo = asyncio.Semaphore(self.monitoreo_concurrency)

        async def fetch_one(monitoreo_id: str) -> Optional[RecentScrape]:
            async with semaforo:
                try:
                    return await self.monitoring.get_recent_scrape_by_id(monitoreo_id)
                except Exception as e:
                    logger.error(f"❌ Error obteniendo monitoreo {monitoreo_id}: {e}")
                    return None

        encontrados = await asyncio.gather(*(fetch_one(i) for i in ids))
        monitoreos = [CATEGORY_MAPPERS[Category.MONITORING](m) for m in encontrados if m is not None]
        if not monitoreos:
            logger.info("📭 Ningún monitoreo seleccionado pudo obtenerse")
            return {}
        logger.info(f"✅ Monitoreos obtenidos: {len(monitoreos)}")
        return {"monitoreos": monitoreos}
