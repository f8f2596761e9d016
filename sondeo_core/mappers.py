"""
Mapeo de registros crudos de cada colaborador al registro de contexto.
"""
from typing import Any, Callable, Dict

from .config import MAX_LEN_CONTENIDO
from .models import (
    Category,
    CodexItem,
    DocumentoContexto,
    MonitoreoContexto,
    NewsItem,
    NoticiaContexto,
    RecentScrape,
)
from .text_utils import truncate_text


def map_noticia(n: NewsItem) -> NoticiaContexto:
    return NoticiaContexto(
        titulo=n.title,
        contenido=truncate_text(n.excerpt or "", MAX_LEN_CONTENIDO),
        fuente=n.source,
        url=n.url,
        fecha=n.date,
    )


def map_documento(d: CodexItem) -> DocumentoContexto:
    return DocumentoContexto(
        titulo=d.title,
        contenido=truncate_text(d.content or "", MAX_LEN_CONTENIDO),
        tags=d.tags,
        fecha=d.created_at,
    )


def map_monitoreo(m: RecentScrape) -> MonitoreoContexto:
    return MonitoreoContexto(
        id=m.id,
        titulo=m.generated_title or m.query_clean or m.query_original,
        consulta=m.query_original,
        herramienta=m.herramienta,
        categoria=m.categoria or "General",
        fecha=m.created_at,
        tweet_count=m.tweet_count or 0,
    )


# Texto contra el que se evalúa la relevancia de cada registro
RELEVANCE_TEXT: Dict[Category, Callable[[Any], str]] = {
    Category.NEWS: lambda n: f"{n.title} {n.excerpt or ''}",
    Category.CODEX: lambda d: f"{d.title} {d.content or ''}",
}

CATEGORY_MAPPERS: Dict[Category, Callable[[Any], Any]] = {
    Category.NEWS: map_noticia,
    Category.CODEX: map_documento,
    Category.MONITORING: map_monitoreo,
}
