"""Interfaces de los colaboradores que alimentan el contexto de un sondeo."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import CodexItem, NewsItem, RecentScrape, SondeoHistorialEntry, TrendsSnapshot


class NewsSource(ABC):
    @abstractmethod
    async def get_latest_news(self, limit: int = 10) -> List[NewsItem]:
        """Últimas noticias, más recientes primero."""


class CodexSource(ABC):
    @abstractmethod
    async def get_codex_items_by_user(self, user_id: str) -> List[CodexItem]:
        """Documentos del codex personal del usuario."""


class TrendsSource(ABC):
    @abstractmethod
    async def get_latest_trends(self) -> Optional[TrendsSnapshot]:
        """Última foto de tendencias, o None si no hay datos."""


class MonitoringSource(ABC):
    @abstractmethod
    async def get_recent_scrape_by_id(self, scrape_id: str) -> Optional[RecentScrape]:
        """Un monitoreo (captura de redes) por id, o None si no existe."""


class HistorySource(ABC):
    @abstractmethod
    async def get_sondeos_by_user(self, user_email: str) -> List[SondeoHistorialEntry]:
        """Historial de sondeos del usuario, más recientes primero."""
