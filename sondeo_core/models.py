"""
Modelos Pydantic para sondeos
"""
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    TRENDS = "tendencias"
    NEWS = "noticias"
    CODEX = "codex"
    MONITORING = "monitoreos"

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """Acepta el valor en español o su alias en inglés."""
        if isinstance(value, Category):
            return value
        key = (value or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Categoría de contexto desconocida: {value!r}")


_ALIASES = {
    "trends": Category.TRENDS,
    "news": Category.NEWS,
    "monitoring": Category.MONITORING,
    "monitoreo": Category.MONITORING,
}


# ─────────────────────────────────────────────────────────────────────────────
# Registros crudos de los colaboradores
# ─────────────────────────────────────────────────────────────────────────────

class NewsItem(BaseModel):
    id: Optional[str] = None
    title: str = ""
    excerpt: str = ""
    source: Optional[str] = None
    url: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class CodexItem(BaseModel):
    id: Optional[str] = None
    title: str = ""
    content: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None


class TrendKeyword(BaseModel):
    keyword: str
    count: float = 1


class TrendsSnapshot(BaseModel):
    topKeywords: List[TrendKeyword] = Field(default_factory=list)
    wordCloudData: List[Any] = Field(default_factory=list)
    categoryData: List[Any] = Field(default_factory=list)
    about: List[Any] = Field(default_factory=list)
    timestamp: Optional[str] = None


class RecentScrape(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    query_original: str = ""
    query_clean: Optional[str] = None
    generated_title: Optional[str] = None
    herramienta: Optional[str] = None
    categoria: Optional[str] = None
    created_at: Optional[str] = None
    tweet_count: Optional[int] = None


# ─────────────────────────────────────────────────────────────────────────────
# Registros de contexto (lo que se envía al servicio de análisis)
# ─────────────────────────────────────────────────────────────────────────────

class NoticiaContexto(BaseModel):
    titulo: str
    contenido: str
    fuente: Optional[str] = None
    url: Optional[str] = None
    fecha: Optional[str] = None


class DocumentoContexto(BaseModel):
    titulo: str
    contenido: str
    tags: List[str] = Field(default_factory=list)
    fecha: Optional[str] = None


class MonitoreoContexto(BaseModel):
    id: str
    titulo: str
    consulta: str
    herramienta: Optional[str] = None
    categoria: str = "General"
    fecha: Optional[str] = None
    tweet_count: int = 0


# Campo de AggregatedContext donde vive cada categoría
CATEGORY_FIELDS: Dict[Category, str] = {
    Category.TRENDS: "tendencias",
    Category.NEWS: "noticias",
    Category.CODEX: "documentos",
    Category.MONITORING: "monitoreos",
}


class AggregatedContext(BaseModel):
    input: str
    contextos_seleccionados: List[str]
    tipo_contexto: str
    tema_consulta: Optional[str] = None

    tendencias: Optional[List[str]] = None
    wordcloud: Optional[List[Any]] = None
    about: Optional[List[Any]] = None
    noticias: Optional[List[NoticiaContexto]] = None
    documentos: Optional[List[DocumentoContexto]] = None
    monitoreos: Optional[List[MonitoreoContexto]] = None

    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def categorias_presentes(self) -> Dict[Category, List[Any]]:
        """Categorías que sí quedaron en el contexto, con sus registros."""
        presentes: Dict[Category, List[Any]] = {}
        for categoria, campo in CATEGORY_FIELDS.items():
            valor = getattr(self, campo)
            if valor is not None:
                presentes[categoria] = valor
        return presentes

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


OrigenDatos = Literal["gateway", "demo", "sin_datos"]


class SondeoResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contexto: AggregatedContext
    llm_response: str = Field(alias="llmResponse")
    llm_sources: Optional[Any] = Field(default=None, alias="llmSources")
    datos_analisis: Optional[Dict[str, Any]] = Field(default=None, alias="datosAnalisis")
    origen_datos: OrigenDatos = Field(default="gateway", alias="origenDatos")
    creditos: Optional[Dict[str, Any]] = None


class SondeoHistorialEntry(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any
    pregunta: Optional[str] = None
    respuesta_llm: Optional[str] = None
    datos_analisis: Optional[Any] = None
    contextos_utilizados: Optional[Any] = None
    created_at: Optional[str] = None
    creditos_utilizados: Optional[float] = None
    modelo_ia: Optional[str] = None
    tokens_utilizados: Optional[int] = None


class SondeoRequest(BaseModel):
    pregunta: str
    contextos: List[str]
    user_id: str
    monitoreos: Optional[List[str]] = None
    tendencias: Optional[List[str]] = None
