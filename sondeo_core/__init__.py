"""
Módulo sondeo_core - Armado de contexto, relevancia y consulta al servicio de análisis
"""
from .models import (
    AggregatedContext,
    Category,
    SondeoHistorialEntry,
    SondeoRequest,
    SondeoResult,
)
from .errors import (
    GatewayError,
    MalformedResponseError,
    PartialFetchError,
    SondeoError,
    ValidationError,
)
from .text_utils import is_relevant, truncate_text
from .aggregator import ContextAggregator
from .gateway import SondeoGateway
from .normalizer import normalize_response
from .demo_data import generate_demo_data
from .service import sondear_tema, validar_sondeo

__all__ = [
    "AggregatedContext",
    "Category",
    "SondeoHistorialEntry",
    "SondeoRequest",
    "SondeoResult",
    "GatewayError",
    "MalformedResponseError",
    "PartialFetchError",
    "SondeoError",
    "ValidationError",
    "is_relevant",
    "truncate_text",
    "ContextAggregator",
    "SondeoGateway",
    "normalize_response",
    "generate_demo_data",
    "sondear_tema",
    "validar_sondeo",
]
