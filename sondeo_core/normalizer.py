"""
Normalización de la respuesta del servicio de análisis.

La respuesta no tiene una forma única: los campos pueden venir anidados en
`resultado` o al nivel raíz. Cada campo tiene una lista ordenada de
extractores y gana el primero que devuelve un valor aceptable.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from .config import DEMO_FALLBACK
from .demo_data import generate_demo_data
from .models import AggregatedContext, Category, SondeoResult
from .trace import tr

logger = logging.getLogger(__name__)

Extractor = Callable[[Dict[str, Any]], Any]

SIN_RESPUESTA = "No se obtuvo respuesta del servicio."


def path(*keys: str) -> Extractor:
    def extract(body: Dict[str, Any]) -> Any:
        actual: Any = body
        for key in keys:
            if not isinstance(actual, dict):
                return None
            actual = actual.get(key)
        return actual

    extract.__name__ = ".".join(keys)
    return extract


RESPUESTA_EXTRACTORS: List[Extractor] = [
    path("resultado", "respuesta"),
    path("respuesta"),
]
FUENTES_EXTRACTORS: List[Extractor] = [
    path("resultado", "fuentes"),
    path("fuentes"),
]
DATOS_EXTRACTORS: List[Extractor] = [
    path("resultado", "datos_analisis"),
    path("resultado", "datos_visualizacion"),
    path("datos_analisis"),
    path("datos_visualizacion"),
]


def first_present(
    body: Dict[str, Any],
    extractors: List[Extractor],
    accept: Callable[[Any], bool] = lambda v: v is not None,
) -> Optional[Any]:
    for extractor in extractors:
        valor = extractor(body)
        if accept(valor):
            return valor
    return None


def _texto_no_vacio(valor: Any) -> bool:
    return isinstance(valor, str) and bool(valor.strip())


def normalize_response(
    body: Dict[str, Any],
    contexto: AggregatedContext,
    pregunta: str,
    *,
    demo_fallback: bool = DEMO_FALLBACK,
) -> SondeoResult:
    respuesta = first_present(body, RESPUESTA_EXTRACTORS, _texto_no_vacio) or SIN_RESPUESTA
    fuentes = first_present(body, FUENTES_EXTRACTORS)
    datos = first_present(body, DATOS_EXTRACTORS, lambda v: isinstance(v, dict))

    creditos = body.get("creditos") if isinstance(body.get("creditos"), dict) else None
    if creditos:
        logger.info(
            f"💳 Créditos: costo={creditos.get('costo_total')}, "
            f"restantes={creditos.get('creditos_restantes')}"
        )

    if datos is not None:
        origen = "gateway"
    elif demo_fallback:
        tipo = contexto.contextos_seleccionados[0] if contexto.contextos_seleccionados else Category.TRENDS.value
        logger.warning(
            f"⚠️ DEMO_FALLBACK: la respuesta no trae datos de análisis; "
            f"se usan datos de demostración tipo={tipo}"
        )
        tr(f"DEMO_FALLBACK tipo={tipo}")
        datos = generate_demo_data(tipo, pregunta)
        origen = "demo"
    else:
        logger.warning("⚠️ La respuesta no trae datos de análisis (fallback de demostración desactivado)")
        origen = "sin_datos"

    return SondeoResult(
        contexto=contexto,
        llm_response=respuesta,
        llm_sources=fuentes,
        datos_analisis=datos,
        origen_datos=origen,
        creditos=creditos,
    )
