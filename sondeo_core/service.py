"""
Orquestación de un sondeo: validar, armar contexto y consultar el servicio de análisis.
"""
import logging
from typing import Iterable, List, Optional, Sequence

from .aggregator import ContextAggregator, parse_categories
from .config import MAX_QUERY_LEN, MIN_QUERY_LEN
from .errors import ValidationError
from .gateway import SondeoGateway
from .models import Category, SondeoResult

logger = logging.getLogger(__name__)


def validar_sondeo(pregunta: Optional[str], contextos: Optional[Iterable[str]]) -> List[Category]:
    """Valida la entrada del formulario y devuelve las categorías parseadas."""
    texto = (pregunta or "").strip()
    if not texto:
        raise ValidationError("El tema de consulta es obligatorio")
    if len(texto) < MIN_QUERY_LEN:
        raise ValidationError(f"El tema debe tener al menos {MIN_QUERY_LEN} caracteres")
    if len(texto) > MAX_QUERY_LEN:
        raise ValidationError(f"El tema no puede exceder {MAX_QUERY_LEN} caracteres")

    try:
        categorias = parse_categories(contextos or [])
    except ValueError as e:
        raise ValidationError(str(e)) from e
    if not categorias:
        raise ValidationError("Debe seleccionar al menos un contexto para sondear")
    return categorias


async def sondear_tema(
    pregunta: str,
    contextos: Sequence[str],
    user_id: str,
    *,
    aggregator: ContextAggregator,
    gateway: SondeoGateway,
    access_token: Optional[str] = None,
    monitoreos: Optional[Sequence[str]] = None,
    tendencias: Optional[Sequence[str]] = None,
) -> SondeoResult:
    categorias = validar_sondeo(pregunta, contextos)
    pregunta = pregunta.strip()
    logger.info(
        f"🎯 Iniciando sondeo: pregunta='{pregunta[:120]}', contextos={[c.value for c in categorias]}, "
        f"user={user_id}, token={'sí' if access_token else 'no'}"
    )

    contexto = await aggregator.aggregate(
        pregunta, categorias, user_id, monitoreos=monitoreos, tendencias=tendencias
    )
    try:
        resultado = await gateway.send(contexto, pregunta, user_id, access_token)
    except Exception as e:
        logger.error(f"❌ Error en sondear_tema: {e}")
        raise

    logger.info(f"🏁 Sondeo completado (origen_datos={resultado.origen_datos})")
    return resultado
