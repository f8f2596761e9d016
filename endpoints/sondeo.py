# endpoints/sondeo.py
# Sondeos: arma el contexto, consulta el servicio de análisis y expone el historial.
# Notes:
# - El token Bearer del usuario se reenvía tal cual al servicio de análisis
# - TRACE_SONDEO=1 imprime la traza del pipeline en consola

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request

from sondeo_core import (
    ContextAggregator,
    GatewayError,
    SondeoGateway,
    SondeoHistorialEntry,
    SondeoRequest,
    ValidationError,
    generate_demo_data,
    sondear_tema,
)
from sondeo_core.interfaces import HistorySource
from Tools.get_codex import SupabaseCodexSource
from Tools.get_monitoreos import SupabaseMonitoringSource
from Tools.get_news import SupabaseNewsSource
from Tools.get_sondeos import SupabaseHistorySource
from Tools.get_trends import ExtractorWTrendsSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sondeo", tags=["sondeos"])


# --------------------------
# Dependencias
# --------------------------

def get_supabase(request: Request):
    return getattr(request.app.state, "supabase", None)


def get_aggregator(supabase=Depends(get_supabase)) -> ContextAggregator:
    return ContextAggregator(
        news=SupabaseNewsSource(supabase),
        codex=SupabaseCodexSource(supabase),
        trends=ExtractorWTrendsSource(supabase),
        monitoring=SupabaseMonitoringSource(supabase),
    )


def get_gateway() -> SondeoGateway:
    return SondeoGateway()


def get_history(supabase=Depends(get_supabase)) -> HistorySource:
    return SupabaseHistorySource(supabase)


def bearer_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return None


def _gateway_http_error(e: GatewayError) -> HTTPException:
    status = e.status_code if e.status_code and 400 <= e.status_code < 500 else 502
    return HTTPException(status_code=status, detail=e.message)


# --------------------------
# Rutas
# --------------------------

@router.post("")
async def crear_sondeo(
    req: SondeoRequest,
    aggregator: ContextAggregator = Depends(get_aggregator),
    gateway: SondeoGateway = Depends(get_gateway),
    token: Optional[str] = Depends(bearer_token),
) -> Dict[str, Any]:
    try:
        resultado = await sondear_tema(
            req.pregunta,
            req.contextos,
            req.user_id,
            aggregator=aggregator,
            gateway=gateway,
            access_token=token,
            monitoreos=req.monitoreos,
            tendencias=req.tendencias,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except GatewayError as e:
        raise _gateway_http_error(e)
    return resultado.model_dump(mode="json", by_alias=True)


@router.get("/historial")
async def historial_sondeos(
    user_email: str = Query(..., min_length=3),
    history: HistorySource = Depends(get_history),
) -> List[SondeoHistorialEntry]:
    return await history.get_sondeos_by_user(user_email)


@router.get("/historial/remoto")
async def historial_remoto(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    gateway: SondeoGateway = Depends(get_gateway),
    token: Optional[str] = Depends(bearer_token),
) -> Any:
    try:
        return await gateway.get_sondeo_historial(token, limit=limit, offset=offset)
    except ValidationError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except GatewayError as e:
        raise _gateway_http_error(e)


@router.get("/demo/{tipo}")
async def demo_sondeo(tipo: str, consulta: str = Query("", max_length=200)) -> Dict[str, Any]:
    return generate_demo_data(tipo, consulta)


@router.get("/{sondeo_id}")
async def obtener_sondeo(
    sondeo_id: str,
    gateway: SondeoGateway = Depends(get_gateway),
    token: Optional[str] = Depends(bearer_token),
) -> Any:
    try:
        return await gateway.get_sondeo_by_id(sondeo_id, token)
    except ValidationError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except GatewayError as e:
        raise _gateway_http_error(e)
