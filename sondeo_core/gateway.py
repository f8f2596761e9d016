"""
Cliente del servicio de análisis (ExtractorW): envío de sondeos e historial.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import DEMO_FALLBACK, EXTRACTORW_API_URL, GATEWAY_TIMEOUT
from .errors import GatewayError, MalformedResponseError, ValidationError
from .models import AggregatedContext, Category, SondeoResult
from .normalizer import normalize_response
from .trace import tr

logger = logging.getLogger(__name__)

_ERROR_KEYS = ("error", "message", "mensaje", "detail")


def extract_error_message(response: httpx.Response) -> str:
    """Mensaje de error del cuerpo: JSON estructurado, texto crudo o línea de estado."""
    texto = response.text
    try:
        data = json.loads(texto)
    except (json.JSONDecodeError, ValueError):
        data = None

    if isinstance(data, dict):
        for key in _ERROR_KEYS:
            valor = data.get(key)
            if isinstance(valor, dict):
                valor = valor.get("message") or valor.get("mensaje")
            if isinstance(valor, str) and valor.strip():
                return valor
    elif isinstance(data, str) and data.strip():
        return data

    if texto and texto.strip():
        return texto.strip()
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


def build_payload(contexto: AggregatedContext, pregunta: str) -> Dict[str, Any]:
    selected = list(contexto.contextos_seleccionados) or [Category.TRENDS.value]
    return {
        "pregunta": pregunta,
        "contexto": contexto.to_payload(),
        "selectedContexts": selected,
        "configuracion": {
            "detalle_nivel": "alto",
            "incluir_recomendaciones": True,
            "incluir_visualizaciones": False,
            "tipo_analisis": contexto.tipo_contexto or "general",
            "contexto_original": {
                "tendencias": contexto.tendencias or [],
                "noticias": [n.model_dump(mode="json") for n in contexto.noticias or []],
                "codex": [d.model_dump(mode="json") for d in contexto.documentos or []],
                "monitoreos": [m.model_dump(mode="json") for m in contexto.monitoreos or []],
            },
        },
    }


def _auth_headers(access_token: Optional[str]) -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers


class SondeoGateway:
    """
    Envía el contexto armado al servicio de análisis y normaliza la respuesta.
    Sin reintentos: cualquier falla se propaga como GatewayError.
    """

    def __init__(
        self,
        base_url: str = EXTRACTORW_API_URL,
        *,
        timeout: float = GATEWAY_TIMEOUT,
        demo_fallback: bool = DEMO_FALLBACK,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.demo_fallback = demo_fallback
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def _request(self, method: str, path: str, access_token: Optional[str], **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with self._client() as client:
                r = await client.request(method, url, headers=_auth_headers(access_token), **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"⏳ Timeout llamando a {url}: {e}")
            raise GatewayError(f"Timeout: el servicio de análisis no respondió a tiempo ({url})") from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Error de red llamando a {url}: {e}")
            raise GatewayError(f"No se pudo contactar el servicio de análisis: {e}") from e

        tr(f"{method} {path} -> {r.status_code}")
        if not r.is_success:
            mensaje = extract_error_message(r)
            logger.error(f"❌ {method} {path} respondió {r.status_code}: {mensaje}")
            raise GatewayError(mensaje, status_code=r.status_code)

        try:
            return r.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"❌ Respuesta no es JSON válido ({path}): {r.text[:500]}")
            raise MalformedResponseError(f"Error parsing response: {e}", status_code=r.status_code) from e

    async def post_sondeo(
        self, contexto: AggregatedContext, pregunta: str, access_token: Optional[str] = None
    ) -> Dict[str, Any]:
        logger.info(f"📡 Enviando sondeo con contexto tipo: {contexto.tipo_contexto}")
        body = await self._request("POST", "/sondeo", access_token, json=build_payload(contexto, pregunta))
        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"Formato de respuesta inesperado: se esperaba un objeto JSON, llegó {type(body).__name__}"
            )
        logger.info(
            f"✅ Respuesta de sondeo recibida: success={body.get('success')}, "
            f"tiene_resultado={'resultado' in body}, keys={list(body)}"
        )
        return body

    async def send(
        self,
        contexto: AggregatedContext,
        pregunta: str,
        user_id: str,
        access_token: Optional[str] = None,
    ) -> SondeoResult:
        tr(f"Enviando sondeo user={user_id} token={'sí' if access_token else 'no'}")
        body = await self.post_sondeo(contexto, pregunta, access_token)
        return normalize_response(body, contexto, pregunta, demo_fallback=self.demo_fallback)

    async def get_sondeo_historial(
        self, access_token: Optional[str], limit: int = 10, offset: int = 0
    ) -> List[Dict[str, Any]]:
        if not access_token:
            raise ValidationError("No hay token de acceso disponible")
        data = await self._request(
            "GET", "/sondeo/historial", access_token, params={"limit": limit, "offset": offset}
        )
        if isinstance(data, dict):
            data = data.get("sondeos") or data.get("data") or []
        return data

    async def get_sondeo_by_id(self, sondeo_id: str, access_token: Optional[str]) -> Dict[str, Any]:
        if not access_token:
            raise ValidationError("No hay token de acceso disponible")
        return await self._request("GET", f"/sondeo/{sondeo_id}", access_token)
