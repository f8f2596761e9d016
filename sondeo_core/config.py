"""
Configuración y constantes para sondeos
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _pick_env(varname: str) -> str | None:
    v = os.getenv(varname)
    return v.strip() if v and v.strip() else None


# Servicios externos
EXTRACTORW_API_URL = (_pick_env("EXTRACTORW_API_URL") or "https://server.standatpd.com/api").rstrip("/")
SUPABASE_URL = _pick_env("SUPABASE_URL")
SUPABASE_KEY = _pick_env("SUPABASE_KEY")

# Variables de entorno
TRACE_SONDEO = os.getenv("TRACE_SONDEO", "0") == "1"
DEMO_FALLBACK = os.getenv("SONDEO_DEMO_FALLBACK", "1") == "1"
GATEWAY_TIMEOUT = float(_pick_env("SONDEO_GATEWAY_TIMEOUT") or 120)
MONITOREO_CONCURRENCY = int(_pick_env("SONDEO_MONITOREO_CONCURRENCY") or 4)
NEWS_LIMIT = int(_pick_env("SONDEO_NEWS_LIMIT") or 10)

# Constantes
MAX_ITEMS_POR_CATEGORIA = 5
MAX_LEN_CONTENIDO = 300
DEFAULT_MAX_LEN = 220
MIN_QUERY_LEN = 3
MAX_QUERY_LEN = 200
MIN_TOKEN_LEN = 3
