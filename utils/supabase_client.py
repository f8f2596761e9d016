"""
Cliente de Supabase para las lecturas de contexto e historial.
Usa la librería oficial supabase-py: https://supabase.com/docs/reference/python/introduction
"""
import logging
from typing import Optional

from supabase import Client, create_client

from sondeo_core.config import SUPABASE_KEY, SUPABASE_URL

logger = logging.getLogger(__name__)


def create_supabase_client(url: Optional[str] = SUPABASE_URL, key: Optional[str] = SUPABASE_KEY) -> Optional[Client]:
    """Crea el cliente; devuelve None si faltan credenciales."""
    if not url or not key:
        logger.warning("⚠️ SUPABASE_URL o SUPABASE_KEY no configurados")
        return None

    try:
        client = create_client(url, key)
    except Exception as e:
        error_msg = str(e)
        if "JWT" in error_msg or "invalid api key" in error_msg.lower():
            logger.error("⚠️ Error de autenticación: Verifica SUPABASE_KEY en tu .env")
        else:
            logger.error(f"⚠️ Error inicializando cliente Supabase: {e}")
        raise

    logger.info(f"✅ Cliente Supabase inicializado: {url}")
    return client
