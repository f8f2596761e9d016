"""
Errores del pipeline de sondeos
"""
from typing import Optional


class SondeoError(Exception):
    """Base de todos los errores de sondeos."""


class ValidationError(SondeoError):
    """Entrada inválida; se detecta antes de cualquier llamada de red."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PartialFetchError(SondeoError):
    """Falló un colaborador de contexto; la categoría se omite."""

    def __init__(self, categoria: str, causa: BaseException):
        super().__init__(f"Error obteniendo contexto '{categoria}': {causa}")
        self.categoria = categoria
        self.causa = causa


class GatewayError(SondeoError):
    """El servicio de análisis respondió con error o no fue alcanzable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MalformedResponseError(GatewayError):
    """Respuesta 2xx con un cuerpo que no es un objeto JSON."""
