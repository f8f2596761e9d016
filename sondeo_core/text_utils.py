"""
Utilidades de texto: filtro de relevancia por palabras clave y resumen por longitud.
"""
import re
import unicodedata

from .config import DEFAULT_MAX_LEN, MIN_TOKEN_LEN

_NON_WORD = re.compile(r"\W+")


def normalize_text(texto: str) -> str:
    """Minúsculas y sin diacríticos (NFD + quitar marcas combinantes)."""
    descompuesto = unicodedata.normalize("NFD", texto.lower())
    return "".join(c for c in descompuesto if not unicodedata.combining(c))


def query_tokens(consulta: str) -> list[str]:
    """Palabras de la consulta con al menos MIN_TOKEN_LEN caracteres."""
    return [p for p in _NON_WORD.split(normalize_text(consulta)) if len(p) >= MIN_TOKEN_LEN]


def is_relevant(texto: str, consulta: str) -> bool:
    """
    True si alguna palabra sustantiva de la consulta aparece en el texto.

    Basta una coincidencia (semántica OR). Textos o consultas vacías, o
    consultas sin palabras de 3+ caracteres, nunca son relevantes.
    """
    if not texto or not consulta:
        return False
    palabras = query_tokens(consulta)
    if not palabras:
        return False
    texto_norm = normalize_text(texto)
    return any(p in texto_norm for p in palabras)


def truncate_text(texto: str | None, max_len: int = DEFAULT_MAX_LEN) -> str:
    """Corte duro a max_len caracteres seguido de '...'."""
    if not texto:
        return ""
    if len(texto) <= max_len:
        return texto
    return texto[:max_len] + "..."
