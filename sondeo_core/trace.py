"""
Traza de consola para depurar el pipeline de sondeos (TRACE_SONDEO=1)
"""
from .config import TRACE_SONDEO


def tr(msg: str) -> None:
    if TRACE_SONDEO:
        print(f"[SONDEO-TRACE] {msg}", flush=True)
