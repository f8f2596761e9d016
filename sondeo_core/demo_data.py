"""
Datos de demostración para las visualizaciones de un sondeo.

Función pura de (tipo, consulta): los valores son constantes y solo los
textos interpolan la consulta. Cada llamada construye estructuras nuevas,
así que el llamador puede mutarlas sin afectar otras llamadas.
"""
from typing import Any, Callable, Dict

from .models import Category


def _tendencias(consulta: str) -> Dict[str, Any]:
    return {
        "temas_relevantes": [
            {"tema": f"{consulta} - Política", "valor": 85, "descripcion": "Impacto en políticas públicas nacionales"},
            {"tema": f"{consulta} - Economía", "valor": 67, "descripcion": "Efectos en el desarrollo económico regional"},
            {"tema": f"{consulta} - Internacional", "valor": 54, "descripcion": "Relaciones y cooperación internacional"},
            {"tema": f"{consulta} - Tecnología", "valor": 42, "descripcion": "Innovación y transformación digital"},
            {"tema": f"{consulta} - Cultura", "valor": 38, "descripcion": "Expresiones culturales y sociales"},
        ],
        "distribucion_categorias": [
            {"categoria": "Política", "valor": 35},
            {"categoria": "Economía", "valor": 28},
            {"categoria": "Internacional", "valor": 17},
            {"categoria": "Tecnología", "valor": 12},
            {"categoria": "Cultura", "valor": 8},
        ],
        "mapa_menciones": [
            {"region": "Guatemala", "valor": 48},
            {"region": "Zona Metro", "valor": 35},
            {"region": "Occidente", "valor": 25},
            {"region": "Oriente", "valor": 18},
            {"region": "Norte", "valor": 12},
        ],
        "subtemas_relacionados": [
            {"subtema": "Financiamiento", "relacion": 85},
            {"subtema": "Regulación", "relacion": 72},
            {"subtema": "Sostenibilidad", "relacion": 64},
            {"subtema": "Impacto Social", "relacion": 53},
            {"subtema": "Inversión", "relacion": 47},
        ],
        "evolucion_sentimiento": [
            {"categoria": "Política", "positivo": 35, "neutral": 45, "negativo": 20,
             "discurso_informativo": 60, "discurso_opinativo": 75, "discurso_emocional": 45},
            {"categoria": "Economía", "positivo": 55, "neutral": 30, "negativo": 15,
             "discurso_informativo": 80, "discurso_opinativo": 40, "discurso_emocional": 25},
            {"categoria": "Social", "positivo": 40, "neutral": 35, "negativo": 25,
             "discurso_informativo": 50, "discurso_opinativo": 60, "discurso_emocional": 70},
            {"categoria": "Tecnología", "positivo": 65, "neutral": 25, "negativo": 10,
             "discurso_informativo": 85, "discurso_opinativo": 30, "discurso_emocional": 20},
        ],
        "cronologia_eventos": [
            {"fecha": "2024-01-15", "evento": "Debate presidencial", "impacto": "Alto"},
            {"fecha": "2024-01-10", "evento": "Reforma económica", "impacto": "Medio"},
            {"fecha": "2024-01-05", "evento": "Protesta social", "impacto": "Alto"},
        ],
        "conclusiones": {
            "temas_relevantes": f"Los temas relacionados con {consulta} muestran mayor relevancia en el ámbito político (85%) y económico (67%), indicando que este tema tiene un impacto significativo en las decisiones gubernamentales y el desarrollo económico del país.",
            "distribucion_categorias": f"La distribución por categorías revela que {consulta} se concentra principalmente en Política (35%) y Economía (28%), representando el 63% de toda la conversación, lo que sugiere una alta prioridad en la agenda nacional.",
            "mapa_menciones": f"Geográficamente, {consulta} tiene mayor resonancia en Guatemala capital (48%) y la Zona Metropolitana (35%), concentrando el 83% de las menciones en el área central del país.",
            "subtemas_relacionados": f"Los subtemas más relacionados son Financiamiento (85%) y Regulación (72%), indicando que {consulta} requiere principalmente atención en aspectos económicos y marco normativo.",
            "evolucion_sentimiento": f"El sentimiento sobre {consulta} es mayormente positivo en Tecnología (65%) y Economía (55%), mientras que Política concentra el discurso más opinativo (75%) y Social el más emocional (70%).",
            "cronologia_eventos": f"La conversación sobre {consulta} se articula alrededor de tres eventos recientes, dos de ellos de alto impacto: el debate presidencial y la protesta social.",
        },
        "metodologia": {
            "temas_relevantes": "Análisis de tendencias actuales filtradas por relevancia semántica y frecuencia de mención",
            "distribucion_categorias": "Clasificación automática de contenido usando categorías predefinidas del sistema",
            "mapa_menciones": "Geolocalización de menciones basada en datos de ubicación y referencias geográficas",
            "subtemas_relacionados": "Análisis de co-ocurrencia y correlación semántica entre términos relacionados",
            "evolucion_sentimiento": "Clasificación de sentimiento y tipo de discurso por categoría temática",
            "cronologia_eventos": "Detección de eventos por picos de mención y ordenamiento temporal",
        },
    }


def _noticias(consulta: str) -> Dict[str, Any]:
    return {
        "noticias_relevantes": [
            {"titulo": f"{consulta} - Impacto Nacional", "relevancia": 92, "descripcion": "Análisis del impacto en desarrollo económico"},
            {"titulo": f"{consulta} - Políticas Nuevas", "relevancia": 87, "descripcion": "Anuncio de nuevas políticas gubernamentales"},
            {"titulo": f"{consulta} - Comunidades", "relevancia": 76, "descripcion": "Organización de comunidades rurales"},
            {"titulo": f"{consulta} - Perspectiva Internacional", "relevancia": 68, "descripcion": "Debate de especialistas internacionales"},
            {"titulo": f"{consulta} - Futuro Guatemala", "relevancia": 61, "descripcion": "Perspectivas a mediano y largo plazo"},
        ],
        "fuentes_cobertura": [
            {"fuente": "Prensa Libre", "cobertura": 32},
            {"fuente": "Nuestro Diario", "cobertura": 27},
            {"fuente": "El Periódico", "cobertura": 21},
            {"fuente": "La Hora", "cobertura": 15},
            {"fuente": "Otros", "cobertura": 5},
        ],
        "evolucion_cobertura": [
            {"fecha": "Ene", "valor": 15},
            {"fecha": "Feb", "valor": 25},
            {"fecha": "Mar", "valor": 42},
            {"fecha": "Abr", "valor": 38},
            {"fecha": "May", "valor": 55},
        ],
        "aspectos_cubiertos": [
            {"aspecto": "Económico", "cobertura": 65},
            {"aspecto": "Político", "cobertura": 58},
            {"aspecto": "Social", "cobertura": 47},
            {"aspecto": "Legal", "cobertura": 41},
            {"aspecto": "Tecnológico", "cobertura": 35},
        ],
        "conclusiones": {
            "noticias_relevantes": f"Las noticias sobre {consulta} se enfocan principalmente en el impacto nacional (92%) y nuevas políticas (87%), mostrando alta cobertura mediática en temas de política pública.",
            "fuentes_cobertura": "Prensa Libre lidera la cobertura con 32%, seguido por Nuestro Diario (27%), concentrando el 59% de la información en estos dos medios principales.",
            "evolucion_cobertura": f"La cobertura de {consulta} ha mostrado un crecimiento sostenido, alcanzando su pico en mayo (55 menciones), indicando un interés mediático creciente.",
            "aspectos_cubiertos": "Los aspectos económicos dominan la cobertura (65%), seguidos por los políticos (58%), representando el enfoque principal de los medios en estos temas.",
        },
        "metodologia": {
            "noticias_relevantes": "Análisis de relevancia basado en frecuencia de mención, engagement y autoridad de la fuente",
            "fuentes_cobertura": "Conteo de artículos por fuente mediática durante el período analizado",
            "evolucion_cobertura": "Seguimiento temporal de menciones en medios digitales e impresos",
            "aspectos_cubiertos": "Clasificación temática automática del contenido de las noticias",
        },
    }


def _codex(consulta: str) -> Dict[str, Any]:
    return {
        "documentos_relevantes": [
            {"titulo": f"{consulta} - Análisis Estratégico", "relevancia": 95, "descripcion": "Análisis integral para Guatemala"},
            {"titulo": f"{consulta} - Estudio Sectorial", "relevancia": 88, "descripcion": "Estudio comparativo sectorial"},
            {"titulo": f"{consulta} - Marco Legal", "relevancia": 82, "descripcion": "Políticas públicas y normativa"},
            {"titulo": f"{consulta} - Aspectos Institucionales", "relevancia": 75, "descripcion": "Marco institucional guatemalteco"},
            {"titulo": f"{consulta} - Impacto Social", "relevancia": 68, "descripcion": "Casos de estudio nacionales"},
        ],
        "conceptos_relacionados": [
            {"concepto": "Desarrollo Sostenible", "relacion": 78},
            {"concepto": "Política Pública", "relacion": 65},
            {"concepto": "Participación Ciudadana", "relacion": 59},
            {"concepto": "Marco Regulatorio", "relacion": 52},
            {"concepto": "Innovación", "relacion": 45},
        ],
        "evolucion_analisis": [
            {"fecha": "Q1", "valor": 22},
            {"fecha": "Q2", "valor": 35},
            {"fecha": "Q3", "valor": 48},
            {"fecha": "Q4", "valor": 55},
        ],
        "aspectos_documentados": [
            {"aspecto": "Conceptual", "profundidad": 82},
            {"aspecto": "Casos de Estudio", "profundidad": 75},
            {"aspecto": "Comparativo", "profundidad": 68},
            {"aspecto": "Proyecciones", "profundidad": 62},
            {"aspecto": "Legal", "profundidad": 55},
        ],
        "conclusiones": {
            "documentos_relevantes": f"Los documentos del codex sobre {consulta} muestran alta relevancia en análisis estratégicos (95%) y estudios sectoriales (88%), indicando una base sólida de conocimiento especializado.",
            "conceptos_relacionados": "El concepto más relacionado es Desarrollo Sostenible (78%), seguido por Política Pública (65%), mostrando la orientación hacia sostenibilidad y gobernanza.",
            "evolucion_analisis": "El análisis ha evolucionado positivamente, creciendo de 22 a 55 documentos por trimestre, mostrando un interés académico y técnico creciente.",
            "aspectos_documentados": "Los aspectos conceptuales tienen mayor profundidad (82%), seguidos por casos de estudio (75%), indicando un enfoque teórico-práctico balanceado.",
        },
        "metodologia": {
            "documentos_relevantes": "Ranking basado en citaciones, autoridad del autor y relevancia temática",
            "conceptos_relacionados": "Análisis de co-ocurrencia y proximidad semántica en el corpus documental",
            "evolucion_analisis": "Conteo temporal de documentos agregados al codex por trimestre",
            "aspectos_documentados": "Evaluación de profundidad basada en extensión y detalle del contenido",
        },
    }


def _monitoreos(consulta: str) -> Dict[str, Any]:
    return {
        "monitores_relevantes": [
            {"nombre": f"Análisis de {consulta}", "valor": 92, "descripcion": "Monitoreo completo de redes sociales"},
            {"nombre": f"Conversación sobre {consulta}", "valor": 85, "descripcion": "Análisis de conversación en Twitter"},
            {"nombre": f"Tendencias en {consulta}", "valor": 78, "descripcion": "Seguimiento de hashtags relacionados"},
            {"nombre": f"Menciones de {consulta}", "valor": 72, "descripcion": "Menciones en cuentas verificadas"},
            {"nombre": f"Impacto de {consulta}", "valor": 65, "descripcion": "Análisis de engagement y alcance"},
        ],
        "distribucion_plataformas": [
            {"plataforma": "Twitter", "valor": 45},
            {"plataforma": "Facebook", "valor": 28},
            {"plataforma": "Instagram", "valor": 15},
            {"plataforma": "TikTok", "valor": 12},
        ],
        "evolucion_menciones": [
            {"fecha": "Lun", "valor": 35},
            {"fecha": "Mar", "valor": 42},
            {"fecha": "Mie", "valor": 38},
            {"fecha": "Jue", "valor": 65},
            {"fecha": "Vie", "valor": 78},
            {"fecha": "Sab", "valor": 52},
            {"fecha": "Dom", "valor": 45},
        ],
        "analisis_sentimiento": [
            {"sentimiento": "Positivo", "valor": 38},
            {"sentimiento": "Neutral", "valor": 45},
            {"sentimiento": "Negativo", "valor": 17},
        ],
        "conclusiones": {
            "monitores_relevantes": f"Los monitoreos más relevantes sobre {consulta} muestran un análisis completo (92%) y una conversación activa (85%), indicando un alto nivel de interés en el tema en redes sociales.",
            "distribucion_plataformas": f"Twitter es la plataforma dominante (45%) para la conversación sobre {consulta}, seguida por Facebook (28%), concentrando el 73% de las menciones en estas dos plataformas.",
            "evolucion_menciones": f"Las menciones de {consulta} alcanzaron su pico el viernes (78), mostrando un patrón de incremento hacia el fin de semana laboral y descenso durante el fin de semana.",
            "analisis_sentimiento": "El sentimiento predominante es neutral (45%), seguido por positivo (38%), con solo 17% de menciones negativas, indicando una recepción generalmente favorable del tema.",
        },
        "metodologia": {
            "monitores_relevantes": "Ranking basado en relevancia temática, engagement y alcance de los monitoreos",
            "distribucion_plataformas": "Análisis de la distribución de menciones por plataforma de redes sociales",
            "evolucion_menciones": "Seguimiento temporal de menciones durante la última semana",
            "analisis_sentimiento": "Clasificación automática de sentimiento mediante procesamiento de lenguaje natural",
        },
    }


def _genericos() -> Dict[str, Any]:
    return {
        "datos_genericos": [
            {"etiqueta": "Categoría 1", "valor": 85},
            {"etiqueta": "Categoría 2", "valor": 65},
            {"etiqueta": "Categoría 3", "valor": 45},
            {"etiqueta": "Categoría 4", "valor": 25},
        ]
    }


_GENERATORS: Dict[Category, Callable[[str], Dict[str, Any]]] = {
    Category.TRENDS: _tendencias,
    Category.NEWS: _noticias,
    Category.CODEX: _codex,
    Category.MONITORING: _monitoreos,
}


def generate_demo_data(tipo: "str | Category", consulta: str) -> Dict[str, Any]:
    """Dataset de demostración para el tipo de contexto; tipos desconocidos dan datos_genericos."""
    try:
        categoria = Category.parse(tipo)
    except ValueError:
        return _genericos()
    return _GENERATORS[categoria](consulta)
