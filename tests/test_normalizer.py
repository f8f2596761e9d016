import unittest

from sondeo_core.models import AggregatedContext
from sondeo_core.normalizer import SIN_RESPUESTA, normalize_response


def contexto(*categorias: str) -> AggregatedContext:
    return AggregatedContext(
        input="agua potable",
        contextos_seleccionados=list(categorias),
        tipo_contexto="+".join(sorted(categorias)),
    )


class TestNormalizeResponse(unittest.TestCase):
    def test_nested_wins_over_flat(self):
        body = {"resultado": {"respuesta": "A", "datos_analisis": {"x": 1}}, "respuesta": "B"}

        r = normalize_response(body, contexto("tendencias"), "agua potable")

        self.assertEqual(r.llm_response, "A")
        self.assertEqual(r.datos_analisis, {"x": 1})
        self.assertEqual(r.origen_datos, "gateway")

    def test_flat_fields(self):
        body = {"respuesta": "B", "fuentes": [{"url": "u"}], "datos_analisis": {"y": []}}

        r = normalize_response(body, contexto("noticias"), "agua")

        self.assertEqual((r.llm_response, r.llm_sources, r.datos_analisis), ("B", [{"url": "u"}], {"y": []}))

    def test_datos_visualizacion_precedence(self):
        body = {"resultado": {"datos_visualizacion": {"v": 1}}, "datos_analisis": {"a": 1}}
        r = normalize_response(body, contexto("codex"), "agua")
        self.assertEqual(r.datos_analisis, {"v": 1})

    def test_empty_text_falls_through(self):
        body = {"resultado": {"respuesta": ""}, "respuesta": "B", "datos_analisis": {}}
        r = normalize_response(body, contexto("codex"), "agua")
        self.assertEqual(r.llm_response, "B")
        self.assertEqual(r.datos_analisis, {})
        self.assertEqual(r.origen_datos, "gateway")

    def test_defaults_and_labelled_demo_fallback(self):
        with self.assertLogs("sondeo_core.normalizer", level="WARNING") as logs:
            r = normalize_response({"success": True}, contexto("noticias", "codex"), "agua", demo_fallback=True)

        self.assertEqual(r.llm_response, SIN_RESPUESTA)
        self.assertIsNone(r.llm_sources)
        self.assertEqual(r.origen_datos, "demo")
        self.assertIn("noticias_relevantes", r.datos_analisis)
        self.assertTrue(any("DEMO_FALLBACK" in linea for linea in logs.output))

    def test_fallback_disabled(self):
        r = normalize_response({"respuesta": "ok"}, contexto("tendencias"), "agua", demo_fallback=False)
        self.assertIsNone(r.datos_analisis)
        self.assertEqual(r.origen_datos, "sin_datos")

    def test_creditos_and_aliases(self):
        body = {"respuesta": "ok", "datos_analisis": {}, "creditos": {"costo_total": 15, "creditos_restantes": 85}}

        r = normalize_response(body, contexto("tendencias"), "agua")
        dumped = r.model_dump(mode="json", by_alias=True)

        self.assertEqual(r.creditos["creditos_restantes"], 85)
        self.assertEqual(dumped["llmResponse"], "ok")
        self.assertIn("datosAnalisis", dumped)
        self.assertEqual(dumped["origenDatos"], "gateway")


if __name__ == "__main__":
    unittest.main()
