import unittest

import httpx

from sondeo_core.aggregator import ContextAggregator
from sondeo_core.errors import GatewayError, ValidationError
from sondeo_core.gateway import SondeoGateway
from sondeo_core.service import sondear_tema, validar_sondeo
from sondeo_core.models import Category

from fakes import FakeCodex, FakeMonitoring, FakeNews, FakeTrends, news_items, trends_snapshot


def aggregator(news=None) -> ContextAggregator:
    return ContextAggregator(
        news=news or FakeNews(news_items(3, title="Agua potable {i}")),
        codex=FakeCodex(error=RuntimeError("codex caído")),
        trends=FakeTrends(trends_snapshot()),
        monitoring=FakeMonitoring(),
    )


class TestValidateSondeo(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(validar_sondeo("  agua  ", ["news", "trends"]), [Category.NEWS, Category.TRENDS])

    def test_invalid_inputs(self):
        casos = [
            ("", ["tendencias"], "obligatorio"),
            ("ab", ["tendencias"], "al menos 3"),
            ("x" * 201, ["tendencias"], "exceder 200"),
            ("agua", [], "al menos un contexto"),
            ("agua", ["clima"], "desconocida"),
        ]
        for pregunta, contextos, fragmento in casos:
            with self.subTest(pregunta=pregunta[:10], contextos=contextos):
                with self.assertRaises(ValidationError) as cm:
                    validar_sondeo(pregunta, contextos)
                self.assertIn(fragmento, cm.exception.message)


class TestSondearTema(unittest.IsolatedAsyncioTestCase):
    async def test_validation_happens_before_network(self):
        news = FakeNews(news_items(3))

        def handler(request):
            raise AssertionError("no debe llamarse al servicio")

        gateway = SondeoGateway("https://gw.test", transport=httpx.MockTransport(handler))
        with self.assertRaises(ValidationError):
            await sondear_tema("ab", ["noticias"], "u1", aggregator=aggregator(news), gateway=gateway)
        self.assertEqual(news.calls, [])

    async def test_end_to_end(self):
        def handler(request):
            return httpx.Response(200, json={"respuesta": "Resumen", "fuentes": ["a"]})

        gateway = SondeoGateway("https://gw.test", transport=httpx.MockTransport(handler), demo_fallback=True)

        r = await sondear_tema(
            " agua potable ", ["noticias", "codex", "tendencias"], "u1",
            aggregator=aggregator(), gateway=gateway, access_token="tok",
        )

        self.assertEqual(r.llm_response, "Resumen")
        self.assertEqual(r.contexto.input, "agua potable")
        self.assertEqual(len(r.contexto.noticias), 3)
        self.assertIsNone(r.contexto.documentos)
        self.assertEqual(r.contexto.tipo_contexto, "codex+noticias+tendencias")
        # el fallback usa la primera categoría seleccionada
        self.assertEqual(r.origen_datos, "demo")
        self.assertIn("noticias_relevantes", r.datos_analisis)

    async def test_gateway_error_propagates(self):
        gateway = SondeoGateway("https://gw.test", transport=httpx.MockTransport(lambda r: httpx.Response(500, text="boom")))
        with self.assertRaises(GatewayError):
            await sondear_tema("agua", ["tendencias"], "u1", aggregator=aggregator(), gateway=gateway)


if __name__ == "__main__":
    unittest.main()
