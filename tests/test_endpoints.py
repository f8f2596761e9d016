import unittest

import httpx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from endpoints.sondeo import get_aggregator, get_gateway, get_history, router
from sondeo_core.aggregator import ContextAggregator
from sondeo_core.gateway import SondeoGateway
from sondeo_core.models import SondeoHistorialEntry

from fakes import FakeCodex, FakeHistory, FakeMonitoring, FakeNews, FakeTrends, trends_snapshot


class TestSondeoEndpoints(unittest.TestCase):
    def setUp(self):
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if request.url.path.endswith("/sondeo"):
                return httpx.Response(200, json={"resultado": {"respuesta": "ok", "datos_analisis": {"a": [1]}}})
            if request.url.path.endswith("/historial"):
                return httpx.Response(200, json=[{"id": 1}])
            return httpx.Response(404, json={"error": "Sondeo no encontrado"})

        self.history = FakeHistory([SondeoHistorialEntry(id=7, pregunta="agua", created_at="2024-05-01")])
        app = FastAPI()
        app.include_router(router)
        app.dependency_overrides[get_aggregator] = lambda: ContextAggregator(
            news=FakeNews(), codex=FakeCodex(), trends=FakeTrends(trends_snapshot()), monitoring=FakeMonitoring()
        )
        app.dependency_overrides[get_gateway] = lambda: SondeoGateway(
            "https://gw.test", transport=httpx.MockTransport(handler)
        )
        app.dependency_overrides[get_history] = lambda: self.history
        self.client = TestClient(app)

    def test_crear_sondeo(self):
        resp = self.client.post(
            "/sondeo",
            json={"pregunta": "agua potable", "contextos": ["tendencias"], "user_id": "u1"},
            headers={"Authorization": "Bearer tok"},
        )

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["llmResponse"], "ok")
        self.assertEqual(data["datosAnalisis"], {"a": [1]})
        self.assertEqual(data["contexto"]["tendencias"], ["Elecciones", "Presupuesto"])
        self.assertEqual(self.requests[0].headers["Authorization"], "Bearer tok")

    def test_crear_sondeo_validation_error(self):
        resp = self.client.post("/sondeo", json={"pregunta": "ab", "contextos": ["tendencias"], "user_id": "u1"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.requests, [])

    def test_historial(self):
        resp = self.client.get("/sondeo/historial", params={"user_email": "ana@example.com"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()[0]["id"], 7)
        self.assertEqual(self.history.emails, ["ana@example.com"])

    def test_historial_remoto_requires_token(self):
        self.assertEqual(self.client.get("/sondeo/historial/remoto").status_code, 401)
        resp = self.client.get("/sondeo/historial/remoto", headers={"Authorization": "Bearer tok"})
        self.assertEqual(resp.json(), [{"id": 1}])

    def test_obtener_sondeo_gateway_404(self):
        resp = self.client.get("/sondeo/abc", headers={"Authorization": "Bearer tok"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Sondeo no encontrado")

    def test_demo(self):
        resp = self.client.get("/sondeo/demo/codex", params={"consulta": "agua"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("documentos_relevantes", resp.json())


if __name__ == "__main__":
    unittest.main()
