"""
System endpoint and app-wiring tests.

Verifies:
- Plain-text liveness at /
- /health and /version payloads
- CORS headers only for the configured origin
- JSON bodies for 404/405 and unexpected errors
"""

from orderdesk.services import order_service


FRONTEND_ORIGIN = "http://localhost:3000"


class TestLiveness:

    def test_root_is_plain_text(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.data == b"Server is running!"
        assert resp.mimetype == "text/plain"

    def test_health(self, client, created_order):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "healthy"
        assert body["checks"]["database"]["details"] == {
            "order_types": 0,
            "orders": 1,
            "invoices": 1,
        }

    def test_version(self, client):
        body = client.get("/version").get_json()
        assert body["api_version"] == "1.0.0"
        assert body["server_time"].endswith("Z")


class TestCors:

    def test_allowed_origin_gets_headers(self, client):
        resp = client.get("/order-types", headers={"Origin": FRONTEND_ORIGIN})
        assert resp.headers["Access-Control-Allow-Origin"] == FRONTEND_ORIGIN
        assert resp.headers["Access-Control-Allow-Methods"] == "GET,POST,PATCH,DELETE"
        assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"

    def test_other_origin_gets_nothing(self, client):
        resp = client.get("/order-types", headers={"Origin": "http://evil.example"})
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_preflight(self, client):
        resp = client.options("/orders", headers={
            "Origin": FRONTEND_ORIGIN,
            "Access-Control-Request-Method": "POST",
        })
        assert resp.status_code == 200
        assert resp.headers["Access-Control-Allow-Origin"] == FRONTEND_ORIGIN


class TestErrorResponses:

    def test_unknown_route_is_json_404(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert "error" in resp.get_json()

    def test_wrong_method_is_json_405(self, client):
        resp = client.put("/orders")
        assert resp.status_code == 405
        assert "error" in resp.get_json()

    def test_unexpected_error_is_500_with_details(self, client, monkeypatch):
        def boom():
            raise RuntimeError("kaboom")

        monkeypatch.setattr(order_service, "list_orders", boom)

        resp = client.get("/orders")

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Unexpected server error", "details": "kaboom"}
