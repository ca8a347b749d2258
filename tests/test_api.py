"""
Tests for the HTTP layer (api/app.py, api/v1/endpoints/*).

Uses FastAPI's TestClient inside the application lifespan so the agents are
registered exactly as when the server runs.
"""

NAIROBI_QUERY = {"lat": -1.286389, "lng": 36.817223}


class TestRootAndHealth:

    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "healthy"
        assert body["environment"] == "testing"

    def test_health_lists_agents(self, client):
        body = client.get("/api/health/").json()
        assert body["status"] == "healthy"
        assert set(body["agents"]) == {"weather", "market"}

    def test_agents_health(self, client):
        body = client.get("/api/health/agents").json()
        assert body["weather"]["status"] == "healthy"
        assert body["market"]["status"] == "healthy"

    def test_per_agent_health(self, client):
        assert client.get("/api/weather/health").json()["status"] == "healthy"
        assert client.get("/api/market/health").json()["status"] == "healthy"


class TestWeatherEndpoints:

    def test_forecast(self, client):
        response = client.get("/api/weather/forecast", params=NAIROBI_QUERY)
        assert response.status_code == 200
        body = response.json()
        assert len(body["days"]) == 7
        assert body["days"][0]["precipitation_mm"] == 9

    def test_forecast_defaults_to_farm(self, client):
        body = client.get("/api/weather/forecast").json()
        assert body["location"] == NAIROBI_QUERY

    def test_advisories(self, client):
        response = client.get("/api/weather/advisories", params=NAIROBI_QUERY)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [a["type"] for a in body["data"]["advisories"]] == [
            "planting_window", "planting_window", "fertilize_window", "fertilize_window",
        ]
        assert body["data"]["advisories"][2]["severity"] == "info"
        assert body["data"]["advisories"][2]["display_label"] == "Fertilization window"

    def test_advisory_types(self, client):
        body = client.get("/api/weather/advisory-types").json()
        assert len(body["advisory_types"]) == 4

    def test_overflowing_coordinate_is_bad_request(self, client):
        response = client.get("/api/weather/forecast", params={"lat": 1e308, "lng": 0})
        assert response.status_code == 400

    def test_bad_coordinate_rejected(self, client):
        response = client.get("/api/weather/forecast", params={"lat": "north", "lng": 1})
        assert response.status_code == 422


class TestMarketEndpoints:

    def test_outlook(self, client):
        response = client.get("/api/market/outlook", params={"crop": "Maize", "market": "Nairobi"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["recommendation"] in {"sell_now", "hold", "watch"}
        assert len(body["data"]["forecast"]["history"]) == 12
        assert len(body["data"]["forecast"]["forecast"]) == 8
        assert body["message"] == body["data"]["recommendation_text"]

    def test_outlook_zero_horizon(self, client):
        body = client.get("/api/market/outlook", params={"horizon_weeks": 0}).json()
        assert body["data"]["recommendation"] == "sell_now"

    def test_outlook_horizon_validated(self, client):
        response = client.get("/api/market/outlook", params={"horizon_weeks": 53})
        assert response.status_code == 422

    def test_forecast_repeatable(self, client):
        params = {"crop": "Tomato", "market": "Mombasa", "horizon_weeks": 4}
        first = client.get("/api/market/forecast", params=params).json()
        second = client.get("/api/market/forecast", params=params).json()
        assert first == second
        assert len(first["forecast"]) == 4
        assert all(p["price_ksh"] >= 20 for p in first["history"] + first["forecast"])

    def test_crops_and_markets(self, client):
        crops = client.get("/api/market/crops").json()["crops"]
        markets = client.get("/api/market/markets", params={"crop": "Onion"}).json()["markets"]
        assert {"name": "Maize"} in crops
        assert [m["name"] for m in markets] == ["Nairobi", "Mombasa", "Kisumu", "Eldoret"]
