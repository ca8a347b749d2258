# server/agents/weather/agent.py
"""
Weather advisory agent - 7-day forecast and spray/planting/fertilize windows
"""

from typing import Dict, Tuple
from datetime import datetime, timezone

from agents.base import BaseAgent
from agents.weather.models import (
    AdvisoryRequest, AdvisoryResponse, AdvisoryReport, AdvisoryItem,
    WeatherSummary, ADVISORY_LABELS
)
from agents.weather.service import WeatherService
from core.exceptions import AgentError, AgentConfigError, InvalidForecastInputError

class AdvisoryAgent(BaseAgent[AdvisoryRequest, AdvisoryResponse]):
    """
    Weather-aware field advisories for the next 7 days

    Features:
    - Deterministic mock forecast per coordinate pair
    - Spray, planting and fertilization windows from threshold rules
    - Falls back to the configured farm location when no coordinates are given
    """

    response_class = AdvisoryResponse

    def __init__(self):
        super().__init__("weather")
        self.service = WeatherService(config=self.config)

    def _validate_config(self) -> None:
        """Validate weather agent configuration"""
        for key in ("default_lat", "default_lng"):
            if key not in self.config:
                raise AgentConfigError(f"Missing weather config: {key}")
            if not isinstance(self.config[key], (int, float)):
                raise AgentConfigError(f"Weather config {key} must be a number")

    def resolve_location(self, request: AdvisoryRequest) -> Tuple[float, float]:
        lat = request.lat if request.lat is not None else self.config["default_lat"]
        lng = request.lng if request.lng is not None else self.config["default_lng"]
        return lat, lng

    def get_cache_key(self, request: AdvisoryRequest) -> str:
        # The forecast window moves with the calendar date
        lat, lng = self.resolve_location(request)
        today = datetime.now(timezone.utc).date().isoformat()
        return f"{self.agent_name}:{lat}:{lng}:{today}"

    async def get_forecast(self, request: AdvisoryRequest) -> WeatherSummary:
        """Forecast only, after the simulated provider delay"""
        lat, lng = self.resolve_location(request)
        await self.simulate_latency()
        return self.service.get_7day_forecast(lat, lng)

    async def process_request(self, request: AdvisoryRequest) -> AdvisoryResponse:
        """Build forecast and advisories for the requested location"""
        lat, lng = self.resolve_location(request)
        self.logger.info(f"Processing advisory request at ({lat}, {lng})")

        try:
            forecast = self.service.get_7day_forecast(lat, lng)
            advisories = self.service.compute_advisories(forecast)
        except InvalidForecastInputError as e:
            raise AgentError(f"Failed to process advisory request: {e}") from e

        items = [
            AdvisoryItem(**a.model_dump(), display_label=ADVISORY_LABELS[a.type])
            for a in advisories
        ]

        if items:
            message = f"{len(items)} advisory(ies) for the next {len(forecast.days)} days"
        else:
            message = f"No advisories for the next {len(forecast.days)} days"

        self.logger.info(message)
        return AdvisoryResponse(
            success=True,
            data=AdvisoryReport(forecast=forecast, advisories=items),
            message=message,
            timestamp=datetime.now().isoformat(),
            metadata={
                "location": f"({lat:.3f}, {lng:.3f})",
                "forecast_days": len(forecast.days),
                "advisory_counts": self._count_by_type(items),
                "data_source": "mock_forecast",
            }
        )

    @staticmethod
    def _count_by_type(items) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for item in items:
            counts[item.type.value] = counts.get(item.type.value, 0) + 1
        return counts

    def get_fallback_response(self, request: AdvisoryRequest, error: Exception) -> AdvisoryResponse:
        """No forecast and no advisories when the request cannot be served"""
        return AdvisoryResponse(
            success=False,
            data=AdvisoryReport(forecast=None, advisories=[]),
            message=f"Advisories unavailable: {error}",
            timestamp=datetime.now().isoformat(),
            metadata={"fallback": True, "error": str(error)}
        )

    async def get_advisory_types(self) -> list:
        """Advisory types with their display labels"""
        return [
            {"type": advisory_type.value, "label": label}
            for advisory_type, label in ADVISORY_LABELS.items()
        ]
