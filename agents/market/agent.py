# server/agents/market/agent.py
"""
Market outlook agent - weekly price forecast with a sell/hold/watch signal
"""

from typing import Dict, Any, List, Optional
from datetime import datetime, timezone

from agents.base import BaseAgent
from agents.market.models import (
    MarketOutlookRequest, MarketOutlookResponse, MarketOutlook,
    PriceForecast, SellRecommendation, RECOMMENDATION_TEXT
)
from agents.market.service import PriceForecastService
from core.exceptions import AgentConfigError

class MarketAgent(BaseAgent[MarketOutlookRequest, MarketOutlookResponse]):
    """
    Market outlook for a crop at a market

    Features:
    - 12 weeks of mock price history and an N-week forecast
    - Sell now / hold / watch recommendation from the projected peak
    - Merged history + forecast series for charting
    """

    response_class = MarketOutlookResponse

    def __init__(self):
        super().__init__("market")
        self.service = PriceForecastService(config=self.config)

    def _validate_config(self) -> None:
        """Validate market agent configuration"""
        required_config = ["default_crop", "default_market", "horizon_weeks"]

        missing = [key for key in required_config if key not in self.config]
        if missing:
            raise AgentConfigError(f"Missing market config: {missing}")

        if self.config["horizon_weeks"] < 0:
            raise AgentConfigError("horizon_weeks must not be negative")

    def _resolve(self, request: MarketOutlookRequest) -> Dict[str, Any]:
        return {
            "crop": request.crop if request.crop is not None else self.config["default_crop"],
            "market": request.market if request.market is not None else self.config["default_market"],
            "horizon_weeks": request.horizon_weeks,
        }

    def get_cache_key(self, request: MarketOutlookRequest) -> str:
        # History and forecast dates are anchored on the current UTC date
        params = self._resolve(request)
        today = datetime.now(timezone.utc).date().isoformat()
        return f"{self.agent_name}:{params['crop']!r}:{params['market']!r}:{params['horizon_weeks']}:{today}"

    async def get_forecast(self, request: MarketOutlookRequest) -> PriceForecast:
        """Price forecast only, after the simulated provider delay"""
        params = self._resolve(request)
        await self.simulate_latency()
        return self.service.get_weekly_price_forecast(**params)

    async def process_request(self, request: MarketOutlookRequest) -> MarketOutlookResponse:
        """Process market outlook request"""
        params = self._resolve(request)
        self.logger.info(
            f"Processing market outlook for {params['crop']} at {params['market']} "
            f"({params['horizon_weeks']} weeks)"
        )

        forecast = self.service.get_weekly_price_forecast(**params)
        recommendation = self.service.get_sell_recommendation(forecast)

        current = forecast.history[-1].price_ksh if forecast.history else None
        peak = max((p.price_ksh for p in forecast.forecast), default=None)

        outlook = MarketOutlook(
            forecast=forecast,
            recommendation=recommendation,
            recommendation_text=RECOMMENDATION_TEXT[recommendation],
            current_price=current,
            peak_price=peak,
            chart=self.service.build_chart(forecast),
        )

        self.logger.info(f"Market outlook for {forecast.crop}@{forecast.market}: {recommendation.value}")
        return MarketOutlookResponse(
            success=True,
            data=outlook,
            message=RECOMMENDATION_TEXT[recommendation],
            timestamp=datetime.now().isoformat(),
            metadata={
                "request_params": params,
                "history_points": len(forecast.history),
                "forecast_points": len(forecast.forecast),
                "unit": "KSh",
                "data_source": "mock_forecast",
            }
        )

    def get_fallback_response(self, request: MarketOutlookRequest, error: Exception) -> MarketOutlookResponse:
        """Neutral outlook when no forecast can be produced"""
        return MarketOutlookResponse(
            success=False,
            data=MarketOutlook(
                forecast=None,
                recommendation=SellRecommendation.WATCH,
                recommendation_text=RECOMMENDATION_TEXT[SellRecommendation.WATCH],
                chart=[],
            ),
            message=f"Using fallback outlook due to error: {error}",
            timestamp=datetime.now().isoformat(),
            metadata={"fallback": True, "error": str(error)}
        )

    async def get_available_crops(self) -> List[str]:
        return list(self.config.get("crops", []))

    async def get_available_markets(self, crop: Optional[str] = None) -> List[str]:
        """Every market quotes every supported crop; unknown crops get no markets"""
        if crop and crop not in self.config.get("crops", []):
            return []
        return list(self.config.get("markets", []))
