# server/agents/market/service.py
"""
Price forecast service - seeded mock price history, weekly forecast and sell/hold/watch advice
"""
from typing import List, Dict, Any, Optional
from datetime import date, datetime, timedelta, timezone
import logging

from agents.market.models import PricePoint, PriceForecast, SellRecommendation, ChartPoint
from core.numeric import round_half_up

logger = logging.getLogger(__name__)

HISTORY_WEEKS = 12
PRICE_FLOOR_KSH = 20

class SeededRandom:
    """
    Linear congruential generator producing a repeatable sequence in [0, 1).

    One instance belongs to one forecast build; nothing else advances it.
    """

    MULTIPLIER = 9301
    INCREMENT = 49297
    MODULUS = 233280

    def __init__(self, seed: int):
        self.seed = seed

    def next(self) -> float:
        self.seed = (self.seed * self.MULTIPLIER + self.INCREMENT) % self.MODULUS
        return self.seed / self.MODULUS

def _utf16_len(s: str) -> int:
    # Name lengths are counted in UTF-16 code units, as the dashboard did
    return len(s.encode("utf-16-le")) // 2

def price_seed(crop: str, market: str) -> int:
    """Seed for a (crop, market) pair.

    Only the name lengths matter, so e.g. Maize/Nairobi and Beans/Mombasa
    share a seed and get the same prices.
    """
    return _utf16_len(crop) + _utf16_len(market)

class PriceForecastService:
    """Mock commodity price provider"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def get_weekly_price_forecast(
        self,
        crop: str,
        market: str,
        horizon_weeks: int = 8,
        now: Optional[date] = None,
    ) -> PriceForecast:
        """
        Weekly price history and forecast for a crop at a market.

        The generator is reseeded on every call, so identical arguments give
        identical output. Forecast points all drift from the last history
        price; they do not compound. A horizon of zero or less gives an empty
        forecast.
        """
        today = now or datetime.now(timezone.utc).date()
        rng = SeededRandom(price_seed(crop, market))
        base = 80 + round_half_up(rng.next() * 40) * 10

        history = [
            PricePoint(
                date=(today - timedelta(weeks=HISTORY_WEEKS - i)).isoformat(),
                price_ksh=max(PRICE_FLOOR_KSH, base + round_half_up((rng.next() - 0.5) * 20) * 10),
            )
            for i in range(HISTORY_WEEKS)
        ]

        last = history[-1].price_ksh
        forecast = []
        for i in range(horizon_weeks):
            drift = (i + 1) * (rng.next() - 0.5) * 15
            forecast.append(PricePoint(
                date=(today + timedelta(weeks=i + 1)).isoformat(),
                price_ksh=max(PRICE_FLOOR_KSH, round_half_up(last + drift)),
            ))

        logger.debug(f"Price forecast for {crop}@{market}: base={base}, last={last}, horizon={horizon_weeks}")
        return PriceForecast(
            crop=crop,
            market=market,
            horizon_weeks=horizon_weeks,
            history=history,
            forecast=forecast,
        )

    def get_sell_recommendation(self, forecast: PriceForecast) -> SellRecommendation:
        """
        Compare the projected peak with the current price.

        sell_now below 95% of current, hold above 110%, watch in between.
        No history counts as a current price of 0; no forecast means there is
        no peak to wait for, which is sell_now.
        """
        current = forecast.history[-1].price_ksh if forecast.history else 0
        peak = max((p.price_ksh for p in forecast.forecast), default=float("-inf"))

        if peak < current * 0.95:
            return SellRecommendation.SELL_NOW
        if peak > current * 1.1:
            return SellRecommendation.HOLD
        return SellRecommendation.WATCH

    def build_chart(self, forecast: PriceForecast) -> List[ChartPoint]:
        """History then forecast as one series for a line chart"""
        return (
            [ChartPoint(date=p.date, history=p.price_ksh) for p in forecast.history]
            + [ChartPoint(date=p.date, forecast=p.price_ksh) for p in forecast.forecast]
        )
