# server/agents/weather/service.py
"""
Weather service - synthetic 7-day forecast and threshold-based field advisories
"""
from typing import List, Dict, Any, Optional, Callable, Tuple
from datetime import date, datetime, timedelta, timezone
import logging

from agents.weather.models import (
    DailyForecast, WeatherSummary, Location, Advisory, AdvisoryType, AdvisorySeverity
)
from core.exceptions import InvalidForecastInputError
from core.numeric import round_half_up, ensure_finite

logger = logging.getLogger(__name__)

FORECAST_DAYS = 7

# Evaluated in this order for every day; rules are independent of each other.
AdvisoryRule = Tuple[AdvisoryType, AdvisorySeverity, str, Callable[[DailyForecast], bool]]

ADVISORY_RULES: List[AdvisoryRule] = [
    (
        AdvisoryType.SPRAY_WINDOW,
        AdvisorySeverity.GOOD,
        "Good spraying conditions (low wind, no rain expected).",
        lambda d: d.wind_kph < 15 and d.precipitation_mm < 1,
    ),
    (
        AdvisoryType.PLANTING_WINDOW,
        AdvisorySeverity.GOOD,
        "Favorable planting window (adequate moisture expected).",
        lambda d: 2 <= d.precipitation_mm <= 10 and d.temp_max_c <= 30,
    ),
    (
        AdvisoryType.FERTILIZE_WINDOW,
        AdvisorySeverity.INFO,
        "Suitable for fertilization (low runoff risk).",
        lambda d: d.precipitation_mm < 5 and d.humidity < 85,
    ),
]

class WeatherService:
    """Mock weather provider standing in for a real forecast API"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    @staticmethod
    def _location_base(lat: float, lng: float) -> int:
        try:
            lat = ensure_finite("lat", lat)
            lng = ensure_finite("lng", lng)
            # Finite coordinates can still overflow once scaled
            seed = ensure_finite("lat * 10 + lng", lat * 10 + lng)
        except (TypeError, ValueError) as e:
            raise InvalidForecastInputError(str(e)) from e
        return abs(round_half_up(seed))

    def get_7day_forecast(self, lat: float, lng: float, today: Optional[date] = None) -> WeatherSummary:
        """
        Deterministic 7-day forecast for a coordinate pair.

        Every value is a function of the coordinates and the day offset only,
        so the same location always gets the same week, starting today (UTC).

        Raises:
            InvalidForecastInputError: lat or lng is NaN or infinite.
        """
        base = self._location_base(lat, lng)
        start = today or datetime.now(timezone.utc).date()

        days = []
        for i in range(FORECAST_DAYS):
            days.append(DailyForecast(
                date=(start + timedelta(days=i)).isoformat(),
                temp_min_c=16 + (base + i) % 5,
                temp_max_c=24 + (base + i) % 8,
                precipitation_mm=0 if (base + i * 3) % 10 < 4 else (base + i) % 15,
                wind_kph=8 + (base + i * 2) % 20,
                humidity=55 + (base + i) % 40,
            ))

        logger.debug(f"Generated {len(days)}-day forecast for ({lat}, {lng}), base={base}")
        return WeatherSummary(location=Location(lat=lat, lng=lng), days=days)

    def compute_advisories(self, forecast: WeatherSummary) -> List[Advisory]:
        """Advisories day by day, in rule order within a day. May be empty."""
        out: List[Advisory] = []
        for day in forecast.days:
            for advisory_type, severity, message, applies in ADVISORY_RULES:
                if applies(day):
                    out.append(Advisory(
                        date=day.date,
                        type=advisory_type,
                        message=message,
                        severity=severity,
                    ))
        return out
