# server/agents/weather/models.py
"""
Pydantic models for the weather advisory agent
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any
from enum import Enum

class AdvisoryType(str, Enum):
    PLANTING_WINDOW = "planting_window"
    SPRAY_WINDOW = "spray_window"
    FERTILIZE_WINDOW = "fertilize_window"
    HARVEST_WINDOW = "harvest_window"  # declared, no rule produces it yet

class AdvisorySeverity(str, Enum):
    GOOD = "good"
    CAUTION = "caution"
    INFO = "info"

ADVISORY_LABELS: Dict[AdvisoryType, str] = {
    AdvisoryType.PLANTING_WINDOW: "Planting window",
    AdvisoryType.SPRAY_WINDOW: "Spraying window",
    AdvisoryType.FERTILIZE_WINDOW: "Fertilization window",
    AdvisoryType.HARVEST_WINDOW: "Harvest window",
}

class DailyForecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    temp_min_c: int
    temp_max_c: int
    precipitation_mm: int
    wind_kph: int
    humidity: int = Field(..., description="Relative humidity (%)")

class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

class WeatherSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    days: List[DailyForecast]

class Advisory(BaseModel):
    date: str
    type: AdvisoryType
    message: str
    severity: AdvisorySeverity

class AdvisoryRequest(BaseModel):
    lat: Optional[float] = Field(None, description="Latitude; defaults to the configured farm location")
    lng: Optional[float] = Field(None, description="Longitude; defaults to the configured farm location")

class AdvisoryItem(Advisory):
    display_label: str

class AdvisoryReport(BaseModel):
    forecast: Optional[WeatherSummary]
    advisories: List[AdvisoryItem]

class AdvisoryResponse(BaseModel):
    success: bool
    data: AdvisoryReport
    message: str
    timestamp: str
    metadata: Optional[Dict[str, Any]] = None
