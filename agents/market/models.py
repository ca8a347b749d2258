# server/agents/market/models.py
"""
Pydantic models for the market outlook agent
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any
from enum import Enum

class SellRecommendation(str, Enum):
    SELL_NOW = "sell_now"
    HOLD = "hold"
    WATCH = "watch"

RECOMMENDATION_TEXT: Dict[SellRecommendation, str] = {
    SellRecommendation.SELL_NOW: "Consider selling now. Forecast shows a potential decline.",
    SellRecommendation.HOLD: "Hold. Prices are expected to improve.",
    SellRecommendation.WATCH: "Watch the market. No strong signal detected.",
}

class PricePoint(BaseModel):
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    price_ksh: int = Field(..., ge=20, description="Price in KSh, never below the floor of 20")

class PriceForecast(BaseModel):
    crop: str
    market: str
    horizon_weeks: int
    history: List[PricePoint] = Field(..., description="Weekly history, oldest first")
    forecast: List[PricePoint] = Field(..., description="Weekly forecast, nearest first")

class ChartPoint(BaseModel):
    date: str
    history: Optional[int] = None
    forecast: Optional[int] = None

class MarketOutlookRequest(BaseModel):
    crop: Optional[str] = Field(None, description="Crop name; defaults to the configured crop")
    market: Optional[str] = Field(None, description="Market name; defaults to the configured market")
    horizon_weeks: int = Field(8, ge=0, le=52, description="Number of weeks to forecast")

class MarketOutlook(BaseModel):
    forecast: Optional[PriceForecast]
    recommendation: SellRecommendation
    recommendation_text: str
    current_price: Optional[int] = None
    peak_price: Optional[int] = None
    chart: List[ChartPoint]

class MarketOutlookResponse(BaseModel):
    success: bool
    data: MarketOutlook
    message: str
    timestamp: str
    metadata: Optional[Dict[str, Any]] = None
