from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from agents.base import agent_registry
from agents.market.models import MarketOutlookRequest

router = APIRouter()

def _market_agent():
    agent = agent_registry.get("market")
    if not agent:
        raise HTTPException(status_code=500, detail="Market agent not available")
    return agent

@router.get("/outlook")
async def get_market_outlook(
    crop: Optional[str] = Query(None, description="Crop name (e.g., Maize, Beans, Tomato)"),
    market: Optional[str] = Query(None, description="Market name (e.g., Nairobi, Mombasa)"),
    horizon_weeks: int = Query(8, ge=0, le=52, description="Number of weeks to forecast ahead"),
):
    """
    Get price history, forecast and a sell recommendation

    The recommendation is sell_now when the projected peak is below 95% of the
    current price, hold when it is above 110%, and watch otherwise.
    """
    agent = _market_agent()
    try:
        request = MarketOutlookRequest(crop=crop, market=market, horizon_weeks=horizon_weeks)
        return await agent.execute(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error processing request: {str(e)}")

@router.get("/forecast")
async def get_price_forecast(
    crop: Optional[str] = Query(None, description="Crop name"),
    market: Optional[str] = Query(None, description="Market name"),
    horizon_weeks: int = Query(8, ge=0, le=52, description="Number of weeks to forecast ahead"),
):
    """Get the weekly price forecast without a recommendation"""
    agent = _market_agent()
    try:
        request = MarketOutlookRequest(crop=crop, market=market, horizon_weeks=horizon_weeks)
        return await agent.get_forecast(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error getting price forecast: {str(e)}")

@router.get("/crops")
async def get_crops():
    """Get supported crops"""
    agent = _market_agent()
    crops = await agent.get_available_crops()
    return {
        "success": True,
        "crops": [{"name": crop} for crop in crops],
    }

@router.get("/markets")
async def get_markets(
    crop: Optional[str] = Query(None, description="Crop name to filter markets")
):
    """Get supported markets"""
    agent = _market_agent()
    markets = await agent.get_available_markets(crop)
    return {
        "success": True,
        "markets": [{"name": market} for market in markets],
    }

@router.get("/health")
async def market_health():
    """Check market agent health"""
    try:
        market_agent = agent_registry.get("market")
        if not market_agent:
            return {"status": "unhealthy", "error": "Market agent not available"}

        return await market_agent.health_check()

    except Exception as e:
        return {"status": "unhealthy", "error": str(e)}
