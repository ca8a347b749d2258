from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from agents.base import agent_registry
from agents.weather.models import AdvisoryRequest
from core.exceptions import InvalidForecastInputError

router = APIRouter()

def _weather_agent():
    agent = agent_registry.get("weather")
    if not agent:
        raise HTTPException(status_code=500, detail="Weather agent not available")
    return agent

@router.get("/forecast")
async def get_forecast(
    lat: Optional[float] = Query(None, description="Latitude; farm location when omitted"),
    lng: Optional[float] = Query(None, description="Longitude; farm location when omitted"),
):
    """Get the 7-day forecast for a location"""
    agent = _weather_agent()
    try:
        return await agent.get_forecast(AdvisoryRequest(lat=lat, lng=lng))
    except InvalidForecastInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error getting forecast: {str(e)}")

@router.get("/advisories")
async def get_advisories(
    lat: Optional[float] = Query(None, description="Latitude; farm location when omitted"),
    lng: Optional[float] = Query(None, description="Longitude; farm location when omitted"),
):
    """
    Get weather-aware advisories for the next 7 days

    Spray windows need low wind and no rain, planting windows moderate rain
    and temperatures, fertilization windows little rain and humidity below 85%.
    """
    agent = _weather_agent()
    try:
        return await agent.execute(AdvisoryRequest(lat=lat, lng=lng))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error processing advisory request: {str(e)}")

@router.get("/advisory-types")
async def get_advisory_types():
    """Get advisory types and their display labels"""
    agent = _weather_agent()
    return {
        "success": True,
        "advisory_types": await agent.get_advisory_types(),
    }

@router.get("/health")
async def weather_health():
    """Check weather agent health"""
    try:
        weather_agent = agent_registry.get("weather")
        if not weather_agent:
            return {"status": "unhealthy", "error": "Weather agent not available"}

        return await weather_agent.health_check()

    except Exception as e:
        return {"status": "unhealthy", "error": str(e)}
