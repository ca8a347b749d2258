# server/scripts/test_agent.py
"""
Smoke script to verify agents work independently of the API
"""

import asyncio
import sys
import traceback

from agents.weather.agent import AdvisoryAgent
from agents.weather.models import AdvisoryRequest
from agents.market.agent import MarketAgent
from agents.market.models import MarketOutlookRequest
from core.config import get_settings
from core.logging import setup_logging

async def check_weather_agent() -> bool:
    """Run the advisory agent end to end"""

    print("Testing Weather Advisory Agent")
    print("=" * 50)

    try:
        agent = AdvisoryAgent()
        health = await agent.health_check()
        print(f"   Status: {health['status']}")

        request = AdvisoryRequest(lat=-1.286389, lng=36.817223)
        response = await agent.execute(request, use_cache=False)

        print(f"   Success: {response.success}")
        print(f"   Message: {response.message}")
        for advisory in response.data.advisories:
            print(f"   {advisory.date} {advisory.display_label}: {advisory.message}")

        fallback = agent.get_fallback_response(request, Exception("Test error"))
        print(f"   Fallback success: {fallback.success}")
        return response.success

    except Exception as e:
        print(f"\nWeather agent check failed: {e}")
        traceback.print_exc()
        return False

async def check_market_agent() -> bool:
    """Run the market agent end to end"""

    print("\nTesting Market Outlook Agent")
    print("=" * 50)

    try:
        agent = MarketAgent()
        health = await agent.health_check()
        print(f"   Status: {health['status']}")

        request = MarketOutlookRequest(crop="Maize", market="Nairobi", horizon_weeks=8)
        response = await agent.execute(request, use_cache=False)

        outlook = response.data
        print(f"   Success: {response.success}")
        print(f"   Current Price: KSh {outlook.current_price}")
        print(f"   Peak Forecast: KSh {outlook.peak_price}")
        print(f"   Recommendation: {outlook.recommendation.value} - {outlook.recommendation_text}")
        return response.success

    except Exception as e:
        print(f"\nMarket agent check failed: {e}")
        traceback.print_exc()
        return False

async def main():
    """Run all checks"""

    setup_logging()
    settings = get_settings()
    print(f"Environment: {settings.environment.value}, latency: {settings.simulated_latency_ms}ms\n")

    results = [await check_weather_agent(), await check_market_agent()]

    if all(results):
        print("\nAgent checks completed successfully")
    else:
        print("\nSome checks failed. See the logs above.")
        sys.exit(1)

if __name__ == "__main__":
    asyncio.run(main())
