# server/run.py
"""
Main entry point for the FarmDash forecast backend
"""

import uvicorn
import logging
from contextlib import asynccontextmanager

from api.app import create_app
from core.config import get_settings
from core.logging import setup_logging
from agents.weather.agent import AdvisoryAgent
from agents.market.agent import MarketAgent
from agents.base import agent_registry

setup_logging()
logger = logging.getLogger(__name__)

def register_agents() -> None:
    """Create the agents and put them in the global registry"""
    agent_registry.register(AdvisoryAgent())
    agent_registry.register(MarketAgent())

@asynccontextmanager
async def lifespan(app):
    """Application lifespan management"""

    logger.info("Starting FarmDash forecast backend")

    try:
        register_agents()

        health_results = await agent_registry.health_check_all()
        for agent_name, health in health_results.items():
            logger.info(f"{agent_name}: {health['status']}")

        logger.info("All agents initialized")

    except Exception as e:
        logger.error(f"Failed to initialize agents: {e}")
        raise

    yield

    agent_registry.clear()
    logger.info("Shutting down FarmDash forecast backend")

def create_application():
    """Create FastAPI application with all configurations"""
    return create_app(lifespan=lifespan)

def main():
    """Main entry point"""
    settings = get_settings()

    logger.info(f"Starting server on {settings.api_host}:{settings.api_port}")
    logger.info(f"Environment: {settings.environment.value}")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.debug:
        # Import string so reload can re-import the app
        uvicorn.run(
            "run:create_application",
            factory=True,
            host=settings.api_host,
            port=settings.api_port,
            reload=True,
            log_level=settings.log_level.value.lower(),
            access_log=True
        )
    else:
        uvicorn.run(
            create_application(),
            host=settings.api_host,
            port=settings.api_port,
            reload=False,
            log_level=settings.log_level.value.lower(),
            access_log=True
        )

if __name__ == "__main__":
    main()
