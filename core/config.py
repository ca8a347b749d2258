# server/core/config.py
"""
Configuration management for the forecast backend
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Dict, Any
from functools import lru_cache
from enum import Enum
from dotenv import load_dotenv
load_dotenv()

class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

class Settings(BaseSettings):
    """Application settings with validation"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True

    # API Configuration
    api_title: str = "FarmDash Forecast Backend"
    api_version: str = "1.0.0"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8080"
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Cache Configuration
    cache_enabled: bool = True
    cache_default_ttl: int = 900  # 15 minutes

    # Artificial delay before agents answer, like the dashboard's mock services
    simulated_latency_ms: int = 400

    # Agent Configurations
    weather_config: Dict[str, Any] = {
        "default_lat": -1.286389,  # Nairobi
        "default_lng": 36.817223,
        "forecast_days": 7,
    }

    market_config: Dict[str, Any] = {
        "default_crop": "Maize",
        "default_market": "Nairobi",
        "horizon_weeks": 8,
        "history_weeks": 12,
        "crops": ["Maize", "Beans", "Banana", "Tomato", "Onion"],
        "markets": ["Nairobi", "Mombasa", "Kisumu", "Eldoret"],
    }

    def get_agent_config(self, agent_name: str) -> Dict[str, Any]:
        """Get configuration for specific agent"""
        config_map = {
            "weather": self.weather_config,
            "market": self.market_config
        }
        return config_map.get(agent_name, {})

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
