# server/core/logging.py
"""
Logging configuration for the backend
"""
import logging
import sys
from .config import get_settings

def setup_logging():
    """Setup logging configuration"""
    settings = get_settings()

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, settings.log_level.value),
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Third-party loggers stay at INFO even in DEBUG mode
    for name in ("uvicorn", "fastapi", "httpx"):
        logging.getLogger(name).setLevel(logging.INFO)
