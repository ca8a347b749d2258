# server/agents/market/__init__.py
"""
Market outlook agent package
"""

from .agent import MarketAgent
from .models import MarketOutlookRequest, MarketOutlookResponse

__all__ = ["MarketAgent", "MarketOutlookRequest", "MarketOutlookResponse"]
