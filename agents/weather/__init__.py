# server/agents/weather/__init__.py
"""
Weather advisory agent package
"""

from .agent import AdvisoryAgent
from .models import AdvisoryRequest, AdvisoryResponse

__all__ = ["AdvisoryAgent", "AdvisoryRequest", "AdvisoryResponse"]
