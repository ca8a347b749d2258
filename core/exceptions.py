# server/core/exceptions.py
"""
Custom exceptions for the backend
"""

class FarmDashError(Exception):
    """Base exception for the FarmDash backend"""
    pass

class AgentError(FarmDashError):
    """Agent-related errors"""
    pass

class AgentConfigError(FarmDashError):
    """Agent configuration errors"""
    pass

class InvalidForecastInputError(FarmDashError, ValueError):
    """Forecast inputs the engines cannot turn into numbers (NaN, infinity)"""
    pass

class CacheError(FarmDashError):
    """Cache-related errors"""
    pass
