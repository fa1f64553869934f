"""
Custom application exceptions.
"""


class BuildWatchError(Exception):
    """Base exception for build watcher errors."""
    pass


class ConfigurationError(BuildWatchError):
    """Required settings are missing or invalid."""
    pass


class APIError(BuildWatchError):
    """External API call failed."""
    pass


class CircleCIAPIError(APIError):
    """CircleCI API call failed."""
    pass
