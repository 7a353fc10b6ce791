"""Models for configuration between CLI arguments and environment variables."""

from enum import Enum


class FetcherBackend(str, Enum):
    """Enum for the backends able to fetch GitHub resources."""

    GH = "gh"
    API = "api"
