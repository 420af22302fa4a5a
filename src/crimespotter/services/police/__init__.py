"""Police API client and dates cache."""

from .client import PoliceAPIClient, UpstreamError, UpstreamTimeout
from .dates_cache import DatesCache

__all__ = ["PoliceAPIClient", "UpstreamError", "UpstreamTimeout", "DatesCache"]
