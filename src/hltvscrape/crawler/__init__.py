"""HTTP transport for hltvscrape."""

from .http_client import HltvHttpClient

__all__ = ["HltvHttpClient"]
