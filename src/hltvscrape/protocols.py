"""
Protocols for the collaborators around the extraction core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PageFetcher(Protocol):
    """Fetches raw page markup for a site-relative path."""

    async def fetch(self, path: str) -> str:
        """Fetch the page at ``path`` (e.g. ``"/results"``).

        Raises:
            TransportError: if the page cannot be fetched or the status is not 2xx
        """
        ...

    async def close(self) -> None:
        ...
