"""Logging and metrics for hltvscrape."""

from __future__ import annotations

from .logging import configure_logging
from .metrics import METRICS


def export_prometheus() -> str:
    """Export metrics in Prometheus text format."""
    from prometheus_client import generate_latest

    return generate_latest().decode("utf-8")


__all__ = ["configure_logging", "METRICS", "export_prometheus"]
