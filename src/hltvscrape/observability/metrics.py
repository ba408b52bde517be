"""
Defines Prometheus metrics for fetching and parsing HLTV pages.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (e.g. under test reloads) must not try to register
# the same collector name twice.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[no-untyped-def]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing

        try:
            return metric_cls(name, documentation, *args, **kwargs)
        except ValueError:
            # Registration lost the race; use the collector that won.
            return _PROM_REGISTRY._names_to_collectors[name]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)
Histogram = _duplicate_safe_factory(_OrigHistogram)


def _create_metrics() -> Dict[str, Any]:
    return {
        "pages_fetched": Counter(
            "hltvscrape_pages_fetched_total",
            "Total number of HLTV pages fetched successfully",
            ["page"],
        ),
        "fetch_duration_seconds": Histogram(
            "hltvscrape_fetch_duration_seconds",
            "Time taken to fetch one HLTV page",
            buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
        ),
        "records_extracted": Counter(
            "hltvscrape_records_extracted_total",
            "Total number of records extracted from HLTV pages",
            ["page"],
        ),
        "parse_failures": Counter(
            "hltvscrape_parse_failures_total",
            "Total number of failed page extractions",
            ["page", "kind"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
