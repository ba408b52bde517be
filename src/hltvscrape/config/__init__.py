"""Configuration for hltvscrape."""

from .config import (
    HLTV_URL,
    ClientConfig,
    Config,
    MonitoringConfig,
    ParserConfig,
    find_config_file,
    load_config,
    load_discovered_config,
    settings,
)

__all__ = [
    "HLTV_URL",
    "ClientConfig",
    "Config",
    "MonitoringConfig",
    "ParserConfig",
    "find_config_file",
    "load_config",
    "load_discovered_config",
    "settings",
]
