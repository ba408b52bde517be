"""
Configuration management for hltvscrape using Pydantic.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, ClassVar, Literal, cast

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

HLTV_URL = "https://www.hltv.org"

# --- Nested Configuration Models ---


class ClientConfig(BaseModel):
    """HTTP transport configuration."""

    base_url: str = Field(default=HLTV_URL, description="Root URL every page path is appended to.")
    timeout: float = Field(default=30.0, description="HTTP request timeout in seconds.")
    user_agent: str = Field(
        default="Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0",
        description="User-Agent string for HTTP requests.",
    )
    request_delay: float = Field(
        default=1.0,
        description="Minimum seconds between two requests from one client. 0 disables throttling.",
    )
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects.")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("request_delay")
    @classmethod
    def validate_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("request_delay must not be negative")
        return v


class ParserConfig(BaseModel):
    """HTML parsing configuration."""

    builder: Literal["html.parser", "lxml"] = Field(
        default="html.parser", description="BeautifulSoup tree builder; lxml needs the lxml extra."
    )


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to a JSON log file. If None, logs go to stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "hltvscrape"
    client: ClientConfig = Field(default_factory=ClientConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="HLTV_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    paths_to_check = [
        current_dir / "hltvscrape.yaml",
        current_dir / "hltvscrape.yml",
        current_dir / "config.yaml",
    ]
    for path in paths_to_check:
        if path.exists():
            return path
    return None


def load_discovered_config() -> Config:
    """Load the first config file found in the working directory, or defaults.

    A discovered file may belong to another tool, so a file that fails to load
    or validate is logged and ignored.
    """
    config_path = find_config_file()
    if config_path is None:
        log.debug("No config file found. Using default settings.")
        return Config()
    try:
        return Config.from_yaml(config_path)
    except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
        log.error(
            "Failed to load or validate configuration from '%s': %s. Falling back to default settings.",
            config_path,
            e,
        )
        return Config()


def load_config(path: Path | None = None) -> Config:
    """Load an explicit config file, or fall back to discovery.

    Errors in an explicit file propagate.
    """
    if path is None:
        return load_discovered_config()
    log.info("Loading configuration from: %s", path)
    return Config.from_yaml(path)


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the Config object that delays its loading and validation
    until an attribute is first accessed.
    """

    _config: ClassVar[Config | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    def _load_config_with_fallback(self) -> Config:
        """Load configuration from file or fall back to defaults."""
        return load_discovered_config()


# --- Global Settings Instance ---
settings: "Config" = cast("Config", LazyConfig())
