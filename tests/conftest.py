"""
Shared fixtures for the hltvscrape test suite.
"""

from pathlib import Path

import pytest
from hltvscrape.config import Config

from tests.helpers.fakes import FakeFetcher


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "network: Tests requiring network access")


@pytest.fixture
def fake_fetcher_factory():
    """Build a FakeFetcher from a path -> HTML mapping."""
    return FakeFetcher


@pytest.fixture
def test_config() -> Config:
    """Default configuration with throttling disabled."""
    return Config.model_validate({"client": {"request_delay": 0}})


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch):
    """Run every test in an empty directory so no stray config file is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ("HLTV_PROJECT_NAME", "HLTV_CLIENT__BASE_URL", "HLTV_MONITORING__LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
