"""
Shared pytest fixtures and configuration for calc-spine tests.

This module provides:
- Settings fixtures with the engine defaults
- A TestClient bound to a freshly built application
- Cache and logging-context cleanup for test isolation

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments
    (pytest injects them automatically).
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Ensure calc_spine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from calc_spine.api.app import create_app
from calc_spine.api.deps import get_settings
from calc_spine.api.settings import CalcAPISettings


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if test_path.parts[0] == "api":
            item.add_marker(pytest.mark.api)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate() -> Generator[None, None, None]:
    """Clear cached settings, bound log context and logging config around every test."""
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


# =============================================================================
# API fixtures
# =============================================================================


@pytest.fixture
def settings() -> CalcAPISettings:
    """Settings with defaults, unaffected by any local .env file."""
    return CalcAPISettings(_env_file=None)


@pytest.fixture
def app(settings: CalcAPISettings):
    """Application built from the ``settings`` fixture."""
    return create_app(settings=settings)


@pytest.fixture
def client(app):
    """TestClient with the lifespan entered."""
    from fastapi.testclient import TestClient

    with TestClient(app) as c:
        yield c
