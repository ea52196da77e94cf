"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, GeneratorConfig, LoggingConfig, ServerConfig
from ident.generator import Generator
from fakes import FIXED_MILLIS, FixedRandomSource
from ui.app import create_app


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_MILLIS."""
    return lambda: FIXED_MILLIS


@pytest.fixture
def fixed_generator(fixed_clock):
    """Generator with frozen clock and zero random field."""
    return Generator(clock=fixed_clock, random_source=FixedRandomSource(0))


@pytest.fixture
def app_config(tmp_path):
    """Create test app config."""
    return Config(
        GeneratorConfig(hidden=False),
        ServerConfig(max_batch=50),
        LoggingConfig(level="ERROR", crash_file=str(tmp_path / "crash.log")),
    )


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config, generator=Generator())


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
