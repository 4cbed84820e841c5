"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from hybrid_pages.config import Settings
from hybrid_pages.core.app_factory import create_app


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Project root with empty routes/ and partials/ directories."""
    (tmp_path / "routes").mkdir()
    (tmp_path / "partials").mkdir()
    return tmp_path


@pytest.fixture
def write_route(site_dir: Path) -> Callable[[str, str, str], Path]:
    """Write a hybrid route file under routes/ from script and template sources."""

    def _write(route_path: str, script: str, template: str) -> Path:
        path = site_dir / "routes" / route_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"<script>\n{script}\n</script>\n\n<template>\n{template}\n</template>\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_partial(site_dir: Path) -> Callable[[str, str], Path]:
    """Write a partial template under partials/."""

    def _write(filename: str, content: str) -> Path:
        path = site_dir / "partials" / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_settings(site_dir: Path) -> Settings:
    """Settings rooted at the temporary site directory, ignoring any .env."""
    return Settings(project_root=site_dir, _env_file=None)


@pytest.fixture
def test_client(test_settings: Settings):
    """FastAPI test client with lifespan context."""
    with TestClient(create_app(test_settings)) as client:
        yield client


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for script fetch calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.request = AsyncMock()
    mock_client.send = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client
