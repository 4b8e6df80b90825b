"""
Shared test fixtures and configuration.
"""

import json
from pathlib import Path

import pytest

from pakt.adapters.mock import MockExecutor


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every config/store lookup at a temp directory."""
    config_home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("PAKT_STORE", raising=False)
    monkeypatch.delenv("PAKT_CONFIG", raising=False)
    monkeypatch.delenv("PAKT_LOG_FILE", raising=False)
    monkeypatch.delenv("PAKT_LOG_LEVEL", raising=False)
    return config_home


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Return a tracking store location that does not exist yet."""
    return tmp_path / "pakt" / "package.json"


@pytest.fixture
def write_store(store_path: Path):
    """Write a raw ``package_managers`` mapping to the store file."""

    def _write(managers: dict[str, list[str]]) -> Path:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        store_path.write_text(json.dumps({"package_managers": managers}))
        return store_path

    return _write


@pytest.fixture
def mock_executor() -> MockExecutor:
    return MockExecutor()


@pytest.fixture
def fake_distro(monkeypatch: pytest.MonkeyPatch):
    """Make distro detection return a fixed id (or None)."""

    def _set(distro: str | None) -> None:
        monkeypatch.setattr(
            "pakt.core.services.detection.detect_distro",
            lambda: distro,
        )

    return _set
