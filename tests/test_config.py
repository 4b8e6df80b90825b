"""
Tests for config.yml loading and store path resolution.
"""

import textwrap
from pathlib import Path

import pytest

from pakt.core.config.loader import (
    PaktConfig,
    app_dir,
    config_home,
    find_config_file,
    load_config,
    resolve_store_path,
)
from pakt.core.errors import ConfigurationError


class TestConfigHome:
    def test_xdg(self, isolated_config: Path):
        assert config_home() == isolated_config
        assert app_dir() == isolated_config / "pakt"

    def test_relative_xdg_ignored(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert config_home() == tmp_path / ".config"

    def test_no_home_is_configuration_error(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME")

        def _no_home():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", staticmethod(_no_home))
        with pytest.raises(ConfigurationError, match="home directory"):
            config_home()


class TestLoadConfig:
    def _write(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content))
        return path

    def test_no_file_gives_defaults(self):
        assert find_config_file() is None
        assert load_config() == PaktConfig()

    def test_default_location(self, isolated_config: Path):
        self._write(isolated_config / "pakt" / "config.yml", """\
            distro_aliases:
              Rocky: dnf
        """)
        config = load_config()
        assert config.distro_aliases == {"rocky": "dnf"}

    def test_env_location(self, monkeypatch, tmp_path: Path):
        path = self._write(tmp_path / "custom.yml", "store_path: ~/pkgs.json\n")
        monkeypatch.setenv("PAKT_CONFIG", str(path))
        assert load_config().store_path == "~/pkgs.json"

    def test_explicit_missing_raises(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yml")

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = self._write(tmp_path / "config.yml", "")
        assert load_config(path) == PaktConfig()

    def test_invalid_yaml(self, tmp_path: Path):
        path = self._write(tmp_path / "config.yml", "store_path: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = self._write(tmp_path / "config.yml", "- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_unknown_alias_manager(self, tmp_path: Path):
        path = self._write(tmp_path / "config.yml", """\
            distro_aliases:
              gentoo: emerge
        """)
        with pytest.raises(ConfigurationError, match="emerge"):
            load_config(path)


class TestResolveStorePath:
    def test_default(self, isolated_config: Path):
        assert resolve_store_path() == isolated_config / "pakt" / "package.json"

    def test_explicit_wins(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("PAKT_STORE", str(tmp_path / "env.json"))
        explicit = tmp_path / "cli.json"
        assert resolve_store_path(explicit, PaktConfig(store_path="/cfg.json")) == explicit

    def test_env_beats_config(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("PAKT_STORE", str(tmp_path / "env.json"))
        assert resolve_store_path(None, PaktConfig(store_path="/cfg.json")) == tmp_path / "env.json"

    def test_config_beats_default(self):
        assert resolve_store_path(None, PaktConfig(store_path="/cfg.json")) == Path("/cfg.json")
