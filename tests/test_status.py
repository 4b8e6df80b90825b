"""
Tests for the status and list use cases.
"""

from pathlib import Path

from pakt.core.models.manager import ManagerSpec, PackageAction
from pakt.core.use_cases.status import get_status
from pakt.core.use_cases.tracked import list_tracked


class TestGetStatus:
    def test_reports_every_catalog_manager(self, store_path: Path):
        result = get_status(store_path=store_path, probe=lambda: "fedora", which=lambda b: None)
        assert [m.id for m in result.managers] == ["dnf", "apt", "pacman", "flatpak", "nix"]
        assert result.system_manager == "dnf"
        assert not any(m.available for m in result.managers)

    def test_availability_uses_which(self, store_path: Path):
        result = get_status(
            store_path=store_path,
            probe=lambda: "arch",
            which=lambda b: "/usr/bin/flatpak" if b == "flatpak" else None,
        )
        available = {m.id: m.available for m in result.managers}
        assert available["flatpak"] is True
        assert available["pacman"] is False

    def test_injected_catalog(self, store_path: Path):
        custom = {"brew": ManagerSpec(id="brew", actions={PackageAction.INSTALL: (("install",),)})}
        result = get_status(
            store_path=store_path, catalog=custom, probe=lambda: None, which=lambda b: None,
        )
        assert [(m.id, m.actions) for m in result.managers] == [("brew", ["install"])]

    def test_tracked_counts(self, store_path: Path, write_store):
        write_store({"nix": ["jq", "fd"]})
        result = get_status(store_path=store_path, probe=lambda: None, which=lambda b: None)
        nix = next(m for m in result.managers if m.id == "nix")
        assert nix.tracked == 2
        assert nix.needs_sudo is False

    def test_unknown_distro_is_warning(self, store_path: Path):
        result = get_status(store_path=store_path, probe=lambda: "gentoo", which=lambda b: None)
        assert result.error is None
        assert result.system_manager is None
        assert any("gentoo" in w for w in result.warnings)

    def test_corrupt_store_is_warning(self, store_path: Path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{")
        result = get_status(store_path=store_path, probe=lambda: "fedora", which=lambda b: None)
        assert result.error is None
        assert result.warnings

    def test_config_alias(self, tmp_path: Path, store_path: Path):
        config = tmp_path / "config.yml"
        config.write_text("distro_aliases:\n  Nobara: dnf\n")
        result = get_status(
            config_path=config, store_path=store_path, probe=lambda: "nobara", which=lambda b: None,
        )
        assert result.system_manager == "dnf"


class TestListTracked:
    def test_all(self, store_path: Path, write_store):
        write_store({"dnf": ["vim"], "flatpak": ["org.x.Y"], "apt": []})
        result = list_tracked(store_path=store_path)
        assert result.package_managers == {"dnf": ["vim"], "flatpak": ["org.x.Y"]}
        assert result.total == 2

    def test_one_manager(self, store_path: Path, write_store):
        write_store({"dnf": ["vim"], "flatpak": ["org.x.Y"]})
        result = list_tracked(manager="flatpak", store_path=store_path)
        assert result.package_managers == {"flatpak": ["org.x.Y"]}

    def test_missing_store(self, store_path: Path):
        result = list_tracked(store_path=store_path)
        assert result.error is None
        assert result.total == 0

    def test_corrupt_store_is_error(self, store_path: Path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("3")
        result = list_tracked(store_path=store_path)
        assert result.error_kind == "persistence"
        assert "error" in result.to_dict()
