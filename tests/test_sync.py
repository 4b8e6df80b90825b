"""
Tests for sync — replaying the tracking store.
"""

from pathlib import Path

from pakt.adapters.mock import MockExecutor
from pakt.core.use_cases.sync import run_sync


class TestSync:
    def test_replays_single_manager(self, store_path: Path, write_store, mock_executor):
        write_store({"dnf": ["vim", "git"]})
        result = run_sync(store_path=store_path, executor=mock_executor)
        assert result.status == "ok"
        assert mock_executor.commands == ["sudo dnf install vim git"]
        assert mock_executor.call_log[0].argv() == ["sudo", "dnf", "install", "vim", "git"]

    def test_one_batch_per_manager_in_store_order(self, store_path, write_store, mock_executor):
        write_store({"flatpak": ["org.gimp.GIMP"], "apt": ["curl", "jq"]})
        run_sync(store_path=store_path, executor=mock_executor)
        assert mock_executor.commands == [
            "flatpak install org.gimp.GIMP",
            "sudo apt install curl jq",
        ]

    def test_nix_packages_each_attached(self, store_path, write_store, mock_executor):
        write_store({"nix": ["ripgrep", "fd"]})
        run_sync(store_path=store_path, executor=mock_executor)
        assert mock_executor.call_log[0].argv() == [
            "nix", "profile", "install", "nixpkgs#ripgrep", "nixpkgs#fd",
        ]

    def test_failure_does_not_abort(self, store_path, write_store, mock_executor):
        write_store({"dnf": ["vim", "git"], "flatpak": ["org.x.Y"]})
        mock_executor.set_failure("dnf", error="Command exited with code 1")
        result = run_sync(store_path=store_path, executor=mock_executor)
        assert mock_executor.call_count == 2
        assert result.status == "partial"
        assert result.failed == 1
        assert result.succeeded == 1

    def test_all_failed(self, store_path, write_store, mock_executor):
        write_store({"dnf": ["vim"]})
        mock_executor.set_failure("dnf")
        assert run_sync(store_path=store_path, executor=mock_executor).status == "failed"

    def test_unknown_manager_skipped(self, store_path, write_store, mock_executor):
        write_store({"brew": ["wget"], "dnf": ["vim"]})
        result = run_sync(store_path=store_path, executor=mock_executor)
        assert result.skipped == 1
        assert result.status == "ok"
        assert mock_executor.commands == ["sudo dnf install vim"]

    def test_empty_lists_skipped(self, store_path, write_store, mock_executor):
        write_store({"dnf": [], "apt": ["curl"]})
        run_sync(store_path=store_path, executor=mock_executor)
        assert mock_executor.commands == ["sudo apt install curl"]

    def test_unavailable_manager_fails_batch(self, store_path, write_store):
        write_store({"dnf": ["vim"]})
        executor = MockExecutor(available=False)
        result = run_sync(store_path=store_path, executor=executor)
        assert executor.call_count == 0
        assert result.status == "failed"
        assert "not available" in result.receipts[0].error

    def test_missing_store_is_empty(self, store_path: Path, mock_executor: MockExecutor):
        result = run_sync(store_path=store_path, executor=mock_executor)
        assert result.error is None
        assert result.status == "empty"
        assert mock_executor.call_count == 0

    def test_corrupt_store_is_error(self, store_path: Path, mock_executor: MockExecutor):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("nope")
        result = run_sync(store_path=store_path, executor=mock_executor)
        assert result.error_kind == "persistence"
        assert result.status == "error"
        assert mock_executor.call_count == 0

    def test_never_writes_store(self, store_path, write_store, mock_executor):
        write_store({"dnf": ["vim"]})
        before = store_path.read_text()
        run_sync(store_path=store_path, executor=mock_executor)
        assert store_path.read_text() == before

    def test_dry_run(self, store_path, write_store, mock_executor):
        write_store({"dnf": ["vim", "git"]})
        result = run_sync(store_path=store_path, executor=mock_executor, dry_run=True)
        assert mock_executor.call_count == 0
        assert result.receipts[0].command == "sudo dnf install vim git"
        assert result.skipped == 1

    def test_to_dict(self, store_path, write_store, mock_executor):
        write_store({"dnf": ["vim"]})
        data = run_sync(store_path=store_path, executor=mock_executor).to_dict()
        assert data["status"] == "ok"
        assert data["packages"] == {"dnf": ["vim"]}
        assert data["receipts"][0]["manager"] == "dnf"
