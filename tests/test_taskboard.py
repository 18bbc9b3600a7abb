"""Tests for taskboard.py - the command-line entry point."""

import json
import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

import logging_setup
import taskboard
from board_config import Settings
from taskboard import main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI runs from reconfiguring the root logger."""
    monkeypatch.setattr(taskboard, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def storage_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "board"
    monkeypatch.setenv("TASKBOARD_STORAGE_DIR", str(directory))
    monkeypatch.delenv("TASKBOARD_STORAGE_KEY", raising=False)
    return directory


class TestList:
    """Tests for the list command."""

    def test_empty(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["list"]) == 0
        assert "No tasks." in capsys.readouterr().out

    def test_lists_in_order(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        storage_dir.mkdir()
        (storage_dir / "tasks.json").write_text(json.dumps([
            {"id": 2, "title": "Walk dog", "description": ""},
            {"id": 1, "title": "Buy milk", "description": ""},
        ]))

        main(["list"])

        assert capsys.readouterr().out.splitlines() == ["#2 Walk dog", "#1 Buy milk"]

    def test_json(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        main(["add", "Buy milk"])
        capsys.readouterr()

        assert main(["list", "--json"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {
            "tasks": [{"id": 1, "title": "Buy milk", "description": ""}],
            "next_id": 2,
        }

    def test_list_does_not_write(self, storage_dir: Path) -> None:
        main(["list"])
        assert not (storage_dir / "tasks.json").exists()


class TestAdd:
    """Tests for the add command."""

    def test_adds_and_persists(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["add", "Buy milk"]) == 0
        assert "Added #1 Buy milk" in capsys.readouterr().out

        data = json.loads((storage_dir / "tasks.json").read_text())
        assert data == [{"id": 1, "title": "Buy milk", "description": ""}]

    def test_ids_continue_across_runs(self, storage_dir: Path) -> None:
        main(["add", "a"])
        main(["add", "b"])

        data = json.loads((storage_dir / "tasks.json").read_text())
        assert [t["id"] for t in data] == [1, 2]

    def test_empty_title_fails(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["add", " "]) == 1
        assert "must not be empty" in capsys.readouterr().out

    def test_storage_dir_flag_overrides_env(self, storage_dir: Path, tmp_path: Path) -> None:
        other = tmp_path / "other"
        main(["--storage-dir", str(other), "add", "x"])

        assert (other / "tasks.json").exists()
        assert not (storage_dir / "tasks.json").exists()

    def test_key_flag(self, storage_dir: Path) -> None:
        main(["--key", "work", "add", "x"])
        assert (storage_dir / "work.json").exists()

    def test_write_failure(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("")

        assert main(["--storage-dir", str(blocker), "add", "x"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_unusable_storage_dir_with_real_logging(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture,
    ) -> None:
        monkeypatch.setattr(taskboard, "setup_logging", logging_setup.setup_logging)
        blocker = tmp_path / "file"
        blocker.write_text("")

        for argv in (["list"], ["add", "x"]):
            assert main(["--storage-dir", str(blocker / "sub"), *argv]) == 1
            assert "Error: cannot open log file" in capsys.readouterr().out


class TestDelete:
    """Tests for the delete command."""

    def test_deletes(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        main(["add", "a"])
        main(["add", "b"])
        capsys.readouterr()

        assert main(["delete", "1"]) == 0
        assert "Deleted #1" in capsys.readouterr().out

        data = json.loads((storage_dir / "tasks.json").read_text())
        assert data == [{"id": 2, "title": "b", "description": ""}]

    def test_unknown_id_succeeds(self, storage_dir: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["delete", "7"]) == 0
        assert "No task #7" in capsys.readouterr().out


class TestTuiCommand:
    """The default command launches the TUI."""

    def test_default_runs_tui(self, storage_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        import tui.app

        monkeypatch.setattr(tui.app, "run", lambda directory, key: calls.append((directory, key)))

        assert main([]) == 0
        assert calls == [(storage_dir, "tasks")]


class TestSettings:
    """Tests for board_config.Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("TASKBOARD_STORAGE_DIR", "TASKBOARD_STORAGE_KEY", "TASKBOARD_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.storage_dir == Path("~/.taskboard").expanduser()
        assert settings.storage_key == "tasks"
        assert settings.log_level == "WARNING"
        assert settings.log_file == settings.storage_dir / "taskboard.log"

    def test_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TASKBOARD_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("TASKBOARD_STORAGE_KEY", "work")
        monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.storage_dir == tmp_path
        assert settings.storage_key == "work"
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TASKBOARD_LOG_LEVEL", "chatty")
        assert Settings.from_env().log_level == "WARNING"

    def test_overrides_ignore_none(self, tmp_path: Path) -> None:
        base = Settings(storage_dir=tmp_path, storage_key="tasks", log_level="INFO")
        assert base.with_overrides() == base
        assert base.with_overrides(storage_key="work").storage_key == "work"
