"""Tests for the command-line entry point."""

import json
import logging
import shlex
from unittest.mock import patch

import pytest

from args import parse_args
from constants import ExitCodes
from importmap.loader import ImportMapWriteError
from pinbump import main


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch):
    monkeypatch.setenv("PINBUMP_LOG_LEVEL", "INFO")
    root = logging.getLogger()
    old_level = root.level
    yield
    root.setLevel(old_level)
    for handler in list(root.handlers):
        if getattr(handler, "_added_by_configure_logging", False):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def project(tmp_path):
    (tmp_path / "deno.json").write_text("{}", encoding="utf-8")
    (tmp_path / "import_map.json").write_text(
        json.dumps({"imports": {"deco/": "https://deno.land/x/deco@1.0.0/"}}), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def fetch_versions():
    with patch("registry.deno.fetch_deno_versions", return_value=["1.1.0-rc.1", "1.0.1", "1.0.0"]) as mock:
        yield mock


def _pinned(project):
    return json.loads((project / "import_map.json").read_text(encoding="utf-8"))["imports"]["deco/"]


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        ns = parse_args([])
        assert ns.action == "update"
        assert ns.ALLOW_PRE is False
        assert ns.DIRECTORY is None
        assert ns.LOG_LEVEL is None

    def test_check_with_flags(self):
        ns = parse_args(["check", "--allow-pre", "-d", "site", "--error-on-updates", "--loglevel", "debug"])
        assert ns.action == "check"
        assert ns.ALLOW_PRE is True
        assert ns.DIRECTORY == "site"
        assert ns.ERROR_ON_UPDATES is True
        assert ns.LOG_LEVEL == "DEBUG"

    def test_unknown_action(self):
        with pytest.raises(SystemExit):
            parse_args(["upgrade"])


class TestMain:
    """Tests for main()."""

    def test_update(self, project, fetch_versions):
        assert main(["update", "-d", str(project)]) == ExitCodes.SUCCESS.value
        assert _pinned(project) == "https://deno.land/x/deco@1.0.1/"

    def test_update_allow_pre(self, project, fetch_versions):
        assert main(["--allow-pre", "-d", str(project)]) == ExitCodes.SUCCESS.value
        assert _pinned(project) == "https://deno.land/x/deco@1.1.0-rc.1/"

    def test_update_dry_run(self, project, fetch_versions):
        assert main(["update", "--dry-run", "-d", str(project)]) == ExitCodes.SUCCESS.value
        assert _pinned(project) == "https://deno.land/x/deco@1.0.0/"

    def test_check_prints_advisory(self, project, fetch_versions, capsys):
        assert main(["check", "-d", str(project)]) == ExitCodes.SUCCESS.value
        out = capsys.readouterr().out
        assert "Updates available!" in out
        assert "pinbump update --directory" in out
        assert _pinned(project) == "https://deno.land/x/deco@1.0.0/"

    def test_check_error_on_updates(self, project, fetch_versions):
        code = main(["check", "--error-on-updates", "-q", "-d", str(project)])
        assert code == ExitCodes.UPDATES_AVAILABLE.value

    def test_check_up_to_date(self, project, capsys):
        with patch("registry.deno.fetch_deno_versions", return_value=["1.0.0"]):
            code = main(["check", "--error-on-updates", "-d", str(project)])
        assert code == ExitCodes.SUCCESS.value
        assert "Updates available!" not in capsys.readouterr().out

    def test_missing_project(self, tmp_path):
        assert main(["update", "-d", str(tmp_path)]) == ExitCodes.FILE_ERROR.value
        assert main(["check", "-d", str(tmp_path)]) == ExitCodes.FILE_ERROR.value

    def test_write_failure(self, project, fetch_versions):
        with patch("updater.write_import_map", side_effect=ImportMapWriteError("read-only")):
            assert main(["update", "-d", str(project)]) == ExitCodes.FILE_ERROR.value

    def test_log_level_from_environment(self, project, fetch_versions, monkeypatch):
        monkeypatch.setenv("PINBUMP_LOG_LEVEL", "WARNING")
        main(["update", "-d", str(project)])
        assert logging.getLogger().level == logging.WARNING

    def test_log_level_flag_wins(self, project, fetch_versions, monkeypatch):
        monkeypatch.setenv("PINBUMP_LOG_LEVEL", "WARNING")
        main(["update", "--loglevel", "error", "-d", str(project)])
        assert logging.getLogger().level == logging.ERROR

    def test_advised_command_applies_checked_upgrade(self, tmp_path, fetch_versions, capsys):
        (tmp_path / "deno.dev.json").write_text(json.dumps({"importMap": "./import_map.json"}), encoding="utf-8")
        (tmp_path / "import_map.json").write_text(
            json.dumps({"imports": {"deco/": "https://deno.land/x/deco@1.0.0/"}}), encoding="utf-8"
        )

        with patch("checker.platform.system", return_value="Linux"):
            assert main(["check", "--allow-pre", "-c", "deno.dev.json", "-d", str(tmp_path)]) == 0
        advised = capsys.readouterr().out.strip().splitlines()[-1]
        argv = shlex.split(advised)

        assert argv[:2] == ["pinbump", "update"]
        assert main(argv[1:]) == ExitCodes.SUCCESS.value
        assert _pinned(tmp_path) == "https://deno.land/x/deco@1.1.0-rc.1/"
