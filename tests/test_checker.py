"""Tests for the read-only update check and its advisory."""

import io
import json
from unittest.mock import patch

import pytest

from checker import check_updates, find_pending_upgrades, print_update_advisory, supports_color, update_command
from importmap.loader import ConfigLoadError

VERSIONS = {
    "live": ["1.1.0", "1.0.0"],
    "apps": ["0.5.0", "0.4.0"],
}


def _project(tmp_path, imports):
    (tmp_path / "deno.json").write_text("{}", encoding="utf-8")
    (tmp_path / "import_map.json").write_text(json.dumps({"imports": imports}), encoding="utf-8")
    return tmp_path


@pytest.fixture
def fetch_versions():
    with patch("registry.deno.fetch_deno_versions", side_effect=lambda name: list(VERSIONS[name])) as mock:
        yield mock


class TestCheckUpdates:
    """Test the boolean update check."""

    def test_updates_available(self, tmp_path, fetch_versions):
        project = _project(tmp_path, {"$live/": "https://deno.land/x/live@1.0.0/"})
        before = (project / "import_map.json").read_bytes()

        assert check_updates(str(project)) is True
        assert (project / "import_map.json").read_bytes() == before

    def test_up_to_date(self, tmp_path, fetch_versions):
        project = _project(tmp_path, {
            "$live/": "https://deno.land/x/live@1.1.0/",
            "std/": "https://deno.land/std@0.1.0/",
        })
        assert check_updates(str(project)) is False

    def test_compat_alias_is_not_an_update(self, tmp_path, fetch_versions):
        project = _project(tmp_path, {"$live/": "https://deno.land/x/live@1.1.0/"})

        assert check_updates(str(project)) is False
        assert "deco/" not in json.loads((project / "import_map.json").read_text(encoding="utf-8"))["imports"]

    def test_stops_at_first_outdated(self, tmp_path, fetch_versions):
        project = _project(tmp_path, {
            "$live/": "https://deno.land/x/live@1.0.0/",
            "apps/": "https://deno.land/x/apps@0.4.0/",
        })

        assert check_updates(str(project))
        fetch_versions.assert_called_once_with("live")

    def test_defaults_to_cwd(self, tmp_path, fetch_versions, monkeypatch):
        monkeypatch.chdir(_project(tmp_path, {"apps/": "https://deno.land/x/apps@0.4.0/"}))
        assert check_updates()

    def test_load_failure_propagates(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            check_updates(str(tmp_path))


class TestFindPendingUpgrades:
    """Test the detailed listing."""

    def test_lists_all_outdated(self, tmp_path, fetch_versions):
        project = _project(tmp_path, {
            "$live/": "https://deno.land/x/live@1.0.0/",
            "apps/": "https://deno.land/x/apps@0.4.0/",
        })

        pending = find_pending_upgrades(str(project))

        assert [(p.alias, p.current_version, p.latest_version) for p in pending] == [
            ("$live/", "1.0.0", "1.1.0"),
            ("apps/", "0.4.0", "0.5.0"),
        ]
        assert pending[1].locator == "https://deno.land/x/apps@0.5.0/"


class TestAdvisory:
    """Test the printed banner."""

    def test_windows_command_uses_double_quotes(self):
        assert update_command("C:\\site", "Windows") == 'pinbump update --directory "C:\\site"'

    @pytest.mark.parametrize("system", ["Linux", "Darwin"])
    def test_posix_command_uses_single_quotes(self, system):
        assert update_command("/srv/site", system) == "pinbump update --directory '/srv/site'"

    def test_command_carries_prerelease_and_config(self):
        command = update_command("/srv/site", "Linux", allow_prerelease=True, config_name="deno.dev.json")
        assert command == "pinbump update --directory '/srv/site' --config 'deno.dev.json' --allow-pre"

    def test_windows_command_quotes_config(self):
        command = update_command("C:\\site", "Windows", config_name="deno.dev.json")
        assert command == 'pinbump update --directory "C:\\site" --config "deno.dev.json"'

    def test_banner_plain_when_not_a_tty(self, tmp_path):
        out = io.StringIO()

        print_update_advisory(str(tmp_path), stream=out, system="Linux")

        lines = out.getvalue().splitlines()
        assert lines[0] == " Updates available!  To update, run:"
        assert lines[1] == f"pinbump update --directory '{tmp_path}'"
        assert "\033[" not in out.getvalue()

    def test_no_color_env(self, monkeypatch):
        class Tty(io.StringIO):
            def isatty(self):
                return True

        monkeypatch.delenv("NO_COLOR", raising=False)
        assert supports_color(Tty())
        monkeypatch.setenv("NO_COLOR", "1")
        assert not supports_color(Tty())
