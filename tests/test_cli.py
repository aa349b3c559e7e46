"""Tests for cli.py — argument handling, output, and exit codes."""

import json
from unittest.mock import patch

import pytest

from safari_tabs.__version__ import __version__
from safari_tabs.cli import format_windows, main
from safari_tabs.errors import AutomationError
from safari_tabs.schemas import TabInfo, WindowInfo


def _run(service, argv):
    with patch("safari_tabs.cli.create_service", return_value=service):
        main(argv)


class TestFormatWindows:
    def test_tree(self):
        windows = [
            WindowInfo(
                index=1,
                active_tab=2,
                tabs=[TabInfo(index=1, window_index=1, title="A"), TabInfo(index=2, window_index=1, title="B")],
            ),
            WindowInfo(index=2, active_tab=1, tabs=[TabInfo(index=1, window_index=2, title="C")]),
        ]
        assert format_windows(windows) == (
            "Windows\n"
            "├─ Window 1\n"
            "│  ├─ [ 1] A\n"
            "│  └─ [ 2] * B\n"
            "└─ Window 2\n"
            "   └─ [ 1] * C"
        )

    def test_no_windows(self):
        assert format_windows([]) == "Windows"


class TestActivateCommand:
    def test_window_and_tab(self, make_service):
        service = make_service(tab_counts=(2, 3), active=[1, 1])
        _run(service, ["activate", "2", "3"])
        assert service.active == [1, 3]
        assert ("activate_app",) in service.calls

    def test_alias_window_only(self, make_service):
        service = make_service(tab_counts=(2,), active=[2])
        _run(service, ["a", "1"])
        assert service.active == [2]
        assert service.names().count("set_visible") == 2

    @pytest.mark.parametrize(
        "argv, message",
        [
            (["activate", "abc"], "Invalid window: NaN"),
            (["activate", "1", "xyz"], "Invalid tab: NaN"),
            (["activate", "4"], "Invalid window: 4"),
            (["activate", "1", "7"], "Invalid tab for window 1: 7"),
            (["activate", "-x"], "Invalid window: NaN"),
            (["activate", "-1abc"], "Invalid window: -1"),
            (["activate", "1", "-tab"], "Invalid tab: NaN"),
            (["a", "--", "2"], "Invalid window: NaN"),
            (["activate"], "Invalid window: NaN"),
        ],
    )
    def test_invalid_input_exits_1(self, make_service, capsys, argv, message):
        with pytest.raises(SystemExit) as exc:
            _run(make_service(tab_counts=(2,)), argv)
        assert exc.value.code == 1
        assert capsys.readouterr().err.strip() == message

    def test_verbose_flag_before_command(self, make_service):
        service = make_service(tab_counts=(3,), active=[1])
        _run(service, ["-v", "activate", "1", "3"])
        assert service.active == [3]

    def test_help_still_available(self, make_service, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(make_service(), ["activate", "-h"])
        assert exc.value.code == 0
        assert "Window number" in capsys.readouterr().out


class TestListCommand:
    def test_text(self, make_service, capsys):
        _run(make_service(tab_counts=(2,), active=[2]), ["list"])
        out = capsys.readouterr().out
        assert out.startswith("Windows\n")
        assert "[ 2] * Tab 2" in out

    def test_json_uses_camel_case_aliases(self, make_service, capsys):
        _run(make_service(tab_counts=(1, 2), active=[1, 2]), ["l", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert [w["index"] for w in data] == [1, 2]
        assert data[1]["activeTab"] == 2
        assert data[1]["tabs"][0] == {
            "index": 1,
            "windowIndex": 2,
            "title": "Tab 1",
            "url": "https://example.com/2/1",
        }


class TestCloseCommand:
    def test_close_tabs_right(self, make_service):
        service = make_service(tab_counts=(5,))
        _run(service, ["close", "tabs-right", "1", "2"])
        assert service.tab_counts == [2]

    def test_defaults_to_frontmost_current_tab(self, make_service):
        service = make_service(tab_counts=(3, 3), active=[2, 1])
        _run(service, ["c", "t"])
        assert service.tab_counts == [2, 3]

    def test_invalid_target(self, make_service, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(make_service(), ["close", "bogus"])
        assert exc.value.code == 1
        assert capsys.readouterr().err.strip() == "Invalid target: bogus"


class TestMain:
    def test_no_command_prints_help(self, capsys):
        main([])
        assert "usage: safari-tabs" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_automation_error_reported(self, capsys):
        with patch(
            "safari_tabs.cli.create_service",
            side_effect=AutomationError("Safari automation is only supported on macOS"),
        ):
            with pytest.raises(SystemExit) as exc:
                main(["list"])
        assert exc.value.code == 1
        assert capsys.readouterr().err.strip() == (
            "Safari command failed: Safari automation is only supported on macOS"
        )
