"""Unit tests for the taerae CLI."""

import json
import platform

import pytest

from taerae import __version__, cli, plugin
from taerae.config import ChannelConfig, get_config, set_config
from taerae.errors import ExitCode


@pytest.fixture
def restore_config():
    original = get_config()
    set_config(ChannelConfig())
    yield
    set_config(original)


@pytest.fixture
def failing_version(monkeypatch):
    def fail(label=None):
        raise RuntimeError("version unavailable")

    monkeypatch.setattr(plugin, "platform_version_string", fail)


@pytest.fixture
def mac_host(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Darwin")
    monkeypatch.setattr(platform, "mac_ver", lambda: ("14.2", ("", "", ""), ""))


class TestParser:
    """Tests for argument parsing."""

    def test_create_parser(self):
        parser = cli.create_parser()
        assert parser.prog == "taerae"

    def test_version_string(self):
        version = cli.get_version_string()
        assert __version__ in version
        assert "python" in version

    def test_no_args_shows_help(self, capsys):
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCallCommand:
    """Tests for the call command."""

    def test_get_platform_version(self, capsys, mac_host):
        assert cli.main(["call", "getPlatformVersion"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == "macOS 14.2"

    def test_json_output(self, capsys, mac_host):
        result = cli.main(["call", "getPlatformVersion", "--channel", "flutter_taerae", "--json"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "channel": "flutter_taerae",
            "method": "getPlatformVersion",
            "status": "ok",
            "result": "macOS 14.2",
        }

    def test_unknown_method(self, capsys):
        assert cli.main(["call", "unknownMethod"]) == ExitCode.NOT_IMPLEMENTED
        assert "not implemented" in capsys.readouterr().err

    def test_unknown_method_json(self, capsys):
        assert cli.main(["call", "unknownMethod", "--json"]) == ExitCode.NOT_IMPLEMENTED
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "not_implemented"
        assert data["result"] is None

    def test_empty_method_name(self):
        assert cli.main(["call", ""]) == ExitCode.NOT_IMPLEMENTED

    def test_bad_json_args(self, capsys):
        assert cli.main(["call", "getPlatformVersion", "--args", "{oops"]) == ExitCode.CONFIG_ERROR
        assert "--args" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys, mac_host):
        path = tmp_path / "taerae.yml"
        path.write_text("channel_name: from_file\nplatform_label: Mac\n")

        assert cli.main(["-c", str(path), "call", "getPlatformVersion", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["channel"] == "from_file"
        assert data["result"] == "Mac 14.2"

    def test_missing_config_file(self, tmp_path, capsys):
        result = cli.main(["-c", str(tmp_path / "missing.yml"), "call", "getPlatformVersion"])
        assert result == ExitCode.CONFIG_ERROR
        assert "ERROR" in capsys.readouterr().err


class TestMethodsCommand:
    """Tests for the methods command."""

    def test_lists_methods(self, capsys):
        assert cli.main(["methods"]) == 0
        assert capsys.readouterr().out.split() == ["getPlatformVersion"]


class TestFailures:
    """Tests for error exit paths."""

    def test_error_envelope_exit_code(self, capsys, failing_version):
        assert cli.main(["call", "getPlatformVersion"]) == ExitCode.METHOD_FAILED
        err = capsys.readouterr().err
        assert "getPlatformVersion: error [error] version unavailable" in err

    def test_error_envelope_json(self, capsys, failing_version):
        assert cli.main(["call", "getPlatformVersion", "--json"]) == 2
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "error"
        assert data["result"] == {"code": "error", "message": "version unavailable"}

    def test_invalid_global_config(self, capsys, restore_config):
        get_config().log_level = "loud"
        assert cli.main(["methods"]) == ExitCode.CONFIG_ERROR
        assert "log_level" in capsys.readouterr().err

    def test_keyboard_interrupt(self, capsys, monkeypatch):
        def interrupted(args, config):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_call", interrupted)
        assert cli.main(["call", "getPlatformVersion"]) == ExitCode.KEYBOARD_INTERRUPT
        assert "Interrupted" in capsys.readouterr().err
