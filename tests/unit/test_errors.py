"""Unit tests for error classes."""

from taerae.errors import CodecError, ConfigError, ExitCode, MethodCallError, TaeraeError


class TestErrors:
    """Tests for error messages and exit codes."""

    def test_base_error_details(self):
        error = TaeraeError("failed", details="more")
        assert str(error) == "failed\n  Details: more"
        assert error.exit_code == ExitCode.GENERIC_ERROR

    def test_codec_error_truncates_payload(self):
        error = CodecError("bad", b"x" * 500)
        assert error.details.endswith("...")
        assert len(error.details) < 200

    def test_method_call_error(self):
        error = MethodCallError("UNAVAILABLE", "no version")
        assert error.exit_code == ExitCode.METHOD_FAILED
        assert str(error) == "Method call failed [UNAVAILABLE]: no version"
        assert isinstance(error, TaeraeError)

    def test_config_error_location(self):
        error = ConfigError("bad key", "taerae.yml")
        assert str(error) == "Config error in taerae.yml: bad key"
        assert error.exit_code == ExitCode.CONFIG_ERROR
