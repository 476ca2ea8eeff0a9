"""Tests for authclient configuration loading."""

import pytest

from authclient.config import AuthClientConfig, load_config, load_yaml


def _write(tmp_path, text):
    path = tmp_path / "auth_client.yaml"
    path.write_text(text)
    return path


class TestAuthClientConfig:
    def test_defaults(self):
        config = AuthClientConfig()

        assert config.request_timeout_seconds == 30.0
        assert config.connect_timeout_seconds == 10.0
        assert config.max_connections == 100
        assert config.max_connections_per_host == 10
        assert config.enable_ssl is True
        assert config.log_level == "INFO"
        assert config.log_dir is None
        assert config.json_logs is True
        config.validate()

    def test_string_values_coerced(self):
        config = AuthClientConfig(
            request_timeout_seconds="15",
            max_connections="50",
            enable_ssl="false",
            json_logs="yes",
            log_level="debug",
        )

        assert config.request_timeout_seconds == 15.0
        assert config.max_connections == 50
        assert config.enable_ssl is False
        assert config.json_logs is True
        assert config.log_level == "DEBUG"

    def test_empty_log_dir_is_none(self):
        assert AuthClientConfig(log_dir="").log_dir is None

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({"request_timeout_seconds": 0}, "request_timeout_seconds must be > 0"),
            ({"connect_timeout_seconds": -1}, "connect_timeout_seconds must be > 0"),
            ({"connect_timeout_seconds": 60}, "must not exceed request_timeout_seconds"),
            ({"max_connections": 0, "max_connections_per_host": 0}, "max_connections must be >= 1"),
            ({"max_connections_per_host": 500}, "max_connections_per_host must be between"),
            ({"log_level": "verbose"}, "logging.level must be one of"),
        ],
    )
    def test_validation_errors(self, kwargs, expected):
        config = AuthClientConfig(**kwargs)

        with pytest.raises(ValueError, match="Invalid auth_client configuration") as exc_info:
            config.validate()

        assert expected in str(exc_info.value)

    def test_all_errors_reported(self):
        config = AuthClientConfig(request_timeout_seconds=-1, log_level="loud")

        with pytest.raises(ValueError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "request_timeout_seconds" in message
        assert "logging.level" in message


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == AuthClientConfig()

    def test_loads_section(self, tmp_path):
        path = _write(
            tmp_path,
            """
auth_client:
  transport:
    request_timeout_seconds: 20
    connect_timeout_seconds: 5
    max_connections: 40
    max_connections_per_host: 8
    enable_ssl: false
  logging:
    level: warning
    dir: /var/log/authclient
    json: false
""",
        )

        config = load_config(path)

        assert config.request_timeout_seconds == 20.0
        assert config.connect_timeout_seconds == 5.0
        assert config.max_connections == 40
        assert config.max_connections_per_host == 8
        assert config.enable_ssl is False
        assert config.log_level == "WARNING"
        assert config.log_dir == "/var/log/authclient"
        assert config.json_logs is False

    def test_missing_keys_use_defaults(self, tmp_path):
        path = _write(tmp_path, "auth_client:\n  transport:\n    max_connections: 200\n")

        config = load_config(path)

        assert config.max_connections == 200
        assert config.request_timeout_seconds == 30.0
        assert config.log_level == "INFO"

    def test_missing_section_gives_defaults(self, tmp_path):
        path = _write(tmp_path, "other_service:\n  enabled: true\n")
        assert load_config(path) == AuthClientConfig()

    def test_env_var_expansion(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AUTH_TIMEOUT", "12")
        monkeypatch.delenv("AUTH_LOG_LEVEL", raising=False)
        path = _write(
            tmp_path,
            """
auth_client:
  transport:
    request_timeout_seconds: ${AUTH_TIMEOUT}
  logging:
    level: ${AUTH_LOG_LEVEL:-ERROR}
""",
        )

        config = load_config(path)

        assert config.request_timeout_seconds == 12.0
        assert config.log_level == "ERROR"

    def test_invalid_values_raise(self, tmp_path):
        path = _write(tmp_path, "auth_client:\n  transport:\n    request_timeout_seconds: 0\n")

        with pytest.raises(ValueError, match="request_timeout_seconds must be > 0"):
            load_config(path)


class TestLoadYaml:
    def test_missing_file(self, tmp_path):
        assert load_yaml(tmp_path / "nope.yaml") == {}

    def test_empty_file(self, tmp_path):
        assert load_yaml(_write(tmp_path, "")) == {}
