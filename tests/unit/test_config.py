"""
Unit tests for config module.
"""

from pathlib import Path

from kfconsole import config


class TestLoadConfig:
    """Test config loading functionality."""

    def test_returns_empty_dict_when_no_file(self, tmp_path, monkeypatch):
        """Should return empty dict when config file doesn't exist."""
        monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "nonexistent.yaml")
        assert config.load_config() == {}

    def test_loads_valid_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("kubectl: /opt/bin/kubectl\nlog_level: debug\n")
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        result = config.load_config()

        assert result == {"kubectl": "/opt/bin/kubectl", "log_level": "debug"}

    def test_returns_empty_dict_on_invalid_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("invalid: yaml: content: [")
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        assert config.load_config() == {}

    def test_returns_empty_dict_when_yaml_is_not_dict(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- item1\n- item2\n")
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        assert config.load_config() == {}


class TestSaveConfig:
    """Test save_config."""

    def test_round_trips_through_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "nested" / "config.yaml"
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        config.save_config({"kubectl": "kubectl-1.29", "refresh_seconds": 5})

        assert config.load_config() == {"kubectl": "kubectl-1.29", "refresh_seconds": 5}


class TestAccessors:
    """Test the typed accessors and their defaults."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")

        assert config.get_store_path() == tmp_path / "records.json"
        assert config.get_kubectl_command() == "kubectl"
        assert config.get_log_level() == "INFO"
        assert config.get_log_file() is None
        assert config.get_refresh_seconds() == config.DEFAULT_REFRESH_SECONDS

    def test_configured_values(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "store_path: /data/records.json\n"
            "kubectl: kubectl-1.29\n"
            "log_level: debug\n"
            "log_file: /var/log/kfconsole.log\n"
            "refresh_seconds: 5\n"
        )
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        assert config.get_store_path() == Path("/data/records.json")
        assert config.get_kubectl_command() == "kubectl-1.29"
        assert config.get_log_level() == "DEBUG"
        assert config.get_log_file() == Path("/var/log/kfconsole.log")
        assert config.get_refresh_seconds() == 5.0

    def test_bad_refresh_falls_back(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("refresh_seconds: soon\n")
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        assert config.get_refresh_seconds() == config.DEFAULT_REFRESH_SECONDS

    def test_negative_refresh_falls_back(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("refresh_seconds: -1\n")
        monkeypatch.setattr(config, "CONFIG_PATH", config_file)

        assert config.get_refresh_seconds() == config.DEFAULT_REFRESH_SECONDS


class TestKfconsoleDir:
    """Test the base directory override."""

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KFCONSOLE_DIR", str(tmp_path))
        assert config.get_kfconsole_dir() == tmp_path

    def test_default_under_home(self, monkeypatch):
        monkeypatch.delenv("KFCONSOLE_DIR", raising=False)
        assert config.get_kfconsole_dir() == Path.home() / ".kfconsole"
