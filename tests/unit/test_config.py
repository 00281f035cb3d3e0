"""Unit tests for configuration settings."""

import json
import os
from pathlib import Path
from unittest.mock import patch

from ab_gnuplot.shared.config import Config


class TestSettings:
    """Test Config settings class."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Config()
        assert settings.ab_command == "ab"
        assert settings.gnuplot_command == "gnuplot"
        assert settings.default_cycles == 100
        assert settings.hosts_file == Path("/etc/hosts")
        assert settings.warmup_requests == 5
        assert settings.response_timeout == 10

    @patch.dict(os.environ, {"AB_GNUPLOT_AB_COMMAND": "/opt/apache/bin/ab"})
    def test_env_override_command(self):
        """Test overriding the ab command via environment variable."""
        settings = Config()
        assert settings.ab_command == "/opt/apache/bin/ab"

    @patch.dict(os.environ, {"AB_GNUPLOT_DEFAULT_CYCLES": "500"})
    def test_env_override_cycles(self):
        settings = Config()
        assert settings.default_cycles == 500

    @patch.dict(os.environ, {"AB_GNUPLOT_LOG_LEVEL": "DEBUG"})
    def test_env_wins_over_init(self):
        """Test that environment variables take precedence over constructor kwargs."""
        settings = Config(log_level="WARNING")
        assert settings.log_level == "DEBUG"

    def test_json_config_file(self, tmp_path, monkeypatch):
        """Test loading defaults from ab-gnuplot.json in the current directory."""
        (tmp_path / "ab-gnuplot.json").write_text(json.dumps({"default_cycles": 42, "gnuplot_command": "gp"}))
        monkeypatch.chdir(tmp_path)
        settings = Config()
        assert settings.default_cycles == 42
        assert settings.gnuplot_command == "gp"

    def test_init_wins_over_json(self, tmp_path, monkeypatch):
        (tmp_path / "ab-gnuplot.json").write_text(json.dumps({"default_cycles": 42}))
        monkeypatch.chdir(tmp_path)
        settings = Config(default_cycles=7)
        assert settings.default_cycles == 7
