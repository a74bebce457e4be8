"""
Tests for the command line entry point.
"""

import pytest

from conftest import DictSource
from server_settings.core.settings import Settings
from server_settings.main import main


class TestMain:
    """Test server-settings command."""

    def test_prints_string(self, capsys):
        """Test a found value is printed."""
        settings = Settings(DictSource({"ApiKey": "abc123"}))

        assert main(["ApiKey"], settings=settings) == 0
        assert capsys.readouterr().out.strip() == "abc123"

    def test_typed_lookup(self, capsys):
        """Test --type converts the value."""
        settings = Settings(DictSource({"Debug": "TRUE", "Retries": "3"}))

        assert main(["Debug", "--type", "bool"], settings=settings) == 0
        assert main(["Retries", "--type", "int"], settings=settings) == 0
        assert capsys.readouterr().out.split() == ["true", "3"]

    def test_default(self, capsys):
        """Test --default applies when missing or malformed."""
        settings = Settings(DictSource({"Retries": "many"}))

        assert main(["Missing", "--default", "none"], settings=settings) == 0
        assert main(["Retries", "--type", "int", "--default", "2"], settings=settings) == 0
        assert capsys.readouterr().out.split() == ["none", "2"]

    def test_missing_setting(self, capsys):
        """Test a missing required setting exits with 1."""
        assert main(["Missing"], settings=Settings(DictSource())) == 1
        assert "Setting 'Missing' is not set." in capsys.readouterr().err

    def test_invalid_value(self, capsys):
        """Test a malformed value exits with 1."""
        settings = Settings(DictSource({"Timeout": "notanumber"}))

        assert main(["Timeout", "--type", "int"], settings=settings) == 1
        assert "notanumber" in capsys.readouterr().err

    def test_invalid_default(self, capsys):
        """Test an unparseable --default is reported."""
        settings = Settings(DictSource())

        assert main(["X", "--type", "bool", "--default", "maybe"], settings=settings) == 1
        assert "--default" in capsys.readouterr().err

    def test_log_level_choices(self, capsys):
        """Test log levels are validated and case-insensitive."""
        settings = Settings(DictSource({"A": "1"}))

        assert main(["A", "--log-level", "debug"], settings=settings) == 0

        with pytest.raises(SystemExit) as exc_info:
            main(["A", "--log-level", "bogus"], settings=settings)

        assert exc_info.value.code == 2
        assert "--log-level" in capsys.readouterr().err
