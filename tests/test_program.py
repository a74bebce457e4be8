"""
Tests for program name resolution.
"""

import sys
import types

import pytest

from server_settings.core import program
from server_settings.errors import ProgramNameError


class TestProgramName:
    """Test resolve_program_name."""

    def test_registered_name_wins(self):
        """Test an explicitly registered name is used."""
        program.set_program_name("billing")

        assert program.resolve_program_name() == "billing"

    def test_main_module_file(self, monkeypatch):
        """Test the __main__ module's file stem is used."""
        monkeypatch.setattr(program, "_qt_application_name", lambda: None)
        fake_main = types.ModuleType("__main__")
        fake_main.__file__ = "/srv/tools/report_runner.py"
        monkeypatch.setitem(sys.modules, "__main__", fake_main)

        assert program.resolve_program_name() == "report_runner"

    def test_qt_application_name(self, monkeypatch):
        """Test a running Qt application's name is preferred."""
        monkeypatch.setattr(program, "_qt_application_name", lambda: "QtTool")

        assert program.resolve_program_name() == "QtTool"

    def test_argv_fallback(self, monkeypatch):
        """Test sys.argv[0] is used when __main__ has no file."""
        monkeypatch.setattr(program, "_qt_application_name", lambda: None)
        monkeypatch.setitem(sys.modules, "__main__", types.ModuleType("__main__"))
        monkeypatch.setattr(sys, "argv", ["/usr/local/bin/server-app"])

        assert program.resolve_program_name() == "server-app"

    def test_unresolvable(self, monkeypatch):
        """Test an interactive session without a name raises."""
        monkeypatch.setattr(program, "_qt_application_name", lambda: None)
        monkeypatch.setitem(sys.modules, "__main__", types.ModuleType("__main__"))
        monkeypatch.setattr(sys, "argv", [""])

        with pytest.raises(ProgramNameError):
            program.resolve_program_name()

    def test_discovered_name_is_cached(self, monkeypatch):
        """Test discovery runs once until the registration is cleared."""
        calls = []

        def discover():
            calls.append(1)
            return "cached"

        monkeypatch.setattr(program, "_discover_program_name", discover)

        assert program.resolve_program_name() == "cached"
        assert program.resolve_program_name() == "cached"
        assert len(calls) == 1

        program.set_program_name(None)
        program.resolve_program_name()
        assert len(calls) == 2


_qt_app = None


@pytest.fixture
def unnamed_qt_app(monkeypatch):
    """A QCoreApplication launched as report_tool.py that never sets a name."""
    global _qt_app
    from PySide6.QtCore import QCoreApplication

    launch_path = "/srv/tools/report_tool.py"
    _qt_app = QCoreApplication.instance() or QCoreApplication([launch_path])
    _qt_app.setApplicationName("")

    fake_main = types.ModuleType("__main__")
    fake_main.__file__ = launch_path
    monkeypatch.setitem(sys.modules, "__main__", fake_main)
    monkeypatch.setattr(sys, "argv", [launch_path])

    yield _qt_app
    _qt_app.setApplicationName("")


class TestQtProgramName:
    """Test program names taken from a running QCoreApplication."""

    def test_unnamed_application_matches_script_name(self, unnamed_qt_app):
        """Test Qt's argv[0] fallback name doesn't change the result."""
        assert program.resolve_program_name() == "report_tool"

    def test_named_application(self, unnamed_qt_app):
        """Test an explicitly set application name is used as is."""
        unnamed_qt_app.setApplicationName("Billing.Service")

        assert program.resolve_program_name() == "Billing.Service"
