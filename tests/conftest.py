"""
Shared fixtures for Server Settings tests.
"""

import threading
from pathlib import Path
from typing import Dict, Optional

import pytest

from server_settings.core import program
from server_settings.core.settings import set_default_settings


class CountingFileSystem:
    """In-memory file system that records every access."""

    def __init__(self, files: Optional[Dict[str, str]] = None, delay: float = 0.0):
        self.files = {str(Path(k)): v for k, v in (files or {}).items()}
        self.delay = delay
        self.exists_calls = 0
        self.read_calls = 0
        self._lock = threading.Lock()

    def exists(self, path) -> bool:
        with self._lock:
            self.exists_calls += 1
        if self.delay:
            threading.Event().wait(self.delay)
        return str(Path(path)) in self.files

    def read_bytes(self, path) -> bytes:
        with self._lock:
            self.read_calls += 1
        content = self.files[str(Path(path))]
        if isinstance(content, Exception):
            raise content
        if isinstance(content, str):
            return content.encode("utf-8")
        return content


class DictSource:
    """Settings source over a plain dict that counts lookups."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.calls = []

    def get_setting(self, name):
        self.calls.append(name)
        return self.values.get(name)


def settings_xml(*entries) -> str:
    """Build a settings document from (name, value) pairs."""
    lines = ["<settings>"]
    for name, value in entries:
        lines.append(f'  <setting name="{name}" value="{value}"/>')
    lines.append("</settings>")
    return "\n".join(lines)


@pytest.fixture(autouse=True)
def reset_globals():
    """Keep the process-wide state from leaking between tests."""
    set_default_settings(None)
    program.set_program_name(None)
    yield
    set_default_settings(None)
    program.set_program_name(None)
