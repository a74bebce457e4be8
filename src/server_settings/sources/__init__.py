"""
Setting sources.

Every source answers get_setting(name) with a raw string or None. The
CombinedSettingsSource chains them; earlier sources win.
"""

from .base import SettingsSource
from .file_source import (
    FileSettingsSource,
    HomeFileSettingsSource,
    LocalFileSettingsSource,
    LoadState,
)
from .environment import EnvironmentSettingsSource
from .platform import QtSettingsSource
from .combined import CombinedSettingsSource

__all__ = [
    "SettingsSource",
    "FileSettingsSource",
    "HomeFileSettingsSource",
    "LocalFileSettingsSource",
    "LoadState",
    "EnvironmentSettingsSource",
    "QtSettingsSource",
    "CombinedSettingsSource",
]
