"""
Server Settings - layered configuration value lookup.

Resolves a setting name against an ordered chain of sources (settings files,
the platform configuration store and the process environment) and converts
the raw string into the requested type.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .errors import (
    SettingsError,
    MissingSettingError,
    InvalidSettingFormatError,
    ProgramNameError,
)
from .core.settings import Settings, get_string, get_int, get_bool

__all__ = [
    "__version__",
    "__license__",
    "Settings",
    "get_string",
    "get_int",
    "get_bool",
    "SettingsError",
    "MissingSettingError",
    "InvalidSettingFormatError",
    "ProgramNameError",
]
