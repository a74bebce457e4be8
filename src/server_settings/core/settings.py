"""
Typed access to settings.

A Settings object wraps one SettingsSource (normally a chain of sources) and
exposes string, integer and boolean getters. Applications can construct
their own Settings and pass it around, or use the process-wide default
through the module-level get_string/get_int/get_bool functions.
"""

import logging
import threading
from typing import Optional

from ..errors import InvalidSettingFormatError, MissingSettingError
from ..sources.base import SettingsSource
from ..sources.combined import CombinedSettingsSource
from ..sources.environment import EnvironmentSettingsSource
from ..sources.file_source import HomeFileSettingsSource, LocalFileSettingsSource
from ..sources.platform import QtSettingsSource
from .parsing import BOOL_TYPE_NAME, INT_TYPE_NAME, parse_bool, parse_int

logger = logging.getLogger(__name__)

_NO_DEFAULT = object()


def create_default_source() -> CombinedSettingsSource:
    """
    Build the standard source chain.

    Order: home settings file, local settings file, platform settings store,
    environment variables. Earlier sources win.
    """
    return CombinedSettingsSource([
        HomeFileSettingsSource(),
        LocalFileSettingsSource(),
        QtSettingsSource(),
        EnvironmentSettingsSource(),
    ])


class Settings:
    """Typed getters over a settings source."""

    def __init__(self, source: Optional[SettingsSource] = None):
        self.source = source if source is not None else create_default_source()

    def get_setting(self, name: str) -> Optional[str]:
        """Raw lookup; None if no source provides the setting."""
        return self.source.get_setting(name)

    def get_string(self, name: str, default=_NO_DEFAULT) -> Optional[str]:
        """
        Look up a setting's string value.

        Args:
            name: Setting name
            default: Returned when no value is found; if omitted, a missing
                setting raises

        Returns:
            The setting's value or the default

        Raises:
            MissingSettingError: If no value is found and no default was given
        """
        value = self.get_setting(name)
        if value is not None:
            return value
        if default is _NO_DEFAULT:
            raise MissingSettingError(name)
        return default

    def get_int(self, name: str, default: Optional[int] = None) -> int:
        """
        Look up a setting's integer value.

        A default covers both a missing and a malformed value. Without one,
        a missing or malformed value raises InvalidSettingFormatError.
        """
        raw = self.get_string(name, "")
        if raw == "" and default is not None:
            return default

        value = parse_int(raw)
        if value is None:
            return self._invalid(name, raw, INT_TYPE_NAME, default)
        return value

    def get_bool(self, name: str, default: Optional[bool] = None) -> bool:
        """
        Look up a setting's boolean value ('true' or 'false', any case).

        A default covers both a missing and a malformed value. Without one,
        a missing or malformed value raises InvalidSettingFormatError.
        """
        raw = self.get_string(name, "")
        if raw == "" and default is not None:
            return default

        value = parse_bool(raw)
        if value is None:
            return self._invalid(name, raw, BOOL_TYPE_NAME, default)
        return value

    @staticmethod
    def _invalid(name: str, raw: str, target_type: str, default):
        if default is not None:
            logger.debug(f"Setting '{name}' value '{raw}' is not a valid {target_type}, using default")
            return default
        raise InvalidSettingFormatError(name, raw, target_type)


# Process-wide default instance
_default_settings: Optional[Settings] = None
_default_lock = threading.Lock()


def get_default_settings() -> Settings:
    """Return the process-wide Settings, creating it on first use."""
    global _default_settings
    with _default_lock:
        if _default_settings is None:
            _default_settings = Settings()
        return _default_settings


def set_default_settings(settings: Optional[Settings]) -> None:
    """
    Replace the process-wide Settings.

    Intended for tests and application bootstrap. Passing None makes the
    next lookup build the standard chain again.
    """
    global _default_settings
    with _default_lock:
        _default_settings = settings


def set_root_source(source: SettingsSource) -> None:
    """Make the process-wide Settings read from the given source."""
    set_default_settings(Settings(source))


def get_string(name: str, default=_NO_DEFAULT) -> Optional[str]:
    return get_default_settings().get_string(name, default)


def get_int(name: str, default: Optional[int] = None) -> int:
    return get_default_settings().get_int(name, default)


def get_bool(name: str, default: Optional[bool] = None) -> bool:
    return get_default_settings().get_bool(name, default)
