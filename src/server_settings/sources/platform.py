"""
Settings from the platform's native application settings store.

QSettings maps to the registry on Windows, property lists on macOS and INI
files on Linux.
"""

import logging
import threading
from typing import Any, Optional

from PySide6.QtCore import QSettings

from ..config.defaults import DEFAULT_CONFIG
from .base import SettingsSource

logger = logging.getLogger(__name__)


class QtSettingsSource(SettingsSource):
    """Read-only view of a QSettings store."""

    def __init__(
        self,
        settings: Optional[QSettings] = None,
        organization: Optional[str] = None,
        application: Optional[str] = None,
    ):
        platform_config = DEFAULT_CONFIG.get('platform', {})
        self.organization = organization or platform_config.get('organization_name')
        self.application = application or platform_config.get('application_name')
        self._settings = settings
        self._lock = threading.Lock()

    def _get_store(self) -> QSettings:
        """Create the QSettings object on first use."""
        with self._lock:
            if self._settings is None:
                if self.organization:
                    self._settings = QSettings(self.organization, self.application or "")
                else:
                    # Uses QCoreApplication's organization and application names
                    self._settings = QSettings()
                logger.debug(f"Opened platform settings store: {self._settings.fileName()}")
            return self._settings

    def get_setting(self, name: str) -> Optional[str]:
        try:
            store = self._get_store()
            # A single QSettings instance is not thread-safe
            with self._lock:
                if not store.contains(name):
                    return None
                value = store.value(name)
        except Exception as e:
            logger.error(f"Failed to read platform setting '{name}': {e}")
            return None

        logger.debug(f"Setting '{name}' found in platform settings store")
        return self._to_string(value)

    @staticmethod
    def _to_string(value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            # INI values containing commas come back as lists
            return ", ".join(str(item) for item in value)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
