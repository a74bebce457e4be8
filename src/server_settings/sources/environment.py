"""
Settings from process environment variables.
"""

import logging
import os
from typing import Mapping, Optional

from ..config.defaults import DEFAULT_CONFIG
from .base import SettingsSource

logger = logging.getLogger(__name__)


class EnvironmentSettingsSource(SettingsSource):
    """
    Reads settings from environment variables named APPSETTING_<name>, the
    convention Azure App Service uses to inject application settings.
    """

    def __init__(self, prefix: str = None, environ: Mapping[str, str] = None):
        self.prefix = prefix if prefix is not None else DEFAULT_CONFIG["environment"]["prefix"]
        self._environ = environ

    def get_setting(self, name: str) -> Optional[str]:
        environ = self._environ if self._environ is not None else os.environ
        value = environ.get(f"{self.prefix}{name}")
        if value is not None:
            logger.debug(f"Setting '{name}' found in environment")
        return value
