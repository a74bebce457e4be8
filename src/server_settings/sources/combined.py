"""
Chaining of several setting sources.
"""

import logging
from typing import Iterable, Optional, Tuple

from .base import SettingsSource

logger = logging.getLogger(__name__)


class CombinedSettingsSource(SettingsSource):
    """
    Asks nested sources in order and returns the first value provided.

    Later sources are not consulted once a value is found, so lazily loading
    sources further down the chain stay untouched.
    """

    def __init__(self, sources: Iterable[SettingsSource]):
        self._sources: Tuple[SettingsSource, ...] = tuple(sources)

    @property
    def sources(self) -> Tuple[SettingsSource, ...]:
        return self._sources

    def get_setting(self, name: str) -> Optional[str]:
        for source in self._sources:
            value = source.get_setting(name)
            if value is not None:
                logger.debug(f"Setting '{name}' provided by {type(source).__name__}")
                return value
        return None
