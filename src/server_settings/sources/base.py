"""
Setting source interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SettingsSource(ABC):
    """Something that can provide a raw string value for a setting name."""

    @abstractmethod
    def get_setting(self, name: str) -> Optional[str]:
        """
        Provide the value of the setting with the given name.

        Args:
            name: Setting name (case-sensitive)

        Returns:
            The raw value, or None if this source has no value. Implementations
            never raise for missing names or internal failures.
        """
        raise NotImplementedError
