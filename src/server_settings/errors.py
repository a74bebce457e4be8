"""
Exceptions raised by Server Settings.

Only MissingSettingError and InvalidSettingFormatError ever reach callers of
the typed getters; source failures are logged and treated as absent values.
"""


class SettingsError(Exception):
    """Base class for all settings errors."""
    pass


class MissingSettingError(SettingsError, KeyError):
    """Raised when no source provides a value for a required setting."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Setting '{self.name}' is not set."


class InvalidSettingFormatError(SettingsError, ValueError):
    """Raised when a setting's raw value can't be parsed into the requested type."""

    def __init__(self, name: str, value: str, target_type: str):
        self.name = name
        self.value = value
        self.target_type = target_type
        super().__init__(
            f"Setting '{name}' has value '{value}' which can't be parsed into a {target_type}."
        )


class ProgramNameError(SettingsError):
    """Raised when the running program's name can't be determined."""
    pass
