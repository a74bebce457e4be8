"""
Library constants for Server Settings.
"""

from .defaults import DEFAULT_CONFIG

__all__ = [
    "DEFAULT_CONFIG",
]
