"""
Core components for Server Settings: value parsing, program identity and
the Settings resolver.
"""

from .parsing import parse_int, parse_bool
from .program import resolve_program_name, set_program_name
from .settings import (
    Settings,
    create_default_source,
    get_default_settings,
    set_default_settings,
    set_root_source,
    get_string,
    get_int,
    get_bool,
)

__all__ = [
    "parse_int",
    "parse_bool",
    "resolve_program_name",
    "set_program_name",
    "Settings",
    "create_default_source",
    "get_default_settings",
    "set_default_settings",
    "set_root_source",
    "get_string",
    "get_int",
    "get_bool",
]
