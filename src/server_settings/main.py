#!/usr/bin/env python3
"""
Command line entry point for Server Settings.

Resolves one setting through the standard source chain and prints it.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config.defaults import DEFAULT_CONFIG
from .core.parsing import BOOL_TYPE_NAME, INT_TYPE_NAME, parse_bool, parse_int
from .core.settings import Settings
from .errors import InvalidSettingFormatError, MissingSettingError


def setup_logging(log_level: str = None, log_file_path: str = None) -> None:
    """Setup logging with configurable settings from defaults.py."""
    logging_config = DEFAULT_CONFIG.get('logging', {})

    # Use provided parameters or fall back to configuration
    if log_level is None:
        log_level = logging_config.get('level', 'INFO')
    file_enabled = logging_config.get('file_enabled', False) or log_file_path is not None
    if log_file_path is None:
        log_file_path = logging_config.get('file_path', 'server_settings.log')

    console_enabled = logging_config.get('console_enabled', True)

    handlers = []
    if console_enabled:
        # stdout is reserved for the resolved value
        handlers.append(logging.StreamHandler(sys.stderr))
    if file_enabled:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path)))

    # Fallback to console if no handlers enabled
    if not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=logging_config.get('format', "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="server-settings",
        description="Look up a setting through the settings files, platform store and environment.",
    )
    parser.add_argument("name", help="Setting name (case-sensitive)")
    parser.add_argument(
        "--type",
        choices=["string", "int", "bool"],
        default="string",
        help="Type to parse the value into",
    )
    parser.add_argument("--default", help="Value to use when the setting is missing or malformed")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default from configuration)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def lookup(settings: Settings, name: str, value_type: str, default: Optional[str]):
    """
    Resolve a setting as the requested type.

    A textual default is converted to the requested type first; an
    unparseable default raises InvalidSettingFormatError naming --default.
    """
    if value_type == "int":
        int_default = _parse_default(default, parse_int, INT_TYPE_NAME)
        return settings.get_int(name, int_default)

    if value_type == "bool":
        bool_default = _parse_default(default, parse_bool, BOOL_TYPE_NAME)
        return settings.get_bool(name, bool_default)

    if default is not None:
        return settings.get_string(name, default)
    return settings.get_string(name)


def _parse_default(default: Optional[str], parse, target_type: str):
    if default is None:
        return None
    value = parse(default)
    if value is None:
        raise InvalidSettingFormatError("--default", default, target_type)
    return value


def format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    if settings is None:
        settings = Settings()

    try:
        value = lookup(settings, args.name, args.type, args.default)
    except (MissingSettingError, InvalidSettingFormatError) as e:
        logger.debug(f"Lookup of '{args.name}' failed: {e}")
        print(str(e), file=sys.stderr)
        return 1

    print(format_value(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
