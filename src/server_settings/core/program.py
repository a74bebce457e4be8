"""
Identity of the running program.

The home settings file is named after the program that is running, not after
this library, so the name has to be discovered at runtime or registered by
the application during startup.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from ..errors import ProgramNameError

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_registered_name: Optional[str] = None
_discovered_name: Optional[str] = None


def set_program_name(name: Optional[str]) -> None:
    """
    Register the program name explicitly.

    Passing None clears the registration and any previously discovered name.
    """
    global _registered_name, _discovered_name
    with _lock:
        _registered_name = name
        _discovered_name = None


def resolve_program_name() -> str:
    """
    Determine the running program's name.

    Lookup order: registered name, Qt application name, __main__ module file,
    sys.argv[0].

    Raises:
        ProgramNameError: If no name can be determined
    """
    global _discovered_name
    with _lock:
        if _registered_name:
            return _registered_name
        if _discovered_name:
            return _discovered_name

        name = _discover_program_name()
        if not name:
            raise ProgramNameError(
                "Can't determine the program name; call set_program_name() during startup."
            )

        _discovered_name = name
        logger.debug(f"Discovered program name: {name}")
        return name


def _discover_program_name() -> Optional[str]:
    name = _qt_application_name()
    if name:
        return name

    main_module = sys.modules.get('__main__')
    main_file = getattr(main_module, '__file__', None)
    if main_file:
        return Path(main_file).stem

    if sys.argv and sys.argv[0] and sys.argv[0] != '-c':
        return Path(sys.argv[0]).stem

    return None


def _qt_application_name() -> Optional[str]:
    """
    Name set on the running QCoreApplication, if any.

    Qt falls back to the file name of argv[0] when the application never
    called setApplicationName(); that fallback is ignored so the name doesn't
    depend on whether Qt happens to be running.
    """
    from PySide6.QtCore import QCoreApplication

    if QCoreApplication.instance() is None:
        return None

    name = QCoreApplication.applicationName()
    if not name:
        return None

    launch_names = {Path(arg).name for arg in QCoreApplication.arguments()[:1] + sys.argv[:1] if arg}
    if name in launch_names:
        return None
    return name
