"""
Settings from XML files.

A settings file looks like:

    <settings>
      <setting name="ApiKey" value="abc123"/>
      <setting name="Retries" value="3"/>
    </settings>

Each source tries to load its file once, on the first lookup, and keeps the
outcome (including "no file" and "broken file") for the rest of the process.
"""

import logging
import threading
import xml.etree.ElementTree as ET
from abc import abstractmethod
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from ..config.defaults import DEFAULT_CONFIG
from ..core.program import resolve_program_name
from ..utils.file_utils import LocalFileSystem
from .base import SettingsSource

logger = logging.getLogger(__name__)

PathProvider = Union[str, Path, Callable[[], Union[str, Path]]]
NameProvider = Union[str, Callable[[], str]]


class LoadState(Enum):
    """Outcome of a file source's one-time load attempt."""
    NOT_ATTEMPTED = "not_attempted"
    LOADED = "loaded"
    FILE_ABSENT = "file_absent"
    LOAD_FAILED = "load_failed"
    PATH_UNRESOLVABLE = "path_unresolvable"


class FileSettingsSource(SettingsSource):
    """
    Base class for sources reading an XML settings file.

    Subclasses only decide where the file lives by implementing
    get_file_name(). Missing, unreadable or malformed files never raise from
    get_setting(); the source simply provides no values.
    """

    def __init__(self, file_system: Optional[LocalFileSystem] = None):
        self._file_system = file_system or LocalFileSystem()
        self._lock = threading.Lock()
        self._state = LoadState.NOT_ATTEMPTED
        self._settings: Optional[Dict[str, Optional[str]]] = None
        self._path: Optional[Path] = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def path(self) -> Optional[Path]:
        """Resolved file path, once loading has been attempted."""
        return self._path

    @abstractmethod
    def get_file_name(self) -> Path:
        """
        Provide the path of the settings file.

        May raise if the location can't be determined; the source then
        provides no values.
        """
        raise NotImplementedError

    def get_setting(self, name: str) -> Optional[str]:
        self._ensure_loaded()

        settings = self._settings
        if settings is None:
            return None
        return settings.get(name)

    def _ensure_loaded(self) -> None:
        if self._state is not LoadState.NOT_ATTEMPTED:
            return

        with self._lock:
            # Another thread may have finished loading while we waited
            if self._state is not LoadState.NOT_ATTEMPTED:
                return
            self._state = self._attempt_loading()

    def _attempt_loading(self) -> LoadState:
        """Load the settings file. Called exactly once per instance."""
        file_path = self._get_file_name_safely()
        if file_path is None:
            return LoadState.PATH_UNRESOLVABLE

        self._path = file_path

        try:
            if not self._file_system.exists(file_path):
                logger.debug(f"No file settings found at {file_path}")
                return LoadState.FILE_ABSENT

            data = self._file_system.read_bytes(file_path)
            settings = self._parse_settings(data, file_path)
        except Exception as e:
            logger.error(f"Failed to load file settings at {file_path}: {e}", exc_info=True)
            return LoadState.LOAD_FAILED

        if settings is None:
            return LoadState.LOAD_FAILED

        self._settings = settings
        logger.info(f"File settings loaded from {file_path} ({len(settings)} settings)")
        return LoadState.LOADED

    def _get_file_name_safely(self) -> Optional[Path]:
        try:
            return Path(self.get_file_name())
        except Exception as e:
            logger.warning(f"No file settings because: {e}")
            return None

    @staticmethod
    def _parse_settings(data: bytes, file_path: Path) -> Optional[Dict[str, Optional[str]]]:
        """
        Build the name to value table from the XML document.

        Returns None if the document's root element isn't <settings>. Raises
        ET.ParseError for malformed XML.
        """
        xml_config = DEFAULT_CONFIG["xml"]
        root = ET.fromstring(data)

        if root.tag != xml_config["root_element"]:
            logger.error(
                f"File settings at {file_path} should have root element "
                f"'{xml_config['root_element']}', found '{root.tag}'"
            )
            return None

        settings: Dict[str, Optional[str]] = {}
        for entry in root.findall(xml_config["entry_element"]):
            name = entry.get(xml_config["name_attribute"])
            if name is None:
                continue
            # First entry in document order wins
            if name not in settings:
                settings[name] = entry.get(xml_config["value_attribute"])

        return settings


class HomeFileSettingsSource(FileSettingsSource):
    """
    Settings file at <user-home>/settings/<program-name>.xml.

    The file belongs to the program using this library, so several programs
    on one machine each get their own file.
    """

    def __init__(
        self,
        program_name: Optional[NameProvider] = None,
        home_directory: Optional[PathProvider] = None,
        file_system: Optional[LocalFileSystem] = None,
    ):
        super().__init__(file_system)
        self._program_name = program_name
        self._home_directory = home_directory

    def get_file_name(self) -> Path:
        files_config = DEFAULT_CONFIG["files"]
        home = _resolve(self._home_directory, Path.home)
        program_name = _resolve(self._program_name, resolve_program_name)
        return Path(home) / files_config["home_directory_name"] / f"{program_name}{files_config['extension']}"


class LocalFileSettingsSource(FileSettingsSource):
    """Settings file named settings.xml next to this library's own code."""

    def __init__(
        self,
        base_directory: Optional[PathProvider] = None,
        file_system: Optional[LocalFileSystem] = None,
    ):
        super().__init__(file_system)
        self._base_directory = base_directory

    def get_file_name(self) -> Path:
        base = _resolve(self._base_directory, _package_directory)
        return Path(base) / DEFAULT_CONFIG["files"]["local_file_name"]


def _package_directory() -> Path:
    return Path(__file__).resolve().parent.parent


def _resolve(provider, fallback):
    """Evaluate an optional value-or-callable, using fallback() when unset."""
    if provider is None:
        return fallback()
    if callable(provider):
        return provider()
    return provider
