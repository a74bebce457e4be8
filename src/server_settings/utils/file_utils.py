"""
File system access for Server Settings.
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LocalFileSystem:
    """
    Thin wrapper over the local file system.

    File sources only talk to the disk through this object so tests can
    substitute a fake and count accesses.
    """

    def exists(self, path: PathLike) -> bool:
        """Check whether a regular file exists at path."""
        return Path(path).is_file()

    def read_bytes(self, path: PathLike) -> bytes:
        """
        Read the whole file undecoded.

        The XML parser works out the encoding from the BOM or the
        encoding declaration.

        Args:
            path: File to read

        Returns:
            File contents

        Raises:
            OSError: If the file can't be read
        """
        with open(path, 'rb') as f:
            content = f.read()
        logger.debug(f"Read {len(content)} bytes from {path}")
        return content
