"""
Utility modules for Server Settings.
"""

from .file_utils import LocalFileSystem

__all__ = [
    "LocalFileSystem",
]
