from __future__ import annotations

"""
Directory Enumeration Service.

Lists the immediate children of a directory and answers the cheap
"does this folder have subfolders" question used by the renderer to
choose connector glyphs. Entries are returned in the native order given
by the filesystem; no re-sorting is applied.

Unreadable directories never interrupt a traversal: they are reported at
DEBUG level and treated as having no children.
"""

import logging
import os
from typing import List

from foldertree.domain.tree_models import SPACER_ENTRY, DirectoryEntry, DirectoryListing

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def list_directory(path: str, show_files: bool = False) -> DirectoryListing:
    """
    Enumerate subdirectories (and optionally files) of a directory.

    When files are requested and at least one exists, a spacer entry is
    appended to the file sequence so the renderer leaves a blank line
    between the file listing and the folder listing.

    Args:
        path: Directory to enumerate.
        show_files: Include non-directory entries.

    Returns:
        DirectoryListing: Children in enumeration order. Empty if the
                          directory cannot be read.
    """
    folders: List[DirectoryEntry] = []
    files: List[DirectoryEntry] = []

    try:
        with os.scandir(path) as it:
            for entry in it:
                if _is_folder(entry):
                    folders.append(DirectoryEntry(entry.name, is_directory=True))
                elif show_files:
                    files.append(DirectoryEntry(entry.name, is_directory=False))
    except OSError as e:
        logger.debug(f"Cannot enumerate '{path}', treating as empty: {e}")
        return DirectoryListing()

    if files:
        files.append(SPACER_ENTRY)

    return DirectoryListing(folders=tuple(folders), files=tuple(files))


def has_subfolder(path: str) -> bool:
    """
    Check whether a directory contains at least one subdirectory.

    Stops at the first match. An unreadable directory counts as having none.
    """
    try:
        with os.scandir(path) as it:
            return any(_is_folder(entry) for entry in it)
    except OSError as e:
        logger.debug(f"Cannot probe '{path}' for subfolders: {e}")
        return False


class FileSystemScanner:
    """
    Enumerator and subfolder probe bound to the real filesystem.

    The renderer only depends on ``list_directory`` and ``has_subfolder``,
    so any object exposing both can stand in for this one.
    """

    def list_directory(self, path: str, show_files: bool = False) -> DirectoryListing:
        return list_directory(path, show_files=show_files)

    def has_subfolder(self, path: str) -> bool:
        return has_subfolder(path)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _is_folder(entry: os.DirEntry) -> bool:
    """Real directories only; symbolic links are listed as files."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
