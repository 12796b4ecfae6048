from __future__ import annotations

"""
Tree Renderer.

Draws one directory level at a time as connector-drawn lines and recurses
depth-first into subfolders. Files of a folder are always drawn before its
subfolders. Indentation is carried downwards as an IndentationContext, one
continuation flag per ancestor, so no rendered text is ever re-parsed.
"""

import os
from typing import Callable, Optional, Protocol, Sequence

from foldertree.domain.tree_models import (
    BARE_FILE_CONNECTOR,
    DirectoryEntry,
    DirectoryListing,
    DrawKind,
    IndentationContext,
    RenderConfig,
)

Emit = Callable[[str], None]


class Scanner(Protocol):
    """Source of directory listings consumed by the renderer."""

    def list_directory(self, path: str, show_files: bool = False) -> DirectoryListing:
        ...

    def has_subfolder(self, path: str) -> bool:
        ...

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def draw_directory(
        path: str,
        context: IndentationContext,
        config: RenderConfig,
        scanner: Scanner,
        emit: Emit,
        listing: Optional[DirectoryListing] = None,
) -> None:
    """
    Render every child of a directory, files first, then folders.

    A directory without (visible) children emits nothing.

    Args:
        path: Directory whose children are drawn.
        context: Indentation inherited from the ancestors.
        config: Rendering switches.
        scanner: Enumerator used for this and every nested level.
        emit: Sink receiving each composed line.
        listing: Pre-computed listing for ``path``; enumerated when omitted.
    """
    if listing is None:
        listing = scanner.list_directory(path, show_files=config.show_files)

    if config.show_files:
        draw_tree(path, listing.files, DrawKind.FILES, context, config, scanner, emit)

    draw_tree(path, listing.folders, DrawKind.FOLDERS, context, config, scanner, emit)


def draw_tree(
        path: str,
        entries: Sequence[DirectoryEntry],
        kind: DrawKind,
        context: IndentationContext,
        config: RenderConfig,
        scanner: Scanner,
        emit: Emit,
) -> None:
    """
    Draw one sibling set and recurse into each folder entry.

    Folder entries get a branch connector, or a last-branch connector for
    the final sibling. File entries get a vertical bar when the enclosing
    directory has subfolders below them, otherwise plain blank columns.

    Args:
        path: Directory containing ``entries``.
        entries: Siblings in display order.
        kind: Whether ``entries`` are folders or files.
        context: Indentation of this level.
        config: Rendering switches.
        scanner: Enumerator for nested levels.
        emit: Sink receiving each composed line.
    """
    if not entries:
        return

    bar_under_files = kind is DrawKind.FILES and scanner.has_subfolder(path)
    prefix = context.prefix(config.glyphs)
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        emit(prefix + format_connector(kind, is_last, bar_under_files, config) + entry.name)

        if kind is DrawKind.FOLDERS and entry.is_directory and not entry.is_spacer:
            draw_directory(
                os.path.join(path, entry.name),
                context.descend(is_last),
                config,
                scanner,
                emit,
            )


def format_connector(
        kind: DrawKind,
        is_last: bool,
        bar_under_files: bool,
        config: RenderConfig,
) -> str:
    """Connector segment drawn between the indentation and the entry name."""
    glyphs = config.glyphs
    if kind is DrawKind.FOLDERS:
        return glyphs.last_folder_connector if is_last else glyphs.folder_connector
    return glyphs.file_connector if bar_under_files else BARE_FILE_CONNECTOR
