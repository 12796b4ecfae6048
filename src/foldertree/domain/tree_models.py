from __future__ import annotations

"""
Directory Tree Data Models.

Provides the value types exchanged between the enumerator, the renderer
and the command-line controller. All models are immutable: a traversal
builds fresh instances per directory level and never shares mutable state
between recursive calls.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from foldertree.domain import constants as c

# -----------------------------------------------------------------------------
# ENTRIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    A named child of a directory.

    Attributes:
        name: Entry name, without any path component.
        is_directory: True for subdirectories.
    """
    name: str
    is_directory: bool = False

    @property
    def is_spacer(self) -> bool:
        return self.name == c.SPACER_NAME and not self.is_directory


SPACER_ENTRY = DirectoryEntry(name=c.SPACER_NAME, is_directory=False)


@dataclass(frozen=True)
class DirectoryListing:
    """
    Immediate children of one directory, in filesystem enumeration order.

    Attributes:
        folders: Subdirectories.
        files: Files, followed by the spacer entry when files were requested
               and at least one exists.
    """
    folders: Tuple[DirectoryEntry, ...] = ()
    files: Tuple[DirectoryEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.folders and not self.files

# -----------------------------------------------------------------------------
# RENDERING CONFIGURATION
# -----------------------------------------------------------------------------

class DrawKind(str, Enum):
    """Which sibling set a render call is drawing."""
    FOLDERS = "folders"
    FILES = "files"


@dataclass(frozen=True)
class GlyphSet:
    """Connector characters for one output alphabet."""
    branch: str
    last_branch: str
    horizontal: str
    vertical: str

    @property
    def folder_connector(self) -> str:
        return self.branch + self.horizontal * 3

    @property
    def last_folder_connector(self) -> str:
        return self.last_branch + self.horizontal * 3

    @property
    def file_connector(self) -> str:
        return self.vertical + "   "


UNICODE_GLYPHS = GlyphSet(
    branch=c.UNICODE_BRANCH,
    last_branch=c.UNICODE_LAST_BRANCH,
    horizontal=c.UNICODE_HORIZONTAL,
    vertical=c.UNICODE_VERTICAL,
)

ASCII_GLYPHS = GlyphSet(
    branch=c.ASCII_BRANCH,
    last_branch=c.ASCII_LAST_BRANCH,
    horizontal=c.ASCII_HORIZONTAL,
    vertical=c.ASCII_VERTICAL,
)

# Files drawn in a directory without subfolders get no glyph column at all
BARE_FILE_CONNECTOR = "     "


@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable switches set once from the command line.

    Attributes:
        show_files: List files in each folder.
        use_ascii: Draw with ASCII instead of box-drawing characters.
    """
    show_files: bool = False
    use_ascii: bool = False

    @property
    def glyphs(self) -> GlyphSet:
        return ASCII_GLYPHS if self.use_ascii else UNICODE_GLYPHS

# -----------------------------------------------------------------------------
# INDENTATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndentationContext:
    """
    Per-ancestor record of which columns carry a continuation bar.

    One flag per ancestor level, outermost first. A flag is True when the
    ancestor at that level still has following siblings, so descendants
    must draw a vertical bar under it.
    """
    columns: Tuple[bool, ...] = field(default_factory=tuple)

    @property
    def depth(self) -> int:
        return len(self.columns)

    @property
    def width(self) -> int:
        """Drawing width of entries at this depth."""
        return c.ROOT_WIDTH + c.WIDTH_STEP * self.depth

    def descend(self, is_last: bool) -> IndentationContext:
        """Context for the children of an entry drawn as last or non-last."""
        return IndentationContext(self.columns + (not is_last,))

    def prefix(self, glyphs: GlyphSet) -> str:
        """Printable indentation: exactly ``width - 1`` columns."""
        pad = " " * (c.WIDTH_STEP - 1)
        return "".join((glyphs.vertical if bar else " ") + pad for bar in self.columns)
