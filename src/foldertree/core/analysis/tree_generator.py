from __future__ import annotations

"""
Directory Tree Generator.

Runs a complete depth-first walk from a root directory and reports a small
summary of what was drawn. Output lines are streamed to a caller-provided
sink (standard output by default) as soon as they are composed.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from foldertree.core.analysis.scanner import FileSystemScanner
from foldertree.core.analysis.tree_renderer import Emit, Scanner, draw_directory
from foldertree.domain.tree_models import IndentationContext, RenderConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of a traversal.

    Attributes:
        root: Absolute path the walk started from.
        line_count: Number of lines emitted for the tree body.
        has_subfolders: Whether the root contains at least one subfolder.
    """
    root: str
    line_count: int
    has_subfolders: bool

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        root: str,
        config: Optional[RenderConfig] = None,
        scanner: Optional[Scanner] = None,
        emit: Optional[Emit] = None,
) -> TreeResult:
    """
    Draw the full tree below ``root``.

    Args:
        root: Starting directory. Relative paths are made absolute.
        config: Rendering switches; defaults to folders only, Unicode glyphs.
        scanner: Directory source; defaults to the real filesystem.
        emit: Line sink; defaults to printing on standard output.

    Returns:
        TreeResult: Summary of the traversal.
    """
    config = config or RenderConfig()
    scanner = scanner or FileSystemScanner()
    sink = emit or _print_line
    root_abs = os.path.abspath(root)

    logger.debug(
        f"Generating directory tree for: {root_abs} "
        f"(files={config.show_files}, ascii={config.use_ascii})"
    )

    count = [0]

    def counting_emit(line: str) -> None:
        count[0] += 1
        sink(line)

    draw_directory(root_abs, IndentationContext(), config, scanner, counting_emit)

    result = TreeResult(
        root=root_abs,
        line_count=count[0],
        has_subfolders=scanner.has_subfolder(root_abs),
    )
    logger.debug(f"Tree complete: {result.line_count} lines emitted.")
    return result


def render_directory_tree(
        root: str,
        config: Optional[RenderConfig] = None,
        scanner: Optional[Scanner] = None,
) -> List[str]:
    """Collect the tree body below ``root`` as a list of lines."""
    lines: List[str] = []
    generate_directory_tree(root, config=config, scanner=scanner, emit=lines.append)
    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _print_line(line: str) -> None:
    print(line)
