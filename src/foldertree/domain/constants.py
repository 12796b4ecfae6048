from __future__ import annotations

"""
Domain Constants.

Glyph tables and layout metrics shared by the traversal and rendering
engine.
"""

APP_NAME = "foldertree"

# Synthetic file entry that forces a blank line after a file listing
SPACER_NAME = " "

# Column metrics: the root level draws with width 1, each level adds 4
ROOT_WIDTH = 1
WIDTH_STEP = 4

# -----------------------------------------------------------------------------
# GLYPHS
# -----------------------------------------------------------------------------

UNICODE_BRANCH = "\u251c"       # ├
UNICODE_LAST_BRANCH = "\u2514"  # └
UNICODE_HORIZONTAL = "\u2500"   # ─
UNICODE_VERTICAL = "\u2502"     # │

ASCII_BRANCH = "+"
ASCII_LAST_BRANCH = "\\"
ASCII_HORIZONTAL = "-"
ASCII_VERTICAL = "|"
