from __future__ import annotations

"""
FolderTree: graphical folder structure listing for the terminal.
"""

__version__ = "1.0.0"
