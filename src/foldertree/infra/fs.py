from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the root of a listing and collects the volume metadata shown in
the banner. Acts as an abstraction over 'os' and, on Windows, the Win32
volume API, so that the CLI behaves uniformly across platforms.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class VolumeInfo:
    """
    Identity of the volume holding the listed directory.

    Attributes:
        label: Human-readable volume name (may be empty).
        serial: 32-bit volume serial number.
    """
    label: str = ""
    serial: int = 0

    @property
    def serial_text(self) -> str:
        """Serial as two upper-case hex halves, e.g. ``1A2B-3C4D``."""
        return f"{self.serial >> 16:X}-{self.serial & 0xFFFF:X}"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_root(path: Optional[str]) -> str:
    """
    Normalize the requested root into an absolute path.

    Args:
        path: Raw path argument; the current directory when empty.

    Returns:
        str: Absolute path. Existence is not checked here.
    """
    p = (path or "").strip()
    if not p:
        return os.getcwd()
    return os.path.abspath(p)


def is_listable_dir(path: str) -> bool:
    """Check that ``path`` is a directory the process may enter."""
    return os.path.isdir(path) and os.access(path, os.R_OK | os.X_OK)


def split_drive(path: str) -> Tuple[str, str]:
    """Split ``path`` into (drive, remainder); the drive is empty on POSIX."""
    return os.path.splitdrive(path)

# -----------------------------------------------------------------------------
# VOLUME METADATA API
# -----------------------------------------------------------------------------

def get_volume_info(path: str) -> VolumeInfo:
    """
    Look up the label and serial number of the volume holding ``path``.

    Falls back to an anonymous volume if the lookup fails.
    """
    try:
        if sys.platform == "win32":
            return _win_volume_info(path)
        return _posix_volume_info(path)
    except (OSError, AttributeError, ValueError) as e:
        logger.debug(f"Volume lookup failed for '{path}': {e}")
        return VolumeInfo()


def find_mount_point(path: str) -> str:
    """Walk upwards from ``path`` until a mount point is reached."""
    current = os.path.abspath(path)
    while not os.path.ismount(current):
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return current

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _posix_volume_info(path: str) -> VolumeInfo:
    """Use the mount point name as label and the device id as serial."""
    target = path if os.path.exists(path) else os.getcwd()
    mount = find_mount_point(target)
    st = os.stat(mount)
    return VolumeInfo(label=os.path.basename(mount), serial=st.st_dev & 0xFFFFFFFF)


def _win_volume_info(path: str) -> VolumeInfo:
    """Query GetVolumeInformationW for the drive holding ``path``."""
    import ctypes

    drive, _ = split_drive(os.path.abspath(path))
    root = (drive or os.path.splitdrive(os.getcwd())[0]) + "\\"

    name_buf = ctypes.create_unicode_buffer(261)
    serial = ctypes.c_ulong(0)
    ok = ctypes.windll.kernel32.GetVolumeInformationW(
        ctypes.c_wchar_p(root),
        name_buf,
        len(name_buf),
        ctypes.byref(serial),
        None,
        None,
        None,
        0,
    )
    if not ok:
        raise OSError(f"GetVolumeInformationW failed for {root}")
    return VolumeInfo(label=name_buf.value, serial=serial.value)
