# src/xvsnap/ui/folder_opener.py

"""
Shows the converted thumbnails folder in the desktop file browser.

Qt's QDesktopServices hands the folder URL to whatever file manager the
platform uses (Explorer, Finder, or the XDG default on Linux). Opening the
folder is a convenience at the end of a run, so failures are logged and
reported through the return value instead of raised.
"""

import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def has_display() -> bool:
    """Returns False on Linux/BSD sessions without an X11 or Wayland display."""
    if sys.platform in ("win32", "darwin"):
        return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


def _open_with_qt(folder: Path) -> bool:
    # Loaded lazily so headless runs never initialise Qt
    from PyQt6.QtCore import QUrl
    from PyQt6.QtGui import QDesktopServices, QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([sys.argv[0] if sys.argv else "xvsnap"])
    return QDesktopServices.openUrl(QUrl.fromLocalFile(str(folder)))


def open_folder(folder: Path) -> bool:
    """
    Opens `folder` in the system file browser.

    Args:
        folder: The directory to show.

    Returns:
        True if the desktop accepted the request, False otherwise.
    """
    folder = Path(folder).resolve()
    if not folder.is_dir():
        logger.warning(f"Cannot open {folder}: not a directory.")
        return False

    if not has_display():
        logger.info(f"No display available; converted files are in {folder}")
        return False

    try:
        opened = _open_with_qt(folder)
    except ImportError as e:
        logger.warning(f"PyQt6 is not usable here ({e}); converted files are in {folder}")
        return False
    except Exception as e:
        logger.error(f"An unexpected error occurred while opening {folder}: {e}")
        return False

    if not opened:
        logger.warning(f"The desktop refused to open {folder}")
    return bool(opened)
