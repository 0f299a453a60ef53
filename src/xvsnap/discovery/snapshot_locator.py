# src/xvsnap/discovery/snapshot_locator.py

"""
Finds the FINAL FANTASY XV snapshot folder and the snapshot files inside it.

The Steam release stores saves under
'Documents/My Games/FINAL FANTASY XV/Steam/<user id>/savestorage/snapshot'.
The user id folder is not known in advance, so every child of the Steam
folder is checked for a 'savestorage' directory.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

SAVE_STORAGE_DIR_NAME = "savestorage"
SNAPSHOT_DIR_NAME = "snapshot"
SNAPSHOT_EXTENSION = ".ss"

logger = logging.getLogger(__name__)


def default_steam_directory() -> Path:
    """Returns the default Steam save root inside the user's profile."""
    return Path("~").expanduser() / "Documents" / "My Games" / "FINAL FANTASY XV" / "Steam"


def find_snapshot_folder(root: Path) -> Optional[Path]:
    """
    Looks for the snapshot folder under the given Steam save root.

    Args:
        root: The 'FINAL FANTASY XV/Steam' directory.

    Returns:
        The '<user id>/savestorage/snapshot' path of the first user folder
        that has a 'savestorage' directory, or None if there is none.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug(f"Steam save root does not exist: {root}")
        return None

    for user_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        if (user_dir / SAVE_STORAGE_DIR_NAME).is_dir():
            return user_dir / SAVE_STORAGE_DIR_NAME / SNAPSHOT_DIR_NAME

    logger.debug(f"No '{SAVE_STORAGE_DIR_NAME}' folder found under {root}")
    return None


def enumerate_snapshot_files(directory: Path, extension: str = SNAPSHOT_EXTENSION) -> List[Path]:
    """Lists the files directly inside `directory` with the given extension."""
    return sorted(
        p for p in Path(directory).iterdir()
        if p.is_file() and p.suffix == extension
    )


def prompt_for_directory(input_func: Callable[[str], str] = input) -> Optional[Path]:
    """
    Asks the user where the snapshot folder is.

    Returns:
        The entered path, or None if the answer was blank or stdin is closed.
    """
    print("Please find the \"My Games\\FINAL FANTASY XV\\Steam\\<numbers>\\savestorage\\snapshot\\\" folder.")
    try:
        answer = input_func("Enter full path here: ")
    except EOFError:
        logger.error("No input available to read the snapshot folder path.")
        return None
    answer = answer.strip().strip('"\'')
    if not answer:
        return None
    return Path(answer).expanduser()
