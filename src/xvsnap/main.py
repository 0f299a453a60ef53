#!/usr/bin/env python3
# src/xvsnap/main.py

"""
Main entry point for xvsnap.

Finds the FINAL FANTASY XV snapshot folder (asking the user if it is not in
the usual Steam location), extracts the JPEG thumbnail from every snapshot
into a 'converted' subfolder, and opens that folder when done. Individual
files that cannot be converted are reported and skipped; the process always
exits with status 0.
"""

import sys
import logging
from pathlib import Path

from xvsnap.discovery.snapshot_locator import enumerate_snapshot_files, find_snapshot_folder, prompt_for_directory
from xvsnap.processing.batch_runner import BatchRunner
from xvsnap.ui.folder_opener import open_folder
from xvsnap.utils.config import get_config

LOG_LEVEL = logging.INFO

logger = logging.getLogger(__name__)


def setup_logging():
    """Configures basic logging for the application."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )
    logging.info("xvsnap starting...")


def resolve_snapshot_dir(config, input_func=input):
    """Returns the snapshot folder, asking the user when it cannot be found."""
    snapshot_dir = find_snapshot_folder(Path(config.get("steam_directory")).expanduser())
    if snapshot_dir is not None:
        logger.info(f"Found snapshot folder at {snapshot_dir}")
        return snapshot_dir

    logger.error("Couldn't find the snapshot folder!")
    return prompt_for_directory(input_func)


def main(config=None, input_func=input) -> int:
    """Main execution function for xvsnap."""
    setup_logging()
    config = config if config is not None else get_config()

    snapshot_dir = resolve_snapshot_dir(config, input_func)
    if snapshot_dir is None:
        logger.error("No snapshot folder given. Nothing to do.")
        return 0
    if not snapshot_dir.is_dir():
        logger.error(f"Snapshot folder '{snapshot_dir}' does not exist. Nothing to do.")
        return 0

    output_dir = snapshot_dir / config.get("output_subdirectory")
    try:
        files = enumerate_snapshot_files(snapshot_dir, config.get("snapshot_extension"))
    except OSError as e:
        logger.error(f"Could not list snapshot folder '{snapshot_dir}': {e}")
        return 0
    logger.info(f"Processing {len(files)} files...")

    runner = BatchRunner(
        output_dir,
        start_marker=config.get_marker("start_marker"),
        end_marker=config.get_marker("end_marker"),
        output_extension=config.get("output_extension"),
        show_progress=config.get("show_progress"),
    )
    report = runner.run(files)
    logger.info(f"Converted {len(report.converted)} of {report.total} files, {len(report.failures)} failed.")

    if config.get("open_output_folder"):
        open_folder(output_dir)

    print("\nDone!")
    if config.get("wait_for_enter"):
        try:
            input_func("Press ENTER/RETURN to exit.")
        except EOFError:
            pass
    return 0


if __name__ == '__main__':
    sys.exit(main())
