# src/xvsnap/processing/batch_runner.py

"""
Runs thumbnail extraction over a batch of snapshot files.

Each file is read fully, passed through the marker extractor and, on
success, written out as '<stem><output_extension>' in the output directory.
A failing file is reported and skipped; the batch never stops early.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from xvsnap.extraction.marker_extractor import JPEG_EOI, JPEG_SOI, extract

logger = logging.getLogger(__name__)

READ_ERROR = "unreadable"
WRITE_ERROR = "unwritable"


@dataclass
class FileFailure:
    """A single input file that could not be converted."""
    path: Path
    reason: str


@dataclass
class BatchReport:
    """Summary of one batch run."""
    converted: List[Path] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.converted) + len(self.failures)


class BatchRunner:
    """
    Converts snapshot files to JPEG thumbnails one at a time.
    """

    def __init__(self, output_dir: Path, start_marker: bytes = JPEG_SOI, end_marker: bytes = JPEG_EOI,
                 output_extension: str = ".jpeg", show_progress: bool = True):
        """
        Args:
            output_dir (Path): Directory the extracted images are written to.
            start_marker (bytes): Marker opening the embedded image.
            end_marker (bytes): Marker closing the embedded image.
            output_extension (str): Extension given to every written file.
            show_progress (bool): Whether to draw a tqdm progress bar.
        """
        self.output_dir = Path(output_dir)
        self.start_marker = start_marker
        self.end_marker = end_marker
        self.output_extension = output_extension
        self.show_progress = show_progress

    def output_path_for(self, source: Path) -> Path:
        return self.output_dir / (Path(source).stem + self.output_extension)

    def run(self, files: Iterable[Path]) -> BatchReport:
        """
        Processes every file and collects the outcome.

        Args:
            files: Snapshot file paths, processed in the given order.

        Returns:
            A BatchReport with one entry per input file.
        """
        files = [Path(f) for f in files]
        report = BatchReport()
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create output folder {self.output_dir}: {e}")
            report.failures.extend(FileFailure(source, WRITE_ERROR) for source in files)
            return report

        with logging_redirect_tqdm():
            for source in tqdm(files, desc="Extracting thumbnails", unit="file", disable=not self.show_progress):
                reason = self._process_file(source, report)
                if reason is None:
                    logger.info(f"Processing {source.name}... Done!")
                else:
                    report.failures.append(FileFailure(source, reason))
                    logger.warning(f"Processing {source.name}... Failed! ({reason})")

        return report

    def _process_file(self, source: Path, report: BatchReport):
        """Converts one file. Returns a failure reason, or None on success."""
        try:
            with open(source, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.error(f"Could not read {source}: {e}")
            return READ_ERROR

        result = extract(data, self.start_marker, self.end_marker)
        if not result.ok:
            return result.failure.name

        target = self.output_path_for(source)
        try:
            with open(target, 'wb') as f:
                f.write(result.data)
        except OSError as e:
            logger.error(f"Could not write {target}: {e}")
            return WRITE_ERROR

        logger.debug(f"Wrote {len(result.data)} bytes ({result.start:#x}-{result.end:#x}) to {target}")
        report.converted.append(target)
        return None
