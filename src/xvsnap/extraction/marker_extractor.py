# src/xvsnap/extraction/marker_extractor.py

"""
Extracts a marker-bounded region from an opaque binary buffer.

FINAL FANTASY XV snapshot files embed a single JPEG thumbnail somewhere in
their save data. The thumbnail is recovered by slicing from the first JPEG
start-of-image marker (FF D8) through the last end-of-image marker (FF D9).
No JPEG structure is parsed or validated beyond the presence of the markers.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

# JPEG start-of-image and end-of-image markers
JPEG_SOI = b"\xFF\xD8"
JPEG_EOI = b"\xFF\xD9"


class ExtractionFailure(Enum):
    """Reasons an extraction can fail."""
    NO_START_MARKER = auto()
    NO_END_MARKER = auto()
    INVALID_RANGE = auto()


@dataclass(frozen=True)
class ExtractionResult:
    """
    Outcome of a single extraction.

    On success `failure` is None and `data` holds buffer[start:end], where
    `end` is exclusive and already includes the end marker bytes.
    """
    failure: Optional[ExtractionFailure] = None
    start: int = -1
    end: int = -1
    data: bytes = b""

    @property
    def ok(self) -> bool:
        return self.failure is None


def find_first(buffer: bytes, marker: bytes) -> int:
    """Returns the index of the first occurrence of `marker`, or -1."""
    if not marker:
        return -1
    return buffer.find(marker)


def find_last(buffer: bytes, marker: bytes) -> int:
    """Returns the index of the last occurrence of `marker`, or -1."""
    if not marker:
        return -1
    return buffer.rfind(marker)


def extract(buffer: bytes, start_marker: bytes = JPEG_SOI, end_marker: bytes = JPEG_EOI) -> ExtractionResult:
    """
    Slices out the widest region delimited by the two markers.

    The region starts at the first occurrence of `start_marker` and runs
    through the end of the last occurrence of `end_marker`.

    Args:
        buffer: The full contents of one input file.
        start_marker: Byte sequence that opens the region.
        end_marker: Byte sequence that closes the region.

    Returns:
        An ExtractionResult. This function never raises for bytes-like
        input; every malformed buffer maps to an ExtractionFailure.
    """
    # memoryview has no find/rfind
    buffer = bytes(buffer)
    start = find_first(buffer, start_marker)
    if start == -1:
        return ExtractionResult(failure=ExtractionFailure.NO_START_MARKER)

    last = find_last(buffer, end_marker)
    if last == -1:
        return ExtractionResult(failure=ExtractionFailure.NO_END_MARKER)

    # End marker must begin after the start marker
    if last <= start:
        return ExtractionResult(failure=ExtractionFailure.INVALID_RANGE)

    end = last + len(end_marker)
    return ExtractionResult(start=start, end=end, data=buffer[start:end])
