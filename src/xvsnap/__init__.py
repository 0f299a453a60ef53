# src/xvsnap/__init__.py

"""
xvsnap: extracts the JPEG thumbnails embedded in FINAL FANTASY XV save snapshots.

This package contains the marker-based extractor, snapshot folder discovery,
the batch converter, and the console entry point.
"""

__version__ = "0.1.0"
