"""Utility helpers for the scanner."""

from .fileio import read_yaml_file, read_text_file
from .walk import iter_scan_files, is_binary_file

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "iter_scan_files",
    "is_binary_file",
]
