"""Directory traversal and file filtering helpers."""

from __future__ import annotations

import os
from typing import FrozenSet, Generator

# Matched against directory basenames only.
EXCLUDED_DIRS: FrozenSet[str] = frozenset(
    {
        ".git",
        ".github",
        "node_modules",
        ".venv",
        "venv",
        "__pycache__",
        "target",
        ".idea",
        ".vscode",
        "dist",
        "build",
        ".next",
        ".nuxt",
        ".cargo",
        "site-packages",
    }
)

BINARY_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        "jpg", "jpeg", "png", "gif", "bmp", "svg", "ico", "webp",
        "zip", "tar", "gz", "rar", "7z",
        "exe", "dll", "so", "dylib", "bin", "o", "a", "lib",
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
        "mp3", "mp4", "mov", "avi", "mkv", "flv", "wmv", "wav", "flac", "aac", "ogg",
    }
)


def iter_scan_files(root: str) -> Generator[str, None, None]:
    """Yield regular files beneath ``root`` in a stable, name-sorted order.

    Excluded directories are pruned together with their whole subtree; the
    root itself is always entered. Symlinked directories are not followed.
    """

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in EXCLUDED_DIRS)
        for filename in sorted(filenames):
            path = os.path.join(dirpath, filename)
            if os.path.isfile(path):
                yield path


def is_binary_file(path: str) -> bool:
    """Return ``True`` when the extension marks a known binary or media format."""

    extension = os.path.splitext(path)[1]
    return extension[1:].lower() in BINARY_EXTENSIONS
