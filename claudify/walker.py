"""Discovery of OpenCode agent files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from loguru import logger

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(root: Path) -> List[Path]:
    """Recursively collect every ``*.md`` file below ``root``.

    Raises ``FileNotFoundError`` / ``NotADirectoryError`` when ``root`` is
    not an existing directory.
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Agent source directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Agent source path is not a directory: {root}")

    files = sorted(p for p in root.rglob(f"*{MARKDOWN_SUFFIX}") if p.is_file())
    logger.debug("Found {count} markdown files under {root}", count=len(files), root=root)
    return files
