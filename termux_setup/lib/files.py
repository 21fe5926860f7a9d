from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_dir(path: Path, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would create directory %s", path)
        return
    path.mkdir(parents=True, exist_ok=True)


def remove_tree(path: Path, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would remove %s", path)
        return
    if path.is_symlink() or path.is_file():
        # rm -rf on a link removes the link, never its target.
        logger.info("Removing %s", path)
        path.unlink()
        return
    if not path.exists():
        return
    logger.info("Removing %s", path)
    shutil.rmtree(path)


def replace_line(path: Path, pattern: str, replacement: str, *, dry_run: bool = False) -> int:
    """Rewrite every line matching an anchored regex, in place.

    Only the matched part of a line is replaced, as sed's s/// does. Returns
    the number of substitutions. A missing file raises FileNotFoundError.
    """

    if dry_run and not path.exists():
        logger.info("Would rewrite %s (not present yet)", path)
        return 0

    text = path.read_text(encoding="utf-8")
    new_text, count = re.subn(pattern, lambda _m: replacement, text, flags=re.MULTILINE)

    if count == 0:
        logger.warning("No line matching %r in %s; left unchanged", pattern, path)
        return 0
    if dry_run:
        logger.info("Would rewrite %d line(s) in %s", count, path)
        return count

    path.write_text(new_text, encoding="utf-8")
    logger.info("Rewrote %d line(s) in %s", count, path)
    return count
