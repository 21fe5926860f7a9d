from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

FALLBACK_LOG_NAME = "termux-setup.log"

_FILE_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)


def _open_log_file(log_path: str) -> Tuple[logging.Handler, str]:
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path), log_path
    except OSError:
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        return logging.FileHandler(fallback), fallback


def configure_logging(log_path: Optional[str], level: int = logging.INFO) -> Optional[str]:
    """Send progress to stdout and, when log_path is given, everything to a file.

    Console lines are bare messages, the same lines the operator would read
    from a shell script. The file gets DEBUG and up (captured command output
    included) with timestamps and logger names. An unopenable log_path falls
    back to ./termux-setup.log.

    Returns the file path actually used, or None for console-only logging.
    """

    root = logging.getLogger()
    if getattr(root, "_termux_setup_configured", False):
        return getattr(root, "_termux_setup_log_path", None)
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console)

    chosen: Optional[str] = None
    if log_path is not None:
        handler, chosen = _open_log_file(log_path)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(_FILE_FORMAT)
        root.addHandler(handler)

    setattr(root, "_termux_setup_configured", True)
    setattr(root, "_termux_setup_log_path", chosen)

    log = logging.getLogger(__name__)
    if chosen is None:
        log.debug("No log file (console only)")
    elif chosen != log_path:
        log.warning("Cannot write log to %s; logging to %s instead", log_path, chosen)
    else:
        log.debug("Logging to %s", chosen)
    return chosen
