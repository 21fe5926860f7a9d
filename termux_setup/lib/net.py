from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..host import Host


def fetch_text(host: "Host", url: str) -> str:
    """Fetch a URL body; curl -f turns HTTP errors into a non-zero exit."""

    return host.run(["curl", "-fsSL", url]).stdout


def download_file(host: "Host", url: str, dest: Path) -> None:
    # wget leaves a partial file behind on failure; callers do not clean up.
    host.run(["wget", "-O", str(dest), url])
