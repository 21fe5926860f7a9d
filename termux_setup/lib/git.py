from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..host import Host


def git_clone(host: "Host", repo: str, dest: Path, *, depth: Optional[int] = None) -> None:
    argv = ["git", "clone"]
    if depth is not None:
        argv.append(f"--depth={depth}")
    argv += [repo, str(dest)]
    host.run(argv)
