from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)


def pkg_update(host: "Host") -> None:
    host.run(["pkg", "update", "-y"], capture=False)


def pkg_upgrade(host: "Host") -> None:
    host.run(["pkg", "upgrade", "-y"], capture=False)


def pkg_install(host: "Host", packages: Sequence[str]) -> None:
    if not packages:
        logger.info("No packages requested")
        return
    logger.info("Installing: %s", " ".join(packages))
    host.run(["pkg", "install", "-y", *packages], capture=False)
