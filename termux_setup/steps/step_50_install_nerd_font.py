from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..lib.files import ensure_dir
from ..lib.net import download_file

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)


class InstallNerdFontStep:
    step_id = "50_install_nerd_font"
    title = "Nerd Font installation"

    def is_satisfied(self, host: "Host") -> bool:
        return host.paths.font.is_file()

    def run(self, host: "Host") -> None:
        paths = host.paths
        ensure_dir(paths.termux_dir, dry_run=host.dry_run)
        logger.info("Downloading Nerd Font from %s", host.config.font_url)
        download_file(host, host.config.font_url, paths.font)
        logger.info("Font downloaded to %s", paths.font)
