from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..lib.net import fetch_text

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)


class InstallOhMyZshStep:
    step_id = "30_install_oh_my_zsh"
    title = "Oh-My-Zsh installation"

    def is_satisfied(self, host: "Host") -> bool:
        satisfied = host.paths.oh_my_zsh.is_dir()
        if satisfied:
            logger.info("Oh-My-Zsh directory already exists (%s)", host.paths.oh_my_zsh)
            logger.info("If you need to update Oh-My-Zsh, open a zsh shell and run 'omz update'.")
        return satisfied

    def run(self, host: "Host") -> None:
        script = fetch_text(host, host.config.oh_my_zsh_install_url)
        # "" fills $0 for sh -c; --unattended keeps the installer from
        # prompting or switching the login shell.
        host.run(["sh", "-c", script, "", "--unattended"])
        logger.info("Oh-My-Zsh is installed, but your default shell is likely still bash.")
        logger.info("To switch to zsh, run 'chsh -s zsh' and restart Termux.")
