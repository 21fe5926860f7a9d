from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..lib.files import replace_line
from ..lib.git import git_clone

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)

THEME_LINE = r'^ZSH_THEME=".*"'


class InstallPowerlevel10kStep:
    step_id = "40_install_powerlevel10k"
    title = "Powerlevel10k installation"

    def is_satisfied(self, host: "Host") -> bool:
        # Theme already cloned means .zshrc was rewritten on that run too.
        return host.paths.powerlevel10k.is_dir()

    def run(self, host: "Host") -> None:
        paths = host.paths
        git_clone(host, host.config.powerlevel10k_repo, paths.powerlevel10k, depth=1)

        theme = host.config.powerlevel10k_theme
        logger.info("Setting ZSH_THEME to %s in %s", theme, paths.zshrc)
        replace_line(paths.zshrc, THEME_LINE, f'ZSH_THEME="{theme}"', dry_run=host.dry_run)
