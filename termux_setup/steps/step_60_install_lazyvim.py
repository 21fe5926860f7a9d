from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..lib.files import ensure_dir, remove_tree
from ..lib.git import git_clone
from ..pipeline import StepResult, StepStatus

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Do you want to remove the existing config and install LazyVim? (y/N): "


class InstallLazyVimStep:
    """Clone the LazyVim starter into ~/.config/nvim.

    An existing config is only replaced after the operator confirms. This is
    the one step that consults a human, so its precondition is always false
    and the decision happens inside run().
    """

    step_id = "60_install_lazyvim"
    title = "LazyVim installation"

    def is_satisfied(self, host: "Host") -> bool:
        return False

    def run(self, host: "Host") -> Optional[StepResult]:
        paths = host.paths
        ensure_dir(paths.config_dir, dry_run=host.dry_run)

        if paths.nvim_config.is_dir():
            logger.warning("Existing Neovim configuration found at %s", paths.nvim_config)
            if not host.confirm(CONFIRM_PROMPT):
                return StepResult(self.step_id, self.title, StepStatus.SKIPPED, "declined by operator")
            logger.info("Removing existing Neovim configuration")
            remove_tree(paths.nvim_config, dry_run=host.dry_run)
        else:
            logger.info("No existing Neovim configuration found")

        git_clone(host, host.config.lazyvim_repo, paths.nvim_config)
        # The starter is meant to become the user's own config, not a checkout.
        remove_tree(paths.nvim_config / ".git", dry_run=host.dry_run)
        logger.info("Run 'nvim' to open Neovim and complete the LazyVim setup (it will download plugins).")
        return None
