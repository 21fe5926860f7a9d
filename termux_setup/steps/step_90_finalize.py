from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)

RECOMMENDATIONS = [
    "Restart Termux to apply font and potentially shell changes.",
    "If you want zsh as your default shell, run 'chsh -s zsh'.",
    "Run 'nvim' to start Neovim and let LazyVim install its plugins.",
    "Consider running 'p10k configure' in zsh after switching shell and restarting "
    "to set up Powerlevel10k.",
]


class FinalizeStep:
    step_id = "90_finalize"
    title = "Final summary"

    def is_satisfied(self, host: "Host") -> bool:
        return False

    def run(self, host: "Host") -> None:
        logger.info("-" * 50)
        logger.info("Termux setup finished.")
        logger.info("Recommendations:")
        for i, line in enumerate(RECOMMENDATIONS, start=1):
            logger.info("%d. %s", i, line)
        logger.info("-" * 50)
