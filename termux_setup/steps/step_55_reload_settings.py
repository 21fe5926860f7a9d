from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..lib.termux import reload_settings

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)


class ReloadSettingsStep:
    step_id = "55_reload_settings"
    title = "Termux settings reload"

    def is_satisfied(self, host: "Host") -> bool:
        return False

    def run(self, host: "Host") -> None:
        # Termux picks the font up from ~/.termux/font.ttf on reload.
        if not reload_settings(host):
            logger.info("Restart Termux manually to pick up the new font.")
        else:
            logger.info("You may need to restart Termux for the new font to take effect.")
