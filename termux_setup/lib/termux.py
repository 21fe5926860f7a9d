from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .command import CommandError

if TYPE_CHECKING:
    from ..host import Host

logger = logging.getLogger(__name__)


def reload_settings(host: "Host") -> bool:
    """Ask Termux to re-read ~/.termux (font, colors, properties).

    Best effort: returns False instead of raising when the command is missing
    or exits non-zero, since nothing later in the run depends on it.
    """

    try:
        host.run(["termux-reload-settings"])
    except (CommandError, FileNotFoundError) as e:
        logger.warning("termux-reload-settings did not succeed: %s", e)
        return False
    return True
