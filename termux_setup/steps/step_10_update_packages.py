from __future__ import annotations

from typing import TYPE_CHECKING

from ..lib.pkg import pkg_update, pkg_upgrade

if TYPE_CHECKING:
    from ..host import Host


class UpdatePackagesStep:
    step_id = "10_update_packages"
    title = "Package update"

    def is_satisfied(self, host: "Host") -> bool:
        return False

    def run(self, host: "Host") -> None:
        pkg_update(host)
        pkg_upgrade(host)
