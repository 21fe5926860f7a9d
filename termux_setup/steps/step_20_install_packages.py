from __future__ import annotations

from typing import TYPE_CHECKING

from ..lib.pkg import pkg_install

if TYPE_CHECKING:
    from ..host import Host


class InstallPackagesStep:
    step_id = "20_install_packages"
    title = "Package installation"

    def is_satisfied(self, host: "Host") -> bool:
        # pkg install is itself a no-op for installed packages.
        return False

    def run(self, host: "Host") -> None:
        pkg_install(host, host.config.packages)
