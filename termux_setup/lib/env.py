from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True)
class Paths:
    home: Path
    zsh_custom: Path

    @classmethod
    def resolve(cls, home: Path, environ: Mapping[str, str]) -> "Paths":
        # ${ZSH_CUSTOM:-$HOME/.oh-my-zsh/custom}: empty counts as unset.
        custom = environ.get("ZSH_CUSTOM") or str(home / ".oh-my-zsh" / "custom")
        return cls(home=home, zsh_custom=Path(custom))

    @property
    def oh_my_zsh(self) -> Path:
        return self.home / ".oh-my-zsh"

    @property
    def powerlevel10k(self) -> Path:
        return self.zsh_custom / "themes" / "powerlevel10k"

    @property
    def zshrc(self) -> Path:
        return self.home / ".zshrc"

    @property
    def termux_dir(self) -> Path:
        return self.home / ".termux"

    @property
    def font(self) -> Path:
        return self.termux_dir / "font.ttf"

    @property
    def config_dir(self) -> Path:
        return self.home / ".config"

    @property
    def nvim_config(self) -> Path:
        return self.config_dir / "nvim"

    @property
    def default_log(self) -> Path:
        return self.termux_dir / "termux-setup.log"

    @property
    def default_config_file(self) -> Path:
        return self.config_dir / "termux-setup" / "config.yaml"
