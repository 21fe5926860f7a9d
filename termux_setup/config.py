from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_PACKAGES = ["man", "neovim", "wget", "python", "zsh", "git", "gitui", "mc"]
DEFAULT_OH_MY_ZSH_URL = "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
DEFAULT_P10K_REPO = "https://github.com/romkatv/powerlevel10k.git"
DEFAULT_P10K_THEME = "powerlevel10k/powerlevel10k"
DEFAULT_FONT_URL = (
    "https://github.com/ryanoasis/nerd-fonts/raw/refs/heads/master/"
    "patched-fonts/RobotoMono/Medium/RobotoMonoNerdFontMono-Medium.ttf"
)
DEFAULT_LAZYVIM_REPO = "https://github.com/LazyVim/starter"


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def defaults(cls) -> "SetupConfig":
        return cls(raw={})

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    @property
    def packages(self) -> List[str]:
        pkgs = self.raw.get("packages")
        if pkgs is None:
            return list(DEFAULT_PACKAGES)
        return [str(p).strip() for p in pkgs if str(p).strip()]

    @property
    def oh_my_zsh_install_url(self) -> str:
        return str(self._section("oh_my_zsh").get("install_url") or DEFAULT_OH_MY_ZSH_URL)

    @property
    def powerlevel10k_repo(self) -> str:
        return str(self._section("powerlevel10k").get("repo") or DEFAULT_P10K_REPO)

    @property
    def powerlevel10k_theme(self) -> str:
        return str(self._section("powerlevel10k").get("theme") or DEFAULT_P10K_THEME)

    @property
    def font_url(self) -> str:
        return str(self._section("font").get("url") or DEFAULT_FONT_URL)

    @property
    def lazyvim_repo(self) -> str:
        return str(self._section("lazyvim").get("repo") or DEFAULT_LAZYVIM_REPO)


def load_setup_config(path: str | Path, *, required: bool = True) -> SetupConfig:
    """Load overrides from a YAML file.

    A missing file is an error only when the caller named it explicitly.
    """

    p = Path(path)
    if not p.exists():
        if required:
            raise FileNotFoundError(str(p))
        return SetupConfig.defaults()

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError(f"setup config must be YAML: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{p}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{p} must contain a mapping/object")

    for section in ("oh_my_zsh", "powerlevel10k", "font", "lazyvim"):
        if not isinstance(raw.get(section) or {}, dict):
            raise ValueError(f"{p}: {section} must be a mapping")
    if raw.get("packages") is not None and not isinstance(raw["packages"], list):
        raise ValueError(f"{p}: packages must be a list")

    return SetupConfig(raw=raw)


def resolve_config(path: Optional[str], default_path: Path) -> SetupConfig:
    if path:
        return load_setup_config(path, required=True)
    return load_setup_config(default_path, required=False)
