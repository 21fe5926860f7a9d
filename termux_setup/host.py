from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence

from .config import SetupConfig
from .lib.command import CmdResult, CommandRunner, default_runner, run_cmd
from .lib.env import Paths
from .lib.prompt import ask_yes_no


@dataclass
class Host:
    """Everything a step is allowed to touch.

    Steps never reach for os.environ, input() or subprocess directly; tests
    swap the runner and confirm callables for fakes and point home at a
    temporary directory.
    """

    home: Path
    environ: Mapping[str, str] = field(default_factory=dict)
    config: SetupConfig = field(default_factory=SetupConfig.defaults)
    runner: CommandRunner = default_runner
    confirm: Callable[[str], bool] = ask_yes_no
    dry_run: bool = False

    @classmethod
    def from_environment(cls, **kwargs) -> "Host":
        environ = dict(os.environ)
        home = Path(environ.get("HOME") or Path.home())
        return cls(home=home, environ=environ, **kwargs)

    @property
    def paths(self) -> Paths:
        return Paths.resolve(self.home, self.environ)

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        input_text: Optional[str] = None,
        capture: bool = True,
    ) -> CmdResult:
        return run_cmd(
            argv,
            check=check,
            input_text=input_text,
            dry_run=self.dry_run,
            runner=self.runner,
            capture=capture,
        )
