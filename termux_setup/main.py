from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import resolve_config
from .host import Host
from .lib.prompt import always_yes
from .logging_utils import configure_logging
from .pipeline import PipelineResult, Step, StepFailed, run_pipeline
from .steps import (
    FinalizeStep,
    InstallLazyVimStep,
    InstallNerdFontStep,
    InstallOhMyZshStep,
    InstallPackagesStep,
    InstallPowerlevel10kStep,
    ReloadSettingsStep,
    UpdatePackagesStep,
)

logger = logging.getLogger(__name__)


def build_steps() -> List[Step]:
    return [
        UpdatePackagesStep(),
        InstallPackagesStep(),
        InstallOhMyZshStep(),
        InstallPowerlevel10kStep(),
        InstallNerdFontStep(),
        ReloadSettingsStep(),
        InstallLazyVimStep(),
        FinalizeStep(),
    ]


def run(host: Host, steps: Optional[Sequence[Step]] = None) -> PipelineResult:
    """Run the setup pipeline against host; raise StepFailed on the first failure."""

    logger.info("Starting Termux setup%s", " (dry run)" if host.dry_run else "")
    result = run_pipeline(host=host, steps=build_steps() if steps is None else steps)
    logger.debug("ran=%s skipped=%s", result.ran_steps, result.skipped_steps)
    result.raise_for_failure()
    return result


def main(argv: Optional[list[str]] = None, *, host: Optional[Host] = None) -> int:
    p = argparse.ArgumentParser(prog="termux-setup", description="First-run Termux environment setup")
    p.add_argument("--config", default=None, help="YAML file overriding packages and URLs")
    p.add_argument("--log", default=None, help="Path to setup log (default ~/.termux/termux-setup.log; none on --dry-run)")
    p.add_argument("--dry-run", action="store_true", help="Log commands and edits without executing them")
    p.add_argument("--yes", action="store_true", help="Replace an existing Neovim config without asking")

    args = p.parse_args(argv)

    host = host or Host.from_environment()
    paths = host.paths

    dry_run = host.dry_run or bool(args.dry_run)
    # A dry run leaves the home directory untouched, default log included.
    default_log = None if dry_run else str(paths.default_log)
    configure_logging(log_path=args.log or default_log)

    try:
        host.config = resolve_config(args.config, paths.default_config_file)
    except (FileNotFoundError, ValueError) as e:
        p.error(f"setup config: {e}")

    host.dry_run = dry_run
    if args.yes:
        host.confirm = always_yes

    try:
        run(host)
    except StepFailed as e:
        logger.debug("Setup aborted at %s (returncode=%s)", e.step_id, e.returncode)
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted; partial changes are left in place.")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
