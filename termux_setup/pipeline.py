from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

from .lib.command import CommandError

if TYPE_CHECKING:
    from .host import Host

logger = logging.getLogger(__name__)


class StepStatus(str, enum.Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    step_id: str
    title: str
    status: StepStatus
    reason: Optional[str] = None
    returncode: Optional[int] = None


class Step(Protocol):
    """A single idempotent step.

    is_satisfied() inspects host state only. run() performs the action and
    returns None on success, or a SKIPPED result when it chose not to act.
    """

    step_id: str
    title: str

    def is_satisfied(self, host: "Host") -> bool:
        ...

    def run(self, host: "Host") -> Optional[StepResult]:
        ...


class StepFailed(RuntimeError):
    def __init__(self, result: StepResult) -> None:
        self.step_id = result.step_id
        self.title = result.title
        self.returncode = result.returncode
        self.reason = result.reason
        super().__init__(f"{result.title} failed: {result.reason}")


@dataclass(frozen=True)
class PipelineResult:
    results: List[StepResult] = field(default_factory=list)

    @property
    def ran_steps(self) -> List[str]:
        return [r.step_id for r in self.results if r.status is StepStatus.SUCCEEDED]

    @property
    def skipped_steps(self) -> List[str]:
        return [r.step_id for r in self.results if r.status is StepStatus.SKIPPED]

    @property
    def failed(self) -> Optional[StepResult]:
        for r in self.results:
            if r.status is StepStatus.FAILED:
                return r
        return None

    @property
    def completed(self) -> bool:
        return self.failed is None

    def raise_for_failure(self) -> None:
        failed = self.failed
        if failed is not None:
            raise StepFailed(failed)


def run_pipeline(*, host: "Host", steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order; stop at the first action failure.

    Command and filesystem failures become a FAILED result. Anything else is
    a bug and propagates.
    """

    results: List[StepResult] = []

    for step in steps:
        logger.info("")
        logger.info("--- %s ---", step.title)

        if step.is_satisfied(host):
            logger.info("%s: already done, skipping", step.title)
            results.append(StepResult(step.step_id, step.title, StepStatus.SKIPPED, "already satisfied"))
            continue

        try:
            outcome = step.run(host)
        except CommandError as e:
            results.append(StepResult(step.step_id, step.title, StepStatus.FAILED, str(e), e.returncode))
            logger.error("ERROR: %s failed.", step.title)
            logger.error("%s", e)
            break
        except OSError as e:
            results.append(StepResult(step.step_id, step.title, StepStatus.FAILED, str(e)))
            logger.error("ERROR: %s failed.", step.title)
            logger.error("%s", e)
            break

        if outcome is not None and outcome.status is StepStatus.SKIPPED:
            logger.info("%s: skipped (%s)", step.title, outcome.reason)
            results.append(outcome)
        else:
            logger.info("--- %s complete ---", step.title)
            results.append(StepResult(step.step_id, step.title, StepStatus.SUCCEEDED))

    return PipelineResult(results=results)
