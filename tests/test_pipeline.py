import logging

import pytest

from termux_setup.lib.command import CommandError
from termux_setup.main import build_steps, run
from termux_setup.pipeline import StepFailed, StepResult, StepStatus, run_pipeline


class RecordingStep:
    def __init__(self, step_id, log, *, satisfied=False, error=None, outcome=None):
        self.step_id = step_id
        self.title = f"Step {step_id}"
        self.log = log
        self.satisfied = satisfied
        self.error = error
        self.outcome = outcome

    def is_satisfied(self, host):
        return self.satisfied

    def run(self, host):
        self.log.append(self.step_id)
        if self.error is not None:
            raise self.error
        return self.outcome


def test_runs_steps_in_order(host):
    log = []
    result = run_pipeline(host=host, steps=[RecordingStep(s, log) for s in ("a", "b", "c")])

    assert log == ["a", "b", "c"]
    assert result.ran_steps == ["a", "b", "c"]
    assert result.completed


def test_satisfied_step_is_skipped(host, caplog):
    caplog.set_level(logging.INFO)
    log = []
    result = run_pipeline(
        host=host,
        steps=[RecordingStep("a", log, satisfied=True), RecordingStep("b", log)],
    )

    assert log == ["b"]
    assert result.skipped_steps == ["a"]
    assert result.ran_steps == ["b"]
    assert "already done" in caplog.text


def test_command_failure_stops_pipeline(host, caplog):
    log = []
    err = CommandError(["pkg", "update", "-y"], 100, "no network")
    result = run_pipeline(
        host=host,
        steps=[RecordingStep("a", log), RecordingStep("b", log, error=err), RecordingStep("c", log)],
    )

    assert log == ["a", "b"]
    assert not result.completed
    assert result.failed.step_id == "b"
    assert result.failed.returncode == 100
    assert "no network" in result.failed.reason
    assert [r.status for r in result.results] == [StepStatus.SUCCEEDED, StepStatus.FAILED]
    assert "ERROR: Step b failed." in caplog.text


def test_filesystem_failure_stops_pipeline(host):
    log = []
    result = run_pipeline(
        host=host,
        steps=[RecordingStep("a", log, error=PermissionError(13, "denied")), RecordingStep("b", log)],
    )

    assert log == ["a"]
    assert result.failed.step_id == "a"
    assert result.failed.returncode is None


def test_programming_errors_propagate(host):
    with pytest.raises(ValueError):
        run_pipeline(host=host, steps=[RecordingStep("a", [], error=ValueError("bug"))])


def test_step_can_report_its_own_skip(host):
    log = []
    declined = StepResult("a", "Step a", StepStatus.SKIPPED, "declined by operator")
    result = run_pipeline(host=host, steps=[RecordingStep("a", log, outcome=declined), RecordingStep("b", log)])

    assert log == ["a", "b"]
    assert result.skipped_steps == ["a"]
    assert result.results[0].reason == "declined by operator"
    assert result.completed


def test_run_raises_step_failed(host):
    err = CommandError(["git", "clone"], 128)
    with pytest.raises(StepFailed) as exc:
        run(host, steps=[RecordingStep("x", [], error=err)])

    assert exc.value.step_id == "x"
    assert exc.value.title == "Step x"
    assert exc.value.returncode == 128


def test_build_steps_order():
    ids = [s.step_id for s in build_steps()]
    assert ids == sorted(ids)
    assert ids[0] == "10_update_packages"
    assert ids[-1] == "90_finalize"
