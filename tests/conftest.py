import logging
import subprocess
from pathlib import Path

import pytest

from termux_setup.host import Host

ZSHRC_TEMPLATE = 'export ZSH="$HOME/.oh-my-zsh"\nZSH_THEME="robbyrussell"\nplugins=(git)\n'


class FakeRunner:
    """Stands in for subprocess: records argv and fakes each tool's effect on disk."""

    def __init__(self, home: Path):
        self.home = home
        self.calls = []
        self._failures = {}
        self._missing = set()
        self._interrupts = set()
        self.uncaptured = []

    def fail_on(self, *prefix, returncode=1):
        self._failures[tuple(prefix)] = returncode

    def missing(self, program):
        self._missing.add(program)

    def interrupt_on(self, program):
        self._interrupts.add(program)

    def programs(self):
        return [c[0] for c in self.calls]

    def __call__(self, argv, *, env=None, cwd=None, input_text=None, capture=True):
        argv = list(argv)
        self.calls.append(argv)
        if not capture:
            self.uncaptured.append(argv)
        if argv[0] in self._interrupts:
            raise KeyboardInterrupt
        if argv[0] in self._missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        for prefix, rc in self._failures.items():
            if tuple(argv[: len(prefix)]) == prefix:
                return subprocess.CompletedProcess(argv, rc, "", f"{argv[0]}: simulated failure")
        return subprocess.CompletedProcess(argv, 0, self._simulate(argv), "")

    def _simulate(self, argv):
        if argv[0] == "curl":
            return "#!/bin/sh\necho installing oh-my-zsh\n"
        if argv[:2] == ["sh", "-c"]:
            (self.home / ".oh-my-zsh" / "custom" / "themes").mkdir(parents=True, exist_ok=True)
            zshrc = self.home / ".zshrc"
            if not zshrc.exists():
                zshrc.write_text(ZSHRC_TEMPLATE, encoding="utf-8")
        elif argv[:2] == ["git", "clone"]:
            dest = Path(argv[-1])
            dest.mkdir(parents=True)
            (dest / ".git").mkdir()
            (dest / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
            (dest / "README.md").write_text(argv[-2] + "\n", encoding="utf-8")
        elif argv[0] == "wget":
            Path(argv[argv.index("-O") + 1]).write_bytes(b"\x00\x01\x00\x00fake-ttf")
        return ""


class Answers:
    def __init__(self, answer):
        self.answer = answer
        self.prompts = []

    def __call__(self, question):
        self.prompts.append(question)
        return self.answer


@pytest.fixture(autouse=True)
def _reset_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ("_termux_setup_configured", "_termux_setup_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def home(tmp_path):
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def runner(home):
    return FakeRunner(home)


@pytest.fixture
def answers():
    return Answers(False)


@pytest.fixture
def host(home, runner, answers):
    return Host(home=home, environ={"HOME": str(home)}, runner=runner, confirm=answers)


@pytest.fixture
def log_args(tmp_path):
    return ["--log", str(tmp_path / "logs" / "setup.log")]
