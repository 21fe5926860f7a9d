"""Termux first-run setup (Python-first, check-then-act).

Core design goals:
- Idempotent steps, re-checked against the filesystem on every run
- Fail fast: the first failing command aborts the run
- Host capabilities injected, so steps run against a fake in tests
- Centralized logging
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
