from __future__ import annotations


def is_affirmative(answer: str) -> bool:
    return answer.strip() in {"y", "Y"}


def ask_yes_no(question: str) -> bool:
    """Read one answer from stdin; end of input counts as no."""
    try:
        answer = input(question)
    except EOFError:
        return False
    return is_affirmative(answer)


def always_yes(question: str) -> bool:
    return True
