"""Free-text task parsing.

Turns the text typed into the "next task" field into a Task. Both
functions here are total: every input produces a value.
"""

import re
from typing import Any

from .models import Task

# "<name> <digits>pts"; searched, so the earliest match in the text wins
POINTS_PATTERN = re.compile(r"(.*?) (\d+)pts")

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_task(raw: str) -> Task:
    """Parse raw input into a Task.

    A trailing point value such as ``"eat the frog 20pts"`` is split off
    into ``points``. Text after the ``pts`` suffix is discarded and the
    name is not otherwise trimmed. Input without a point value becomes a
    zero-point task named by the whole string, including empty input.

    Args:
        raw: Text as typed by the user.

    Returns:
        The parsed Task.
    """
    match = POINTS_PATTERN.search(raw)
    if match is None:
        return Task(name=raw, points=0)
    return Task(name=match.group(1), points=int(match.group(2)))


def coerce_points(value: Any) -> int:
    """Coerce a points draft to an integer, normalizing junk to 0.

    Accepts ints and integer strings (surrounding whitespace and a sign
    are allowed). Everything else, booleans included, becomes 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)
    return 0
