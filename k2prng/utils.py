"""General utility functions for the engine."""

from __future__ import annotations

import sys
import time
import traceback
from typing import TextIO

_MAX_FRAMES = 10


class RequirementError(RuntimeError):
    """Raised when a runtime requirement does not hold."""

    def __init__(self, text: str, filename: str = "", lineno: int = 0, function: str = "") -> None:
        self.text = text
        self.filename = filename
        self.lineno = lineno
        self.function = function
        super().__init__(
            "FATAL: Error condition\n"
            f"\tFile     :    {filename}\n"
            f"\tLine     :    {lineno}\n"
            f"\tFunction :    {function}\n"
            f"\tText     :    {text}"
        )


def print_stacktrace(file: TextIO | None = None) -> None:
    """Print up to ten frames of the caller's stack."""
    out = sys.stdout if file is None else file
    frames = traceback.extract_stack()[:-1][-_MAX_FRAMES:]
    print(f"Obtained {len(frames)} stack frames.", file=out)
    for frame in reversed(frames):
        print(f"{frame.filename}:{frame.lineno} {frame.name}", file=out)


def print_stacktrace_and_exit() -> None:
    """Print the stack and exit the process with status -1."""
    print_stacktrace()
    sys.exit(-1)


def get_time_of_day_in_secs() -> float:
    """Return the current time of day in seconds since the epoch."""
    return time.time()


def get_elapsed_time_in_secs(start_time: float) -> float:
    """Return the seconds elapsed between start_time and now."""
    return get_time_of_day_in_secs() - start_time


def round_down_to_nearest_power_2(n: int) -> int:
    """Round n down to the nearest power of two; 0 for n below 1."""
    if n < 1:
        return 0
    return 1 << (n.bit_length() - 1)


def require(cond: object, text: str) -> None:
    """Raise RequirementError carrying text and the caller's location if cond is false."""
    if cond:
        return
    caller = traceback.extract_stack(limit=2)[0]
    raise RequirementError(text, caller.filename, caller.lineno or 0, caller.name)