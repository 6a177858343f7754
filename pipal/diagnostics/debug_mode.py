"""Debug mode for Pipal problem evaluations.

The evaluation contract assumes vectors already have the lengths fixed by the
problem type, so ``FunctionProblem`` does not validate them per call. Debug
mode turns that validation on: inputs are checked against ``n`` and ``m`` and
results against the shape of their operation, raising ``DimensionError`` on a
mismatch. The flag is read from ``PIPAL_DEBUG`` at import time.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "PIPAL_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """
    Return whether Pipal debug mode is currently enabled.

    In debug mode every evaluation of a ``FunctionProblem`` checks the
    lengths of its inputs and the shape of its result. Debug mode can be
    toggled via set_debug_enabled(...) or the PIPAL_DEBUG environment
    variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable Pipal debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable dimension checking.

    The previous setting is restored on exit, including when the block
    raises.

    Example
    -------
    >>> with debug_context(True):
    ...     problem.objective(x)  # raises DimensionError if len(x) != problem.n
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


__all__ = ["is_debug_enabled", "set_debug_enabled", "debug_context"]
