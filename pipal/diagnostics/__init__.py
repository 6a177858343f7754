"""Diagnostics and debugging utilities for Pipal."""

from .core import (
    assert_dual,
    assert_primal,
    assert_result,
    assert_scalar,
    assert_shape,
    assert_symmetric,
    check_problem,
    expected_shape,
    is_symmetric,
    matrix_shape,
    vector_length,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "vector_length",
    "matrix_shape",
    "expected_shape",
    "assert_shape",
    "assert_scalar",
    "assert_primal",
    "assert_dual",
    "assert_result",
    "is_symmetric",
    "assert_symmetric",
    "check_problem",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
