"""Pipal - problem interface for constrained nonlinear optimization solvers."""

__version__ = "0.1.0"

# Problem interface (must precede diagnostics)
from .problem import (
    DimensionError,
    FunctionProblem,
    OPERATIONS,
    Problem,
    UnsetOperationError,
    resolve_real_type,
    validate_dimension,
)

# Diagnostics
from .diagnostics import (
    assert_symmetric,
    check_problem,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "Problem",
    "FunctionProblem",
    "OPERATIONS",
    "UnsetOperationError",
    "DimensionError",
    "resolve_real_type",
    "validate_dimension",
    "check_problem",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
