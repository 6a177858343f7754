"""
Shared vocabulary for constrained nonlinear programs.

A problem of primal dimension ``n`` and dual (constraint) dimension ``m`` is
evaluated on a primal vector ``x`` of length ``n`` and a dual vector ``z`` of
length ``m``. Results have the shapes

* objective: scalar
* objective gradient: ``(n,)``
* objective Hessian and Lagrangian Hessian: ``(n, n)``
* constraints: ``(m,)``
* constraints Jacobian: ``(m, n)``

The numeric representation and both dimensions are fixed when a problem type
is defined; the helpers here resolve and validate them.
"""

from __future__ import annotations

from typing import Any, Callable, Union

import numpy as np
import torch

Array = np.ndarray
RealType = Union[np.dtype, torch.dtype]

ObjectiveFunc = Callable[[Array], float]
ObjectiveGradientFunc = Callable[[Array], Array]
ObjectiveHessianFunc = Callable[[Array], Array]
ConstraintsFunc = Callable[[Array], Array]
ConstraintsJacobianFunc = Callable[[Array, Array], Array]
LagrangianHessianFunc = Callable[[Array, Array], Array]

OPERATIONS = (
    "objective",
    "objective_gradient",
    "objective_hessian",
    "constraints",
    "constraints_jacobian",
    "lagrangian_hessian",
)
DUAL_OPERATIONS = ("constraints_jacobian", "lagrangian_hessian")


class UnsetOperationError(RuntimeError):
    """Raised when an evaluation is requested from a handle that is not set."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"invalid operation: {operation!r} handle not set")


class DimensionError(ValueError):
    """Raised when a vector or matrix does not match the problem dimensions."""


def resolve_real_type(real_type: Any) -> RealType:
    """
    Return the canonical form of a floating-point numeric type.

    Python ``float``, NumPy floating scalar types, dtypes and dtype names
    resolve to a ``numpy.dtype``. Real floating ``torch.dtype`` values are
    returned unchanged.

    Raises:
        TypeError: If ``real_type`` is not a real floating-point type.
    """
    if isinstance(real_type, torch.dtype):
        if not real_type.is_floating_point:
            raise TypeError(
                f"real_type must be a floating-point type, got {real_type}"
            )
        return real_type

    # np.dtype(None) silently means float64
    if real_type is None:
        raise TypeError("real_type must be a floating-point type, got None")
    try:
        dtype = np.dtype(real_type)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"real_type must be a floating-point type, got {real_type!r}"
        ) from exc
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"real_type must be a floating-point type, got {dtype}")
    return dtype


def validate_dimension(value: Any, name: str) -> int:
    """
    Validate a problem dimension and return it as a plain ``int``.

    Raises:
        TypeError: If ``value`` is not an integer (booleans are rejected).
        ValueError: If ``value`` is not positive.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


__all__ = [
    "Array",
    "RealType",
    "ObjectiveFunc",
    "ObjectiveGradientFunc",
    "ObjectiveHessianFunc",
    "ConstraintsFunc",
    "ConstraintsJacobianFunc",
    "LagrangianHessianFunc",
    "OPERATIONS",
    "DUAL_OPERATIONS",
    "UnsetOperationError",
    "DimensionError",
    "resolve_real_type",
    "validate_dimension",
]
