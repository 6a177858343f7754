"""Shape and symmetry diagnostics for problem evaluations.

Inputs may be NumPy arrays, array-likes or torch tensors.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

import numpy as np
import torch

from ..logging import get_logger
from ..problem.contract import Problem
from ..problem.core import DUAL_OPERATIONS, OPERATIONS, DimensionError

logger = get_logger(__name__)


def _as_numpy(value: Any) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        return value.detach().cpu().numpy()
    return np.asarray(value)


def vector_length(vec: Any) -> int:
    """
    Return the length of a 1-D vector.

    Raises
    ------
    DimensionError
        If ``vec`` is not one-dimensional.
    """
    arr = _as_numpy(vec)
    if arr.ndim != 1:
        raise DimensionError(f"expected a 1-D vector, got shape {arr.shape}")
    return int(arr.shape[0])


def matrix_shape(mat: Any) -> Tuple[int, int]:
    """Return the shape of a 2-D matrix, raising DimensionError otherwise."""
    arr = _as_numpy(mat)
    if arr.ndim != 2:
        raise DimensionError(f"expected a 2-D matrix, got shape {arr.shape}")
    return int(arr.shape[0]), int(arr.shape[1])


def expected_shape(problem: Problem, operation: str) -> Tuple[int, ...]:
    """
    Return the result shape of ``operation`` for ``problem``.

    The objective is a scalar, reported as the empty shape ``()``.
    """
    shapes = {
        "objective": (),
        "objective_gradient": problem.primal_shape,
        "objective_hessian": problem.hessian_shape,
        "constraints": problem.dual_shape,
        "constraints_jacobian": problem.jacobian_shape,
        "lagrangian_hessian": problem.hessian_shape,
    }
    try:
        return shapes[operation]
    except KeyError:
        raise ValueError(
            f"unknown operation {operation!r}; expected one of {OPERATIONS}"
        ) from None


def assert_shape(value: Any, shape: Tuple[int, ...], what: str) -> None:
    """Raise DimensionError unless ``value`` has exactly ``shape``."""
    actual = _as_numpy(value).shape
    if tuple(actual) != tuple(shape):
        raise DimensionError(f"{what} must have shape {tuple(shape)}, got {actual}")


def assert_scalar(value: Any, what: str = "objective") -> None:
    """Raise DimensionError unless ``value`` is a scalar."""
    assert_shape(value, (), what)


def assert_primal(problem: Problem, x: Any) -> None:
    """Raise DimensionError unless ``x`` is a primal vector of length ``n``."""
    length = vector_length(x)
    if length != problem.n:
        raise DimensionError(
            f"primal vector must have length {problem.n}, got {length}"
        )


def assert_dual(problem: Problem, z: Any) -> None:
    """Raise DimensionError unless ``z`` is a dual vector of length ``m``."""
    length = vector_length(z)
    if length != problem.m:
        raise DimensionError(
            f"dual vector must have length {problem.m}, got {length}"
        )


def assert_result(problem: Problem, operation: str, value: Any) -> None:
    """Raise DimensionError unless ``value`` is a valid result of ``operation``."""
    assert_shape(value, expected_shape(problem, operation), f"{operation} result")


def is_symmetric(mat: Any, atol: float = 1e-10) -> bool:
    """
    Check whether a square matrix is symmetric within ``atol``.

    The evaluation contract does not require symmetric Hessians; this is a
    diagnostic for problems that are expected to provide them.
    """
    arr = _as_numpy(mat)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        return False
    return bool(np.allclose(arr, arr.T, atol=atol, rtol=0.0))


def assert_symmetric(mat: Any, atol: float = 1e-10) -> None:
    """
    Assert that a matrix is symmetric within ``atol``.

    Raises
    ------
    ValueError
        If the matrix is not square or not symmetric.
    """
    if not is_symmetric(mat, atol=atol):
        arr = _as_numpy(mat)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise DimensionError(f"expected a square matrix, got shape {arr.shape}")
        asym = float(np.max(np.abs(arr - arr.T)))
        raise ValueError(
            f"Matrix is not symmetric within tolerance {atol}. "
            f"Max asymmetry: {asym}"
        )


def check_problem(
    problem: Problem,
    x: Any,
    z: Any,
    operations: Iterable[str] = OPERATIONS,
) -> Dict[str, Any]:
    """
    Evaluate ``operations`` once at ``(x, z)`` and verify every result shape.

    Derivative consistency (e.g. that the gradient matches the objective) is
    not checked.

    Parameters
    ----------
    problem:
        Problem to evaluate.
    x:
        Primal vector of length ``problem.n``.
    z:
        Dual vector of length ``problem.m``.
    operations:
        Names of the operations to evaluate. Pass a subset to skip operations
        a problem does not provide, such as an unset objective Hessian.

    Returns
    -------
    dict
        Mapping from operation name to its (unmodified) result.
    """
    operations = tuple(operations)
    unknown = [op for op in operations if op not in OPERATIONS]
    if unknown:
        raise ValueError(f"unknown operations {unknown}; expected a subset of {OPERATIONS}")

    assert_primal(problem, x)
    assert_dual(problem, z)

    results: Dict[str, Any] = {}
    for operation in operations:
        method = getattr(problem, operation)
        value = method(x, z) if operation in DUAL_OPERATIONS else method(x)
        assert_result(problem, operation, value)
        results[operation] = value
    logger.debug("%s passed shape checks for %s", type(problem).__qualname__, operations)
    return results


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
]
