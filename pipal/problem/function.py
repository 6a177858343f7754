"""
Problem defined through plain function handles.

:class:`FunctionProblem` stores one callable per evaluation method and
forwards each call to it unchanged, so a problem can be assembled without
writing a new class.

Example
-------
>>> import numpy as np
>>> from pipal import FunctionProblem
>>> Problem2x2 = FunctionProblem[np.float64, 2, 2]
>>> problem = Problem2x2(
...     objective=lambda x: float(x @ x),
...     objective_gradient=lambda x: 2.0 * x,
...     constraints=lambda x: x - 1.0,
...     constraints_jacobian=lambda x, z: np.eye(2),
...     lagrangian_hessian=lambda x, z: 2.0 * np.eye(2),
... )
>>> problem.objective(np.array([1.0, 1.0]))
2.0
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from ..diagnostics.core import assert_dual, assert_primal, assert_result
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .contract import Problem
from .core import (
    OPERATIONS,
    Array,
    ConstraintsFunc,
    ConstraintsJacobianFunc,
    LagrangianHessianFunc,
    ObjectiveFunc,
    ObjectiveGradientFunc,
    ObjectiveHessianFunc,
    UnsetOperationError,
)

logger = get_logger(__name__)


class FunctionProblem(Problem):
    """
    Problem whose six evaluations are delegated to stored function handles.

    The objective Hessian is optional: solvers that only need the Hessian of
    the Lagrangian never call :meth:`objective_hessian`, so it may be left
    unset. Any handle may be unset; evaluating an unset handle raises
    :class:`UnsetOperationError`.

    The class must be specialized before use, e.g.
    ``FunctionProblem[np.float64, n, m]``.

    Args:
        objective: ``f(x) -> float``.
        objective_gradient: ``grad f(x) -> (n,)``.
        constraints: ``g(x) -> (m,)``.
        constraints_jacobian: ``J(x, z) -> (m, n)``.
        lagrangian_hessian: ``W(x, z) -> (n, n)``.
        objective_hessian: ``hess f(x) -> (n, n)``, optional.
    """

    def __init__(
        self,
        objective: Optional[ObjectiveFunc] = None,
        objective_gradient: Optional[ObjectiveGradientFunc] = None,
        constraints: Optional[ConstraintsFunc] = None,
        constraints_jacobian: Optional[ConstraintsJacobianFunc] = None,
        lagrangian_hessian: Optional[LagrangianHessianFunc] = None,
        objective_hessian: Optional[ObjectiveHessianFunc] = None,
    ) -> None:
        self._handles: Dict[str, Optional[Callable[..., Any]]] = dict.fromkeys(OPERATIONS)
        supplied = {
            "objective": objective,
            "objective_gradient": objective_gradient,
            "objective_hessian": objective_hessian,
            "constraints": constraints,
            "constraints_jacobian": constraints_jacobian,
            "lagrangian_hessian": lagrangian_hessian,
        }
        for operation, handle in supplied.items():
            self._store(operation, handle)
        logger.debug(
            "Created %s with unset operations %s",
            type(self).__qualname__,
            self.unset_operations(),
        )

    def __repr__(self) -> str:
        set_ops = [op for op in OPERATIONS if self._handles[op] is not None]
        return f"{type(self).__qualname__}(set={set_ops}, unset={list(self.unset_operations())})"

    def __copy__(self) -> "FunctionProblem":
        # The clone gets its own handle table; the handles themselves are shared.
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._handles = dict(self._handles)
        return clone

    def _store(self, operation: str, handle: Optional[Callable[..., Any]]) -> None:
        if handle is not None and not callable(handle):
            raise TypeError(
                f"{operation} handle must be callable or None, got {type(handle).__name__}"
            )
        self._handles[operation] = handle

    def _replace(self, operation: str, handle: Optional[Callable[..., Any]]) -> None:
        self._store(operation, handle)
        logger.debug("%s handle %s", operation, "cleared" if handle is None else "replaced")

    def _call(self, operation: str, *args: Array) -> Any:
        handle = self._handles[operation]
        if handle is None:
            raise UnsetOperationError(operation)
        if not is_debug_enabled():
            return handle(*args)

        assert_primal(self, args[0])
        if len(args) > 1:
            assert_dual(self, args[1])
        result = handle(*args)
        assert_result(self, operation, result)
        return result

    def is_set(self, operation: str) -> bool:
        """Return True if the handle backing ``operation`` is set."""
        if operation not in self._handles:
            raise ValueError(
                f"unknown operation {operation!r}; expected one of {OPERATIONS}"
            )
        return self._handles[operation] is not None

    def unset_operations(self) -> Tuple[str, ...]:
        """Return the names of the operations without a handle."""
        return tuple(op for op in OPERATIONS if self._handles[op] is None)

    # Accessors

    def get_objective(self) -> Optional[ObjectiveFunc]:
        return self._handles["objective"]

    def set_objective(self, objective: Optional[ObjectiveFunc]) -> None:
        self._replace("objective", objective)

    def get_objective_gradient(self) -> Optional[ObjectiveGradientFunc]:
        return self._handles["objective_gradient"]

    def set_objective_gradient(self, objective_gradient: Optional[ObjectiveGradientFunc]) -> None:
        self._replace("objective_gradient", objective_gradient)

    def get_objective_hessian(self) -> Optional[ObjectiveHessianFunc]:
        return self._handles["objective_hessian"]

    def set_objective_hessian(self, objective_hessian: Optional[ObjectiveHessianFunc]) -> None:
        self._replace("objective_hessian", objective_hessian)

    def get_constraints(self) -> Optional[ConstraintsFunc]:
        return self._handles["constraints"]

    def set_constraints(self, constraints: Optional[ConstraintsFunc]) -> None:
        self._replace("constraints", constraints)

    def get_constraints_jacobian(self) -> Optional[ConstraintsJacobianFunc]:
        return self._handles["constraints_jacobian"]

    def set_constraints_jacobian(
        self, constraints_jacobian: Optional[ConstraintsJacobianFunc]
    ) -> None:
        self._replace("constraints_jacobian", constraints_jacobian)

    def get_lagrangian_hessian(self) -> Optional[LagrangianHessianFunc]:
        return self._handles["lagrangian_hessian"]

    def set_lagrangian_hessian(
        self, lagrangian_hessian: Optional[LagrangianHessianFunc]
    ) -> None:
        self._replace("lagrangian_hessian", lagrangian_hessian)

    # Evaluation

    def objective(self, x: Array) -> float:
        return self._call("objective", x)

    def objective_gradient(self, x: Array) -> Array:
        return self._call("objective_gradient", x)

    def objective_hessian(self, x: Array) -> Array:
        return self._call("objective_hessian", x)

    def constraints(self, x: Array) -> Array:
        return self._call("constraints", x)

    def constraints_jacobian(self, x: Array, z: Array) -> Array:
        return self._call("constraints_jacobian", x, z)

    def lagrangian_hessian(self, x: Array, z: Array) -> Array:
        return self._call("lagrangian_hessian", x, z)


__all__ = ["FunctionProblem"]
