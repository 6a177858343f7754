"""
Problem interface for constrained nonlinear optimization.

:class:`Problem` fixes the six evaluations a solver relies on (objective,
gradient, objective Hessian, constraints, constraints Jacobian and Hessian of
the Lagrangian); :class:`FunctionProblem` implements them from plain
callables.
"""

from . import contract, core, function
from .contract import Problem
from .core import (
    DUAL_OPERATIONS,
    OPERATIONS,
    Array,
    ConstraintsFunc,
    ConstraintsJacobianFunc,
    DimensionError,
    LagrangianHessianFunc,
    ObjectiveFunc,
    ObjectiveGradientFunc,
    ObjectiveHessianFunc,
    RealType,
    UnsetOperationError,
    resolve_real_type,
    validate_dimension,
)
from .function import FunctionProblem

__all__ = [
    "contract",
    "core",
    "function",
    # Interface
    "Problem",
    "FunctionProblem",
    # Types
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
    # Errors
    "UnsetOperationError",
    "DimensionError",
    # Validation
    "resolve_real_type",
    "validate_dimension",
]
