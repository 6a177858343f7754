"""
Abstract interface of a constrained, twice-differentiable nonlinear program.

Solvers are written against :class:`Problem` and call its six evaluation
methods on every iterate. Concrete problems bind the numeric type and the
primal and dual dimensions at class level, either with class attributes::

    class Rosenbrock(Problem):
        real_type = np.float64
        n = 2
        m = 1
        ...

or by specialization, ``FunctionProblem[np.float64, 2, 1]``. Invalid parameters
fail while the class is being defined, so an ill-formed problem type never
exists.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from .core import Array, RealType, resolve_real_type, validate_dimension

_PARAMETERS = ("real_type", "n", "m")
_specializations: Dict[Tuple[Any, ...], type] = {}


def _type_name(real_type: RealType) -> str:
    name = getattr(real_type, "name", None)
    return name if isinstance(name, str) else str(real_type)


class Problem(ABC):
    """
    Base class for optimization problems.

    Attributes:
        real_type: Floating-point type of every vector and matrix.
        n: Size of the primal variable vector.
        m: Size of the dual variable vector (number of constraints).
    """

    real_type: Optional[RealType] = None
    n: Optional[int] = None
    m: Optional[int] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("real_type") is not None:
            cls.real_type = resolve_real_type(cls.__dict__["real_type"])
        for name in ("n", "m"):
            if cls.__dict__.get(name) is not None:
                setattr(cls, name, validate_dimension(cls.__dict__[name], name))

    def __new__(cls, *args: Any, **kwargs: Any) -> "Problem":
        missing = [name for name in _PARAMETERS if getattr(cls, name) is None]
        if missing:
            raise TypeError(
                f"{cls.__qualname__} cannot be instantiated before "
                f"{', '.join(missing)} {'is' if len(missing) == 1 else 'are'} bound; "
                f"use {cls.__qualname__}[real_type, n, m]"
            )
        return super().__new__(cls)

    def __class_getitem__(cls, params: Any) -> type:
        if not isinstance(params, tuple) or len(params) != 3:
            raise TypeError(
                f"{cls.__qualname__}[...] expects exactly three parameters: "
                "real_type, n, m"
            )
        return cls.specialize(*params)

    @classmethod
    def specialize(cls, real_type: Any, n: Any, m: Any) -> type:
        """
        Return the subclass of ``cls`` with ``real_type``, ``n`` and ``m`` bound.

        Specializations are cached, so equal parameters yield the same class.

        Raises:
            TypeError: If ``cls`` is already specialized, ``real_type`` is not
                a floating-point type or a dimension is not an integer.
            ValueError: If a dimension is not positive.
        """
        bound = [name for name in _PARAMETERS if getattr(cls, name) is not None]
        if bound:
            raise TypeError(
                f"{cls.__qualname__} already binds {', '.join(bound)}"
            )
        real_type = resolve_real_type(real_type)
        n = validate_dimension(n, "n")
        m = validate_dimension(m, "m")

        key = (cls, real_type, n, m)
        special = _specializations.get(key)
        if special is None:
            name = f"{cls.__name__}[{_type_name(real_type)}, {n}, {m}]"
            special = type(cls)(
                name,
                (cls,),
                {
                    "__module__": cls.__module__,
                    "__qualname__": name,
                    "real_type": real_type,
                    "n": n,
                    "m": m,
                },
            )
            _specializations[key] = special
        return special

    @property
    def dtype(self) -> RealType:
        """Floating-point type of the problem."""
        return self.real_type

    @property
    def primal_shape(self) -> Tuple[int]:
        return (self.n,)

    @property
    def dual_shape(self) -> Tuple[int]:
        return (self.m,)

    @property
    def hessian_shape(self) -> Tuple[int, int]:
        return (self.n, self.n)

    @property
    def jacobian_shape(self) -> Tuple[int, int]:
        return (self.m, self.n)

    @abstractmethod
    def objective(self, x: Array) -> float:
        """
        Evaluate the objective function.

        Args:
            x: Primal variable vector.

        Returns:
            The objective function value.
        """

    @abstractmethod
    def objective_gradient(self, x: Array) -> Array:
        """
        Evaluate the gradient of the objective function.

        Args:
            x: Primal variable vector.

        Returns:
            Gradient vector of length ``n``.
        """

    @abstractmethod
    def objective_hessian(self, x: Array) -> Array:
        """
        Evaluate the Hessian of the objective function.

        Args:
            x: Primal variable vector.

        Returns:
            Hessian matrix of shape ``(n, n)``.
        """

    @abstractmethod
    def constraints(self, x: Array) -> Array:
        """
        Evaluate the constraints function.

        Args:
            x: Primal variable vector.

        Returns:
            Constraint values, length ``m``.
        """

    @abstractmethod
    def constraints_jacobian(self, x: Array, z: Array) -> Array:
        """
        Evaluate the Jacobian of the constraints with respect to ``x``.

        Args:
            x: Primal variable vector.
            z: Dual variable vector. Implementations may ignore it.

        Returns:
            Jacobian matrix of shape ``(m, n)``.
        """

    @abstractmethod
    def lagrangian_hessian(self, x: Array, z: Array) -> Array:
        """
        Evaluate the Hessian of the Lagrangian with respect to ``x``.

        Args:
            x: Primal variable vector.
            z: Dual variable vector.

        Returns:
            Hessian matrix of shape ``(n, n)``.
        """


__all__ = ["Problem"]
