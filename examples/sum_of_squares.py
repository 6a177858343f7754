"""
Example: Defining a constrained problem from plain functions

Builds the two-variable problem

    minimize    x1^2 + x2^2
    subject to  x1 - 1 = 0,  x2 - 1 = 0

with FunctionProblem, evaluates every quantity a solver would request at
x = (1, 1), and shows the error raised for the omitted objective Hessian.
"""

import numpy as np

from pipal import FunctionProblem, UnsetOperationError, check_problem

SumOfSquares = FunctionProblem[np.float64, 2, 2]


def build_problem():
    """Five-handle form: the objective Hessian is left unset."""
    return SumOfSquares(
        objective=lambda x: float(x[0] ** 2 + x[1] ** 2),
        objective_gradient=lambda x: np.array([2.0 * x[0], 2.0 * x[1]]),
        constraints=lambda x: np.array([x[0] - 1.0, x[1] - 1.0]),
        constraints_jacobian=lambda x, z: np.eye(2),
        lagrangian_hessian=lambda x, z: 2.0 * np.eye(2),
    )


def main():
    problem = build_problem()
    x = np.array([1.0, 1.0])
    z = np.zeros(2)

    print(f"Problem: {problem!r}")
    print(f"objective            = {problem.objective(x)}")
    print(f"objective_gradient   = {problem.objective_gradient(x)}")
    print(f"constraints          = {problem.constraints(x)}")
    print(f"constraints_jacobian =\n{problem.constraints_jacobian(x, z)}")
    print(f"lagrangian_hessian   =\n{problem.lagrangian_hessian(x, z)}")

    try:
        problem.objective_hessian(x)
    except UnsetOperationError as exc:
        print(f"objective_hessian    -> {exc}")

    problem.set_objective_hessian(lambda x: 2.0 * np.eye(2))
    results = check_problem(problem, x, z)
    print(f"All {len(results)} operations passed the shape checks.")


if __name__ == "__main__":
    main()
