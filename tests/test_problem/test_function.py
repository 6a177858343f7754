"""Tests for the function-handle problem adapter."""

import copy

import numpy as np
import pytest

from pipal.problem import OPERATIONS, FunctionProblem, Problem, UnsetOperationError

X = np.array([1.0, 1.0])
Z = np.array([0.3, -0.7])


def _evaluate(problem, operation, x=X, z=Z):
    method = getattr(problem, operation)
    if operation in ("constraints_jacobian", "lagrangian_hessian"):
        return method(x, z)
    return method(x)


class TestScenario:
    """x = (1, 1) for min x1^2 + x2^2 s.t. x - 1 = 0."""

    def test_values(self, five_handle_problem):
        problem = five_handle_problem
        assert isinstance(problem, Problem)
        assert problem.objective(X) == 2.0
        assert np.array_equal(problem.objective_gradient(X), [2.0, 2.0])
        assert np.array_equal(problem.constraints(X), [0.0, 0.0])
        assert np.array_equal(problem.constraints_jacobian(X, Z), np.eye(2))
        assert np.array_equal(problem.constraints_jacobian(X, np.zeros(2)), np.eye(2))
        assert np.array_equal(problem.lagrangian_hessian(X, Z), 2.0 * np.eye(2))

    def test_dimensions(self, five_handle_problem):
        assert np.ndim(five_handle_problem.objective(X)) == 0
        assert five_handle_problem.constraints_jacobian(X, Z).shape == (2, 2)

    def test_five_handle_form_leaves_objective_hessian_unset(self, five_handle_problem):
        with pytest.raises(UnsetOperationError, match="objective_hessian"):
            five_handle_problem.objective_hessian(X)
        for operation in OPERATIONS:
            if operation != "objective_hessian":
                _evaluate(five_handle_problem, operation)

    def test_six_handle_form(self, six_handle_problem):
        assert np.array_equal(six_handle_problem.objective_hessian(X), 2.0 * np.eye(2))
        assert six_handle_problem.unset_operations() == ()


class TestDelegation:
    def test_results_are_returned_unchanged(self, problem_type, rng):
        sentinels = {op: object() for op in OPERATIONS}
        calls = []

        def make(operation):
            def handle(*args):
                calls.append((operation, args))
                return sentinels[operation]

            return handle

        problem = problem_type(**{op: make(op) for op in OPERATIONS})
        x = rng.normal(size=2)
        z = rng.normal(size=2)
        for operation in OPERATIONS:
            assert _evaluate(problem, operation, x, z) is sentinels[operation]

        for operation, args in calls:
            assert args[0] is x
            if operation in ("constraints_jacobian", "lagrangian_hessian"):
                assert len(args) == 2 and args[1] is z
            else:
                assert len(args) == 1

    def test_handle_exceptions_propagate(self, six_handle_problem):
        def failing(x):
            raise FloatingPointError("domain error")

        six_handle_problem.set_objective(failing)
        with pytest.raises(FloatingPointError, match="domain error"):
            six_handle_problem.objective(X)

    def test_nan_passes_through(self, six_handle_problem):
        value = six_handle_problem.objective(np.array([np.nan, 1.0]))
        assert np.isnan(value)


class TestAccessors:
    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_round_trip(self, six_handle_problem, operation):
        def handle(*args):
            return None

        getattr(six_handle_problem, f"set_{operation}")(handle)
        assert getattr(six_handle_problem, f"get_{operation}")() is handle

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_getter_returns_constructor_handle(self, problem_type, handles, operation):
        problem = problem_type(**handles)
        assert getattr(problem, f"get_{operation}")() is handles[operation]

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_replacing_one_handle_leaves_others(self, six_handle_problem, operation):
        before = {op: _evaluate(six_handle_problem, op) for op in OPERATIONS}
        marker = object()
        getattr(six_handle_problem, f"set_{operation}")(lambda *args: marker)

        assert _evaluate(six_handle_problem, operation) is marker
        for other in OPERATIONS:
            if other != operation:
                assert np.array_equal(_evaluate(six_handle_problem, other), before[other])

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_clearing_a_handle(self, six_handle_problem, operation):
        getattr(six_handle_problem, f"set_{operation}")(None)
        assert getattr(six_handle_problem, f"get_{operation}")() is None
        assert not six_handle_problem.is_set(operation)
        with pytest.raises(UnsetOperationError) as excinfo:
            _evaluate(six_handle_problem, operation)
        assert excinfo.value.operation == operation

    def test_setting_after_construction(self, five_handle_problem):
        assert not five_handle_problem.is_set("objective_hessian")
        five_handle_problem.set_objective_hessian(lambda x: 2.0 * np.eye(2))
        assert five_handle_problem.is_set("objective_hessian")
        assert np.array_equal(five_handle_problem.objective_hessian(X), 2.0 * np.eye(2))

    def test_non_callable_handle_rejected(self, problem_type, six_handle_problem):
        with pytest.raises(TypeError, match="objective handle must be callable"):
            problem_type(objective=2.0)
        with pytest.raises(TypeError, match="constraints handle must be callable"):
            six_handle_problem.set_constraints(np.zeros(2))

    def test_handles_are_per_instance(self, problem_type, handles):
        first = problem_type(**handles)
        second = problem_type(**handles)
        first.set_objective(lambda x: -1.0)
        assert second.objective(X) == 2.0


class TestCopy:
    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_has_independent_handles(self, six_handle_problem, copier):
        clone = copier(six_handle_problem)
        assert type(clone) is type(six_handle_problem)
        assert clone.objective(X) == 2.0

        clone.set_objective(lambda x: -1.0)
        clone.set_objective_hessian(None)
        assert clone.objective(X) == -1.0
        assert six_handle_problem.objective(X) == 2.0
        assert six_handle_problem.is_set("objective_hessian")

        six_handle_problem.set_constraints(None)
        assert clone.is_set("constraints")
        assert np.array_equal(clone.constraints(X), [0.0, 0.0])

    def test_shallow_copy_shares_handle_objects(self, six_handle_problem, handles):
        clone = copy.copy(six_handle_problem)
        for operation in OPERATIONS:
            assert getattr(clone, f"get_{operation}")() is handles[operation]

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_keeps_unset_state(self, five_handle_problem, copier):
        clone = copier(five_handle_problem)
        assert clone.unset_operations() == ("objective_hessian",)
        with pytest.raises(UnsetOperationError):
            clone.objective_hessian(X)


class TestHandleState:
    def test_default_construction_has_nothing_set(self, problem_type):
        problem = problem_type()
        assert problem.unset_operations() == OPERATIONS
        for operation in OPERATIONS:
            with pytest.raises(UnsetOperationError):
                _evaluate(problem, operation)

    def test_unset_operations_order(self, problem_type, handles):
        problem = problem_type(objective=handles["objective"])
        assert problem.unset_operations() == OPERATIONS[1:]

    def test_is_set_unknown_operation(self, six_handle_problem):
        with pytest.raises(ValueError, match="unknown operation"):
            six_handle_problem.is_set("gradient")

    def test_repr(self, five_handle_problem):
        text = repr(five_handle_problem)
        assert "FunctionProblem[float64, 2, 2]" in text
        assert "unset=['objective_hessian']" in text

    def test_repr_of_unnamed_argument_form(self, problem_type, handles):
        problem = problem_type(
            handles["objective"],
            handles["objective_gradient"],
            handles["constraints"],
            handles["constraints_jacobian"],
            handles["lagrangian_hessian"],
            handles["objective_hessian"],
        )
        assert "unset=[]" in repr(problem)
