"""Pytest configuration and shared fixtures for Pipal tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- The two-variable sum-of-squares problem used across the suite
- Debug-mode isolation between tests
"""

import os

import numpy as np
import pytest
import torch

from pipal import FunctionProblem
from pipal.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Leave the global debug flag as each test found it."""
    original = is_debug_enabled()
    set_debug_enabled(False)
    yield
    set_debug_enabled(original)


@pytest.fixture
def handles():
    """Handles for min x1^2 + x2^2 s.t. x1 - 1 = 0, x2 - 1 = 0."""
    return {
        "objective": lambda x: float(x[0] ** 2 + x[1] ** 2),
        "objective_gradient": lambda x: np.array([2.0 * x[0], 2.0 * x[1]]),
        "objective_hessian": lambda x: 2.0 * np.eye(2),
        "constraints": lambda x: np.array([x[0] - 1.0, x[1] - 1.0]),
        "constraints_jacobian": lambda x, z: np.eye(2),
        "lagrangian_hessian": lambda x, z: 2.0 * np.eye(2),
    }


@pytest.fixture
def problem_type():
    return FunctionProblem[np.float64, 2, 2]


@pytest.fixture
def five_handle_problem(problem_type, handles):
    return problem_type(
        handles["objective"],
        handles["objective_gradient"],
        handles["constraints"],
        handles["constraints_jacobian"],
        handles["lagrangian_hessian"],
    )


@pytest.fixture
def six_handle_problem(problem_type, handles):
    return problem_type(**handles)
