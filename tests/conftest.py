"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the network tests.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from mlp import Backend, Network


@pytest.fixture
def np_backend():
    """A fresh CPU backend, independent of the module-level default."""
    return Backend(use_gpu=False)


@pytest.fixture
def xor_data():
    """The four-row XOR truth table as (inputs, targets)."""
    X = np.array([[0, 0], [1, 1], [1, 0], [0, 1]], dtype=np.float64)
    Y = np.array([[0], [0], [1], [1]], dtype=np.float64)
    return X, Y


@pytest.fixture
def xor_network(np_backend):
    """2 inputs, one hidden layer, 2 neurons per layer, seeded."""
    return Network(2, 1, 2, backend=np_backend, seed=0)
