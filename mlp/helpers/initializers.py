import numpy as np
from .Backend import backend as default_backend


def kaiming_initialization(fan_in, fan_out, backend=None):
    """
    He (Kaiming) initialization for a fan_in x fan_out weight matrix.

    Samples N(0, 1) and scales by sqrt(2 / fan_in) so the activation variance
    is preserved from layer to layer. Drawn on CPU with NumPy's global RNG,
    then moved to the backend.
    """
    backend = backend or default_backend
    if fan_in < 1 or fan_out < 1:
        raise ValueError(f"fan_in and fan_out must be positive, got ({fan_in}, {fan_out})")

    weights_cpu = np.random.randn(fan_in, fan_out) * np.sqrt(2.0 / fan_in)
    return backend.ensure_array(weights_cpu)


def zeros(rows, cols, backend=None):
    """Zero matrix for biases and not-yet-computed layer caches."""
    backend = backend or default_backend
    if rows < 1 or cols < 1:
        raise ValueError(f"rows and cols must be positive, got ({rows}, {cols})")
    return backend.matrix(rows, cols)
