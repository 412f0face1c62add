"""
mlp
~~~

Fully-connected feedforward network trained by per-sample gradient descent
with backpropagation, on a swappable NumPy/CuPy matrix backend.
"""

from .Network import Network
from .layers import Layer, DenseLayer
from .activations import Activation, Sigmoid, Identity
from .helpers import Backend, ShapeMismatchError, RunLogger, kaiming_initialization

__version__ = "1.0.0"

__all__ = [
    "Network",
    "Layer",
    "DenseLayer",
    "Activation",
    "Sigmoid",
    "Identity",
    "Backend",
    "ShapeMismatchError",
    "RunLogger",
    "kaiming_initialization",
]
