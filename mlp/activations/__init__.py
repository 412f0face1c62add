from .Activation import Activation
from .Sigmoid import Sigmoid
from .Identity import Identity

__all__ = [
    "Activation",
    "Sigmoid",
    "Identity",
]
