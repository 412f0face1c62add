from .Backend import Backend, ShapeMismatchError, backend
from .initializers import kaiming_initialization, zeros
from .logger import RunLogger

__all__ = [
    "Backend",
    "ShapeMismatchError",
    "backend",
    "kaiming_initialization",
    "zeros",
    "RunLogger",
]
