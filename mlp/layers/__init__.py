from .Layer import Layer
from .DenseLayer import DenseLayer

__all__ = [
    "Layer",
    "DenseLayer",
]
