import numpy as np
from .Activation import Activation


class Sigmoid(Activation):
    def function(self, z):
        return 1 / (1 + np.exp(-z))

    def derivative(self, z):
        sig = self.function(z)
        return sig * (1 - sig)
