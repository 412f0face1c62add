from .Layer import Layer
from ..activations import Sigmoid
from ..helpers.Backend import backend as default_backend
from ..helpers.initializers import zeros


class DenseLayer(Layer):
    """
    Fully-connected layer holding its own per-sample state.

    weights: (inputs, outputs)
    bias, activations, gradient, delta: (1, outputs)

    The caches are only meaningful for the sample most recently passed
    through forward_pass / backward_pass. Each pass rebinds them to fresh
    arrays; nothing outside the layer holds on to them.
    """
    def __init__(self, weights, is_output_layer=False, activation=None, backend=None):
        self.backend = backend or default_backend
        self.weights = self.backend.ensure_array(weights)
        self.is_output_layer = bool(is_output_layer)
        self.activation = activation or Sigmoid()

        _, cols = self.backend.dims(self.weights)
        self.bias = zeros(1, cols, backend=self.backend)

        # zero rows of the layer width until the first pass
        self.activations = zeros(1, cols, backend=self.backend)
        self.gradient = zeros(1, cols, backend=self.backend)
        self.delta = zeros(1, cols, backend=self.backend)

    @property
    def shape(self):
        return self.backend.dims(self.weights)

    def forward_pass(self, inputs):
        """Set activations and gradient for one (1, inputs) row; returns activations."""
        z = self.backend.multiply(inputs, self.weights)  # Z = input . W
        z_b = self.backend.add(z, self.bias)

        self.activations = self.backend.map(self.activation.function, z_b)
        self.gradient = self.backend.map(self.activation.derivative, z_b)  # dZ
        return self.activations

    def backward_pass(self, target, right_layer=None):
        """
        Set delta. The output layer compares its activations with target;
        any other layer pulls the error back through right_layer, which must
        already hold its delta for the current sample.
        """
        if self.is_output_layer:
            err = self.backend.subtract(self.activations, target)
            self.delta = self.backend.multiply_elems(err, self.gradient)
            return self.delta

        if right_layer is None:
            raise ValueError("hidden layer backward pass needs the layer to its right")
        back = self.backend.multiply(right_layer.delta, self.backend.transpose(right_layer.weights))
        self.delta = self.backend.multiply_elems(back, self.gradient)
        return self.delta

    def update_weights(self, learning_rate, left_activations):
        """One gradient descent step using the delta from the last backward pass."""
        dW = self.backend.multiply(self.backend.transpose(left_activations), self.delta)
        self.weights = self.backend.subtract(self.weights, self.backend.scale(learning_rate, dW))

        db = self.backend.scale(learning_rate, self.delta)
        self.bias = self.backend.subtract(self.bias, db)

    def __repr__(self):
        rows, cols = self.shape
        kind = "output" if self.is_output_layer else "hidden"
        return f"DenseLayer({rows} -> {cols}, {kind}, {self.activation!r})"
