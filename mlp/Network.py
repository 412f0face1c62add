import numbers

from .layers import DenseLayer
from .activations import Sigmoid
from .helpers.Backend import backend as default_backend
from .helpers.initializers import kaiming_initialization


class Network:
    """
    Fully-connected feedforward network with a single output neuron.

    Layout for Network(neurons_per_layer, number_of_hidden_layers, number_of_inputs):
        number_of_inputs  -> neurons_per_layer   (input-facing layer)
        neurons_per_layer -> neurons_per_layer   (x number_of_hidden_layers)
        neurons_per_layer -> 1                   (output layer)

    Training is per-sample gradient descent: for every row, a forward pass,
    a complete backward pass from the output layer inward, then the weight
    update from the input layer outward.
    """
    def __init__(
        self,
        neurons_per_layer,
        number_of_hidden_layers,
        number_of_inputs,
        activation=None,
        backend=None,
        seed=None,
    ):
        self._check_architecture(neurons_per_layer, number_of_hidden_layers, number_of_inputs)

        self.backend = backend or default_backend
        self.activation = activation or Sigmoid()
        self.seed = seed
        if seed is not None:
            self.backend.seed(seed)

        self.layers = [self._build_layer(number_of_inputs, neurons_per_layer)]
        for _ in range(number_of_hidden_layers):
            self.layers.append(self._build_layer(neurons_per_layer, neurons_per_layer))
        self.layers.append(self._build_layer(neurons_per_layer, 1, is_output_layer=True))

        self.neurons_per_layer = neurons_per_layer
        self.number_of_inputs = number_of_inputs
        self.number_of_layers = number_of_hidden_layers + 2

    def _build_layer(self, fan_in, fan_out, is_output_layer=False):
        weights = kaiming_initialization(fan_in, fan_out, backend=self.backend)
        return DenseLayer(
            weights,
            is_output_layer=is_output_layer,
            activation=self.activation,
            backend=self.backend,
        )

    @staticmethod
    def _check_architecture(neurons_per_layer, number_of_hidden_layers, number_of_inputs):
        for name, value, minimum in (
            ("neurons_per_layer", neurons_per_layer, 1),
            ("number_of_hidden_layers", number_of_hidden_layers, 0),
            ("number_of_inputs", number_of_inputs, 1),
        ):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < minimum:
                raise ValueError(f"{name} must be >= {minimum}, got {value}")

    @property
    def output_layer(self):
        return self.layers[-1]

    def __len__(self):
        return len(self.layers)

    def predict(self, inputs):
        """
        Run a (1, number_of_inputs) row through every layer.
        Only the layer caches change; weights are left untouched.
        """
        current = self.backend.ensure_array(inputs)
        for layer in self.layers:
            current = layer.forward_pass(current)
        return current

    def train(self, batch_input, batch_target, learning_rate, epochs, verbose=0, logger=None):
        """
        batch_input: (N, number_of_inputs), batch_target: (N, 1), row-aligned.
        Rows are visited in order every epoch. Returns {'loss': [...]} with the
        mean squared error of each epoch's forward passes.
        """
        batch_input = self.backend.ensure_array(batch_input)
        batch_target = self.backend.ensure_array(batch_target)
        n_rows, _ = self.backend.dims(batch_input)
        target_rows, _ = self.backend.dims(batch_target)
        if n_rows != target_rows:
            raise ValueError(
                f"batch_input has {n_rows} rows but batch_target has {target_rows}"
            )
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {learning_rate}")
        if isinstance(epochs, bool) or not isinstance(epochs, numbers.Integral):
            raise ValueError(f"epochs must be an integer, got {epochs!r}")
        if epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {epochs}")

        if logger is not None:
            logger.log_config(
                neurons_per_layer=self.neurons_per_layer,
                number_of_hidden_layers=self.number_of_layers - 2,
                number_of_inputs=self.number_of_inputs,
                learning_rate=float(learning_rate),
                epochs=int(epochs),
                samples=n_rows,
            )

        history = {"loss": []}
        log_interval = max(1, epochs // 10)
        if verbose > 0:
            print(f"Starting training for {epochs} epochs...")

        for ep in range(1, epochs + 1):
            squared_error = 0.0
            for i in range(n_rows):
                sample = self.backend.row(batch_input, i)
                target = self.backend.row(batch_target, i)

                output = self.predict(sample)
                squared_error += float(self.backend.sum((output - target) ** 2))

                # backward pass runs to completion before any weights move
                right_layer = None
                for layer in reversed(self.layers):
                    layer.backward_pass(target, right_layer)
                    right_layer = layer

                left_activations = sample
                for layer in self.layers:
                    layer.update_weights(learning_rate, left_activations)
                    left_activations = layer.activations

            loss = squared_error / n_rows if n_rows else 0.0
            history["loss"].append(loss)

            if logger is not None:
                logger.log_epoch(ep, loss)
            if verbose > 0 and (ep % log_interval == 0 or ep == 1 or ep == epochs):
                print(f"Epoch {ep}/{epochs} - loss: {loss:.6f}")

        if logger is not None:
            logger.save_json()
        return history

    def __str__(self):
        matrix = None
        for layer in self.layers:
            matrix = self.backend.concat(matrix, layer.weights)
        return self.backend.format(matrix)

    def print_weights(self):
        print(str(self))

    def __repr__(self):
        return (
            f"Network(neurons_per_layer={self.neurons_per_layer}, "
            f"number_of_hidden_layers={self.number_of_layers - 2}, "
            f"number_of_inputs={self.number_of_inputs})"
        )

