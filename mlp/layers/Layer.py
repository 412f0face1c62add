class Layer:
    # Subclasses override as needed
    def forward_pass(self, inputs):
        # Cache activations for one sample and return them
        raise NotImplementedError

    def backward_pass(self, target, right_layer=None):
        # Cache this layer's error delta
        raise NotImplementedError

    def update_weights(self, learning_rate, left_activations):
        raise NotImplementedError
