class Activation:
    # Subclasses provide a vectorised function and its derivative,
    # both evaluated on the pre-activation z = x . W + b
    def function(self, z):
        raise NotImplementedError

    def derivative(self, z):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"
