from math import exp


class Activation:
    """
    Strategy for transforming a neuron's net input into its output.

    Implementations are stateless: both methods are pure functions of `x`,
    so a single instance can be shared by any number of neurons.
    """

    name = "activation"

    def activate(self, x: float) -> float:
        raise NotImplementedError

    def derivative(self, x: float) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Linear(Activation):
    """Identity activation used by input neurons."""

    name = "linear"

    def activate(self, x: float) -> float:
        return x

    def derivative(self, x: float) -> float:
        return 1.0


class Sigmoid(Activation):
    """Logistic activation used by the output neuron."""

    name = "sigmoid"

    def activate(self, x: float) -> float:
        """
        Compute 1 / (1 + e^-x).

        The two branches are the same function written so that `exp` only
        ever sees a non-positive argument and cannot overflow.
        """
        if x >= 0:
            return 1.0 / (1.0 + exp(-x))
        z = exp(x)
        return z / (1.0 + z)

    def derivative(self, x: float) -> float:
        """
        Derivative of the sigmoid: s(x) * (1 - s(x)).

        Recomputed from `x` on every call, never from a cached output.
        """
        s = self.activate(x)
        return s * (1.0 - s)


LINEAR = Linear()
SIGMOID = Sigmoid()
