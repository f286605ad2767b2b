from __future__ import annotations

from gatenet.activation import Activation
from gatenet.connection import Connection


class Neuron:
    """
    A single unit of the network.

    A neuron sums the weighted values pushed into it by incoming connections,
    adds its bias and passes the result through its activation function. It
    owns its outgoing connections and, during training, remembers the error
    signal (delta) computed for the current example so that the weights of
    the connections feeding it can be adjusted.
    """

    def __init__(
        self,
        activation: Activation,
        bias: float = 0.0,
        label: str = "",
    ) -> None:
        """
        Initialize a Neuron.

        Args:
            activation: Activation strategy. Shared, not owned.
            bias: Initial bias added to the weighted input.
            label: Human-readable label for logging and graph rendering.
        """
        self.activation = activation
        self.bias = bias
        self.label = label
        self.connections: list[Connection] = []
        self.weighted_input = 0.0
        self.delta = 0.0

    def __repr__(self) -> str:
        """
        String representation of the neuron.

        Returns:
            A string showing the label, activation, bias and weighted input.
        """
        return (
            f"Neuron(label={self.label!r}, activation={self.activation.name}, "
            f"bias={self.bias}, weighted_input={self.weighted_input})"
        )

    def connect(self, other: Neuron, weight: float) -> Connection:
        """
        Create an outgoing connection from this neuron to `other`.

        Args:
            other: Destination neuron.
            weight: Initial weight of the connection.

        Returns:
            The new connection, also appended to `self.connections`.
        """
        connection = Connection(self, other, weight)
        self.connections.append(connection)
        return connection

    def reset(self) -> None:
        """Clear the accumulated weighted input. Bias and delta are untouched."""
        self.weighted_input = 0.0

    def load(self, value: float) -> None:
        """Overwrite the weighted input with `value`; used to drive input neurons."""
        self.weighted_input = value

    def accumulate(self, value: float) -> None:
        """Add one incoming contribution to the weighted input."""
        self.weighted_input += value

    def net_input(self) -> float:
        """
        Weighted input plus bias, the value the activation is applied to.

        Returns:
            weighted_input + bias.
        """
        return self.weighted_input + self.bias

    def output(self) -> float:
        """
        Activated value of this neuron for the current pass.

        Pure read: may be called any number of times without side effect.

        Returns:
            activate(weighted_input + bias).
        """
        return self.activation.activate(self.net_input())

    def fire(self) -> None:
        """Push this neuron's output through every outgoing connection."""
        for connection in self.connections:
            connection.propagate()

    def compute_delta(self, target: float) -> float:
        """
        Compute the error signal for this neuron against `target`.

        delta = f'(net input) * (target - output). Must be called after the
        forward pass for the current example and before any update that
        depends on it.

        Returns:
            The new delta, also stored on `self.delta`.
        """
        self.delta = self.activation.derivative(self.net_input()) * (
            target - self.output()
        )
        return self.delta

    def adjust_bias(self, delta: float) -> None:
        """
        Move the bias by `delta`.

        Args:
            delta: Amount added to the bias (delta * learning rate in training).
        """
        self.bias += delta
