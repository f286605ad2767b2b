from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from math import isfinite

import torch

from gatenet.activation import LINEAR, SIGMOID
from gatenet.connection import Connection
from gatenet.constants import (
    BIAS_RANGE,
    DEFAULT_CUTOFF,
    DEFAULT_MAX_EPOCHS,
    MOMENTUM,
    NUM_INPUTS,
    SAMPLE_SEED,
    WEIGHT_RANGE,
)
from gatenet.errors import (
    EmptyTrainingSetError,
    InvalidTopologyError,
    NonFiniteResultError,
)
from gatenet.neuron import Neuron

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, float], None]


def threshold(value: float, cutoff: float = DEFAULT_CUTOFF) -> int:
    """Binarize a network output: 1 if `value` > `cutoff`, else 0."""
    return 1 if value > cutoff else 0


@dataclass
class TrainingResult:
    """
    Outcome of Network.train().

    Attributes:
        converged: True if the running accuracy reached the target.
        epochs: Number of epochs started.
        accuracy: Last running accuracy reported.
        history: Every running accuracy reported, one per example processed.
                 Empty when training ran with record_history=False.
    """

    converged: bool
    epochs: int
    accuracy: float
    history: list[float] = field(default_factory=list)


def _uniform(generator: torch.Generator, bounds: tuple[float, float]) -> float:
    """
    Draw one value uniformly from [low, high).

    Args:
        generator: Seeded generator the draw advances.
        bounds: (low, high) range.

    Returns:
        The drawn value as a Python float.
    """
    low, high = bounds
    return low + (high - low) * torch.rand(1, generator=generator).item()


class Network:
    """
    Fixed-topology network: N linear input neurons fully connected to one
    sigmoid output neuron.

    The network owns its neurons, their connections and the training set.
    Training mutates weights and the output bias in place; it is not
    re-entrant and must not be called concurrently on the same instance.
    """

    def __init__(
        self,
        num_inputs: int = NUM_INPUTS,
        generator: torch.Generator | None = None,
        weight_range: tuple[float, float] = WEIGHT_RANGE,
        bias_range: tuple[float, float] = BIAS_RANGE,
        weights: Sequence[float] | None = None,
        bias: float | None = None,
    ) -> None:
        """
        Build the network with random (or explicitly given) initial values.

        Args:
            num_inputs: Number of input neurons.
            generator: Seeded random number generator for initialization.
                       Defaults to a new generator seeded with SAMPLE_SEED.
            weight_range: Uniform [low, high) range for initial weights.
            bias_range: Uniform [low, high) range for the initial output bias.
            weights: Explicit initial weights, one per input neuron.
            bias: Explicit initial output bias.

        Raises:
            InvalidTopologyError: If num_inputs < 1 or `weights` has the
                wrong length.
        """
        if num_inputs < 1:
            raise InvalidTopologyError(
                f"Network needs at least one input neuron, got {num_inputs}"
            )
        if weights is not None and len(weights) != num_inputs:
            raise InvalidTopologyError(
                f"Expected {num_inputs} initial weights, got {len(weights)}"
            )

        if generator is None:
            generator = torch.Generator().manual_seed(SAMPLE_SEED)

        self.inputs = [Neuron(LINEAR, label=f"x{i + 1}") for i in range(num_inputs)]

        # Draw the bias before the weights so a given seed always yields the
        # same network.
        if bias is None:
            bias = _uniform(generator, bias_range)
        self.output = Neuron(SIGMOID, bias=bias, label="out")

        for i, neuron in enumerate(self.inputs):
            weight = _uniform(generator, weight_range) if weights is None else weights[i]
            neuron.connect(self.output, weight)

        self.training_set: dict[tuple[float, ...], float] = {}

    def __repr__(self) -> str:
        """
        String representation of the network.

        Returns:
            A string showing the input count, weights and output bias.
        """
        return (
            f"Network(num_inputs={self.num_inputs}, "
            f"weights={[c.weight for c in self.connections]}, bias={self.output.bias})"
        )

    @property
    def num_inputs(self) -> int:
        """Number of input neurons; every forward input must have this length."""
        return len(self.inputs)

    @property
    def connections(self) -> list[Connection]:
        """Input-to-output connections, in input neuron order."""
        return [neuron.connections[0] for neuron in self.inputs]

    def _check_inputs(self, inputs: Sequence[float]) -> None:
        """Raise InvalidTopologyError unless there is one value per input neuron."""
        if len(inputs) != self.num_inputs:
            raise InvalidTopologyError(
                f"Expected {self.num_inputs} input values, got {len(inputs)}"
            )

    def add_example(self, inputs: Sequence[float], target: float) -> None:
        """
        Add one training example (or replace the target of an existing one).

        Raises:
            InvalidTopologyError: If `inputs` has the wrong length.
        """
        self._check_inputs(inputs)
        self.training_set[tuple(float(x) for x in inputs)] = float(target)

    def forward(self, inputs: Sequence[float]) -> float:
        """
        Run one forward pass and return the output neuron's activation.

        Input neurons are loaded with the input values (overwriting whatever
        they held) and the output neuron's accumulator is reset before the
        input neurons fire, so no residual sum from an earlier pass can leak
        into this one.

        Args:
            inputs: One value per input neuron.

        Returns:
            The output neuron's activated value.

        Raises:
            InvalidTopologyError: If `inputs` has the wrong length.
            NonFiniteResultError: If the output's net input is not finite.
        """
        self._check_inputs(inputs)

        self.output.reset()
        for neuron, value in zip(self.inputs, inputs):
            neuron.load(value)

        for neuron in self.inputs:
            neuron.fire()

        net = self.output.net_input()
        if not isfinite(net):
            raise NonFiniteResultError(
                f"Output net input is {net} for inputs {tuple(inputs)}"
            )

        return self.output.output()

    def clear(self) -> None:
        """Reset the accumulated input of the output and every input neuron."""
        self.output.reset()
        for neuron in self.inputs:
            neuron.reset()

    def predict(self, inputs: Sequence[float], cutoff: float = DEFAULT_CUTOFF) -> int:
        """Forward `inputs`, binarize the result and clear the accumulators."""
        value = self.forward(inputs)
        self.clear()
        return threshold(value, cutoff)

    threshold = staticmethod(threshold)

    def _check_parameters(self) -> None:
        """Raise NonFiniteResultError if any weight or the output bias is not finite."""
        for connection in self.connections:
            if not isfinite(connection.weight):
                raise NonFiniteResultError(
                    f"Weight of {connection!r} diverged to {connection.weight}"
                )
        if not isfinite(self.output.bias):
            raise NonFiniteResultError(
                f"Output bias diverged to {self.output.bias}"
            )

    def train(
        self,
        learning_rate: float,
        target_accuracy: float,
        max_epochs: int | None = DEFAULT_MAX_EPOCHS,
        momentum: float = MOMENTUM,
        on_progress: ProgressCallback | None = None,
        record_history: bool = True,
    ) -> TrainingResult:
        """
        Train the network on its training set with per-example updates.

        For each example the output delta is computed, every input-to-output
        weight moves by delta * learning_rate * input output (plus momentum)
        and the output bias moves by delta * learning_rate. The squared error
        accumulates over the epoch; after every example the running accuracy
        1 - 0.5 * squared_error is reported, and training stops as soon as it
        reaches `target_accuracy`.

        Args:
            learning_rate: Step size for weight and bias updates.
            target_accuracy: Running accuracy at which training stops.
            max_epochs: Upper bound on epochs. None trains until the target
                        is reached, which never returns if it is unreachable.
            momentum: Fraction of a connection's previous step re-applied.
            on_progress: Called as on_progress(epoch, example_index, accuracy)
                         after every example.
            record_history: Keep every reported accuracy in the result.
                            The history grows by one float per example, so
                            an unbounded run (max_epochs=None) that never
                            converges also grows memory without limit; pass
                            False to keep only the last accuracy.

        Returns:
            A TrainingResult; `converged` is False if the epoch cap was hit.

        Raises:
            EmptyTrainingSetError: If there are no training examples.
            InvalidTopologyError: If an example has the wrong input length.
            NonFiniteResultError: If a weighted sum, weight or bias diverges.
            ValueError: If max_epochs is less than 1.
        """
        if not self.training_set:
            raise EmptyTrainingSetError("Cannot train without training examples")
        if max_epochs is not None and max_epochs < 1:
            raise ValueError(f"max_epochs must be at least 1, got {max_epochs}")
        for inputs in self.training_set:
            self._check_inputs(inputs)

        logger.info(
            "Training on %d examples (learning_rate=%s, target_accuracy=%s, max_epochs=%s)",
            len(self.training_set),
            learning_rate,
            target_accuracy,
            max_epochs,
        )

        history: list[float] = []
        accuracy = 0.0
        epoch = 0

        while max_epochs is None or epoch < max_epochs:
            epoch += 1
            squared_error = 0.0

            for index, (inputs, target) in enumerate(self.training_set.items()):
                self.forward(inputs)
                delta = self.output.compute_delta(target)

                for connection in self.connections:
                    step = delta * learning_rate * connection.dendrite.output()
                    connection.adjust_weight(step, momentum)
                self.output.adjust_bias(delta * learning_rate)
                self._check_parameters()

                squared_error += (target - self.output.output()) ** 2
                self.clear()

                accuracy = 1.0 - 0.5 * squared_error
                if record_history:
                    history.append(accuracy)
                logger.debug("epoch %d example %d accuracy %.6f", epoch, index, accuracy)
                if on_progress is not None:
                    on_progress(epoch, index, accuracy)

                if accuracy >= target_accuracy:
                    logger.info(
                        "Converged after %d epochs with accuracy %.6f", epoch, accuracy
                    )
                    return TrainingResult(True, epoch, accuracy, history)

        logger.warning(
            "Stopped after %d epochs without reaching accuracy %s (last %.6f)",
            epoch,
            target_accuracy,
            accuracy,
        )
        return TrainingResult(False, epoch, accuracy, history)
