from __future__ import annotations

from typing import TYPE_CHECKING

from gatenet.constants import INITIAL_PREVIOUS_STEP

if TYPE_CHECKING:
    from gatenet.neuron import Neuron


class Connection:
    """
    Directed, weighted edge between two neurons.

    The source neuron is the dendrite and the destination neuron is the axon.
    Neither is owned by the connection.
    """

    def __init__(self, dendrite: Neuron, axon: Neuron, weight: float) -> None:
        self.dendrite = dendrite
        self.axon = axon
        self.weight = weight
        # Momentum memory: the step applied by the previous adjust_weight().
        # Starts at 1.0, so the very first adjustment adds a full momentum
        # term on top of its own step.
        self.previous_step = INITIAL_PREVIOUS_STEP

    def __repr__(self) -> str:
        return (
            f"Connection({self.dendrite.label!r} -> {self.axon.label!r}, "
            f"weight={self.weight})"
        )

    def propagate(self) -> None:
        """Add source output * weight to the destination's weighted input."""
        self.axon.accumulate(self.dendrite.output() * self.weight)

    def adjust_weight(self, step: float, momentum: float) -> None:
        """
        Apply one gradient step plus momentum.

        weight += step + momentum * previous_step, after which `step` becomes
        the previous step for the next call.

        Args:
            step: Gradient step for this example (delta * rate * source output).
            momentum: Fraction of the previous step to add again.
        """
        self.weight += step + momentum * self.previous_step
        self.previous_step = step
