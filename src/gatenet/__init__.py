from gatenet.activation import LINEAR, SIGMOID, Activation, Linear, Sigmoid
from gatenet.connection import Connection
from gatenet.errors import (
    EmptyTrainingSetError,
    GateNetError,
    InvalidTopologyError,
    NonFiniteResultError,
)
from gatenet.network import Network, TrainingResult, threshold
from gatenet.neuron import Neuron

__all__ = [
    "Activation",
    "Connection",
    "EmptyTrainingSetError",
    "GateNetError",
    "InvalidTopologyError",
    "LINEAR",
    "Linear",
    "Network",
    "Neuron",
    "NonFiniteResultError",
    "SIGMOID",
    "Sigmoid",
    "TrainingResult",
    "threshold",
]
