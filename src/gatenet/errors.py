class GateNetError(Exception):
    """Base class for errors raised by the network engine."""


class InvalidTopologyError(GateNetError, ValueError):
    """An input vector (or weight list) does not match the number of input neurons."""


class EmptyTrainingSetError(GateNetError, ValueError):
    """Training was requested with no examples to train on."""


class NonFiniteResultError(GateNetError, ArithmeticError):
    """A weighted sum, weight or bias stopped being a finite number."""
