import matplotlib

matplotlib.use("Agg")

import pytest
import torch

from gatenet.network import Network


@pytest.fixture
def generator():
    """Seeded generator so random initialization is reproducible per test."""
    return torch.Generator().manual_seed(1234)


@pytest.fixture
def fixed_network():
    """Two-input network with known weights (0.05, 0.07) and output bias 0.1."""
    return Network(weights=[0.05, 0.07], bias=0.1)


@pytest.fixture
def and_network(fixed_network):
    """The fixed network with the logical AND truth table as its training set."""
    fixed_network.add_example([0, 0], 0)
    fixed_network.add_example([0, 1], 0)
    fixed_network.add_example([1, 0], 0)
    fixed_network.add_example([1, 1], 1)
    return fixed_network
