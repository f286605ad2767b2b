"""
Tests for Neuron and Connection: accumulation, propagation, deltas and the
momentum weight update.
"""

import pytest

from gatenet.activation import LINEAR, SIGMOID
from gatenet.connection import Connection
from gatenet.constants import INITIAL_PREVIOUS_STEP
from gatenet.neuron import Neuron


@pytest.fixture
def pair():
    """A linear source neuron connected to a sigmoid destination with weight 0.5."""
    source = Neuron(LINEAR, label="src")
    destination = Neuron(SIGMOID, bias=0.2, label="dst")
    connection = source.connect(destination, 0.5)
    return source, destination, connection


# ============================================================================
# Neuron
# ============================================================================

def test_new_neuron_starts_empty():
    neuron = Neuron(SIGMOID)
    assert neuron.weighted_input == 0.0
    assert neuron.bias == 0.0
    assert neuron.delta == 0.0
    assert neuron.connections == []


def test_reset_then_output_is_activated_bias():
    neuron = Neuron(SIGMOID, bias=0.3)
    neuron.accumulate(4.0)
    neuron.reset()
    assert neuron.weighted_input == 0.0
    assert neuron.output() == SIGMOID.activate(0.3)


def test_reset_leaves_bias_and_delta_alone():
    neuron = Neuron(SIGMOID, bias=-0.4)
    neuron.accumulate(1.0)
    neuron.compute_delta(1.0)
    delta = neuron.delta
    neuron.reset()
    assert neuron.bias == -0.4
    assert neuron.delta == delta


def test_accumulate_sums_contributions():
    neuron = Neuron(LINEAR)
    for value in [0.5, -0.25, 1.0]:
        neuron.accumulate(value)
    assert neuron.weighted_input == 1.25


def test_load_overwrites_weighted_input():
    neuron = Neuron(LINEAR)
    neuron.accumulate(3.0)
    neuron.load(0.5)
    assert neuron.weighted_input == 0.5


def test_output_adds_bias_and_has_no_side_effect():
    neuron = Neuron(LINEAR, bias=0.25)
    neuron.accumulate(1.0)
    assert neuron.net_input() == 1.25
    assert neuron.output() == 1.25
    assert neuron.output() == 1.25
    assert neuron.weighted_input == 1.0


def test_compute_delta():
    neuron = Neuron(SIGMOID, bias=0.1)
    neuron.accumulate(0.12)
    out = SIGMOID.activate(0.22)
    expected = out * (1.0 - out) * (1.0 - out)
    assert neuron.compute_delta(1.0) == pytest.approx(expected)
    assert neuron.delta == pytest.approx(expected)


def test_compute_delta_sign_follows_error():
    neuron = Neuron(SIGMOID)
    assert neuron.compute_delta(1.0) > 0
    assert neuron.compute_delta(0.0) < 0


def test_adjust_bias():
    neuron = Neuron(SIGMOID, bias=0.1)
    neuron.adjust_bias(-0.3)
    assert neuron.bias == pytest.approx(-0.2)


def test_connect_appends_in_order():
    source = Neuron(LINEAR)
    a, b = Neuron(SIGMOID), Neuron(SIGMOID)
    first = source.connect(a, 0.1)
    second = source.connect(b, 0.2)
    assert source.connections == [first, second]
    assert first.dendrite is source and first.axon is a


def test_fire_propagates_every_connection():
    source = Neuron(LINEAR)
    a, b = Neuron(SIGMOID), Neuron(SIGMOID)
    source.connect(a, 0.5)
    source.connect(b, -2.0)
    source.load(2.0)
    source.fire()
    assert a.weighted_input == 1.0
    assert b.weighted_input == -4.0


# ============================================================================
# Connection
# ============================================================================

def test_propagate_pushes_weighted_output(pair):
    source, destination, connection = pair
    source.load(2.0)
    connection.propagate()
    assert destination.weighted_input == 1.0


def test_propagate_twice_adds_twice(pair):
    source, destination, connection = pair
    source.load(2.0)
    connection.propagate()
    connection.propagate()
    assert destination.weighted_input == 2.0


def test_propagate_uses_source_bias(pair):
    source, destination, connection = pair
    source.bias = 1.0
    source.load(1.0)
    connection.propagate()
    assert destination.weighted_input == 1.0


def test_first_adjustment_uses_initial_previous_step():
    connection = Connection(Neuron(LINEAR), Neuron(SIGMOID), 0.3)
    assert connection.previous_step == INITIAL_PREVIOUS_STEP == 1.0

    connection.adjust_weight(0.02, 0.8)
    assert connection.weight == pytest.approx(0.3 + 0.02 + 0.8 * 1.0)
    assert connection.previous_step == 0.02


def test_momentum_uses_only_last_step():
    connection = Connection(Neuron(LINEAR), Neuron(SIGMOID), 0.0)
    connection.adjust_weight(0.5, 0.8)
    w0, p0 = connection.weight, connection.previous_step

    connection.adjust_weight(-0.1, 0.8)
    assert connection.weight == pytest.approx(w0 - 0.1 + 0.8 * p0)
    assert connection.previous_step == -0.1

    w1 = connection.weight
    connection.adjust_weight(0.0, 0.8)
    assert connection.weight == pytest.approx(w1 + 0.8 * -0.1)
    assert connection.previous_step == 0.0


def test_zero_momentum_is_plain_gradient_step():
    connection = Connection(Neuron(LINEAR), Neuron(SIGMOID), 0.4)
    connection.adjust_weight(0.05, 0.0)
    assert connection.weight == pytest.approx(0.45)


def test_repr_shows_state():
    neuron = Neuron(SIGMOID, bias=0.5, label="out")
    assert repr(neuron) == (
        "Neuron(label='out', activation=sigmoid, bias=0.5, weighted_input=0.0)"
    )
