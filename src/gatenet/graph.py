from graphviz import Digraph

from gatenet.connection import Connection
from gatenet.network import Network
from gatenet.neuron import Neuron


def collect_neurons_and_connections(
    network: Network,
) -> tuple[list[Neuron], list[Connection]]:
    """
    Walks the network from its input neurons along outgoing connections.

    Collects every reachable neuron once, in the order it is first reached,
    together with every connection passed on the way.

    Args:
        network: The network to traverse.

    Returns:
        A tuple containing:
        - neurons: All neurons of the network, in the order first reached.
        - connections: All connections, in traversal order.
    """
    neurons: list[Neuron] = []
    connections: list[Connection] = []
    seen: set[int] = set()

    def build(neuron: Neuron) -> None:
        """Recursively visits a neuron and everything downstream of it."""
        if id(neuron) in seen:
            return
        seen.add(id(neuron))
        neurons.append(neuron)
        for connection in neuron.connections:
            connections.append(connection)
            build(connection.axon)

    for neuron in network.inputs:
        build(neuron)

    return neurons, connections


def draw_network(network: Network) -> Digraph:
    """
    Visualizes a network using Graphviz.

    Each neuron becomes a record node showing its label, activation, bias,
    accumulated weighted input and last delta. Each connection becomes an
    edge labelled with its current weight.

    Args:
        network: The network to visualize.

    Returns:
        A Digraph object; call .render() or .source on it.
    """
    graph = Digraph(format="svg", graph_attr={"rankdir": "LR"})

    neurons, connections = collect_neurons_and_connections(network)

    for neuron in neurons:
        graph.node(
            name=str(id(neuron)),
            label=(
                f"{neuron.label} | {neuron.activation.name} | bias {neuron.bias:.4f}"
                f" | input {neuron.weighted_input:.4f} | delta {neuron.delta:.4f}"
            ),
            shape="record",
        )

    for connection in connections:
        graph.edge(
            str(id(connection.dendrite)),
            str(id(connection.axon)),
            label=f"w {connection.weight:.4f}",
        )

    return graph
