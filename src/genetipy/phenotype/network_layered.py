"""
NEAT Layered Network Module

This module implements the feed-forward evaluation of a layered NEAT network.

Classes:
    NetworkLayered: Feedforward neural network processing one layer at a time
"""

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from genetipy.genotype import ConnectionGene, Genome
from genetipy.phenotype.network_base import NetworkBase

class NetworkLayered(NetworkBase):
    """
    Layer-by-layer implementation of a NEAT neural network.

    Every node owns an accumulator. A forward pass seeds the accumulators of the
    input nodes with the inputs, then visits the connections grouped by the layer
    of their sending node, shallowest layer first. Each enabled connection adds

        activation(sender)(accumulator[sender]) * weight

    to the accumulator of its receiving node. Since a connection always ends on
    a deeper layer than the one it starts from, the accumulator of a node is
    complete by the time its layer is visited. Finally the activation function of
    each output node is applied to its accumulator.

    The network is a read-only view of the genome: a forward pass allocates its
    own accumulators, so repeated passes on the same inputs give the same outputs.

    Public Methods:
        forward_pass(inputs): Process one input vector through the network

    Public Properties (inherited from NetworkBase):
        number_nodes:               Total number of nodes in the network
        number_nodes_hidden:        Number of hidden nodes in the network
        number_connections:         Total number of connections in the network
        number_connections_enabled: Number of enabled connections in the network
    """

    def __init__(self, genome: 'Genome'):
        """
        Parameters:
            genome: the Genome encoding the network
        """
        super().__init__(genome)

        # Group enabled connections by the layer of their sending node
        node_genes = genome.node_genes
        by_layer: dict[int, list['ConnectionGene']] = {}
        for conn in genome.conn_genes.values():
            if conn.enabled:
                by_layer.setdefault(node_genes[conn.node_in].layer, []).append(conn)
        self._layers: list[tuple[int, list['ConnectionGene']]] = sorted(by_layer.items())

    def forward_pass(self, inputs: Sequence[float]) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: the network inputs (as many as input nodes)

        Returns:
            the outputs of the network (as many as output nodes), in node ID order

        Raises:
            ValueError: If the number of inputs does not match the number of input nodes
        """
        if len(inputs) != len(self._input_ids):
            raise ValueError(f"Expected {len(self._input_ids)} inputs, got {len(inputs)}")

        node_genes   = self._genome.node_genes
        accumulators = dict.fromkeys(node_genes, 0.0)
        for node_id, value in zip(self._input_ids, inputs):
            accumulators[node_id] = value

        for _, connections in self._layers:
            for conn in connections:
                sender = node_genes[conn.node_in]
                accumulators[conn.node_out] += sender.activation(accumulators[conn.node_in]) * conn.weight

        return [float(node_genes[ID].activation(accumulators[ID])) for ID in self._output_ids]

    def __str__(self):
        lines = [f"  layer {layer}: " + ''.join(str(conn) for conn in conns)
                 for layer, conns in self._layers]
        return "\n".join(lines)
