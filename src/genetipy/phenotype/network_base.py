"""
NEAT Network Base Module

This module defines the abstract base class for networks expressed from a NEAT genome.
It provides a common interface and shared functionality for network implementations.

Classes:
    NetworkBase: Abstract base class defining the network interface
"""

from abc    import ABC, abstractmethod
from typing import Any, TYPE_CHECKING
import graphviz  # type: ignore

if TYPE_CHECKING:
    from genetipy.genotype import Genome

class NetworkBase(ABC):
    """
    Abstract base class for NEAT neural network implementations.

    This class defines the common interface that all network implementations
    must follow, regardless of their internal representation.

    The base class provides:
        - Common initialization
        - Standard network introspection properties
        - Network visualization

    Public Properties (available to all subclasses):
        number_nodes:               Total number of nodes in the network
        number_nodes_hidden:        Number of hidden nodes in the network
        number_connections:         Total number of connections in the network
        number_connections_enabled: Number of enabled connections in the network

    Public Methods (must be implemented by subclasses):
        forward_pass(inputs): Process inputs through the network and return outputs
    """

    def __init__(self, genome: 'Genome'):
        """
        Initialize common network attributes from genome.

        Parameters:
            genome: The Genome encoding the network structure
        """
        self._genome     = genome
        self._input_ids  = sorted(gene.id for gene in genome.input_nodes)
        self._output_ids = sorted(gene.id for gene in genome.output_nodes)

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._genome.node_genes)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return len(self._genome.node_genes) - len(self._input_ids) - len(self._output_ids)

    @property
    def number_connections(self) -> int:
        """Total number of connections in the network."""
        return len(self._genome.conn_genes)

    @property
    def number_connections_enabled(self) -> int:
        """Number of enabled connections in the network."""
        return sum(1 for conn in self._genome.conn_genes.values() if conn.enabled)

    @abstractmethod
    def forward_pass(self, inputs: Any) -> Any:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: Network inputs (implementation-specific type)

        Returns:
            Network outputs (implementation-specific type)
        """
        pass

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Nodes are grouped by layer, from the input layer on the left to the output
        layer on the right. Disabled connections are drawn in light gray.

        Parameters:
            view: If True, render the graph and open the result (requires the Graphviz binaries)

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        # Define node colors and shapes
        node_attrs = {
            'INPUT':  {'fillcolor': 'lightgrey', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'},
            'HIDDEN': {'fillcolor': 'lightblue', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'},
            'OUTPUT': {'fillcolor': 'white'    , 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        }

        # One subgraph per layer, so that nodes of the same layer are aligned
        layers: dict[int, list[int]] = {}
        for node in self._genome.node_genes.values():
            layers.setdefault(node.layer, []).append(node.id)

        for layer in sorted(layers):
            with dot.subgraph(name=f'cluster_layer_{layer}') as cluster:
                cluster.attr(rank='same', label=f'Layer {layer}', style='invisible')
                for node_id in sorted(layers[layer]):
                    node_gene = self._genome.node_genes[node_id]
                    attrs = node_attrs[node_gene.type.name].copy()
                    attrs['label'] = f"id={node_id}\\n{node_gene.activation_name}"
                    cluster.node(str(node_id), **attrs)

        # Add edges with weights (both enabled and disabled)
        for conn in self._genome.conn_genes.values():
            edge_attrs = {
                'label': f"i={conn.innovation},w={conn.weight:.2f}",
                'fontsize' : '5',
                'penwidth' : '0.5',
                'arrowsize': '0.5',
                'labelfloat': 'false',
                'color': 'black' if conn.enabled else 'lightgray'
            }
            dot.edge(str(conn.node_in), str(conn.node_out), **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot
