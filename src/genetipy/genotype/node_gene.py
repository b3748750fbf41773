"""
NEAT Node Gene Module.

This module implements the NodeGene class and NodeType enumeration
for the NEAT (NeuroEvolution of Augmenting Topologies) genome.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum   import Enum
from typing import Callable

from genetipy.activations import activations, activation_codes

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

# The activation function used by each type of node
DEFAULT_ACTIVATIONS = {
    NodeType.INPUT : "identity",
    NodeType.HIDDEN: "tanh",
    NodeType.OUTPUT: "sigmoid",
    }

class NodeGene:
    """
    A gene describing a node in a layered Neural Network.

    Nodes are organized in layers: input nodes sit on layer 0, output nodes on the
    deepest layer ('max_depth' in the configuration) and hidden nodes in between.
    A connection may only go from a node to a node on a strictly deeper layer,
    which keeps the network acyclic.

    Node IDs are handed out by the InnovationTracker, so within a run the same ID
    always denotes the same node (with the same layer) in every genome.

    Public Attributes:
        id:              Unique identifier for this node
        type:            Type of node (INPUT, HIDDEN, or OUTPUT)
        layer:           Index of the layer the node belongs to
        activation_name: Name of the activation function ('identity', 'tanh', 'sigmoid')

    Public Properties:
        activation: The activation function itself (callable)
    """

    def __init__(self,
                 node_id        : int,
                 node_type      : NodeType,
                 layer          : int,
                 activation_name: str | None = None):
        """
        Initialize a node gene.

        Parameters:
            node_id:         Unique identifier for this node
            node_type:       Type of node (INPUT, HIDDEN, or OUTPUT)
            layer:           Index of the layer the node belongs to
            activation_name: Name of activation function; if None, use the
                             default for the node type

        Raises:
            ValueError: If the activation function is unknown
        """
        if activation_name is None:
            activation_name = DEFAULT_ACTIVATIONS[node_type]
        if activation_name not in activations:
            raise ValueError(f"Unknown activation function '{activation_name}'")

        self.id             : int      = node_id
        self.type           : NodeType = node_type
        self.layer          : int      = layer
        self.activation_name: str      = activation_name

    @property
    def activation(self) -> Callable[[float], float]:
        """The activation function applied to the node's accumulated input."""
        return activations[self.activation_name]

    def __repr__(self):
        return (f"NodeGene(node_id={self.id:03d}, node_type=NodeType.{self.type.name:6s},"
                f"layer={self.layer:02d}, activation={self.activation_name})")

    def __str__(self):
        return f"[{self.type.value}{self.id},L{self.layer},{activation_codes[self.activation_name]}]"
