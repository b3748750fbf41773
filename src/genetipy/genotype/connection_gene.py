"""
NEAT Connection Gene Module

This module implements the ConnectionGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) genome.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

import random
from genetipy.run.config import Config

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    Connection genes carry an innovation number, a historical marker assigned
    when the connection first appeared, which allows aligning the genes of two
    differently-structured genomes.

    Public Attributes:
        node_in:    ID of the source node
        node_out:   ID of the destination node
        weight:     Weight of the connection
        enabled:    Whether this connection is active in the network
        innovation: Innovation number identifying this connection

    Public Properties:
        endpoints: The (node_in, node_out) pair

    Public Methods:
        mutate(): Stochastically replace the connection weight
    """

    def __init__(self,
                 node_in   : int,
                 node_out  : int,
                 weight    : float,
                 innovation: int,
                 config    : Config,
                 enabled   : bool = True):
        """
        Initialize a connection gene.

        Parameters:
            node_in:    ID of the source node
            node_out:   ID of the destination node
            weight:     Weight of the connection
            innovation: Number uniquely identifying this connection within a run
            config:     Stores configuration parameters
            enabled:    Whether this connection is active in the network
        """
        self.node_in   : int    = node_in
        self.node_out  : int    = node_out
        self.weight    : float  = weight
        self.enabled   : bool   = enabled
        self.innovation: int    = innovation
        self._config   : Config = config

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.node_in, self.node_out)

    def mutate(self) -> None:
        """
        Stochastically mutate the (gene describing the) connection.

        With probability 'weight_mutate_prob' the weight is replaced
        by a new value drawn uniformly from [min_weight, max_weight].
        """
        if random.random() < self._config.weight_mutate_prob:
            self.weight = random.uniform(self._config.min_weight, self._config.max_weight)

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in:03d}, node_out={self.node_out:03d},"
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation={self.innovation:03d})")

    def __str__(self):
        s  = f"[{self.innovation:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
        return s
