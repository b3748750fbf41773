"""
NEAT Genome Module

This module implements the Genome class for the NEAT
(NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    Genome: Complete genome representing a layered neural network
"""

import copy
import numpy as np
import random
from typing import Sequence, TYPE_CHECKING

from genetipy.run.config                  import Config
from genetipy.run.dataset                 import DataSet
from genetipy.genotype.connection_gene    import ConnectionGene
from genetipy.genotype.node_gene          import NodeType, NodeGene
from genetipy.phenotype.network_layered   import NetworkLayered
if TYPE_CHECKING:
    from genetipy.genotype.innovation_tracker import InnovationTracker

class Genome:
    """
    A NEAT genome representing a layered neural network as a collection of node and connection genes.

    The genome consists of:
    - Node genes: describe network nodes (input, hidden, output), each on a layer
    - Connection genes: describe weighted connections between nodes, each with an
      innovation number used to align the genes of two genomes

    Input nodes sit on layer 0 and output nodes on layer 'max_depth'. A connection
    always goes from a shallower layer to a deeper one, so the network is acyclic.

    A minimal genome contains only input and output nodes with no connections. Via
    mutation, genomes grow by adding connections and by splitting connections with
    new nodes. Structural mutations obtain their genes from an InnovationTracker
    shared by all genomes of a run, so that the same structural change made by two
    genomes in the same generation produces genes with the same innovation numbers.

    The Genome satisfies the Member protocol and can be evolved by the Solver: its
    fitness measures how well the network reproduces a DataSet, adjusted by the
    number of similar genomes in the population (counted by 'distance()').

    Node numbering convention:
        - Input nodes:  [0, num_inputs)
        - Output nodes: [num_inputs, num_inputs + num_outputs)
        - Hidden nodes: [num_inputs + num_outputs, ...), handed out by the tracker

    Attributes:
        node_genes:      Dictionary mapping node IDs to NodeGene objects
        conn_genes:      Dictionary mapping innovation numbers to ConnectionGene objects
        fitness:         Fitness computed by the last call to 'compute_fitness()'
        survival_chance: Probability weight used when selecting parents
        num_similar:     How many genomes were found closer than the similarity threshold

    Public Properties:
        input_nodes:  List of all input node genes
        output_nodes: List of all output node genes
        hidden_nodes: List of all hidden node genes

    Public Methods:
        distance(other):  Calculate genetic distance to another genome
        compute_fitness(): Evaluate the network against the dataset
        crossover(other): Create offspring by crossing this genome with another
        mutate():         Apply one mutation operation
        feed(inputs):     Pass inputs through the network

    Static Methods:
        show_aligned(genome1, genome2): Print two genomes with aligned genes for comparison
    """

    def __init__(self, config: Config, tracker: 'InnovationTracker', dataset: DataSet = ()):
        """
        Initialize a minimal Genome.

        A minimal genome describes the smallest possible network: only input and
        output nodes (whose number never changes and is retrieved from the Config
        object) and no connections.

        Parameters:
            config:  Stores configuration parameters
            tracker: Assigns innovation numbers and node IDs for structural mutations
            dataset: The (inputs, outputs) pairs used to compute the fitness
        """
        self._config  = config
        self._tracker = tracker
        self._dataset = dataset

        self.fitness        : int   = 0
        self.survival_chance: float = 0.0
        self.num_similar    : int   = 0

        self.node_genes: dict[int, NodeGene]       = {}  # node ID => node gene
        self.conn_genes: dict[int, ConnectionGene] = {}  # innovation number => connection gene

        # Initialize input nodes, on the first layer
        for i in range(self._config.num_inputs):
            self.node_genes[i] = NodeGene(i, NodeType.INPUT, 0)

        # Initialize output nodes, on the last layer
        for i in range(self._config.num_outputs):
            node_id = self._config.num_inputs + i
            self.node_genes[node_id] = NodeGene(node_id, NodeType.OUTPUT, self._config.max_depth)

    def _empty_offspring(self) -> 'Genome':
        """
        Create a genome with no node or connection genes, sharing
        this genome's configuration, tracker and dataset.
        """
        offspring = Genome(self._config, self._tracker, self._dataset)
        offspring.node_genes = {}
        offspring.conn_genes = {}
        return offspring

    @property
    def input_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes.values() if node.type == NodeType.INPUT]

    @property
    def output_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes.values() if node.type == NodeType.OUTPUT]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes.values() if node.type == NodeType.HIDDEN]

    def _sorted_connections(self) -> list[ConnectionGene]:
        """The connection genes, ordered by innovation number (a new list on every call)."""
        return sorted(self.conn_genes.values(), key=lambda conn: conn.innovation)

    def distance(self, other: 'Genome') -> float:
        """
        Calculate genetic distance between this genome and another.

        The connection genes of both genomes, ordered by innovation number, are
        compared position by position:
        - positions present in only one genome are excess genes
        - positions holding the same innovation number are matching genes
        - all other positions are disjoint genes

           distance = (c1 * E / N) + (c2 * D / N) + c3 * W̄

        Where:
        - E  = number of excess genes
        - D  = number of disjoint genes
        - N  = number of connection genes in larger genome, or 1 if that
               is smaller than 'distance_min_genes'
        - W̄  = average weight difference of matching genes
        - c1, c2, c3 = weight of various terms (from configuration file)

        If the distance is below 'similarity_threshold', the counter of similar
        genomes of this genome (not of 'other') is incremented. The distance is
        therefore not a symmetric operation.

        Parameters:
            other: the genome relative to which we are calculating the distance

        Returns:
            the genetic distance between this genome and 'other'
        """
        conns_self  = self._sorted_connections()
        conns_other = other._sorted_connections()
        length      = max(len(conns_self), len(conns_other))

        num_matching = 0
        num_disjoint = 0
        num_excess   = 0
        weight_diff  = 0.0
        for i in range(length):
            if i >= len(conns_self) or i >= len(conns_other):
                num_excess += 1
            elif conns_self[i].innovation == conns_other[i].innovation:
                num_matching += 1
                weight_diff  += abs(conns_self[i].weight - conns_other[i].weight)
            else:
                num_disjoint += 1

        # Average connection weight difference for matching connection genes
        avg_weight_diff = weight_diff / num_matching if num_matching else 0.0

        # Small genomes are not normalized by their size
        N = length if length >= self._config.distance_min_genes else 1

        distance = (self._config.distance_excess_coeff   * num_excess   / N +
                    self._config.distance_disjoint_coeff * num_disjoint / N +
                    self._config.distance_params_coeff   * avg_weight_diff)

        if distance < self._config.similarity_threshold:
            self.num_similar += 1

        return distance

    def compute_fitness(self) -> None:
        """
        Evaluate the network against the dataset and store the result in 'fitness'.

        For each dataset entry the total absolute error over the outputs is
        calculated, and the entry contributes:

           |num_outputs - error| ** fitness_exponent

        The sum over all entries is multiplied by 'fitness_scale' and divided by
        the number of similar genomes (at least 1), then truncated to an integer.

        Raises:
            ValueError: If an entry does not match the number of inputs or outputs of the network
        """
        num_inputs  = self._config.num_inputs
        num_outputs = self._config.num_outputs
        network     = NetworkLayered(self)

        total = 0.0
        for entry in self._dataset:
            if len(entry.inputs) != num_inputs or len(entry.outputs) != num_outputs:
                raise ValueError(f"Incorrect data entry: expected {num_inputs} inputs and {num_outputs} outputs, "
                                 f"got {len(entry.inputs)} and {len(entry.outputs)}")

            result = network.forward_pass(entry.inputs)
            error  = float(np.sum(np.abs(np.subtract(result, entry.outputs))))
            total += abs(num_outputs - error) ** self._config.fitness_exponent

        # Adjusted fitness
        self.fitness = int(self._config.fitness_scale * total / max(self.num_similar, 1))

    def crossover(self, other: 'Genome') -> 'Genome':
        """
        Create offspring by crossing this genome with another.

        This genome is the dominant parent. The connection genes of both parents,
        ordered by innovation number, are walked position by position, up to the
        number of genes of the dominant parent:
        - where 'other' has no gene, the gene of the dominant parent is inherited
        - otherwise the gene is inherited from either parent with equal probability

        A gene whose innovation number or endpoints are already part of the offspring
        is replaced by the dominant parent's gene at the same position, and skipped
        if that one is already part of the offspring too.

        The offspring receives the node genes of the dominant parent, plus those
        node genes of 'other' required by the connections inherited from it.
        Neither parent is modified.

        Parameters:
            other: the other parent genome

        Returns:
            New offspring genome
        """
        offspring = self._empty_offspring()

        conns_self  = self._sorted_connections()
        conns_other = other._sorted_connections()

        endpoints = set()
        for i, dominant_gene in enumerate(conns_self):
            if i >= len(conns_other) or random.random() < 0.5:
                conn_gene = dominant_gene
            else:
                conn_gene = conns_other[i]

            if conn_gene.innovation in offspring.conn_genes or conn_gene.endpoints in endpoints:
                conn_gene = dominant_gene
                if conn_gene.innovation in offspring.conn_genes or conn_gene.endpoints in endpoints:
                    continue

            offspring.conn_genes[conn_gene.innovation] = copy.copy(conn_gene)
            endpoints.add(conn_gene.endpoints)

        # Inherit the nodes of the dominant parent
        for node_id, node_gene in self.node_genes.items():
            offspring.node_genes[node_id] = copy.copy(node_gene)

        # Add the nodes introduced by the genes inherited from 'other'
        for node_in, node_out in endpoints:
            for node_id in (node_in, node_out):
                if node_id not in offspring.node_genes:
                    offspring.node_genes[node_id] = copy.copy(other.node_genes[node_id])

        return offspring

    def mutate(self) -> None:
        """
        Apply exactly one mutation operation to the current genome.

        The possible mutations are:
          + add a connection (probability 'connection_add_probability')
          + add a node       (probability 'node_add_probability')
          + mutate the connection weights (otherwise)

        A structural mutation that turns out to be impossible leaves the genome unchanged.
        """
        r = random.random()
        if r < self._config.connection_add_probability:
            self._mutate_add_connection()
        elif r < self._config.connection_add_probability + self._config.node_add_probability:
            self._mutate_add_node()
        else:
            self._mutate_weights()

    def _mutate_add_connection(self) -> None:
        """
        Add a new connection between two existing nodes.

        The two ends of the new connection are selected at random; nothing
        happens if the connection would:
         + start and end on the same node
         + not go from a shallower layer to a deeper one
         + duplicate an existing connection
        """
        node_IDs = list(self.node_genes.keys())
        node_in  = random.choice(node_IDs)
        node_out = random.choice(node_IDs)

        if node_in == node_out:
            return
        if self.node_genes[node_in].layer >= self.node_genes[node_out].layer:
            return
        if any(conn.endpoints == (node_in, node_out) for conn in self.conn_genes.values()):
            return

        new_connection = self._tracker.get_connection(node_in, node_out)
        self.conn_genes[new_connection.innovation] = new_connection

    def _mutate_add_node(self) -> None:
        """
        Split an existing connection by adding a new node.

        The connection to split is selected at random. Nothing happens if it is
        disabled, or if there is no layer left between its two ends. Otherwise
        the new node is placed one layer after the connection's 'from' node, two
        new connections link it to both ends. The split connection is left as it is.
        """
        # A newly initialized genome has no connection genes.
        if not self.conn_genes:
            return

        split_conn_gene = random.choice(list(self.conn_genes.values()))
        if not split_conn_gene.enabled:
            return

        # The new node must fit strictly between the ends of the connection
        new_layer = self.node_genes[split_conn_gene.node_in].layer + 1
        if new_layer >= self._config.max_depth or new_layer >= self.node_genes[split_conn_gene.node_out].layer:
            return

        new_node, conn1, conn2 = self._tracker.get_split(split_conn_gene, new_layer)
        if new_node.id in self.node_genes:
            return

        self.node_genes[new_node.id]  = new_node
        self.conn_genes[conn1.innovation] = conn1
        self.conn_genes[conn2.innovation] = conn2

    def _mutate_weights(self) -> None:
        """
        Give each connection a chance to receive a new random weight.
        """
        for conn in self.conn_genes.values():
            conn.mutate()

    def feed(self, inputs: Sequence[float]) -> list[float]:
        """
        Pass the inputs through the network described by this genome.

        Parameters:
            inputs: the network inputs (as many as input nodes)

        Returns:
            the network outputs (as many as output nodes)
        """
        return NetworkLayered(self).forward_pass(inputs)

    def __str__(self):
        node_genes_str  = ''.join(str(node) for node in self.input_nodes)
        node_genes_str += ''.join(str(node) for node in self.hidden_nodes)
        node_genes_str += ''.join(str(node) for node in self.output_nodes)
        conn_genes_str  = ''.join(str(conn) for conn in self._sorted_connections())
        return f"Nodes: {node_genes_str}\nConns: {conn_genes_str}"

    @staticmethod
    def show_aligned(genome1: 'Genome', genome2: 'Genome') -> None:
        """
        Print two genomes aligning the node and connection genes.
        """

        # Align nodes by ID
        node_ids_all = sorted(set(genome1.node_genes.keys()) | set(genome2.node_genes.keys()))
        node_str1 = ""
        node_str2 = ""
        for node_id in node_ids_all:
            str1 = str(genome1.node_genes[node_id]) if node_id in genome1.node_genes else ""
            str2 = str(genome2.node_genes[node_id]) if node_id in genome2.node_genes else ""
            width = max(len(str1), len(str2))
            node_str1 += str1.ljust(width)
            node_str2 += str2.ljust(width)

        # Print aligned nodes
        print(f"Nodes:\n{node_str1}\n{node_str2}\n")

        # Align connections by innovation number
        innovs_all = sorted(set(genome1.conn_genes.keys()) | set(genome2.conn_genes.keys()))
        conn_str1 = ""
        conn_str2 = ""
        padding   = ' ' * 18
        for inov in innovs_all:
            conn_str1 += str(genome1.conn_genes[inov]) if inov in genome1.conn_genes else padding
            conn_str2 += str(genome2.conn_genes[inov]) if inov in genome2.conn_genes else padding

        # Print aligned connections
        print(f"Connections:\n{conn_str1}\n{conn_str2}\n")
