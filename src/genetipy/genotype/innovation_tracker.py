"""
NEAT Innovation Tracker Module

This module implements the InnovationTracker class for the
NEAT (NeuroEvolution of Augmenting Topologies) genome.

Classes:
    MutationType:      The kinds of structural mutation being tracked
    MutationRecord:    The canonical outcome of a structural mutation
    InnovationTracker: Run-scoped tracker for innovation numbers and node IDs
"""

import copy
import random
import threading
from enum      import Enum
from itertools import count
from typing    import Callable, NamedTuple

from genetipy.genotype.connection_gene import ConnectionGene
from genetipy.genotype.node_gene       import NodeGene, NodeType
from genetipy.run.config               import Config

class MutationType(Enum):
    ADD_CONNECTION = "connection"
    ADD_NODE       = "node"

class MutationRecord(NamedTuple):
    """
    The genes produced by a structural mutation the first time it occurred.

    Attributes:
        kind:        which structural mutation produced the genes
        connections: the new connection gene (ADD_CONNECTION), or the linked pair
                     'node_in -> new node', 'new node -> node_out' (ADD_NODE)
        node:        the new node gene (ADD_NODE only)
    """
    kind       : MutationType
    connections: tuple[ConnectionGene, ...]
    node       : NodeGene | None = None

class InnovationTracker:
    """
    Tracks structural changes across all genomes of a run.

    The first time a structural mutation happens (a connection between two nodes
    is added, or a connection is split by a new node) the tracker assigns new
    innovation numbers (and a node ID) and records the resulting genes. Any other
    genome producing the same mutation before the history is cleared receives
    copies of the same genes, so that identical structures carry identical
    innovation numbers and can be aligned during crossover.

    The history is cleared once per generation, so only the mutations of a single
    generation are deduplicated. The innovation and node ID counters are never
    reset: numbers handed out are unique for the lifetime of the tracker.

    A tracker is owned by one run and shared by reference by all its genomes.
    All public methods are safe to call from concurrent workers.

    Public Methods:
        next_innovation_number():          Allocate a new innovation number
        next_node_id():                    Allocate a new node ID
        get_or_create(key, kind, factory): Return the recorded mutation, creating it if needed
        get_connection(node_in, node_out): Connection gene for a new connection
        get_split(conn_to_split, layer):   Node and connection genes for splitting a connection
        clear():                           Forget the recorded mutations
    """

    def __init__(self, config: Config):
        """
        Parameters:
            config: Stores configuration parameters
        """
        self._config = config

        # Counters; hidden node IDs follow the input and output node IDs
        self._next_innovation_number = count(0)
        self._next_node_id           = count(config.num_inputs + config.num_outputs)

        # (kind, (node_in, node_out)) -> MutationRecord
        self._history: dict[tuple[MutationType, tuple[int, int]], MutationRecord] = {}

        self._lock = threading.RLock()

    def next_innovation_number(self) -> int:
        with self._lock:
            return next(self._next_innovation_number)

    def next_node_id(self) -> int:
        with self._lock:
            return next(self._next_node_id)

    def get_or_create(self,
                      key    : tuple[int, int],
                      kind   : MutationType,
                      factory: Callable[[], MutationRecord]) -> MutationRecord:
        """
        Get the record of a structural mutation, identified by its kind and endpoints.
        Returns the existing record if this mutation already happened since the last
        'clear()', otherwise builds one with 'factory' and stores it.

        Parameters:
            key:     the (node_in, node_out) pair the mutation applies to
            kind:    the kind of structural mutation
            factory: builds the record; invoked while holding the lock

        Returns:
            the canonical MutationRecord for this mutation
        """
        with self._lock:
            record = self._history.get((kind, key))
            if record is None:
                record = factory()
                self._history[(kind, key)] = record
            return record

    def get_connection(self, node_in: int, node_out: int) -> ConnectionGene:
        """
        Get the gene for a new connection between two nodes.

        Parameters:
            node_in:  node ID for the 'from' end of the connection
            node_out: node ID for the 'to'   end of the connection

        Returns:
            a copy of the canonical connection gene (innovation number and weight)
        """
        def factory() -> MutationRecord:
            conn = ConnectionGene(node_in, node_out, self._random_weight(),
                                  self.next_innovation_number(), self._config)
            return MutationRecord(MutationType.ADD_CONNECTION, (conn,))

        record = self.get_or_create((node_in, node_out), MutationType.ADD_CONNECTION, factory)
        return copy.copy(record.connections[0])

    def get_split(self,
                  conn_to_split: ConnectionGene,
                  layer        : int) -> tuple[NodeGene, ConnectionGene, ConnectionGene]:
        """
        Get the genes for splitting a connection with a new node.
        If this connection has been split since the last 'clear()', returns
        the same genes, otherwise creates new ones.

        Parameters:
            conn_to_split: the connection being split
            layer:         the layer of the new node

        Returns
            3-tuple: (new_node, conn1, conn2), all copies of the canonical genes
            conn1 is the connection from the 'from' node of 'conn_to_split' to the new node
            conn2 is the connection from the new node to the 'to' node of 'conn_to_split'
        """
        def factory() -> MutationRecord:
            node  = NodeGene(self.next_node_id(), NodeType.HIDDEN, layer)
            conn1 = ConnectionGene(conn_to_split.node_in, node.id, self._random_weight(),
                                   self.next_innovation_number(), self._config)
            conn2 = ConnectionGene(node.id, conn_to_split.node_out, self._random_weight(),
                                   self.next_innovation_number(), self._config)
            return MutationRecord(MutationType.ADD_NODE, (conn1, conn2), node)

        record = self.get_or_create(conn_to_split.endpoints, MutationType.ADD_NODE, factory)
        conn1, conn2 = record.connections
        return copy.copy(record.node), copy.copy(conn1), copy.copy(conn2)

    def clear(self) -> None:
        """
        Forget all recorded mutations. Counters are left untouched.
        """
        with self._lock:
            self._history.clear()

    def _random_weight(self) -> float:
        return random.uniform(self._config.min_weight, self._config.max_weight)

    def __len__(self):
        return len(self._history)
