"""
genetipy - A parallel genetic algorithm with a NEAT genome.

This package provides a generic genetic algorithm, able to evolve any population
of members implementing the Member protocol, and an implementation of NEAT
(NeuroEvolution of Augmenting Topologies) layered neural networks on top of it.

Main components:
- pool:        The Member protocol, population and batching of work
- run:         Configuration, datasets and the solvers
- genotype:    Genetic encoding (genomes, genes, innovation tracking)
- phenotype:   Neural network expression
- activations: Activation functions for neural networks

Example:
    >>> from genetipy import Config, DataEntry, NeatSolver
    >>> config = Config("config.ini")
    >>> dataset = [DataEntry.from_lists([0, 1], [1]), DataEntry.from_lists([1, 1], [0])]
    >>> best_genome = NeatSolver(config, dataset).solve()
    >>> best_genome.feed([0, 1])
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from genetipy.run.config                  import Config
from genetipy.run.dataset                 import DataEntry, DataSet
from genetipy.run.solver                  import Solver
from genetipy.run.neat_solver             import NeatSolver
from genetipy.pool                        import Batch, Member, Population, build_batches
from genetipy.genotype.genome             import Genome
from genetipy.genotype.node_gene          import NodeGene, NodeType
from genetipy.genotype.connection_gene    import ConnectionGene
from genetipy.genotype.innovation_tracker import InnovationTracker
from genetipy.phenotype                   import NetworkLayered

__all__ = [
    "Config",
    "DataEntry",
    "DataSet",
    "Solver",
    "NeatSolver",
    "Batch",
    "Member",
    "Population",
    "build_batches",
    "Genome",
    "NodeGene",
    "NodeType",
    "ConnectionGene",
    "InnovationTracker",
    "NetworkLayered",
]
