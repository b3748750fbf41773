"""
NEAT Genotype Package

This package implements the genotype representation for the NEAT (NeuroEvolution of
Augmenting Topologies) algorithm. It provides classes for encoding layered neural
network structures at the genetic level.

The NEAT genotype consists of two types of genes:
- Node genes:       Encode individual neurons with their layer and activation
- Connection genes: Encode weighted connections between neurons with innovation numbers

Modules:
    node_gene:          NodeType enumeration and NodeGene class
    connection_gene:    ConnectionGene class
    genome:             Genome class
    innovation_tracker: InnovationTracker class

Exported Classes:
    NodeType:          Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:          Gene encoding a single network node
    ConnectionGene:    Gene encoding a weighted connection between nodes
    Genome:            Complete genome representing a layered neural network
    InnovationTracker: Run-scoped tracker for innovation numbers and node IDs
    MutationType:      The kinds of structural mutation recorded by the tracker
    MutationRecord:    The genes produced by a recorded structural mutation
"""

from genetipy.genotype.connection_gene    import ConnectionGene
from genetipy.genotype.genome             import Genome
from genetipy.genotype.innovation_tracker import InnovationTracker, MutationRecord, MutationType
from genetipy.genotype.node_gene          import NodeType, NodeGene

__all__ = ['ConnectionGene',
           'Genome',
           'InnovationTracker',
           'MutationRecord',
           'MutationType',
           'NodeGene',
           'NodeType']
