"""
NEAT Phenotype Package

This package implements the phenotype representation for the NEAT (NeuroEvolution
of Augmenting Topologies) algorithm: the executable neural network expressed by a
genome.

The phenotype layer transforms the genetic representation (genotype) into a
functioning neural network that can process inputs and produce outputs. Networks
are read-only views of their genome and are rebuilt whenever they are needed.

Modules:
    network_base:    Abstract base class for network implementations
    network_layered: Layer-by-layer feedforward network implementation

Exported Classes:
    NetworkBase:    Abstract base class for network implementations
    NetworkLayered: Feedforward neural network processing one layer at a time
"""

from genetipy.phenotype.network_base    import NetworkBase
from genetipy.phenotype.network_layered import NetworkLayered

__all__ = ['NetworkBase',
           'NetworkLayered']
