"""
Pool Package

This package contains the population-level building blocks of the genetic
algorithm: what a population member must be able to do, how the population
is split into batches for the workers, and the population itself.

Modules:
    member:     The Member protocol every candidate solution satisfies
    batching:   Partition of the population into contiguous batches
    population: Fixed-size container with weighted random selection

Exported:
    Member:        Protocol for candidate solutions
    Batch:         Half-open range of population indices
    build_batches: Split a population into batches
    Population:    Fixed-size container of members
"""

from genetipy.pool.member     import Member
from genetipy.pool.batching   import Batch, build_batches
from genetipy.pool.population import Population

__all__ = [
    'Member',
    'Batch',
    'build_batches',
    'Population',
]
