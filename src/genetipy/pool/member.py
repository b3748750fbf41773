"""
Member Module

This module defines the capabilities the genetic algorithm requires from a
candidate solution. Any class providing them can be evolved by the Solver;
no inheritance is needed.

Classes:
    Member: Structural protocol for population members
"""

from typing import Protocol, runtime_checkable

@runtime_checkable
class Member(Protocol):
    """
    A candidate solution evolved by the genetic algorithm.

    Attributes:
        fitness:         Most recently computed fitness (non-negative, higher is better)
        survival_chance: Probability of being selected as a parent; set by the Solver
                         once per generation, members never compute it themselves
    """
    fitness        : int
    survival_chance: float

    def compute_fitness(self) -> None:
        """
        Compute the fitness and store it in 'fitness'.
        Called concurrently on different members.
        """
        ...

    def distance(self, other: 'Member') -> float:
        """
        Genetic distance to another member. Only called when speciation is on,
        and may update speciation bookkeeping of this member (never of 'other').
        """
        ...

    def crossover(self, other: 'Member') -> 'Member':
        """
        Create a new member combining this member with 'other'. Neither parent is modified.
        """
        ...

    def mutate(self) -> None:
        """
        Mutate this member in place.
        """
        ...
