"""
Population Module

This module implements the Population class, the container of the members
evolved by the genetic algorithm during one generation.

Classes:
    Population: Fixed-size ordered collection of members
"""

import random
from typing import Iterator, Sequence

from genetipy.pool.member import Member

class Population:
    """
    The members of one generation of the genetic algorithm.

    The number of members is fixed when the population is created. A new
    generation is a new Population; members are never added or removed.

    Public Attributes:
        members: List of all members of the current generation

    Public Methods:
        assign_survival_chances(fitness_sum): Set each member's probability of being selected
        select_member():                      Pick a member at random, weighted by survival chance
        get_fittest_member():                 Return the member with highest fitness
    """

    def __init__(self, members: Sequence[Member]):
        """
        Parameters:
            members: the members of the population, in order
        """
        self.members: list[Member] = list(members)

    def assign_survival_chances(self, fitness_sum: int) -> None:
        """
        Make each member's survival chance proportional to its fitness.

        If no member has a positive fitness, every member gets the same chance.
        Either way the survival chances add up to 1.

        Parameters:
            fitness_sum: the sum of the fitness of all members
        """
        if fitness_sum > 0:
            for member in self.members:
                member.survival_chance = member.fitness / fitness_sum
        else:
            uniform_chance = 1 / len(self.members)
            for member in self.members:
                member.survival_chance = uniform_chance

    def select_member(self) -> Member:
        """
        Select a member at random, so that the probability of selecting
        it equals its survival chance (roulette wheel selection).

        Because of floating point rounding the survival chances may add
        up to slightly less than 1, in which case the last member is
        returned when the random draw exceeds their sum.

        Returns:
            the selected member
        """
        r = random.random()
        for member in self.members:
            if r < member.survival_chance:
                return member
            r -= member.survival_chance

        return self.members[-1]

    def get_fittest_member(self) -> Member | None:
        """
        Find and return the member with the highest fitness in the population.
        Ties are resolved in favor of the member appearing first.

        Returns:
            The member with the highest fitness value, or None if the population is empty
        """
        if not self.members:
            return None
        return max(self.members, key=lambda member: member.fitness)

    def __getitem__(self, index: int) -> Member:
        return self.members[index]

    def __iter__(self) -> Iterator[Member]:
        return iter(self.members)

    def __len__(self):
        return len(self.members)
