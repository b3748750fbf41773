"""Fixtures shared by the unit tests."""

import random

import pytest


class StubMember:
    """A minimal member: its fitness is a fixed number."""

    def __init__(self, value=0):
        self.value                 = value
        self.fitness               = 0
        self.survival_chance       = 0.0
        self.compute_fitness_calls = 0
        self.distance_calls        = 0
        self.crossover_calls       = 0
        self.mutate_calls          = 0

    def compute_fitness(self):
        self.compute_fitness_calls += 1
        self.fitness = self.value

    def distance(self, other):
        self.distance_calls += 1
        return abs(self.value - other.value)

    def crossover(self, other):
        self.crossover_calls += 1
        return StubMember(max(self.value, other.value))

    def mutate(self):
        self.mutate_calls += 1
        self.value = random.randint(0, 100)


@pytest.fixture
def make_members():
    def _make(values):
        return [StubMember(value) for value in values]
    return _make
