"""
Single Machine Scheduling with the Genetic Algorithm

This module shows how to evolve a problem-specific member with the generic
Solver: the members are orders in which a set of jobs is processed on a single
machine, and the goal is to minimize the total tardiness.

The Problem:
    Each job has an execution time and a due time. Jobs are processed one after
    the other; a job finishing after its due time contributes the delay to the
    total tardiness (capped at MAX_TARDINESS).

Fitness Function:
    Fitness = (MAX_TARDINESS + t) * (MAX_TARDINESS - t) = MAX_TARDINESS² - t²

    where 't' is the total tardiness, so the fitness is maximal (10⁶) for a
    schedule where no job is late.

Genetic Operators:
    crossover: the child copies the sequence of the fitter parent
    mutation:  the sequence is replaced by a new random permutation

Classes:
    Job:      A job to schedule
    Schedule: An order of execution of the jobs (a Member)

Usage:
    python examples/trial_scheduling.py
"""

import math
import random
from typing import NamedTuple

from genetipy import Config, Solver

MAX_TARDINESS = 1000

class Job(NamedTuple):
    id            : int
    execution_time: int
    due_time      : int

JOBS = [
    Job( 0, 4, 10),
    Job( 1, 3,  8),
    Job( 2, 2,  7),
    Job( 3, 5, 12),
    Job( 4, 7, 15),
    Job( 5, 3, 14),
    Job( 6, 6, 13),
    Job( 7, 2,  9),
    Job( 8, 4, 11),
    Job( 9, 5, 18),
    Job(10, 6, 20),
    Job(11, 2, 10),
    Job(12, 3, 17),
    Job(13, 5, 16),
    Job(14, 4, 19),
]

def compute_tardiness(sequence: list[int]) -> int:
    """
    Total tardiness of the jobs processed in the given order.

    A job starting at time 's' occupies the time slots s, s+1, ..., s+duration-1
    and is late if its last slot comes after its due time.
    """
    tardiness  = 0
    start_time = 0
    for job_id in sequence:
        end_time = start_time + JOBS[job_id].execution_time - 1
        if end_time > JOBS[job_id].due_time:
            tardiness = min(tardiness + end_time - JOBS[job_id].due_time, MAX_TARDINESS)
        start_time = end_time + 1

    return tardiness

class Schedule:
    """
    An order in which to process the jobs.

    Satisfies the Member protocol, so that a population of
    schedules can be evolved by the genetic algorithm Solver.
    """

    def __init__(self, sequence: list[int] | None = None):
        self.sequence       : list[int] = sequence if sequence is not None else self._random_sequence()
        self.fitness        : int       = 0
        self.survival_chance: float     = 0.0

    @staticmethod
    def _random_sequence() -> list[int]:
        return random.sample(range(len(JOBS)), len(JOBS))

    def compute_fitness(self) -> None:
        tardiness = compute_tardiness(self.sequence)
        self.fitness = (MAX_TARDINESS + tardiness) * (MAX_TARDINESS - tardiness)

    def distance(self, other: 'Schedule') -> float:
        # speciation is not used for this problem
        return 0.0

    def crossover(self, other: 'Schedule') -> 'Schedule':
        fitter = self if self.fitness >= other.fitness else other
        return Schedule(list(fitter.sequence))

    def mutate(self) -> None:
        self.sequence = self._random_sequence()

if __name__ == "__main__":

    config = Config()
    config.population_size = 1000
    config.max_generations = 300
    config.mutation_chance = 0.05
    config.n_batches       = 10
    config.verbose         = True

    initial_population = [Schedule() for _ in range(config.population_size)]

    best = Solver(initial_population, config).solve()
    best_tardiness = round(math.sqrt(MAX_TARDINESS * MAX_TARDINESS - best.fitness))

    print("Best sequence: ", best.sequence)
    print("Best tardiness:", best_tardiness)
