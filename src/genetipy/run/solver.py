"""
Genetic Algorithm Solver Module

This module implements the generation loop of the genetic algorithm, with
built-in support for thread-based parallelization using joblib.

A run evolves a fixed-size population through a given number of generations
and returns the fittest member of the final generation.

Classes:
    Solver: Runs the genetic algorithm on a population of members
"""

import random
import sys
import threading
from joblib import Parallel, delayed
from typing import Sequence, TYPE_CHECKING

from genetipy.run.config import Config
from genetipy.pool       import Batch, Member, Population, build_batches
if TYPE_CHECKING:
    from genetipy.genotype import InnovationTracker

class Solver:
    """
    Genetic algorithm driving a population of members through generations.

    Each generation consists of the following phases:
    - speciation (optional): every member measures its distance to every member
    - fitness evaluation:    every member computes its fitness
    - selection:             every member gets a survival chance proportional to its fitness
    - breeding:              every slot of the next generation is filled with the child
                             of two parents selected at random, mutated with probability
                             'mutation_chance'

    The work of each phase is split into batches of contiguous members and the
    batches are processed concurrently, one joblib worker (a thread) per batch.
    A phase starts only after all workers of the previous phase are done.

    The run stops after 'max_generations' generations; the member with the highest
    fitness in the last generation is the result.

    Public Properties:
        population:         The current generation
        generation_counter: The number of the current generation (starting from 1)

    Public Methods:
        solve(): Run the genetic algorithm and return the fittest member
    """

    def __init__(self,
                 members           : Sequence[Member],
                 config            : Config,
                 innovation_tracker: 'InnovationTracker | None' = None):
        """
        Initialize the solver.

        Parameters:
            members:            the members of the first generation (as many as 'population_size')
            config:             Stores configuration parameters
            innovation_tracker: if given, its history is cleared at the start of every generation

        Raises:
            ValueError: If the population is empty, the number of members does not
                        match 'population_size', or 'max_generations' is zero
        """
        if config.population_size == 0:
            raise ValueError("Population size must be positive")
        if len(members) != config.population_size:
            raise ValueError(f"Initial population doesn't match population size "
                             f"(expected {config.population_size}, found {len(members)})")
        if config.max_generations == 0:
            raise ValueError("The maximum number of generations must be positive")

        self._config             : Config     = config
        self._innovation_tracker              = innovation_tracker
        self._population         : Population = Population(members)
        self._generation_counter : int        = 0

        # One batch for each worker, never more batches than members
        self._n_batches: int         = min(max(config.n_batches, 1), config.population_size)
        self._batches  : list[Batch] = build_batches(config.population_size, self._n_batches)

        # Sum of the fitness of the current generation, shared by the workers
        self._fitness_sum : int            = 0
        self._fitness_lock: threading.Lock = threading.Lock()

    @property
    def population(self) -> Population:
        return self._population

    @property
    def generation_counter(self) -> int:
        return self._generation_counter

    def solve(self) -> Member:
        """
        Run the genetic algorithm up to the last generation.

        Returns:
            the member of the last generation with the highest fitness
        """
        if self._config.verbose:
            self._report_header()

        with Parallel(n_jobs=len(self._batches), require="sharedmem") as parallel:
            while True:
                self._generation_counter += 1

                # Structural mutations are only deduplicated within a generation
                if self._innovation_tracker is not None:
                    self._innovation_tracker.clear()

                if self._config.speciation:
                    parallel(delayed(self._compute_distances)(batch) for batch in self._batches)

                self._fitness_sum = 0
                parallel(delayed(self._compute_fitness)(batch) for batch in self._batches)

                if self._config.verbose:
                    self._report_progress()

                if self._generation_counter >= self._config.max_generations:
                    break

                self._population.assign_survival_chances(self._fitness_sum)

                # Each worker fills its own slots of the next generation
                offspring = [None] * len(self._population)
                parallel(delayed(self._breed)(batch, offspring) for batch in self._batches)
                self._population = Population(offspring)

        if self._config.verbose:
            sys.stdout.write('\n')
            sys.stdout.flush()

        return self._population.get_fittest_member()

    def _compute_distances(self, batch: Batch) -> None:
        """
        Let each member of the batch measure its distance to every member of the population.
        """
        members = self._population.members
        for i in batch.indices():
            for other in members:
                members[i].distance(other)

    def _compute_fitness(self, batch: Batch) -> None:
        """
        Compute the fitness of each member of the batch and add it to the fitness sum.
        """
        members = self._population.members
        for i in batch.indices():
            members[i].compute_fitness()
            with self._fitness_lock:
                self._fitness_sum += members[i].fitness

    def _breed(self, batch: Batch, offspring: list) -> None:
        """
        Create the members of the next generation occupying the slots of the batch.

        Parameters:
            batch:     the slots to fill
            offspring: the next generation, being filled by all workers
        """
        for i in batch.indices():
            parent1 = self._population.select_member()
            parent2 = self._population.select_member()

            child = parent1.crossover(parent2)
            if random.random() < self._config.mutation_chance:
                child.mutate()

            offspring[i] = child

    def _report_header(self):
        s  = "genetipy - GA solver\n"
        s += f"\tPopulation size:        {self._config.population_size}\n"
        s += f"\tMax generation:         {self._config.max_generations}\n"
        s += f"\tMutation chance:        {self._config.mutation_chance:.2f}\n"
        s += f"\tNumber of jobs/batches: {self._n_batches}\n\n"
        sys.stdout.write(s)
        sys.stdout.flush()

    def _report_progress(self):
        best_member = self._population.get_fittest_member()
        s = f"[GENERATION {self._generation_counter}] Best fitness score: {best_member.fitness}"
        sys.stdout.write('\r' + ' ' * 80 + '\r' + s)
        sys.stdout.flush()
