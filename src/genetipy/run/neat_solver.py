"""
NEAT Solver Module

This module connects the NEAT genome to the genetic algorithm solver.

Classes:
    NeatSolver: Evolves NEAT genomes to reproduce a dataset
"""

import copy

from genetipy.run.config                  import Config
from genetipy.run.dataset                 import DataSet
from genetipy.run.solver                  import Solver
from genetipy.genotype.genome             import Genome
from genetipy.genotype.innovation_tracker import InnovationTracker

class NeatSolver:
    """
    Evolves a population of NEAT genomes, fitting their networks to a dataset.

    The first generation consists of 'population_size' minimal genomes (input and
    output nodes only), all sharing one InnovationTracker and the dataset. The run
    is delegated to a Solver with speciation enabled, so that the fitness of each
    genome is shared among the genomes similar to it.

    Public Properties:
        tracker: The InnovationTracker of this run
        solver:  The underlying genetic algorithm Solver

    Public Methods:
        solve(): Run NEAT and return the fittest genome of the last generation
    """

    def __init__(self, config: Config, dataset: DataSet):
        """
        Parameters:
            config:  Stores configuration parameters; 'num_inputs' and 'num_outputs' must be set
            dataset: The (inputs, outputs) pairs the networks must reproduce

        Raises:
            ValueError: If the network size is not configured, or the Solver rejects the configuration
        """
        if not config.num_inputs or not config.num_outputs:
            raise ValueError("NEAT requires positive 'num_inputs' and 'num_outputs' in the configuration")

        # Speciation is part of NEAT; leave the caller's Config untouched
        self._config = copy.copy(config)
        self._config.speciation = True

        self._tracker = InnovationTracker(self._config)
        genomes = [Genome(self._config, self._tracker, dataset) for _ in range(self._config.population_size)]
        self._solver = Solver(genomes, self._config, self._tracker)

    @property
    def tracker(self) -> InnovationTracker:
        return self._tracker

    @property
    def solver(self) -> Solver:
        return self._solver

    def solve(self) -> Genome:
        return self._solver.solve()
