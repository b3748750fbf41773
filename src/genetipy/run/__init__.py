"""
Run Package

This package contains what is needed to configure and execute a run of the
genetic algorithm.

Modules:
    config:      Config class, parsing INI configuration files
    dataset:     DataEntry class and DataSet type
    solver:      Solver class, the generation loop of the genetic algorithm
    neat_solver: NeatSolver class, the genetic algorithm applied to NEAT genomes

Exported Classes:
    Config:    Configuration parameters
    DataEntry: One (inputs, expected outputs) sample
    Solver:    Runs the genetic algorithm on a population of members

NeatSolver is imported from 'genetipy.run.neat_solver' (or from 'genetipy'),
since it depends on the genotype package, which itself depends on this one.
"""

from genetipy.run.config  import Config
from genetipy.run.dataset import DataEntry, DataSet
from genetipy.run.solver  import Solver

__all__ = ['Config',
           'DataEntry',
           'DataSet',
           'Solver']
