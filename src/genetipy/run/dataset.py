"""
Dataset Module

This module defines the data a NEAT genome is evaluated against: an ordered
collection of (inputs, expected outputs) pairs, fixed before the run starts
and only read while the run is in progress.

Classes:
    DataEntry: A single input vector together with its expected output vector

Type Aliases:
    DataSet: Sequence of DataEntry
"""

from typing import NamedTuple, Sequence

class DataEntry(NamedTuple):
    """
    One sample of a dataset.

    Attributes:
        inputs:  the values fed to the input nodes of a network
        outputs: the values the output nodes are expected to produce
    """
    inputs : tuple[float, ...]
    outputs: tuple[float, ...]

    @classmethod
    def from_lists(cls, inputs: Sequence[float], outputs: Sequence[float]) -> 'DataEntry':
        """Build an entry from any two sequences of numbers."""
        return cls(tuple(float(x) for x in inputs), tuple(float(y) for y in outputs))

DataSet = Sequence[DataEntry]
