"""
Batching Module

This module splits a population into contiguous ranges of indices, one for
each worker of a parallel phase.

Classes:
    Batch: Half-open range [start, end) of population indices

Functions:
    build_batches: Partition [0, n_elements) into batches
"""

from typing import NamedTuple

class Batch(NamedTuple):
    start: int
    end  : int

    def __len__(self):
        return self.end - self.start

    def indices(self) -> range:
        return range(self.start, self.end)

def build_batches(n_elements: int, n_batches: int) -> list[Batch]:
    """
    Partition [0, n_elements) into 'n_batches' contiguous batches.

    Every batch holds 'n_elements // n_batches' elements, except for the
    last one which extends to 'n_elements' and so absorbs the remainder.
    The batches are disjoint and their union is [0, n_elements).

    Parameters:
        n_elements: number of elements to partition
        n_batches:  number of batches (callers keep it within [1, n_elements])

    Returns:
        the list of batches, in index order (empty if there are no elements)

    Raises:
        ValueError: If 'n_batches' is smaller than 1
    """
    if n_batches < 1:
        raise ValueError(f"Number of batches must be at least 1, got {n_batches}")
    if n_elements == 0:
        return []

    size    = n_elements // n_batches
    batches = [Batch(i * size, (i + 1) * size) for i in range(n_batches)]

    # The last batch absorbs the remainder
    batches[-1] = Batch(batches[-1].start, n_elements)

    return batches
