"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility."""
    np.random.seed(42)
    random.seed(42)

    yield

    np.random.seed(None)
    random.seed(None)


@pytest.fixture
def neat_config():
    """Default configuration for a network with 2 inputs and 1 output."""
    from genetipy.run.config import Config

    config = Config()
    config.num_inputs  = 2
    config.num_outputs = 1
    return config


@pytest.fixture
def tracker(neat_config):
    """A fresh innovation tracker for 'neat_config'."""
    from genetipy.genotype.innovation_tracker import InnovationTracker
    return InnovationTracker(neat_config)


@pytest.fixture
def xor_dataset():
    """The XOR truth table."""
    from genetipy.run.dataset import DataEntry
    return [DataEntry.from_lists([0, 0], [0]),
            DataEntry.from_lists([0, 1], [1]),
            DataEntry.from_lists([1, 0], [1]),
            DataEntry.from_lists([1, 1], [0])]
