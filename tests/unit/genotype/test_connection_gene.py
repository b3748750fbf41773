"""
Unit tests for ConnectionGene class.
"""

import pytest
from unittest.mock import Mock, patch

from genetipy.genotype.connection_gene import ConnectionGene
from genetipy.run.config import Config


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def config():
    config = Mock(spec=Config)
    config.min_weight = -1.0
    config.max_weight = 1.0
    config.weight_mutate_prob = 0.10
    return config


# ============================================================================
# Tests
# ============================================================================

class TestConnectionGeneInit:

    def test_attributes(self, config):
        conn = ConnectionGene(0, 3, 0.5, 7, config)
        assert conn.node_in == 0
        assert conn.node_out == 3
        assert conn.weight == 0.5
        assert conn.innovation == 7
        assert conn.enabled is True

    def test_disabled(self, config):
        conn = ConnectionGene(0, 3, 0.5, 7, config, enabled=False)
        assert conn.enabled is False

    def test_endpoints(self, config):
        assert ConnectionGene(4, 9, 0.0, 1, config).endpoints == (4, 9)


class TestConnectionGeneMutate:

    def test_weight_replaced_when_draw_below_probability(self, config):
        conn = ConnectionGene(0, 1, 0.5, 0, config)
        with patch('random.random', return_value=0.05), patch('random.uniform', return_value=-0.75):
            conn.mutate()
        assert conn.weight == -0.75

    def test_weight_kept_when_draw_above_probability(self, config):
        conn = ConnectionGene(0, 1, 0.5, 0, config)
        with patch('random.random', return_value=0.5):
            conn.mutate()
        assert conn.weight == 0.5

    def test_new_weights_within_bounds(self, config):
        config.weight_mutate_prob = 1.0
        conn = ConnectionGene(0, 1, 0.5, 0, config)
        for _ in range(200):
            conn.mutate()
            assert -1.0 <= conn.weight <= 1.0

    def test_endpoints_and_innovation_never_change(self, config):
        config.weight_mutate_prob = 1.0
        conn = ConnectionGene(2, 5, 0.5, 11, config)
        for _ in range(20):
            conn.mutate()
        assert conn.endpoints == (2, 5)
        assert conn.innovation == 11


class TestConnectionGeneStrings:

    def test_str(self, config):
        assert str(ConnectionGene(1, 3, 0.5, 2, config)) == "[002,E,01=>03,+0.50]"
        assert str(ConnectionGene(1, 3, -0.25, 2, config, enabled=False)) == "[002,D,01=>03,-0.25]"
