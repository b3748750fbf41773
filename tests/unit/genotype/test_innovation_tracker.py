"""
Unit tests for InnovationTracker class.
"""

import pytest
import threading

from genetipy.genotype.connection_gene import ConnectionGene
from genetipy.genotype.innovation_tracker import InnovationTracker, MutationRecord, MutationType
from genetipy.genotype.node_gene import NodeType
from genetipy.run.config import Config


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def config():
    config = Config()
    config.num_inputs  = 3
    config.num_outputs = 2
    return config


@pytest.fixture
def tracker(config):
    return InnovationTracker(config)


# ============================================================================
# Counters
# ============================================================================

class TestCounters:

    def test_innovation_numbers_start_at_zero_and_increase(self, tracker):
        assert [tracker.next_innovation_number() for _ in range(4)] == [0, 1, 2, 3]

    def test_node_ids_follow_input_and_output_nodes(self, tracker):
        assert tracker.next_node_id() == 5
        assert tracker.next_node_id() == 6

    def test_clear_does_not_reset_counters(self, tracker):
        tracker.get_connection(0, 3)
        tracker.clear()
        assert tracker.next_innovation_number() == 1


# ============================================================================
# Connections
# ============================================================================

class TestGetConnection:

    def test_same_endpoints_same_innovation_and_weight(self, tracker):
        conn1 = tracker.get_connection(0, 3)
        conn2 = tracker.get_connection(0, 3)
        assert conn1.innovation == conn2.innovation
        assert conn1.weight == conn2.weight
        assert len(tracker) == 1

    def test_returns_independent_copies(self, tracker):
        conn1 = tracker.get_connection(0, 3)
        conn1.weight = 123.0
        conn1.enabled = False
        conn2 = tracker.get_connection(0, 3)
        assert conn2.weight != 123.0
        assert conn2.enabled is True

    def test_different_endpoints_different_innovations(self, tracker):
        conn1 = tracker.get_connection(0, 3)
        conn2 = tracker.get_connection(3, 0)
        conn3 = tracker.get_connection(1, 3)
        assert len({conn1.innovation, conn2.innovation, conn3.innovation}) == 3

    def test_weight_within_bounds(self, tracker, config):
        for node_in in range(3):
            conn = tracker.get_connection(node_in, 4)
            assert config.min_weight <= conn.weight <= config.max_weight

    def test_after_clear_new_innovation_is_assigned(self, tracker):
        conn1 = tracker.get_connection(0, 3)
        tracker.clear()
        assert len(tracker) == 0
        conn2 = tracker.get_connection(0, 3)
        assert conn2.innovation > conn1.innovation


# ============================================================================
# Splits
# ============================================================================

class TestGetSplit:

    def test_split_genes(self, tracker, config):
        conn = ConnectionGene(0, 3, 0.5, 0, config)
        node, conn1, conn2 = tracker.get_split(conn, 1)

        assert node.type == NodeType.HIDDEN
        assert node.layer == 1
        assert node.id == 5
        assert conn1.endpoints == (0, node.id)
        assert conn2.endpoints == (node.id, 3)
        assert conn1.innovation < conn2.innovation

    def test_same_split_reuses_genes(self, tracker, config):
        conn = ConnectionGene(0, 3, 0.5, 0, config)
        node_a, conn1_a, conn2_a = tracker.get_split(conn, 1)
        node_b, conn1_b, conn2_b = tracker.get_split(ConnectionGene(0, 3, -0.2, 0, config), 1)

        assert node_a.id == node_b.id
        assert (conn1_a.innovation, conn2_a.innovation) == (conn1_b.innovation, conn2_b.innovation)
        assert node_a is not node_b
        assert conn1_a is not conn1_b

    def test_split_and_connection_are_distinct_mutations(self, tracker, config):
        tracker.get_connection(0, 3)
        tracker.get_split(ConnectionGene(0, 3, 0.5, 0, config), 1)
        assert len(tracker) == 2


class TestGetOrCreate:

    def test_factory_called_once(self, tracker, config):
        calls = []

        def factory():
            calls.append(1)
            conn = ConnectionGene(1, 4, 0.0, tracker.next_innovation_number(), config)
            return MutationRecord(MutationType.ADD_CONNECTION, (conn,))

        record1 = tracker.get_or_create((1, 4), MutationType.ADD_CONNECTION, factory)
        record2 = tracker.get_or_create((1, 4), MutationType.ADD_CONNECTION, factory)
        assert record1 is record2
        assert len(calls) == 1

    def test_concurrent_requests_agree(self, tracker):
        results = []
        lock = threading.Lock()

        def worker():
            innovations = [tracker.get_connection(i, 3 + i % 2).innovation for i in range(3)]
            with lock:
                results.append(innovations)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(result == results[0] for result in results)
        assert len(tracker) == 3
