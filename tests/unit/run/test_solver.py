"""
Unit tests for Solver class.
"""

import pytest
from unittest.mock import Mock

from genetipy.genotype.innovation_tracker import InnovationTracker
from genetipy.pool.batching import Batch
from genetipy.run.config import Config
from genetipy.run.solver import Solver


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def config():
    config = Config()
    config.population_size = 10
    config.max_generations = 5
    config.mutation_chance = 0.0
    config.n_batches       = 3
    return config


class FailingMember:
    fitness         = 0
    survival_chance = 0.0

    def compute_fitness(self):
        raise ValueError("broken dataset")

    def distance(self, other):
        return 0.0

    def crossover(self, other):
        return self

    def mutate(self):
        pass


# ============================================================================
# Test Construction
# ============================================================================

class TestSolverInit:

    def test_empty_population_raises(self, config):
        config.population_size = 0
        with pytest.raises(ValueError, match="Population size"):
            Solver([], config)

    def test_population_size_mismatch_raises(self, config, make_members):
        with pytest.raises(ValueError, match="expected 10, found 9"):
            Solver(make_members(range(9)), config)

    def test_zero_generations_raises(self, config, make_members):
        config.max_generations = 0
        with pytest.raises(ValueError, match="generations"):
            Solver(make_members(range(10)), config)

    def test_batches(self, config, make_members):
        solver = Solver(make_members(range(10)), config)
        assert solver._batches == [Batch(0, 3), Batch(3, 6), Batch(6, 10)]

    @pytest.mark.parametrize("n_batches, expected", [(0, 1), (1, 1), (10, 10), (64, 10)])
    def test_number_of_batches_clamped(self, config, make_members, n_batches, expected):
        config.n_batches = n_batches
        solver = Solver(make_members(range(10)), config)
        assert len(solver._batches) == expected


# ============================================================================
# Test Solve
# ============================================================================

class TestSolve:

    def test_single_member_single_generation(self, config, make_members):
        config.population_size = 1
        config.max_generations = 1
        members = make_members([7])

        best = Solver(members, config).solve()

        assert best is members[0]
        assert best.fitness == 7
        assert best.compute_fitness_calls == 1
        assert best.crossover_calls == 0
        assert best.mutate_calls == 0

    def test_runs_all_generations(self, config, make_members):
        solver = Solver(make_members(range(10)), config)
        solver.solve()
        assert solver.generation_counter == 5

    @pytest.mark.parametrize("n_batches", [1, 3, 10])
    def test_population_size_is_constant(self, config, make_members, n_batches):
        config.n_batches = n_batches
        solver = Solver(make_members(range(10)), config)
        solver.solve()
        assert len(solver.population) == 10
        assert all(member is not None for member in solver.population)

    def test_returns_fittest_member_of_last_generation(self, config, make_members):
        solver = Solver(make_members([3, 1, 4, 1, 5, 9, 2, 6, 5, 3]), config)
        best = solver.solve()
        assert best is solver.population.get_fittest_member()
        assert best.fitness == max(member.fitness for member in solver.population)

    def test_fitness_computed_once_per_generation(self, config, make_members):
        config.max_generations = 1
        members = make_members(range(10))
        Solver(members, config).solve()
        assert all(member.compute_fitness_calls == 1 for member in members)

    def test_survival_chances_sum_to_one(self, config, make_members):
        config.max_generations = 2
        members = make_members([3, 1, 4, 1, 5, 9, 2, 6, 5, 3])
        Solver(members, config).solve()
        assert sum(member.survival_chance for member in members) == pytest.approx(1.0)
        assert members[5].survival_chance == pytest.approx(9 / 39)

    def test_zero_fitness_population_evolves(self, config, make_members):
        members = make_members([0] * 10)
        best = Solver(members, config).solve()
        assert best.fitness == 0
        assert all(member.survival_chance == pytest.approx(0.1) for member in members)

    def test_no_mutation(self, config, make_members):
        config.max_generations = 2
        solver = Solver(make_members(range(10)), config)
        solver.solve()
        assert all(member.mutate_calls == 0 for member in solver.population)

    def test_every_child_mutated(self, config, make_members):
        config.max_generations = 2
        config.mutation_chance = 1.0
        solver = Solver(make_members(range(10)), config)
        solver.solve()
        assert all(member.mutate_calls == 1 for member in solver.population)

    def test_speciation_computes_all_distances(self, config, make_members):
        config.max_generations = 1
        config.speciation = True
        members = make_members(range(10))
        Solver(members, config).solve()
        assert all(member.distance_calls == 10 for member in members)

    def test_no_speciation_no_distances(self, config, make_members):
        config.max_generations = 1
        members = make_members(range(10))
        Solver(members, config).solve()
        assert all(member.distance_calls == 0 for member in members)

    def test_tracker_cleared_every_generation(self, config, make_members):
        tracker = Mock(spec=InnovationTracker)
        Solver(make_members(range(10)), config, tracker).solve()
        assert tracker.clear.call_count == 5

    def test_worker_exception_aborts_run(self, config):
        config.population_size = 2
        config.n_batches = 2
        with pytest.raises(ValueError, match="broken dataset"):
            Solver([FailingMember(), FailingMember()], config).solve()


# ============================================================================
# Test Reporting
# ============================================================================

class TestVerbose:

    def test_progress_written_to_stdout(self, config, make_members, capsys):
        config.verbose = True
        Solver(make_members(range(10)), config).solve()
        out = capsys.readouterr().out

        assert out.startswith("genetipy - GA solver")
        assert "Population size:        10" in out
        for generation in range(1, 6):
            assert f"[GENERATION {generation}] Best fitness score:" in out
        assert out.endswith("\n")

    def test_silent_by_default(self, config, make_members, capsys):
        Solver(make_members(range(10)), config).solve()
        assert capsys.readouterr().out == ""
