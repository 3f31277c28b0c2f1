# MIT License (see LICENSE)
import numpy as np
import pytest
from rope_sim.types import Node
from rope_sim.errors import ConfigurationError, TopologyError
from rope_sim.constraints.solver import (
    DistanceConstraint,
    relax_constraints,
    break_constraints,
    validate_constraints,
)
from rope_sim.core.invariants import constraint_errors


def test_rest_length_is_fixed_point():
    """A pair exactly at rest length is left untouched by solve()."""
    nodes = [Node(position=(0, 0)), Node(position=(0, 50))]
    c = DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0)
    c.solve(nodes)

    np.testing.assert_allclose(nodes[0].position, [0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(nodes[1].position, [0.0, 50.0], atol=1e-12)


def test_correction_is_mass_weighted():
    """Displacement ratio |da| / |db| equals m_b / m_a."""
    nodes = [Node(position=(0, 0), mass=1.0), Node(position=(60, 0), mass=3.0)]
    c = DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0)
    c.solve(nodes)

    da = nodes[0].position - np.array([0.0, 0.0])
    db = nodes[1].position - np.array([60.0, 0.0])
    np.testing.assert_allclose(da, [2.5, 0.0])
    np.testing.assert_allclose(db, [-2.5 / 3.0, 0.0])
    assert np.linalg.norm(da) / np.linalg.norm(db) == pytest.approx(3.0)


def test_stretched_pair_is_pulled_together():
    nodes = [Node(position=(0, 0)), Node(position=(60, 0))]
    DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0).solve(nodes)

    # Equal masses and stiffness 1 close the whole error in one solve.
    np.testing.assert_allclose(nodes[0].position, [5.0, 0.0])
    np.testing.assert_allclose(nodes[1].position, [55.0, 0.0])


def test_compression_correction_is_halved():
    nodes = [Node(position=(0, 0)), Node(position=(40, 0))]
    DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0).solve(nodes)

    np.testing.assert_allclose(nodes[0].position, [-2.5, 0.0])
    np.testing.assert_allclose(nodes[1].position, [42.5, 0.0])


def test_fixed_endpoint_keeps_its_position():
    nodes = [Node(position=(0, 0), fixed=True), Node(position=(0, 60))]
    DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0).solve(nodes)

    np.testing.assert_allclose(nodes[0].position, [0.0, 0.0])
    np.testing.assert_allclose(nodes[1].position, [0.0, 55.0])


def test_coincident_nodes_get_no_correction():
    nodes = [Node(position=(10, 10)), Node(position=(10, 10))]
    DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0).solve(nodes)

    np.testing.assert_array_equal(nodes[0].position, [10.0, 10.0])
    np.testing.assert_array_equal(nodes[1].position, [10.0, 10.0])
    assert np.all(np.isfinite(nodes[1].position))


def test_stiffness_scales_correction():
    nodes = [Node(position=(0, 0)), Node(position=(60, 0))]
    DistanceConstraint(a=0, b=1, break_threshold=250.0, length=50.0, stiffness=0.5).solve(nodes)

    np.testing.assert_allclose(nodes[1].position, [57.5, 0.0])


def test_relaxation_reduces_chain_error():
    """More sweeps bring a stretched chain closer to its rest lengths."""
    def stretched():
        nodes = [Node(position=(0, 0), fixed=True)]
        nodes += [Node(position=(0, 70.0 * i)) for i in range(1, 6)]
        cons = [DistanceConstraint(a=i - 1, b=i, break_threshold=250.0) for i in range(1, 6)]
        return nodes, cons

    nodes, cons = stretched()
    before = sum(constraint_errors(cons, nodes))

    relax_constraints(cons, nodes, iters=1)
    after_one = sum(constraint_errors(cons, nodes))

    nodes, cons = stretched()
    relax_constraints(cons, nodes, iters=20)
    after_many = sum(constraint_errors(cons, nodes))

    assert before == pytest.approx(100.0)
    assert after_one < before
    assert after_many < after_one


def test_zero_iterations_is_noop():
    nodes = [Node(position=(0, 0)), Node(position=(0, 80))]
    cons = [DistanceConstraint(a=0, b=1, break_threshold=250.0)]
    relax_constraints(cons, nodes, iters=0)
    np.testing.assert_allclose(nodes[1].position, [0.0, 80.0])


def test_break_removes_overstretched_constraints():
    nodes = [Node(position=(0, 0)), Node(position=(0, 100)), Node(position=(0, 400))]
    cons = [
        DistanceConstraint(a=0, b=1, break_threshold=250.0),
        DistanceConstraint(a=1, b=2, break_threshold=250.0),
    ]
    kept = break_constraints(cons, nodes)

    assert kept == [cons[0]]
    # The input list is not modified.
    assert len(cons) == 2


def test_break_threshold_is_inclusive():
    nodes = [Node(position=(0, 0)), Node(position=(0, 250))]
    cons = [DistanceConstraint(a=0, b=1, break_threshold=250.0)]
    assert break_constraints(cons, nodes) == []


def test_break_filter_is_idempotent():
    nodes = [Node(position=(0, 0)), Node(position=(0, 100)), Node(position=(0, 400))]
    cons = [
        DistanceConstraint(a=0, b=1, break_threshold=250.0),
        DistanceConstraint(a=1, b=2, break_threshold=250.0),
    ]
    once = break_constraints(cons, nodes)
    twice = break_constraints(once, nodes)
    assert once == twice


def test_self_referencing_constraint_rejected():
    with pytest.raises(ConfigurationError):
        DistanceConstraint(a=2, b=2, break_threshold=250.0)


def test_out_of_range_index_rejected():
    cons = [DistanceConstraint(a=0, b=3, break_threshold=250.0)]
    with pytest.raises(TopologyError):
        validate_constraints(cons, node_count=3)


def test_negative_index_rejected():
    cons = [DistanceConstraint(a=-1, b=0, break_threshold=250.0)]
    with pytest.raises(TopologyError):
        validate_constraints(cons, node_count=3)


def test_duplicate_pair_rejected():
    cons = [
        DistanceConstraint(a=0, b=1, break_threshold=250.0),
        DistanceConstraint(a=1, b=0, break_threshold=250.0),
    ]
    with pytest.raises(ConfigurationError):
        validate_constraints(cons, node_count=2)


@pytest.mark.parametrize("kwargs", [
    {"length": -10.0},
    {"length": 0.0},
    {"length": float("nan")},
    {"stiffness": -3.0},
    {"stiffness": float("nan")},
])
def test_invalid_constraint_parameters_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        DistanceConstraint(a=0, b=1, break_threshold=250.0, **kwargs)


@pytest.mark.parametrize("a,b", [(0, 1.0), (0.0, 1), (True, 0)])
def test_non_integer_index_rejected(a, b):
    cons = [DistanceConstraint(a=a, b=b, break_threshold=250.0)]
    with pytest.raises(TopologyError):
        validate_constraints(cons, node_count=2)


def test_numpy_integer_index_accepted():
    cons = [DistanceConstraint(a=np.int64(0), b=np.int64(1), break_threshold=250.0)]
    validate_constraints(cons, node_count=2)
