# MIT License (see LICENSE)
import numpy as np
import pytest
from rope_sim.types import Node
from rope_sim.errors import ConfigurationError
from rope_sim.core.forces import apply_gravity, apply_linear_drag, apply_wind
from rope_sim.core.integrators import integrate, differentiate

G = np.array([0.0, 18.0])


def test_gravity_scales_with_mass():
    node = Node(position=(0, 0), mass=2.0)
    apply_gravity(node, G)
    np.testing.assert_allclose(node.force, [0.0, 36.0])


def test_drag_opposes_velocity():
    node = Node(position=(0, 0), velocity=(10.0, -4.0))
    apply_linear_drag(node, 0.5)
    np.testing.assert_allclose(node.force, [-5.0, 2.0])


def test_fixed_node_ignores_gravity_and_drag():
    node = Node(position=(0, 0), fixed=True, velocity=(3.0, 3.0))
    apply_gravity(node, G)
    apply_linear_drag(node, 0.5)
    np.testing.assert_allclose(node.force, [0.0, 0.0])


def test_integrate_semi_implicit_step():
    """v += a*dt first, then x += v*dt, and the old position is remembered."""
    node = Node(position=(0, 0))
    apply_gravity(node, G)
    integrate(node, 0.15)

    np.testing.assert_allclose(node.velocity, [0.0, 2.7])
    np.testing.assert_allclose(node.position, [0.0, 0.405])
    np.testing.assert_allclose(node.last_position, [0.0, 0.0])


def test_differentiate_recovers_velocity_from_displacement():
    """Positional corrections between integrate and differentiate change the velocity."""
    node = Node(position=(0, 0))
    apply_gravity(node, G)
    integrate(node, 0.15)
    node.add_offset(np.array([0.0, -0.105]))
    differentiate(node, 0.15)

    np.testing.assert_allclose(node.velocity, [0.0, 2.0])
    np.testing.assert_allclose(node.force, [0.0, 0.0])


def test_fixed_node_never_moves():
    node = Node(position=(5, 5), fixed=True)
    node.force += np.array([100.0, 100.0])
    for _ in range(10):
        integrate(node, 0.15)
        node.add_offset(np.array([1.0, 1.0]))
        differentiate(node, 0.15)

    np.testing.assert_allclose(node.position, [5.0, 5.0])
    np.testing.assert_allclose(node.velocity, [0.0, 0.0])


def test_last_position_defaults_to_position():
    node = Node(position=(3, 4))
    np.testing.assert_allclose(node.last_position, [3.0, 4.0])
    assert node.last_position is not node.position


@pytest.mark.parametrize("mass", [0.0, -1.0])
def test_non_positive_mass_rejected(mass):
    with pytest.raises(ConfigurationError):
        Node(position=(0, 0), mass=mass)


def test_wind_pushes_only_nearby_nodes():
    near = Node(position=(100, 100))
    edge = Node(position=(130, 100))
    far = Node(position=(200, 100))
    apply_wind(
        [near, edge, far],
        pointer=np.array([100.0, 100.0]),
        last_pointer=np.array([95.0, 100.0]),
        radius=30.0,
        scale=50.0,
    )

    np.testing.assert_allclose(near.force, [250.0, 0.0])
    # The pickup radius is exclusive.
    np.testing.assert_allclose(edge.force, [0.0, 0.0])
    np.testing.assert_allclose(far.force, [0.0, 0.0])


def test_still_pointer_makes_no_wind():
    node = Node(position=(100, 100))
    p = np.array([100.0, 100.0])
    apply_wind([node], p, p.copy(), radius=30.0, scale=50.0)
    np.testing.assert_allclose(node.force, [0.0, 0.0])
