# MIT License (see LICENSE)
"""
rope_sim - A 2D point-mass-and-rope simulation.

A chain of point masses is held together by breakable distance constraints
and integrated under gravity, drag and a pointer-driven wind field.
Dragging the pointer with the cutting button held severs the rope.

Main entry points:
    - Simulation: The world containing nodes and constraints.
    - SimConfig: Tunable parameters.
    - PointerInput: Per-tick pointer snapshot.
    - Node, DistanceConstraint: The building blocks.

Submodules:
    - core: Force generators, integrators and diagnostics.
    - constraints: Distance constraints and the relaxation solver.
    - collision: Cutting test for pointer gestures.
    - io: JSON config files.
    - renderer: Optional visualization adapters.

Example:
    from rope_sim import Simulation, PointerInput
    
    sim = Simulation.chain(width=800, height=600)
    sim.step(PointerInput(position=(400, 300), cutting=True))
    frame = sim.render_frame()
"""
from .scene import Simulation
from .config import SimConfig
from .types import Node, PointerInput, Segment, NodePoint, RenderFrame
from .constraints.solver import DistanceConstraint
from .errors import SimulationError, ConfigurationError, TopologyError

__all__ = [
    # Core simulation
    "Simulation",
    "SimConfig",
    # Building blocks
    "Node",
    "DistanceConstraint",
    # Input / output
    "PointerInput",
    "Segment",
    "NodePoint",
    "RenderFrame",
    # Errors
    "SimulationError",
    "ConfigurationError",
    "TopologyError",
]
