# MIT License (see LICENSE)
"""
The simulation state and per-tick pipeline.

The Simulation class owns the node list, the shrinking list of active
constraints and the pointer position seen on the previous tick. Each call
to step() runs, in this fixed order:
    1. Gravity on every node.
    2. Drag on every node.
    3. Pointer wind, unless a wind-suppressing or cutting button is held.
    4. Integration (force -> position).
    5. Constraint relaxation, `relaxation_iters` Gauss-Seidel sweeps.
    6. Breaking of over-stretched constraints.
    7. Cutting of constraints crossed by the pointer sweep (cutting button).
    8. Velocity recovery from position deltas, force reset.
    9. Recording the pointer position for the next tick.

Structure:
    - User creates a Simulation, usually with Simulation.chain(width, height).
    - User calls sim.step(pointer) once per frame.
    - A renderer reads sim.render_frame().
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Sequence
import logging

import numpy as np

from .config import SimConfig
from .constants import ANCHOR_X_FRACTION, ANCHOR_Y_FRACTION
from .errors import ConfigurationError
from .types import Node, PointerInput, Segment, NodePoint, RenderFrame
from .util import f64
from .profiler import Profiler
from .core.forces import apply_gravity, apply_linear_drag, apply_wind
from .core.integrators import integrate, differentiate
from .constraints.solver import (
    DistanceConstraint,
    relax_constraints,
    break_constraints,
    validate_constraints,
)
from .collision.cutting import cut_constraints

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Rope simulation world.

    Attributes:
        config: Simulation parameters (timestep, gravity, solver settings...).
        nodes: Point masses. Never added to or removed from while stepping.
        constraints: Active distance constraints, referencing nodes by index.
        last_pointer: Pointer position recorded at the end of the previous
                      tick, or None before the pointer has been seen.
        profiler: Optional Profiler for per-stage timings.
        time: Elapsed simulation time.
        ticks: Number of completed steps.
    """
    config: SimConfig = field(default_factory=SimConfig)
    nodes: list[Node] = field(default_factory=list)
    constraints: list[DistanceConstraint] = field(default_factory=list)
    last_pointer: np.ndarray | tuple[float, float] | None = None
    profiler: Profiler | None = None
    time: float = 0.0
    ticks: int = 0

    def __post_init__(self) -> None:
        """Validate the topology and cache numpy forms of config vectors."""
        self._g = f64(self.config.gravity)
        if self.last_pointer is not None:
            self.last_pointer = f64(self.last_pointer)
        self.nodes = list(self.nodes)
        self.constraints = list(self.constraints)
        validate_constraints(self.constraints, len(self.nodes))
        logger.info(
            "Simulation created with %d nodes and %d constraints (dt=%g, relaxation_iters=%d)",
            len(self.nodes), len(self.constraints), self.config.dt, self.config.relaxation_iters,
        )

    @classmethod
    def chain(
        cls,
        width: float,
        height: float,
        config: SimConfig | None = None,
        masses: Sequence[float] | None = None,
        pointer: tuple[float, float] | None = None,
        profiler: Profiler | None = None,
    ) -> "Simulation":
        """
        Build the initial hanging rope for a viewport.

        Node 0 is the fixed anchor at (width/3, height/5); node i hangs
        i * rest_distance below it. Consecutive nodes are joined by
        constraints with the config's rest length, stiffness and break
        threshold.

        Args:
            width: Viewport width.
            height: Viewport height.
            config: Parameters, defaults to SimConfig().
            masses: Optional per-node masses. Defaults to config.node_mass
                    for every node.
            pointer: Pointer position at creation time, if known.
            profiler: Optional Profiler.

        Raises:
            ConfigurationError: For a non-positive viewport or a masses
                                sequence of the wrong length.
        """
        config = config or SimConfig()
        if not (width > 0 and height > 0):
            raise ConfigurationError(f"Viewport must have positive size, got {width}x{height}")
        if masses is None:
            masses = [config.node_mass] * config.node_count
        elif len(masses) != config.node_count:
            raise ConfigurationError(
                f"Expected {config.node_count} masses, got {len(masses)}"
            )

        origin = f64((width * ANCHOR_X_FRACTION, height * ANCHOR_Y_FRACTION))
        spacing = f64((0.0, config.rest_distance))

        nodes = []
        constraints = []
        for i in range(config.node_count):
            nodes.append(Node(position=origin + spacing * i, mass=masses[i], fixed=(i == 0)))
            if i > 0:
                constraints.append(DistanceConstraint(
                    a=i - 1,
                    b=i,
                    break_threshold=config.effective_break_threshold,
                    length=config.rest_distance,
                    stiffness=config.stiffness,
                ))

        return cls(
            config=config,
            nodes=nodes,
            constraints=constraints,
            last_pointer=pointer,
            profiler=profiler,
        )

    def add_constraint(
        self,
        a: int,
        b: int,
        break_threshold: float | None = None,
        length: float | None = None,
        stiffness: float | None = None,
    ) -> DistanceConstraint:
        """
        Join two existing nodes, using config values for omitted parameters.

        Raises:
            TopologyError: If a or b is not a valid node index.
            ConfigurationError: If a == b or the pair is already joined.
        """
        c = DistanceConstraint(
            a=a,
            b=b,
            break_threshold=self.config.effective_break_threshold if break_threshold is None else break_threshold,
            length=self.config.rest_distance if length is None else length,
            stiffness=self.config.stiffness if stiffness is None else stiffness,
        )
        validate_constraints(self.constraints + [c], len(self.nodes))
        self.constraints.append(c)
        return c

    def reset_pointer(self, position: tuple[float, float] | np.ndarray | None) -> None:
        """
        Forget pointer motion, e.g. when the pointer re-enters the viewport.

        The next tick then measures wind and cut sweeps from `position`.
        """
        self.last_pointer = None if position is None else f64(position)

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def step(self, pointer: PointerInput | None = None) -> None:
        """
        Advance the simulation by one fixed timestep.

        Args:
            pointer: Pointer snapshot for this tick. None means no pointer
                     interaction: no wind, no cut, and the recorded pointer
                     position is left as it is.
        """
        dt = self.config.dt

        if pointer is not None:
            current = pointer.position
            # First sighting of the pointer: no motion to measure yet.
            previous = current if self.last_pointer is None else self.last_pointer

        with self._section("forces"):
            for n in self.nodes:
                apply_gravity(n, self._g)
            for n in self.nodes:
                apply_linear_drag(n, self.config.drag)
            if pointer is not None and pointer.wind_enabled:
                apply_wind(
                    self.nodes, current, previous,
                    self.config.wind_radius, self.config.wind_scale,
                )

        with self._section("integrate"):
            for n in self.nodes:
                integrate(n, dt)

        with self._section("relax"):
            relax_constraints(self.constraints, self.nodes, self.config.relaxation_iters)

        with self._section("break"):
            self.constraints = break_constraints(self.constraints, self.nodes)

        if pointer is not None and pointer.cutting:
            with self._section("cut"):
                self.constraints = cut_constraints(self.constraints, self.nodes, previous, current)

        with self._section("differentiate"):
            for n in self.nodes:
                differentiate(n, dt)

        if pointer is not None:
            self.last_pointer = current.copy()

        self.time += dt
        self.ticks += 1

    # -------------------------------------------------------------------------
    # Read-only output for renderers
    # -------------------------------------------------------------------------

    def segments(self) -> tuple[Segment, ...]:
        """One segment per active constraint, in constraint order."""
        return tuple(
            Segment(
                a=tuple(self.nodes[c.a].position.tolist()),
                b=tuple(self.nodes[c.b].position.tolist()),
            )
            for c in self.constraints
        )

    def points(self) -> tuple[NodePoint, ...]:
        """One point per node, in node order."""
        return tuple(
            NodePoint(position=tuple(n.position.tolist()), fixed=n.fixed)
            for n in self.nodes
        )

    def render_frame(self) -> RenderFrame:
        """Snapshot of everything a renderer draws for the current state."""
        return RenderFrame(time=self.time, segments=self.segments(), points=self.points())
