# MIT License (see LICENSE)
"""
Renderer adapters for rope visualization.

The simulation has no drawing dependency. It exposes a RenderFrame of line
segments (one per active constraint) and points (one per node, tagged fixed
or free); adapters turn that into output for a particular backend.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Segment, NodePoint, RenderFrame

if TYPE_CHECKING:
    from ..scene import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.
    
    Subclasses implement the drawing methods for a graphics backend
    (pygame, matplotlib, a web canvas...).
    
    Usage:
        renderer.render_simulation(sim)
    
    which draws every segment first and every node on top of them.
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """Begin a new frame at simulation time `time`."""
        ...

    @abstractmethod
    def draw_segment(self, segment: Segment) -> None:
        """Draw one rope segment."""
        ...

    @abstractmethod
    def draw_node(self, point: NodePoint) -> None:
        """Draw one node. Frontends typically colour fixed anchors differently."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_frame(self, frame: RenderFrame) -> None:
        """Draw a prepared frame snapshot."""
        self.begin_frame(frame.time)
        for segment in frame.segments:
            self.draw_segment(segment)
        for point in frame.points:
            self.draw_node(point)
        self.end_frame()

    def render_simulation(self, sim: "Simulation") -> None:
        """Convenience method to draw the current state of a simulation."""
        self.render_frame(sim.render_frame())


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and headless runs.
    
    Output:
        === Frame t=0.1500 ===
        seg (266.67, 120.00) -> (266.67, 170.20)
        [anchor] (266.67, 120.00)
        [node] (266.67, 170.20)
    """

    def __init__(self, output: TextIO | None = None, show_segments: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            show_segments: If False, only nodes are printed.
        """
        self.output = output or sys.stdout
        self.show_segments = show_segments

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_segment(self, segment: Segment) -> None:
        if not self.show_segments:
            return
        (ax, ay), (bx, by) = segment.a, segment.b
        self.output.write(f"seg ({ax:.2f}, {ay:.2f}) -> ({bx:.2f}, {by:.2f})\n")

    def draw_node(self, point: NodePoint) -> None:
        tag = "anchor" if point.fixed else "node"
        x, y = point.position
        self.output.write(f"[{tag}] ({x:.2f}, {y:.2f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer, for benchmarks without drawing overhead.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_segment(self, segment: Segment) -> None:
        pass

    def draw_node(self, point: NodePoint) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames as plain dicts for playback or export.
    
    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step(pointer)
            renderer.render_simulation(sim)
        
        for frame in renderer.frames:
            print(frame["time"], len(frame["segments"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "segments": [],
            "nodes": [],
        }

    def draw_segment(self, segment: Segment) -> None:
        if self._current_frame is None:
            return
        self._current_frame["segments"].append([list(segment.a), list(segment.b)])

    def draw_node(self, point: NodePoint) -> None:
        if self._current_frame is None:
            return
        self._current_frame["nodes"].append({
            "position": list(point.position),
            "fixed": point.fixed,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Drop all recorded frames."""
        self.frames.clear()
