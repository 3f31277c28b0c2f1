# MIT License (see LICENSE)
"""
Lightweight timing of simulation stages.

Simulation.step() wraps each stage of a tick (forces, integrate, relax,
break, cut, differentiate) in a profiler section when a Profiler is
attached, so frontends and benchmarks can see where a tick spends its time.

Example:
    profiler = Profiler()
    sim = Simulation.chain(800, 600, profiler=profiler)
    for _ in range(100):
        sim.step(PointerInput((0.0, 0.0)))
    print(profiler.stats.summary()["relax"])
"""
from __future__ import annotations
import time
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """
    Timing samples (seconds) per stage name.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-stage statistics.
        
        Returns:
            Dict mapping stage name to {'n', 'mean_ms', 'max_ms', 'total_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * total / n,
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out

    def clear(self) -> None:
        self.samples.clear()


class Profiler:
    """
    Context-manager based stage timer.
    
    Usage:
        with profiler.section("relax"):
            relax_constraints(constraints, nodes, iters=5)
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def section(self, name: str):
        """Return a context manager that records the time spent inside it under `name`."""
        profiler = self

        class _Section:
            def __enter__(self):
                self.t0 = time.perf_counter()

            def __exit__(self, exc_type, exc, tb):
                profiler.stats.add(name, time.perf_counter() - self.t0)

        return _Section()
