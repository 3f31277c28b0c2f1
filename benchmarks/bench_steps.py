"""
Microbenchmark: time per step vs number of rope nodes.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from rope_sim import Simulation, SimConfig, PointerInput
from rope_sim.profiler import Profiler


def run(n: int, steps: int = 300):
    prof = Profiler()
    config = SimConfig(node_count=n, rest_distance=10.0)
    sim = Simulation.chain(width=1200, height=200, config=config, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # warmup
    for _ in range(30):
        sim.step()

    # pointer jitters across the rope to exercise the wind stage
    anchor = sim.nodes[0].position
    t0 = time.perf_counter()
    for k in range(steps):
        pos = anchor + (rng.normal(0.0, 20.0), 10.0 * (k % n))
        sim.step(PointerInput(position=pos))
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate", "relax", "break", "differentiate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
