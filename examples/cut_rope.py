# examples/cut_rope.py
# Swipes the pointer across the middle of the rope with the cutting button
# held, then lets the loose end fall.
import logging

import numpy as np
from rope_sim import Simulation, PointerInput
from rope_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.DEBUG)

sim = Simulation.chain(width=800, height=600)
renderer = DebugRenderer(show_segments=False)

x0 = sim.nodes[0].position[0]
y_cut = sim.nodes[5].position[1] - 25.0

for x in np.linspace(x0 - 60.0, x0 + 60.0, 12):
    sim.step(PointerInput(position=(x, y_cut), cutting=True))

print("constraints left:", len(sim.constraints))

for _ in range(20):
    sim.step()
renderer.render_simulation(sim)
