# examples/hanging_rope.py
import logging

from rope_sim import Simulation
from rope_sim.core import kinetic_energy, max_constraint_error

logging.basicConfig(level=logging.INFO)

sim = Simulation.chain(width=800, height=600)

for _ in range(200):
    sim.step()

print("t:", sim.time)
print("bottom node:", sim.nodes[-1].position)
print("kinetic energy:", kinetic_energy(sim.nodes))
print("max segment error:", max_constraint_error(sim.constraints, sim.nodes))
