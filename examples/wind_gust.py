# examples/wind_gust.py
# Drags the pointer sideways through the lower half of the rope.
from rope_sim import Simulation, PointerInput

sim = Simulation.chain(width=800, height=600)

bottom = sim.nodes[-1]
y = bottom.position[1]
x = bottom.position[0] - 100.0
sim.reset_pointer((x, y))

for _ in range(40):
    x += 5.0
    sim.step(PointerInput(position=(x, y)))

for _ in range(60):
    sim.step()

print("bottom node position:", bottom.position)
print("bottom node velocity:", bottom.velocity)
