# nbodysim

The building blocks of a gravitational n-body simulation, built on NumPy.

## What it provides

- `nbodysim.bodies.Bodies` holds the mass, radius, position and velocity of
  every body.
  - Bodies are set up as a `"galaxy"` or as a `"random"` cloud. A galaxy is
    a heavy central body with lighter bodies orbiting it. Any other scheme
    raises `ValueError`.
  - The seed makes the set-up reproducible.
  - The body count is padded up to a whole number of vector `lanes` with
    massless filler bodies. By default there are 32 bytes' worth of lanes
    for the chosen `dtype`.
  - The data is available in two forms. `soa` is a `BodiesSoA`, one NumPy
    array per quantity. `aos` is a list of `Body` records. Both include the
    padding.
  - `update_positions_and_velocities(accelerations, dt)` applies one time
    integration step to the real bodies. It takes an `AccelerationsSoA` or a
    sequence of `Acceleration` records. It raises `ValueError` if there are
    fewer accelerations than bodies.
- `nbodysim.crand.CRandom` is the seeded integer generator used to set up
  the bodies. It yields values in `[0, RAND_MAX]` and can be iterated.
- `nbodysim.simulation.SimulationNBody` is the abstract base class of a
  single-precision simulation. It holds:
  - the bodies;
  - the time step `dt`, which is infinite until set;
  - the softening factor `soft`;
  - the gravitational constant `G`;
  - `flops_per_iteration`;
  - `allocated_bytes`.

  Subclasses implement `compute_one_iteration()`.
- `nbodysim.visu.SpheresVisu` is the interface of a display.
  `NoSpheresVisu` is a display for runs without a window. It never reports
  input and only counts its refreshes in `frames`.
- `nbodysim.camera` provides `perspective`, `look_at` and `CameraControl`.
  - `perspective` builds a right-handed projection matrix.
  - `look_at` builds a right-handed view matrix.
  - `CameraControl` is a free-flying camera. Each frame it takes an
    `InputState` snapshot: mouse button, cursor position and the
    forward/backward/left/right keys. `update(inputs, current_time)` returns
    the projection matrix multiplied by the view matrix.
- `nbodysim.render` provides `velocity_colors` and `sphere_model`.
  - `velocity_colors(vx, vy, vz)` maps each body's squared speed onto the
    16-colour `COLOR_MAP` palette.
  - `sphere_model(points_per_circle)` builds the vertices of a wireframe unit
    sphere.

## What it does not do

- It computes no gravitational forces. A subclass of `SimulationNBody`
  must compute the accelerations.
- It opens no window and draws nothing on screen. The camera and colour
  helpers only compute matrices, colours and vertices.
- It has no command-line program.

## Installing

```
pip install .
```

## Example

```python
import numpy as np

from nbodysim.bodies import AccelerationsSoA, Bodies

bodies = Bodies(1000, "galaxy", 0, 8, np.float32)
print(bodies.n, bodies.padding, bodies.allocated_bytes)

zeros = np.zeros(bodies.n, dtype=np.float32)
bodies.update_positions_and_velocities(AccelerationsSoA(zeros, zeros, zeros), 3600.0)
print(bodies.soa.qx[:5])
```

A full simulation subclasses `SimulationNBody` and computes the
accelerations in `compute_one_iteration()`:

```python
import numpy as np

from nbodysim.bodies import AccelerationsSoA
from nbodysim.simulation import SimulationNBody


class NaiveSimulation(SimulationNBody):
    def compute_one_iteration(self):
        d = self.bodies.soa
        n = self.bodies.n
        q = np.stack([d.qx[:n], d.qy[:n], d.qz[:n]], axis=1)
        diff = q[None, :, :] - q[:, None, :]
        dist2 = (diff ** 2).sum(axis=2) + self.soft ** 2
        weight = self.G * d.m[:n][None, :] / dist2 ** 1.5
        acc = (diff * weight[:, :, None]).sum(axis=1)
        self.bodies.update_positions_and_velocities(
            AccelerationsSoA(acc[:, 0], acc[:, 1], acc[:, 2]), self.dt
        )


sim = NaiveSimulation(500, "galaxy", 0.035, 0, 8)
sim.dt = 3600.0
for _ in range(10):
    sim.compute_one_iteration()
```

## Running the tests

```
pip install .[test]
pytest
```