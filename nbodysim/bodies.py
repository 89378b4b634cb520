"""Physical state of the bodies: mass, radius, position and velocity."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Iterable, Iterator, Sequence, Union

import numpy as np

from .crand import RAND_MAX, CRandom

__all__ = ["Body", "Acceleration", "BodiesSoA", "AccelerationsSoA", "Bodies"]

_HALF = RAND_MAX // 2
_SCHEMES = ("galaxy", "random")


@dataclass(frozen=True)
class Body:
    """Characteristics of one body."""

    qx: float
    qy: float
    qz: float
    vx: float
    vy: float
    vz: float
    m: float
    r: float


@dataclass(frozen=True)
class Acceleration:
    """Acceleration of one body."""

    ax: float
    ay: float
    az: float


@dataclass
class BodiesSoA:
    """Characteristics of all bodies, one array per quantity."""

    qx: np.ndarray
    qy: np.ndarray
    qz: np.ndarray
    vx: np.ndarray
    vy: np.ndarray
    vz: np.ndarray
    m: np.ndarray
    r: np.ndarray

    @classmethod
    def from_bodies(cls, bodies: Iterable[Body], dtype) -> "BodiesSoA":
        rows = list(bodies)
        names = [f.name for f in fields(Body)]
        columns = {
            name: np.array([getattr(b, name) for b in rows], dtype=dtype)
            for name in names
        }
        return cls(**columns)

    def __len__(self) -> int:
        return len(self.m)


@dataclass
class AccelerationsSoA:
    """Accelerations of all bodies, one array per axis."""

    ax: np.ndarray
    ay: np.ndarray
    az: np.ndarray


AccelerationsLike = Union[AccelerationsSoA, Sequence[Acceleration]]


class Bodies:
    """Bodies in space, initialised as a galaxy or at random.

    The arrays hold ``n + padding`` entries; the padding bodies are massless
    fillers that complete the last vector of ``lanes`` elements.
    """

    def __init__(self, n: int, scheme: str = "galaxy", seed: int = 0,
                 lanes: int | None = None, dtype=np.float32) -> None:
        if n <= 0:
            raise ValueError("the number of bodies must be positive")
        if scheme not in _SCHEMES:
            raise ValueError("`scheme` must be either `galaxy` or `random`.")
        self._dtype = np.dtype(dtype)
        if lanes is None:
            lanes = max(1, 32 // self._dtype.itemsize)
        if lanes <= 0:
            raise ValueError("the number of lanes must be positive")
        self._n = n
        self._lanes = lanes
        self._padding = 0
        self._allocated_bytes = 0.0
        self._soa = BodiesSoA.from_bodies([], self._dtype)
        if scheme == "galaxy":
            self.init_galaxy(seed)
        else:
            self.init_randomly(seed)

    @property
    def n(self) -> int:
        """Number of real bodies."""
        return self._n

    @property
    def padding(self) -> int:
        """Number of filler bodies after the real ones."""
        return self._padding

    @property
    def allocated_bytes(self) -> float:
        """Bytes taken by the body data, counting both layouts."""
        return self._allocated_bytes

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def soa(self) -> BodiesSoA:
        """The body data as one array per quantity."""
        return self._soa

    @property
    def aos(self) -> list[Body]:
        """The body data as one record per body, padding included."""
        s = self._soa
        return [
            Body(*(float(v) for v in row))
            for row in zip(s.qx, s.qy, s.qz, s.vx, s.vy, s.vz, s.m, s.r)
        ]

    def _prepare(self) -> None:
        vectors = math.ceil(self._n / self._lanes)
        self._padding = vectors * self._lanes - self._n
        total = self._n + self._padding
        self._allocated_bytes = float(total * self._dtype.itemsize * 8 * 2)

    def _ratio(self, num: int, den: int) -> float:
        t = self._dtype.type
        return float(t(num) / t(den))

    def _centered(self, rng: CRandom) -> float:
        return self._ratio(rng.rand() - _HALF, _HALF)

    def _filler(self, rng: CRandom) -> Body:
        qx = self._centered(rng) * (5.0e8 * 1.33)
        qy = self._centered(rng) * 5.0e8
        qz = self._centered(rng) * 5.0e8 - 10.0e8
        vx = self._centered(rng) * 1.0e2
        vy = self._centered(rng) * 1.0e2
        vz = self._centered(rng) * 1.0e2
        return Body(qx, qy, qz, vx, vy, vz, 0.0, 0.0)

    def _store(self, bodies: Iterator[Body]) -> None:
        self._soa = BodiesSoA.from_bodies(bodies, self._dtype)

    def _galaxy_bodies(self, rng: CRandom) -> Iterator[Body]:
        t = self._dtype.type
        yield Body(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 2.0e24, 0.0)
        for _ in range(1, self._n):
            m = float(t(self._ratio(rng.rand(), RAND_MAX) * 5e20))
            r = m * 2.5e-15
            horizontal = t(self._ratio(RAND_MAX - rng.rand(), RAND_MAX) * 2.0 * math.pi)
            vertical = t(self._ratio(RAND_MAX - rng.rand(), RAND_MAX) * 2.0 * math.pi)
            dist = t(self._ratio(RAND_MAX - rng.rand(), RAND_MAX) * 1.0e8 + 1.0e8)
            qx = float(np.cos(vertical) * np.sin(horizontal) * dist)
            qy = float(np.sin(vertical) * dist)
            qz = float(np.cos(vertical) * np.cos(horizontal) * dist)
            yield Body(qx, qy, qz, qy * 4.0e-6, -qx * 4.0e-6, 0.0, m, r)
        for _ in range(self._padding):
            yield self._filler(rng)

    def _random_bodies(self, rng: CRandom) -> Iterator[Body]:
        t = self._dtype.type
        for _ in range(self._n):
            m = float(t(self._ratio(rng.rand(), RAND_MAX) * 5.0e21))
            r = m * 0.5e-14
            filler = self._filler(rng)
            yield Body(filler.qx, filler.qy, filler.qz,
                       filler.vx, filler.vy, filler.vz, m, r)
        for _ in range(self._padding):
            yield self._filler(rng)

    def init_galaxy(self, seed: int = 0) -> None:
        """Place a heavy central body surrounded by orbiting bodies."""
        self._prepare()
        self._store(self._galaxy_bodies(CRandom(seed)))

    def init_randomly(self, seed: int = 0) -> None:
        """Place bodies with random masses, positions and velocities."""
        self._prepare()
        self._store(self._random_bodies(CRandom(seed)))

    def _acceleration_arrays(self, accelerations: AccelerationsLike):
        n = self._n
        if isinstance(accelerations, AccelerationsSoA):
            arrays = [np.asarray(a, dtype=self._dtype)
                      for a in (accelerations.ax, accelerations.ay, accelerations.az)]
        else:
            items = list(accelerations)
            arrays = [
                np.array([getattr(a, name) for a in items], dtype=self._dtype)
                for name in ("ax", "ay", "az")
            ]
        if any(len(a) < n for a in arrays):
            raise ValueError("fewer accelerations than bodies")
        return [a[:n] for a in arrays]

    def update_positions_and_velocities(self, accelerations: AccelerationsLike,
                                        dt: float) -> None:
        """Advance the real bodies by one time step of ``dt``."""
        ax, ay, az = self._acceleration_arrays(accelerations)
        t = self._dtype.type
        step = t(dt)
        half = t(0.5)
        n = self._n
        s = self._soa
        for q, v, a in ((s.qx, s.vx, ax), (s.qy, s.vy, ay), (s.qz, s.vz, az)):
            a_dt = a * step
            q[:n] = q[:n] + (v[:n] + a_dt * half) * step
            v[:n] = v[:n] + a_dt