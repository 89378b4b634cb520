"""Base class of the n-body simulations."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from .bodies import Bodies

__all__ = ["SimulationNBody", "G"]

G = 6.67384e-11
"""The gravitational constant in m^3.kg^-1.s^-2."""

_ACCELERATION_ITEMSIZE = np.dtype(np.float32).itemsize


class SimulationNBody(ABC):
    """A simulation of bodies in single precision.

    Subclasses implement :meth:`compute_one_iteration`. They may set
    ``_flops_per_iteration`` and add to ``_allocated_bytes``.
    """

    G = np.float32(G)

    def __init__(self, n_bodies: int, scheme: str = "galaxy", soft: float = 0.035,
                 seed: int = 0, lanes: int | None = None) -> None:
        self._bodies = Bodies(n_bodies, scheme, seed, lanes, np.float32)
        self._dt = math.inf
        self.soft = float(np.float32(soft))
        self._flops_per_iteration = 0.0
        total = self._bodies.n + self._bodies.padding
        self._allocated_bytes = float(
            self._bodies.allocated_bytes + total * _ACCELERATION_ITEMSIZE * 3
        )

    @abstractmethod
    def compute_one_iteration(self) -> None:
        """Compute one iteration of the simulation."""

    @property
    def bodies(self) -> Bodies:
        """All the bodies in space."""
        return self._bodies

    @property
    def dt(self) -> float:
        """Time step value; infinite until set."""
        return self._dt

    @dt.setter
    def dt(self, value: float) -> None:
        self._dt = float(np.float32(value))

    @property
    def flops_per_iteration(self) -> float:
        """Number of floating-point operations per iteration."""
        return self._flops_per_iteration

    @property
    def allocated_bytes(self) -> float:
        """Number of bytes taken by the bodies and their accelerations."""
        return self._allocated_bytes