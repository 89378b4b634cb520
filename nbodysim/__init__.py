"""Gravitational n-body simulation core: bodies, time integration and display helpers."""

__version__ = "0.1.0"