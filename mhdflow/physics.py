"""Ideal MHD state conversions, fluxes and source terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from mhdflow.config import NVAR

FIELD_NAMES = ("rho", "u", "v", "p", "Bx", "By")


@dataclass
class Primitives:
    """Primitive variables on an (ny, nx) grid."""

    rho: np.ndarray
    u: np.ndarray
    v: np.ndarray
    p: np.ndarray
    bx: np.ndarray
    by: np.ndarray

    def __post_init__(self) -> None:
        arrays = [np.array(a, dtype=float) for a in self._raw()]
        shape = arrays[0].shape
        if len(shape) != 2:
            raise ValueError(f"fields must be two-dimensional, got shape {shape}")
        if any(a.shape != shape for a in arrays):
            raise ValueError("all primitive fields must share one shape")
        self.rho, self.u, self.v, self.p, self.bx, self.by = arrays

    def _raw(self) -> tuple:
        return (self.rho, self.u, self.v, self.p, self.bx, self.by)

    @property
    def shape(self) -> tuple[int, int]:
        """Grid shape as (ny, nx)."""
        return self.rho.shape

    def items(self) -> Iterator[tuple[str, np.ndarray]]:
        """Yield (name, array) pairs in output order."""
        return zip(FIELD_NAMES, self._raw())

    def copy(self) -> "Primitives":
        return Primitives(*(a.copy() for a in self._raw()))


def _magnetic_sq(prim: Primitives) -> np.ndarray:
    return prim.bx * prim.bx + prim.by * prim.by


def _kinetic_sq(prim: Primitives) -> np.ndarray:
    return prim.u * prim.u + prim.v * prim.v


def conserved_from_primitives(prim: Primitives, gamma: float, mu0: float) -> np.ndarray:
    """Return conserved variables as an array of shape (6, ny, nx)."""
    energy = (
        prim.p / (gamma - 1.0)
        + 0.5 * prim.rho * _kinetic_sq(prim)
        + 0.5 / mu0 * _magnetic_sq(prim)
    )
    return np.stack(
        [prim.rho, prim.rho * prim.u, prim.rho * prim.v, energy, prim.bx, prim.by]
    )


def primitives_from_conserved(cons: np.ndarray, gamma: float, mu0: float) -> Primitives:
    """Recover primitive variables from a (6, ny, nx) conserved array."""
    cons = np.asarray(cons, dtype=float)
    if cons.ndim != 3 or cons.shape[0] != NVAR:
        raise ValueError(f"expected shape ({NVAR}, ny, nx), got {cons.shape}")
    rho = cons[0].copy()
    with np.errstate(divide="ignore", invalid="ignore"):
        u = cons[1] / rho
        v = cons[2] / rho
    bx = cons[4].copy()
    by = cons[5].copy()
    p = (
        cons[3] - 0.5 * rho * (u * u + v * v) - 0.5 / mu0 * (bx * bx + by * by)
    ) * (gamma - 1.0)
    return Primitives(rho, u, v, p, bx, by)


def _total_enthalpy_term(prim: Primitives, gamma: float, mu0: float) -> np.ndarray:
    return (
        prim.p / (gamma - 1.0)
        + prim.p
        + 0.5 * prim.rho * _kinetic_sq(prim)
        + _magnetic_sq(prim) / mu0
    )


def x_fluxes(prim: Primitives, gamma: float, mu0: float) -> np.ndarray:
    """Fluxes in the x direction, shape (6, ny, nx)."""
    b_sq = _magnetic_sq(prim)
    u_dot_b = prim.u * prim.bx + prim.v * prim.by
    return np.stack(
        [
            prim.rho * prim.u,
            prim.rho * prim.u * prim.u + prim.p + 0.5 * b_sq / mu0 - prim.bx * prim.bx / mu0,
            prim.rho * prim.v * prim.u - prim.by * prim.bx / mu0,
            prim.u * _total_enthalpy_term(prim, gamma, mu0) - prim.bx * u_dot_b / mu0,
            np.zeros(prim.shape),
            prim.u * prim.by - prim.bx * prim.v,
        ]
    )


def y_fluxes(prim: Primitives, gamma: float, mu0: float) -> np.ndarray:
    """Fluxes in the y direction, shape (6, ny, nx)."""
    b_sq = _magnetic_sq(prim)
    u_dot_b = prim.u * prim.bx + prim.v * prim.by
    return np.stack(
        [
            prim.rho * prim.v,
            prim.rho * prim.u * prim.v - prim.bx * prim.by / mu0,
            prim.rho * prim.v * prim.v + prim.p + 0.5 * b_sq / mu0 - prim.by * prim.by / mu0,
            prim.v * _total_enthalpy_term(prim, gamma, mu0) - prim.by * u_dot_b / mu0,
            -prim.u * prim.by + prim.bx * prim.v,
            np.zeros(prim.shape),
        ]
    )


def max_signal_speed(prim: Primitives, gamma: float) -> float:
    """Largest sound speed or flow speed on the grid, never below zero."""
    with np.errstate(divide="ignore", invalid="ignore"):
        sound = np.sqrt(gamma * prim.p / prim.rho)
    flow = np.sqrt(_kinetic_sq(prim))
    speeds = np.concatenate([sound.ravel(), flow.ravel()])
    return float(np.max(speeds, initial=0.0, where=~np.isnan(speeds)))


def radiative_source(density, pressure, enabled: bool):
    """Radiative cooling term for the energy equation; zero when disabled."""
    rho = np.asarray(density, dtype=float)
    if not enabled:
        return np.zeros_like(rho)[()]
    amplitude, alpha, beta = -2.0, 2.0, 0.5
    with np.errstate(divide="ignore", invalid="ignore"):
        temperature = np.asarray(pressure, dtype=float) / rho
        result = amplitude * rho * rho**alpha * temperature**beta
    return np.asarray(result)[()]