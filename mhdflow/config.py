"""Run parameters for the two-dimensional MHD solver."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

NVAR = 6
"""Number of conserved variables: rho, rho*u, rho*v, E, Bx, By."""


@dataclass(frozen=True)
class SimulationConfig:
    """Grid size, time-stepping and physical constants for one run."""

    nx: int = 512
    ny: int = 8
    cfl: float = 0.2
    tend: float = 0.5
    gamma: float = 1.666667
    visc_fac: float = 0.25
    pi: float = 3.1415926
    irad: int = 0
    g: float = 0.0
    num_print: int = 100
    mu0: float = 1.0

    def __post_init__(self) -> None:
        if self.nx < 3 or self.ny < 3:
            raise ValueError(f"grid must be at least 3x3, got {self.nx}x{self.ny}")
        if self.cfl <= 0.0:
            raise ValueError(f"cfl must be positive, got {self.cfl}")
        if self.tend < 0.0:
            raise ValueError(f"tend must not be negative, got {self.tend}")
        if self.gamma <= 1.0:
            raise ValueError(f"gamma must exceed 1, got {self.gamma}")
        if self.mu0 <= 0.0:
            raise ValueError(f"mu0 must be positive, got {self.mu0}")
        if self.num_print < 1:
            raise ValueError(f"num_print must be at least 1, got {self.num_print}")
        if self.irad not in (0, 1):
            raise ValueError(f"irad must be 0 or 1, got {self.irad}")

    @property
    def dx(self) -> float:
        """Grid spacing; the domain has unit width in x."""
        return 1.0 / self.nx

    @property
    def nu(self) -> float:
        """Artificial viscosity coefficient."""
        return self.visc_fac * (1.0 - self.cfl * self.cfl) / 6.0

    @property
    def radiative_cooling(self) -> bool:
        """Whether the radiative energy source term is active."""
        return self.irad == 1

    def with_overrides(self, **kwargs: Any) -> "SimulationConfig":
        """Return a copy with the given fields replaced."""
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"unknown configuration field(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **kwargs)


PRESETS: Mapping[str, SimulationConfig] = MappingProxyType(
    {
        "normal_shock": SimulationConfig(
            nx=512, ny=8, cfl=0.2, tend=0.5, gamma=1.666667, visc_fac=0.25, num_print=100
        ),
        "oblique_shock": SimulationConfig(
            nx=256, ny=256, cfl=0.2, tend=1.0, gamma=1.666667, visc_fac=0.1, num_print=100
        ),
        "sedov": SimulationConfig(
            nx=512, ny=512, cfl=0.1, tend=0.05, gamma=1.4, visc_fac=0.05, num_print=100
        ),
        "mhd_shock": SimulationConfig(
            nx=512, ny=8, cfl=0.2, tend=0.25, gamma=1.666667, visc_fac=0.25, num_print=100
        ),
        "mhd_shock_y": SimulationConfig(
            nx=128, ny=128, cfl=0.2, tend=0.25, gamma=1.666667, visc_fac=0.25, num_print=100
        ),
        "reconnection": SimulationConfig(
            nx=256, ny=256, cfl=0.33, tend=5.0, gamma=1.666667, visc_fac=0.1, num_print=200
        ),
    }
)