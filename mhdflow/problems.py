"""Initial conditions and internal boundaries for the bundled test problems."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from mhdflow.config import PRESETS, SimulationConfig
from mhdflow.physics import Primitives


@dataclass
class InitialState:
    """Primitive fields plus the internal-boundary mask for one problem."""

    prim: Primitives
    internal_bound: np.ndarray

    def __post_init__(self) -> None:
        self.internal_bound = np.array(self.internal_bound, dtype=float)
        if self.internal_bound.shape != self.prim.shape:
            raise ValueError(
                f"internal boundary shape {self.internal_bound.shape} "
                f"does not match grid shape {self.prim.shape}"
            )

    @property
    def shape(self) -> tuple[int, int]:
        """Grid shape as (ny, nx)."""
        return self.prim.shape


@dataclass(frozen=True)
class Problem:
    """A named test problem with its initialiser and preset parameters."""

    name: str
    initializer: Callable[[SimulationConfig], InitialState] = field(repr=False)
    description: str = ""

    @property
    def default_config(self) -> SimulationConfig:
        """The parameters the problem is normally run with."""
        return PRESETS[self.name]

    def build(self, config: SimulationConfig | None = None) -> InitialState:
        """Create the initial state, using the preset when no config is given."""
        return self.initializer(self.default_config if config is None else config)


def _indices(config: SimulationConfig) -> tuple[np.ndarray, np.ndarray]:
    """Column index i and row index j, each of shape (ny, nx)."""
    i, j = np.meshgrid(np.arange(config.nx), np.arange(config.ny))
    return i, j


def _coordinates(config: SimulationConfig) -> tuple[np.ndarray, np.ndarray]:
    """Cell positions x and y; both axes use the x spacing."""
    i, j = _indices(config)
    return i * config.dx, j * config.dx


def _uniform(config: SimulationConfig, value: float) -> np.ndarray:
    return np.full((config.ny, config.nx), float(value))


def _no_boundary(config: SimulationConfig) -> np.ndarray:
    return np.zeros((config.ny, config.nx))


def _colliding_flows_x(config: SimulationConfig, by: np.ndarray) -> InitialState:
    i, _ = _indices(config)
    speed = 2.5 * np.sqrt(config.gamma)
    u = np.where(i < config.nx * 0.5, speed, -speed)
    prim = Primitives(
        rho=_uniform(config, 1.0),
        u=u,
        v=_uniform(config, 0.0),
        p=_uniform(config, 1.0),
        bx=_uniform(config, 0.0),
        by=by,
    )
    return InitialState(prim, _no_boundary(config))


def normal_shock(config: SimulationConfig) -> InitialState:
    """Two colliding hydrodynamic streams forming a pair of normal shocks."""
    x, _ = _coordinates(config)
    by = 0.0 * np.tanh((x - 0.5) / 0.25)
    return _colliding_flows_x(config, by)


def mhd_shock(config: SimulationConfig) -> InitialState:
    """Colliding streams along x threaded by a uniform transverse field By."""
    return _colliding_flows_x(config, _uniform(config, 1.0))


def mhd_shock_y(config: SimulationConfig) -> InitialState:
    """Colliding streams along y threaded by a uniform transverse field Bx."""
    _, j = _indices(config)
    speed = 3.0 * np.sqrt(config.gamma)
    v = np.where(j < config.ny * 0.5, speed, -speed)
    prim = Primitives(
        rho=_uniform(config, 1.0),
        u=_uniform(config, 0.0),
        v=v,
        p=_uniform(config, 1.0),
        bx=_uniform(config, 1.0),
        by=_uniform(config, 0.0),
    )
    return InitialState(prim, _no_boundary(config))


def oblique_shock(config: SimulationConfig) -> InitialState:
    """Supersonic flow against a solid wedge behind an oblique shock front."""
    x, y = _coordinates(config)
    shocked = (y - 1.0) - np.tan(-config.pi / 4.0) * (x - 0.25) > 0
    rho = np.where(shocked, 0.5, 1.0)
    u = np.where(shocked, 0.5, 1.5 * np.sqrt(config.gamma))
    p = np.where(shocked, 0.5, 1.0)
    prim = Primitives(
        rho=rho,
        u=u,
        v=_uniform(config, 0.0),
        p=p,
        bx=_uniform(config, 0.0),
        by=_uniform(config, 0.0),
    )
    wedge = (y - 1.0) - np.tan(-config.pi / 8.0) * (x - 0.25) > 0
    return InitialState(prim, np.where(wedge, 1.0, 0.0))


def sedov(config: SimulationConfig) -> InitialState:
    """Point blast: a small high-pressure disc in a cold uniform medium."""
    x, y = _coordinates(config)
    dr = 3.5 * config.dx
    inside = (x - 0.5) ** 2 + (y - 0.5) ** 2 <= dr * dr
    blast = 3.0 * (config.gamma - 1.0) * 1.0 / ((2 + 1) * 3.141 * dr**2)
    prim = Primitives(
        rho=_uniform(config, 1.0),
        u=_uniform(config, 0.0),
        v=_uniform(config, 0.0),
        p=np.where(inside, blast, 1e-5),
        bx=_uniform(config, 0.0),
        by=_uniform(config, 0.0),
    )
    return InitialState(prim, _no_boundary(config))


def reconnection(config: SimulationConfig) -> InitialState:
    """Double current sheet in By, perturbed by a sinusoidal shear flow."""
    x, y = _coordinates(config)
    by = np.where((x >= 0.25) & (x < 0.75), -1.0, 1.0)
    prim = Primitives(
        rho=_uniform(config, 1.0),
        u=0.1 * np.sin(2 * config.pi * y / 0.5),
        v=_uniform(config, 0.0),
        p=_uniform(config, 0.1),
        bx=_uniform(config, 0.0),
        by=by,
    )
    return InitialState(prim, _no_boundary(config))


_PROBLEMS: dict[str, Problem] = {
    p.name: p
    for p in (
        Problem("normal_shock", normal_shock, "colliding hydrodynamic streams"),
        Problem("oblique_shock", oblique_shock, "supersonic flow over a wedge"),
        Problem("sedov", sedov, "Sedov point blast"),
        Problem("mhd_shock", mhd_shock, "colliding streams with transverse By"),
        Problem("mhd_shock_y", mhd_shock_y, "colliding streams along y with Bx"),
        Problem("reconnection", reconnection, "double current sheet reconnection"),
    )
}


def get_problem(name: str) -> Problem:
    """Look up a problem by name; raise KeyError if it is unknown."""
    try:
        return _PROBLEMS[name]
    except KeyError:
        raise KeyError(
            f"unknown problem {name!r}; choose one of: {', '.join(_PROBLEMS)}"
        ) from None


def problem_names() -> tuple[str, ...]:
    """Names of all available problems."""
    return tuple(_PROBLEMS)