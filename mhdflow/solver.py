"""Two-step MacCormack integrator for the ideal MHD equations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

from mhdflow.config import NVAR, SimulationConfig
from mhdflow.output import PathLike, TimeSeriesWriter, write_field, write_snapshot
from mhdflow.physics import (
    FIELD_NAMES,
    Primitives,
    conserved_from_primitives,
    max_signal_speed,
    primitives_from_conserved,
    radiative_source,
    x_fluxes,
    y_fluxes,
)
from mhdflow.problems import InitialState

# Conserved components forced to zero inside a solid internal boundary:
# x- and y-momentum and both magnetic field components.
_ZEROED_IN_SOLID = (1, 2, 4, 5)
_ENERGY = 3


def apply_boundaries(field: np.ndarray) -> np.ndarray:
    """Copy the first interior cells onto the edges of ``field`` in place.

    Works on any array whose last two axes are (ny, nx). Left and right
    columns are filled first, then bottom and top rows. Returns ``field``.
    """
    if field.ndim < 2 or field.shape[-1] < 2 or field.shape[-2] < 2:
        raise ValueError(f"field needs at least a 2x2 grid, got shape {field.shape}")
    field[..., :, 0] = field[..., :, 1]
    field[..., :, -1] = field[..., :, -2]
    field[..., 0, :] = field[..., 1, :]
    field[..., -1, :] = field[..., -2, :]
    return field


def time_step(prim: Primitives, config: SimulationConfig) -> float:
    """CFL-limited time step for the current state."""
    speed = max_signal_speed(prim, config.gamma)
    if not speed > 0.0:
        raise ValueError("maximum signal speed is zero; time step is undefined")
    return config.cfl * config.dx / speed


@dataclass(frozen=True)
class RunSummary:
    """Outcome of a complete run."""

    steps: int
    time: float


class MacCormackSolver:
    """Advances an initial state with the predictor-corrector scheme."""

    def __init__(self, config: SimulationConfig, state: InitialState) -> None:
        expected = (config.ny, config.nx)
        if state.shape != expected:
            raise ValueError(
                f"state shape {state.shape} does not match configured grid {expected}"
            )
        self.config = config
        self.prim = state.prim.copy()
        self.internal_bound = state.internal_bound.copy()
        self._solid = (self.internal_bound == 1.0)[1:-1, 1:-1]
        self.cons = conserved_from_primitives(self.prim, config.gamma, config.mu0)
        self.predicted = np.ones((NVAR, config.ny, config.nx))
        self.t = 0.0
        self.steps = 0
        self.max_speed = max_signal_speed(self.prim, config.gamma)
        self.dt = time_step(self.prim, config)

    def _sources(self, prim: Primitives) -> np.ndarray:
        shape = (NVAR,) + tuple(n - 2 for n in prim.shape)
        sources = np.zeros(shape)
        sources[_ENERGY] = radiative_source(
            prim.rho[1:-1, 1:-1], prim.p[1:-1, 1:-1], self.config.radiative_cooling
        )
        return sources

    def _store_interior(self, target: np.ndarray, update: np.ndarray) -> None:
        interior = target[:, 1:-1, 1:-1]
        free = ~self._solid
        interior[:, free] = update[:, free]
        for k in _ZEROED_IN_SOLID:
            interior[k][self._solid] = 0.0

    def step(self) -> float:
        """Advance one time step and return the new simulation time."""
        cfg = self.config
        dt, nu = self.dt, cfg.nu
        ratio = dt / cfg.dx
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            u = self.cons
            fx = x_fluxes(self.prim, cfg.gamma, cfg.mu0)
            fy = y_fluxes(self.prim, cfg.gamma, cfg.mu0)
            centre = u[:, 1:-1, 1:-1]
            predicted = (
                centre
                - ratio * (fx[:, 1:-1, 2:] - fx[:, 1:-1, 1:-1])
                - ratio * (fy[:, 2:, 1:-1] - fy[:, 1:-1, 1:-1])
                + nu * (u[:, 1:-1, 2:] + u[:, 1:-1, :-2] - 2 * centre)
                + nu * (u[:, 2:, 1:-1] + u[:, :-2, 1:-1] - 2 * centre)
                + self._sources(self.prim) * dt
            )
            self._store_interior(self.predicted, predicted)
            apply_boundaries(self.predicted)
            prim_p = primitives_from_conserved(self.predicted, cfg.gamma, cfg.mu0)

            up = self.predicted
            fxp = x_fluxes(prim_p, cfg.gamma, cfg.mu0)
            fyp = y_fluxes(prim_p, cfg.gamma, cfg.mu0)
            up_centre = up[:, 1:-1, 1:-1]
            corrected = (
                0.5 * (centre + up_centre)
                - 0.5 * ratio * (fxp[:, 1:-1, 1:-1] - fxp[:, 1:-1, :-2])
                - 0.5 * ratio * (fyp[:, 1:-1, 1:-1] - fyp[:, :-2, 1:-1])
                + nu * (up[:, 1:-1, 2:] + up[:, 1:-1, :-2] - 2 * up_centre)
                + nu * (up[:, 2:, 1:-1] + up[:, :-2, 1:-1] - 2 * up_centre)
                + 0.5 * self._sources(prim_p) * dt
            )
            self._store_interior(self.cons, corrected)
            apply_boundaries(self.cons)
            self.prim = primitives_from_conserved(self.cons, cfg.gamma, cfg.mu0)

        self.max_speed = max_signal_speed(self.prim, cfg.gamma)
        self.dt = time_step(self.prim, cfg)
        self.t += self.dt
        self.steps += 1
        return self.t

    def probe(self, name: str) -> float:
        """Value of a primitive field at the grid centre."""
        fields = dict(self.prim.items())
        if name not in fields:
            raise ValueError(f"unknown field {name!r}; choose one of: {', '.join(FIELD_NAMES)}")
        ny, nx = self.prim.shape
        return float(fields[name][ny // 2, nx // 2])

    def run(
        self, output_dir: PathLike = "output", probes: Iterable[str] | None = None
    ) -> RunSummary:
        """Integrate until ``tend``, writing snapshots and probe series."""
        names: Sequence[str] = ("p",) if probes is None else tuple(probes)
        unknown = [n for n in names if n not in FIELD_NAMES]
        if unknown:
            raise ValueError(
                f"unknown probe field(s): {', '.join(unknown)}; "
                f"choose from: {', '.join(FIELD_NAMES)}"
            )
        folder = Path(output_dir)
        folder.mkdir(parents=True, exist_ok=True)
        write_field(self.internal_bound, folder / "bound-0.txt")
        write_snapshot(self.prim, folder, 0)
        writers = {n: TimeSeriesWriter(folder / f"{n}_vs_t.txt") for n in names}

        print("Running MacCormack scheme\n")
        while self.t < self.config.tend:
            self.step()
            for name, writer in writers.items():
                writer.append(self.t, self.probe(name))
            if self.steps % self.config.num_print == 0:
                print(
                    f"t = {self.t:f}, step = {self.steps} , "
                    f"maxV = {self.max_speed:f}, dt = {self.dt:f}"
                )
                write_snapshot(self.prim, folder, self.steps)

        print(f"Simulation ended at step {self.steps} at time {self.t:f} ")
        write_snapshot(self.prim, folder)
        return RunSummary(self.steps, self.t)