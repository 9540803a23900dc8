"""Command-line entry point: run one of the bundled problems."""

from __future__ import annotations

import argparse
import sys
from typing import Mapping, Sequence

from mhdflow.physics import FIELD_NAMES
from mhdflow.problems import get_problem, problem_names
from mhdflow.solver import MacCormackSolver

# Centre-of-grid quantities recorded against time for each problem.
DEFAULT_PROBES: Mapping[str, tuple[str, ...]] = {
    "mhd_shock": ("p", "rho", "By"),
    "mhd_shock_y": ("p", "rho", "Bx"),
}

# Command-line option name -> configuration field name.
_OVERRIDES = {
    "nx": "nx",
    "ny": "ny",
    "cfl": "cfl",
    "tend": "tend",
    "gamma": "gamma",
    "visc_fac": "visc_fac",
    "num_print": "num_print",
    "irad": "irad",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mhdflow",
        description="Run a two-dimensional MHD test problem with the MacCormack scheme.",
    )
    parser.add_argument(
        "problem", nargs="?", choices=problem_names(), help="problem to run"
    )
    parser.add_argument(
        "--list", action="store_true", help="list the available problems and exit"
    )
    parser.add_argument(
        "-o", "--output", default="output", help="directory for output files"
    )
    parser.add_argument(
        "--probe",
        action="append",
        choices=FIELD_NAMES,
        help="field sampled at the grid centre every step (repeatable)",
    )
    parser.add_argument("--nx", type=int, help="number of cells in x")
    parser.add_argument("--ny", type=int, help="number of cells in y")
    parser.add_argument("--cfl", type=float, help="Courant number")
    parser.add_argument("--tend", type=float, help="end time")
    parser.add_argument("--gamma", type=float, help="adiabatic index")
    parser.add_argument(
        "--visc-fac", dest="visc_fac", type=float, help="artificial viscosity factor"
    )
    parser.add_argument(
        "--num-print", dest="num_print", type=int, help="steps between snapshots"
    )
    parser.add_argument(
        "--irad", type=int, choices=(0, 1), help="1 enables radiative cooling"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen problem and return an exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in problem_names():
            print(f"{name}: {get_problem(name).description}")
        return 0
    if args.problem is None:
        parser.error("a problem name is required")

    problem = get_problem(args.problem)
    overrides = {
        field: getattr(args, option)
        for option, field in _OVERRIDES.items()
        if getattr(args, option) is not None
    }
    try:
        config = problem.default_config.with_overrides(**overrides)
    except ValueError as exc:
        parser.error(str(exc))

    probes = (
        tuple(args.probe)
        if args.probe
        else DEFAULT_PROBES.get(problem.name, ("p",))
    )

    try:
        solver = MacCormackSolver(config, problem.build(config))
        solver.run(args.output, probes)
    except ValueError as exc:
        print(f"mhdflow: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())