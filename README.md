# mhdflow

A small two-dimensional solver for ideal magnetohydrodynamics and compressible
hydrodynamics on a uniform grid. It advances the conserved variables (density,
x and y momentum, total energy, Bx, By) with the MacCormack predictor-corrector
scheme. It uses artificial viscosity and zero-gradient (copy-the-neighbour)
boundaries. An optional mask marks cells as solid. In those cells the momentum
and magnetic field are held at zero.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Built-in problems

Each problem has its own preset grid size, CFL number, end time, adiabatic
index, viscosity factor and snapshot interval:

- `normal_shock`: colliding hydrodynamic streams
- `oblique_shock`: supersonic flow over a wedge (the only problem with a solid internal boundary)
- `sedov`: Sedov point blast
- `mhd_shock`: colliding streams with transverse By
- `mhd_shock_y`: colliding streams along y with Bx
- `reconnection`: double current sheet reconnection

## Running from the command line

```
mhdflow --list
mhdflow sedov --nx 64 --ny 64 -o output
```

Options:

- `problem`: the problem to run.
- `--list`: prints the problems with their descriptions.
- `-o/--output DIR`: sets the output directory. The default is `output`.
- `--probe FIELD`: samples a field at the grid centre on every step. It may be repeated.
- `--nx`, `--ny`, `--cfl`, `--tend`, `--gamma`, `--visc-fac`, `--num-print`,
  `--irad {0,1}`: override the preset values. `--irad 1` turns on the radiative
  cooling source term in the energy equation.

The probe fields are `rho`, `u`, `v`, `p`, `Bx` and `By`. If no `--probe` is
given, the default is `p`. For `mhd_shock` the default is `p`, `rho` and `By`.
For `mhd_shock_y` it is `p`, `rho` and `Bx`.

A run writes these files to the output directory:

- `bound-0.txt`: the internal-boundary mask.
- `<field>-0.txt`: the initial fields.
- `<field>-<step>.txt`: a snapshot every `num_print` steps. A progress line is printed at the same time.
- `<field>.txt`: the final fields.
- `<field>_vs_t.txt`: one `t,value` line per step for each probe.

Grids are written one row per line as space-separated `%f` values. The command
exits with status 1 if the run fails, for example when the time step cannot be
computed.

## Using it from Python

```python
from mhdflow.problems import get_problem
from mhdflow.solver import MacCormackSolver

problem = get_problem("sedov")
config = problem.default_config.with_overrides(nx=64, ny=64)
state = problem.build(config)

solver = MacCormackSolver(config, state)
solver.step()                      # returns the new simulation time
print(solver.probe("p"))           # pressure at the grid centre
summary = solver.run("output", probes=["p", "rho"])
print(summary.steps, summary.time)
```

Modules:

- `mhdflow.config`:
  - `SimulationConfig`: a frozen dataclass with the properties `dx`, `nu` and `radiative_cooling`, and the method `with_overrides`.
  - `PRESETS`: the per-problem parameters.
- `mhdflow.problems`:
  - `get_problem`, `problem_names`
  - `Problem`, `InitialState`
  - one initialiser per problem.
- `mhdflow.physics`:
  - `Primitives`
  - `conserved_from_primitives`, `primitives_from_conserved`
  - `x_fluxes`, `y_fluxes`
  - `max_signal_speed`, `radiative_source`
- `mhdflow.solver`:
  - `MacCormackSolver`
  - `apply_boundaries`, `time_step`
- `mhdflow.output`:
  - `format_field`, `write_field`, `write_snapshot`
  - `TimeSeriesWriter`

## What it does not do

The package only writes plain-text output. It does not plot results, and it
does not read output files back in. The boundaries are fixed to zero-gradient:
there are no periodic or inflow boundaries.