"""Plain-text output of grid fields and probe time series."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

import numpy as np

from mhdflow.physics import Primitives

PathLike = Union[str, "os.PathLike[str]"]


def format_field(arr) -> str:
    """Render a 2-D field as text: one grid row per line, values as ``%f ``."""
    data = np.asarray(arr, dtype=float)
    if data.ndim != 2:
        raise ValueError(f"field must be two-dimensional, got shape {data.shape}")
    return "".join(
        "".join(f"{value:f} " for value in row) + "\n" for row in data.tolist()
    )


def write_field(arr, path: PathLike) -> Path:
    """Write a 2-D field to ``path``, replacing any existing file."""
    target = Path(path)
    target.write_text(format_field(arr))
    return target


def write_snapshot(
    prim: Primitives, directory: PathLike, suffix: object = None
) -> list[Path]:
    """Write every primitive field to ``directory``.

    Files are named ``<field>-<suffix>.txt``, or ``<field>.txt`` when no
    suffix is given. The directory is created if needed. Returns the paths
    written, in field order.
    """
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    tail = "" if suffix is None else f"-{suffix}"
    return [
        write_field(values, folder / f"{name}{tail}.txt")
        for name, values in prim.items()
    ]


class TimeSeriesWriter:
    """Records ``t,value`` pairs for a probe, one line per call.

    The first call to :meth:`append` replaces any existing file; later
    calls add to it.
    """

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        self.count = 0

    def append(self, t: float, value: float) -> None:
        """Add one sample to the series."""
        mode = "w" if self.count == 0 else "a"
        with self.path.open(mode) as handle:
            handle.write(f"{float(t):f},{float(value):f}\n")
        self.count += 1

    def __repr__(self) -> str:
        return f"TimeSeriesWriter({str(self.path)!r}, count={self.count})"