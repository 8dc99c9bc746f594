"""
Iteration traces for the solvers in :mod:`eqsolve.solve`.

Each solver reports its per-iteration state to an optional *sink*
rather than printing directly.  A sink receives three kinds of call:

    1. ``start(method, columns)`` once, before the first iteration.
    2. ``record(rec)`` once per iteration with an `IterationRecord`.
    3. ``stop(method, x)`` once, only if the method succeeds.

The trace is not part of the numeric result; passing no sink skips it
entirely.
"""

from __future__ import annotations

import sys
from collections import namedtuple
from collections.abc import Callable, Sequence
from typing import TextIO, Union

# ======================================================================

IterationRecord = namedtuple('IterationRecord', ['method', 'it', 'values'])
IterationRecord.__doc__ = """
State of a solver at one iteration.  `method` is the solver name, `it`
the iteration index as numbered by that method and `values` a tuple of
floats matching the column names given to `TraceSink.start`.
"""


# ----------------------------------------------------------------------

class TraceSink:
    """
    Base class for objects receiving solver iteration traces.  All
    methods do nothing at this level.

    .. note::Derived classes should override one or more methods.
    """

    # -- Public Methods ------------------------------------------------

    def start(self, method: str, columns: Sequence[str]):
        """Called before the first iteration of `method`."""
        pass

    def record(self, rec: IterationRecord):
        """Called once per iteration."""
        pass

    def stop(self, method: str, x: float):
        """Called when `method` returns solution `x`."""
        pass


# ----------------------------------------------------------------------

class PrintTrace(TraceSink):
    """
    Prints each iteration as a row of a fixed width table.

    Parameters
    ----------
    file : TextIO, optional
        Output stream.  If `None` (default) the value of `sys.stdout`
        at the time of printing is used.
    width : int, default = 15
        Width of each value column.  The iteration column is always 10
        characters wide.
    precision : int, default = 6
        Number of decimal places shown for each value.

    Examples
    --------
    >>> from eqsolve.solve import bisection
    >>> x = bisection(1, 2, lambda x: x ** 2 - 2, tol=0.1,
    ...               trace=PrintTrace(width=12, precision=4))
     Iteration           a           b           p        f(p)
             1      1.0000      2.0000      1.5000      0.2500
             2      1.0000      1.5000      1.2500     -0.4375
             3      1.2500      1.5000      1.3750     -0.1094
             4      1.3750      1.5000      1.4375      0.0664
    Algorithm stops with solution: 1.4375
    """

    def __init__(self, file: TextIO = None, width: int = 15,
                 precision: int = 6):
        self.file = file
        self.width, self.precision = width, precision

    # -- Public Methods ------------------------------------------------

    def start(self, method: str, columns: Sequence[str]):
        self._print(f"{'Iteration':>10}" +
                    ''.join(f"{c:>{self.width}}" for c in columns))

    def record(self, rec: IterationRecord):
        self._print(f"{rec.it:>10d}" +
                    ''.join(f"{v:{self.width}.{self.precision}f}"
                            for v in rec.values))

    def stop(self, method: str, x: float):
        self._print(f"Algorithm stops with solution: "
                    f"{x:.{self.precision}f}")

    # -- Private Methods -----------------------------------------------

    def _print(self, s: str):
        print(s, file=self.file if self.file is not None else sys.stdout)


# ----------------------------------------------------------------------

class RecordTrace(TraceSink):
    """
    Keeps the complete trace of the last solver run for later use.

    Attributes
    ----------
    method : str
        Name of the solver.
    columns : tuple[str, ...]
        Names of the values in each record.
    records : list[IterationRecord]
        One entry per iteration, in order.
    result : float
        The solution, or `None` if the solver did not succeed.
    """

    def __init__(self):
        self.method, self.columns = None, ()
        self.records: list[IterationRecord] = []
        self.result = None

    def start(self, method: str, columns: Sequence[str]):
        # Starting again discards any previous run.
        self.method, self.columns = method, tuple(columns)
        self.records, self.result = [], None

    def record(self, rec: IterationRecord):
        self.records.append(rec)

    def stop(self, method: str, x: float):
        self.result = x

    def column(self, name: str) -> list[float]:
        """Return all recorded values of column `name` in order."""
        idx = self.columns.index(name)
        return [rec.values[idx] for rec in self.records]

    def __len__(self):
        return len(self.records)


# ----------------------------------------------------------------------

class CallbackTrace(TraceSink):
    """Calls ``func(rec)`` for each `IterationRecord`."""

    def __init__(self, func: Callable[[IterationRecord], None]):
        self.func = func

    def record(self, rec: IterationRecord):
        self.func(rec)


# ======================================================================

TraceArg = Union[TraceSink, Callable[[IterationRecord], None], None]


def make_sink(trace: TraceArg, verbose: bool = False) -> TraceSink | None:
    """
    Convert the `trace` and `verbose` arguments accepted by the solvers
    into a single sink.

    Parameters
    ----------
    trace : TraceSink, Callable or None
        A `TraceSink` is returned unchanged.  Any other callable is
        wrapped in a `CallbackTrace`.
    verbose : bool, default = False
        If True and `trace` is `None`, a `PrintTrace` to standard output
        is returned.

    Returns
    -------
    TraceSink or None
        `None` means no tracing is required.
    """
    if trace is None:
        return PrintTrace() if verbose else None

    if isinstance(trace, TraceSink):
        return trace

    if callable(trace):
        return CallbackTrace(trace)

    raise TypeError(f"trace must be a TraceSink or callable, "
                    f"got {type(trace).__name__}.")
