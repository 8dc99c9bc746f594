from __future__ import annotations

import operator
from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class SolverOptions:
    """
    Dataclass that holds the default settings used by all solvers when
    a value is not given at the call site.  See `get_solver_options`
    and `set_solver_options` for full details.
    """
    tol: float
    maxits: int
    deriv_step: float
    aitken_tiny: float

    def __post_init__(self):
        """Check certain values"""
        if self.tol <= 0:
            raise ValueError("Require 'tol' > 0.")
        if operator.index(self.maxits) < 0:
            raise ValueError("Require 'maxits' >= 0.")
        if self.deriv_step <= 0:
            raise ValueError("Require 'deriv_step' > 0.")
        if self.aitken_tiny < 0:
            raise ValueError("Require 'aitken_tiny' >= 0.")


# Default values, also used by `reset_solver_options`.
_DEFAULT_OPTIONS = SolverOptions(
    tol=1e-6,
    maxits=1_000_000,
    deriv_step=1e-10,
    aitken_tiny=1e-12
)
_solver_options = _DEFAULT_OPTIONS


# ----------------------------------------------------------------------

def get_solver_options() -> SolverOptions:
    """
    Returns
    -------
    solver_options : SolverOptions
        Returns a copy of the current solver options.  For a full
        description of each option, see `set_solver_options`.
    """
    return replace(_solver_options)


# noinspection PyIncorrectDocstring
def set_solver_options(**kwargs):
    """
    Set the current solver options.

    Parameters
    ----------
    tol : float, default = 1e-6
        Tolerance used when a solver is called with ``tol=None``.  The
        meaning depends on the method, e.g. :math:`|f(p)|` for bisection
        or the difference between successive estimates for the open
        methods.

    maxits : int, default = 1,000,000
        Iteration limit used when a solver is called with
        ``maxits=None``.

    deriv_step : float, default = 1e-10
        Step `h` used by the central difference `derivative` (and so by
        `newton_raphson`) when no step is given.

    aitken_tiny : float, default = 1e-12
        `steffensen` fails if the magnitude of the Aitken denominator
        :math:`p_2 - 2p_1 + p_0` falls below this value.

    Raises
    ------
    ValueError
        If any new value is out of range.
    TypeError
        If an unknown option is given.
    """
    global _solver_options
    _solver_options = replace(_solver_options, **kwargs)


def reset_solver_options():
    """Restore all solver options to their default values."""
    global _solver_options
    _solver_options = _DEFAULT_OPTIONS


# ----------------------------------------------------------------------

def check_limits(tol: float | None, maxits: int | None) -> (float, int):
    # Fill in call-site defaults and check the values actually used.
    if tol is None:
        tol = _solver_options.tol
    if maxits is None:
        maxits = _solver_options.maxits

    if tol <= 0:
        raise ValueError("tol too small (%g <= 0)" % tol)

    maxits = operator.index(maxits)
    if maxits < 0:
        raise ValueError("maxits must be 0 or greater.")

    return tol, maxits
