"""
=====================================
Solvers (:mod:`eqsolve.solve`)
=====================================

.. currentmodule:: eqsolve.solve

Iterative methods for finding solutions of equations in one variable.
The bracketing methods (`bisection`, `false_position`) require a
starting interval over which the function changes sign and keep the
root bracketed.  The open methods (`fixed_point`, `newton_raphson`,
`secant`, `steffensen`) start from one or two estimates and may
diverge.

All solvers accept ``tol=None`` and ``maxits=None`` to use the current
defaults (see `set_solver_options`) and an optional `trace` sink which
receives the state at each iteration.

Functions
---------

.. autosummary::
    :toctree:

    bisection
    derivative
    false_position
    fixed_point
    newton_raphson
    secant
    steffensen
    get_solver_options
    set_solver_options
    reset_solver_options

Tracing
-------

.. autosummary::
    :toctree:

    IterationRecord
    TraceSink
    PrintTrace
    RecordTrace
    CallbackTrace

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    InvalidPreconditionError
    ConvergenceError
    NumericalInstabilityError

"""

from ._opts import (SolverOptions, get_solver_options, set_solver_options,
                    reset_solver_options)
from .bisect_root import bisection
from .exception import (SolverError, InvalidPreconditionError,
                        ConvergenceError, NumericalInstabilityError)
from .false_position import false_position
from .fixed_point import fixed_point
from .newton import derivative, newton_raphson
from .secant import secant
from .steffensen import steffensen
from .trace import (IterationRecord, TraceSink, PrintTrace, RecordTrace,
                    CallbackTrace, make_sink)

__all__ = ['SolverOptions', 'get_solver_options', 'set_solver_options',
           'reset_solver_options', 'bisection', 'SolverError',
           'InvalidPreconditionError', 'ConvergenceError',
           'NumericalInstabilityError', 'false_position', 'fixed_point',
           'derivative', 'newton_raphson', 'secant', 'steffensen',
           'IterationRecord', 'TraceSink', 'PrintTrace', 'RecordTrace',
           'CallbackTrace', 'make_sink']
