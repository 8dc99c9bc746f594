import warnings
from collections.abc import Callable

import numpy as np

from eqsolve.solve._opts import check_limits
from eqsolve.solve.exception import (ConvergenceError,
                                     InvalidPreconditionError,
                                     NumericalInstabilityError)
from eqsolve.solve.trace import IterationRecord, TraceArg, make_sink


# ----------------------------------------------------------------------

def false_position(p0: float, p1: float, func: Callable[[float], float],
                   tol: float = None, maxits: int = None, *,
                   trace: TraceArg = None, verbose: bool = False) -> float:
    r"""
    Find a root of :math:`f(x) = 0` using the method of false position
    (*regula falsi*).

    The new estimate uses the same secant formula as `secant`, however
    the older point `p0` is only replaced when the function changes sign
    between `p1` and the new estimate.  This keeps the root bracketed,
    i.e. :math:`f(p_0) f(p_1) \le 0` at every iteration.  Convergence
    can be slow if one end of the bracket stays fixed.

    Examples
    --------
    >>> f = lambda x: x**3 + 4*x**2 - 10
    >>> round(false_position(1, 2, f), 6)
    1.36523

    Parameters
    ----------
    p0, p1 : float
        Ends of the starting bracket.  Iterations are numbered from 2,
        the same as `secant`.
    func : Callable[[float], float]
        Function whose root is being sought.
    tol : float, optional
        Stop when ``abs(p - p1) < tol``, i.e. `p` is compared to the
        *most recent* estimate.  If `None` the current default is used.
    maxits : int, optional
        Iteration limit.  If `None` the current default is used.
    trace : TraceSink or Callable, optional
        Receives `p0`, `p1`, `f(p0)`, `f(p1)` and the new estimate `p`
        at each iteration.
    verbose : bool, default = False
        If True (and `trace` is not given), print iterations.

    Returns
    -------
    p : float
        Approximate root.

    Raises
    ------
    InvalidPreconditionError
        If ``func(p0)`` and ``func(p1)`` have the same sign.
    NumericalInstabilityError
        If ``f(p0) == f(p1)``, which can only occur if both are zero.
    ConvergenceError
        If `maxits` is exceeded.
    """
    tol, maxits = check_limits(tol, maxits)
    sink = make_sink(trace, verbose)

    q0, q1 = func(p0), func(p1)
    if np.sign(q0) * np.sign(q1) > 0:
        raise InvalidPreconditionError(
            "The function values at the initial points must be of "
            "opposite signs.", its=0, x=(p0, p1), f=(q0, q1))

    if sink is not None:
        sink.start('false_position', ('p0', 'p1', 'f(p0)', 'f(p1)', 'p'))

    for it in range(2, maxits + 1):
        if q1 == q0:
            raise NumericalInstabilityError(
                "Bracket is level (f(p0) == f(p1)), method fails.",
                its=it, x=p1)

        p = p1 - q1 * (p1 - p0) / (q1 - q0)
        if not np.isfinite(p):
            warnings.warn(f"Non-finite estimate at iteration {it}.",
                          RuntimeWarning)

        if sink is not None:
            sink.record(IterationRecord('false_position', it,
                                        (p0, p1, q0, q1, p)))

        if abs(p - p1) < tol:
            if sink is not None:
                sink.stop('false_position', p)
            return float(p)

        # Keep the end giving a sign change against the new point.
        q = func(p)
        if np.sign(q) * np.sign(q1) < 0:
            p0, q0 = p1, q1

        p1, q1 = p, q

    raise ConvergenceError(f"No solution found after {maxits} steps.",
                           its=maxits, x=p1)
