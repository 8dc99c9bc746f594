import warnings
from collections.abc import Callable

import numpy as np

from eqsolve.solve._opts import check_limits
from eqsolve.solve.exception import (ConvergenceError,
                                     NumericalInstabilityError)
from eqsolve.solve.trace import IterationRecord, TraceArg, make_sink


# ----------------------------------------------------------------------

def secant(p0: float, p1: float, func: Callable[[float], float],
           tol: float = None, maxits: int = None, *,
           trace: TraceArg = None, verbose: bool = False) -> float:
    r"""
    Find a root of :math:`f(x) = 0` using the secant method, which
    replaces the derivative in Newton's method by the slope through the
    two most recent estimates:

    .. math:: p = p_1 - q_1 \frac{p_1 - p_0}{q_1 - q_0}

    where :math:`q_i = f(p_i)`.  The two starting values need not
    bracket the root.

    Examples
    --------
    >>> f = lambda x: x**3 + 4*x**2 - 10
    >>> round(secant(1, 2, f), 6)
    1.36523

    Parameters
    ----------
    p0, p1 : float
        Two starting estimates of the root.  These count as the first
        two estimates, so iterations are numbered from 2 and at most
        ``maxits - 1`` new estimates are computed.
    func : Callable[[float], float]
        Function whose root is being sought.
    tol : float, optional
        Stop when ``abs(p - p0) < tol``.  Note that `p` is compared to
        the *older* estimate `p0` (not `p1`), so two successive small
        steps are required.  If `None` the current default is used.
    maxits : int, optional
        Iteration limit.  If `None` the current default is used.
    trace : TraceSink or Callable, optional
        Receives `p0`, `p1`, `f(p0)`, `f(p1)` and the new estimate `p`
        for each iteration that did not converge.
    verbose : bool, default = False
        If True (and `trace` is not given), print iterations.

    Returns
    -------
    p : float
        Approximate root.

    Raises
    ------
    NumericalInstabilityError
        If ``f(p0) == f(p1)`` so that the secant is level.
    ConvergenceError
        If `maxits` is exceeded.
    """
    tol, maxits = check_limits(tol, maxits)
    sink = make_sink(trace, verbose)

    q0, q1 = func(p0), func(p1)
    if sink is not None:
        sink.start('secant', ('p0', 'p1', 'f(p0)', 'f(p1)', 'p'))

    for it in range(2, maxits + 1):
        if q1 == q0:
            # Reached a level state: f(p0) = f(p1) -> df/dp = 0.
            raise NumericalInstabilityError(
                "Secant is level (f(p0) == f(p1)), method fails.",
                its=it, x=p1)

        p = p1 - q1 * (p1 - p0) / (q1 - q0)
        if not np.isfinite(p):
            warnings.warn(f"Non-finite estimate at iteration {it}.",
                          RuntimeWarning)

        if abs(p - p0) < tol:
            if sink is not None:
                sink.stop('secant', p)
            return float(p)

        if sink is not None:
            sink.record(IterationRecord('secant', it, (p0, p1, q0, q1, p)))

        p0, q0 = p1, q1
        p1, q1 = p, func(p)

    raise ConvergenceError(f"No solution found after {maxits} steps.",
                           its=maxits, x=p1)
