from collections.abc import Callable

from eqsolve.solve._opts import check_limits, get_solver_options
from eqsolve.solve.exception import (ConvergenceError,
                                     NumericalInstabilityError)
from eqsolve.solve.trace import IterationRecord, TraceArg, make_sink


# ----------------------------------------------------------------------

def steffensen(p0: float, func: Callable[[float], float],
               tol: float = None, maxits: int = None, *,
               trace: TraceArg = None, verbose: bool = False) -> float:
    r"""
    Find the fixed point of :math:`x = f(x)` using Steffensen's method,
    i.e. fixed point iteration accelerated by Aitken's
    :math:`\Delta^2` process.  Each iteration takes two plain steps
    :math:`p_1 = f(p_0)`, :math:`p_2 = f(p_1)` and then restarts from:

    .. math:: p = p_0 - \frac{(p_1 - p_0)^2}{p_2 - 2p_1 + p_0}

    Convergence is quadratic even when plain `fixed_point` iteration of
    the same `func` converges only linearly.

    Examples
    --------
    >>> import math
    >>> g = lambda x: 0.5 * math.sqrt(10 - x**3)
    >>> round(steffensen(1.5, g), 6)
    1.36523

    Parameters
    ----------
    p0 : float
        Starting value for `x`.
    func : Callable[[float], float]
        Function that returns a better estimate of `x`.
    tol : float, optional
        Stop when ``abs(p - p0) < tol``.  If `None` the current default
        is used.
    maxits : int, optional
        Iteration limit.  If `None` the current default is used.
    trace : TraceSink or Callable, optional
        Receives the accelerated estimate `p` and `f(p)` at each
        iteration.  The extra evaluation `f(p)` is only made if a trace
        is active.
    verbose : bool, default = False
        If True (and `trace` is not given), print iterations.

    Returns
    -------
    p : float
        Converged `x` value.

    Raises
    ------
    NumericalInstabilityError
        If the magnitude of the denominator falls below the
        ``aitken_tiny`` solver option (default 1e-12).
    ConvergenceError
        If `maxits` is exceeded.
    """
    tol, maxits = check_limits(tol, maxits)
    tiny = get_solver_options().aitken_tiny
    sink = make_sink(trace, verbose)
    if sink is not None:
        sink.start('steffensen', ('p', 'f(p)'))

    for it in range(1, maxits + 1):
        p1 = func(p0)
        p2 = func(p1)

        denom = p2 - 2 * p1 + p0
        if abs(denom) < tiny:
            raise NumericalInstabilityError(
                f"Denominator near zero, method fails at iteration {it}.",
                its=it, x=p0, denominator=denom)

        p = p0 - (p1 - p0) ** 2 / denom

        if sink is not None:
            sink.record(IterationRecord('steffensen', it, (p, func(p))))

        if abs(p - p0) < tol:
            if sink is not None:
                sink.stop('steffensen', p)
            return float(p)

        p0 = p

    raise ConvergenceError(f"No solution found after {maxits} iterations.",
                           its=maxits, x=p0)
