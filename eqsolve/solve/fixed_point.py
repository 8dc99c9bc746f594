from collections.abc import Callable

from eqsolve.solve._opts import check_limits
from eqsolve.solve.exception import ConvergenceError
from eqsolve.solve.trace import IterationRecord, TraceArg, make_sink


# ----------------------------------------------------------------------

def fixed_point(p0: float, func: Callable[[float], float],
                tol: float = None, maxits: int = None, *,
                trace: TraceArg = None, verbose: bool = False) -> float:
    r"""
    Find the fixed point of a function :math:`x = f(x)` by direct
    iteration :math:`p_{n+1} = f(p_n)`.

    The iteration converges only if :math:`|f'(x)| < 1` near the fixed
    point.  There is no safeguard against divergence or oscillation; in
    this case `maxits` is simply exhausted.  For a faster alternative
    using the same `func` see `steffensen`.

    Examples
    --------
    >>> def g(x_): return (x_ + 10) ** 0.25
    >>> round(fixed_point(-3, g), 6)
    1.855585

    Parameters
    ----------
    p0 : float
        Starting value for `x`.
    func : Callable[[float], float]
        Function that returns a better estimate of `x`.
    tol : float, optional
        Stop when ``abs(p - p0) < tol``, where `p` = ``func(p0)``.  Note
        that this compares successive estimates and not the residual
        :math:`|f(p) - p|`.  If `None` the current default is used.
    maxits : int, optional
        Iteration limit.  If `None` the current default is used.
    trace : TraceSink or Callable, optional
        Receives the values `p0` and `p` = ``func(p0)`` at each
        iteration that did not converge.
    verbose : bool, default = False
        If True (and `trace` is not given), print iterations.

    Returns
    -------
    p : float
        Converged `x` value.

    Raises
    ------
    ConvergenceError
        If `maxits` is exceeded.
    """
    tol, maxits = check_limits(tol, maxits)
    sink = make_sink(trace, verbose)
    if sink is not None:
        sink.start('fixed_point', ('p', 'f(p)'))

    for it in range(1, maxits + 1):
        p = func(p0)

        # The converging step is not traced.
        if abs(p - p0) < tol:
            if sink is not None:
                sink.stop('fixed_point', p)
            return float(p)

        if sink is not None:
            sink.record(IterationRecord('fixed_point', it, (p0, p)))

        p0 = p

    raise ConvergenceError(f"No solution found after {maxits} steps.",
                           its=maxits, x=p0)
