"""
Find a zero of a real function using the Newton-Raphson method.  The
derivative is approximated by central differences unless an analytic
derivative is supplied.
"""

from collections.abc import Callable

from eqsolve.solve import _opts
from eqsolve.solve._opts import check_limits
from eqsolve.solve.exception import ConvergenceError, InvalidPreconditionError
from eqsolve.solve.trace import IterationRecord, TraceArg, make_sink


# ---------------------------------------------------------------------------

def derivative(func: Callable[[float], float], x: float,
               h: float = None) -> float:
    r"""
    Approximate :math:`f'(x)` using the central difference
    :math:`(f(x + h) - f(x - h)) / 2h`.

    Parameters
    ----------
    func : Callable[[float], float]
        Function to differentiate.
    x : float
        Point at which the derivative is required.
    h : float, optional
        Step size.  If `None` the ``deriv_step`` solver option is used
        (default 1e-10).

    Returns
    -------
    float
        Approximate derivative.  No attempt is made to control the
        truncation or round-off error due to `h`.
    """
    if h is None:
        h = _opts._solver_options.deriv_step
    return (func(x + h) - func(x - h)) / (2 * h)


def newton_raphson(p0: float, func: Callable[[float], float],
                   tol: float = None, maxits: int = None, *,
                   fprime: Callable[[float], float] = None,
                   h: float = None, trace: TraceArg = None,
                   verbose: bool = False) -> float:
    r"""
    Find a root of :math:`f(x) = 0` by Newton-Raphson iteration
    :math:`p = p_0 - f(p_0) / f'(p_0)`, starting from `p0`.

    Convergence is quadratic near a simple root, however this is not
    checked.  As an open method there is no guarantee of convergence
    from an arbitrary starting point.

    Examples
    --------
    >>> f = lambda x: x**3 + 4*x**2 - 10
    >>> round(newton_raphson(1.5, f), 6)
    1.36523

    Parameters
    ----------
    p0 : float
        Initial estimate of the root.
    func : Callable[[float], float]
        Function whose root is being sought.
    tol : float, optional
        Stop when ``abs(p - p0) < tol``.  If `None` the current default
        is used.
    maxits : int, optional
        Iteration limit.  If `None` the current default is used.
    fprime : Callable[[float], float], optional
        Analytic derivative of `func`.  If `None` (default), `derivative`
        is used.
    h : float, optional
        Step passed to `derivative` when `fprime` is not given.
    trace : TraceSink or Callable, optional
        Receives the values `p0`, `f(p0)`, `f'(p0)` and the new
        estimate `p` at each iteration.
    verbose : bool, default = False
        If True (and `trace` is not given), print iterations.

    Returns
    -------
    p : float
        Approximate root.

    Raises
    ------
    InvalidPreconditionError
        If the derivative is exactly zero at the current estimate.
    ConvergenceError
        If `maxits` is exceeded.
    """
    tol, maxits = check_limits(tol, maxits)
    if fprime is None and h is None:
        h = _opts._solver_options.deriv_step
    sink = make_sink(trace, verbose)
    if sink is not None:
        sink.start('newton_raphson', ('p0', 'f(p0)', "f'(p0)", 'p'))

    for it in range(1, maxits + 1):
        fval = func(p0)
        if fprime is not None:
            fder = fprime(p0)
        else:
            fder = derivative(func, p0, h)

        if fder == 0:
            # Reached a level state -> df/dp = 0.
            raise InvalidPreconditionError(
                "Derivative is zero at the current estimate; the "
                "algorithm cannot proceed.", its=it, x=p0)

        p = p0 - fval / fder

        if sink is not None:
            sink.record(IterationRecord('newton_raphson', it,
                                        (p0, fval, fder, p)))

        if abs(p - p0) < tol:
            if sink is not None:
                sink.stop('newton_raphson', p)
            return float(p)

        p0 = p

    raise ConvergenceError(f"No solution found after {maxits} steps.",
                           its=maxits, x=p0)
