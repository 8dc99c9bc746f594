from collections.abc import Callable

import numpy as np

from eqsolve.solve._opts import check_limits
from eqsolve.solve.exception import ConvergenceError, InvalidPreconditionError
from eqsolve.solve.trace import IterationRecord, TraceArg, make_sink


# ----------------------------------------------------------------------


def bisection(left: float, right: float, func: Callable[[float], float],
              tol: float = None, maxits: int = None, *,
              trace: TraceArg = None, verbose: bool = False) -> float:
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [a, b]` by the bisection method. For bisection to work
    :math:`f(x)` must change sign across the interval, i.e.
    ``func(left)`` and ``func(right)`` must return values of opposite
    sign, or one of them must be zero.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> bisection(1, 2, f)  # This will take 17 iterations.
    1.6180343627929688
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisection(0, 1, f)  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    left, right : float
        Each end of the search interval.
    func : Callable[[float], float]
        Function which we are searching for root.
    tol : float, optional
        End search when :math:`|f(p)| < tol`.  If `None` the current
        default from `get_solver_options` is used.
    maxits : int, optional
        Maximum number of iterations.  If `None` the current default
        is used.
    trace : TraceSink or Callable, optional
        Receives the values `a`, `b`, `p`, `f(p)` at each iteration.
    verbose : bool, default = False
        If True (and `trace` is not given), print progress as a table.

    Returns
    -------
    p : float
        Best estimate of root found i.e. :math:`f(p) \approx 0`.

    Raises
    ------
    InvalidPreconditionError
        If ``func(left)`` and ``func(right)`` have the same sign.  No
        iterations are performed.
    ConvergenceError
        If `maxits` is reached before a solution is found.
    """
    tol, maxits = check_limits(tol, maxits)
    sink = make_sink(trace, verbose)

    a, b = left, right
    f_a, f_b = func(a), func(b)

    # Compare signs rather than multiplying the values, as the product
    # can overflow or underflow.  A zero at either end is accepted.
    if np.sign(f_a) * np.sign(f_b) > 0:
        raise InvalidPreconditionError(
            "The function values at the boundaries must be of opposite "
            "signs.", its=0, x=(left, right), f=(f_a, f_b))

    if sink is not None:
        sink.start('bisection', ('a', 'b', 'p', 'f(p)'))

    p = None
    for it in range(1, maxits + 1):
        # Compute midpoint.
        p = a + (b - a) / 2
        f_p = func(p)

        if sink is not None:
            sink.record(IterationRecord('bisection', it, (a, b, p, f_p)))

        # Check stopping criteria.
        if abs(f_p) < tol:
            if sink is not None:
                sink.stop('bisection', p)
            return float(p)

        # Check which side root is on, narrow interval.
        if np.sign(f_a) * np.sign(f_p) > 0:
            a, f_a = p, f_p
        else:
            b = p

    raise ConvergenceError(f"No solution found after {maxits} iterations.",
                           its=maxits, x=p)
