# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a solver fails to find a solution.
    Additional information (optional) is included to allow the reason
    for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.  Each solver raises
    one of the more specific types below, so callers may catch either
    `SolverError` to handle any failure or a derived type to handle a
    particular kind of failure.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  The derived types below set a fixed `flag` != 0.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments, e.g. `its` or `x`.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidPreconditionError(SolverError, ValueError):
    """
    The starting data cannot be used by the method, e.g. the ends of a
    bracket do not give a sign change, or the derivative is exactly
    zero at the current estimate.  Also a `ValueError`, as the problem
    lies with the arguments rather than the iteration.
    """
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 1)
        super().__init__(*args, **kwargs)


class ConvergenceError(SolverError):
    """
    The iteration limit was reached without meeting the tolerance.
    Attribute `its` gives the number of iterations attempted and `x`
    the last estimate (if any), so that the caller can retry with
    relaxed parameters.
    """
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 2)
        super().__init__(*args, **kwargs)


class NumericalInstabilityError(SolverError):
    """
    The update formula of the method broke down, i.e. a denominator
    collapsed to (nearly) zero.  This is a structural failure of the
    step itself and distinct from slow progress (`ConvergenceError`).
    """
    def __init__(self, *args, **kwargs):
        kwargs.setdefault('flag', 3)
        super().__init__(*args, **kwargs)
