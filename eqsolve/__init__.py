"""
.. This module acts as the top-level API documentation.

.. module: eqsolve

**eqsolve** provides iterative methods for finding solutions of
equations in one variable, either roots :math:`f(x) = 0` or fixed points
:math:`x = f(x)`.  The methods themselves are in :mod:`eqsolve.solve`
and are re-exported here for convenience.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)

from .solve import *  # noqa: E402, F401, F403
