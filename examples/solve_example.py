#!usr/bin/env python3

# Solve the same equation x^3 + 4x^2 - 10 = 0 using each method, printing
# the iterations.

import numpy as np

from eqsolve import (bisection, false_position, fixed_point, newton_raphson,
                     secant, steffensen)


def f(x):
    return x ** 3 + 4 * x ** 2 - 10


def g(x):
    """Fixed point form of 'f', equivalent for the positive root."""
    return 0.5 * np.sqrt(10 - x ** 3)


print("Considering the function x^3 + 4x^2 - 10")
print("\nThe iterations for bisection are as follows:")
bisection(1, 2, f, verbose=True)

print("\nThe iterations for fixed point iteration are as follows (solving "
      "the same equation in the form x = g(x)):")
fixed_point(1.5, g, verbose=True)

print("\nThe iterations for Steffensen's method are as follows (same g(x)):")
steffensen(1.5, g, verbose=True)

print("\nThe iterations for Newton-Raphson are as follows:")
newton_raphson(1.5, f, verbose=True)

print("\nThe iterations for the secant method are as follows:")
secant(1, 2, f, verbose=True)

print("\nThe iterations for the false position method are as follows:")
false_position(1, 2, f, verbose=True)
