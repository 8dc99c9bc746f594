import math
from unittest import TestCase, mock

from .scalar_tst_functions import df_dx, f, f_exact


# ======================================================================

class TestDerivative(TestCase):
    def test_derivative(self):
        from eqsolve.solve import derivative

        self.assertAlmostEqual(derivative(math.sin, 0.0, 1e-5), 1.0,
                               places=8)
        self.assertAlmostEqual(derivative(f, 1.5, h=1e-5), df_dx(1.5),
                               places=7)

        # Default step is small, so round-off limits accuracy.
        self.assertAlmostEqual(derivative(f, 1.5), 18.75, places=3)


# ----------------------------------------------------------------------

class TestNewtonRaphson(TestCase):
    def test_newton_raphson(self):
        from eqsolve.solve import newton_raphson, RecordTrace

        # Check normal operation.
        rec = RecordTrace()
        x = newton_raphson(1.5, f, 1e-6, trace=rec)
        self.assertAlmostEqual(x, f_exact, delta=1e-6)
        self.assertLess(len(rec), 10)
        self.assertEqual(rec.columns, ('p0', 'f(p0)', "f'(p0)", 'p'))

        # Quadratic convergence: each error is smaller than the square
        # of the previous one over the first steps.
        errs = [abs(p0 - f_exact) for p0 in rec.column('p0')]
        self.assertGreaterEqual(len(errs), 3)
        self.assertLess(errs[1], errs[0] ** 2)
        self.assertLess(errs[2], errs[1] ** 2)

    def test_analytic_derivative(self):
        from eqsolve.solve import newton_raphson

        x = newton_raphson(1.5, f, fprime=df_dx)
        self.assertAlmostEqual(x, f_exact, places=12)

    def test_options_not_copied(self):
        from dataclasses import replace
        from eqsolve.solve import newton_raphson, derivative, RecordTrace

        # The default step is read without copying the options at each
        # iteration.
        rec = RecordTrace()
        with mock.patch('eqsolve.solve._opts.replace',
                        wraps=replace) as replace_mock:
            x = newton_raphson(1.5, f, trace=rec)
            derivative(f, 1.5)
        replace_mock.assert_not_called()

        self.assertGreater(len(rec), 1)
        self.assertEqual(x, newton_raphson(1.5, f, h=1e-10))

    def test_zero_derivative(self):
        from eqsolve.solve import newton_raphson, InvalidPreconditionError

        def h(x_):
            return x_ ** 2 + 1

        with self.assertRaises(InvalidPreconditionError) as cm:
            newton_raphson(0.0, h)
        self.assertEqual(cm.exception.its, 1)
        self.assertEqual(cm.exception.x, 0.0)

        with self.assertRaises(InvalidPreconditionError):
            newton_raphson(0.0, h, fprime=lambda x_: 2 * x_)

    def test_failure_to_converge(self):
        from eqsolve.solve import newton_raphson, ConvergenceError

        with self.assertRaises(ConvergenceError) as cm:
            newton_raphson(1.5, f, maxits=2)
        self.assertEqual(cm.exception.its, 2)
