from unittest import TestCase

from .scalar_tst_functions import CountCalls, f_exact, g


# ======================================================================

class TestSteffensen(TestCase):
    def test_steffensen(self):
        from eqsolve.solve import steffensen, RecordTrace

        # Check normal operation.
        rec = RecordTrace()
        x = steffensen(1.5, g, 1e-6, trace=rec)
        self.assertAlmostEqual(x, f_exact, delta=1e-6)
        self.assertEqual(rec.column('p')[-1], x)

    def test_faster_than_fixed_point(self):
        from eqsolve.solve import fixed_point, steffensen, RecordTrace

        rec_fp, rec_st = RecordTrace(), RecordTrace()
        x_fp = fixed_point(1.5, g, 1e-6, trace=rec_fp)
        x_st = steffensen(1.5, g, 1e-6, trace=rec_st)
        self.assertAlmostEqual(x_fp, x_st, delta=1e-5)

        # Even counting both function evaluations per step.
        self.assertLess(len(rec_st), len(rec_fp))
        self.assertLess(2 * len(rec_st), len(rec_fp))

    def test_trace_evaluation(self):
        from eqsolve.solve import steffensen, RecordTrace

        # f(p) is only evaluated for the trace.
        plain, traced, rec = CountCalls(g), CountCalls(g), RecordTrace()
        x_plain = steffensen(1.5, plain)
        x_traced = steffensen(1.5, traced, trace=rec)
        self.assertEqual(x_plain, x_traced)
        self.assertEqual(plain.calls, 2 * len(rec))
        self.assertEqual(traced.calls, 3 * len(rec))

    def test_instability(self):
        from eqsolve.solve import steffensen, NumericalInstabilityError

        # Translation has no fixed point; second differences vanish.
        with self.assertRaises(NumericalInstabilityError) as cm:
            steffensen(0.0, lambda x_: x_ + 1)
        self.assertEqual(cm.exception.its, 1)
        self.assertEqual(cm.exception.flag, 3)

    def test_failure_to_converge(self):
        from eqsolve.solve import steffensen, ConvergenceError

        for maxits in (0, 1):
            with self.assertRaises(ConvergenceError) as cm:
                steffensen(1.5, g, maxits=maxits)
            self.assertEqual(cm.exception.its, maxits)
