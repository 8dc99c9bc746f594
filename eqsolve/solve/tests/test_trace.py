import io
from unittest import TestCase

from .scalar_tst_functions import f


# ======================================================================

class TestMakeSink(TestCase):
    def test_make_sink(self):
        from eqsolve.solve import (make_sink, CallbackTrace, PrintTrace,
                                   RecordTrace)

        self.assertIsNone(make_sink(None))
        self.assertIsInstance(make_sink(None, verbose=True), PrintTrace)

        rec = RecordTrace()
        self.assertIs(make_sink(rec), rec)
        self.assertIs(make_sink(rec, verbose=True), rec)
        self.assertIsInstance(make_sink(print), CallbackTrace)

        with self.assertRaises(TypeError):
            make_sink(3)


# ----------------------------------------------------------------------

class TestRecordTrace(TestCase):
    def test_record_trace(self):
        from eqsolve.solve import (newton_raphson, IterationRecord,
                                   RecordTrace)

        rec = RecordTrace()
        self.assertEqual(len(rec), 0)
        x = newton_raphson(1.5, f, trace=rec)

        self.assertEqual(rec.method, 'newton_raphson')
        self.assertEqual(rec.result, x)
        first = rec.records[0]
        self.assertIsInstance(first, IterationRecord)
        self.assertEqual(first.it, 1)
        self.assertEqual(first.values[0], 1.5)
        self.assertEqual(first.values[1], 2.375)
        self.assertEqual(rec.column('p'), [r.values[3] for r in rec.records])

        with self.assertRaises(ValueError):
            rec.column('q')

        # Using the same object again starts a new trace.
        newton_raphson(1.0, f, trace=rec)
        self.assertEqual(rec.records[0].values[0], 1.0)


# ----------------------------------------------------------------------

class TestPrintTrace(TestCase):
    def test_layout(self):
        from eqsolve.solve import PrintTrace, secant

        buf = io.StringIO()
        secant(1, 2, f, trace=PrintTrace(file=buf, width=12, precision=3))
        lines = buf.getvalue().splitlines()

        self.assertEqual(lines[0], " Iteration" + "          p0"
                         "          p1       f(p0)       f(p1)           p")
        self.assertEqual(lines[1], "         2" + "       1.000"
                         "       2.000      -5.000      14.000       1.263")
        self.assertTrue(lines[-1].startswith(
            "Algorithm stops with solution: 1.365"))

    def test_uniform_columns(self):
        from eqsolve.solve import PrintTrace, newton_raphson, steffensen
        from .scalar_tst_functions import g

        # Every column has the same width, including Newton's new
        # estimate 'p'.
        buf = io.StringIO()
        newton_raphson(1.5, f, trace=PrintTrace(file=buf))
        lines = buf.getvalue().splitlines()
        self.assertEqual(lines[0], " Iteration" + ''.join(
            s.rjust(15) for s in ('p0', 'f(p0)', "f'(p0)", 'p')))
        self.assertEqual(len(lines[1]), 10 + 4 * 15)

        # All methods, Steffensen included, report the solution.
        buf = io.StringIO()
        steffensen(1.5, g, trace=PrintTrace(file=buf))
        self.assertEqual(buf.getvalue().splitlines()[-1],
                         "Algorithm stops with solution: 1.365230")

    def test_silent_by_default(self):
        from contextlib import redirect_stdout
        from eqsolve.solve import steffensen
        from .scalar_tst_functions import g

        out = io.StringIO()
        with redirect_stdout(out):
            steffensen(1.5, g)
        self.assertEqual(out.getvalue(), '')
