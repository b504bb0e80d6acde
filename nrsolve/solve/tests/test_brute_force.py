import io
import math
from contextlib import redirect_stdout
from unittest import TestCase

from .scalar_tst_functions import (CountCalls, F_ROOT, df_dx, dg_dx, dh_dx,
                                   dq_dx, f, g, h, q)


# ======================================================================

class TestFindRootBruteForce(TestCase):
    def test_primary_start(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        # A good primary start means the ranges are never used.
        fc = CountCalls(f)
        x, res = find_root_brute_force(1.0, [(-100.0, 100.0, 1.0)], fc,
                                       df_dx, full_output=True)
        self.assertAlmostEqual(x, F_ROOT, places=12)
        self.assertEqual(res.attempts, 1)
        self.assertEqual(res.seed, 1.0)
        self.assertTrue(res.converged)

        # One call of f per iteration plus the acceptance check.
        self.assertEqual(fc.calls, res.iterations + 1)

    def test_fallback(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        def p(x):
            return (x - 50) ** 2 - 1

        def dp_dx(x):
            return 2 * (x - 50)

        x = find_root_brute_force(0.0, [(0.0, 100.0, 5.0)], p, dp_dx)
        self.assertTrue(math.isfinite(x))
        self.assertLess(abs(p(x)), 1e-3)

        # Divergent from the primary start, and from every seed more than
        # about 1.39 from the root at x = 10.
        x, res = find_root_brute_force(0.0, [(0.0, 20.0, 1.0)], h, dh_dx,
                                       full_output=True)
        self.assertAlmostEqual(x, 10.0, delta=1e-9)
        self.assertEqual(res.seed, 9.0)
        self.assertEqual(res.attempts, 11)  # Primary + seeds 0 to 9.

        # Starting on the turning point fails, scan succeeds.
        x = find_root_brute_force(2.5, [(3.0, 6.0, 1.0)], g, dg_dx)
        self.assertAlmostEqual(x, 4.0, delta=1e-9)

    def test_first_match(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        # Smallest seed in the range wins.
        x, res = find_root_brute_force(2.5, [(0.0, 6.0, 1.0)], g, dg_dx,
                                       full_output=True)
        self.assertAlmostEqual(x, 1.0, delta=1e-9)
        self.assertEqual(res.seed, 0.0)

        # Range order wins over seed value.
        x, res = find_root_brute_force(
            2.5, [(5.0, 6.0, 1.0), (0.0, 1.0, 0.5)], g, dg_dx,
            full_output=True)
        self.assertAlmostEqual(x, 4.0, delta=1e-9)
        self.assertEqual(res.seed, 5.0)
        self.assertTrue(res.zero_der)  # From the primary attempt.

    def test_exhausted(self):
        from nrsolve.solve import SolverError
        from nrsolve.solve.brute_force import find_root_brute_force

        ranges = [(-10.0, 10.0, 2.5), (10.0, 20.0, 5.0)]
        x, res = find_root_brute_force(0.5, ranges, q, dq_dx,
                                       full_output=True)
        self.assertTrue(math.isnan(x))
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, 3)
        self.assertEqual(res.attempts, 1 + 8 + 2)
        self.assertTrue(math.isnan(res.seed))

        with self.assertRaises(SolverError) as cm:
            find_root_brute_force(0.5, ranges, q, dq_dx, disp=True)
        self.assertEqual(cm.exception.flag, 3)
        self.assertEqual(cm.exception.attempts, 11)

        # No ranges at all.
        self.assertTrue(math.isnan(find_root_brute_force(0.5, [], q,
                                                         dq_dx)))

    def test_ranges(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        # Bad steps are rejected before f is ever called.
        for step in (0.0, -1.0, float('nan')):
            fc = CountCalls(g)
            with self.assertRaises(ValueError):
                find_root_brute_force(2.5, [(3.0, 6.0, 1.0),
                                            (0.0, 5.0, step)], fc, dg_dx)
            self.assertEqual(fc.calls, 0)

        with self.assertRaises(ValueError):
            find_root_brute_force(2.5, [(3.0, 6.0)], g, dg_dx)

        # Empty ranges give no seeds.
        x, res = find_root_brute_force(2.5, [(6.0, 3.0, 1.0),
                                             (4.0, 4.0, 1.0)], g, dg_dx,
                                       full_output=True)
        self.assertTrue(math.isnan(x))
        self.assertEqual(res.attempts, 1)

        # A bad step is rejected even if the range is empty.
        with self.assertRaises(ValueError):
            find_root_brute_force(2.5, [(6.0, 3.0, 0.0)], g, dg_dx)

    def test_acceptance(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        # With a loose Newton tolerance the roots found from 1.0 and 1.5
        # are rejected by a tighter acceptance test.  Starting on the
        # root itself passes.
        ranges = [(1.5, 1.6, 0.25), (F_ROOT, 2.0, 1.0)]
        x, res = find_root_brute_force(1.0, ranges, f, df_dx, tol=1e-1,
                                       ftol=1e-12, full_output=True)
        self.assertEqual(x, F_ROOT)
        self.assertEqual(res.seed, F_ROOT)
        self.assertEqual(res.attempts, 3)

        x = find_root_brute_force(1.0, ranges[:1], f, df_dx, tol=1e-1,
                                  ftol=1e-12)
        self.assertTrue(math.isnan(x))

        with self.assertRaises(ValueError):
            find_root_brute_force(1.0, [], f, df_dx, ftol=0.0)

    def test_idempotent(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        ranges = [(0.0, 20.0, 1.0)]
        first = find_root_brute_force(0.0, ranges, h, dh_dx)
        for _ in range(3):
            self.assertEqual(find_root_brute_force(0.0, ranges, h, dh_dx),
                             first)

    def test_verbose(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        buf = io.StringIO()
        with redirect_stdout(buf):
            find_root_brute_force(2.5, [(3.0, 6.0, 1.0)], g, dg_dx,
                                  verbose=True)
        out = buf.getvalue()
        self.assertIn("Brute-Force Newton-Raphson Root:", out)
        self.assertIn("... Attempt 2:", out)
        self.assertIn("(accepted)", out)
        self.assertIn("... Converged.", out)


# ----------------------------------------------------------------------

class TestIsGoodRoot(TestCase):
    def test_is_good_root(self):
        from nrsolve.solve.brute_force import is_good_root

        self.assertTrue(is_good_root(F_ROOT, f))
        self.assertTrue(is_good_root(F_ROOT + 1e-4, f))
        self.assertFalse(is_good_root(F_ROOT + 1e-4, f, ftol=1e-6))
        self.assertFalse(is_good_root(0.0, f))

        # Non-finite values are rejected without calling f.
        fc = CountCalls(f)
        for r in (float('nan'), float('inf'), -float('inf')):
            self.assertFalse(is_good_root(r, fc))
        self.assertEqual(fc.calls, 0)


# ----------------------------------------------------------------------

class TestScanSeeds(TestCase):
    def test_scan_seeds(self):
        from nrsolve.solve.brute_force import scan_seeds

        seeds = list(scan_seeds([(0.0, 2.0, 0.5), (5.0, 5.0, 1.0),
                                 (10.0, 12.0, 1.0)]))
        self.assertEqual(seeds, [0.0, 0.5, 1.0, 1.5, 10.0, 11.0])

        # Seeds accumulate by repeated addition.
        seeds = list(scan_seeds([(0.0, 0.35, 0.1)]))
        self.assertEqual(seeds, [0.0, 0.1, 0.1 + 0.1, 0.1 + 0.1 + 0.1])

        self.assertEqual(list(scan_seeds([])), [])

        # Checked when called, not when iterated.
        with self.assertRaises(ValueError):
            scan_seeds([(0.0, 1.0, 0.5), (0.0, 1.0, -0.5)])

    def test_scan_seeds_terminate(self):
        from nrsolve.solve.brute_force import scan_seeds

        inf = float('inf')

        # Step too small to move a seed of this size.
        with self.assertRaises(ValueError):
            scan_seeds([(1e17, 1e17 + 64.0, 1.0)])

        # Seeds would stall part way through the range.
        with self.assertRaises(ValueError):
            scan_seeds([(1e15, 1e17, 1.0)])
        with self.assertRaises(ValueError):
            scan_seeds([(-1e17, 0.0, 1.0)])

        # Unbounded ranges.
        with self.assertRaises(ValueError):
            scan_seeds([(0.0, inf, 1.0)])
        with self.assertRaises(ValueError):
            scan_seeds([(-inf, 0.0, 1.0)])

        # Empty ranges are not checked for these.
        self.assertEqual(list(scan_seeds([(inf, inf, 1.0),
                                          (5.0, -inf, 1e-30)])), [])

        # Large but representable steps are fine.
        seeds = list(scan_seeds([(1e17, 1e17 + 64.0, 16.0)]))
        self.assertEqual(seeds, [1e17, 1e17 + 16.0, 1e17 + 32.0,
                                 1e17 + 48.0])

    def test_scan_seeds_non_numeric(self):
        from nrsolve.solve.brute_force import scan_seeds

        for rng in [(0.0, 1.0, 'a'), (None, 1.0, 0.5), (0.0, [1.0], 0.5),
                    5.0]:
            with self.assertRaises(ValueError):
                scan_seeds([rng])

        # Integers are taken as floats.
        self.assertEqual(list(scan_seeds([(0, 3, 1)])), [0.0, 1.0, 2.0])

    def test_brute_force_rejects_stalled_range(self):
        from nrsolve.solve.brute_force import find_root_brute_force

        fc = CountCalls(q)
        with self.assertRaises(ValueError):
            find_root_brute_force(0.5, [(1e17, 1e17 + 64.0, 1.0)], fc,
                                  dq_dx)
        self.assertEqual(fc.calls, 0)

# ----------------------------------------------------------------------
