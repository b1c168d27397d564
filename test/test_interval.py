from unittest import TestCase


class TestCheckInterval(TestCase):
    def test_check_interval(self):
        from bernpoly import check_interval, InvalidIntervalError

        check_interval(0.0, 1.0)
        check_interval(-3, -3)  # Zero width is valid.

        with self.assertRaises(InvalidIntervalError):
            check_interval(1.0, 0.0)

        with self.assertRaises(ValueError):  # Also a ValueError.
            check_interval(2, 1)

    def test_check_width(self):
        from bernpoly import (check_width, DegenerateIntervalError,
                              InvalidIntervalError)

        check_width(-1.0, 1.0)

        with self.assertRaises(DegenerateIntervalError):
            check_width(0.5, 0.5)

        with self.assertRaises(InvalidIntervalError):
            check_width(1.0, 0.0)

        # Degenerate intervals are a separate kind of error.
        self.assertFalse(issubclass(DegenerateIntervalError,
                                    InvalidIntervalError))

    def test_error_details(self):
        from bernpoly import check_interval, InvalidIntervalError

        with self.assertRaises(InvalidIntervalError) as cm:
            check_interval(1.0, 0.0)

        self.assertEqual(cm.exception.α, 1.0)
        self.assertEqual(cm.exception.β, 0.0)
        self.assertIn("Invalid interval.", str(cm.exception))
        self.assertIn("α -> 1.0", str(cm.exception))


class TestCheckSameInterval(TestCase):
    def test_check_same_interval(self):
        from bernpoly import (BernsteinPoly, check_same_interval,
                              IntervalMismatchError, InvalidIntervalError)

        check_same_interval(BernsteinPoly(3, 1), BernsteinPoly(2, 0))

        with self.assertRaises(IntervalMismatchError):
            check_same_interval(BernsteinPoly(3, 1, 0.0, 1.0),
                                BernsteinPoly(3, 1, 0.0, 2.0))

        with self.assertRaises(IntervalMismatchError):
            check_same_interval(BernsteinPoly(3, 1, -1.0, 1.0),
                                BernsteinPoly(3, 1, 0.0, 1.0))

        # Same but inverted interval.
        with self.assertRaises(InvalidIntervalError):
            check_same_interval(BernsteinPoly(3, 1, 1.0, 0.0),
                                BernsteinPoly(2, 2, 1.0, 0.0))
