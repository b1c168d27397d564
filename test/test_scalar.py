from fractions import Fraction
from unittest import TestCase

import numpy as np


class TestCommonType(TestCase):
    def test_python_types(self):
        from bernpoly import common_type

        self.assertIs(common_type(int, int), int)
        self.assertIs(common_type(int, float), float)
        self.assertIs(common_type(float, int), float)
        self.assertIs(common_type(int, Fraction), Fraction)
        self.assertIs(common_type(Fraction, float), float)
        self.assertIs(common_type(float, complex), complex)

    def test_numpy_types(self):
        from bernpoly import common_type

        self.assertIs(common_type(np.float32, np.float64), np.float64)
        self.assertIs(common_type(np.float32, np.complex64), np.complex64)
        self.assertIs(common_type(int, np.float64), np.float64)
        self.assertIs(common_type(np.int16, np.int32), np.int32)

        # NumPy can't promote these without 'object', so use the tower.
        self.assertIs(common_type(np.int64, Fraction), Fraction)
        self.assertIs(common_type(Fraction, np.float32), np.float32)

    def test_not_numeric(self):
        from bernpoly import common_type

        with self.assertRaises(TypeError):
            common_type(str, float)


class TestConvertNumber(TestCase):
    def test_convert_number(self):
        from bernpoly import convert_number

        x = convert_number(3, float)
        self.assertIsInstance(x, float)
        self.assertEqual(x, 3.0)

        x = convert_number(2.0, int)
        self.assertIsInstance(x, int)
        self.assertEqual(x, 2)

        x = convert_number(0.5, Fraction)
        self.assertEqual(x, Fraction(1, 2))

        x = convert_number(Fraction(1, 3), float)  # Rounding allowed.
        self.assertAlmostEqual(x, 1 / 3)

        x = convert_number(0.1, np.float32)
        self.assertIsInstance(x, np.float32)

    def test_convert_fails(self):
        from bernpoly import convert_number, ConversionError

        with self.assertRaises(ConversionError):
            convert_number(2.5, int)  # Inexact.

        with self.assertRaises(ConversionError):
            convert_number(1 + 2j, float)

        with self.assertRaises(ConversionError):
            convert_number(float('inf'), int)

        with self.assertRaises(ConversionError):
            convert_number(float('nan'), Fraction)

        with self.assertRaises(ConversionError):
            convert_number(1.5, np.int64)


class TestElementType(TestCase):
    def test_element_type(self):
        from bernpoly import element_type

        self.assertIs(element_type(1.0), float)
        self.assertIs(element_type(Fraction(1, 2)), Fraction)
        self.assertIs(element_type(np.float32(1)), np.float32)

        with self.assertRaises(TypeError):
            element_type("1.0")
