"""Tests for the Vector value type."""
import math

import numpy as np
import pytest

from physicalbodies import Vector


class TestArithmetic:

    def test_default_is_zero(self):
        assert Vector() == Vector(0.0, 0.0, 0.0)

    def test_add_and_sub(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(0.5, -1.0, 2.0)
        assert a + b == Vector(1.5, 1.0, 5.0)
        assert a - b == Vector(0.5, 3.0, 1.0)

    def test_scalar_multiplication_both_sides(self):
        v = Vector(1.0, -2.0, 3.0)
        assert v * 2 == Vector(2.0, -4.0, 6.0)
        assert 2 * v == Vector(2.0, -4.0, 6.0)

    def test_division(self):
        assert Vector(2.0, 4.0, 6.0) / 2 == Vector(1.0, 2.0, 3.0)

    def test_division_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vector(1.0, 0.0, 0.0) / 0.0

    def test_hadamard(self):
        assert Vector(1.0, 2.0, 3.0).hadamard(Vector(4.0, 5.0, 6.0)) == Vector(4.0, 10.0, 18.0)

    def test_negation(self):
        assert -Vector(1.0, -2.0, 0.0) == Vector(-1.0, 2.0, 0.0)


class TestMagnitude:

    def test_magnitude_and_abs_agree(self):
        v = Vector(3.0, 4.0, 0.0)
        assert v.magnitude == 5.0
        assert abs(v) == 5.0

    def test_normalize_zero_stays_zero(self):
        assert Vector().normalize() == Vector()

    def test_normalize_unit_length(self):
        assert Vector(0.0, 3.0, 4.0).normalize().magnitude == pytest.approx(1.0)

    def test_cross_of_basis(self):
        assert Vector(1.0, 0.0, 0.0).cross(Vector(0.0, 1.0, 0.0)) == Vector(0.0, 0.0, 1.0)

    def test_dot(self):
        assert Vector(1.0, 2.0, 3.0).dot(Vector(4.0, 5.0, 6.0)) == 32.0


class TestConversion:

    def test_str(self):
        assert str(Vector(1.0, 2.5, 0.0)) == "(1.0, 2.5, 0.0)"

    def test_array_roundtrip(self):
        v = Vector(1.0, 2.0, math.pi)
        assert Vector.from_array(v.to_array()) == v

    def test_from_array_wrong_length(self):
        with pytest.raises(ValueError, match="Expected 3 components"):
            Vector.from_array(np.array([1.0, 2.0]))

    def test_copy_is_independent(self):
        v = Vector(1.0, 2.0, 3.0)
        c = v.copy()
        c.x = 10.0
        assert v.x == 1.0
