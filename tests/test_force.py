"""Tests for the Force value object."""
import pytest

from physicalbodies import Force, PointMassBody, Vector


class TestForce:

    def test_magnitude_is_norm_of_components(self):
        f = Force(3.0, 0.0, 4.0)
        assert f.magnitude == 5.0
        assert abs(f) == 5.0

    def test_direction_defaults_to_zero(self):
        assert Force(1.0, 0.0, 0.0).direction == Vector()

    def test_direction_is_not_derived_or_checked(self):
        f = Force(1.0, 0.0, 0.0, direction=Vector(0.0, -5.0, 0.0))
        assert f.direction == Vector(0.0, -5.0, 0.0)
        assert f.magnitude == 1.0

    def test_from_direction(self):
        f = Force.from_direction(10.0, Vector(0.0, 2.0, 0.0))
        assert f.magnitude == pytest.approx(10.0)
        assert f.y == pytest.approx(10.0)
        assert f.direction == Vector(0.0, 2.0, 0.0)

    def test_arithmetic_yields_plain_vector(self):
        result = Force(4.0, 0.0, 0.0) / 2.0
        assert type(result) is Vector
        assert result == Vector(2.0, 0.0, 0.0)

    def test_accepted_by_body(self):
        body = PointMassBody(mass=2.0)
        body.add_translational_force(Force(4.0, 0.0, 0.0, direction=Vector(1.0, 0.0, 0.0)))
        assert body.acceleration == Vector(2.0, 0.0, 0.0)

    def test_copy_does_not_share_direction(self):
        f = Force(1.0, 0.0, 0.0, direction=Vector(1.0, 0.0, 0.0))
        c = f.copy()
        c.direction.x = -1.0
        assert type(c) is Force
        assert c == Force(1.0, 0.0, 0.0, direction=Vector(-1.0, 0.0, 0.0))
        assert f.direction == Vector(1.0, 0.0, 0.0)
