import pytest

from physicalbodies import ExtendedBody, MassPoint, PointMassBody, Vector


@pytest.fixture
def body():
    """A point mass of 2 kg at rest at the origin."""
    return PointMassBody(mass=2.0)


@pytest.fixture
def dumbbell():
    """Two 1 kg points one metre either side of the origin on the X axis."""
    return ExtendedBody(mass_points=[
        MassPoint(1.0, Vector(1.0, 0.0, 0.0)),
        MassPoint(1.0, Vector(-1.0, 0.0, 0.0)),
    ])
