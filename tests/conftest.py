"""
Shared pytest fixtures for NAVCORE tests.
"""

import pytest

from navcore.geodesy.coordinates import Coordinate
from navcore.reckoning.drift import JourneyLeg


# ---------------------------------------------------------------------------
# Reference positions
# ---------------------------------------------------------------------------


@pytest.fixture
def gibraltar():
    return Coordinate(36.0, -5.6)


@pytest.fixture
def dover():
    return Coordinate(51.9, 1.3)


@pytest.fixture
def mid_atlantic():
    return Coordinate(45.0, -20.0)


# ---------------------------------------------------------------------------
# Dead reckoning legs
# ---------------------------------------------------------------------------


@pytest.fixture
def northbound_leg():
    """10 kts due north for 3 hours from 40N 20W."""
    return JourneyLeg(
        start=Coordinate(40.0, -20.0),
        heading=0.0,
        speed_kts=10.0,
        duration_hours=3.0,
    )


@pytest.fixture
def northeast_leg():
    """12 kts on 045 for 2 hours from 45N 10W."""
    return JourneyLeg(
        start=Coordinate(45.0, -10.0),
        heading=45.0,
        speed_kts=12.0,
        duration_hours=2.0,
    )
