"""
Shared pytest fixtures for survey route tests.
Ensures project root is on sys.path so dronesurvey.* and webapp.* import correctly.
"""
import os
import sys
import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def square_boundary():
    """~111 m square at (0, 0) as (lat, lng) tuples; outside the regional grid."""
    return [
        (0.0, 0.0),
        (0.0, 0.001),
        (0.001, 0.001),
        (0.001, 0.0),
    ]


@pytest.fixture
def hangzhou_boundary():
    """~400 m x 300 m block inside the regional grid, as {lat, lng} dicts."""
    return [
        {"lat": 30.2741, "lng": 120.1551},
        {"lat": 30.2741, "lng": 120.15925},
        {"lat": 30.2714, "lng": 120.15925},
        {"lat": 30.2714, "lng": 120.1551},
    ]
