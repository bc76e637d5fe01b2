"""Tests for route statistics."""
import math
import pytest

from dronesurvey.core import GeoPoint, Waypoint
from dronesurvey.survey.config import RouteConfig
from dronesurvey.survey.planner import generate_route
from dronesurvey.survey.stats import RouteStats, compute_stats

METERS_PER_DEG = 6378137 * math.pi / 180


def test_empty_and_single_point_are_zero():
    assert compute_stats([]) == RouteStats(0.0, 0.0, 0)
    assert compute_stats([Waypoint(30.0, 120.0)]) == RouteStats(0.0, 0.0, 0)


def test_two_points():
    stats = compute_stats([Waypoint(0.0, 0.0, speed=5.0), Waypoint(0.001, 0.0, speed=5.0, index=1)])
    assert stats.total_distance == pytest.approx(round(0.001 * METERS_PER_DEG, 2))
    assert stats.flight_time == math.ceil(0.001 * METERS_PER_DEG / 5.0)
    assert stats.photo_count == 2


def test_uses_first_waypoint_speed():
    route = [Waypoint(0.0, 0.0, speed=10.0), Waypoint(0.0, 0.01, speed=1.0), Waypoint(0.01, 0.01, speed=1.0)]
    stats = compute_stats(route)
    dist = 0.02 * METERS_PER_DEG
    assert stats.total_distance == pytest.approx(dist, abs=0.01)
    assert stats.flight_time == math.ceil(dist / 10.0)


def test_missing_or_zero_speed_falls_back():
    pts = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.001)]
    assert compute_stats(pts).flight_time == math.ceil(0.001 * METERS_PER_DEG / 5.0)
    zero = [Waypoint(0.0, 0.0, speed=0.0), Waypoint(0.0, 0.001, speed=0.0)]
    assert compute_stats(zero).flight_time == compute_stats(pts).flight_time


def test_photo_count_matches_route_length(hangzhou_boundary):
    for angle in (0, 45, 90):
        route = generate_route(hangzhou_boundary, RouteConfig(angle=angle))
        assert compute_stats(route).photo_count == len(route)


def test_to_dict():
    assert RouteStats(12.5, 3.0, 4).to_dict() == {"totalDistance": 12.5, "flightTime": 3.0, "photoCount": 4}
