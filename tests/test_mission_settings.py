"""Tests for mission_settings constants."""
import pytest

from dronesurvey.mission_settings import (
    SURVEY_BOUNDARY,
    SURVEY_SPACING_M,
    SURVEY_ANGLE_DEG,
    SURVEY_MARGIN_M,
    SURVEY_HEIGHT_M,
    SURVEY_SPEED_MS,
    SURVEY_OVERLAP_RATE,
    SURVEY_CAMERA,
    VALIDATION_NUM_SAMPLES,
    VALIDATION_SEED,
    ROUNDTRIP_TOLERANCE_DEG,
    VALIDATION_ANGLES_DEG,
)
from dronesurvey.survey.camera import CAMERA_PRESETS


def test_survey_boundary_is_polygon():
    assert len(SURVEY_BOUNDARY) >= 3
    for p in SURVEY_BOUNDARY:
        assert len(p) == 2
        assert -90 <= p[0] <= 90
        assert -180 <= p[1] <= 180


def test_flight_params():
    assert SURVEY_SPACING_M > 0
    assert 0 <= SURVEY_ANGLE_DEG <= 180
    assert SURVEY_MARGIN_M >= 0
    assert SURVEY_HEIGHT_M > 0
    assert SURVEY_SPEED_MS > 0
    assert 0 <= SURVEY_OVERLAP_RATE < 1


def test_camera_preset_exists():
    assert SURVEY_CAMERA in CAMERA_PRESETS


def test_validation_params():
    assert VALIDATION_NUM_SAMPLES >= 1
    assert VALIDATION_SEED is not None
    assert ROUNDTRIP_TOLERANCE_DEG > 0
    assert all(0 <= a <= 180 for a in VALIDATION_ANGLES_DEG)
