"""Tests for RouteConfig defaults, dict form and validation."""
import pytest

from dronesurvey.survey.camera import CameraModel, get_camera
from dronesurvey.survey.config import MIN_SPACING_M, RouteConfig


def test_defaults():
    cfg = RouteConfig()
    assert cfg.spacing == 30.0
    assert cfg.angle == 0.0
    assert cfg.margin == 0.0
    assert cfg.height == 50.0
    assert cfg.speed == 5.0
    assert cfg.overlap_rate == 0.7
    assert cfg.use_camera is False
    assert cfg.optimize_path is True


def test_from_dict_empty_gives_defaults():
    assert RouteConfig.from_dict({}) == RouteConfig()
    assert RouteConfig.from_dict(None) == RouteConfig()


def test_from_dict_field_names():
    cfg = RouteConfig.from_dict({
        "spacing": 20, "angle": 45, "margin": 5, "height": 80, "speed": 8,
        "overlapRate": 0.6, "camera": "m3t", "useCamera": True, "optimizePath": False,
    })
    assert cfg.spacing == 20.0
    assert cfg.angle == 45.0
    assert cfg.overlap_rate == 0.6
    assert cfg.camera == get_camera("m3t")
    assert cfg.use_camera is True
    assert cfg.optimize_path is False


def test_from_dict_custom_camera():
    cfg = RouteConfig.from_dict({"camera": {"sensorWidth": 6.3, "sensorHeight": 4.7, "focalLength": 4.88,
                                            "imageWidth": 1920, "imageHeight": 1440}})
    assert cfg.camera.focal_length == 4.88


def test_to_dict_keys():
    d = RouteConfig().to_dict()
    assert set(d) == {"spacing", "angle", "margin", "height", "speed", "overlapRate", "camera", "useCamera", "optimizePath"}


def test_from_settings():
    from dronesurvey.mission_settings import SURVEY_SPACING_M, SURVEY_CAMERA
    cfg = RouteConfig.from_settings()
    assert cfg.spacing == SURVEY_SPACING_M
    assert cfg.camera == get_camera(SURVEY_CAMERA)
    cfg.validate()


def test_validate_accepts_defaults():
    RouteConfig().validate()


@pytest.mark.parametrize("kwargs", [
    {"spacing": 0.0},
    {"spacing": -5.0},
    {"spacing": 0.05},
    {"spacing": 1e-13},
    {"margin": -1.0},
    {"angle": 190.0},
    {"overlap_rate": 1.0},
    {"height": 0.0},
    {"use_camera": True},
    {"use_camera": True, "camera": CameraModel(6.3, 0.0, 4.88, 1920, 1440)},
])
def test_validate_rejects(kwargs):
    with pytest.raises(ValueError):
        RouteConfig(**kwargs).validate()


def test_validate_accepts_spacing_floor():
    RouteConfig(spacing=MIN_SPACING_M).validate()


def test_validate_rejects_camera_spacing_below_floor():
    cfg = RouteConfig(camera=get_camera("m3e"), use_camera=True, overlap_rate=0.9999)
    with pytest.raises(ValueError, match="camera spacing"):
        cfg.validate()
    RouteConfig(camera=get_camera("m3e"), use_camera=True, overlap_rate=0.9).validate()


@pytest.mark.parametrize("raw,expected", [
    (True, True), (False, False), (1, True), (0, False),
    ("true", True), ("false", False), ("False", False), (" YES ", True), ("no", False), ("0", False),
])
def test_from_dict_reads_boolean_flags(raw, expected):
    cfg = RouteConfig.from_dict({"useCamera": raw, "optimizePath": raw})
    assert cfg.use_camera is expected
    assert cfg.optimize_path is expected


def test_from_dict_null_flags_take_defaults():
    cfg = RouteConfig.from_dict({"useCamera": None, "optimizePath": None})
    assert cfg.use_camera is False
    assert cfg.optimize_path is True


@pytest.mark.parametrize("raw", ["maybe", "", 2, -1, 0.5, [], {}])
def test_from_dict_rejects_non_boolean_flags(raw):
    with pytest.raises(ValueError, match="optimizePath"):
        RouteConfig.from_dict({"optimizePath": raw})
    with pytest.raises(ValueError, match="useCamera"):
        RouteConfig.from_dict({"useCamera": raw})
