"""
Route configuration: scan spacing/angle, margin, flight height/speed, camera-driven spacing.
Dict form uses the field names spacing, angle, margin, height, speed, overlapRate, camera,
useCamera, optimizePath.
"""
from dataclasses import dataclass
from typing import Optional, Union

from dronesurvey.survey.camera import LATERAL, CameraModel, camera_spacing, get_camera

DEFAULT_SPACING_M = 30.0
DEFAULT_ANGLE_DEG = 0.0
DEFAULT_MARGIN_M = 0.0
DEFAULT_HEIGHT_M = 50.0
DEFAULT_SPEED_MS = 5.0
DEFAULT_OVERLAP_RATE = 0.7
# Smallest scan-line spacing validate() accepts, manual or camera-derived
MIN_SPACING_M = 0.1

_TRUE_STRINGS = ("true", "1", "yes")
_FALSE_STRINGS = ("false", "0", "no")


@dataclass(frozen=True)
class RouteConfig:
    spacing: float = DEFAULT_SPACING_M
    angle: float = DEFAULT_ANGLE_DEG
    margin: float = DEFAULT_MARGIN_M
    height: float = DEFAULT_HEIGHT_M
    speed: float = DEFAULT_SPEED_MS
    overlap_rate: float = DEFAULT_OVERLAP_RATE
    camera: Optional[CameraModel] = None
    use_camera: bool = False
    optimize_path: bool = True

    def validate(self) -> None:
        """
        Caller-side contract check; raises ValueError on the first invalid field.
        Route generation itself never calls this.
        """
        if not self.spacing >= MIN_SPACING_M:
            raise ValueError(f"spacing must be >= {MIN_SPACING_M} m, got {self.spacing!r}")
        if not 0.0 <= self.angle <= 180.0:
            raise ValueError(f"angle must be within [0, 180], got {self.angle!r}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin!r}")
        if not self.height > 0:
            raise ValueError(f"height must be > 0, got {self.height!r}")
        if not self.speed > 0:
            raise ValueError(f"speed must be > 0, got {self.speed!r}")
        if not 0.0 <= self.overlap_rate < 1.0:
            raise ValueError(f"overlapRate must be within [0, 1), got {self.overlap_rate!r}")
        if self.use_camera:
            if self.camera is None:
                raise ValueError("useCamera requires a camera")
            self.camera.validate()
            spacing = camera_spacing(self.height, self.camera, self.overlap_rate, LATERAL)
            if spacing < MIN_SPACING_M:
                raise ValueError(f"camera spacing must be >= {MIN_SPACING_M} m, got {spacing!r}")

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RouteConfig":
        """Build from a dict; missing keys take the defaults. camera may be a preset key or a dict."""
        data = data or {}
        camera = _read_camera(data.get("camera"))
        return cls(
            spacing=float(data.get("spacing", DEFAULT_SPACING_M)),
            angle=float(data.get("angle", DEFAULT_ANGLE_DEG)),
            margin=float(data.get("margin", DEFAULT_MARGIN_M)),
            height=float(data.get("height", DEFAULT_HEIGHT_M)),
            speed=float(data.get("speed", DEFAULT_SPEED_MS)),
            overlap_rate=float(data.get("overlapRate", DEFAULT_OVERLAP_RATE)),
            camera=camera,
            use_camera=_read_bool(data.get("useCamera"), False, "useCamera"),
            optimize_path=_read_bool(data.get("optimizePath"), True, "optimizePath"),
        )

    @classmethod
    def from_settings(cls) -> "RouteConfig":
        """Config from dronesurvey.mission_settings."""
        from dronesurvey.mission_settings import (
            SURVEY_SPACING_M,
            SURVEY_ANGLE_DEG,
            SURVEY_MARGIN_M,
            SURVEY_HEIGHT_M,
            SURVEY_SPEED_MS,
            SURVEY_OVERLAP_RATE,
            SURVEY_CAMERA,
            SURVEY_USE_CAMERA,
            SURVEY_OPTIMIZE_PATH,
        )

        return cls(
            spacing=SURVEY_SPACING_M,
            angle=SURVEY_ANGLE_DEG,
            margin=SURVEY_MARGIN_M,
            height=SURVEY_HEIGHT_M,
            speed=SURVEY_SPEED_MS,
            overlap_rate=SURVEY_OVERLAP_RATE,
            camera=get_camera(SURVEY_CAMERA) if SURVEY_CAMERA else None,
            use_camera=SURVEY_USE_CAMERA,
            optimize_path=SURVEY_OPTIMIZE_PATH,
        )

    def to_dict(self) -> dict:
        return {
            "spacing": self.spacing,
            "angle": self.angle,
            "margin": self.margin,
            "height": self.height,
            "speed": self.speed,
            "overlapRate": self.overlap_rate,
            "camera": self.camera.to_dict() if self.camera else None,
            "useCamera": self.use_camera,
            "optimizePath": self.optimize_path,
        }


def _read_camera(value: Union[None, str, dict, CameraModel]) -> Optional[CameraModel]:
    if value is None or isinstance(value, CameraModel):
        return value
    if isinstance(value, str):
        return get_camera(value)
    if isinstance(value, dict):
        return CameraModel.from_dict(value)
    raise ValueError(f"camera must be a preset key or a dict, got {type(value).__name__}")


def _read_bool(value, default: bool, name: str) -> bool:
    """JSON booleans, 0/1, or 'true'/'false'/'yes'/'no'/'1'/'0' strings; anything else is a ValueError."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")
