"""
Camera model and scan-line spacing from ground sample distance.
GSD = height * sensor / (focal_length * image_pixels); footprint = GSD * image_pixels;
spacing = footprint * (1 - overlap).
"""
from dataclasses import dataclass
from typing import Dict

LATERAL = "lateral"
LONGITUDINAL = "longitudinal"


@dataclass(frozen=True)
class CameraModel:
    """Camera intrinsics: sensor size and focal length in mm, image size in pixels."""

    sensor_width: float
    sensor_height: float
    focal_length: float
    image_width: int
    image_height: int
    name: str = "Custom"

    def validate(self) -> None:
        """Raise ValueError if any dimension is not strictly positive."""
        for field_name in ("sensor_width", "sensor_height", "focal_length", "image_width", "image_height"):
            value = getattr(self, field_name)
            if not value > 0:
                raise ValueError(f"camera {field_name} must be > 0, got {value!r}")

    @classmethod
    def from_dict(cls, data: dict) -> "CameraModel":
        """Accepts sensorWidth/sensorHeight/focalLength/imageWidth/imageHeight (or snake_case)."""

        def pick(camel: str, snake: str):
            if camel in data:
                return data[camel]
            if snake in data:
                return data[snake]
            raise ValueError(f"camera is missing '{camel}'")

        return cls(
            sensor_width=float(pick("sensorWidth", "sensor_width")),
            sensor_height=float(pick("sensorHeight", "sensor_height")),
            focal_length=float(pick("focalLength", "focal_length")),
            image_width=int(pick("imageWidth", "image_width")),
            image_height=int(pick("imageHeight", "image_height")),
            name=str(data.get("name", "Custom")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "sensorWidth": self.sensor_width,
            "sensorHeight": self.sensor_height,
            "focalLength": self.focal_length,
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
        }


CAMERA_PRESETS: Dict[str, CameraModel] = {
    "m3e": CameraModel(17.3, 13.0, 24.0, 5280, 3956, name="Mavic 3E"),
    "m3t": CameraModel(6.4, 4.8, 4.5, 1920, 1440, name="Mavic 3T Wide"),
    "m30t": CameraModel(6.3, 4.7, 4.88, 1920, 1440, name="M30T Wide"),
    "m300": CameraModel(35.9, 24.0, 35.0, 8192, 5460, name="M300 RTK + P1"),
}


def get_camera(key: str) -> CameraModel:
    """Look up a preset by key (e.g. 'm3e'). Raises ValueError for unknown keys."""
    try:
        return CAMERA_PRESETS[key]
    except KeyError:
        raise ValueError(f"unknown camera preset {key!r}; known: {sorted(CAMERA_PRESETS)}") from None


def _sensor_and_pixels(camera: CameraModel, direction: str):
    if direction == LATERAL:
        return camera.sensor_width, camera.image_width
    if direction == LONGITUDINAL:
        return camera.sensor_height, camera.image_height
    raise ValueError(f"direction must be '{LATERAL}' or '{LONGITUDINAL}', got {direction!r}")


def ground_sample_distance(height: float, camera: CameraModel, direction: str = LATERAL) -> float:
    """Ground size of one pixel (m/px) at the given flight height."""
    sensor, pixels = _sensor_and_pixels(camera, direction)
    return (height * sensor) / (camera.focal_length * pixels)


def camera_spacing(height: float, camera: CameraModel, overlap_rate: float, direction: str = LATERAL) -> float:
    """
    Distance in meters between adjacent scan lines (lateral) or photo triggers (longitudinal)
    for the requested overlap. Camera dimensions must already be validated.
    """
    _, pixels = _sensor_and_pixels(camera, direction)
    coverage_width = ground_sample_distance(height, camera, direction) * pixels
    return coverage_width * (1.0 - overlap_rate)
