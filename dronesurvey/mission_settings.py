"""
Mission settings constants for the survey route generator (run_all.py).
Edit this file to change the survey boundary, flight parameters, camera, and validation parameters.
"""

from typing import List, Tuple

# ---------------------------------------------------------------------------
# Survey area
# ---------------------------------------------------------------------------

# Boundary: list of (lat_deg, lng_deg) in the standard (WGS-84) system, in polygon order.
# Default area: farmland block near Hangzhou, roughly 400 m x 300 m.
SURVEY_BOUNDARY: List[Tuple[float, float]] = [
    (30.27410, 120.15510),
    (30.27410, 120.15925),
    (30.27140, 120.15925),
    (30.27140, 120.15510),
]

# ---------------------------------------------------------------------------
# Flight parameters
# ---------------------------------------------------------------------------

SURVEY_SPACING_M = 30.0        # manual scan-line spacing
SURVEY_ANGLE_DEG = 0.0         # 0 = lines along constant latitude, 90 = along constant longitude
SURVEY_MARGIN_M = 0.0          # inward shrink of the boundary
SURVEY_HEIGHT_M = 50.0
SURVEY_SPEED_MS = 5.0
SURVEY_OVERLAP_RATE = 0.7      # side overlap, 0-1

# Camera: preset key from dronesurvey.survey.camera.CAMERA_PRESETS
SURVEY_CAMERA = "m3e"
SURVEY_USE_CAMERA = False      # True: spacing derived from camera, height and overlap
SURVEY_OPTIMIZE_PATH = True

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

# Random points sampled inside the regional-grid region for round-trip checks
VALIDATION_NUM_SAMPLES = 200
VALIDATION_SEED = 42
# Accepted round-trip error of the single-step regional -> standard conversion (degrees).
# Typical error is about 1e-5; the bound covers the northern edge where longitude degrees are short.
ROUNDTRIP_TOLERANCE_DEG = 2e-4
# Scan angles exercised by the route idempotence check
VALIDATION_ANGLES_DEG: List[float] = [0.0, 30.0, 45.0, 90.0, 135.0]
