"""
Survey route Flask API.
Serves the saved route from outputs/, plans routes for posted boundaries, converts coordinates
between the standard system and the regional grid used by the map.
"""
import json
import os
import sys

from flask import Flask, jsonify, request

app = Flask(__name__)

# Path to outputs and project root (parent of webapp)
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUTS = os.path.join(ROOT, "outputs")
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def _load_json(name: str):
    path = os.path.join(OUTPUTS, name)
    if not os.path.isfile(path):
        return None
    try:
        with open(path, "r") as f:
            return json.load(f)
    except (OSError, ValueError):
        return None


def _bad_request(e: Exception):
    return jsonify({"ok": False, "error": str(e)}), 400


@app.route("/api/route")
def api_route():
    data = _load_json("survey_route.json")
    if data is None:
        return jsonify({"error": "No survey route found. Start the mission to generate one from settings."}), 404
    return jsonify(data)


@app.route("/api/settings")
def api_settings():
    """Return current mission settings from mission_settings."""
    from dronesurvey.survey.config import RouteConfig
    from dronesurvey.mission_settings import SURVEY_BOUNDARY, SURVEY_CAMERA

    return jsonify({
        "boundary": [{"lat": p[0], "lng": p[1]} for p in SURVEY_BOUNDARY],
        "camera_preset": SURVEY_CAMERA,
        "config": RouteConfig.from_settings().to_dict(),
    })


@app.route("/api/cameras")
def api_cameras():
    from dronesurvey.survey.camera import CAMERA_PRESETS

    return jsonify({key: cam.to_dict() for key, cam in CAMERA_PRESETS.items()})


@app.route("/api/plan_route", methods=["POST"])
def api_plan_route():
    """Plan a route for the posted boundary and config. Body: {boundary, config, save?}."""
    from dronesurvey.core import GeoPoint
    from dronesurvey.survey.config import RouteConfig

    data = request.get_json(force=True, silent=True) or {}
    try:
        boundary = [GeoPoint.from_any(p) for p in (data.get("boundary") or [])]
        config = RouteConfig.from_dict(data.get("config"))
        config.validate()
    except (ValueError, TypeError, KeyError) as e:
        return _bad_request(e)
    try:
        from dronesurvey.run_all import run_survey
        out = run_survey(boundary, config, save=bool(data.get("save", False)))
    except Exception as e:
        return jsonify({"ok": False, "error": str(e)}), 500
    return jsonify({
        "ok": out["ok"],
        "reason": out["reason"],
        "spacing_m": out["spacing_m"],
        "polygon_valid": out["polygon_valid"],
        "waypoints": out["waypoints"],
        "waypoints_regional": out["waypoints_regional"],
        "stats": out["stats"],
    })


@app.route("/api/transform", methods=["POST"])
def api_transform():
    """Convert points. Body: {points: [{lat, lng}, ...], to: "standard" | "regional"}."""
    from dronesurvey.core import GeoPoint, to_regional, to_standard

    data = request.get_json(force=True, silent=True) or {}
    target = data.get("to", "standard")
    converters = {"standard": to_standard, "regional": to_regional}
    if target not in converters:
        return _bad_request(ValueError(f"'to' must be 'standard' or 'regional', got {target!r}"))
    try:
        points = [GeoPoint.from_any(p) for p in (data.get("points") or [])]
    except (ValueError, TypeError) as e:
        return _bad_request(e)
    convert = converters[target]
    return jsonify({"ok": True, "to": target, "points": [convert(p).to_dict() for p in points]})


@app.route("/api/start_mission", methods=["POST"])
def api_start_mission():
    """Run the route generator from mission_settings; write to outputs/."""
    try:
        from dronesurvey.run_all import run_survey
        out = run_survey()
        return jsonify({"ok": out["ok"], "reason": out["reason"], "stats": out["stats"]})
    except Exception as e:
        return jsonify({"ok": False, "error": str(e)}), 500


def main():
    app.run(host="127.0.0.1", port=5000, debug=False)


if __name__ == "__main__":
    main()
