"""
Single entry point: generate the survey route from mission settings and save it.
Writes the route (standard system plus a regional-grid copy for map display), statistics,
a waypoint CSV table and a plot to outputs/.
All mission variables (boundary, flight parameters, camera) are defined in dronesurvey.mission_settings.
"""
import csv
import json
import logging
import os
import sys

# Add project root so "dronesurvey" imports work
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dronesurvey.mission_settings import SURVEY_BOUNDARY


def _save_plot(boundary, waypoints, path: str) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 6))
    ring = list(boundary) + [boundary[0]]
    ax.plot([p.lng for p in ring], [p.lat for p in ring], "k--", label="Boundary")
    if waypoints:
        ax.plot([w.lng for w in waypoints], [w.lat for w in waypoints], "b-o", markersize=3, label="Route")
        ax.plot(waypoints[0].lng, waypoints[0].lat, "g^", markersize=8, label="Start")
        ax.plot(waypoints[-1].lng, waypoints[-1].lat, "rs", markersize=8, label="End")
    ax.set_xlabel("Lng (deg)")
    ax.set_ylabel("Lat (deg)")
    ax.set_title("Survey scan route")
    ax.set_aspect("equal", adjustable="datalim")
    ax.legend()
    ax.grid(True)
    plt.tight_layout()
    plt.savefig(path)
    plt.close(fig)


def run_survey(boundary=None, config=None, save: bool = True) -> dict:
    """Generate the survey route and its statistics; save JSON, CSV and plot to outputs/.
    boundary: (lat, lng) tuples or {lat, lng} dicts in the standard system; defaults to SURVEY_BOUNDARY.
    config: RouteConfig; defaults to RouteConfig.from_settings().
    Returns the JSON-ready result dict (also when no route could be generated).
    """
    from dronesurvey.core import GeoPoint, to_regional_route
    from dronesurvey.survey.config import RouteConfig
    from dronesurvey.survey.planner import plan_survey_mission

    points = [GeoPoint.from_any(p) for p in (boundary if boundary is not None else SURVEY_BOUNDARY)]
    config = config or RouteConfig.from_settings()
    plan = plan_survey_mission(points, config)
    waypoints = plan["waypoints"]

    out = {
        "module": "Survey coverage route",
        "pattern": "boustrophedon",
        "boundary": [p.to_dict() for p in points],
        "config": config.to_dict(),
        "spacing_m": plan["spacing_m"],
        "polygon_valid": plan["polygon_valid"],
        "reason": plan["reason"],
        "ok": bool(waypoints),
        "waypoints": [w.to_dict() for w in waypoints],
        "waypoints_regional": [w.to_dict() for w in to_regional_route(waypoints)],
        "stats": plan["stats"].to_dict(),
    }
    if not waypoints:
        print(f"No route could be generated ({plan['reason']})")
    if not save:
        return out

    out_dir = os.path.join(ROOT, "outputs")
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, "survey_route.json")
    with open(path, "w") as f:
        json.dump(out, f, indent=2)
    print(f"Survey route saved to {path}")

    csv_path = os.path.join(out_dir, "survey_waypoints.csv")
    with open(csv_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["index", "lat", "lng", "height", "speed"])
        for w in waypoints:
            writer.writerow([w.index, w.lat, w.lng, w.height, w.speed])
    print(f"Waypoint table saved to {csv_path}")

    try:
        plot_path = os.path.join(out_dir, "survey_route_plot.png")
        _save_plot(points, waypoints, plot_path)
        print(f"Route plot saved to {plot_path}")
    except Exception as e:
        print(f"Warning: could not save route plot: {e}")

    return out


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    print("Generating survey route...")
    out = run_survey()
    stats = out["stats"]
    print(
        f"Waypoints: {stats['photoCount']}, distance: {stats['totalDistance']:.2f} m, "
        f"flight time: {stats['flightTime']:.0f} s"
    )
    print("Done. Check outputs/")


if __name__ == "__main__":
    main()
