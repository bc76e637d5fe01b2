"""
Generate the short technical report PDF for the survey route planner.
Run from project root: python docs/generate_technical_report.py
Output: docs/technical_report.pdf (includes statistics of the route from current mission settings)
"""
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle


def add_para(story, text, style_name="Normal"):
    story.append(Paragraph(text.replace("\n", "<br/>"), styles[style_name]))


def add_bullets(story, items, style_name="Normal"):
    for item in items:
        story.append(Paragraph("&#8226; " + item.replace("\n", "<br/>"), styles[style_name]))


def _route_table(out: dict) -> Table:
    cfg = out["config"]
    stats = out["stats"]
    rows = [
        ["Parameter", "Value"],
        ["Boundary points", str(len(out["boundary"]))],
        ["Scan angle (deg)", f"{cfg['angle']:.1f}"],
        ["Effective spacing (m)", f"{out['spacing_m']:.2f}"],
        ["Margin (m)", f"{cfg['margin']:.1f}"],
        ["Height (m) / speed (m/s)", f"{cfg['height']:.1f} / {cfg['speed']:.1f}"],
        ["Camera spacing", "yes" if cfg["useCamera"] else "no"],
        ["Result", out["reason"]],
        ["Waypoints (photos)", str(stats["photoCount"])],
        ["Total distance (m)", f"{stats['totalDistance']:.2f}"],
        ["Flight time (s)", f"{stats['flightTime']:.0f}"],
    ]
    table = Table(rows, colWidths=[6 * cm, 6 * cm])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
    ]))
    return table


def build_report(out_path=None):
    global styles
    from dronesurvey.run_all import run_survey

    out_path = out_path or os.path.join(ROOT, "docs", "technical_report.pdf")
    doc = SimpleDocTemplate(
        out_path,
        pagesize=A4,
        rightMargin=2 * cm,
        leftMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=1.5 * cm,
    )
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="Body", fontSize=10, spaceAfter=6, leading=14))
    story = []

    # Title
    story.append(Paragraph("Drone Survey Route Planner", styles["Title"]))
    story.append(Spacer(1, 0.4 * cm))
    story.append(Paragraph(
        "Short technical report: coverage (lawnmower) route generation for aerial photography "
        "and regional-grid coordinate conversion.",
        styles["Normal"],
    ))
    story.append(Spacer(1, 0.6 * cm))

    # 1. Overview
    story.append(Paragraph("1. Overview", styles["Heading1"]))
    add_para(
        story,
        "Given a survey boundary polygon and flight parameters, the engine produces an S-pattern "
        "scan path with height, speed and index per waypoint, plus route statistics (distance, "
        "flight time, photo count). Every function is pure and synchronous; an empty waypoint list "
        "is the only failure signal. Mission configuration is centralized in "
        "<i>dronesurvey/mission_settings.py</i>; the pipeline is run via <i>python -m dronesurvey.run_all</i>.",
        "Body",
    )
    story.append(Spacer(1, 0.3 * cm))

    # 2. Architecture
    story.append(Paragraph("2. Architecture", styles["Heading1"]))
    story.append(Paragraph("2.1 Core (dronesurvey/core/)", styles["Heading2"]))
    add_bullets(
        story,
        [
            "<b>Coordinates</b> (coords.py): GeoPoint, Waypoint, PlanarPoint, BoundingBox value types.",
            "<b>Transform</b> (transform.py): standard &lt;-&gt; regional grid (GCJ-02) conversion; identity outside "
            "lng 72.004-137.8347, lat 0.8293-55.8271; single-step inverse accurate to a few meters.",
            "<b>Geometry</b> (geometry.py): equirectangular projection around the first boundary point, rotation, "
            "bounding box, vertex-mean centroid, uniform-scale margin shrink (approximate inset).",
        ],
        "Body",
    )
    story.append(Spacer(1, 0.2 * cm))
    story.append(Paragraph("2.2 Survey (dronesurvey/survey/)", styles["Heading2"]))
    add_bullets(
        story,
        [
            "<b>Camera</b> (camera.py): presets (Mavic 3E, Mavic 3T, M30T, M300 + P1); GSD and spacing = footprint x (1 - overlap).",
            "<b>Config</b> (config.py): RouteConfig with defaults spacing 30 m, angle 0, margin 0, height 50 m, speed 5 m/s, overlap 0.7.",
            "<b>Planner</b> (planner.py): project, shrink, rotate, sweep scan lines, pair crossings, alternate direction, "
            "optimize, rotate back, unproject, round to 7 decimals.",
            "<b>Optimizer</b> (optimizer.py): drops interior points whose cross product is within 0.01 m^2.",
            "<b>Statistics</b> (stats.py): distance (flat approximation), flight time rounded up, photo count.",
        ],
        "Body",
    )
    story.append(Spacer(1, 0.5 * cm))

    # 3. Current settings
    story.append(Paragraph("3. Route from current mission settings", styles["Heading1"]))
    out = run_survey(save=False)
    story.append(_route_table(out))
    story.append(Spacer(1, 0.5 * cm))

    # 4. Outputs and validation
    story.append(Paragraph("4. Outputs and validation", styles["Heading1"]))
    add_para(story, "Pipeline (<i>python -m dronesurvey.run_all</i>) writes:", "Body")
    add_bullets(
        story,
        [
            "<b>outputs/survey_route.json</b>: boundary, config, spacing, waypoints (standard), regional-grid copy, stats.",
            "<b>outputs/survey_waypoints.csv</b>: index, lat, lng, height, speed.",
            "<b>outputs/survey_route_plot.png</b>: boundary and scan route.",
        ],
        "Body",
    )
    add_para(story, "Validation:", "Body")
    add_bullets(
        story,
        [
            "Round trip: <i>python validation/run_roundtrip.py</i> prints the max transform round-trip error and route idempotence.",
            "Unit tests: <i>pytest tests/ -v</i>.",
        ],
        "Body",
    )
    story.append(Spacer(1, 0.5 * cm))

    # 5. Interfaces
    story.append(Paragraph("5. Web API", styles["Heading1"]))
    add_bullets(
        story,
        [
            "<b>Flask</b>: http://127.0.0.1:5000 - /api/route, /api/settings, /api/cameras, "
            "/api/plan_route, /api/transform, /api/start_mission.",
        ],
        "Body",
    )

    doc.build(story)
    print("Generated:", out_path)
    return out_path


if __name__ == "__main__":
    build_report()
