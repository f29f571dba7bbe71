from pathlib import Path

# ---------- DATA SOURCE ----------
PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "assets" / "json"
DEFAULT_RESOURCE = "graph"
FETCH_TIMEOUT = 10  # seconds

# ---------- HEADER ----------
DEFAULT_TITLE = "Dynamic Graph"
DEFAULT_DESCRIPTION = "Explore dynamic relationships."

# ---------- APPEARANCE ----------
# d3.schemeCategory10
PALETTE = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)
HIGHLIGHT_COLOR = "#ffcc00"
LINK_COLOR = "#999"
LINK_WIDTH = 1
NODE_RADIUS = 14
LABEL_FONT_SIZE = 20
LABEL_COLOR = "#fff"
LABEL_OFFSET = (12, 3)
CUSTOM_GROUP = 4

# ---------- LAYOUT ENGINE ----------
LINK_DISTANCE = 150
CHARGE_STRENGTH = -500
DRAG_ALPHA_TARGET = 0.3
ZOOM_EXTENT = (0.5, 5)
FOCUS_SCALE = 2
FOCUS_DURATION_MS = 750
HEADER_HEIGHT = 120

# Everything the browser needs, handed over as JSON
CLIENT_CONFIG = {
    "linkDistance": LINK_DISTANCE,
    "chargeStrength": CHARGE_STRENGTH,
    "dragAlphaTarget": DRAG_ALPHA_TARGET,
    "zoomExtent": list(ZOOM_EXTENT),
    "focusScale": FOCUS_SCALE,
    "focusDuration": FOCUS_DURATION_MS,
    "headerHeight": HEADER_HEIGHT,
    "labelFontSize": LABEL_FONT_SIZE,
    "labelColor": LABEL_COLOR,
    "labelOffset": list(LABEL_OFFSET),
}
