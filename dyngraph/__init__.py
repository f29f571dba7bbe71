"""Interactive force-directed graph served with Dash."""

__version__ = "0.1.0"
