"""TraceSight — PCB trace connectivity recovered from SVG path data."""

__version__ = "0.1.0"
