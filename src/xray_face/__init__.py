"""X-Ray Face: live face mesh overlay with heuristic symmetry and smile scores."""

__version__ = "0.1.0"
