"""Pure analysis logic: face scoring and smoothing.

This module contains NO I/O operations and NO OpenCV imports.
All functions operate on typed dataclasses and return results.
"""

from xray_face.analysis.engine import MetricEngine, score_batch
from xray_face.analysis.scores import compute_metrics
from xray_face.analysis.smoothing import MetricSmoother

__all__ = ["MetricEngine", "MetricSmoother", "compute_metrics", "score_batch"]
