"""Frame-by-frame metric engine.

This module is pure logic with NO I/O and NO OpenCV imports.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from xray_face.analysis.scores import compute_metrics
from xray_face.analysis.smoothing import MetricSmoother
from xray_face.core.config import MetricSettings
from xray_face.core.logging import get_logger
from xray_face.core.types import Landmark, MetricResult, NoFace

logger = get_logger(__name__)


class MetricEngine:
    """Scores faces frame by frame.

    Wraps ``compute_metrics`` and, when enabled, feeds each result through a
    MetricSmoother. The smoother's prior result is the only state that
    affects scores between calls.
    """

    def __init__(self, settings: MetricSettings | None = None) -> None:
        """Initialize engine with settings.

        Args:
            settings: Metric settings (uses defaults if None)
        """
        self.settings = settings or MetricSettings()
        self._smoother: MetricSmoother | None = None
        if self.settings.smoothing_enabled:
            self._smoother = MetricSmoother(alpha=self.settings.smoothing_alpha)
        self._face_present = False

    @property
    def smoothing_enabled(self) -> bool:
        """Check if temporal smoothing is active."""
        return self._smoother is not None

    def compute(self, landmarks: Sequence[Landmark] | None) -> MetricResult | NoFace:
        """Score the current frame's landmarks.

        Args:
            landmarks: Landmark set for one face, or None

        Returns:
            MetricResult (smoothed if enabled), or NoFace
        """
        result = compute_metrics(landmarks)

        if isinstance(result, NoFace):
            if self._face_present:
                logger.debug("Face lost: %s", result.reason)
                self._face_present = False
            return result

        if not self._face_present:
            logger.debug("Face found")
            self._face_present = True

        if self._smoother is not None:
            result = self._smoother.update(result)

        return result

    def reset(self) -> None:
        """Forget smoothing history."""
        if self._smoother is not None:
            self._smoother.reset()
        self._face_present = False


def score_batch(
    landmark_sets: Iterable[Sequence[Landmark] | None],
    settings: MetricSettings | None = None,
) -> list[MetricResult | NoFace]:
    """Score a recorded sequence of landmark sets.

    Args:
        landmark_sets: One landmark set (or None) per frame, in frame order
        settings: Metric settings

    Returns:
        One result per input frame
    """
    engine = MetricEngine(settings)
    return [engine.compute(landmarks) for landmarks in landmark_sets]
