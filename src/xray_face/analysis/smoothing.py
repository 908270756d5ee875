"""Temporal smoothing of metric results.

This module is pure logic with NO I/O and NO OpenCV imports.
"""

from __future__ import annotations

from xray_face.analysis.scores import classify_emotion, classify_status, floor_score
from xray_face.core.exceptions import ConfigurationError
from xray_face.core.types import MetricResult


class MetricSmoother:
    """Exponential moving average over consecutive MetricResults.

    Holds the previous result and its unfloored levels. Status and emotion
    are re-derived from the smoothed smile level so labels never disagree
    with the numbers.
    """

    def __init__(self, alpha: float = 0.5) -> None:
        """Initialize smoother.

        Args:
            alpha: Weight of the newest result in (0, 1]; 1 passes results through

        Raises:
            ConfigurationError: If alpha is outside (0, 1]
        """
        if not 0.0 < alpha <= 1.0:
            raise ConfigurationError(f"Smoothing alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self._previous: MetricResult | None = None
        # Unfloored (perfection, symmetry, smile) behind _previous
        self._levels: tuple[float, float, float] | None = None

    @property
    def previous(self) -> MetricResult | None:
        """Most recent smoothed result."""
        return self._previous

    def reset(self) -> None:
        """Drop the stored result."""
        self._previous = None
        self._levels = None

    def update(self, result: MetricResult) -> MetricResult:
        """Blend a new result with the stored one.

        Args:
            result: Freshly computed result

        Returns:
            Smoothed result (the input itself on the first call)
        """
        current = (float(result.perfection), float(result.symmetry), float(result.smile_level))

        if self._levels is None:
            self._levels = current
            self._previous = result
            return result

        perfection, symmetry, smile = (
            self._blend(prev, new) for prev, new in zip(self._levels, current)
        )

        smoothed = MetricResult(
            perfection=floor_score(perfection),
            symmetry=floor_score(symmetry),
            smile_level=floor_score(smile),
            status=classify_status(smile),
            emotion=classify_emotion(smile),
        )

        self._levels = (perfection, symmetry, smile)
        self._previous = smoothed
        return smoothed

    def _blend(self, previous: float, current: float) -> float:
        return previous + self.alpha * (current - previous)
