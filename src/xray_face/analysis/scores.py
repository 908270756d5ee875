"""Geometric face scores and their classification.

This module is pure logic with NO I/O and NO OpenCV imports.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from xray_face.core.types import (
    Emotion,
    FaceMeshIndex,
    FaceStatus,
    Landmark,
    MetricResult,
    NoFace,
)

# Empirical calibration constants. Changing any of them changes every score.
SMILE_WIDTH_WEIGHT = 1.5
SMILE_SCALE = 200.0
SYMMETRY_SCALE = 500.0
SYMMETRY_WEIGHT = 0.7
SMILE_WEIGHT = 0.3
HAPPY_THRESHOLD = 15.0
SAD_THRESHOLD = 5.0

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Values this close below an integer floor to that integer
FLOOR_TOLERANCE = 1e-9

REQUIRED_INDICES: tuple[int, ...] = (
    FaceMeshIndex.LEFT_MOUTH_CORNER.value,
    FaceMeshIndex.RIGHT_MOUTH_CORNER.value,
    FaceMeshIndex.UPPER_LIP.value,
    FaceMeshIndex.LOWER_LIP.value,
    FaceMeshIndex.LEFT_EYE_OUTER.value,
    FaceMeshIndex.RIGHT_EYE_OUTER.value,
    FaceMeshIndex.NOSE_TIP.value,
)


def clamp_score(value: float) -> float:
    """Clamp a raw score into [0, 100]. NaN maps to 0."""
    return min(SCORE_MAX, max(SCORE_MIN, value))


def floor_score(value: float) -> int:
    """Floor a score to an int in [0, 100], absorbing float rounding noise."""
    if not math.isfinite(value):
        return 0
    return max(0, min(100, math.floor(value + FLOOR_TOLERANCE)))


def missing_landmarks(landmarks: Sequence[Landmark] | None) -> list[int]:
    """List required indices not present in a landmark set.

    Args:
        landmarks: Landmark set (or None when no face was detected)

    Returns:
        Missing indices in ascending order (empty if all are present)
    """
    count = len(landmarks) if landmarks is not None else 0
    return sorted(idx for idx in REQUIRED_INDICES if idx >= count)


def smile_value(landmarks: Sequence[Landmark]) -> float:
    """Estimate smile intensity from mouth width and opening.

    Wide, relatively closed mouths score high.

    Args:
        landmarks: Landmark set containing the mouth indices

    Returns:
        Smile value clamped to [0, 100]
    """
    left = landmarks[FaceMeshIndex.LEFT_MOUTH_CORNER.value]
    right = landmarks[FaceMeshIndex.RIGHT_MOUTH_CORNER.value]
    top = landmarks[FaceMeshIndex.UPPER_LIP.value]
    bottom = landmarks[FaceMeshIndex.LOWER_LIP.value]

    width = math.hypot(right.x - left.x, right.y - left.y)
    opening = abs(bottom.y - top.y)

    return clamp_score((width * SMILE_WIDTH_WEIGHT - opening) * SMILE_SCALE)


def symmetry_score(landmarks: Sequence[Landmark]) -> float:
    """Estimate horizontal balance of the eyes around the nose.

    Args:
        landmarks: Landmark set containing the eye and nose indices

    Returns:
        Symmetry score clamped to [0, 100] (100 = perfectly balanced)
    """
    left_eye = landmarks[FaceMeshIndex.LEFT_EYE_OUTER.value]
    right_eye = landmarks[FaceMeshIndex.RIGHT_EYE_OUTER.value]
    center = landmarks[FaceMeshIndex.NOSE_TIP.value]

    d_left = center.x - left_eye.x
    d_right = right_eye.x - center.x
    asymmetry = abs(d_left - d_right)

    return clamp_score(SCORE_MAX - asymmetry * SYMMETRY_SCALE)


def classify_status(smile: float) -> FaceStatus:
    """Map a smile value to the headline status."""
    return FaceStatus.RADIANT if smile > HAPPY_THRESHOLD else FaceStatus.NEUTRAL


def classify_emotion(smile: float) -> Emotion:
    """Map a smile value to an emotion band.

    Bands: (-inf, 5) Sad/Focused, [5, 15] Neutral, (15, inf) Happy.
    """
    if smile > HAPPY_THRESHOLD:
        return Emotion.HAPPY
    if smile < SAD_THRESHOLD:
        return Emotion.SAD_FOCUSED
    return Emotion.NEUTRAL


def build_result(symmetry: float, smile: float) -> MetricResult:
    """Combine component scores into a MetricResult.

    Args:
        symmetry: Symmetry score in [0, 100]
        smile: Smile value in [0, 100]

    Returns:
        Result with floored integer scores and derived labels
    """
    perfection = symmetry * SYMMETRY_WEIGHT + smile * SMILE_WEIGHT

    return MetricResult(
        perfection=floor_score(perfection),
        symmetry=floor_score(symmetry),
        smile_level=floor_score(smile),
        status=classify_status(smile),
        emotion=classify_emotion(smile),
    )


def compute_metrics(landmarks: Sequence[Landmark] | None) -> MetricResult | NoFace:
    """Score a single face.

    The input is only read, never stored or modified.

    Args:
        landmarks: Landmark set for one face, or None if no face was found

    Returns:
        MetricResult, or NoFace if the set is absent or lacks required indices
    """
    if not landmarks:
        return NoFace("no landmarks")

    missing = missing_landmarks(landmarks)
    if missing:
        return NoFace(f"missing landmark {missing[0]}")

    return build_result(symmetry_score(landmarks), smile_value(landmarks))
