"""Pytest fixtures for X-Ray Face tests."""

from __future__ import annotations

import numpy as np
import pytest

from xray_face.core.config import MetricSettings, UISettings
from xray_face.core.types import FaceLandmarks, FaceMeshIndex, Frame, Landmark

MESH_SIZE = 478


def make_landmarks(
    overrides: dict[int, tuple[float, float]] | None = None,
    size: int = MESH_SIZE,
) -> list[Landmark]:
    """Create a landmark set with every point at the frame center.

    Args:
        overrides: Index to (x, y) replacements
        size: Number of landmarks
    """
    points = [Landmark(x=0.5, y=0.5) for _ in range(size)]
    for idx, (x, y) in (overrides or {}).items():
        points[idx] = Landmark(x=x, y=y)
    return points


SMILING_MOUTH = {
    FaceMeshIndex.LEFT_MOUTH_CORNER.value: (0.40, 0.60),
    FaceMeshIndex.RIGHT_MOUTH_CORNER.value: (0.60, 0.60),
    FaceMeshIndex.UPPER_LIP.value: (0.50, 0.58),
    FaceMeshIndex.LOWER_LIP.value: (0.50, 0.62),
}

BALANCED_EYES = {
    FaceMeshIndex.LEFT_EYE_OUTER.value: (0.30, 0.5),
    FaceMeshIndex.RIGHT_EYE_OUTER.value: (0.70, 0.5),
    FaceMeshIndex.NOSE_TIP.value: (0.50, 0.5),
}


@pytest.fixture
def neutral_face() -> list[Landmark]:
    """All landmarks collapsed to the center: symmetric, no smile."""
    return make_landmarks()


@pytest.fixture
def smiling_face() -> list[Landmark]:
    """Wide closed mouth with evenly spaced eyes."""
    return make_landmarks({**SMILING_MOUTH, **BALANCED_EYES})


@pytest.fixture
def lopsided_face() -> list[Landmark]:
    """Eyes shifted so the nose is far off center."""
    return make_landmarks(
        {
            **SMILING_MOUTH,
            FaceMeshIndex.LEFT_EYE_OUTER.value: (0.30, 0.5),
            FaceMeshIndex.RIGHT_EYE_OUTER.value: (0.70, 0.5),
            FaceMeshIndex.NOSE_TIP.value: (0.45, 0.5),
        }
    )


@pytest.fixture
def blank_frame() -> Frame:
    """Create a black 640x480 frame."""
    return Frame(image=np.zeros((480, 640, 3), dtype=np.uint8), timestamp=0.0, index=0)


@pytest.fixture
def smiling_face_landmarks(smiling_face: list[Landmark]) -> FaceLandmarks:
    """Provider output wrapping the smiling face."""
    return FaceLandmarks(points=tuple(smiling_face), timestamp=0.0, frame_idx=0)


@pytest.fixture
def metric_settings() -> MetricSettings:
    """Metric settings with smoothing off."""
    return MetricSettings(smoothing_enabled=False)


@pytest.fixture
def smoothing_settings() -> MetricSettings:
    """Metric settings with smoothing on."""
    return MetricSettings(smoothing_enabled=True, smoothing_alpha=0.5)


@pytest.fixture
def ui_settings() -> UISettings:
    """Create UI settings for testing."""
    return UISettings()
