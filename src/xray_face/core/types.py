"""Core data types and structures."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class Landmark:
    """A single face landmark.

    Coordinates are normalized [0, 1] relative to frame dimensions.
    ``z`` is relative depth and is not used for scoring.
    """

    x: float
    y: float
    z: float = 0.0

    def to_pixel(self, width: int, height: int) -> tuple[int, int]:
        """Convert normalized coordinates to pixel coordinates."""
        return int(self.x * width), int(self.y * height)


LandmarkSet = Sequence[Landmark]


class FaceMeshIndex(Enum):
    """Canonical face mesh landmark indices used for scoring."""

    NOSE_TIP = 1
    UPPER_LIP = 13
    LOWER_LIP = 14
    LEFT_EYE_OUTER = 33
    LEFT_MOUTH_CORNER = 61
    RIGHT_EYE_OUTER = 263
    RIGHT_MOUTH_CORNER = 291


@dataclass(frozen=True, slots=True)
class FaceLandmarks:
    """Landmarks for the first detected face in a frame.

    Attributes:
        points: Landmarks in model index order
        timestamp: Frame timestamp in seconds
        frame_idx: Frame sequence number
    """

    points: tuple[Landmark, ...]
    timestamp: float
    frame_idx: int

    def __len__(self) -> int:
        return len(self.points)

    def get_landmark(self, index: FaceMeshIndex) -> Landmark | None:
        """Get a specific landmark by its enum index."""
        if index.value >= len(self.points):
            return None
        return self.points[index.value]


@dataclass(slots=True)
class Frame:
    """A video frame with metadata.

    Attributes:
        image: BGR image array (OpenCV format)
        timestamp: Frame timestamp in seconds
        index: Frame sequence number
    """

    image: NDArray[np.uint8]
    timestamp: float
    index: int

    @property
    def width(self) -> int:
        """Frame width in pixels."""
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        """Frame height in pixels."""
        return int(self.image.shape[0])

    @property
    def dimensions(self) -> tuple[int, int]:
        """Frame dimensions as (width, height)."""
        return self.width, self.height


class FaceStatus(Enum):
    """Headline status shown next to the perfection score."""

    RADIANT = "Radiant"
    NEUTRAL = "Neutral"


class Emotion(Enum):
    """Coarse emotion label derived from the smile level."""

    HAPPY = "Happy"
    NEUTRAL = "Neutral"
    SAD_FOCUSED = "Sad/Focused"


@dataclass(frozen=True, slots=True)
class MetricResult:
    """Scores computed for one frame.

    Attributes:
        perfection: Weighted blend of symmetry and smile [0, 100]
        symmetry: Left/right eye balance around the nose [0, 100]
        smile_level: Mouth width relative to opening [0, 100]
        status: Radiant when smiling, Neutral otherwise
        emotion: Happy / Neutral / Sad-Focused band of the smile level
    """

    perfection: int
    symmetry: int
    smile_level: int
    status: FaceStatus
    emotion: Emotion


@dataclass(frozen=True, slots=True)
class NoFace:
    """No usable face in the current frame.

    Returned instead of a MetricResult; callers keep their last result.
    """

    reason: str = "no face detected"
