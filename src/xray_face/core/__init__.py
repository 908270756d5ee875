"""Core infrastructure: config, types, exceptions, and logging."""

from xray_face.core.config import Settings, get_settings
from xray_face.core.exceptions import (
    CameraError,
    ConfigurationError,
    FaceMeshError,
    XrayFaceError,
)
from xray_face.core.logging import get_logger, setup_logging
from xray_face.core.types import (
    Emotion,
    FaceLandmarks,
    FaceStatus,
    Frame,
    Landmark,
    MetricResult,
    NoFace,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "Landmark",
    "FaceLandmarks",
    "Frame",
    "FaceStatus",
    "Emotion",
    "MetricResult",
    "NoFace",
    # Exceptions
    "XrayFaceError",
    "CameraError",
    "FaceMeshError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "get_logger",
]
