"""Tests for settings, logging, key bindings and core types."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from xray_face.core.config import (
    CameraSettings,
    FaceMeshSettings,
    MetricSettings,
    Settings,
    UISettings,
)
from xray_face.core.exceptions import CameraError, FaceMeshError, XrayFaceError
from xray_face.core.logging import get_logger, setup_logging
from xray_face.core.types import FaceLandmarks, FaceMeshIndex, Landmark
from xray_face.ui.display import KeyAction, action_for_key


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self) -> None:
        """Defaults mirror the live app: one face, 0.5 confidence, no smoothing."""
        settings = Settings()

        assert settings.camera.width == 1280
        assert settings.camera.height == 720
        assert settings.face_mesh.num_faces == 1
        assert settings.face_mesh.min_detection_confidence == 0.5
        assert settings.face_mesh.min_tracking_confidence == 0.5
        assert settings.metrics.smoothing_enabled is False
        assert settings.ui.show_mesh is True

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("METRICS_SMOOTHING_ENABLED", "true")
        monkeypatch.setenv("METRICS_SMOOTHING_ALPHA", "0.25")
        monkeypatch.setenv("CAMERA_INDEX", "2")
        monkeypatch.setenv("SHOW_MESH", "false")

        assert MetricSettings().smoothing_enabled is True
        assert MetricSettings().smoothing_alpha == 0.25
        assert CameraSettings().index == 2
        assert UISettings().show_mesh is False

    @pytest.mark.parametrize("alpha", [0.0, 1.5])
    def test_rejects_bad_alpha(self, alpha: float) -> None:
        """Smoothing alpha must be in (0, 1]."""
        with pytest.raises(ValidationError):
            MetricSettings(smoothing_alpha=alpha)

    def test_rejects_bad_confidence(self) -> None:
        """Confidence must be a probability."""
        with pytest.raises(ValidationError):
            FaceMeshSettings(min_detection_confidence=1.5)


class TestLogging:
    """Tests for logging helpers."""

    def test_get_logger_namespaces(self) -> None:
        """Loggers live under the xray_face namespace."""
        assert get_logger("tests.module").name == "xray_face.tests.module"
        assert get_logger("xray_face.analysis").name == "xray_face.analysis"

    def test_setup_logging_writes_file(self, tmp_path: Path) -> None:
        """A log file is created, including missing parent directories."""
        log_file = tmp_path / "logs" / "run.log"

        setup_logging("DEBUG", str(log_file))
        get_logger("test").debug("hello")
        for handler in logging.getLogger("xray_face").handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text()

        logging.getLogger("xray_face").handlers.clear()

    def test_setup_logging_is_idempotent_and_quiets_mediapipe(self) -> None:
        """Repeated setup keeps one console handler; MediaPipe noise is raised to WARNING."""
        setup_logging("INFO")
        setup_logging("WARNING")

        app_logger = logging.getLogger("xray_face")
        assert len(app_logger.handlers) == 1
        assert app_logger.level == logging.WARNING
        assert logging.getLogger("mediapipe").level == logging.WARNING
        assert logging.getLogger("absl").level == logging.WARNING

        app_logger.handlers.clear()

    def test_unknown_level_falls_back_to_info(self) -> None:
        """A misspelled level name does not break startup."""
        setup_logging("LOUD")

        app_logger = logging.getLogger("xray_face")
        assert app_logger.level == logging.INFO

        app_logger.handlers.clear()


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_default_messages(self) -> None:
        """Errors carry a default message."""
        assert CameraError().message == "Camera error"
        assert isinstance(FaceMeshError(), XrayFaceError)

    def test_custom_message(self) -> None:
        """Custom messages are kept."""
        error = CameraError("Camera 3 is not available")
        assert str(error) == "Camera 3 is not available"


class TestTypes:
    """Tests for core data types."""

    def test_landmark_to_pixel(self) -> None:
        """Normalized coordinates scale to pixels."""
        assert Landmark(x=0.5, y=0.25).to_pixel(640, 480) == (320, 120)

    def test_face_landmarks_lookup(self) -> None:
        """Enum lookups return None past the end of the set."""
        points = tuple(Landmark(x=i / 300, y=0.5) for i in range(20))
        face = FaceLandmarks(points=points, timestamp=0.0, frame_idx=0)

        assert len(face) == 20
        assert face.get_landmark(FaceMeshIndex.NOSE_TIP) == points[1]
        assert face.get_landmark(FaceMeshIndex.RIGHT_MOUTH_CORNER) is None


class TestKeyBindings:
    """Tests for keyboard mapping."""

    @pytest.mark.parametrize(
        ("key", "action"),
        [
            (ord("q"), KeyAction.QUIT),
            (27, KeyAction.QUIT),
            (ord("m"), KeyAction.TOGGLE_MESH),
            (ord("r"), KeyAction.RESET),
            (ord(" "), KeyAction.PAUSE),
            (ord("x"), KeyAction.NONE),
            (-1, KeyAction.NONE),
        ],
    )
    def test_action_for_key(self, key: int, action: KeyAction) -> None:
        """Keys map to actions; no key and unknown keys map to NONE."""
        assert action_for_key(key) == action
