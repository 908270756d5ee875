"""MediaPipe face landmark estimation using the Tasks API."""

from __future__ import annotations

import urllib.request
from pathlib import Path

import cv2
import mediapipe as mp
from mediapipe.tasks import python
from mediapipe.tasks.python import vision

from xray_face.core.config import FaceMeshSettings
from xray_face.core.exceptions import FaceMeshError
from xray_face.core.logging import get_logger
from xray_face.core.types import FaceLandmarks, Frame, Landmark

logger = get_logger(__name__)

MODEL_URL = "https://storage.googleapis.com/mediapipe-models/face_landmarker/face_landmarker/float16/latest/face_landmarker.task"
MODEL_DIR = Path(__file__).parent.parent.parent.parent / "data" / "models"
MODEL_PATH = MODEL_DIR / "face_landmarker.task"


def _download_model(model_path: Path = MODEL_PATH) -> Path:
    """Download the face landmarker model if not present.

    Args:
        model_path: Where the model file should live

    Returns:
        Path to the model file

    Raises:
        FaceMeshError: If download fails
    """
    if model_path.exists():
        return model_path

    logger.info("Downloading MediaPipe face landmarker model...")
    model_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        urllib.request.urlretrieve(MODEL_URL, model_path)
        logger.info("Model downloaded to %s", model_path)
        return model_path
    except Exception as e:
        raise FaceMeshError(f"Failed to download model: {e}") from e


def convert_face(raw_landmarks: list, frame: Frame) -> FaceLandmarks:
    """Convert one face of MediaPipe landmarks to FaceLandmarks.

    Args:
        raw_landmarks: MediaPipe NormalizedLandmark list for a single face
        frame: Frame the landmarks were detected in

    Returns:
        FaceLandmarks holding plain Landmark values
    """
    points = tuple(
        Landmark(x=float(lm.x), y=float(lm.y), z=float(lm.z or 0.0)) for lm in raw_landmarks
    )
    return FaceLandmarks(points=points, timestamp=frame.timestamp, frame_idx=frame.index)


class FaceMeshEstimator:
    """Wrapper for the MediaPipe face landmarker.

    Converts MediaPipe results to FaceLandmarks/Landmark types
    to avoid leaking MediaPipe objects throughout the codebase.
    Only the first detected face is returned.
    """

    def __init__(self, settings: FaceMeshSettings | None = None) -> None:
        """Initialize estimator with settings.

        Args:
            settings: Face mesh settings (uses defaults if None)
        """
        self.settings = settings or FaceMeshSettings()
        self._landmarker: vision.FaceLandmarker | None = None
        self._initialized = False
        self._last_timestamp_ms = -1

    @property
    def is_initialized(self) -> bool:
        """Check if MediaPipe model is loaded."""
        return self._initialized

    def initialize(self) -> None:
        """Load MediaPipe face landmarker model.

        Raises:
            FaceMeshError: If model fails to load
        """
        try:
            if self.settings.model_path:
                model_path = Path(self.settings.model_path)
                if not model_path.exists():
                    raise FaceMeshError(f"Model file not found: {model_path}")
            else:
                model_path = _download_model()

            base_options = python.BaseOptions(model_asset_path=str(model_path))

            options = vision.FaceLandmarkerOptions(
                base_options=base_options,
                running_mode=vision.RunningMode.VIDEO,
                num_faces=self.settings.num_faces,
                min_face_detection_confidence=self.settings.min_detection_confidence,
                min_face_presence_confidence=self.settings.min_presence_confidence,
                min_tracking_confidence=self.settings.min_tracking_confidence,
                output_face_blendshapes=False,
            )

            self._landmarker = vision.FaceLandmarker.create_from_options(options)
            self._initialized = True
            self._last_timestamp_ms = -1
            logger.info("MediaPipe FaceLandmarker initialized (Tasks API)")

        except FaceMeshError:
            raise
        except Exception as e:
            raise FaceMeshError(f"Failed to initialize MediaPipe: {e}") from e

    def close(self) -> None:
        """Release MediaPipe resources."""
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None
            self._initialized = False

    def estimate(self, frame: Frame) -> FaceLandmarks | None:
        """Run face landmark detection on a frame.

        Args:
            frame: Input video frame

        Returns:
            FaceLandmarks for the first face, or None if no face detected

        Raises:
            FaceMeshError: If estimation fails
        """
        if not self._initialized or self._landmarker is None:
            self.initialize()

        if self._landmarker is None:
            raise FaceMeshError("Face landmarker not initialized")

        try:
            rgb_image = cv2.cvtColor(frame.image, cv2.COLOR_BGR2RGB)
            mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb_image)

            # VIDEO mode rejects non-increasing timestamps
            timestamp_ms = max(int(frame.timestamp * 1000), self._last_timestamp_ms + 1)
            self._last_timestamp_ms = timestamp_ms

            results = self._landmarker.detect_for_video(mp_image, timestamp_ms)

            if not results.face_landmarks:
                return None

            return convert_face(results.face_landmarks[0], frame)

        except Exception as e:
            logger.error("Face landmark estimation failed: %s", e)
            raise FaceMeshError(f"Estimation failed: {e}") from e

    def __enter__(self) -> FaceMeshEstimator:
        """Context manager entry."""
        self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit."""
        self.close()
