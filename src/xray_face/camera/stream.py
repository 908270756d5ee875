"""Webcam frame generator."""

from __future__ import annotations

import time
from collections.abc import Callable, Generator
from typing import Any

import cv2
import numpy as np
from numpy.typing import NDArray

from xray_face.core.config import CameraSettings
from xray_face.core.exceptions import CameraError
from xray_face.core.logging import get_logger
from xray_face.core.types import Frame

logger = get_logger(__name__)


class CameraStream:
    """Generator-based video stream from a local camera.

    Provides frames as Frame dataclass instances with metadata. The capture
    buffer is kept at one frame so a slow consumer skips stale frames
    instead of falling behind.
    """

    def __init__(
        self,
        settings: CameraSettings | None = None,
        capture_factory: Callable[[int], Any] = cv2.VideoCapture,
    ) -> None:
        """Initialize stream.

        Args:
            settings: Camera settings (uses defaults if None)
            capture_factory: Builds a capture object from a device index
        """
        self.settings = settings or CameraSettings()
        self._capture_factory = capture_factory
        self._capture: Any | None = None
        self._frame_idx = 0
        self._start_time: float | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if stream is active."""
        return self._running

    @property
    def frame_count(self) -> int:
        """Number of frames captured so far."""
        return self._frame_idx

    def start(self) -> None:
        """Open the camera device.

        Raises:
            CameraError: If the camera cannot be opened
        """
        try:
            capture = self._capture_factory(self.settings.index)
        except Exception as e:
            raise CameraError(f"Failed to open camera {self.settings.index}: {e}") from e

        if not capture.isOpened():
            capture.release()
            raise CameraError(f"Camera {self.settings.index} is not available")

        capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.settings.width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.settings.height)
        capture.set(cv2.CAP_PROP_BUFFERSIZE, 1)

        self._capture = capture
        self._start_time = time.time()
        self._frame_idx = 0
        self._running = True
        logger.info(
            "Camera %d opened (%dx%d requested)",
            self.settings.index,
            self.settings.width,
            self.settings.height,
        )

    def stop(self) -> None:
        """Release the camera device."""
        self._running = False
        if self._capture is not None:
            self._capture.release()
            self._capture = None
        logger.info("Camera stream stopped (captured %d frames)", self._frame_idx)

    def frames(self) -> Generator[Frame, None, None]:
        """Generate Frame objects from the camera.

        Ends when the camera stops delivering frames or the stream is stopped.

        Yields:
            Frame objects with image data and metadata
        """
        if not self._running:
            self.start()

        while self._running:
            frame = self.capture_single()
            if frame is None:
                logger.warning("Camera returned no frame, ending stream")
                break

            yield frame

    def capture_single(self) -> Frame | None:
        """Capture one frame.

        Returns:
            Frame or None if the read failed
        """
        image = self._read_frame()
        if image is None:
            return None

        timestamp = time.time() - (self._start_time or time.time())
        frame = Frame(image=image, timestamp=timestamp, index=self._frame_idx)
        self._frame_idx += 1
        return frame

    def _read_frame(self) -> NDArray[np.uint8] | None:
        """Read a single BGR frame, mirrored if configured."""
        if self._capture is None:
            return None

        ok, image = self._capture.read()
        if not ok or image is None:
            return None

        image = np.asarray(image, dtype=np.uint8)
        if self.settings.mirror:
            image = cv2.flip(image, 1)

        return image

    def __iter__(self) -> Generator[Frame, None, None]:
        """Allow direct iteration over stream."""
        return self.frames()

    def __enter__(self) -> CameraStream:
        """Context manager entry."""
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit."""
        self.stop()
