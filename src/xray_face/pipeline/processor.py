"""Frame processing pipeline orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import numpy as np

from xray_face.analysis.engine import MetricEngine
from xray_face.core.config import Settings, get_settings
from xray_face.core.logging import get_logger
from xray_face.core.types import FaceLandmarks, Frame, MetricResult, NoFace
from xray_face.vision.face_mesh import FaceMeshEstimator
from xray_face.vision.overlay import MeshOverlayRenderer

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)


class LandmarkProvider(Protocol):
    """Anything that yields at most one face per frame."""

    def initialize(self) -> None: ...

    def close(self) -> None: ...

    def estimate(self, frame: Frame) -> FaceLandmarks | None: ...


@dataclass
class ProcessedFrame:
    """Result of processing a single frame.

    Attributes:
        frame: Input frame
        face: Landmarks of the first detected face, if any
        result: This frame's scores, or NoFace
        display_result: Last good scores (None until a face has been scored)
        rendered_image: Frame with mesh overlay
    """

    frame: Frame
    face: FaceLandmarks | None
    result: MetricResult | NoFace
    display_result: MetricResult | None
    rendered_image: NDArray[np.uint8]

    @property
    def has_face(self) -> bool:
        """Whether this frame produced scores."""
        return isinstance(self.result, MetricResult)


class FrameProcessor:
    """Orchestrates the full frame processing pipeline.

    Coordinates:
    - Face landmark estimation
    - Metric scoring
    - Retaining the last good result for display
    - Mesh overlay rendering
    """

    def __init__(
        self,
        settings: Settings | None = None,
        provider: LandmarkProvider | None = None,
        overlay: MeshOverlayRenderer | None = None,
    ) -> None:
        """Initialize processor with settings.

        Args:
            settings: Application settings (uses defaults if None)
            provider: Landmark provider (MediaPipe face landmarker if None)
            overlay: Mesh renderer (MediaPipe mesh edges if None)
        """
        self.settings = settings or get_settings()

        self._provider = provider or FaceMeshEstimator(self.settings.face_mesh)
        self._engine = MetricEngine(self.settings.metrics)
        self._overlay = overlay or MeshOverlayRenderer(self.settings.ui)

        self._display_result: MetricResult | None = None
        self._initialized = False

    @property
    def display_result(self) -> MetricResult | None:
        """Last good result, or None while still analyzing."""
        return self._display_result

    @property
    def show_mesh(self) -> bool:
        """Whether the mesh overlay is drawn."""
        return self._overlay.show_mesh

    def initialize(self) -> None:
        """Initialize all components."""
        if not self._initialized:
            self._provider.initialize()
            self._initialized = True
            logger.info("Frame processor initialized")

    def shutdown(self) -> None:
        """Release all resources."""
        self._provider.close()
        self._initialized = False
        logger.info("Frame processor shutdown")

    def toggle_mesh(self) -> bool:
        """Flip mesh overlay visibility.

        Returns:
            New mesh visibility
        """
        visible = self._overlay.toggle()
        logger.info("Mesh overlay %s", "on" if visible else "off")
        return visible

    def process_frame(self, frame: Frame) -> ProcessedFrame:
        """Process a single frame through the full pipeline.

        Args:
            frame: Input video frame

        Returns:
            ProcessedFrame with all results
        """
        if not self._initialized:
            self.initialize()

        face = self._provider.estimate(frame)

        result = self._engine.compute(face.points if face is not None else None)

        # NoFace keeps whatever was shown last
        if isinstance(result, MetricResult):
            self._display_result = result

        rendered = self._overlay.render(frame, face)

        return ProcessedFrame(
            frame=frame,
            face=face,
            result=result,
            display_result=self._display_result,
            rendered_image=rendered,
        )

    def reset(self) -> None:
        """Clear the displayed result and smoothing history."""
        self._display_result = None
        self._engine.reset()
        logger.info("Scores reset")

    def __enter__(self) -> FrameProcessor:
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
        self.shutdown()
