"""Tests for the frame processing pipeline."""

from __future__ import annotations

from collections import deque

import numpy as np

from xray_face.core.config import Settings, UISettings
from xray_face.core.types import FaceLandmarks, Frame, MetricResult, NoFace
from xray_face.pipeline.processor import FrameProcessor
from xray_face.vision.overlay import MeshOverlayRenderer


class StubProvider:
    """Landmark provider replaying a fixed script of detections."""

    def __init__(self, faces: list[FaceLandmarks | None]) -> None:
        self._faces = deque(faces)
        self.initialized = 0
        self.closed = 0

    def initialize(self) -> None:
        self.initialized += 1

    def close(self) -> None:
        self.closed += 1

    def estimate(self, frame: Frame) -> FaceLandmarks | None:
        return self._faces.popleft() if self._faces else None


def _processor(faces: list[FaceLandmarks | None]) -> tuple[FrameProcessor, StubProvider]:
    provider = StubProvider(faces)
    overlay = MeshOverlayRenderer(UISettings(), tesselation=[(13, 14)], contours=[(61, 291)])
    return FrameProcessor(Settings(), provider=provider, overlay=overlay), provider


def _frame(index: int) -> Frame:
    return Frame(image=np.zeros((120, 160, 3), dtype=np.uint8), timestamp=index / 30.0, index=index)


class TestFrameProcessor:
    """Tests for the FrameProcessor class."""

    def test_initializes_provider_once(self) -> None:
        """First frame initializes the provider lazily."""
        processor, provider = _processor([])

        processor.process_frame(_frame(0))
        processor.process_frame(_frame(1))

        assert provider.initialized == 1

    def test_no_face_before_first_detection(self) -> None:
        """Display result stays None while analyzing."""
        processor, _ = _processor([None])

        processed = processor.process_frame(_frame(0))

        assert isinstance(processed.result, NoFace)
        assert processed.display_result is None
        assert not processed.has_face

    def test_scores_detected_face(self, smiling_face_landmarks: FaceLandmarks) -> None:
        """A detected face is scored and becomes the displayed result."""
        processor, _ = _processor([smiling_face_landmarks])

        processed = processor.process_frame(_frame(0))

        assert processed.has_face
        assert isinstance(processed.result, MetricResult)
        assert processed.result.perfection == 85
        assert processed.display_result == processed.result
        assert processor.display_result == processed.result

    def test_keeps_last_result_when_face_lost(
        self, smiling_face_landmarks: FaceLandmarks
    ) -> None:
        """NoFace frames leave the displayed result unchanged."""
        processor, _ = _processor([smiling_face_landmarks, None, None])

        first = processor.process_frame(_frame(0))
        second = processor.process_frame(_frame(1))
        third = processor.process_frame(_frame(2))

        assert isinstance(second.result, NoFace)
        assert second.display_result == first.result
        assert third.display_result == first.result

    def test_short_landmark_set_is_no_face(self) -> None:
        """Provider output missing required indices is not scored."""
        short = FaceLandmarks(points=(), timestamp=0.0, frame_idx=0)
        processor, _ = _processor([short])

        processed = processor.process_frame(_frame(0))

        assert isinstance(processed.result, NoFace)
        assert processed.display_result is None

    def test_rendered_image_is_a_copy(self, smiling_face_landmarks: FaceLandmarks) -> None:
        """Overlay draws on a new image and keeps the frame intact."""
        processor, _ = _processor([smiling_face_landmarks])
        frame = _frame(0)

        processed = processor.process_frame(frame)

        assert processed.rendered_image is not frame.image
        assert processed.rendered_image.shape == frame.image.shape
        assert not frame.image.any()
        assert processed.rendered_image.any()

    def test_toggle_mesh(self, smiling_face_landmarks: FaceLandmarks) -> None:
        """Hidden mesh leaves the rendered image blank."""
        processor, _ = _processor([smiling_face_landmarks])

        assert processor.show_mesh
        assert processor.toggle_mesh() is False

        processed = processor.process_frame(_frame(0))

        assert not processed.rendered_image.any()
        assert isinstance(processed.result, MetricResult)

    def test_reset_clears_display_result(self, smiling_face_landmarks: FaceLandmarks) -> None:
        """Reset returns to the analyzing state."""
        processor, _ = _processor([smiling_face_landmarks])

        processor.process_frame(_frame(0))
        processor.reset()

        assert processor.display_result is None

    def test_context_manager_releases_provider(self) -> None:
        """Exiting the context closes the provider."""
        processor, provider = _processor([])

        with processor:
            assert provider.initialized == 1

        assert provider.closed == 1

    def test_one_result_per_frame(self, smiling_face_landmarks: FaceLandmarks) -> None:
        """Every frame yields its own ProcessedFrame."""
        count = 5
        processor, _ = _processor([smiling_face_landmarks] * count)

        processed = [processor.process_frame(_frame(i)) for i in range(count)]

        assert [p.frame.index for p in processed] == list(range(count))
        assert all(p.has_face for p in processed)
