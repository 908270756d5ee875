"""Frame processing pipeline orchestration."""

from xray_face.pipeline.processor import FrameProcessor, ProcessedFrame

__all__ = ["FrameProcessor", "ProcessedFrame"]
