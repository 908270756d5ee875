"""Camera capture and video streaming."""

from xray_face.camera.stream import CameraStream

__all__ = ["CameraStream"]
