"""Computer vision: face landmark estimation and mesh overlay."""

from xray_face.vision.face_mesh import FaceMeshEstimator
from xray_face.vision.overlay import MeshOverlayRenderer

__all__ = [
    "FaceMeshEstimator",
    "MeshOverlayRenderer",
]
