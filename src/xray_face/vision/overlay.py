"""Face mesh overlay rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import cv2
import numpy as np

from xray_face.core.config import UISettings
from xray_face.core.types import FaceLandmarks, Frame

if TYPE_CHECKING:
    from numpy.typing import NDArray

Connection = tuple[int, int]

# Colors (BGR format)
COLOR_MESH = (255, 255, 0)  # Cyan
TESSELATION_ALPHA = 0x44 / 0xFF


def default_mesh_connections() -> tuple[list[Connection], list[Connection]]:
    """Load MediaPipe's face mesh edge lists.

    Returns:
        (tesselation, contours) as lists of (start, end) index pairs
    """
    from mediapipe.tasks.python.vision import FaceLandmarksConnections

    tesselation = [(c.start, c.end) for c in FaceLandmarksConnections.FACE_LANDMARKS_TESSELATION]
    contours = [(c.start, c.end) for c in FaceLandmarksConnections.FACE_LANDMARKS_CONTOURS]
    return tesselation, contours


class MeshOverlayRenderer:
    """Draws the face mesh on video frames.

    Tesselation edges are blended in translucently, contour edges drawn solid.
    """

    def __init__(
        self,
        settings: UISettings | None = None,
        tesselation: Iterable[Connection] | None = None,
        contours: Iterable[Connection] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            settings: UI/display settings (uses defaults if None)
            tesselation: Mesh edges (MediaPipe's if None)
            contours: Contour edges (MediaPipe's if None)
        """
        self.settings = settings or UISettings()
        self.show_mesh = self.settings.show_mesh

        if tesselation is None or contours is None:
            default_tesselation, default_contours = default_mesh_connections()
            tesselation = default_tesselation if tesselation is None else tesselation
            contours = default_contours if contours is None else contours

        self._tesselation = list(tesselation)
        self._contours = list(contours)

    def toggle(self) -> bool:
        """Flip mesh drawing on/off.

        Returns:
            New mesh visibility
        """
        self.show_mesh = not self.show_mesh
        return self.show_mesh

    def draw_connections(
        self,
        image: NDArray[np.uint8],
        face: FaceLandmarks,
        connections: Iterable[Connection],
        color: tuple[int, int, int] = COLOR_MESH,
        thickness: int = 1,
    ) -> NDArray[np.uint8]:
        """Draw landmark edges in place.

        Edges referencing indices outside the landmark set are skipped.

        Args:
            image: Image to draw on (modified in place)
            face: Landmarks to connect
            connections: (start, end) index pairs
            color: Line color (BGR)
            thickness: Line thickness

        Returns:
            The same image
        """
        height, width = image.shape[:2]
        count = len(face.points)

        for start_idx, end_idx in connections:
            if start_idx >= count or end_idx >= count:
                continue

            start_pt = face.points[start_idx].to_pixel(width, height)
            end_pt = face.points[end_idx].to_pixel(width, height)
            cv2.line(image, start_pt, end_pt, color, thickness)

        return image

    def draw_mesh(self, image: NDArray[np.uint8], face: FaceLandmarks) -> NDArray[np.uint8]:
        """Draw tesselation and contours on a copy of the image.

        Args:
            image: Input image array
            face: Detected face landmarks

        Returns:
            Image with mesh overlay
        """
        result = image.copy()

        layer = result.copy()
        self.draw_connections(layer, face, self._tesselation)
        cv2.addWeighted(layer, TESSELATION_ALPHA, result, 1 - TESSELATION_ALPHA, 0, result)

        self.draw_connections(result, face, self._contours)
        return result

    def render(self, frame: Frame, face: FaceLandmarks | None) -> NDArray[np.uint8]:
        """Render the frame with the mesh when enabled and a face is present.

        Args:
            frame: Input frame
            face: Current face landmarks (optional)

        Returns:
            New image; the frame's image is left untouched
        """
        if self.show_mesh and face is not None:
            return self.draw_mesh(frame.image, face)
        return frame.image.copy()
