"""OpenCV window management for video display."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

import cv2
import numpy as np

from xray_face.core.config import UISettings
from xray_face.core.logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

# Matches the HUD accent (BGR)
MESSAGE_COLOR = (238, 211, 34)


class KeyAction(Enum):
    """Actions triggered by keyboard input."""

    NONE = auto()
    QUIT = auto()
    TOGGLE_MESH = auto()
    RESET = auto()
    PAUSE = auto()


# Key mappings (ASCII codes)
KEY_BINDINGS: dict[int, KeyAction] = {
    ord("q"): KeyAction.QUIT,
    ord("Q"): KeyAction.QUIT,
    27: KeyAction.QUIT,  # ESC
    ord("m"): KeyAction.TOGGLE_MESH,
    ord("M"): KeyAction.TOGGLE_MESH,
    ord("r"): KeyAction.RESET,
    ord("R"): KeyAction.RESET,
    ord(" "): KeyAction.PAUSE,
}


def action_for_key(key: int) -> KeyAction:
    """Map a cv2.waitKey code to an action."""
    key &= 0xFF
    if key == 255:  # No key pressed
        return KeyAction.NONE
    return KEY_BINDINGS.get(key, KeyAction.NONE)


class DisplayWindow:
    """OpenCV window showing the HUD-composited camera feed.

    Pausing is tracked here so the loop can keep redrawing the last frame
    while the window still answers key presses.
    """

    WINDOW_NAME = "X-Ray Face AI"

    def __init__(self, settings: UISettings | None = None) -> None:
        self.settings = settings or UISettings()
        self.size = (self.settings.display_width, self.settings.display_height)
        self.is_paused = False
        self._created = False

    def open(self) -> None:
        """Create the resizable window at the configured size."""
        cv2.namedWindow(self.WINDOW_NAME, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(self.WINDOW_NAME, *self.size)
        self._created = True
        logger.info("Window '%s' opened at %dx%d", self.WINDOW_NAME, *self.size)

    def close(self) -> None:
        if not self._created:
            return
        cv2.destroyWindow(self.WINDOW_NAME)
        self._created = False

    def show_frame(self, image: NDArray[np.uint8]) -> None:
        """Show an image, scaled to the window size when it differs."""
        if not self._created:
            self.open()

        if (image.shape[1], image.shape[0]) != self.size:
            image = cv2.resize(image, self.size)
        cv2.imshow(self.WINDOW_NAME, image)

    def poll_key(self, wait_ms: int = 1) -> KeyAction:
        """Read one key press and apply pause toggling.

        Args:
            wait_ms: cv2.waitKey delay; 1 keeps the loop responsive

        Returns:
            Action bound to the key, NONE when nothing was pressed
        """
        action = action_for_key(cv2.waitKey(wait_ms))
        if action == KeyAction.PAUSE:
            self.is_paused = not self.is_paused
            logger.info("Scan %s", "paused" if self.is_paused else "resumed")
        return action

    def show_message(self, message: str) -> None:
        """Splash a centered accent-colored message, e.g. while the camera warms up."""
        width, height = self.size
        image = np.zeros((height, width, 3), dtype=np.uint8)

        (text_w, text_h), _ = cv2.getTextSize(message, cv2.FONT_HERSHEY_SIMPLEX, 1.0, 2)
        origin = ((width - text_w) // 2, (height + text_h) // 2)
        cv2.putText(image, message, origin, cv2.FONT_HERSHEY_SIMPLEX, 1.0, MESSAGE_COLOR, 2)

        self.show_frame(image)
        cv2.waitKey(1)

    def __enter__(self) -> DisplayWindow:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()
