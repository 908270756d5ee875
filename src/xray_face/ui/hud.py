"""Heads-up display (HUD) rendering for face scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import cv2
import numpy as np

from xray_face.core.config import UISettings
from xray_face.core.types import Emotion, MetricResult

if TYPE_CHECKING:
    from numpy.typing import NDArray

TITLE = "X-RAY FACE AI"
TAGLINE = "V2.4 QUANTUM SCAN"
ANALYZING = "Analyzing..."
CALCULATING = "Calculating..."
QUALITY = "Optimal"
SCAN_PERIOD_S = 5.0


@dataclass(frozen=True)
class DisplayStats:
    """Text shown on the HUD for the current result."""

    perfection: int
    symmetry: int
    smile_level: int
    status: str
    emotion: str
    happy: bool

    @classmethod
    def from_result(cls, result: MetricResult | None) -> DisplayStats:
        """Build display values, using placeholders before the first face."""
        if result is None:
            return cls(
                perfection=0,
                symmetry=0,
                smile_level=0,
                status=ANALYZING,
                emotion=CALCULATING,
                happy=False,
            )

        return cls(
            perfection=result.perfection,
            symmetry=result.symmetry,
            smile_level=result.smile_level,
            status=result.status.value,
            emotion=result.emotion.value,
            happy=result.emotion is Emotion.HAPPY,
        )


@dataclass
class HUDLayout:
    """Layout configuration for HUD elements."""

    # Title bar (top)
    title_height: int = 90
    margin: int = 24

    # Score panel (bottom-center)
    panel_max_width: int = 448
    panel_height: int = 120
    panel_bottom: int = 48
    card_height: int = 70
    card_gap: int = 12

    # Colors (BGR)
    color_text: tuple[int, int, int] = (255, 255, 255)
    color_muted: tuple[int, int, int] = (140, 140, 140)
    color_bg: tuple[int, int, int] = (0, 0, 0)
    color_accent: tuple[int, int, int] = (238, 211, 34)
    color_success: tuple[int, int, int] = (128, 222, 74)


def scan_line_y(elapsed_s: float, height: int, period_s: float = SCAN_PERIOD_S) -> int:
    """Vertical position of the scan line, sweeping top to bottom and back.

    Args:
        elapsed_s: Seconds since the HUD started
        height: Image height in pixels
        period_s: Duration of one full down-and-up sweep

    Returns:
        Row index in [0, height - 1]
    """
    phase = (elapsed_s % period_s) / period_s
    fraction = 2 * phase if phase < 0.5 else 2 * (1 - phase)
    return min(height - 1, max(0, int(fraction * (height - 1))))


class HUDRenderer:
    """Renders heads-up display elements for face scores.

    Provides:
    - Title bar with mesh state badge
    - Perfection panel with status and progress bar
    - Emotion / symmetry / quality cards
    - Scan line animation and FPS readout
    """

    def __init__(
        self,
        settings: UISettings | None = None,
        layout: HUDLayout | None = None,
    ) -> None:
        """Initialize HUD renderer.

        Args:
            settings: UI settings
            layout: HUD layout configuration
        """
        self.settings = settings or UISettings()
        self.layout = layout or HUDLayout()

    def render_title_bar(
        self,
        image: NDArray[np.uint8],
        show_mesh: bool = True,
    ) -> NDArray[np.uint8]:
        """Render title, tagline and mesh badge.

        Args:
            image: Input image
            show_mesh: Current mesh overlay state

        Returns:
            Image with title bar
        """
        result = image.copy()
        w = result.shape[1]
        margin = self.layout.margin
        font = cv2.FONT_HERSHEY_SIMPLEX

        overlay = result.copy()
        cv2.rectangle(overlay, (0, 0), (w, self.layout.title_height), self.layout.color_bg, -1)
        cv2.addWeighted(overlay, 0.6, result, 0.4, 0, result)

        cv2.putText(result, TITLE, (margin, 45), font, 0.9, self.layout.color_text, 2)
        cv2.putText(result, TAGLINE, (margin, 70), font, 0.4, self.layout.color_accent, 1)

        badge = "MESH: ACTIVE" if show_mesh else "MESH: OFF"
        (text_w, text_h), _ = cv2.getTextSize(badge, font, 0.5, 1)
        x = w - text_w - margin
        y = 50
        padding = 12
        top_left = (x - padding, y - text_h - padding // 2)
        bottom_right = (x + text_w + padding, y + padding // 2)

        if show_mesh:
            cv2.rectangle(result, top_left, bottom_right, self.layout.color_accent, -1)
            cv2.putText(result, badge, (x, y), font, 0.5, self.layout.color_bg, 1)
        else:
            cv2.rectangle(result, top_left, bottom_right, self.layout.color_muted, 1)
            cv2.putText(result, badge, (x, y), font, 0.5, self.layout.color_text, 1)

        return result

    def render_perfection_panel(
        self,
        image: NDArray[np.uint8],
        stats: DisplayStats,
    ) -> NDArray[np.uint8]:
        """Render the perfection score, status and progress bar.

        Args:
            image: Input image
            stats: Values to display

        Returns:
            Image with perfection panel
        """
        result = image.copy()
        x0, x1, y0, y1 = self._panel_box(result)
        font = cv2.FONT_HERSHEY_SIMPLEX
        pad = 20

        overlay = result.copy()
        cv2.rectangle(overlay, (x0, y0), (x1, y1), self.layout.color_bg, -1)
        cv2.addWeighted(overlay, 0.6, result, 0.4, 0, result)
        cv2.rectangle(result, (x0, y0), (x0 + 3, y1), self.layout.color_accent, -1)

        cv2.putText(result, "FACE PERFECTION", (x0 + pad, y0 + 25), font, 0.4, self.layout.color_muted, 1)
        cv2.putText(result, f"{stats.perfection}%", (x0 + pad, y0 + 75), font, 1.6, self.layout.color_text, 3)

        status_color = self.layout.color_success if stats.happy else self.layout.color_accent
        (label_w, _), _ = cv2.getTextSize("STATUS", font, 0.4, 1)
        cv2.putText(result, "STATUS", (x1 - pad - label_w, y0 + 25), font, 0.4, self.layout.color_muted, 1)
        (status_w, _), _ = cv2.getTextSize(stats.status, font, 0.7, 2)
        cv2.putText(result, stats.status, (x1 - pad - status_w, y0 + 60), font, 0.7, status_color, 2)

        bar_y = y1 - 22
        bar_x0 = x0 + pad
        bar_x1 = x1 - pad
        cv2.rectangle(result, (bar_x0, bar_y), (bar_x1, bar_y + 6), (40, 40, 40), -1)
        fill = bar_x0 + int((bar_x1 - bar_x0) * min(100, max(0, stats.perfection)) / 100)
        if fill > bar_x0:
            cv2.rectangle(result, (bar_x0, bar_y), (fill, bar_y + 6), self.layout.color_accent, -1)

        return result

    def render_status_cards(
        self,
        image: NDArray[np.uint8],
        stats: DisplayStats,
    ) -> NDArray[np.uint8]:
        """Render the emotion, symmetry and quality cards below the panel.

        Args:
            image: Input image
            stats: Values to display

        Returns:
            Image with status cards
        """
        result = image.copy()
        x0, x1, _, y1 = self._panel_box(result)
        gap = self.layout.card_gap
        card_w = (x1 - x0 - 2 * gap) // 3
        top = y1 + gap
        bottom = top + self.layout.card_height
        font = cv2.FONT_HERSHEY_SIMPLEX

        cards = [
            ("EMOTION", stats.emotion),
            ("SYMMETRY", f"{stats.symmetry}%"),
            ("QUALITY", QUALITY),
        ]

        overlay = result.copy()
        for i in range(len(cards)):
            left = x0 + i * (card_w + gap)
            cv2.rectangle(overlay, (left, top), (left + card_w, bottom), self.layout.color_bg, -1)
        cv2.addWeighted(overlay, 0.5, result, 0.5, 0, result)

        for i, (label, value) in enumerate(cards):
            left = x0 + i * (card_w + gap)
            center = left + card_w // 2

            (label_w, _), _ = cv2.getTextSize(label, font, 0.35, 1)
            cv2.putText(result, label, (center - label_w // 2, top + 25), font, 0.35, self.layout.color_muted, 1)

            (value_w, _), _ = cv2.getTextSize(value, font, 0.5, 1)
            cv2.putText(result, value, (center - value_w // 2, top + 52), font, 0.5, self.layout.color_text, 1)

        return result

    def render_scan_line(
        self,
        image: NDArray[np.uint8],
        elapsed_s: float,
    ) -> NDArray[np.uint8]:
        """Render the sweeping scan line.

        Args:
            image: Input image
            elapsed_s: Seconds since start

        Returns:
            Image with scan line
        """
        result = image.copy()
        h, w = result.shape[:2]
        y = scan_line_y(elapsed_s, h)

        overlay = result.copy()
        cv2.line(overlay, (0, y), (w, y), self.layout.color_accent, 1)
        cv2.addWeighted(overlay, 0.5, result, 0.5, 0, result)

        return result

    def render_fps(
        self,
        image: NDArray[np.uint8],
        fps: float,
    ) -> NDArray[np.uint8]:
        """Render FPS readout in the bottom-left corner."""
        result = image.copy()
        h = result.shape[0]
        cv2.putText(
            result,
            f"FPS: {fps:.1f}",
            (self.layout.margin, h - 15),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.5,
            self.layout.color_muted,
            1,
        )
        return result

    def _panel_box(self, image: NDArray[np.uint8]) -> tuple[int, int, int, int]:
        """Compute (x0, x1, y0, y1) of the perfection panel."""
        h, w = image.shape[:2]
        panel_w = min(int(w * 0.9), self.layout.panel_max_width)
        x0 = (w - panel_w) // 2
        x1 = x0 + panel_w
        y1 = h - self.layout.panel_bottom - self.layout.card_height - self.layout.card_gap
        y0 = y1 - self.layout.panel_height
        return x0, x1, y0, y1

    def render_full_hud(
        self,
        image: NDArray[np.uint8],
        result: MetricResult | None,
        show_mesh: bool = True,
        fps: float | None = None,
        elapsed_s: float = 0.0,
    ) -> NDArray[np.uint8]:
        """Render complete HUD overlay.

        Args:
            image: Input image
            result: Scores to show (None while analyzing)
            show_mesh: Mesh overlay state for the badge
            fps: Current frame rate
            elapsed_s: Seconds since start, drives the scan line

        Returns:
            Image with full HUD
        """
        stats = DisplayStats.from_result(result)

        output = self.render_scan_line(image, elapsed_s)
        output = self.render_title_bar(output, show_mesh)
        output = self.render_perfection_panel(output, stats)
        output = self.render_status_cards(output, stats)

        if fps is not None and self.settings.show_fps:
            output = self.render_fps(output, fps)

        return output
