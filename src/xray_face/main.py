"""Main entry point for X-Ray Face application."""

from __future__ import annotations

import os
import sys
import time

from xray_face.camera.stream import CameraStream
from xray_face.core.config import get_settings
from xray_face.core.exceptions import CameraError, XrayFaceError
from xray_face.core.logging import get_logger, setup_logging
from xray_face.pipeline.processor import FrameProcessor
from xray_face.ui.display import DisplayWindow, KeyAction
from xray_face.ui.hud import HUDRenderer

logger = get_logger(__name__)


def run_session() -> int:
    """Run the live scoring session.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.file)

    logger.info("Starting X-Ray Face")

    stream = CameraStream(settings.camera)
    display = DisplayWindow(settings.ui)
    hud = HUDRenderer(settings.ui)
    processor: FrameProcessor | None = None

    try:
        processor = FrameProcessor(settings)
        processor.initialize()
        display.open()
        display.show_message("Starting camera...")

        session_start = time.time()
        fps_start = session_start
        frame_count = 0
        fps = 0.0
        output = None

        logger.info("Starting scoring loop (press 'q' to quit)")

        with stream:
            for frame in stream.frames():
                if not display.is_paused or output is None:
                    result = processor.process_frame(frame)
                    output = hud.render_full_hud(
                        result.rendered_image,
                        result.display_result,
                        show_mesh=processor.show_mesh,
                        fps=fps,
                        elapsed_s=time.time() - session_start,
                    )

                display.show_frame(output)

                action = display.poll_key(wait_ms=1)

                if action == KeyAction.QUIT:
                    logger.info("Quit requested")
                    break

                elif action == KeyAction.TOGGLE_MESH:
                    processor.toggle_mesh()

                elif action == KeyAction.RESET:
                    processor.reset()

                frame_count += 1
                elapsed = time.time() - fps_start
                if elapsed > 1.0:
                    fps = frame_count / elapsed
                    frame_count = 0
                    fps_start = time.time()

        final = processor.display_result
        if final is not None:
            logger.info(
                "Last scores: perfection %d, symmetry %d, smile %d (%s)",
                final.perfection,
                final.symmetry,
                final.smile_level,
                final.emotion.value,
            )

        return 0

    except CameraError as e:
        logger.error("Camera failed: %s", e)
        return 1

    except XrayFaceError as e:
        logger.error("Scoring error: %s", e)
        return 2

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return 3

    finally:
        if processor is not None:
            processor.shutdown()
        display.close()
        logger.info("X-Ray Face stopped")


def main() -> None:
    """CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="X-Ray Face - live face mesh with symmetry and smile scores"
    )
    parser.add_argument(
        "--camera",
        type=int,
        default=None,
        help="Camera device index (default: 0)",
    )
    parser.add_argument(
        "--no-mesh",
        action="store_true",
        help="Start with the mesh overlay hidden",
    )
    parser.add_argument(
        "--no-mirror",
        action="store_true",
        help="Show the camera image unmirrored",
    )
    parser.add_argument(
        "--smoothing",
        action="store_true",
        help="Smooth scores across frames",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.camera is not None:
        os.environ["CAMERA_INDEX"] = str(args.camera)
    if args.no_mesh:
        os.environ["SHOW_MESH"] = "false"
    if args.no_mirror:
        os.environ["CAMERA_MIRROR"] = "false"
    if args.smoothing:
        os.environ["METRICS_SMOOTHING_ENABLED"] = "true"
    if args.debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    sys.exit(run_session())


if __name__ == "__main__":
    main()
