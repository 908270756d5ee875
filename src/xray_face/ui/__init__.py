"""User interface: display window and HUD rendering."""

from xray_face.ui.display import DisplayWindow, KeyAction
from xray_face.ui.hud import HUDRenderer

__all__ = ["DisplayWindow", "KeyAction", "HUDRenderer"]
