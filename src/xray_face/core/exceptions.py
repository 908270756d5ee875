"""Custom exceptions for X-Ray Face."""


class XrayFaceError(Exception):
    """Base exception for all X-Ray Face errors."""

    pass


class CameraError(XrayFaceError):
    """Failed to open or read from the camera."""

    def __init__(self, message: str = "Camera error") -> None:
        self.message = message
        super().__init__(self.message)


class FaceMeshError(XrayFaceError):
    """Face landmark model failed to load or returned invalid data."""

    def __init__(self, message: str = "Face mesh estimation failed") -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(XrayFaceError):
    """Invalid parameters passed to a component."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        self.message = message
        super().__init__(self.message)
