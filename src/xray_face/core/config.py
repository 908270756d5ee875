"""Application configuration via Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CameraSettings(BaseSettings):
    """Webcam capture settings."""

    model_config = SettingsConfigDict(env_prefix="CAMERA_")

    index: int = 0
    width: int = 1280
    height: int = 720
    mirror: bool = True


class FaceMeshSettings(BaseSettings):
    """MediaPipe face landmarker settings."""

    model_config = SettingsConfigDict(env_prefix="FACE_MESH_")

    num_faces: int = Field(default=1, ge=1)
    min_detection_confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    min_presence_confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    min_tracking_confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    model_path: str | None = None


class MetricSettings(BaseSettings):
    """Facial metric post-processing settings."""

    model_config = SettingsConfigDict(env_prefix="METRICS_")

    smoothing_enabled: bool = False
    smoothing_alpha: float = Field(default=0.5, gt=0.0, le=1.0)


class UISettings(BaseSettings):
    """Display and overlay settings."""

    model_config = SettingsConfigDict(env_prefix="")

    display_width: int = Field(default=1280, alias="DISPLAY_WIDTH")
    display_height: int = Field(default=720, alias="DISPLAY_HEIGHT")
    show_mesh: bool = Field(default=True, alias="SHOW_MESH")
    show_fps: bool = Field(default=True, alias="SHOW_FPS")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    camera: CameraSettings = Field(default_factory=CameraSettings)
    face_mesh: FaceMeshSettings = Field(default_factory=FaceMeshSettings)
    metrics: MetricSettings = Field(default_factory=MetricSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance."""
    return Settings()
