"""Configuration settings for the shear scene pipeline

This module centralizes all configuration settings including:
- Scene length limits (seconds and frames)
- Scene detection algorithm and sensitivity
- Progress reporting cadence
- Log file locations and levels

User-configurable settings are read from environment variables; structured
settings passed between stages are dataclasses with their own validation.
"""

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigurationError

# Scene length limits; the effective limit is whichever is smaller
MAX_SCENE_SECS = int(os.environ.get("SHEAR_MAX_SCENE_SECS", "10"))
MAX_SCENE_FRAMES = int(os.environ.get("SHEAR_MAX_SCENE_FRAMES", "300"))

# Scene detection settings
DETECTION_SPEED = os.environ.get("SHEAR_DETECTION_SPEED", "standard")
DETECT_FLASHES = True
LOOKAHEAD_DISTANCE = 5  # Frames; also the adaptive detector's rolling window
CONTENT_THRESHOLD = 27.0  # ContentDetector threshold (fast mode)
ADAPTIVE_THRESHOLD = 3.0  # AdaptiveDetector ratio threshold (standard mode)

# Report detection progress every N decoded frames
PROGRESS_INTERVAL = 100

# LOG_DIR: user definable with default of "$HOME/shear_logs"
LOG_DIR = Path(os.environ.get("SHEAR_LOG_DIR", str(Path.home() / "shear_logs")))

# Logging configuration
LOG_LEVEL = "INFO"  # Default logging level; valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL


class SceneDetectionSpeed(enum.Enum):
    """Recognized scene detection modes."""
    STANDARD = "standard"
    FAST = "fast"

    @classmethod
    def parse(cls, value) -> "SceneDetectionSpeed":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(speed.value for speed in cls)
            raise ConfigurationError(
                f"Unknown detection speed '{value}' (expected one of: {choices})",
                module="config"
            ) from None


@dataclass
class DetectionOptions:
    """Options handed to the scene change detector."""
    analysis_speed: SceneDetectionSpeed = SceneDetectionSpeed.STANDARD
    detect_flashes: bool = DETECT_FLASHES
    lookahead_distance: int = LOOKAHEAD_DISTANCE
    content_threshold: float = CONTENT_THRESHOLD
    adaptive_threshold: float = ADAPTIVE_THRESHOLD

    def __post_init__(self) -> None:
        self.analysis_speed = SceneDetectionSpeed.parse(self.analysis_speed)

    @classmethod
    def from_config(cls) -> "DetectionOptions":
        """Build options from module defaults and environment overrides."""
        options = cls(analysis_speed=DETECTION_SPEED)
        options.validate()
        return options

    def validate(self) -> None:
        if not isinstance(self.detect_flashes, bool):
            raise ConfigurationError("detect_flashes must be a boolean", module="config")
        if self.lookahead_distance < 1:
            raise ConfigurationError(
                f"Lookahead distance must be at least 1: {self.lookahead_distance}",
                module="config"
            )
        if self.content_threshold <= 0:
            raise ConfigurationError(
                f"Content threshold must be positive: {self.content_threshold}",
                module="config"
            )
        if self.adaptive_threshold <= 0:
            raise ConfigurationError(
                f"Adaptive threshold must be positive: {self.adaptive_threshold}",
                module="config"
            )


@dataclass
class SceneLengthLimits:
    """Upper bounds on a single scene, in seconds and in frames."""
    max_scene_secs: int = MAX_SCENE_SECS
    max_scene_frames: int = MAX_SCENE_FRAMES

    def validate(self) -> None:
        if self.max_scene_secs <= 0:
            raise ConfigurationError(
                f"Maximum scene length in seconds must be positive: {self.max_scene_secs}",
                module="config"
            )
        if self.max_scene_frames <= 0:
            raise ConfigurationError(
                f"Maximum scene length in frames must be positive: {self.max_scene_frames}",
                module="config"
            )
