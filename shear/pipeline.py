"""
Scene pipeline orchestration

Responsibilities:
  - Derive the scene length limit from the frame rate and configured limits
  - Run scene detection and normalize its boundaries
  - Split over-long scenes and write the final scene list
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DetectionOptions, SceneLengthLimits
from .detection import ProgressCallback, detect_scene_changes
from .exceptions import OutputError
from .scene_file import read_scene_file, write_scene_file
from .splitting import compute_max_scene_frames, normalize_scene_starts, split_long_scenes

logger = logging.getLogger(__name__)

def _verify_scene_file(output_file: Path, expected: List[int]) -> None:
    """Read the scene file back and make sure it holds the computed list"""
    try:
        written = read_scene_file(output_file)
    except OSError as e:
        raise OutputError(f"Failed to read back scene file {output_file}: {e}", module="pipeline") from e
    if written != expected:
        raise OutputError(
            f"Scene file {output_file} holds {len(written)} frames, expected {len(expected)}",
            module="pipeline"
        )

def process_file(
    input_file: Path,
    output_file: Path,
    fps: Tuple[int, int],
    total_frames: int = 0,
    limits: Optional[SceneLengthLimits] = None,
    options: Optional[DetectionOptions] = None,
    progress: Optional[ProgressCallback] = None
) -> List[int]:
    """
    Detect, split and write the scene list for one video.

    Args:
        input_file: Video to analyze.
        output_file: Scene file to write.
        fps: Frame rate as (numerator, denominator).
        total_frames: Known frame count; 0 means use the count observed
            while decoding.
        limits: Scene length limits; defaults come from shear.config.
        options: Detector configuration.
        progress: Optional progress sink passed to the detector.

    Returns:
        The scene start frames that were written.
    """
    limits = limits or SceneLengthLimits()
    limits.validate()
    fps_num, fps_den = fps
    max_frames = compute_max_scene_frames(
        fps_num, fps_den, limits.max_scene_secs, limits.max_scene_frames
    )
    logger.info("Detecting scene changes in %s (max %d frames/scene)", input_file, max_frames)

    results = detect_scene_changes(input_file, options, progress=progress)

    # The caller's frame count is more reliable than the decoded count for some formats
    if total_frames > 0:
        if results.frame_count and results.frame_count != total_frames:
            logger.warning("Decoded %d frames but %d were expected", results.frame_count, total_frames)
    else:
        total_frames = results.frame_count

    scene_starts = normalize_scene_starts(results.scene_changes, total_frames)
    final_scenes = split_long_scenes(scene_starts, total_frames, max_frames)
    logger.info("Split %d detected scenes into %d scenes", len(scene_starts), len(final_scenes))

    write_scene_file(output_file, final_scenes)
    _verify_scene_file(output_file, final_scenes)
    return final_scenes
