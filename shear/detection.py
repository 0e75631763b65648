"""Scene change detection for chunked video encoding

Responsibilities:
- Map detection options onto a PySceneDetect detector
- Decode the video and collect scene-start frame indices
- Report decoding progress to an optional sink at a fixed frame interval
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from scenedetect import AdaptiveDetector, ContentDetector, FrameTimecode, SceneManager, open_video

from .config import PROGRESS_INTERVAL, DetectionOptions, SceneDetectionSpeed
from .exceptions import DetectionError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

@dataclass
class DetectionResults:
    """Scene-start frames found by the detector and the number of frames decoded."""
    scene_changes: List[int] = field(default_factory=list)
    frame_count: int = 0

def build_detector(options: DetectionOptions):
    """
    Create the PySceneDetect detector for the requested analysis speed.

    Standard mode compares each frame against a rolling window of
    lookahead_distance neighbours; fast mode uses plain content deltas.
    With flash detection on, cuts closer together than the lookahead are
    treated as flashes and suppressed.
    """
    min_scene_len = options.lookahead_distance if options.detect_flashes else 1
    if options.analysis_speed is SceneDetectionSpeed.FAST:
        return ContentDetector(threshold=options.content_threshold, min_scene_len=min_scene_len)
    return AdaptiveDetector(
        adaptive_threshold=options.adaptive_threshold,
        min_scene_len=min_scene_len,
        window_width=options.lookahead_distance,
    )

def _run_with_progress(manager: SceneManager, video, progress: ProgressCallback, interval: int) -> None:
    reported_total = video.duration.frame_num if video.duration is not None else 0
    step = FrameTimecode(interval, fps=video.frame_rate)
    while True:
        position = video.frame_number
        manager.detect_scenes(video=video, duration=step, show_progress=False)
        if video.frame_number == position:
            break
        progress(video.frame_number, reported_total)

def detect_scene_changes(
    input_file: Path,
    options: Optional[DetectionOptions] = None,
    progress: Optional[ProgressCallback] = None,
    progress_interval: int = PROGRESS_INTERVAL
) -> DetectionResults:
    """
    Detect scene changes in a video file.

    Args:
        input_file: Path to the video file.
        options: Detector configuration; defaults come from shear.config.
        progress: Optional sink called as progress(current_frame, reported_total)
            every progress_interval decoded frames. The reported total comes
            from the container and may be wrong.
        progress_interval: Frames between progress reports.

    Returns:
        DetectionResults with ascending scene-start frames.

    Raises:
        DetectionError: If the video cannot be opened or decoded.
    """
    options = options or DetectionOptions.from_config()
    options.validate()
    if progress_interval < 1:
        raise DetectionError(f"Progress interval must be at least 1: {progress_interval}", module="detection")

    logger.info("Detecting scene changes in %s (%s mode, lookahead %d, flash detection %s)",
                input_file, options.analysis_speed.value, options.lookahead_distance,
                "on" if options.detect_flashes else "off")
    try:
        video = open_video(str(input_file))
        manager = SceneManager()
        manager.add_detector(build_detector(options))
        if progress is None:
            manager.detect_scenes(video=video, show_progress=False)
        else:
            _run_with_progress(manager, video, progress, progress_interval)
        scene_list = manager.get_scene_list()
        frame_count = video.frame_number
    except Exception as e:
        raise DetectionError(f"Scene detection failed for {input_file}: {e}", module="detection") from e

    scene_changes = sorted(start.frame_num for start, _end in scene_list)
    logger.info("Scene detection complete, found %d scenes in %d frames", len(scene_changes), frame_count)
    return DetectionResults(scene_changes=scene_changes, frame_count=frame_count)
