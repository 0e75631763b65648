"""Scene splitting for chunked encoding

Responsibilities:
- Derive the maximum scene length in frames from the configured limits
- Normalize detected boundaries into ascending scene starts beginning at 0
- Split scenes that exceed the maximum length into near-equal chunks
"""

import logging
import math
from typing import Iterable, List, Sequence

from .exceptions import ConfigurationError, InvalidInputError

logger = logging.getLogger(__name__)

def compute_max_scene_frames(fps_num: int, fps_den: int,
                             max_scene_secs: int, max_scene_frames: int) -> int:
    """
    Maximum scene length: max_scene_secs or max_scene_frames, whichever is smaller.

    Args:
        fps_num: Frame rate numerator.
        fps_den: Frame rate denominator.
        max_scene_secs: Limit in seconds, converted with the effective frame rate.
        max_scene_frames: Absolute limit in frames.

    Returns:
        The scene length limit in frames.
    """
    if fps_num <= 0 or fps_den <= 0:
        raise ConfigurationError(f"Invalid frame rate {fps_num}/{fps_den}", module="splitting")
    if max_scene_secs <= 0 or max_scene_frames <= 0:
        raise ConfigurationError(
            f"Scene length limits must be positive (secs={max_scene_secs}, frames={max_scene_frames})",
            module="splitting"
        )
    fps = fps_num / fps_den
    return min(math.ceil(fps * max_scene_secs), max_scene_frames)

def normalize_scene_starts(candidates: Iterable[int], total_frames: int = 0) -> List[int]:
    """
    Turn detector output into a strictly increasing list of scene starts.

    Negative indices are dropped, as are indices at or past total_frames when
    it is known. Frame 0 always starts the first scene.
    """
    starts = {int(frame) for frame in candidates if frame >= 0}
    if total_frames > 0:
        starts = {frame for frame in starts if frame < total_frames}
    starts.add(0)
    return sorted(starts)

def split_long_scenes(scene_starts: Sequence[int], total_frames: int, max_frames: int) -> List[int]:
    """
    Split long scenes into smaller chunks at regular intervals.

    A scene longer than max_frames is split into ceil(len / max_frames)
    chunks. Every chunk but the last is exactly the same length; the last
    one takes the remainder, which can leave it a few frames over the
    limit. Original boundaries are never moved or removed.

    Args:
        scene_starts: Ascending scene start frames. Frame 0 is not added here.
        total_frames: End of the final scene (exclusive).
        max_frames: Longest allowed scene, in frames.

    Returns:
        Sorted, deduplicated scene starts with split points added.

    Raises:
        InvalidInputError: If max_frames is not positive.
    """
    if max_frames <= 0:
        raise InvalidInputError(f"max_frames must be positive, got {max_frames}", module="splitting")

    result = []
    for i, start in enumerate(scene_starts):
        end = scene_starts[i + 1] if i + 1 < len(scene_starts) else total_frames

        result.append(start)

        scene_len = max(end - start, 0)
        if scene_len > max_frames:
            num_chunks = -(-scene_len // max_frames)
            chunk_size = scene_len // num_chunks

            for j in range(1, num_chunks):
                split = start + j * chunk_size
                if split < end:
                    result.append(split)
            logger.debug("Split scene %d-%d (%d frames) into %d chunks of %d",
                         start, end, scene_len, num_chunks, chunk_size)

    return sorted(set(result))
