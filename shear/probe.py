"""Video stream metadata via ffprobe

Responsibilities:
- Run ffprobe (through ffmpeg-python) and cache the parsed result per file
- Extract the frame rate as an exact numerator/denominator pair
- Extract the container-reported frame count
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import ffmpeg

from .exceptions import MetadataError

logger = logging.getLogger(__name__)

@lru_cache(maxsize=32)
def probe_video_stream(path: Path) -> Dict[str, Any]:
    """
    Probe the first video stream of a media file.

    Args:
        path: Path to media file.

    Returns:
        The ffprobe stream dictionary.

    Raises:
        MetadataError: If ffprobe fails or no video stream is present.
    """
    try:
        data = ffmpeg.probe(str(path), select_streams="v:0")
    except ffmpeg.Error as e:
        stderr = e.stderr.decode(errors="replace").strip() if e.stderr else ""
        raise MetadataError(f"Failed to probe {path}: {stderr or e}") from e
    streams = data.get("streams", [])
    if not streams:
        raise MetadataError(f"No video stream found in {path}")
    logger.debug("Probed video stream of %s: %s", path, streams[0].get("codec_name"))
    return streams[0]

def _parse_rate(value: str) -> Tuple[int, int]:
    num, _, den = value.partition("/")
    num, den = int(num), int(den or 1)
    if num <= 0 or den <= 0:
        raise ValueError(f"non-positive frame rate {value}")
    return num, den

def get_frame_rate(path: Path) -> Tuple[int, int]:
    """Get the video frame rate as (numerator, denominator)"""
    stream = probe_video_stream(path)
    for prop in ("r_frame_rate", "avg_frame_rate"):
        value = stream.get(prop)
        if not value:
            continue
        try:
            return _parse_rate(value)
        except ValueError:
            logger.debug("Ignoring unusable %s value: %s", prop, value)
    raise MetadataError(f"No valid frame rate found for {path}", "r_frame_rate")

def get_frame_count(path: Path) -> int:
    """Get the number of frames reported by the container"""
    value = probe_video_stream(path).get("nb_frames")
    if not value or str(value).lower() in ["n/a", "nan"]:
        raise MetadataError("No valid value found for nb_frames", "nb_frames")
    try:
        return int(value)
    except ValueError as e:
        raise MetadataError(f"Could not convert {value} to required type", "nb_frames") from e
