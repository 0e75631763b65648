"""Scene list persistence: one frame index per line"""

import logging
from pathlib import Path
from typing import Iterable, List

from .exceptions import InvalidInputError, OutputError

logger = logging.getLogger(__name__)

def write_scene_file(path: Path, frames: Iterable[int]) -> int:
    """
    Write scene start frames to a file, one per line.

    Args:
        path: Destination file; missing parent directories are created.
        frames: Frame indices, already in ascending order.

    Returns:
        Number of frames written.

    Raises:
        OutputError: If the file cannot be created or written.
    """
    path = Path(path)
    count = 0
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as f:
            for frame in frames:
                f.write(f"{frame}\n")
                count += 1
    except OSError as e:
        raise OutputError(f"Failed to write scene file {path}: {e}", module="scene_file") from e
    logger.info("Wrote %d scene boundaries to %s", count, path)
    return count

def read_scene_file(path: Path) -> List[int]:
    """Read scene start frames written by write_scene_file"""
    path = Path(path)
    frames = []
    with path.open() as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                frames.append(int(line))
            except ValueError:
                raise InvalidInputError(
                    f"{path}:{lineno}: expected a frame number, got {line!r}",
                    module="scene_file"
                ) from None
    return frames
