"""
Command-line interface for shear scene detection
"""
import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import (
    DETECTION_SPEED, DETECT_FLASHES, LOOKAHEAD_DISTANCE, LOG_LEVEL,
    MAX_SCENE_FRAMES, MAX_SCENE_SECS, DetectionOptions, SceneDetectionSpeed,
    SceneLengthLimits
)
from .exceptions import MetadataError, ShearError
from .formatting import ConsoleProgress, print_info, print_success
from .logging import configure_logging
from .pipeline import process_file
from .probe import get_frame_count, get_frame_rate

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="shear",
        description="Scene change detection for chunked video encoding"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="Input video file"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output scene file (one frame number per line)"
    )
    parser.add_argument(
        "--fps-num",
        type=int,
        default=None,
        help="FPS numerator (probed from the input if omitted)"
    )
    parser.add_argument(
        "--fps-den",
        type=int,
        default=None,
        help="FPS denominator (probed from the input if omitted)"
    )
    parser.add_argument(
        "--total-frames",
        type=int,
        default=0,
        help="Total number of frames in the video (default: count while decoding)"
    )
    parser.add_argument(
        "--max-scene-secs",
        type=int,
        default=MAX_SCENE_SECS,
        help="Maximum scene length in seconds (default: %(default)s)"
    )
    parser.add_argument(
        "--max-scene-frames",
        type=int,
        default=MAX_SCENE_FRAMES,
        help="Maximum scene length in frames (default: %(default)s)"
    )
    parser.add_argument(
        "--speed",
        choices=[speed.value for speed in SceneDetectionSpeed],
        default=DETECTION_SPEED,
        help="Scene detection mode (default: %(default)s)"
    )
    parser.add_argument(
        "--no-flash-detection",
        dest="detect_flashes",
        action="store_false",
        default=DETECT_FLASHES,
        help="Keep cuts closer together than the lookahead distance"
    )
    parser.add_argument(
        "--lookahead",
        type=int,
        default=LOOKAHEAD_DISTANCE,
        help="Lookahead distance in frames (default: %(default)s)"
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show progress output"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL,
        help="Set logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        action="store_true",
        help="Also write a timestamped log file to the log directory"
    )
    return parser.parse_args(argv)

def resolve_frame_rate(args) -> tuple:
    """Use the frame rate from the command line, probing the input for anything missing"""
    if args.fps_num is not None and args.fps_den is not None:
        return args.fps_num, args.fps_den
    fps_num, fps_den = get_frame_rate(args.input)
    logging.getLogger("shear").info("Probed frame rate %d/%d from %s", fps_num, fps_den, args.input)
    return (
        args.fps_num if args.fps_num is not None else fps_num,
        args.fps_den if args.fps_den is not None else fps_den,
    )

def _progress_total(args) -> int:
    if args.total_frames > 0:
        return args.total_frames
    try:
        return get_frame_count(args.input)
    except MetadataError as e:
        logging.getLogger("shear").debug("Frame count unavailable for progress: %s", e)
        return 0

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level, file_logging=args.log_file)
    log = logging.getLogger("shear")

    if not args.input.is_file():
        log.error("Input %s does not exist", args.input)
        return 1

    progress = None
    try:
        fps = resolve_frame_rate(args)
        limits = SceneLengthLimits(args.max_scene_secs, args.max_scene_frames)
        options = DetectionOptions(
            analysis_speed=args.speed,
            detect_flashes=args.detect_flashes,
            lookahead_distance=args.lookahead,
        )
        if args.progress:
            print_info(f"Detecting scene changes in {args.input}")
            progress = ConsoleProgress(_progress_total(args))

        scenes = process_file(
            args.input, args.output, fps,
            total_frames=args.total_frames,
            limits=limits,
            options=options,
            progress=progress,
        )
    except KeyboardInterrupt:
        log.warning("Scene detection interrupted by user")
        return 130
    except ShearError as e:
        log.error("%s", e)
        return 1
    finally:
        if progress is not None:
            progress.finish()

    if args.progress:
        print_success(f"Wrote {len(scenes)} scene boundaries to {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
