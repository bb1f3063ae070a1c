"""Simulated video editing and YouTube compliance checks."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from videogate.models.requests import VideoEditOptions

logger = logging.getLogger(__name__)

MAX_HEIGHT = 1080
MAX_FRAME_RATE = 60
RECOMMENDED_FRAME_RATE = 30
MAX_DURATION_SECONDS = 15 * 60
MAX_FILE_SIZE_BYTES = 128 * 1024 ** 3  # 128 GiB


@dataclass
class VideoMetadata:
    """Properties of a video relevant to compliance."""

    resolution: str  # WIDTHxHEIGHT
    frame_rate: float
    duration: int  # seconds
    file_size: int  # bytes
    has_copyright_issues: bool = False


# Stand-in for real media analysis
MOCK_METADATA = VideoMetadata(
    resolution="1080x1920",
    frame_rate=30,
    duration=120,
    file_size=50 * 1024 * 1024,
)


def parse_resolution(resolution: str) -> Tuple[int, int]:
    """Parse a WIDTHxHEIGHT string into integers."""
    width, _, height = resolution.lower().partition("x")
    try:
        return int(width), int(height)
    except ValueError:
        raise ValueError(f"Invalid resolution: {resolution!r}") from None


def evaluate_compliance(metadata: VideoMetadata) -> Dict[str, object]:
    """Check video metadata against YouTube upload limits."""
    issues: List[str] = []
    recommendations: List[str] = []

    _, height = parse_resolution(metadata.resolution)
    if height > MAX_HEIGHT:
        issues.append(f"Resolution too high: {metadata.resolution} (max 1080p)")
        recommendations.append("Resize video to 1080p or lower")

    if metadata.frame_rate > MAX_FRAME_RATE:
        issues.append(f"Frame rate too high: {metadata.frame_rate:g}fps (max 60fps)")
        recommendations.append("Reduce frame rate to 60fps or lower")
    elif metadata.frame_rate > RECOMMENDED_FRAME_RATE:
        recommendations.append("Consider reducing frame rate to 30fps for better compatibility")

    if metadata.duration > MAX_DURATION_SECONDS:
        minutes, seconds = divmod(metadata.duration, 60)
        issues.append(f"Video too long: {minutes}m{seconds}s (max 15 minutes for Shorts)")
        recommendations.append("Trim video to under 15 minutes")

    if metadata.file_size > MAX_FILE_SIZE_BYTES:
        size_gb = metadata.file_size / 1024 ** 3
        issues.append(f"File size too large: {size_gb:.2f}GB (max 128GB)")
        recommendations.append("Compress video to reduce file size")

    if metadata.has_copyright_issues:
        issues.append("Potential copyright issues detected")
        recommendations.append("Review content for copyright compliance")

    return {
        "compliant": not issues,
        "issues": issues,
        "recommendations": recommendations,
    }


def check_youtube_compliance(video_path: str) -> Dict[str, object]:
    """Run the compliance rules for a video (analysis is simulated)."""
    logger.info(f"Checking YouTube compliance for {video_path}")
    return evaluate_compliance(MOCK_METADATA)


def plan_edit_operations(options: VideoEditOptions) -> List[str]:
    """List the edit steps requested by the options, in application order."""
    operations = []
    if options.duration_limit:
        operations.append(f"trim to {options.duration_limit}s")
    if options.remove_audio:
        operations.append("remove audio")
    if options.target_resolution:
        operations.append(f"resize to {options.target_resolution}")
    if options.target_frame_rate:
        operations.append(f"set frame rate to {options.target_frame_rate}fps")
    if options.watermark_path:
        operations.append(f"add watermark {options.watermark_path} at {options.watermark_position}")
    if options.add_subtitles:
        operations.append("add subtitles")
    return operations


async def process_video(
    input_path: str,
    output_path: str,
    options: VideoEditOptions,
    delay_seconds: float = 2.0,
) -> List[str]:
    """
    Simulate editing a video.

    No media is read or written; the call waits `delay_seconds` and
    returns the planned operations.
    """
    operations = plan_edit_operations(options)
    logger.info(f"Processing video from {input_path} to {output_path}")
    logger.info(f"Operations: {', '.join(operations) or 'none'}")

    await asyncio.sleep(delay_seconds)

    logger.info(f"Simulated processing of {input_path} finished")
    return operations
