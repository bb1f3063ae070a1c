"""Tests for the simulated compliance checks and edit planning."""

import asyncio

import pytest

from videogate.models.requests import VideoEditOptions
from videogate.services.video_processor import (
    VideoMetadata,
    evaluate_compliance,
    parse_resolution,
    plan_edit_operations,
    process_video,
)


def metadata(**overrides):
    values = dict(resolution="1080x1920", frame_rate=30, duration=120, file_size=50 * 1024 * 1024)
    values.update(overrides)
    return VideoMetadata(**values)


class TestCompliance:
    """Test the YouTube compliance rules."""

    def test_within_limits(self):
        assert evaluate_compliance(metadata()) == {"compliant": True, "issues": [], "recommendations": []}

    def test_resolution_too_high(self):
        result = evaluate_compliance(metadata(resolution="3840x2160"))

        assert result["compliant"] is False
        assert result["issues"] == ["Resolution too high: 3840x2160 (max 1080p)"]

    def test_high_frame_rate_is_only_a_recommendation(self):
        result = evaluate_compliance(metadata(frame_rate=48))

        assert result["compliant"] is True
        assert result["recommendations"] == ["Consider reducing frame rate to 30fps for better compatibility"]

    def test_frame_rate_above_limit(self):
        result = evaluate_compliance(metadata(frame_rate=120))

        assert result["issues"] == ["Frame rate too high: 120fps (max 60fps)"]

    def test_too_long(self):
        result = evaluate_compliance(metadata(duration=16 * 60 + 5))

        assert result["issues"] == ["Video too long: 16m5s (max 15 minutes for Shorts)"]

    def test_file_too_large_and_copyright(self):
        result = evaluate_compliance(metadata(file_size=130 * 1024 ** 3, has_copyright_issues=True))

        assert result["issues"] == [
            "File size too large: 130.00GB (max 128GB)",
            "Potential copyright issues detected",
        ]
        assert len(result["recommendations"]) == 2

    def test_parse_resolution(self):
        assert parse_resolution("1920x1080") == (1920, 1080)
        with pytest.raises(ValueError):
            parse_resolution("1080p")


class TestEditing:
    """Test edit planning and the simulated processing call."""

    def test_no_options_means_no_operations(self):
        assert plan_edit_operations(VideoEditOptions()) == []

    def test_operations_follow_options(self):
        options = VideoEditOptions(
            durationLimit=30,
            targetFrameRate=24,
            watermarkPath="logo.png",
            addSubtitles=True,
        )

        assert plan_edit_operations(options) == [
            "trim to 30s",
            "set frame rate to 24fps",
            "add watermark logo.png at bottom-right",
            "add subtitles",
        ]

    def test_process_video_returns_operations(self):
        options = VideoEditOptions(removeAudio=True)

        operations = asyncio.run(process_video("in.mp4", "out.mp4", options, delay_seconds=0))

        assert operations == ["remove audio"]
