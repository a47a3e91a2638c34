import os
from datetime import datetime

import pytest

from media_transcriber.domain import build_output_paths, needs_conversion

NOW = datetime(2024, 1, 2, 3, 4, 5)


def test_outputs_live_beside_the_input():
    paths = build_output_paths(os.path.join("recordings", "meeting.mp4"), NOW)

    assert paths.base_name == "meeting"
    assert paths.timestamp == "20240102_030405"
    assert paths.audio_file == os.path.join("recordings", "meeting_20240102_030405.mp3")
    assert paths.json_file == os.path.join("recordings", "meeting_20240102_030405.json")
    assert paths.transcript_file == os.path.join(
        "recordings", "meeting_20240102_030405.txt"
    )
    assert paths.job_name == "meeting_20240102_030405"


def test_bare_file_name_stays_in_current_directory():
    paths = build_output_paths("talk.wav", NOW)

    assert paths.transcript_file == "talk_20240102_030405.txt"


def test_job_name_replaces_rejected_characters():
    paths = build_output_paths("team call (final).mp3", NOW)

    assert paths.job_name == "team_call__final__20240102_030405"
    assert paths.transcript_file == "team call (final)_20240102_030405.txt"


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("video.mp4", True),
        ("VIDEO.MP4", True),
        ("audio.mp3", False),
        ("audio.wav", False),
        ("clip.mov", False),
        ("mp4", False),
    ],
)
def test_needs_conversion(file_name, expected):
    assert needs_conversion(file_name) is expected
