"""Derives output file names and the job name for a media file."""

import os
import re
from datetime import datetime

from .models import OutputPaths

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
CONVERTIBLE_EXTENSIONS = frozenset({".mp4"})

_JOB_NAME_INVALID = re.compile(r"[^0-9A-Za-z._-]")


def needs_conversion(input_file: str) -> bool:
    """Returns True when the file must be converted to audio before upload."""
    return os.path.splitext(input_file)[1].lower() in CONVERTIBLE_EXTENSIONS


def sanitize_job_name(name: str) -> str:
    """Replaces characters the transcription service rejects in job names."""
    return _JOB_NAME_INVALID.sub("_", name)


def build_output_paths(input_file: str, now: datetime) -> OutputPaths:
    """
    Builds the per-run output names beside the input file.

    Args:
        input_file: Path to the media file being transcribed.
        now: Run start time, used to make the names unique.

    Returns:
        OutputPaths for the converted audio, transcript JSON and text files.
    """
    input_dir = os.path.dirname(input_file)
    base_name = os.path.splitext(os.path.basename(input_file))[0]
    timestamp = now.strftime(TIMESTAMP_FORMAT)
    stem = f"{base_name}_{timestamp}"

    return OutputPaths(
        base_name=base_name,
        timestamp=timestamp,
        audio_file=os.path.join(input_dir, f"{stem}.mp3"),
        json_file=os.path.join(input_dir, f"{stem}.json"),
        transcript_file=os.path.join(input_dir, f"{stem}.txt"),
        job_name=sanitize_job_name(stem),
    )
