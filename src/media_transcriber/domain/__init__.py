"""Domain layer exports."""

from .audio_converter import AudioConverter
from .job_monitor import JobMonitor
from .models import (
    JobStatus,
    OutputPaths,
    TranscriptDocument,
    TranscriptionJob,
    TranscriptionResult,
    TranscriptResults,
    TranscriptVariant,
)
from .output_paths import build_output_paths, needs_conversion
from .progress import ConsoleReporter, estimate_progress
from .transcript_parser import TranscriptParser

__all__ = [
    "AudioConverter",
    "ConsoleReporter",
    "JobMonitor",
    "JobStatus",
    "OutputPaths",
    "TranscriptDocument",
    "TranscriptParser",
    "TranscriptResults",
    "TranscriptVariant",
    "TranscriptionJob",
    "TranscriptionResult",
    "build_output_paths",
    "estimate_progress",
    "needs_conversion",
]
