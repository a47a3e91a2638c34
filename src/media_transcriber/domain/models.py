"""Domain models for the media transcriber."""

from enum import Enum

from pydantic import BaseModel


class TranscriptVariant(BaseModel, frozen=True):
    """A single transcript hypothesis."""

    transcript: str


class TranscriptResults(BaseModel, frozen=True):
    """The results section of a transcription output document."""

    transcripts: list[TranscriptVariant]


class TranscriptDocument(BaseModel, frozen=True):
    """
    Transcription output document as written by the managed service.

    Only the transcript variants are modelled; items, timings, confidences
    and speaker labels are ignored.
    """

    results: TranscriptResults


class JobStatus(str, Enum):
    """Remote transcription job states."""

    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class TranscriptionJob(BaseModel, frozen=True):
    """Snapshot of a remote transcription job."""

    name: str
    status: JobStatus
    failure_reason: str | None = None


class OutputPaths(BaseModel, frozen=True):
    """Local artefacts and job name derived for one run."""

    base_name: str
    timestamp: str
    audio_file: str
    json_file: str
    transcript_file: str
    job_name: str


class TranscriptionResult(BaseModel, frozen=True):
    """Result of a successful transcription run."""

    job_name: str
    transcript_file: str
    json_file: str
    audio_file: str | None = None
    character_count: int
