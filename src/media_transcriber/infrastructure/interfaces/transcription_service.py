"""Abstract interface for managed transcription services."""

from abc import ABC, abstractmethod

from media_transcriber.domain.models import TranscriptionJob


class TranscriptionService(ABC):
    """Abstract base class for asynchronous speech-to-text backends."""

    @abstractmethod
    def start_job(
        self,
        job_name: str,
        media_uri: str,
        output_bucket: str,
        output_key: str,
        language_code: str,
    ) -> None:
        """
        Submits a transcription job for media already in object storage.

        Args:
            job_name: Unique name of the job.
            media_uri: Location of the media, e.g. s3://bucket/key.
            output_bucket: Bucket the service writes the transcript to.
            output_key: Key of the transcript document in the output bucket.
            language_code: Spoken language, e.g. en-US.

        Raises:
            TranscriptionJobError: If the job cannot be submitted.
        """

    @abstractmethod
    def get_job(self, job_name: str) -> TranscriptionJob:
        """
        Fetches the current state of a job.

        Raises:
            TranscriptionJobError: If the job cannot be described.
        """
