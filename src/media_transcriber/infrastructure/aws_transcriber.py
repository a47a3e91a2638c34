"""AWS Transcribe implementation of the TranscriptionService interface."""

import logging
from typing import Any

from media_transcriber.domain.models import JobStatus, TranscriptionJob
from media_transcriber.exceptions import TranscriptionJobError

from .interfaces import TranscriptionService

logger = logging.getLogger(__name__)


class AWSTranscribeService(TranscriptionService):
    """Submits and polls batch transcription jobs on AWS Transcribe."""

    def __init__(self, client: Any):
        self._client = client

    def start_job(
        self,
        job_name: str,
        media_uri: str,
        output_bucket: str,
        output_key: str,
        language_code: str,
    ) -> None:
        try:
            self._client.start_transcription_job(
                TranscriptionJobName=job_name,
                Media={"MediaFileUri": media_uri},
                LanguageCode=language_code,
                OutputBucketName=output_bucket,
                OutputKey=output_key,
            )
        except Exception as e:
            logger.exception(
                "Failed to start transcription job",
                extra={"job_name": job_name, "media_uri": media_uri},
            )
            raise TranscriptionJobError(job_name, e) from e

        logger.info(
            "Transcription job started",
            extra={
                "job_name": job_name,
                "media_uri": media_uri,
                "output_key": output_key,
                "language_code": language_code,
            },
        )

    def get_job(self, job_name: str) -> TranscriptionJob:
        try:
            response = self._client.get_transcription_job(TranscriptionJobName=job_name)
            description = response["TranscriptionJob"]
            return TranscriptionJob(
                name=description.get("TranscriptionJobName", job_name),
                status=JobStatus(description["TranscriptionJobStatus"]),
                failure_reason=description.get("FailureReason"),
            )
        except Exception as e:
            logger.exception("Failed to check job status", extra={"job_name": job_name})
            raise TranscriptionJobError(job_name, e) from e
