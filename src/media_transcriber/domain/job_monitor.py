"""Waits for a remote transcription job to finish."""

import logging
import time
from collections.abc import Callable

from media_transcriber.exceptions import TranscriptionJobFailedError
from media_transcriber.infrastructure.interfaces import TranscriptionService

from .models import JobStatus, TranscriptionJob
from .progress import ConsoleReporter, estimate_progress

logger = logging.getLogger(__name__)

PROGRESS_MESSAGE = "Transcribing..."


class JobMonitor:
    """Polls a transcription job at a fixed interval until it is terminal."""

    def __init__(
        self,
        service: TranscriptionService,
        reporter: ConsoleReporter,
        poll_interval: float = 1.0,
        seconds_per_percent: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._service = service
        self._reporter = reporter
        self._poll_interval = poll_interval
        self._seconds_per_percent = seconds_per_percent
        self._sleep = sleep
        self._clock = clock

    def wait(self, job_name: str) -> TranscriptionJob:
        """
        Blocks until the job completes.

        Args:
            job_name: Name of the submitted transcription job.

        Returns:
            The completed job.

        Raises:
            TranscriptionJobError: If polling the job fails.
            TranscriptionJobFailedError: If the service marks the job as failed.
        """
        started = self._clock()
        polls = 0

        with self._reporter.progress_bar(PROGRESS_MESSAGE) as bar:
            while True:
                job = self._service.get_job(job_name)
                polls += 1

                bar.n = estimate_progress(
                    self._clock() - started, self._seconds_per_percent
                )
                bar.refresh()

                if job.status in (JobStatus.COMPLETED, JobStatus.FAILED):
                    break

                self._sleep(self._poll_interval)

        if job.status == JobStatus.FAILED:
            self._reporter.step("Transcription job failed")
            logger.error(
                "Transcription job failed",
                extra={"job_name": job_name, "failure_reason": job.failure_reason},
            )
            raise TranscriptionJobFailedError(job_name, job.failure_reason)

        self._reporter.step("Transcription completed!")
        logger.info(
            "Transcription job completed",
            extra={"job_name": job_name, "polls": polls},
        )
        return job
