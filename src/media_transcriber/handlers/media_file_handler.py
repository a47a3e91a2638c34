"""Handler for transcribing a local media file."""

import logging
import mimetypes
import os
from collections.abc import Callable
from datetime import datetime

from media_transcriber.domain import (
    AudioConverter,
    ConsoleReporter,
    JobMonitor,
    OutputPaths,
    TranscriptionResult,
    TranscriptParser,
    build_output_paths,
    needs_conversion,
)
from media_transcriber.exceptions import InputFileNotFoundError, TranscriptWriteError
from media_transcriber.infrastructure.interfaces import (
    StorageClient,
    TranscriptionService,
)

logger = logging.getLogger(__name__)


class MediaFileHandler:
    """Orchestrates media-to-transcript operations for a single file."""

    def __init__(
        self,
        storage: StorageClient,
        transcription_service: TranscriptionService,
        converter: AudioConverter,
        parser: TranscriptParser,
        job_monitor: JobMonitor,
        reporter: ConsoleReporter,
        bucket_name: str,
        language_code: str = "en-US",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._storage = storage
        self._transcription_service = transcription_service
        self._converter = converter
        self._parser = parser
        self._job_monitor = job_monitor
        self._reporter = reporter
        self._bucket_name = bucket_name
        self._language_code = language_code
        self._clock = clock

    def process(self, input_file: str) -> TranscriptionResult:
        """
        Transcribes a media file and writes the transcript beside it.

        Args:
            input_file: Path to the local media file.

        Returns:
            TranscriptionResult describing the written files.

        Raises:
            InputFileNotFoundError: If the input is missing or not a regular file.
            AudioConversionError: If video to audio conversion fails.
            StorageUploadError: If the media upload fails.
            TranscriptionJobError: If the job cannot be started or polled.
            TranscriptionJobFailedError: If the service fails the job.
            StorageDownloadError: If the transcript download fails.
            TranscriptParseError: If the transcript document is malformed.
            EmptyTranscriptError: If the document holds no transcripts.
            TranscriptWriteError: If the output files cannot be written.
        """
        if not os.path.isfile(input_file):
            raise InputFileNotFoundError(input_file)

        paths = build_output_paths(input_file, self._clock())
        logger.info(
            "Processing media file",
            extra={"input_file": input_file, "job_name": paths.job_name},
        )

        media_file = input_file
        audio_file = None
        if needs_conversion(input_file):
            self._reporter.step(f"converting {input_file} to audio...")
            audio_file = self._converter.convert(input_file, paths.audio_file)
            media_file = audio_file

        media_uri = self._upload(media_file)

        output_key = f"{paths.job_name}.json"
        self._reporter.step(f"starting transcription job {paths.job_name}...")
        self._transcription_service.start_job(
            job_name=paths.job_name,
            media_uri=media_uri,
            output_bucket=self._bucket_name,
            output_key=output_key,
            language_code=self._language_code,
        )

        self._reporter.step("waiting for transcription to complete...")
        self._job_monitor.wait(paths.job_name)

        self._reporter.step("processing transcript...")
        raw = self._storage.download(self._bucket_name, output_key)
        transcript = self._parser.parse(raw, output_key)

        self._write_outputs(paths, raw, transcript)

        result = TranscriptionResult(
            job_name=paths.job_name,
            transcript_file=paths.transcript_file,
            json_file=paths.json_file,
            audio_file=audio_file,
            character_count=len(transcript),
        )
        logger.info(
            "Media file processed",
            extra={
                "input_file": input_file,
                "transcript_file": result.transcript_file,
                "character_count": result.character_count,
            },
        )
        return result

    def _upload(self, media_file: str) -> str:
        """Uploads the media file under its base name and returns its URI."""
        content_type = mimetypes.guess_type(media_file)[0] or "application/octet-stream"

        self._reporter.step(f"uploading {media_file} to s3...")
        return self._storage.upload_file(
            bucket_name=self._bucket_name,
            object_name=os.path.basename(media_file),
            file_path=media_file,
            content_type=content_type,
        )

    def _write_outputs(self, paths: OutputPaths, raw: bytes, transcript: str) -> None:
        try:
            with open(paths.json_file, "wb") as f:
                f.write(raw)
        except OSError as e:
            raise TranscriptWriteError(paths.json_file, e) from e

        try:
            with open(paths.transcript_file, "w", encoding="utf-8") as f:
                f.write(transcript)
        except OSError as e:
            raise TranscriptWriteError(paths.transcript_file, e) from e
