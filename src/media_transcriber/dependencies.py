"""Dependency wiring for the media transcriber."""

import boto3
from minio import Minio

from media_transcriber.config import AppConfig
from media_transcriber.domain import (
    AudioConverter,
    ConsoleReporter,
    JobMonitor,
    TranscriptParser,
)
from media_transcriber.handlers import MediaFileHandler
from media_transcriber.infrastructure import AWSTranscribeService, MinioStorageClient
from media_transcriber.infrastructure.interfaces import (
    StorageClient,
    TranscriptionService,
)


def get_storage(config: AppConfig) -> StorageClient:
    """Returns an S3 storage client for the configured account."""
    client = Minio(
        endpoint=config.storage.endpoint,
        access_key=config.aws.access_key,
        secret_key=config.aws.secret_key,
        region=config.aws.region,
        secure=config.storage.secure,
    )
    return MinioStorageClient(client)


def get_transcription_service(config: AppConfig) -> TranscriptionService:
    """Returns an AWS Transcribe client for the configured account."""
    client = boto3.client(
        "transcribe",
        region_name=config.aws.region,
        aws_access_key_id=config.aws.access_key,
        aws_secret_access_key=config.aws.secret_key,
    )
    return AWSTranscribeService(client)


def get_handler(
    config: AppConfig, reporter: ConsoleReporter | None = None
) -> MediaFileHandler:
    """Returns a fully wired media file handler."""
    reporter = reporter or ConsoleReporter()
    transcription_service = get_transcription_service(config)
    job_monitor = JobMonitor(
        transcription_service,
        reporter,
        poll_interval=config.transcribe.poll_interval,
        seconds_per_percent=config.transcribe.seconds_per_percent,
    )
    return MediaFileHandler(
        storage=get_storage(config),
        transcription_service=transcription_service,
        converter=AudioConverter(),
        parser=TranscriptParser(),
        job_monitor=job_monitor,
        reporter=reporter,
        bucket_name=config.storage.bucket_name,
        language_code=config.transcribe.language_code,
    )
