"""Infrastructure layer exports."""

from .aws_transcriber import AWSTranscribeService
from .minio_storage import MinioStorageClient

__all__ = ["AWSTranscribeService", "MinioStorageClient"]
