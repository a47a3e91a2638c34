"""Abstract interface for the object store that hands media to the transcription service."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for S3-style object storage."""

    @abstractmethod
    def upload_file(
        self, bucket_name: str, object_name: str, file_path: str, content_type: str
    ) -> str:
        """
        Uploads a local file and returns its storage URI (s3://bucket/key).

        Raises:
            StorageUploadError: If the file cannot be read or the upload fails.
        """

    @abstractmethod
    def download(self, bucket_name: str, object_name: str) -> bytes:
        """
        Downloads an object, e.g. a transcript written by the transcription service.

        Raises:
            StorageDownloadError: If the download fails.
        """
