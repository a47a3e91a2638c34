"""S3 storage through the MinIO SDK."""

import logging

from minio import Minio

from media_transcriber.exceptions import StorageDownloadError, StorageUploadError

from .interfaces import StorageClient

logger = logging.getLogger(__name__)


def s3_uri(bucket_name: str, object_name: str) -> str:
    return f"s3://{bucket_name}/{object_name}"


class MinioStorageClient(StorageClient):
    """Moves media and transcripts in and out of an S3 bucket."""

    def __init__(self, client: Minio):
        self._client = client

    def upload_file(
        self, bucket_name: str, object_name: str, file_path: str, content_type: str
    ) -> str:
        # fput_object switches to multipart uploads for large recordings.
        try:
            result = self._client.fput_object(
                bucket_name=bucket_name,
                object_name=object_name,
                file_path=file_path,
                content_type=content_type,
            )
        except Exception as e:
            logger.exception(
                "S3 upload failed",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "file_path": file_path,
                },
            )
            raise StorageUploadError(object_name, e) from e

        uri = s3_uri(bucket_name, object_name)
        logger.info(
            "Media uploaded to S3",
            extra={
                "uri": uri,
                "content_type": content_type,
                "etag": getattr(result, "etag", None),
            },
        )
        return uri

    def download(self, bucket_name: str, object_name: str) -> bytes:
        try:
            response = self._client.get_object(
                bucket_name=bucket_name, object_name=object_name
            )
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
        except Exception as e:
            logger.exception(
                "S3 download failed",
                extra={"uri": s3_uri(bucket_name, object_name)},
            )
            raise StorageDownloadError(object_name, e) from e

        logger.info(
            "Object downloaded from S3",
            extra={"uri": s3_uri(bucket_name, object_name), "size": len(data)},
        )
        return data
