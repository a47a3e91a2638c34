import io
import json
from datetime import datetime

import pytest

from media_transcriber.domain import (
    ConsoleReporter,
    JobMonitor,
    JobStatus,
    TranscriptionJob,
    TranscriptParser,
)
from media_transcriber.exceptions import StorageDownloadError, StorageUploadError
from media_transcriber.handlers import MediaFileHandler
from media_transcriber.infrastructure.interfaces import (
    StorageClient,
    TranscriptionService,
)


def transcript_document(*texts: str) -> bytes:
    return json.dumps(
        {
            "jobName": "session_20240102_030405",
            "accountId": "123456789012",
            "status": "COMPLETED",
            "results": {
                "transcripts": [{"transcript": text} for text in texts],
                "items": [
                    {
                        "start_time": "0.0",
                        "end_time": "0.4",
                        "alternatives": [{"confidence": "0.99", "content": "Hello"}],
                        "type": "pronunciation",
                    }
                ],
            },
        }
    ).encode("utf-8")


class FakeStorage(StorageClient):
    def __init__(self):
        self.objects: dict[tuple[str, str], bytes] = {}
        self.uploads: list[dict] = []

    def download(self, bucket_name, object_name):
        try:
            return self.objects[(bucket_name, object_name)]
        except KeyError as e:
            raise StorageDownloadError(object_name, e) from e

    def upload_file(self, bucket_name, object_name, file_path, content_type):
        try:
            with open(file_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise StorageUploadError(object_name, e) from e
        self.uploads.append(
            {
                "bucket_name": bucket_name,
                "object_name": object_name,
                "size": len(data),
                "content_type": content_type,
            }
        )
        self.objects[(bucket_name, object_name)] = data
        return f"s3://{bucket_name}/{object_name}"


class FakeTranscriptionService(TranscriptionService):
    def __init__(self, storage: FakeStorage, document: bytes | None = None):
        self.storage = storage
        self.document = document if document is not None else transcript_document("hello world")
        self.statuses = [JobStatus.IN_PROGRESS, JobStatus.COMPLETED]
        self.failure_reason = None
        self.started: list[dict] = []
        self.polls = 0

    def start_job(self, job_name, media_uri, output_bucket, output_key, language_code):
        self.started.append(
            {
                "job_name": job_name,
                "media_uri": media_uri,
                "output_bucket": output_bucket,
                "output_key": output_key,
                "language_code": language_code,
            }
        )
        self._output = (output_bucket, output_key)

    def get_job(self, job_name):
        status = self.statuses[min(self.polls, len(self.statuses) - 1)]
        self.polls += 1
        if status == JobStatus.COMPLETED:
            self.storage.objects[self._output] = self.document
        return TranscriptionJob(
            name=job_name, status=status, failure_reason=self.failure_reason
        )


class FakeConverter:
    def __init__(self, events: list):
        self.events = events
        self.calls: list[tuple[str, str]] = []

    def convert(self, video_file, audio_file):
        self.calls.append((video_file, audio_file))
        self.events.append("convert")
        with open(audio_file, "wb") as f:
            f.write(b"ID3 fake mp3")
        return audio_file


class RecordingStorage(FakeStorage):
    def __init__(self, events: list):
        super().__init__()
        self.events = events

    def upload_file(self, bucket_name, object_name, file_path, content_type):
        self.events.append("upload")
        return super().upload_file(bucket_name, object_name, file_path, content_type)


@pytest.fixture
def events():
    return []


@pytest.fixture
def storage(events):
    return RecordingStorage(events)


@pytest.fixture
def transcription_service(storage):
    return FakeTranscriptionService(storage)


@pytest.fixture
def converter(events):
    return FakeConverter(events)


@pytest.fixture
def console():
    return io.StringIO()


@pytest.fixture
def reporter(console):
    return ConsoleReporter(console)


@pytest.fixture
def handler(storage, transcription_service, converter, reporter):
    monitor = JobMonitor(transcription_service, reporter, sleep=lambda _: None)
    return MediaFileHandler(
        storage=storage,
        transcription_service=transcription_service,
        converter=converter,
        parser=TranscriptParser(),
        job_monitor=monitor,
        reporter=reporter,
        bucket_name="vault",
        clock=lambda: datetime(2024, 1, 2, 3, 4, 5),
    )
