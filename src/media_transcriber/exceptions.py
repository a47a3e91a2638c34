"""Custom exceptions for the media transcriber."""


class MediaTranscriberError(Exception):
    """Base class for every failure that ends a transcription run."""


class InputFileNotFoundError(MediaTranscriberError):
    """Raised when the input media file does not exist."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Input file '{file_name}' does not exist or is not a file")


class ConfigurationError(MediaTranscriberError):
    """Raised when the settings file or environment is unusable."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Invalid configuration: {reason}")


class AudioConversionError(MediaTranscriberError):
    """Raised when converting a video file to audio fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to convert '{file_name}' to audio")


class StorageDownloadError(MediaTranscriberError):
    """Raised when downloading a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")


class StorageUploadError(MediaTranscriberError):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class TranscriptionJobError(MediaTranscriberError):
    """Raised when submitting or polling a transcription job fails."""

    def __init__(self, job_name: str, cause: Exception | None = None):
        self.job_name = job_name
        self.cause = cause
        super().__init__(f"Failed to submit or poll transcription job '{job_name}'")


class TranscriptionJobFailedError(MediaTranscriberError):
    """Raised when the transcription service marks a job as failed."""

    def __init__(self, job_name: str, failure_reason: str | None = None):
        self.job_name = job_name
        self.failure_reason = failure_reason
        message = f"Transcription job '{job_name}' failed"
        if failure_reason:
            message = f"{message}: {failure_reason}"
        super().__init__(message)


class TranscriptParseError(MediaTranscriberError):
    """Raised when the transcript document cannot be parsed."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to parse transcript '{object_name}'")


class EmptyTranscriptError(MediaTranscriberError):
    """Raised when the transcript document holds no transcripts."""

    def __init__(self, object_name: str):
        self.object_name = object_name
        super().__init__(f"No transcripts found in '{object_name}'")


class TranscriptWriteError(MediaTranscriberError):
    """Raised when writing a local output file fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to write '{file_name}'")
