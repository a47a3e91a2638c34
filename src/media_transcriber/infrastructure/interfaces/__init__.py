"""Infrastructure interface exports."""

from .storage import StorageClient
from .transcription_service import TranscriptionService

__all__ = ["StorageClient", "TranscriptionService"]
