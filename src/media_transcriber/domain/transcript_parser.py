"""Extracts the transcript text from a transcription output document."""

import logging

from pydantic import ValidationError

from media_transcriber.exceptions import EmptyTranscriptError, TranscriptParseError

from .models import TranscriptDocument

logger = logging.getLogger(__name__)


class TranscriptParser:
    """Parses transcription output documents."""

    def parse(self, raw: bytes, object_name: str = "transcript") -> str:
        """
        Returns the text of the first transcript variant.

        Args:
            raw: The JSON document as downloaded from storage.
            object_name: Name of the document, used in error messages.

        Raises:
            TranscriptParseError: If the document is not valid JSON or has the wrong shape.
            EmptyTranscriptError: If the document holds no transcripts.
        """
        try:
            document = TranscriptDocument.model_validate_json(raw)
        except ValidationError as e:
            logger.exception(
                "Transcript document is malformed", extra={"object_name": object_name}
            )
            raise TranscriptParseError(object_name, e) from e

        if not document.results.transcripts:
            raise EmptyTranscriptError(object_name)

        return document.results.transcripts[0].transcript
