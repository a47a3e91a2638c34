"""
Media Transcriber.

Command-line entry point. Transcribes a single local media file:
- Converts .mp4 video to MP3 audio.
- Uploads the audio to S3.
- Runs an AWS Transcribe job and waits for it.
- Saves the transcript JSON and the plain-text transcript beside the input.
"""

import argparse
import logging
import os
import sys

from media_transcriber.config import load_config
from media_transcriber.dependencies import get_handler
from media_transcriber.domain import ConsoleReporter
from media_transcriber.exceptions import InputFileNotFoundError, MediaTranscriberError
from media_transcriber.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-transcriber",
        description="Transcribe a media file with AWS Transcribe",
    )
    parser.add_argument("input_file", help="Audio or .mp4 video file to transcribe")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Runs the transcriber and returns the process exit code."""
    args = build_parser().parse_args(argv)
    reporter = ConsoleReporter()
    setup_logging()

    try:
        if not os.path.isfile(args.input_file):
            raise InputFileNotFoundError(args.input_file)

        config = load_config()
        setup_logging(config.log_level)
        result = get_handler(config, reporter).process(args.input_file)
    except MediaTranscriberError as e:
        logger.error("Transcription run failed", extra={"error": str(e)})
        reporter.step(f"error: {e}")
        return 1

    reporter.step(
        "transcription completed successfully. "
        f"output saved to {result.transcript_file}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
