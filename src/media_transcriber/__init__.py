"""Transcribe local media files with AWS Transcribe."""

__version__ = "0.1.0"
