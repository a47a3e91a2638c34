"""Handler exports."""

from .media_file_handler import MediaFileHandler

__all__ = ["MediaFileHandler"]
