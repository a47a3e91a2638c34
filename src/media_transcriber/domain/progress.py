"""Console progress reporting for the transcription run."""

import sys
from typing import TextIO

from tqdm import tqdm

BAR_FORMAT = "{desc} [{bar:50}] {n}%"


def estimate_progress(elapsed_seconds: float, seconds_per_percent: float = 2.0) -> int:
    """
    Estimates job progress from elapsed wall-clock time.

    The transcription service reports no progress, so this is a rough guess
    capped at 100.
    """
    progress = int(elapsed_seconds / seconds_per_percent)
    return max(0, min(progress, 100))


class ConsoleReporter:
    """Prints step messages and progress bars to a stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdout

    def step(self, message: str) -> None:
        self._stream.write(f"{message}\n")
        self._stream.flush()

    def progress_bar(self, message: str) -> tqdm:
        """Returns a percentage bar whose position is set by the caller."""
        return tqdm(
            total=100,
            desc=message,
            bar_format=BAR_FORMAT,
            ascii=" =",
            file=self._stream,
            leave=True,
        )
