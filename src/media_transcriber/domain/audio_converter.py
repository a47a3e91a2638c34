"""Converts video files to MP3 audio."""

import logging

import moviepy

from media_transcriber.exceptions import AudioConversionError

logger = logging.getLogger(__name__)

AUDIO_CODEC = "libmp3lame"


class AudioConverter:
    """Extracts the audio track of a video file."""

    def convert(self, video_file: str, audio_file: str) -> str:
        """
        Writes the audio track of a video file to an MP3 file.

        Args:
            video_file: Path to the source video.
            audio_file: Destination path for the MP3.

        Returns:
            The audio file path.

        Raises:
            AudioConversionError: If the video has no audio or ffmpeg fails.
        """
        try:
            video = moviepy.VideoFileClip(video_file)
            try:
                if video.audio is None:
                    raise ValueError("video has no audio track")
                video.audio.write_audiofile(audio_file, codec=AUDIO_CODEC, logger=None)
            finally:
                video.close()
        except Exception as e:
            logger.exception("Audio conversion failed", extra={"file_name": video_file})
            raise AudioConversionError(video_file, e) from e

        logger.info(
            "Audio converted",
            extra={"video_file": video_file, "audio_file": audio_file},
        )
        return audio_file
