"""
Audio downloader for talk recordings.
"""

from pathlib import Path
from typing import Optional, Union

from retry import retry
from pytubefix import YouTube
from pytubefix.cli import on_progress

from talkdigest.config import config
from talkdigest.models.schemas import Talk
from talkdigest.utils.error_handling import AudioDownloadError
from talkdigest.utils.helpers import ensure_dir, validate_title
from talkdigest.utils.logger import logging


class AudioDownloader:
    """Class to handle downloading talk audio."""

    def __init__(self, audio_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the downloader.

        Args:
            audio_dir: Directory that holds one <title>.mp3 per talk
        """
        self.audio_dir = Path(audio_dir or config.AUDIO_DIR)

    def audio_path(self, title: str) -> Path:
        """Path of the audio artifact for a talk title."""
        return self.audio_dir / f"{validate_title(title)}.mp3"

    def exists(self, title: str) -> bool:
        return self.audio_path(title).is_file()

    @retry(tries=config.DOWNLOAD_RETRIES,
           delay=config.DOWNLOAD_RETRY_DELAY,
           backoff=config.DOWNLOAD_BACKOFF,
           logger=logging)
    def _get_audio_stream(self, link: str):
        yt = YouTube(link, on_progress_callback=on_progress)
        return yt.streams.filter(only_audio=True).order_by('abr').last()

    @retry(tries=config.DOWNLOAD_RETRIES,
           delay=config.DOWNLOAD_RETRY_DELAY,
           backoff=config.DOWNLOAD_BACKOFF,
           logger=logging)
    def _save(self, audio_stream, output_path: Path) -> str:
        logging.info(f"Downloading audio: {audio_stream.title}")
        return audio_stream.download(output_path=str(output_path.parent), filename=output_path.name)

    def download(self, talk: Talk) -> Path:
        """
        Download the audio of a talk.

        Args:
            talk: Talk with a link to its recording

        Returns:
            Path to the downloaded audio file

        Raises:
            AudioDownloadError: If the audio could not be downloaded
        """
        output_path = self.audio_path(talk.title)
        ensure_dir(str(self.audio_dir))

        try:
            audio_stream = self._get_audio_stream(talk.link)
        except Exception as e:
            logging.error(f"Error fetching streams for {talk.title}: {str(e)}")
            raise AudioDownloadError(f"Could not download audio for {talk.title}: {e}") from e

        # A missing stream is final, no retry
        if audio_stream is None:
            raise AudioDownloadError(f"No audio stream available for {talk.link}")

        try:
            self._save(audio_stream, output_path)
        except Exception as e:
            logging.error(f"Error downloading audio for {talk.title}: {str(e)}")
            raise AudioDownloadError(f"Could not download audio for {talk.title}: {e}") from e

        logging.info(f"Audio saved to: {output_path}")
        return output_path
