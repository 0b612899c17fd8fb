"""
Module for transcribing audio files using Groq's API.
"""

import os
import json
from pathlib import Path
from typing import Optional, Union

from groq import Groq

from talkdigest.config import config
from talkdigest.models.schemas import TranscriptionConfig, TranscriptData
from talkdigest.utils.error_handling import TranscriptionError, TranscriptFormatError
from talkdigest.utils.helpers import ensure_dir, load_json, validate_title
from talkdigest.utils.logger import logging


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(
        self,
        transcribe_config: Optional[TranscriptionConfig] = None,
        transcripts_dir: Optional[Union[str, Path]] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize the transcriber with API key.

        Args:
            transcribe_config: Model and request settings for transcription
            transcripts_dir: Directory that holds one <title>.json per talk
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.transcribe_config = transcribe_config or TranscriptionConfig()
        self.transcripts_dir = Path(transcripts_dir or config.TRANSCRIPTS_DIR)
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        self._client: Optional[Groq] = None

    @property
    def client(self) -> Groq:
        # Created on first use so existing transcripts can be read without a key
        if self._client is None:
            if not self.api_key:
                raise ValueError(
                    "Groq API key is required. Set it in .env file or pass directly."
                )
            self._client = Groq(api_key=self.api_key)
        return self._client

    def transcript_path(self, title: str) -> Path:
        """Path of the transcript artifact for a talk title."""
        return self.transcripts_dir / f"{validate_title(title)}.json"

    def exists(self, title: str) -> bool:
        return self.transcript_path(title).is_file()

    def transcribe(self, audio_path: Union[str, Path], title: str) -> Path:
        """
        Transcribe an audio file and save the transcript as JSON.

        Args:
            audio_path: Path to the audio file
            title: Talk title the transcript is stored under

        Returns:
            Path to the transcript file

        Raises:
            FileNotFoundError: If the audio file does not exist
            TranscriptionError: If the transcription request fails
        """
        audio_file_path = Path(audio_path)
        if not audio_file_path.is_file():
            raise FileNotFoundError(f"Audio file not found at {audio_file_path}")

        transcript_path = self.transcript_path(title)
        ensure_dir(str(self.transcripts_dir))

        logging.info(f"Transcribing audio file: {audio_file_path}")

        try:
            with open(audio_file_path, "rb") as audio_file:
                transcription = self.client.audio.transcriptions.create(
                    file=(audio_file_path.name, audio_file.read()),
                    model=self.transcribe_config.model,
                    language=self.transcribe_config.language,
                    prompt=self.transcribe_config.prompt,
                    response_format=self.transcribe_config.response_format,
                    temperature=self.transcribe_config.temperature,
                )
        except Exception as e:
            logging.error(f"Error transcribing {audio_file_path}: {str(e)}")
            raise TranscriptionError(f"Could not transcribe {audio_file_path}: {e}") from e

        # Save the transcription to a JSON file
        logging.info(f"Saving transcription to: {transcript_path}")

        with open(transcript_path, "w", encoding="utf-8") as f:
            if hasattr(transcription, "model_dump_json"):
                f.write(transcription.model_dump_json(indent=4))
            else:
                json.dump(transcription, f, indent=2, default=str)

        logging.info("Transcription complete.")
        return transcript_path

    def load_transcript(self, transcript_path: Union[str, Path]) -> TranscriptData:
        """
        Load a transcript file.

        Args:
            transcript_path: Path to a transcript JSON file

        Returns:
            Transcript text with any segments and language found in the file

        Raises:
            FileNotFoundError: If the transcript file does not exist
            TranscriptFormatError: If the file has no text field
        """
        logging.debug(f"Loading transcript from: {transcript_path}")
        if not os.path.isfile(transcript_path):
            raise FileNotFoundError(f"Transcript file not found at {transcript_path}")

        data = load_json(str(transcript_path))
        if not isinstance(data, dict) or not isinstance(data.get("text"), str):
            raise TranscriptFormatError(f"Transcript at {transcript_path} has no text field")

        return TranscriptData(
            text=data["text"],
            segments=data.get("segments") or [],
            language=data.get("language"),
            file_path=str(transcript_path),
        )
