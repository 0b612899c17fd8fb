"""
Centralized error handling for the application.
"""

from typing import Optional

from talkdigest.utils.logger import logging


class TalkDigestError(Exception):
    """Base class for application errors."""


class InvalidTitleError(TalkDigestError, ValueError):
    """A talk title cannot be used as a file name."""


class CatalogError(TalkDigestError):
    """A playlist entry or catalog file could not be parsed."""


class AudioDownloadError(TalkDigestError):
    """Audio for a talk could not be downloaded."""


class TranscriptionError(TalkDigestError):
    """Audio for a talk could not be transcribed."""


class TranscriptFormatError(TranscriptionError):
    """A transcript file is missing its text."""


class GenerationError(TalkDigestError):
    """The text-generation backend failed to produce output."""

    def __init__(
        self,
        message: str,
        exit_code: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


def handle_generation_error(error: Exception, chunk: str) -> str:
    """
    Log a failed chunk summarization and return the degraded result.

    Args:
        error: The exception raised by the text generator
        chunk: The chunk that was being summarized

    Returns:
        An empty summary so the reduction can continue
    """
    logging.error(f"Error while summarizing chunk ({len(chunk)} chars): {error}")

    if isinstance(error, GenerationError):
        logging.error(f"Failed with code {error.exit_code}")
        if error.stdout:
            logging.error(f"stdout: {error.stdout}")
        if error.stderr:
            logging.error(f"stderr: {error.stderr}")

    return ""
