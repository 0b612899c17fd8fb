"""
Configuration settings for the talk summarizer application.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value) if value else default


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Talk Digest"
    APP_VERSION = "0.1.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = _env_path("DATA_DIR", BASE_DIR / "data")
    AUDIO_DIR = _env_path("AUDIO_DIR", DATA_DIR / "audio")
    TRANSCRIPTS_DIR = _env_path("TRANSCRIPTS_DIR", DATA_DIR / "transcriptions")
    SUMMARIES_DIR = _env_path("SUMMARIES_DIR", DATA_DIR / "summaries")
    CATALOG_FILE = _env_path("CATALOG_FILE", BASE_DIR / "talks.json")

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Chunk-and-reduce summarization
    CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "8000"))
    SUMMARY_MAX_LENGTH = int(os.getenv("SUMMARY_MAX_LENGTH", "500"))
    MAX_REDUCTION_ROUNDS = int(os.getenv("MAX_REDUCTION_ROUNDS", "10"))

    # Text generation backends: "ollama" runs a local model, "chat" goes through langchain
    SUMMARY_BACKEND = os.getenv("SUMMARY_BACKEND", "ollama")
    OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3:8b")
    OLLAMA_TIMEOUT = _env_float("OLLAMA_TIMEOUT")
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")
    SUMMARY_MODEL_PROVIDER = os.getenv("SUMMARY_MODEL_PROVIDER", "groq")

    # Transcription
    DEFAULT_TRANSCRIPTION_MODEL = "whisper-large-v3-turbo"
    TRANSCRIPTION_LANGUAGE = os.getenv("TRANSCRIPTION_LANGUAGE", "en")

    # Audio download retries
    DOWNLOAD_RETRIES = 3
    DOWNLOAD_RETRY_DELAY = 2
    DOWNLOAD_BACKOFF = 2

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.AUDIO_DIR.mkdir(parents=True, exist_ok=True)
        cls.TRANSCRIPTS_DIR.mkdir(parents=True, exist_ok=True)
        cls.SUMMARIES_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GROQ_API_KEY:
            print("WARNING: GROQ_API_KEY environment variable not set.")
            print("Transcription and the chat summary backend need it in .env or the environment.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
