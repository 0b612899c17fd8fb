"""
Configuration for pytest tests.
"""

import os
import pytest
from pathlib import Path
from unittest.mock import MagicMock

# Must be set before talkdigest.config is imported
os.environ.setdefault("GROQ_API_KEY", "test_api_key")
os.environ["ENVIRONMENT"] = "development"
os.environ["SUMMARY_BACKEND"] = "ollama"

from talkdigest.models.schemas import SummaryConfig, Talk


@pytest.fixture
def talk():
    """Fixture to create a Talk object."""
    return Talk(
        title="the-solana-network-state",
        category="fireside",
        participants=["@rajgokal", "@balajis"],
        link="https://youtu.be/WwVv_kWS_B8?si=_dgEw65RBox4rE-j",
    )


@pytest.fixture
def summary_config():
    """Fixture to create a SummaryConfig object."""
    return SummaryConfig(chunk_size=8000, max_length=500, max_rounds=10, backend="ollama")


@pytest.fixture
def mock_generator():
    """Fixture for a text generator whose responses are set per test."""
    generator = MagicMock()
    generator.generate.return_value = "A short summary."
    return generator


@pytest.fixture
def audio_dir(tmp_path) -> Path:
    return tmp_path / "audio"


@pytest.fixture
def transcripts_dir(tmp_path) -> Path:
    return tmp_path / "transcriptions"


@pytest.fixture
def summaries_dir(tmp_path) -> Path:
    return tmp_path / "summaries"
