"""
Data models for the talk summarizer application.
"""
import time
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator, model_validator

from talkdigest.config import config
from talkdigest.utils.helpers import validate_title


class Talk(BaseModel):
    """A talk recording to process; the title is its idempotency key."""
    title: str
    link: str
    category: Optional[str] = None
    participants: List[str] = Field(default_factory=list)

    @field_validator('title')
    def validate_safe_title(cls, v):
        return validate_title(v)


class SummaryConfig(BaseModel):
    """Configuration for chunk-and-reduce summarization."""
    chunk_size: int = config.CHUNK_SIZE
    max_length: int = config.SUMMARY_MAX_LENGTH
    max_rounds: int = Field(default=config.MAX_REDUCTION_ROUNDS, ge=1)
    backend: str = config.SUMMARY_BACKEND
    model: Optional[str] = None
    model_provider: str = config.SUMMARY_MODEL_PROVIDER
    temperature: float = 0.0
    max_tokens: int = 1024
    timeout: Optional[float] = config.OLLAMA_TIMEOUT

    @field_validator('backend')
    def validate_backend(cls, v):
        if v not in ("ollama", "chat"):
            raise ValueError("backend must be 'ollama' or 'chat'")
        return v

    @model_validator(mode="after")
    def default_model_for_backend(self):
        if self.model is None:
            self.model = config.DEFAULT_SUMMARY_MODEL if self.backend == "chat" else config.OLLAMA_MODEL
        return self


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    model: str = config.DEFAULT_TRANSCRIPTION_MODEL
    language: Optional[str] = config.TRANSCRIPTION_LANGUAGE
    prompt: Optional[str] = None
    response_format: str = "verbose_json"
    temperature: float = 0.0


class TranscriptData(BaseModel):
    """Transcript loaded from a transcription artifact."""
    text: str
    segments: List[Dict[str, Any]] = Field(default_factory=list)
    language: Optional[str] = None
    file_path: Optional[str] = None


class TalkSummary(BaseModel):
    """Summary produced for one talk."""
    talk: Talk
    summary: str
    rounds: int = 0
    transcript_path: Optional[str] = None
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))


class SummarizeOptions(BaseModel):
    """Options for summarizing a single text body from the command line."""
    input: str = "hello prompt"
    output: str = "./summary.txt"


class ItemFailure(BaseModel):
    """A talk whose processing failed."""
    title: str
    error: str


class PipelineReport(BaseModel):
    """Outcome of a pipeline run over a list of talks."""
    summaries: List[TalkSummary] = Field(default_factory=list)
    failures: List[ItemFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
