"""
Text-generation backends used to summarize chunks.
"""

import os
import subprocess
from typing import Optional, Protocol

from langchain.chat_models import init_chat_model
from langchain_core.prompts import ChatPromptTemplate

from talkdigest.models.schemas import SummaryConfig
from talkdigest.utils.error_handling import GenerationError
from talkdigest.utils.logger import logging


def _as_text(output) -> str:
    # TimeoutExpired carries bytes even when the process ran in text mode
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output or ""


class TextGenerator(Protocol):
    """Anything that turns a prompt into generated text."""

    def generate(self, prompt: str) -> str:
        ...


class OllamaGenerator:
    """Runs a local model through the ollama command line."""

    def __init__(self, model: str, timeout: Optional[float] = None, executable: str = "ollama"):
        """
        Initialize the generator.

        Args:
            model: Ollama model tag, e.g. llama3:8b
            timeout: Seconds to wait for the model before giving up (None waits forever)
            executable: Name or path of the ollama binary
        """
        self.model = model
        self.timeout = timeout
        self.executable = executable

    def generate(self, prompt: str) -> str:
        """
        Run the model on a prompt.

        Raises:
            GenerationError: If the process cannot start, times out or exits non-zero
        """
        cmd = [self.executable, "run", self.model, prompt]
        logging.debug(f"Running {self.executable} run {self.model} ({len(prompt)} char prompt)")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise GenerationError(
                f"{self.executable} timed out after {self.timeout}s",
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
            ) from e
        except OSError as e:
            raise GenerationError(f"Could not run {self.executable}: {e}") from e

        if result.returncode != 0:
            raise GenerationError(
                f"{self.executable} exited with code {result.returncode}",
                exit_code=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )

        return result.stdout


class ChatModelGenerator:
    """Sends prompts to a hosted chat model through langchain."""

    def __init__(self, summary_config: SummaryConfig, api_key: Optional[str] = None):
        """
        Initialize the chat model.

        Args:
            summary_config: Model name, provider and sampling settings
            api_key: Groq API key (if None, will try to get from environment)
        """
        if summary_config.model_provider == "groq":
            api_key = api_key or os.getenv("GROQ_API_KEY")
            if not api_key:
                raise ValueError("Groq API key is required. Set it in .env file or pass directly.")
            os.environ["GROQ_API_KEY"] = api_key

        self.llm = init_chat_model(
            model=summary_config.model,
            model_provider=summary_config.model_provider,
            temperature=summary_config.temperature,
            max_tokens=summary_config.max_tokens
        )
        self.prompt_template = ChatPromptTemplate.from_messages([("human", "{prompt}")])

    def generate(self, prompt: str) -> str:
        try:
            response = self.llm.invoke(self.prompt_template.format_messages(prompt=prompt))
        except Exception as e:
            raise GenerationError(f"Chat model request failed: {e}") from e
        return response.content


def create_text_generator(summary_config: SummaryConfig) -> TextGenerator:
    """Build the generator selected by summary_config.backend."""
    if summary_config.backend == "chat":
        return ChatModelGenerator(summary_config)
    return OllamaGenerator(summary_config.model, timeout=summary_config.timeout)
