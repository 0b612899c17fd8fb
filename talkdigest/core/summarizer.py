"""
Module for summarizing transcripts with a chunk-and-reduce loop.

Each chunk of a transcript is summarized on its own, the partial summaries
are concatenated, and the concatenation is chunked and summarized again
until it fits in the target length. A final pass then summarizes the
whole accumulated text once more.
"""

from typing import List, Optional, Sequence

from talkdigest.core.chunker import chunk_text
from talkdigest.core.generators import TextGenerator, create_text_generator
from talkdigest.core.prompts import summary_template
from talkdigest.models.schemas import SummaryConfig, Talk, TalkSummary
from talkdigest.utils.error_handling import handle_generation_error
from talkdigest.utils.helpers import truncate_text
from talkdigest.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, config: Optional[SummaryConfig] = None, generator: Optional[TextGenerator] = None):
        """
        Initialize the summarizer.

        Args:
            config: Chunk size, length bound and backend settings
            generator: Text generator to use (if None, one is built from config)
        """
        self.config = config or SummaryConfig()
        self.generator = generator or create_text_generator(self.config)
        self.last_rounds = 0

    def summarize_chunk(self, chunk: str) -> str:
        """
        Summarize one chunk of text.

        Failures are logged and turned into an empty summary so one bad
        chunk does not stop the rest of the reduction.

        Args:
            chunk: Text to summarize

        Returns:
            The generated summary, or an empty string on failure
        """
        prompt = summary_template.format(text=chunk)
        try:
            summary = self.generator.generate(prompt)
        except Exception as e:
            return handle_generation_error(e, chunk)

        logging.debug(f"Chunk summary: {truncate_text(summary)}")
        return summary

    def reduce(self, chunks: Sequence[str], max_length: Optional[int] = None) -> str:
        """
        Reduce chunks to a single summary no longer than max_length.

        Chunks are summarized in order and the results concatenated. While
        the concatenation is longer than max_length it is re-chunked and
        summarized again. Once it fits, one final summarization of the
        whole concatenation is returned.

        The loop stops early after config.max_rounds rounds, or when a
        round does not shrink the text, and then returns the shortest
        concatenation seen.

        Args:
            chunks: Ordered chunks of the text body
            max_length: Target length (defaults to config.max_length)

        Returns:
            The final summary, possibly empty if every chunk failed
        """
        if max_length is None:
            max_length = self.config.max_length

        best: Optional[str] = None
        current: List[str] = list(chunks)
        self.last_rounds = 0

        while self.last_rounds < self.config.max_rounds:
            self.last_rounds += 1
            accumulated = ""
            for chunk in current:
                accumulated += self.summarize_chunk(chunk)

            logging.info(
                f"Reduction round {self.last_rounds}: {len(current)} chunks -> {len(accumulated)} chars"
            )

            if len(accumulated) <= max_length:
                return self.summarize_chunk(accumulated)

            if best is not None and len(accumulated) >= len(best):
                logging.warning(
                    f"Summary stopped shrinking ({len(best)} -> {len(accumulated)} chars); "
                    "returning best effort result"
                )
                return best

            best = accumulated
            current = chunk_text(accumulated, self.config.chunk_size)

        logging.warning(
            f"Summary still {len(best)} chars after {self.config.max_rounds} rounds; "
            "returning best effort result"
        )
        return best

    def summarize(self, text: str) -> str:
        """
        Chunk a text body and reduce it to a summary.

        Args:
            text: Full text to summarize

        Returns:
            Summarized text
        """
        chunks = chunk_text(text, self.config.chunk_size)
        logging.info(f"Split {len(text)} chars into {len(chunks)} chunks")
        return self.reduce(chunks)

    def create_summary(self, talk: Talk, transcript_text: str, transcript_path: Optional[str] = None) -> TalkSummary:
        """
        Create a full talk summary.

        Args:
            talk: The talk the transcript belongs to
            transcript_text: Full transcript text
            transcript_path: Where the transcript was read from

        Returns:
            TalkSummary object
        """
        summary = self.summarize(transcript_text)

        return TalkSummary(
            talk=talk,
            summary=summary,
            rounds=self.last_rounds,
            transcript_path=transcript_path
        )
