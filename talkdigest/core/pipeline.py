"""
Pipeline that turns a list of talks into summaries.

For every talk the audio and the transcript are produced only when their
files are missing, so reruns pick up where a previous run stopped.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from talkdigest.config import config
from talkdigest.core.audio_downloader import AudioDownloader
from talkdigest.core.summarizer import TranscriptSummarizer
from talkdigest.core.transcriber import AudioTranscriber
from talkdigest.models.schemas import ItemFailure, PipelineReport, Talk, TalkSummary
from talkdigest.utils.helpers import ensure_dir, save_json
from talkdigest.utils.logger import logging


def save_summary(
    summary: TalkSummary,
    output_file: Optional[Union[str, Path]] = None,
    output_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Save the summary to a JSON file."""
    if output_file is None:
        output_dir = Path(output_dir or config.SUMMARIES_DIR)
        ensure_dir(str(output_dir))
        output_file = output_dir / f"{summary.talk.title}_summary.json"
    else:
        output_file = Path(output_file)

    save_json(summary.model_dump(), str(output_file))

    logging.info(f"Summary saved to: {output_file}")
    return output_file


class TalkPipeline:
    """Downloads, transcribes and summarizes talks one at a time."""

    def __init__(
        self,
        downloader: AudioDownloader,
        transcriber: AudioTranscriber,
        summarizer: TranscriptSummarizer,
        save_summaries: bool = True,
        summaries_dir: Optional[Union[str, Path]] = None,
    ):
        self.downloader = downloader
        self.transcriber = transcriber
        self.summarizer = summarizer
        self.save_summaries = save_summaries
        self.summaries_dir = summaries_dir

    def process(self, talk: Talk) -> TalkSummary:
        """
        Produce the summary of one talk.

        Download and transcription errors propagate to the caller.

        Args:
            talk: Talk to process

        Returns:
            TalkSummary object
        """
        logging.info(f"Downloading audio: {talk.title}")
        audio_path = self.downloader.audio_path(talk.title)
        if self.downloader.exists(talk.title):
            logging.info(f"Audio already exists: {talk.title}")
        else:
            audio_path = self.downloader.download(talk)

        logging.info(f"Transcribing: {talk.title}")
        transcript_path = self.transcriber.transcript_path(talk.title)
        if self.transcriber.exists(talk.title):
            logging.info(f"Transcription already exists: {talk.title}")
        else:
            transcript_path = self.transcriber.transcribe(audio_path, talk.title)

        transcript = self.transcriber.load_transcript(transcript_path)

        logging.info(f"Summarizing: {talk.title}")
        summary = self.summarizer.create_summary(talk, transcript.text, str(transcript_path))
        logging.info(f"Summary: {summary.summary}")

        if self.save_summaries:
            save_summary(summary, output_dir=self.summaries_dir)
        return summary

    def run(self, talks: Iterable[Talk]) -> PipelineReport:
        """
        Process talks in order.

        A talk that fails is logged and recorded in the report, and the run
        moves on to the next talk.

        Args:
            talks: Talks to process

        Returns:
            PipelineReport with the summaries and the failed talks
        """
        report = PipelineReport()
        for talk in talks:
            try:
                report.summaries.append(self.process(talk))
            except Exception as e:
                logging.error(f"Error occurred while processing {talk.title}: {str(e)}")
                report.failures.append(ItemFailure(title=talk.title, error=str(e)))
        return report
