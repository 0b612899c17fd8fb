"""
Main entry point for the talk summarizer application.
"""

import os
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from talkdigest.config import config
from talkdigest.core.audio_downloader import AudioDownloader
from talkdigest.core.catalog import DEFAULT_TALKS, load_catalog, save_catalog, talks_from_playlist
from talkdigest.core.pipeline import TalkPipeline
from talkdigest.core.summarizer import TranscriptSummarizer
from talkdigest.core.transcriber import AudioTranscriber
from talkdigest.models.schemas import PipelineReport, SummarizeOptions, SummaryConfig
from talkdigest.utils.logger import logging


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_summary_config(args: argparse.Namespace) -> SummaryConfig:
    """Summary settings from command line overrides and config defaults."""
    overrides = {
        "backend": args.backend,
        "model": args.model,
        "max_length": args.max_length,
    }
    return SummaryConfig(**{key: value for key, value in overrides.items() if value is not None})


def read_input(source: str) -> str:
    """Return the contents of source when it names a file, otherwise source itself."""
    if os.path.isfile(source):
        return Path(source).read_text(encoding="utf-8")
    return source


def summarize_file(options: SummarizeOptions, summarizer: TranscriptSummarizer) -> Path:
    """Summarize options.input and write the summary to options.output."""
    summary = summarizer.summarize(read_input(options.input))
    output_path = Path(options.output)
    output_path.write_text(summary, encoding="utf-8")
    logging.info(f"Summary written to: {output_path}")
    return output_path


def print_report(report: PipelineReport) -> None:
    for summary in report.summaries:
        print("\n" + "=" * 80)
        print(f"Summary of '{summary.talk.title}'")
        print("=" * 80)
        print(summary.summary)
        print("=" * 80)

    if report.failures:
        print(f"\n{len(report.failures)} talk(s) failed:")
        for failure in report.failures:
            print(f"  {failure.title}: {failure.error}")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Talk recording summarizer")
    subparsers = parser.add_subparsers(dest="command", required=True)

    catalog_parser = subparsers.add_parser("catalog", help="Build a talk catalog from a playlist")
    catalog_parser.add_argument("playlist", help="Playlist URL")
    catalog_parser.add_argument("--output", default=str(config.CATALOG_FILE),
                                help="Catalog file to write")

    run_parser = subparsers.add_parser("run", help="Download, transcribe and summarize talks")
    run_parser.add_argument("--catalog",
                            help="Catalog file with the talks (defaults to the built-in talks)")

    defaults = SummarizeOptions()
    summarize_parser = subparsers.add_parser("summarize", help="Summarize a text or text file")
    summarize_parser.add_argument("--input", default=defaults.input,
                                  help="Text to summarize, or a path to a text file")
    summarize_parser.add_argument("--output", default=defaults.output,
                                  help="File the summary is written to")

    for sub in (run_parser, summarize_parser):
        sub.add_argument("--backend", choices=["ollama", "chat"],
                         help="Text generation backend")
        sub.add_argument("--model", help="Model used for summarization")
        sub.add_argument("--max-length", type=positive_int,
                         help="Maximum length of the final summary")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application from command line."""
    args = create_parser().parse_args(argv)

    if args.command == "catalog":
        talks = talks_from_playlist(args.playlist)
        save_catalog(talks, args.output)
        print("Successfully written data")
        return 0

    summarizer = TranscriptSummarizer(build_summary_config(args))

    if args.command == "summarize":
        options = SummarizeOptions(input=args.input, output=args.output)
        output_path = summarize_file(options, summarizer)
        print(f"Summary written to: {output_path}")
        return 0

    config.initialize()
    talks = load_catalog(args.catalog) if args.catalog else DEFAULT_TALKS
    pipeline = TalkPipeline(AudioDownloader(), AudioTranscriber(), summarizer)
    report = pipeline.run(talks)
    print_report(report)
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
