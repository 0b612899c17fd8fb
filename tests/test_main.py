"""
Tests for the command line interface.
"""

import pytest
from unittest.mock import patch

from talkdigest import main as cli
from talkdigest.models.schemas import ItemFailure, PipelineReport, SummarizeOptions, TalkSummary


def test_summarize_options_defaults():
    options = SummarizeOptions()
    assert options.input == "hello prompt"
    assert options.output == "./summary.txt"


def test_summarize_command_writes_output(tmp_path):
    """Test summarizing a text file from the command line."""
    source = tmp_path / "talk.txt"
    source.write_text("Validators vote on blocks and the leader rotates.")
    output = tmp_path / "summary.txt"

    with patch('talkdigest.main.TranscriptSummarizer') as mock_summarizer_class:
        mock_summarizer_class.return_value.summarize.return_value = "Validators vote."
        code = cli.main(["summarize", "--input", str(source), "--output", str(output)])

    assert code == 0
    assert output.read_text() == "Validators vote."
    mock_summarizer_class.return_value.summarize.assert_called_once_with(
        "Validators vote on blocks and the leader rotates."
    )


def test_read_input_falls_back_to_literal_text():
    assert cli.read_input("hello prompt") == "hello prompt"


def test_build_summary_config_uses_backend_default_model():
    args = cli.create_parser().parse_args(["summarize", "--backend", "chat", "--max-length", "300"])

    summary_config = cli.build_summary_config(args)

    assert summary_config.backend == "chat"
    assert summary_config.model == cli.config.DEFAULT_SUMMARY_MODEL
    assert summary_config.max_length == 300


def test_run_command_reports_failures(talk, capsys):
    """Test that failed talks are printed and give a non-zero exit code."""
    report = PipelineReport(
        summaries=[TalkSummary(talk=talk, summary="A short summary.")],
        failures=[ItemFailure(title="solana-seeker", error="Could not download audio")],
    )

    with patch('talkdigest.main.TranscriptSummarizer'), \
            patch('talkdigest.main.AudioDownloader'), \
            patch('talkdigest.main.AudioTranscriber'), \
            patch.object(cli.config, 'initialize'), \
            patch('talkdigest.main.TalkPipeline') as mock_pipeline_class:
        mock_pipeline_class.return_value.run.return_value = report
        code = cli.main(["run"])

    assert code == 1
    mock_pipeline_class.return_value.run.assert_called_once_with(cli.DEFAULT_TALKS)
    out = capsys.readouterr().out
    assert "A short summary." in out
    assert "solana-seeker: Could not download audio" in out


def test_catalog_command(tmp_path):
    output = tmp_path / "talks.json"

    with patch('talkdigest.main.talks_from_playlist', return_value=cli.DEFAULT_TALKS) as fetch:
        code = cli.main(["catalog", "https://youtube.com/playlist?list=abc", "--output", str(output)])

    assert code == 0
    fetch.assert_called_once_with("https://youtube.com/playlist?list=abc")
    assert output.is_file()


def test_max_length_override_is_kept():
    args = cli.create_parser().parse_args(["summarize", "--max-length", "1"])

    assert cli.build_summary_config(args).max_length == 1


def test_max_length_defaults_to_config():
    args = cli.create_parser().parse_args(["summarize"])

    assert cli.build_summary_config(args).max_length == cli.config.SUMMARY_MAX_LENGTH


@pytest.mark.parametrize("value", ["0", "-5"])
def test_non_positive_max_length_is_rejected(value):
    with pytest.raises(SystemExit):
        cli.create_parser().parse_args(["summarize", "--max-length", value])
