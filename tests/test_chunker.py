"""
Tests for the chunker module.
"""

import pytest

from talkdigest.core.chunker import chunk_text


def _squash(text):
    return "".join(text.split())


def test_splits_on_word_boundaries():
    """Test that chunks end at whitespace near the length limit."""
    assert chunk_text("the quick brown fox", 10) == ["the quick", "brown fox"]


def test_hard_cut_for_long_word():
    """Test that a word longer than the limit is cut into bounded pieces."""
    chunks = chunk_text("supercalifragilisticexpialidocious", 5)

    assert chunks[:3] == ["super", "calif", "ragil"]
    assert all(len(chunk) <= 5 for chunk in chunks)
    assert "".join(chunks) == "supercalifragilisticexpialidocious"


def test_text_shorter_than_limit_is_one_chunk():
    assert chunk_text("  hello world  ", 8000) == ["hello world"]


@pytest.mark.parametrize("text,max_length", [("", 10), ("some text", 0), ("some text", -3)])
def test_empty_or_invalid_input_returns_no_chunks(text, max_length):
    assert chunk_text(text, max_length) == []


def test_whitespace_only_text_returns_no_chunks():
    assert chunk_text("   \n\t  ", 3) == []


@pytest.mark.parametrize("max_length", [1, 2, 3, 7, 10, 50, 1000])
def test_chunks_are_bounded_and_preserve_content(max_length):
    """Test the length bound and that no characters are lost or reordered."""
    text = (
        "Validators  vote on blocks,\nand the leader schedule rotates every epoch. "
        "Firedancer is a new client written from scratch.\tThroughput matters."
    )
    chunks = chunk_text(text, max_length)

    assert all(chunk for chunk in chunks)
    assert all(len(chunk) <= max_length for chunk in chunks)
    assert all(chunk == chunk.strip() for chunk in chunks)
    assert _squash("".join(chunks)) == _squash(text)


def test_rejoined_chunks_match_normalized_text():
    text = "one two  three\nfour five six seven eight nine ten"
    chunks = chunk_text(text, 12)

    assert " ".join(" ".join(chunks).split()) == " ".join(text.split())


def test_mixed_whitespace_is_a_boundary():
    assert chunk_text("alpha\nbeta\tgamma", 11) == ["alpha\nbeta", "gamma"]


def test_long_text_without_whitespace_terminates():
    text = "x" * 25_001
    chunks = chunk_text(text, 8000)

    assert [len(chunk) for chunk in chunks] == [8000, 8000, 8000, 1001]


def test_chunking_is_deterministic():
    text = "the quick brown fox jumps over the lazy dog " * 50
    assert chunk_text(text, 37) == chunk_text(text, 37)
