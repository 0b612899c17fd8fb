"""
Split long text bodies into bounded-size chunks.
"""

from typing import List


def _last_whitespace(text: str, start: int, end: int) -> int:
    """Index of the last whitespace character in text[start:end + 1], or -1."""
    for index in range(min(end, len(text) - 1), start - 1, -1):
        if text[index].isspace():
            return index
    return -1


def chunk_text(text: str, max_length: int) -> List[str]:
    """
    Split text into ordered chunks of at most max_length characters.

    Cuts are made at the last whitespace before the length limit so words
    stay whole. A run with no whitespace in reach is cut hard at the limit.
    Chunks are stripped, and chunks that are empty after stripping are
    dropped.

    Args:
        text: Text body to split
        max_length: Maximum length of a chunk

    Returns:
        List of chunks, empty when text is empty or max_length is not positive
    """
    chunks: List[str] = []
    if not text or max_length <= 0:
        return chunks

    length = len(text)
    start = 0
    while start < length:
        end = start + max_length
        if end < length:
            end = _last_whitespace(text, start, end)
        if end <= start:
            end = min(start + max_length, length)

        piece = text[start:end].strip()
        if piece:
            chunks.append(piece)
        start = end

    return chunks
