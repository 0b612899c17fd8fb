"""
Helper utility functions for the talk summarizer.
"""

import os
import json
import re
from typing import Any

from talkdigest.utils.error_handling import InvalidTitleError

_SAFE_TITLE = re.compile(r"^[A-Za-z0-9._-]+$")


def slugify_title(text: str) -> str:
    """
    Turn free text into a lowercase, dash-separated slug.

    Args:
        text: Text to slugify

    Returns:
        Slug made of letters, digits, underscores and dashes
    """
    slug = "-".join(text.lower().split())
    return re.sub(r"[^a-z0-9_-]", "", slug)


def validate_title(title: str) -> str:
    """
    Check that a title is safe to use as a file name.

    Titles double as idempotency keys for the audio and transcript
    artifacts, so they must not contain path separators or resolve to
    the current or parent directory.

    Args:
        title: Title to check

    Returns:
        The unchanged title

    Raises:
        InvalidTitleError: If the title is not filesystem safe
    """
    if not title or title in (".", ".."):
        raise InvalidTitleError(f"Invalid talk title: {title!r}")
    if not _SAFE_TITLE.match(title):
        raise InvalidTitleError(
            f"Talk title {title!r} may only contain letters, digits, '.', '_' and '-'"
        )
    return title


def save_json(data: Any, filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)


def load_json(filepath: str) -> Any:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def ensure_dir(directory: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Directory path to ensure exists
    """
    os.makedirs(directory, exist_ok=True)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
