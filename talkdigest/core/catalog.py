"""
Talk catalogs: the built-in talk list, playlists and catalog files.
"""

import re
from typing import List, Tuple

from pydantic import ValidationError
from pytubefix import Playlist

from talkdigest.models.schemas import Talk
from talkdigest.utils.error_handling import CatalogError
from talkdigest.utils.helpers import load_json, save_json, slugify_title
from talkdigest.utils.logger import logging

DEFAULT_TALKS = [
    Talk(
        title="the-solana-network-state",
        category="fireside",
        participants=["@rajgokal", "@balajis"],
        link="https://youtu.be/WwVv_kWS_B8?si=_dgEw65RBox4rE-j",
    ),
    Talk(
        title="solana-seeker",
        category="keynote",
        participants=["Emmett Hollyer"],
        link="https://youtu.be/W7hKbYI0t9U?si=fBM-qYNIucgE0UQy",
    ),
]


def fetch_playlist(url: str) -> List[Tuple[str, str]]:
    """
    List the videos of a playlist.

    Args:
        url: Playlist URL

    Returns:
        (title, watch url) pairs in playlist order
    """
    logging.info(f"Fetching playlist data from: {url}")
    playlist = Playlist(url)
    entries = [(video.title, video.watch_url) for video in playlist.videos]
    logging.info(f"Fetched {len(entries)} videos from playlist")
    return entries


def parse_playlist_entry(raw_title: str, url: str) -> Talk:
    """
    Build a Talk from a playlist video titled "Event Year: Type: Content (Names)".

    Participants are the comma-separated names in parentheses, squashed
    and lowercased. The short title combines the event prefix and year,
    the talk type and a slug of the content.

    Raises:
        CatalogError: If the title does not have event, type and content parts
    """
    parts = [part.strip() for part in raw_title.split(":")]
    if len(parts) < 3 or not all(parts[:3]):
        raise CatalogError(f"Cannot parse playlist title: {raw_title!r}")

    event, talk_type, content = parts[0], parts[1], ":".join(parts[2:])

    participants: List[str] = []
    match = re.search(r"\(([^)]+)\)", content)
    if match:
        participants = ["".join(name.split()).lower() for name in match.group(1).split(",")]

    year = re.search(r"\d{4}", event)
    short_year = year.group(0)[-2:] if year else "24"
    title = f"{event[:2].lower()}{short_year}-{slugify_title(talk_type)}-{slugify_title(content)}"

    try:
        return Talk(title=title, category=talk_type.lower(), participants=participants, link=url)
    except ValidationError as e:
        raise CatalogError(f"Invalid talk from playlist title {raw_title!r}: {e}") from e


def talks_from_playlist(url: str) -> List[Talk]:
    """Fetch a playlist and parse every entry into a Talk, skipping unparseable titles."""
    talks = []
    for raw_title, link in fetch_playlist(url):
        try:
            talks.append(parse_playlist_entry(raw_title, link))
        except CatalogError as e:
            logging.warning(f"Skipping playlist entry: {e}")
    return talks


def save_catalog(talks: List[Talk], path: str) -> None:
    save_json([talk.model_dump() for talk in talks], path)
    logging.info(f"Catalog with {len(talks)} talks written to: {path}")


def load_catalog(path: str) -> List[Talk]:
    """
    Load talks from a catalog JSON file.

    Raises:
        CatalogError: If the file is not a list of valid talks
    """
    data = load_json(path)
    if not isinstance(data, list):
        raise CatalogError(f"Catalog {path} must contain a list of talks")
    try:
        return [Talk.model_validate(item) for item in data]
    except ValidationError as e:
        raise CatalogError(f"Invalid talk in catalog {path}: {e}") from e
