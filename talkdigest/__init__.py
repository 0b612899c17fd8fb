"""
Talk Digest.

Downloads talk recordings, transcribes them and reduces the transcripts
into short summaries with a text-generation model.
"""

from talkdigest.config import config

__version__ = config.APP_VERSION
