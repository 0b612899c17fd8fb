"""
Core functionality for the talk summarizer.

This package contains the chunker, the chunk-and-reduce summarizer and the
collaborators for audio download, transcription and talk catalogs.
"""
