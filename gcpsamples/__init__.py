"""Command-line samples for Google Cloud Storage and Speech-to-Text."""

__version__ = "0.1.0"
