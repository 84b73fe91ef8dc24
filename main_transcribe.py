#!/usr/bin/env python3
"""
Speech Transcription Entry Point Script

Transcribes a local audio file synchronously and prints the most likely
transcript and its confidence for every result segment.
"""

import sys
from gcpsamples.speech_cli import SpeechCLIHandler

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("gcpsamples requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = SpeechCLIHandler()
    cli.run()
