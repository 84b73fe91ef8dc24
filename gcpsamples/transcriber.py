"""Handles Speech-to-Text transcription using the Google Cloud Speech API."""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional
import os

from google.cloud import speech

from .models import RecognitionSettings, TranscriptionResult, Segment
from .exceptions import ConfigurationError
from .utils import read_file_bytes

logger = logging.getLogger(__name__)

class Transcriber(ABC):
    """Abstract base class for transcription services."""

    @abstractmethod
    def transcribe(self, audio_path: str) -> TranscriptionResult:
        """
        Transcribes the given audio file.

        Args:
            audio_path: Path to the audio file.

        Returns:
            A TranscriptionResult object containing segments and language.

        Raises:
            FileNotFoundError: If the audio file doesn't exist.
        """
        pass

class GoogleSpeechTranscriber(Transcriber):
    """Implements synchronous transcription with ``SpeechClient.recognize``."""

    def __init__(self, settings: Optional[RecognitionSettings] = None, client=None):
        """
        Initializes the GoogleSpeechTranscriber.

        Args:
            settings: Recognition settings. Defaults to LINEAR16, 32000 Hz,
                en-US with automatic punctuation.
            client: An existing ``speech.SpeechClient``. When None, a client is
                created for each call and closed afterwards.
        """
        self.settings = settings or RecognitionSettings()
        self.client = client
        logger.info(f"Initializing GoogleSpeechTranscriber with settings {self.settings}")

    def build_config(self) -> speech.RecognitionConfig:
        """
        Builds the RecognitionConfig for the current settings.

        Raises:
            ConfigurationError: If the encoding name is not a known AudioEncoding.
        """
        encoding_name = self.settings.encoding.upper()
        try:
            encoding = speech.RecognitionConfig.AudioEncoding[encoding_name]
        except KeyError as e:
            raise ConfigurationError(f"Unknown audio encoding: {self.settings.encoding}") from e

        return speech.RecognitionConfig(
            encoding=encoding,
            sample_rate_hertz=self.settings.sample_rate_hertz,
            language_code=self.settings.language_code,
            enable_automatic_punctuation=self.settings.enable_automatic_punctuation,
        )

    def transcribe(self, audio_path: str) -> TranscriptionResult:
        """
        Sends the audio file to the recognize endpoint and collects the top
        alternative of every result.

        Raises:
            FileNotFoundError: If the audio file doesn't exist.
            ConfigurationError: If the encoding is unknown.
            google.api_core.exceptions.GoogleAPICallError: Propagated from the API.
        """
        logger.info(f"Starting transcription for: {audio_path}")
        if not os.path.exists(audio_path):
            raise FileNotFoundError(f"Audio file not found: {audio_path}")

        config = self.build_config()
        audio = speech.RecognitionAudio(content=read_file_bytes(audio_path))

        if self.client is not None:
            response = self.client.recognize(config=config, audio=audio)
        else:
            with speech.SpeechClient() as client:
                response = client.recognize(config=config, audio=audio)

        segments = []
        for i, result in enumerate(response.results):
            if not result.alternatives:
                logger.warning(f"Skipping result {i} with no alternatives.")
                continue
            most_likely = result.alternatives[0]
            segments.append(Segment(transcript=most_likely.transcript, confidence=most_likely.confidence))

        logger.info(f"Processed {len(segments)} segments from transcription.")
        return TranscriptionResult(
            language=self.settings.language_code,
            segments=segments,
            original_audio_path=audio_path,
        )

def print_transcription(result: TranscriptionResult) -> None:
    for segment in result.segments:
        print(f"Transcript: {segment.transcript}")
        print(f"Confidence: {segment.confidence}")

def transcribe_auto_punctuation(
    audio_path: str,
    settings: Optional[RecognitionSettings] = None,
    client=None,
) -> TranscriptionResult:
    """Transcribe the given audio file synchronously with automatic punctuation and print it."""
    settings = replace(settings or RecognitionSettings(), enable_automatic_punctuation=True)
    result = GoogleSpeechTranscriber(settings=settings, client=client).transcribe(audio_path)
    print_transcription(result)
    return result
