"""Data models for gcpsamples."""

from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class RecognitionSettings:
    """Settings used to build a speech RecognitionConfig."""
    encoding: str = "LINEAR16"
    sample_rate_hertz: int = 32000
    language_code: str = "en-US"
    enable_automatic_punctuation: bool = True

    @classmethod
    def from_config(cls, speech_config: dict) -> "RecognitionSettings":
        return cls(
            encoding=str(speech_config.get('encoding', cls.encoding)).upper(),
            sample_rate_hertz=int(speech_config.get('sample_rate_hertz', cls.sample_rate_hertz)),
            language_code=speech_config.get('language_code', cls.language_code),
            enable_automatic_punctuation=bool(
                speech_config.get('enable_automatic_punctuation', cls.enable_automatic_punctuation)
            ),
        )

@dataclass
class Segment:
    """The most likely alternative of one recognition result."""
    transcript: str
    confidence: float

@dataclass
class TranscriptionResult:
    """Holds the structured output from a recognize call."""
    language: Optional[str]
    segments: List[Segment] = field(default_factory=list)
    original_audio_path: Optional[str] = None
