"""Command-Line Interface for the speech transcription sample."""

import argparse
import logging
import sys
from typing import List, Optional

from google.api_core.exceptions import GoogleAPICallError

from .config_loader import ConfigLoader
from .log_setup import setup_logging
from .models import RecognitionSettings
from .transcriber import GoogleSpeechTranscriber, print_transcription
from .exceptions import GcpSamplesError

logger = logging.getLogger(__name__)

class SpeechCLIHandler:
    """Parses arguments and runs one synchronous transcription."""

    def __init__(self, speech_client=None):
        self.parser = self._create_parser()
        self.speech_client = speech_client

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="gcp-transcribe",
            description="Transcribe a local audio file with the Cloud Speech-to-Text API.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
        parser.add_argument(
            "audio_file",
            help="Path to the audio file to transcribe."
        )
        parser.add_argument(
            "--encoding",
            default=None, # Default taken from config
            help="Audio encoding, e.g. LINEAR16, FLAC, MULAW."
        )
        parser.add_argument(
            "--sample-rate-hertz",
            type=int,
            default=None, # Default taken from config
            help="Sample rate of the audio in hertz."
        )
        parser.add_argument(
            "--language-code",
            default=None, # Default taken from config
            help="BCP-47 language code of the speech."
        )
        parser.add_argument(
            "--no-punctuation",
            action="store_true",
            help="Disable automatic punctuation."
        )
        parser.add_argument(
            "-c", "--config",
            default=None,
            help="Path to a YAML configuration file."
        )
        parser.add_argument(
            "--log-level",
            default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        return parser

    def _settings_from(self, args: argparse.Namespace, config: dict) -> RecognitionSettings:
        speech_config = dict(config.get('speech', {}))
        if args.encoding:
            logger.info(f"Overriding encoding from config with CLI argument: {args.encoding}")
            speech_config['encoding'] = args.encoding
        if args.sample_rate_hertz:
            logger.info(f"Overriding sample rate from config with CLI argument: {args.sample_rate_hertz}")
            speech_config['sample_rate_hertz'] = args.sample_rate_hertz
        if args.language_code:
            logger.info(f"Overriding language code from config with CLI argument: {args.language_code}")
            speech_config['language_code'] = args.language_code
        if args.no_punctuation:
            speech_config['enable_automatic_punctuation'] = False
        return RecognitionSettings.from_config(speech_config)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Parses arguments, loads config, transcribes and prints the results."""
        args = self.parser.parse_args(argv)
        log_level = getattr(logging, args.log_level.upper(), logging.WARNING)
        setup_logging(log_level=log_level)

        try:
            config = ConfigLoader().load_with_defaults(args.config)
        except (GcpSamplesError, FileNotFoundError) as e:
            logger.critical(f"Failed to load configuration from {args.config}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if config.get('log_dir'):
            setup_logging(log_level=log_level, log_dir=config['log_dir'], log_file=config['log_file'])

        try:
            settings = self._settings_from(args, config)
            transcriber = GoogleSpeechTranscriber(settings=settings, client=self.speech_client)
            result = transcriber.transcribe(args.audio_file)
            print_transcription(result)
        except (GcpSamplesError, FileNotFoundError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except GoogleAPICallError as e:
            logger.error(f"Speech API call failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.warning("Process interrupted by user (Ctrl+C). Exiting.")
            sys.exit(1)
        except Exception as e:
            logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
            sys.exit(2)
        sys.exit(0)

def main() -> None:
    SpeechCLIHandler().run()
