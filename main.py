#!/usr/bin/env python3
"""
Cloud Storage CLI Entry Point Script

This script initializes the CLI handler and runs one storage command.
"""

import sys
from gcpsamples.cli import CLIHandler

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("gcpsamples requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = CLIHandler()
    cli.run()
