# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Entry point for the settings snapshot runner.

Usage:
    python -m settings_signals.runner < input.json > output.json

The runner reads JSON input from stdin, reads the requested settings
signals, and writes JSON output to stdout.  Logs go to stderr; set
SETTINGS_SIGNALS_LOG_LEVEL to change the level (default WARNING).

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import logging
import os
import sys

from .collector import Collector
from .schema import RunnerInput, RunnerOutput


def configure_logging() -> None:
    level = os.getenv("SETTINGS_SIGNALS_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    configure_logging()
    try:
        input_json = sys.stdin.read()
        input_data = RunnerInput.model_validate_json(input_json or "{}")

        output = Collector().collect(input_data)
        print(output.model_dump_json())

        return 0 if output.success else 1

    except Exception as e:
        # Ensure we always output valid JSON, even on unexpected errors
        error_output = RunnerOutput(
            success=False,
            error=str(e),
            error_type=type(e).__name__,
        )
        print(error_output.model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
