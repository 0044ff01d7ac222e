"""Configuration constants, prompt text, and .env loading.

WHY: Centralizes the user-facing strings of the interactive prompt and the
logging settings so they are easy to find and update, instead of being
buried in the CLI loop.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level strings. Only the log level can be overridden from the
environment.

RULES:
- FRAMBURDUR_LOG_LEVEL sets the default log level (default: WARNING)
- The pronunciation rule tables live in rules.py and are NOT configurable
- Prompt strings are fixed; tests compare against these constants
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the command is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("FRAMBURDUR_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ---------------------------------------------------------------------------
# Interactive prompt
# ---------------------------------------------------------------------------

BANNER = "Icelandic Pronunciation Approximator"
INSTRUCTIONS = "Enter an Icelandic word (or 'exit' to quit):"
PROMPT = "> "
EXIT_COMMAND = "exit"
RESULT_LABEL = "English approximation: "
FAREWELL = "Bless bless!"  # "Bye bye!" in Icelandic
READ_ERROR_PREFIX = "Error reading input:"
