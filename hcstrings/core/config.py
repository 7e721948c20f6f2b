"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    HCSTRINGS_DEFAULT_LANG          — Language code used for the mapping file name (default: es)
    HCSTRINGS_TEMPLATE_EXTENSION    — Extension of the rewritten document (default: hbs)
    HCSTRINGS_OUTPUT_DIR            — Directory for the mapping file (default: current directory)
    HCSTRINGS_ON_INVALID_PATTERN    — "abort" or "skip" when evidence is not a valid regex (default: abort)
    HCSTRINGS_FAIL_ON_NO_MATCH      — Treat "no match found" as fatal (default: false)
    HCSTRINGS_LOG_DIR               — Directory for dated log files (default: no file log)
    HCSTRINGS_LOG_LEVEL             — Root log level name (default: INFO)

Invalid Pattern Policy:
    Evidence is compiled as a regular expression without escaping. With
    "abort" a single malformed finding fails the whole run and nothing is
    written. With "skip" the finding is reported and the run continues.

No-Match Policy:
    A finding whose evidence is not found on its line is a warning by
    default. The rewritten document and the mapping may then disagree, so
    unattended runs can opt into failing instead.
"""
import os
from dotenv import load_dotenv

from hcstrings.core import constants

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


DEFAULT_LANG = os.getenv("HCSTRINGS_DEFAULT_LANG", constants.DEFAULT_LANG)
TEMPLATE_EXTENSION = os.getenv("HCSTRINGS_TEMPLATE_EXTENSION", constants.TEMPLATE_EXTENSION).lstrip(".")
OUTPUT_DIR = os.getenv("HCSTRINGS_OUTPUT_DIR", "")

ON_INVALID_PATTERN = os.getenv("HCSTRINGS_ON_INVALID_PATTERN", constants.ABORT).strip().lower()
if ON_INVALID_PATTERN not in constants.INVALID_PATTERN_POLICIES:
    raise RuntimeError(
        f"HCSTRINGS_ON_INVALID_PATTERN must be one of {constants.INVALID_PATTERN_POLICIES}, "
        f"got {ON_INVALID_PATTERN!r}"
    )

FAIL_ON_NO_MATCH = _env_flag("HCSTRINGS_FAIL_ON_NO_MATCH")

# Logging
LOG_DIR = os.getenv("HCSTRINGS_LOG_DIR", "")
LOG_LEVEL = os.getenv("HCSTRINGS_LOG_LEVEL", "INFO").upper()
