"""
Outcome Codes
=============
Standardised constants describing what happened to each finding.

Used by RewriteOutcome.status so the CLI, the HTTP API and the tests can
tell apart a rewritten line from the different kinds of skipped findings.
"""


# ---------------------------------------------------------------------------
# Outcome Constants
# ---------------------------------------------------------------------------
REPLACED = "REPLACED"
NO_MATCH = "NO_MATCH"
LINE_OUT_OF_RANGE = "LINE_OUT_OF_RANGE"
INVALID_PATTERN = "INVALID_PATTERN"

ALL_OUTCOMES = frozenset({
    REPLACED,
    NO_MATCH,
    LINE_OUT_OF_RANGE,
    INVALID_PATTERN,
})
