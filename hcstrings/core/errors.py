"""
Errors
======
Exception hierarchy for a conversion run.

Every fatal condition raised by this package derives from ConversionError so
callers (CLI, HTTP API) can report it with a single handler. Document reads
and output writes surface as plain OSError.
"""
from typing import Optional

from hcstrings.models.finding import Finding


class ConversionError(Exception):
    """Base class for errors that abort a conversion run."""


class FindingsInputError(ConversionError):
    """The findings source could not be parsed or validated."""


class EvidencePatternError(ConversionError):
    """A finding's evidence does not compile as a regular expression."""

    def __init__(
        self,
        pattern: str,
        reason: str,
        index: Optional[int] = None,
        finding: Optional[Finding] = None,
    ) -> None:
        self.pattern = pattern
        self.reason = reason
        self.index = index
        self.finding = finding
        location = ""
        if finding is not None:
            location = f" (finding #{index}, line {finding.line})"
        super().__init__(f"Invalid evidence pattern {pattern!r}{location}: {reason}")

    def for_finding(self, index: int, finding: Finding) -> "EvidencePatternError":
        """Return a copy of this error bound to the finding that produced it."""
        return EvidencePatternError(self.pattern, self.reason, index=index, finding=finding)


class UnmatchedEvidenceError(ConversionError):
    """Evidence was not found on its line and no-match is configured as fatal."""

    def __init__(self, pattern: str, index: int, finding: Finding) -> None:
        self.pattern = pattern
        self.index = index
        self.finding = finding
        super().__init__(
            f"No match found for evidence {pattern!r} on line {finding.line} (finding #{index})"
        )
