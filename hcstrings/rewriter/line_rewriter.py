"""
Line Rewriter
=============
Replaces hard-coded literals in a document with {{t '<key>'}} placeholders.

Pipeline (per finding, in input order):
    1. Normalize evidence (normalize_for_matching) and compile it
    2. Locate the target line (1-based finding.line) in the CURRENT document
    3. Search left / evidence / right on that line
    4. Build left + placeholder(slugify(pattern)) + right
    5. Replace every occurrence of the original target line text in the document

Contract:
    - The document is threaded through the findings as an immutable tuple
      of (text, terminator) lines: apply_finding is a pure step, rewrite()
      is the fold. Later findings see the edits of earlier ones.
    - Replacement is content-based: the original line text is replaced
      wherever it occurs, including inside longer lines.
    - Untouched lines keep their bytes, including "\\r\\n" terminators.
    - Out-of-range lines are skipped silently; no-match is a warning unless
      fail_on_no_match is set; invalid patterns abort unless the policy is
      "skip".
"""
import logging
from typing import Iterable, List, Tuple

from hcstrings.core.constants import ABORT, INVALID_PATTERN_POLICIES, PLACEHOLDER_FORMAT
from hcstrings.core.errors import EvidencePatternError, UnmatchedEvidenceError
from hcstrings.models.finding import Finding
from hcstrings.models.rewrite_outcome import RewriteOutcome, RewriteReport
from hcstrings.parser.evidence import compile_evidence, normalize_for_matching
from hcstrings.utils.outcome_codes import (
    INVALID_PATTERN,
    LINE_OUT_OF_RANGE,
    NO_MATCH,
    REPLACED,
)
from hcstrings.utils.slugify import slugify

logger = logging.getLogger(__name__)

# (text, terminator) — terminator is "\n", "\r\n" or "" for a final unterminated line
Line = Tuple[str, str]
Lines = Tuple[Line, ...]


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------
def split_lines(document: str) -> Lines:
    """Split on "\\n", keeping each line's terminator. A trailing newline adds no empty line."""
    parts = document.split("\n")
    lines: List[Line] = []
    for i, text in enumerate(parts):
        is_last = i == len(parts) - 1
        if is_last:
            if text:
                lines.append((text, ""))
            break
        if text.endswith("\r"):
            lines.append((text[:-1], "\r\n"))
        else:
            lines.append((text, "\n"))
    return tuple(lines)


def join_lines(lines: Iterable[Line]) -> str:
    return "".join(text + terminator for text, terminator in lines)


def render_placeholder(key: str) -> str:
    """Handlebars lookup for a translation key: {{t 'key'}}."""
    return PLACEHOLDER_FORMAT.format(key=key)


def _replace_in_line(text: str, original: str, new_text: str) -> str:
    """Replace every occurrence of the original line text inside one line."""
    if not original:
        # str.replace would insert at every position
        return new_text if not text else text
    return text.replace(original, new_text)


# ---------------------------------------------------------------------------
# Line Rewriter
# ---------------------------------------------------------------------------
class LineRewriter:
    """
    Applies findings to a document one at a time.

    Parameters
    ----------
    on_invalid_pattern : str
        "abort" (default) raises EvidencePatternError for the first finding
        whose evidence does not compile; "skip" records it and continues.
    fail_on_no_match : bool
        Raise UnmatchedEvidenceError instead of warning when the evidence is
        not found on its line (default: False).
    """

    def __init__(
        self,
        on_invalid_pattern: str = ABORT,
        fail_on_no_match: bool = False,
    ) -> None:
        if on_invalid_pattern not in INVALID_PATTERN_POLICIES:
            raise ValueError(
                f"on_invalid_pattern must be one of {INVALID_PATTERN_POLICIES}, "
                f"got {on_invalid_pattern!r}"
            )
        self.on_invalid_pattern = on_invalid_pattern
        self.fail_on_no_match = fail_on_no_match

    # -------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------
    def apply_finding(
        self,
        lines: Lines,
        finding: Finding,
        index: int = 0,
    ) -> Tuple[Lines, RewriteOutcome]:
        """
        One fold step: return the new lines and what happened.

        The input tuple is never modified; when nothing changes the same
        tuple is returned.
        """
        pattern = normalize_for_matching(finding.evidence)
        logger.debug("evidence: %s", pattern)

        # Compile before the range check: a malformed pattern is reported
        # even when its line does not exist.
        try:
            compiled = compile_evidence(pattern)
        except EvidencePatternError as e:
            bound = e.for_finding(index, finding)
            if self.on_invalid_pattern == ABORT:
                raise bound from e
            logger.warning("Skipping finding: %s", bound)
            return lines, RewriteOutcome(
                index=index,
                finding=finding,
                status=INVALID_PATTERN,
                pattern=pattern,
                message=str(bound),
            )

        line_index = finding.line - 1
        if line_index >= len(lines):
            logger.debug(
                "Finding #%d targets line %d but document has %d line(s), skipping",
                index, finding.line, len(lines),
            )
            return lines, RewriteOutcome(
                index=index,
                finding=finding,
                status=LINE_OUT_OF_RANGE,
                pattern=pattern,
                message=f"Line {finding.line} is beyond the end of the document ({len(lines)} lines)",
            )

        original = lines[line_index][0]
        captures = compiled.search(original)

        if captures is None:
            logger.warning("No match found for evidence: %s", pattern)
            if self.fail_on_no_match:
                raise UnmatchedEvidenceError(pattern, index, finding)
            return lines, RewriteOutcome(
                index=index,
                finding=finding,
                status=NO_MATCH,
                pattern=pattern,
                original_line=original,
                rewritten_line=original,
                message=f"No match found for evidence: {pattern}",
            )

        key = slugify(pattern)
        if not key:
            logger.warning("Evidence %r produces an empty key", pattern)
        new_text = captures.group("left") + render_placeholder(key) + captures.group("right")

        new_lines = tuple(
            (_replace_in_line(text, original, new_text), terminator)
            for text, terminator in lines
        )
        rewritten = sum(1 for old, new in zip(lines, new_lines) if old != new)
        if rewritten > 1:
            logger.info(
                "Line %d text occurs in %d lines; all occurrences rewritten",
                finding.line, rewritten,
            )

        return new_lines, RewriteOutcome(
            index=index,
            finding=finding,
            status=REPLACED,
            pattern=pattern,
            key=key,
            original_line=original,
            rewritten_line=new_text,
            lines_rewritten=rewritten,
        )

    def rewrite(self, document: str, findings: Iterable[Finding]) -> RewriteReport:
        """Fold every finding over the document, in input order."""
        lines = split_lines(document)
        outcomes: List[RewriteOutcome] = []

        for index, finding in enumerate(findings):
            lines, outcome = self.apply_finding(lines, finding, index)
            outcomes.append(outcome)

        report = RewriteReport(document=join_lines(lines), outcomes=outcomes)
        logger.info(
            "Applied %d finding(s): %d replaced, %d not replaced",
            len(outcomes), len(outcomes) - len(report.unmatched), len(report.unmatched),
        )
        return report


def apply_findings(document: str, findings: Iterable[Finding], **options) -> str:
    """Rewrite document with every finding; options are LineRewriter arguments."""
    return LineRewriter(**options).rewrite(document, findings).document
