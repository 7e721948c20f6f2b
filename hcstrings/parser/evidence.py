"""
Evidence Normalizer
===================
Turns a linter's raw "evidence" string into the two forms the rest of the
pipeline needs.

Two independent transforms:

    normalize_for_matching   /body/m*  → body, used as a regex fragment to
                             locate the literal on its line. No escaping.
    normalize_for_key        positional trims used to recover clean display
                             text for the mapping file.

Both feed slugify(); the two keys agree on plain, slash-wrapped,
parenthesized and backslash-escaped evidence, but not on "/body/m".
"""
import re

from hcstrings.core.errors import EvidencePatternError

# /body/ with optional trailing multiline flags
_REGEX_LITERAL_RE = re.compile(r"/(.*?)/m*")

# leading inline flags such as (?i); re only accepts them at the very start
_LEADING_FLAGS_RE = re.compile(r"\(\?([imsx]+)\)")


def normalize_for_matching(evidence: str) -> str:
    """
    Strip a /.../ regex-literal wrapper (and trailing "m" flags) if present.

    >>> normalize_for_matching("/Hello, world!/")
    'Hello, world!'
    >>> normalize_for_matching("Plain text")
    'Plain text'
    """
    m = _REGEX_LITERAL_RE.fullmatch(evidence)
    if m:
        return m.group(1)
    return evidence


def normalize_for_key(evidence: str) -> str:
    """
    Recover display text from evidence: one leading/trailing "/" trimmed,
    all backslashes removed, one leading "(" and one trailing ")" trimmed.
    """
    literal = evidence.removeprefix("/").removesuffix("/")
    literal = literal.replace("\\", "")
    return literal.removeprefix("(").removesuffix(")")


def _scope_leading_flags(pattern: str) -> str:
    """Rewrite "(?i)rest" as "(?i:rest)" so it can sit after the left group."""
    m = _LEADING_FLAGS_RE.match(pattern)
    if not m:
        return pattern
    return f"(?{m.group(1)}:{pattern[m.end():]})"


def compile_evidence(pattern: str) -> re.Pattern:
    """
    Build the capturing pattern left / evidence / right for one line.

    An empty fragment is valid and matches at column 0.

    Raises
    ------
    EvidencePatternError
        If the evidence is not a valid regular expression fragment.
    """
    fragment = _scope_leading_flags(pattern)
    try:
        return re.compile(rf"(?P<left>.*?)(?P<evidence>{fragment})(?P<right>.*)")
    except re.error as e:
        raise EvidencePatternError(pattern, str(e)) from e
