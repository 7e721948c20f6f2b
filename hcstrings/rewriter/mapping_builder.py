"""
Mapping Builder
===============
Builds the key → original text table written next to the template.

Keys are re-derived from each finding's evidence with normalize_for_key,
independently of what the line rewriter matched. Later findings overwrite
earlier ones on key collision.
"""
import json
from typing import Dict, Iterable, Tuple

from hcstrings.core.constants import MAPPING_INDENT
from hcstrings.models.finding import Finding
from hcstrings.parser.evidence import normalize_for_key
from hcstrings.utils.slugify import slugify


def mapping_entry(finding: Finding) -> Tuple[str, str]:
    """Return (key, literal) for one finding."""
    literal = normalize_for_key(finding.evidence)
    literal = literal.removeprefix("(").removesuffix(")")
    return slugify(literal), literal


def build_mapping(findings: Iterable[Finding]) -> Dict[str, str]:
    mapping: Dict[str, str] = {}
    for finding in findings:
        key, literal = mapping_entry(finding)
        mapping[key] = literal
    return mapping


def serialize_mapping(mapping: Dict[str, str]) -> str:
    """Pretty JSON with sorted keys; non-ASCII text kept verbatim."""
    return json.dumps(mapping, indent=MAPPING_INDENT, ensure_ascii=False, sort_keys=True)
