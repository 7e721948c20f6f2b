"""
Findings Parser
===============
Loads the HTML linter's findings file into Finding models.

Contract:
    - Input is a JSON array of {"error": {line, evidence, character, scope}}.
    - Unknown fields are ignored.
    - Order is preserved; duplicates are kept.
    - Any read / JSON / validation problem raises FindingsInputError so
      the run aborts before anything is written.
"""
import json
import logging
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from hcstrings.core.errors import FindingsInputError
from hcstrings.models.finding import Finding, FindingRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[FindingRecord])


def parse_findings(raw: Union[str, bytes, List[Any]]) -> List[Finding]:
    """
    Parse findings from JSON text or already-decoded records.

    Parameters
    ----------
    raw : str | bytes | list
        Findings file content, or the decoded JSON array.

    Returns
    -------
    list[Finding]
        Findings in input order.
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FindingsInputError(f"Findings are not valid JSON: {e}") from e

    try:
        records = _RECORDS.validate_python(raw)
    except ValidationError as e:
        raise FindingsInputError(f"Malformed findings: {e}") from e

    findings = [r.error for r in records]
    logger.info("Loaded %d finding(s)", len(findings))
    return findings


def load_findings(path: str) -> List[Finding]:
    """Read and parse a findings file. OSError propagates unchanged."""
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    logger.debug("Read findings from %s (%d chars)", path, len(content))
    return parse_findings(content)
