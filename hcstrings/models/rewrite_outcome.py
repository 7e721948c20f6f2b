"""
Rewrite Outcome Model
=====================
Pydantic models tracking what the line rewriter did with each finding.

Fields:
    index           — 0-based position of the finding in the input list
    finding         — the Finding that was applied
    status          — one of the outcome codes (see outcome_codes.py)
    pattern         — evidence after normalize_for_matching
    key             — slug written into the placeholder (empty unless REPLACED)
    original_line   — text of the target line before this step
    rewritten_line  — text of the target line after this step
    lines_rewritten — number of document lines changed by this step
    message         — diagnostic for non-REPLACED outcomes
"""
from typing import List

from pydantic import BaseModel

from .finding import Finding
from hcstrings.utils.outcome_codes import REPLACED


class RewriteOutcome(BaseModel):
    index: int
    finding: Finding
    status: str
    pattern: str = ""
    key: str = ""
    original_line: str = ""
    rewritten_line: str = ""
    lines_rewritten: int = 0
    message: str = ""

    @property
    def replaced(self) -> bool:
        return self.status == REPLACED


class RewriteReport(BaseModel):
    document: str
    outcomes: List[RewriteOutcome] = []

    @property
    def unmatched(self) -> List[RewriteOutcome]:
        """Outcomes for which no placeholder was written."""
        return [o for o in self.outcomes if not o.replaced]
