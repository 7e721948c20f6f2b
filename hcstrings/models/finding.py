"""
Finding Model
=============
Pydantic model for one hard-coded string reported by the HTML linter.
This is the contract between the findings file and the rewriter / mapping builder.

Wire shape (one record of the findings file):
    {"error": {"line": 12, "evidence": "/Hello/", "character": 5, "scope": "..."}}

Fields:
    line        — 1-based line number in the document
    column      — 1-based column (wire name "character"); informational only
    evidence    — raw matched text, possibly wrapped as /regex/ with an "m" flag
    scope       — free-text context label; informational only
"""
from pydantic import BaseModel, ConfigDict, Field


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    line: int = Field(ge=1)
    column: int = Field(default=1, alias="character", ge=1)
    evidence: str
    scope: str = ""


class FindingRecord(BaseModel):
    """One entry of the findings file as written by the linter."""
    error: Finding
