"""
Conversion Result Model
=======================
Everything a single run produces: the rewritten document, the key → text
mapping, the per-finding outcomes and, once written, the output paths.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel

from .rewrite_outcome import RewriteOutcome


class ConversionResult(BaseModel):
    document: str
    mapping: Dict[str, str] = {}
    lang: str = ""
    outcomes: List[RewriteOutcome] = []
    document_path: Optional[str] = None
    mapping_path: Optional[str] = None

    @property
    def unmatched(self) -> List[RewriteOutcome]:
        return [o for o in self.outcomes if not o.replaced]
