"""
POST /api/convert
=================
Runs a conversion on a document sent in the request body.

Accepts the document text and the linter findings, returns the rewritten
template, the key → text mapping and one outcome per finding. Nothing is
written to disk.
"""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from hcstrings.core import config
from hcstrings.core.constants import ABORT, SKIP
from hcstrings.core.errors import ConversionError
from hcstrings.models.finding import FindingRecord
from hcstrings.models.rewrite_outcome import RewriteOutcome
from hcstrings.rewriter.line_rewriter import LineRewriter
from hcstrings.services.converter import convert_document

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Conversion"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class ConvertRequest(BaseModel):
    document: str
    findings: List[FindingRecord]
    lang: Optional[str] = None
    skip_invalid_patterns: bool = config.ON_INVALID_PATTERN == SKIP
    strict: bool = config.FAIL_ON_NO_MATCH

    @field_validator("lang")
    @classmethod
    def lang_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("lang must not be blank")
        return v


class ConvertResponse(BaseModel):
    document: str
    mapping: Dict[str, str]
    lang: str
    outcomes: List[RewriteOutcome]
    unmatched: int


@router.post("/convert", response_model=ConvertResponse)
def convert(request: ConvertRequest) -> ConvertResponse:
    findings = [record.error for record in request.findings]
    rewriter = LineRewriter(
        on_invalid_pattern=SKIP if request.skip_invalid_patterns else ABORT,
        fail_on_no_match=request.strict,
    )

    try:
        result = convert_document(request.document, findings, lang=request.lang, rewriter=rewriter)
    except ConversionError as e:
        logger.warning("Conversion rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return ConvertResponse(
        document=result.document,
        mapping=result.mapping,
        lang=result.lang,
        outcomes=result.outcomes,
        unmatched=len(result.unmatched),
    )
