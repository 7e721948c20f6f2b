"""
Converter
=========
Composes the evidence normalizer, line rewriter and mapping builder into
one conversion run.

    convert_document   in-memory: (document, findings, lang) → ConversionResult
    process_files      file level: read document + findings, convert, then
                       write mapping and template

Contract:
    - Rewriting and mapping consume the same findings list; the mapping
      does not depend on which findings matched.
    - Nothing is written unless the whole conversion succeeded.
    - Errors (OSError, ConversionError) propagate to the caller.
"""
import logging
from typing import List, Optional

from hcstrings.core import config
from hcstrings.models.conversion_result import ConversionResult
from hcstrings.models.finding import Finding
from hcstrings.parser.findings_parser import load_findings
from hcstrings.rewriter.line_rewriter import LineRewriter
from hcstrings.rewriter.mapping_builder import build_mapping
from hcstrings.services.output_writer import OutputWriter

logger = logging.getLogger(__name__)


def convert_document(
    document: str,
    findings: List[Finding],
    lang: Optional[str] = None,
    rewriter: Optional[LineRewriter] = None,
) -> ConversionResult:
    """
    Rewrite the document and build its mapping table.

    Parameters
    ----------
    document : str
        Full text of the HTML document.
    findings : list[Finding]
        Findings in the order they must be applied.
    lang : str | None
        Language code recorded on the result (default: config.DEFAULT_LANG).
    rewriter : LineRewriter | None
        Rewriter carrying the error policies (default: from config).

    Returns
    -------
    ConversionResult
        Rewritten document, mapping and per-finding outcomes.
    """
    rewriter = rewriter or LineRewriter(
        on_invalid_pattern=config.ON_INVALID_PATTERN,
        fail_on_no_match=config.FAIL_ON_NO_MATCH,
    )
    report = rewriter.rewrite(document, findings)
    mapping = build_mapping(findings)

    if report.unmatched:
        logger.warning(
            "%d finding(s) were not replaced; the mapping may contain keys "
            "without a placeholder in the document",
            len(report.unmatched),
        )

    return ConversionResult(
        document=report.document,
        mapping=mapping,
        lang=lang or config.DEFAULT_LANG,
        outcomes=report.outcomes,
    )


def read_document(path: str) -> str:
    # newline="" keeps "\r\n" so untouched lines are written back byte-identical
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def process_files(
    html_file_path: str,
    json_file_path: str,
    lang: Optional[str] = None,
    rewriter: Optional[LineRewriter] = None,
    writer: Optional[OutputWriter] = None,
) -> ConversionResult:
    """
    Convert an HTML file into a template plus a mapping file.

    Returns the ConversionResult with document_path and mapping_path set.
    """
    lang = lang or config.DEFAULT_LANG
    writer = writer or OutputWriter(
        extension=config.TEMPLATE_EXTENSION,
        output_dir=config.OUTPUT_DIR or None,
    )

    findings = load_findings(json_file_path)
    document = read_document(html_file_path)
    result = convert_document(document, findings, lang=lang, rewriter=rewriter)

    document_path, mapping_path = writer.write(html_file_path, lang, result.document, result.mapping)

    result.mapping_path = str(mapping_path)
    result.document_path = str(document_path)
    return result
