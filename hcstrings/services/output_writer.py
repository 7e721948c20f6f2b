"""
Output Writer
=============
Derives output paths and writes the template and the mapping file.

    document:  foo/bar.html → foo/bar.hbs (next to the input)
    mapping:   <output_dir>/bar.<lang>.json (output_dir defaults to cwd)

Both files are staged as temp files and renamed into place, the template
first. They are written with newline="" so the line terminators already
present in the rewritten text reach the disk unchanged.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from hcstrings.core.constants import MAPPING_EXTENSION, TEMPLATE_EXTENSION
from hcstrings.rewriter.mapping_builder import serialize_mapping

logger = logging.getLogger(__name__)


def template_path_for(document_path: str, extension: str = TEMPLATE_EXTENSION) -> Path:
    return Path(document_path).with_suffix(f".{extension.lstrip('.')}")


def mapping_path_for(document_path: str, lang: str, output_dir: Optional[str] = None) -> Path:
    name = f"{Path(document_path).stem}.{lang}.{MAPPING_EXTENSION}"
    return Path(output_dir or os.getcwd()) / name


def _stage(path: Path, content: str) -> str:
    """Write content to a temp file beside path; return the temp file name."""
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except BaseException:
        os.unlink(tmp)
        raise
    return tmp


class OutputWriter:
    """Writes the two artifacts of a conversion run."""

    def __init__(self, extension: str = TEMPLATE_EXTENSION, output_dir: Optional[str] = None) -> None:
        self.extension = extension
        self.output_dir = output_dir

    def write(
        self,
        document_path: str,
        lang: str,
        content: str,
        mapping: Dict[str, str],
    ) -> Tuple[Path, Path]:
        """
        Write the template and the mapping file.

        Both files are staged as temp files first and only renamed into
        place once both writes succeeded. If the template rename fails the
        mapping file is not created.

        Returns
        -------
        tuple[Path, Path]
            (template path, mapping path)
        """
        template_path = template_path_for(document_path, self.extension)
        mapping_path = mapping_path_for(document_path, lang, self.output_dir)

        staged: List[str] = []
        try:
            staged.append(_stage(template_path, content))
            staged.append(_stage(mapping_path, serialize_mapping(mapping)))

            logger.info("Writing template to %s", template_path)
            os.replace(staged[0], template_path)
            logger.info("Writing %d key(s) to %s", len(mapping), mapping_path)
            os.replace(staged[1], mapping_path)
        finally:
            for tmp in staged:
                if os.path.exists(tmp):
                    os.unlink(tmp)

        return template_path, mapping_path
