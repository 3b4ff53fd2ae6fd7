from __future__ import annotations

import logging
from typing import Dict, List

from .config import ScannerConfig
from .lines import iter_document_lines
from .models import Document, DocumentReport, Highlight, Line
from .rendering import HighlightRenderer
from .scanner import scan

LOGGER = logging.getLogger(__name__)


def highlight_line(line: Line, doc_id: str) -> List[Highlight]:
    """Scan one line and lift every match to absolute document coordinates."""
    return [
        Highlight(
            doc_id=doc_id,
            line=line.number,
            column=match.start + 1,
            start=line.start + match.start,
            length=match.length,
            text=match.text,
        )
        for match in scan(line.text)
    ]


def process_document(
    doc: Document,
    config: ScannerConfig,
    renderer: HighlightRenderer,
) -> DocumentReport:
    """Scan every line of a document and hand each highlight to the renderer."""
    report = DocumentReport(doc_id=doc.doc_id)
    for line in iter_document_lines(doc):
        if not _within_length_limit(line, config):
            LOGGER.warning(
                "Skipping %s line %d (%d chars exceeds max_line_length=%d)",
                doc.doc_id,
                line.number,
                len(line.text),
                config.max_line_length,
            )
            report.skipped_lines.append(line.number)
            continue
        for highlight in highlight_line(line, doc.doc_id):
            renderer.render(highlight)
            report.highlights.append(highlight)
    return report


def process_corpus(
    documents: List[Document],
    config: ScannerConfig,
    renderer: HighlightRenderer,
) -> Dict[str, DocumentReport]:
    """Process all documents and return the per-document reports."""
    results: Dict[str, DocumentReport] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, config, renderer)
    total = sum(len(report.highlights) for report in results.values())
    LOGGER.info(
        "Found %d mixed-script words across %d documents", total, len(results)
    )
    return results


def _within_length_limit(line: Line, config: ScannerConfig) -> bool:
    if config.max_line_length is None:
        return True
    return len(line.text) <= config.max_line_length
