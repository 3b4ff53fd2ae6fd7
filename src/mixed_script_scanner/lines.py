from __future__ import annotations

import re
from typing import Iterator, List

from .models import Document, Line

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def iter_document_lines(doc: Document) -> Iterator[Line]:
    """Yield the lines of a document with their absolute start offsets."""
    if not doc.text:
        return

    start_char = 0
    number = 1
    for line_break in LINE_BREAK_PATTERN.finditer(doc.text):
        yield Line(
            number=number,
            start=start_char,
            text=doc.text[start_char : line_break.start()],
        )
        start_char = line_break.end()
        number += 1

    # A trailing line break does not open another line.
    if start_char < len(doc.text):
        yield Line(number=number, start=start_char, text=doc.text[start_char:])


def split_lines(doc: Document) -> List[Line]:
    """Split a document into lines; an empty document yields no lines."""
    return list(iter_document_lines(doc))
