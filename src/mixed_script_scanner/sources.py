from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from .models import Document

LOGGER = logging.getLogger(__name__)


class SourceReadError(RuntimeError):
    """Raised when an input file cannot be read as text."""


def load_documents(
    input_path: Path, extensions: Sequence[str], encoding: str = "utf-8"
) -> List[Document]:
    """Expand a file or directory into documents keyed by their relative path."""
    if input_path.is_file():
        return [document_from_file(input_path, input_path.name, encoding)]

    suffixes = {suffix.lower() for suffix in extensions}
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in suffixes
    )
    documents: List[Document] = []
    for file in files:
        # Relative POSIX paths keep doc IDs stable across platforms.
        relative_id = file.relative_to(input_path).as_posix()
        documents.append(document_from_file(file, relative_id, encoding))
    LOGGER.info("Loaded %d documents from %s", len(documents), input_path)
    return documents


def document_from_file(path: Path, doc_id: str, encoding: str = "utf-8") -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        # newline="" keeps \r\n intact so offsets match the file on disk.
        with path.open("r", encoding=encoding, newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise SourceReadError(f"Unable to decode {path} as {encoding}") from exc
    except OSError as exc:
        raise SourceReadError(f"Unable to read {path}: {exc}") from exc
    return Document(doc_id=doc_id, text=text)
