from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

from .models import Match

LATIN_LETTERS = "A-Za-z"
CYRILLIC_LETTERS = "А-Яа-яЁё"

# A maximal run of Unicode word characters holding at least one Latin and
# one Cyrillic letter. The lookaheads cannot leave the word, so letter order
# inside the word does not matter.
MIXED_SCRIPT_PATTERN = re.compile(
    r"(?<!\w)"
    rf"(?=\w*?[{LATIN_LETTERS}])"
    rf"(?=\w*?[{CYRILLIC_LETTERS}])"
    r"\w+"
    r"(?!\w)"
)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Re-iterable view over the mixed-script words of a single line.

    Matching happens lazily; every iteration rescans ``text`` from the start,
    yielding non-overlapping matches in ascending offset order.
    """

    text: str

    def __iter__(self) -> Iterator[Match]:
        for match in MIXED_SCRIPT_PATTERN.finditer(self.text):
            yield Match(
                start=match.start(),
                length=match.end() - match.start(),
                text=match.group(),
            )

    def __bool__(self) -> bool:
        return MIXED_SCRIPT_PATTERN.search(self.text) is not None


class MixedScriptScanner:
    """Finds words that mix Latin and Cyrillic letters."""

    def scan(self, text: str) -> ScanResult:
        """Return the mixed-script words of ``text``; an empty text yields none."""
        return ScanResult(text or "")


_DEFAULT_SCANNER = MixedScriptScanner()


def scan(text: str) -> ScanResult:
    """Scan ``text`` with the shared stateless scanner."""
    return _DEFAULT_SCANNER.scan(text)


def find_mixed_words(text: str) -> List[Match]:
    """Materialize the matches of ``text`` into a list."""
    return list(scan(text))


def is_mixed_script_word(word: str) -> bool:
    """Return True when ``word`` is a single token mixing both alphabets."""
    return MIXED_SCRIPT_PATTERN.fullmatch(word) is not None
