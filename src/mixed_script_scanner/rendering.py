from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from .models import Highlight

logger = logging.getLogger(__name__)


class HighlightRenderer(ABC):
    """Abstract collaborator that presents highlights to the user."""

    @abstractmethod
    def render(self, highlight: Highlight) -> None:
        """Present a single highlight."""
        raise NotImplementedError


class NoOpRenderer(HighlightRenderer):
    """Discards every highlight."""

    def render(self, highlight: Highlight) -> None:
        return None


class CollectingRenderer(HighlightRenderer):
    """Keeps every rendered highlight in arrival order."""

    def __init__(self) -> None:
        self.highlights: List[Highlight] = []

    def render(self, highlight: Highlight) -> None:
        logger.debug(
            "Highlight %s:%d:%d %r",
            highlight.doc_id,
            highlight.line,
            highlight.column,
            highlight.text,
        )
        self.highlights.append(highlight)
