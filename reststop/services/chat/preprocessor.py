"""Preprocessing utilities for chat utterances."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PreprocessedQuery:
    """Normalized view of the user's free-text utterance."""

    original_text: str
    normalized_text: str

    @property
    def is_empty(self) -> bool:
        return not self.normalized_text


class QueryPreprocessor:
    """Collapse whitespace and lowercase so keyword triggers match reliably."""

    def process(self, query: str) -> PreprocessedQuery:
        cleaned = self._normalize_whitespace(query or "")
        return PreprocessedQuery(
            original_text=query,
            normalized_text=cleaned.lower(),
        )

    @staticmethod
    def _normalize_whitespace(text: str) -> str:
        return " ".join(text.strip().split())
