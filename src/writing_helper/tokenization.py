from __future__ import annotations

from typing import List

from .config import AnalyzerConfig


def clean_word(raw_word: str) -> str:
    """Drop every non-alphabetic character and lowercase what remains."""
    # ASCII letters only, so lowercasing can never introduce combining marks.
    return "".join(ch.lower() for ch in raw_word if ch.isascii() and ch.isalpha())


def tokenize(passage: str, config: AnalyzerConfig | None = None) -> List[str]:
    """Split a passage on whitespace into normalized word tokens."""
    cfg = config or AnalyzerConfig()
    tokens: List[str] = []
    for raw_word in passage.split():
        cleaned = clean_word(raw_word)
        if len(cleaned) >= cfg.min_token_length:
            tokens.append(cleaned)
    return tokens
