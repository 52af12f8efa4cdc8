# relevance/tokenize.py
"""Tokenizer and record-to-text rendering for relevance scoring."""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, List
import re

from .errors import InvalidArgument

_TOKEN = re.compile(r"[^\W_]+")


def tokenize(text: str) -> List[str]:
    """Split `text` into lowercase runs of letters and digits."""
    if not isinstance(text, str):
        raise InvalidArgument(f"tokenize: expected str, got {type(text).__name__}")
    return _TOKEN.findall(text.lower())


def field(record: Any, name: str, default: Any = None) -> Any:
    """Read `name` from a mapping or an attribute object."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def _text(record: Any, name: str, required: bool = False) -> str:
    value = field(record, name)
    if value is None and not required:
        return ""
    if not isinstance(value, str):
        raise InvalidArgument(f"{name}: expected str, got {type(value).__name__}")
    return value


def _keywords(record: Any) -> List[str]:
    value = field(record, "keywords")
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidArgument("keywords: expected a list of strings")
    for kw in value:
        if not isinstance(kw, str):
            raise InvalidArgument("keywords: expected a list of strings")
    return list(value)


def query_document(problem: Any) -> str:
    # title, domain, keywords, description
    keywords = " ".join(k.lower() for k in _keywords(problem))
    parts = [
        _text(problem, "title").lower(),
        _text(problem, "domain").lower(),
        keywords,
        _text(problem, "description", required=True).lower(),
    ]
    return " ".join(parts)


def candidate_document(researcher: Any) -> str:
    keywords = " ".join(k.lower() for k in _keywords(researcher))
    return f"{_text(researcher, 'description', required=True).lower()} {keywords}"
