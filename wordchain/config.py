#!/usr/bin/env python3
"""
Configuration
=============
Run defaults for building and sampling chains. Fields left as ``None``
are filled from ``configs/app.yaml`` (see ``wordchain.settings``).
"""

from dataclasses import dataclass
from typing import Optional

from wordchain.settings import get_setting


def _require_int(value, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass
class ChainConfig:
    """Configuration for a build/generate run."""
    max_order: Optional[int] = None
    max_words: Optional[int] = None
    count: Optional[int] = None
    encoding: Optional[str] = None
    top_prefixes: Optional[int] = None

    def __post_init__(self):
        if self.max_order is None:
            self.max_order = get_setting("chain.max_order", 2)
        if self.max_words is None:
            self.max_words = get_setting("generate.max_words", 50)
        if self.count is None:
            self.count = get_setting("generate.count", 1)
        if self.encoding is None:
            self.encoding = get_setting("sources.encoding", "utf-8")
        if self.top_prefixes is None:
            self.top_prefixes = get_setting("stats.top_prefixes", 10)

        _require_int(self.max_order, "chain.max_order", 1)
        _require_int(self.max_words, "generate.max_words", 0)
        _require_int(self.count, "generate.count", 0)
        _require_int(self.top_prefixes, "stats.top_prefixes", 0)
