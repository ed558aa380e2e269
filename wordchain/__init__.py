#!/usr/bin/env python3
"""
wordchain - Variable-Order Word Chain Generator
===============================================

Builds a word-level Markov chain that tracks every prefix length up to a
maximum order at once, and samples new lines of text from it. Words from an
optional avoid list are hyphenated during training so they never come back
out verbatim.

Quick Start
-----------
    from wordchain import ChainModel

    model = ChainModel(max_order=2, seed=42)
    model.build(open('corpus.txt'), open('avoid.txt'))
    print(model.generate(40))

    # Or in one call
    import wordchain
    print(wordchain.generate(open('corpus.txt'), max_words=40))

Modules
-------
    wordchain.chain    - Prefix windows and the chain model
    wordchain.avoid    - Avoid-list loading and word obfuscation
    wordchain.config   - Run defaults (ChainConfig)
    wordchain.settings - YAML app config loader
    wordchain.ui       - Rich stats report

CLI Usage
---------
    python -m wordchain generate corpus.txt -n 5
    python -m wordchain stats corpus.txt
"""

__version__ = "0.1.0"

from .avoid import (
    AVOID_MIN_LENGTH,
    load_avoid_set,
    avoid_key,
    is_avoided,
    obfuscate,
)
from .chain import (
    END_LINE,
    Prefix,
    ChainModel,
    ChainStats,
    windows,
)
from .config import ChainConfig


def generate(text_source,
             avoid_source=None,
             max_words: int = None,
             max_order: int = None,
             seed: int = None) -> str:
    """
    Build a chain and generate one line of text.

    Args:
        text_source: Corpus text or iterable of lines
        avoid_source: Avoid-list text or iterable of lines
        max_words: Maximum words (default from config)
        max_order: Maximum prefix length (default from config)
        seed: Random seed

    Returns:
        Generated text
    """
    config = ChainConfig(max_order=max_order, max_words=max_words)
    model = ChainModel(max_order=config.max_order, seed=seed)
    model.build(text_source, avoid_source)
    return model.generate(config.max_words)


__all__ = [
    '__version__',
    # Chain
    'END_LINE',
    'Prefix',
    'ChainModel',
    'ChainStats',
    'windows',
    # Avoid list
    'AVOID_MIN_LENGTH',
    'load_avoid_set',
    'avoid_key',
    'is_avoided',
    'obfuscate',
    # Config
    'ChainConfig',
    # Convenience
    'generate',
]
