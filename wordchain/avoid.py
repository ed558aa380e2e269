#!/usr/bin/env python3
"""
Avoid List
==========
Words listed in an avoid source are never learned verbatim. When a corpus
word matches the list it is hyphenated after its first character
("foo" -> "f-oo"), so it still takes part in the chain but never appears
in generated text in its original spelling.

Matching is case-insensitive, ignores a single surrounding ``<``/``>``
pair, and also matches when one trailing character is dropped
("cats" matches "cat").
"""

from typing import Iterable, Union

AVOID_MIN_LENGTH = 3


def load_avoid_set(source: Union[str, Iterable[str], None]) -> frozenset:
    """
    Build the avoid set from a text source.

    Args:
        source: Text, or an iterable of lines (e.g. an open file).
            Line structure is ignored; all whitespace separates words.

    Returns:
        Lowercased words of at least ``AVOID_MIN_LENGTH`` characters.
    """
    if source is None:
        return frozenset()
    if isinstance(source, str):
        source = [source]

    words = set()
    for line in source:
        for token in line.split():
            if len(token) >= AVOID_MIN_LENGTH:
                words.add(token.lower())
    return frozenset(words)


def avoid_key(word: str) -> str:
    """Lowercase a word and strip one leading '<' and one trailing '>'."""
    key = word.lower()
    if key.startswith('<'):
        key = key[1:]
    if key.endswith('>'):
        key = key[:-1]
    return key


def is_avoided(word: str, avoid: frozenset) -> bool:
    if not avoid:
        return False
    key = avoid_key(word)
    if key in avoid:
        return True
    # one level only: "cats" -> "cat", never "ca"
    return len(key) > 1 and key[:-1] in avoid


def obfuscate(word: str) -> str:
    """Insert a hyphen after the first character."""
    return word[:1] + '-' + word[1:]
