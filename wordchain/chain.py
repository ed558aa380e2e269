#!/usr/bin/env python3
"""
Word Chain Model
================
Word-level Markov chain that tracks every prefix length from 1 up to
``max_order`` at the same time.

Training:
- Each corpus line is an independent sequence; prefix windows start empty
  on every line.
- Every word is recorded as a continuation of the current window of every
  order, then all windows shift.
- At the end of a line, END_LINE is recorded as a continuation of every
  window.

Generation:
- Windows start empty once per call and carry across steps.
- Continuations of all orders are pooled, duplicates included, and one is
  drawn uniformly. Drawing END_LINE triggers exactly one redraw.

Usage:
    from wordchain import ChainModel

    model = ChainModel(max_order=2, seed=7)
    model.build(open('corpus.txt'), open('avoid.txt'))
    print(model.generate(30))
"""

import io
import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from .avoid import is_avoided, load_avoid_set, obfuscate

logger = logging.getLogger(__name__)

# Reserved continuation meaning "the line ended here"
END_LINE = '____ENDLINE'

TextSource = Union[str, Iterable[str]]


class Prefix:
    """Fixed-length window of the most recent words."""

    __slots__ = ('words',)

    def __init__(self, order: int):
        self.words = [''] * order

    @classmethod
    def new(cls, order: int) -> 'Prefix':
        return cls(order)

    def __len__(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Prefix({self.words!r})"

    def serialize(self) -> str:
        """Join the words with single spaces (the transitions key)."""
        return ' '.join(self.words)

    def shift(self, word: str):
        """Drop the oldest word and append ``word``."""
        del self.words[0]
        self.words.append(word)


def windows(max_order: int) -> List[Prefix]:
    """Fresh windows for orders 1..max_order."""
    return [Prefix.new(order) for order in range(1, max_order + 1)]


def key_order(key: str) -> int:
    """Order of a serialized prefix (words never contain spaces)."""
    return key.count(' ') + 1


def _lines(source: TextSource) -> Iterable[str]:
    if isinstance(source, str):
        # "\n" breaks only, as when reading a file
        return io.StringIO(source)
    return source


@dataclass
class ChainStats:
    """Summary of a built transition table."""
    max_order: int
    prefixes: int = 0
    observations: int = 0
    line_ends: int = 0
    prefixes_by_order: Dict[int, int] = field(default_factory=dict)
    top_prefixes: List[tuple] = field(default_factory=list)


class ChainModel:
    """
    Variable-order word chain.

    Args:
        max_order: Longest prefix tracked (all shorter orders are tracked too)
        seed: Seed for the model's own random source
        rng: Random source to use instead of a seeded one
    """

    def __init__(self,
                 max_order: int = 2,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        if isinstance(max_order, bool) or not isinstance(max_order, int):
            raise ValueError(f"max_order must be an integer, got {max_order!r}")
        if max_order < 1:
            raise ValueError(f"max_order must be at least 1, got {max_order}")

        self.max_order = max_order
        self.transitions: Dict[str, List[str]] = {}
        self.rng = rng if rng is not None else random.Random(seed)
        self._built = False

    @property
    def built(self) -> bool:
        return self._built

    def _observe(self, key: str, word: str):
        observed = self.transitions.get(key)
        if observed is None:
            self.transitions[key] = [word]
        else:
            observed.append(word)

    def build(self,
              text_source: TextSource,
              avoid_source: Optional[TextSource] = None) -> 'ChainModel':
        """
        Learn transitions from a corpus in a single pass.

        Args:
            text_source: Corpus text or iterable of lines
            avoid_source: Avoid-list text or iterable of lines (optional)

        Returns:
            The model itself.

        Raises:
            RuntimeError: If the model has already been built
        """
        if self._built:
            raise RuntimeError("ChainModel.build() may only be called once")

        avoid = load_avoid_set(avoid_source)
        lines = words = hidden = 0

        for line in _lines(text_source):
            lines += 1
            prefixes = windows(self.max_order)

            for word in line.split():
                words += 1
                if is_avoided(word, avoid):
                    word = obfuscate(word)
                    hidden += 1
                for prefix in prefixes:
                    self._observe(prefix.serialize(), word)
                    prefix.shift(word)

            for prefix in prefixes:
                self._observe(prefix.serialize(), END_LINE)

        self._built = True
        logger.debug(
            f"Built order-{self.max_order} chain: {lines} lines, {words} words "
            f"({hidden} obfuscated, {len(avoid)} avoid words), "
            f"{len(self.transitions)} prefixes"
        )
        return self

    def candidates(self, prefixes: List[Prefix]) -> List[str]:
        """Pool the continuations of every window, duplicates kept."""
        pool = []
        for prefix in prefixes:
            pool.extend(self.transitions.get(prefix.serialize(), ()))
        return pool

    def generate(self, max_words: int, rng: Optional[random.Random] = None) -> str:
        """
        Generate up to ``max_words`` words.

        END_LINE draws consume a word slot but are removed from the result,
        so the returned text may have fewer words (and doubled spaces where
        a line end was drawn).

        Args:
            max_words: Maximum number of steps
            rng: Random source for this call (defaults to the model's)
        """
        if rng is None:
            rng = self.rng
        prefixes = windows(self.max_order)
        words = []

        for _ in range(max_words):
            pool = self.candidates(prefixes)
            if not pool:
                break

            word = rng.choice(pool)
            if word == END_LINE:
                # make line ends less frequent; the redraw is accepted as is
                word = rng.choice(pool)

            words.append(word)
            for prefix in prefixes:
                prefix.shift(word)

        return ' '.join(words).replace(END_LINE, '')

    def generate_lines(self,
                       count: int,
                       max_words: int,
                       rng: Optional[random.Random] = None) -> List[str]:
        """Run ``count`` independent generations."""
        return [self.generate(max_words, rng=rng) for _ in range(count)]

    def stats(self, top: int = 10) -> ChainStats:
        """Summarize the transition table."""
        result = ChainStats(max_order=self.max_order)
        by_order = Counter()
        for key, observed in self.transitions.items():
            by_order[key_order(key)] += 1
            result.observations += len(observed)
            result.line_ends += observed.count(END_LINE)

        result.prefixes = len(self.transitions)
        result.prefixes_by_order = {
            order: by_order.get(order, 0) for order in range(1, self.max_order + 1)
        }
        ranked = sorted(self.transitions.items(), key=lambda kv: len(kv[1]), reverse=True)
        result.top_prefixes = [(key, len(observed)) for key, observed in ranked[:top]]
        return result
