#!/usr/bin/env python3
"""Opening corpus and avoid-list sources."""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

logger = logging.getLogger(__name__)

STDIN = '-'


@contextmanager
def open_source(path: Optional[str], encoding: str = 'utf-8') -> Iterator[Optional[TextIO]]:
    """
    Open a text source for reading.

    ``'-'`` reads from stdin (left open on exit); ``None`` yields ``None``.
    Missing or unreadable files raise ``OSError``.
    """
    if path is None:
        yield None
        return
    if path == STDIN:
        logger.debug("Reading from stdin")
        yield sys.stdin
        return

    file_path = Path(path).expanduser()
    logger.debug(f"Reading {file_path}")
    with open(file_path, 'r', encoding=encoding) as f:
        yield f
