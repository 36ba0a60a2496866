from __future__ import annotations

import io
import logging
from typing import Iterable, Iterator, Union

from .tree import AVLMap

logger = logging.getLogger(__name__)


def clean_token(token: str) -> str:
    """Lower-case `token` and strip every non-alphanumeric character.

    Lower-casing comes first since it can introduce combining marks.
    """
    return "".join(c for c in token.lower() if c.isalnum())


def iter_tokens(stream: Union[str, Iterable[str]]) -> Iterator[str]:
    """Yield whitespace-delimited tokens from `stream` in order.

    `stream` may be a string, an open text file, or any iterable of lines.
    """
    if isinstance(stream, str):
        stream = io.StringIO(stream)

    for line in stream:
        yield from line.split()


def word_frequencies(stream: Union[str, Iterable[str]]) -> AVLMap[str, int]:
    """Count how often each word occurs in `stream`.

    Words are compared after `clean_token`; tokens made up only of
    punctuation are skipped.
    """
    counts: AVLMap[str, int] = AVLMap(default_factory=int)
    n_tokens = 0
    n_dropped = 0

    for token in iter_tokens(stream):
        n_tokens += 1
        word = clean_token(token)
        if len(word) == 0:
            n_dropped += 1
            continue
        counts[word] += 1

    logger.debug(
        "read %d tokens (%d dropped), %d distinct words",
        n_tokens,
        n_dropped,
        len(counts),
    )
    return counts
