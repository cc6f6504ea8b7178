"""
Top-level helpers built on the abbreviation engine.

Wraps `abbreviate()` with measurement/reporting and the common-directory
heuristic: abbreviate a set of paths, take the shortest abbreviation and
drop its last component.
"""

import logging
from dataclasses import dataclass, field

from .tokenizer import DEFAULT_SEP, split_sequence, join_sequence, count_tokens
from .abbreviation import abbreviate

logger = logging.getLogger(__name__)


@dataclass
class AbbrevResult:
    """Result of abbreviating a collection of sequences, with metrics."""
    abbreviations: list
    original_tokens: int
    abbreviated_tokens: int
    savings_pct: float
    sequences: int = 0
    distinct_sequences: int = 0
    shortest: list = field(default_factory=list)

    @property
    def tokens_saved(self) -> int:
        return self.original_tokens - self.abbreviated_tokens


def shortest_abbreviations(abbreviations):
    """Return every abbreviation of minimal length, in emission order."""
    if not abbreviations:
        return []
    width = min(len(a) for a in abbreviations)
    return [a for a in abbreviations if len(a) == width]


def summarize(sequences) -> AbbrevResult:
    """Abbreviate `sequences` and report how many tokens the prefixes save.

    Token counts are measured over distinct sequences only, so duplicates
    do not inflate the savings.
    """
    sequences = list(sequences)
    distinct = list(dict.fromkeys(tuple(seq) for seq in sequences))
    abbrevs = abbreviate(sequences)

    original = count_tokens(distinct)
    abbreviated = count_tokens(abbrevs)
    savings = round((1 - abbreviated / original) * 100, 1) if original and abbrevs else 0

    return AbbrevResult(
        abbreviations=abbrevs,
        original_tokens=original,
        abbreviated_tokens=abbreviated if abbrevs else original,
        savings_pct=savings,
        sequences=len(sequences),
        distinct_sequences=len(distinct),
        shortest=shortest_abbreviations(abbrevs),
    )


def common_directory(paths, sep: str = DEFAULT_SEP) -> str:
    """Guess the directory shared by `paths`.

    The first shortest abbreviation minus its last component. A single
    distinct path gives its parent directory.

    Example:
        >>> common_directory([
        ...     "/home/user1/tmp/coverage/test",
        ...     "/home/user1/tmp/covert/operator",
        ...     "/home/user1/tmp/coven/members",
        ... ])
        '/home/user1/tmp'
    """
    return join_directory(common_parent([split_sequence(p, sep) for p in paths]), sep)


def join_directory(tokens, sep: str = DEFAULT_SEP) -> str:
    """Join directory tokens; the bare root ([""]) joins to `sep` itself."""
    if list(tokens) == [""]:
        return sep
    return join_sequence(tokens, sep)


def common_parent(sequences):
    """Token-level version of common_directory()."""
    sequences = list(sequences)
    if not sequences:
        raise ValueError("common_directory() needs at least one path")

    shortest = shortest_abbreviations(abbreviate(sequences))
    if shortest:
        chosen = shortest[0]
    else:
        # Only one distinct path
        chosen = list(sequences[0])
        logger.debug("Single distinct path, using its parent directory")

    return chosen[:-1]
