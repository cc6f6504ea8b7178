"""
Turning strings into token sequences and back.

Paths are split with a plain separator split, so an absolute path keeps a
leading empty token ("/home/x" -> ["", "home", "x"]). Joining the tokens
back with the same separator restores the original string exactly.
"""

from typing import List

DEFAULT_SEP = "/"


def split_sequence(text: str, sep: str = DEFAULT_SEP) -> List[str]:
    """Split `text` on `sep` into a token sequence."""
    if not sep:
        raise ValueError("Separator must be a non-empty string")
    return text.split(sep)


def join_sequence(tokens, sep: str = DEFAULT_SEP) -> str:
    """Join a token sequence back into a string."""
    return sep.join(tokens)


def count_tokens(sequences) -> int:
    """Total number of tokens across a collection of sequences."""
    return sum(len(seq) for seq in sequences)
