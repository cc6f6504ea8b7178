"""
Sequence packs: input files for the abbreviation engine.

A pack is either a JSON file or a plain-text file.

Format (JSON):
    ["/home/user1/tmp/coverage/test", ["home", "user1", "tmp"], ...]

    String entries are split on the separator; list entries are used
    as-is and must contain only strings.

Format (text):
    One entry per line, split on the separator. Blank lines are skipped.
"""

import json
import logging
import os

from .tokenizer import DEFAULT_SEP, split_sequence

logger = logging.getLogger(__name__)


def _parse_entry(entry, sep, source, index):
    """Turn one raw pack entry into a token sequence, or raise ValueError."""
    if isinstance(entry, str):
        tokens = split_sequence(entry, sep)
    elif isinstance(entry, list):
        if not all(isinstance(token, str) for token in entry):
            raise ValueError(
                f"{source}: entry {index} contains non-string tokens: {entry!r}"
            )
        tokens = list(entry)
    else:
        raise ValueError(
            f"{source}: entry {index} must be a string or a list of strings, "
            f"got {type(entry).__name__}"
        )
    if not tokens:
        raise ValueError(f"{source}: entry {index} is an empty sequence")
    return tokens


def parse_sequences(entries, sep: str = DEFAULT_SEP, source: str = "<input>"):
    """Validate raw entries and turn them into token sequences.

    Args:
        entries: list of strings and/or lists of strings.
        sep: Separator used to split string entries.
        source: Name used in error messages.

    Returns:
        list of token sequences (lists of strings).
    """
    if not isinstance(entries, list):
        raise ValueError(
            f"{source}: expected a list of sequences, got {type(entries).__name__}"
        )
    return [_parse_entry(e, sep, source, i) for i, e in enumerate(entries)]


def load_sequences(path: str, sep: str = DEFAULT_SEP):
    """Load token sequences from a sequence pack file.

    Args:
        path: Path to a .json pack or a plain-text file (one entry per line).
        sep: Separator used to split string entries.

    Returns:
        list of token sequences ready for abbreviate().
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Sequence pack '{path}' not found")

    with open(path, "r", encoding="utf-8") as f:
        if path.lower().endswith(".json"):
            try:
                entries = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}: invalid JSON ({e})") from e
        else:
            entries = [line.rstrip("\r\n") for line in f if line.strip()]

    sequences = parse_sequences(entries, sep=sep, source=path)
    logger.info(f"Loaded {len(sequences)} sequences from {path}")
    return sequences
