"""
prefix-abbrev: unique-prefix abbreviation of token sequences.

Finds, for every sequence in a collection, the shortest prefix that no other
sequence shares. Applied to filesystem paths it yields a quick
common-directory heuristic.
"""

__version__ = "0.1.0"

from .tokenizer import split_sequence, join_sequence
from .abbreviation import (
    abbreviate,
    build_trie,
    expand_abbreviation,
    TrieNode,
)
from .sequence_pack import load_sequences, parse_sequences
from .common import (
    AbbrevResult,
    common_directory,
    common_parent,
    join_directory,
    shortest_abbreviations,
    summarize,
)
