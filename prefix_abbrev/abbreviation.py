"""
Unique-prefix abbreviation of token sequences.

Builds a trie from a collection of token sequences, then resolves it
bottom-up to find, for each sequence, the shortest prefix (in tokens) that
is not a prefix of any other sequence in the collection.

Key design rule: the "a sequence ends here" marker lives in its own field on
the node, never in the children mapping. Any string is a valid token.

Emission order is part of the contract: at every node the terminal branch is
handled first, then child tokens in sorted order. Callers that pick "the
shortest abbreviation" rely on this for stable tie-breaking.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)


# ── Trie ────────────────────────────────────────────────────────────────────

class TrieNode:
    """One node of the abbreviation trie."""

    __slots__ = ("children", "terminal", "resolved")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        # Original sequence ending exactly at this node, if any
        self.terminal: Optional[Sequence[str]] = None
        # Set once an ambiguous node has been settled; chain walks stop here
        self.resolved = False

    @property
    def branch_count(self) -> int:
        return len(self.children) + (self.terminal is not None)


def build_trie(sequences) -> TrieNode:
    """Insert every sequence into a fresh trie and return its root.

    Duplicate sequences land on the same terminal node; the first one
    inserted is kept.
    """
    root = TrieNode()
    nodes = 1
    for sequence in sequences:
        node = root
        for token in sequence:
            child = node.children.get(token)
            if child is None:
                child = node.children[token] = TrieNode()
                nodes += 1
            node = child
        if node.terminal is None:
            node.terminal = sequence
    logger.debug(f"Built abbreviation trie: {nodes} nodes")
    return root


# ── Resolution ──────────────────────────────────────────────────────────────

def _walk_chain(node: TrieNode, depth: int, emit: Callable[[List[str]], None]):
    """Follow a single-child chain down from `node` (at `depth`).

    Emits the first `depth` tokens of the sequence found at the end of the
    chain. Stops silently on a node that was already resolved.
    """
    while not node.resolved:
        if node.terminal is not None:
            emit(list(node.terminal[:depth]))
            return
        # Unresolved non-terminal nodes have exactly one child
        (node,) = node.children.values()


def _enter(node: TrieNode, depth: int, emit: Callable[[List[str]], None]):
    """Open `node` for resolution; returns its work-stack entry."""
    if node.branch_count > 1 and node.terminal is not None:
        # A sequence that is a strict prefix of another one: nothing shorter
        # distinguishes it, so it abbreviates to itself.
        emit(list(node.terminal))
    children = iter([node.children[token] for token in sorted(node.children)])
    return node, depth, children


def _resolve(root: TrieNode, emit: Callable[[List[str]], None]):
    """Depth-first, post-order resolution of the whole trie.

    Uses an explicit stack so sequence length is not bounded by the
    interpreter's recursion limit. Each child is walked right after its own
    subtree is finished, and an ambiguous node is marked resolved once all
    of its children have been walked.
    """
    stack = [_enter(root, 0, emit)]
    while stack:
        node, depth, children = stack[-1]
        child = next(children, None)
        if child is not None:
            stack.append(_enter(child, depth + 1, emit))
            continue

        stack.pop()
        if node.branch_count > 1:
            node.resolved = True
        if stack and stack[-1][0].branch_count > 1:
            _walk_chain(node, depth, emit)


def abbreviate(sequences, callback: Optional[Callable[[List[str]], None]] = None):
    """Compute the unique prefix of every sequence in `sequences`.

    Args:
        sequences: Iterable of token sequences (lists/tuples of strings).
        callback: Optional callable invoked once per abbreviation, in
                  computation order, instead of collecting results.

    Returns:
        list of abbreviations (each a new list of tokens). Empty when a
        callback is given, and empty when fewer than two distinct sequences
        are supplied.
    """
    abbrevs: List[List[str]] = []
    emit = callback if callback is not None else abbrevs.append

    count = 0

    def counted_emit(abbrev):
        nonlocal count
        count += 1
        emit(abbrev)

    _resolve(build_trie(sequences), counted_emit)
    logger.debug(f"Emitted {count} abbreviations")
    return abbrevs


def expand_abbreviation(abbrev, sequences):
    """Reverse lookup: find the one sequence that starts with `abbrev`.

    Returns the matching sequence as a list, or None when no sequence (or
    more than one distinct sequence) starts with the abbreviation.
    """
    prefix = list(abbrev)
    width = len(prefix)
    matches = {tuple(seq) for seq in sequences if list(seq[:width]) == prefix}
    if len(matches) != 1:
        return None
    return list(matches.pop())
