"""Prefix trie over the code-point sequences of every known emoji."""
import logging
from enum import Enum
from typing import Dict, Iterable, Optional, Sequence, Union

from .emoji import Emoji

logger = logging.getLogger(__name__)

CodePoints = Union[str, Sequence[Union[str, int]]]


class Matches(Enum):
    """Outcome of classifying a code-point sequence against the trie."""
    EXACT = 'exact'
    PARTIAL = 'partial'
    NONE = 'none'

    def exact_match(self) -> bool:
        return self is Matches.EXACT

    def possible_match(self) -> bool:
        """True when more input could still complete (or already is) a match."""
        return self is not Matches.NONE

    def impossible_match(self) -> bool:
        return self is Matches.NONE


class Node:
    """Trie node; `emoji` is set when a sequence terminates here."""
    __slots__ = ('children', 'emoji')

    def __init__(self):
        self.children: Dict[str, 'Node'] = {}
        self.emoji: Optional[Emoji] = None

    @property
    def is_terminal(self) -> bool:
        return self.emoji is not None

    def child(self, char: str) -> Optional['Node']:
        return self.children.get(char)


def _as_chars(sequence: CodePoints) -> Iterable[str]:
    """Accept a str or a sequence of one-character strings / integer code points."""
    if isinstance(sequence, str):
        return sequence
    return [chr(item) if isinstance(item, int) else item for item in sequence]


class EmojiTrie:
    """
    Read-only trie built once from the catalog.

    Each edge is one code point. A path from the root to a terminal node
    spells exactly one emoji sequence.
    """

    def __init__(self, emojis: Iterable[Emoji]):
        self.root = Node()
        self.max_depth = 0
        self.size = 0

        for emoji in emojis:
            self._insert(emoji)

        logger.debug(f"Built emoji trie: {self.size} sequences, max depth {self.max_depth}")

    def _insert(self, emoji: Emoji) -> None:
        node = self.root
        for char in emoji.unicode:
            node = node.children.setdefault(char, Node())
        node.emoji = emoji
        self.size += 1
        self.max_depth = max(self.max_depth, len(emoji.unicode))

    def _walk(self, sequence: CodePoints) -> Optional[Node]:
        node = self.root
        for char in _as_chars(sequence):
            node = node.child(char)
            if node is None:
                return None
        return node

    def classify(self, sequence: Optional[CodePoints]) -> Matches:
        """
        Classify a sequence as an emoji, a strict prefix of one, or neither.

        Args:
            sequence: Code points to test (str, list of chars or ints)

        Returns:
            Matches.EXACT if the sequence is an emoji (even if it also prefixes
            a longer one), Matches.PARTIAL if it only prefixes one, otherwise
            Matches.NONE
        """
        if sequence is None:
            return Matches.NONE

        node = self._walk(sequence)
        if node is None:
            return Matches.NONE
        if node.is_terminal:
            return Matches.EXACT
        if node.children:
            return Matches.PARTIAL
        return Matches.NONE

    def lookup_exact(self, sequence: Optional[CodePoints]) -> Optional[Emoji]:
        """Return the emoji whose sequence is exactly `sequence`, or None."""
        if sequence is None:
            return None

        node = self._walk(sequence)
        return node.emoji if node is not None else None

    def __len__(self) -> int:
        return self.size
