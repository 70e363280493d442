"""Left-to-right scanner finding the longest emoji at each position of a text."""
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .emoji import Emoji, Fitzpatrick
from .trie import EmojiTrie

# All indices below are positions in a Python str, i.e. code points.


@dataclass(frozen=True)
class UnicodeCandidate:
    """One recognized emoji occurrence inside a specific text."""
    emoji: Emoji
    start_index: int
    end_index: int
    fitzpatrick: Optional[Fitzpatrick] = None
    fitzpatrick_end_index: Optional[int] = None

    def __post_init__(self):
        if self.fitzpatrick_end_index is None:
            end = self.end_index + (1 if self.fitzpatrick else 0)
            object.__setattr__(self, 'fitzpatrick_end_index', end)

    @property
    def has_fitzpatrick(self) -> bool:
        return self.fitzpatrick is not None

    @property
    def fitzpatrick_type(self) -> Optional[str]:
        return self.fitzpatrick.type_name if self.fitzpatrick else None

    @property
    def fitzpatrick_unicode(self) -> str:
        return self.fitzpatrick.unicode if self.fitzpatrick else ''

    def text(self) -> str:
        """The matched emoji including its modifier, if any."""
        return self.emoji.unicode + self.fitzpatrick_unicode


def longest_match_at(trie: EmojiTrie, text: str, start: int) -> Tuple[Optional[Emoji], int]:
    """
    Walk the trie from the root over text[start:], keeping the last terminal seen.

    Returns:
        Tuple of (emoji or None, exclusive end index of the match)
    """
    node = trie.root
    best: Optional[Emoji] = None
    best_end = start

    for index in range(start, len(text)):
        node = node.child(text[index])
        if node is None:
            break
        if node.is_terminal:
            best = node.emoji
            best_end = index + 1
        if not node.children:
            break

    return best, best_end


def next_unicode_candidate(trie: EmojiTrie, text: Optional[str], start: int = 0) -> Optional[UnicodeCandidate]:
    """
    Find the first emoji occurrence at or after `start`.

    Args:
        trie: Recognition trie
        text: Text to scan
        start: Code-point offset to start from

    Returns:
        The candidate for the first position holding an emoji, or None
    """
    if not text:
        return None

    for index in range(max(start, 0), len(text)):
        emoji, end = longest_match_at(trie, text, index)
        if emoji is None:
            continue

        modifier = None
        if emoji.supports_fitzpatrick and end < len(text):
            modifier = Fitzpatrick.from_unicode(text[end])
        return UnicodeCandidate(emoji=emoji, start_index=index, end_index=end, fitzpatrick=modifier)

    return None


def iter_unicode_candidates(trie: EmojiTrie, text: Optional[str]) -> Iterator[UnicodeCandidate]:
    """Yield successive non-overlapping candidates from left to right."""
    position = 0
    while True:
        candidate = next_unicode_candidate(trie, text, position)
        if candidate is None:
            return
        yield candidate
        position = candidate.fitzpatrick_end_index
