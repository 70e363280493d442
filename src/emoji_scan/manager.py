"""Emoji index, recognition trie and search functions over a loaded catalog."""
import logging
import threading
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Union

from .catalog import CatalogError, load_catalog
from .emoji import Emoji, EmojiCategory
from .scanner import UnicodeCandidate, iter_unicode_candidates, next_unicode_candidate
from .trie import CodePoints, EmojiTrie, Matches

logger = logging.getLogger(__name__)

ALIAS_DELIMITER = ':'


def trim_alias(alias: str) -> str:
    """Strip a single leading and a single trailing ':' from an alias."""
    start = 1 if alias.startswith(ALIAS_DELIMITER) else 0
    end = len(alias) - 1 if alias.endswith(ALIAS_DELIMITER) and len(alias) > start else len(alias)
    return alias[start:end]


class EmojiManager:
    """
    Holds the loaded emojis and provides search functions.

    Built once from an ordered list of records and never mutated afterwards,
    so a single instance can be shared between threads.
    """

    def __init__(self, emojis: Iterable[Emoji]):
        emojis = list(emojis)
        if not emojis:
            raise CatalogError("Cannot build an emoji index from an empty catalog")

        by_alias: Dict[str, Emoji] = {}
        by_tag: Dict[str, Set[Emoji]] = {}
        by_category: Dict[EmojiCategory, Set[Emoji]] = {}
        seen: Set[str] = set()

        for emoji in emojis:
            if emoji.unicode in seen:
                raise CatalogError(f"Duplicate emoji sequence {emoji.code_points}")
            seen.add(emoji.unicode)

            by_category.setdefault(emoji.category, set()).add(emoji)
            for tag in emoji.tags:
                by_tag.setdefault(tag, set()).add(emoji)
            for alias in emoji.aliases:
                by_alias[alias] = emoji

        self._by_alias = by_alias
        self._by_tag = {tag: frozenset(items) for tag, items in by_tag.items()}
        self._by_category = {category: frozenset(items) for category, items in by_category.items()}
        self._trie = EmojiTrie(emojis)
        # Longest sequences first so a prefix never shadows a longer emoji
        self._all = tuple(sorted(emojis, key=lambda emoji: len(emoji.unicode), reverse=True))

        logger.debug(f"Indexed {len(self._all)} emojis, {len(self._by_alias)} aliases, {len(self._by_tag)} tags")

    @classmethod
    def from_catalog(cls, path: Optional[str] = None) -> 'EmojiManager':
        return cls(load_catalog(path))

    @property
    def trie(self) -> EmojiTrie:
        return self._trie

    # ------------------------------------------------------------------
    # Index lookups
    # ------------------------------------------------------------------

    def get_for_alias(self, alias: Optional[str]) -> Optional[Emoji]:
        """
        Returns the emoji for a given alias.

        The alias may be wrapped in ':' (":smile:", "smile:", ":smile").
        """
        if not alias:
            return None
        return self._by_alias.get(trim_alias(alias))

    def get_for_tag(self, tag: Optional[str]) -> Optional[FrozenSet[Emoji]]:
        """Returns the emojis for a given tag, None if the tag is unknown."""
        if tag is None:
            return None
        return self._by_tag.get(tag)

    def get_for_category(self, category: Union[EmojiCategory, str, None]) -> Optional[FrozenSet[Emoji]]:
        if category is None:
            return None
        if not isinstance(category, EmojiCategory):
            category = EmojiCategory.from_name(category)
        return self._by_category.get(category)

    def get_by_unicode(self, unicode: Optional[str]) -> Optional[Emoji]:
        """Returns the emoji whose sequence is exactly `unicode`."""
        if unicode is None:
            return None
        return self._trie.lookup_exact(unicode)

    def get_all(self) -> List[Emoji]:
        """All emojis, longest sequences first."""
        return list(self._all)

    def get_all_tags(self) -> Set[str]:
        return set(self._by_tag)

    # ------------------------------------------------------------------
    # Recognition
    # ------------------------------------------------------------------

    def classify(self, sequence: Optional[CodePoints]) -> Matches:
        """
        Checks if a sequence of chars is an emoji, part of one, or neither.

        Returns:
            Matches.EXACT if the sequence in its entirety is an emoji,
            Matches.PARTIAL if it is a prefix of an emoji,
            Matches.NONE otherwise
        """
        return self._trie.classify(sequence)

    def lookup_exact(self, sequence: Optional[CodePoints]) -> Optional[Emoji]:
        return self._trie.lookup_exact(sequence)

    def next_unicode_candidate(self, text: Optional[str], start: int = 0) -> Optional[UnicodeCandidate]:
        return next_unicode_candidate(self._trie, text, start)

    def iter_unicode_candidates(self, text: Optional[str]) -> Iterator[UnicodeCandidate]:
        return iter_unicode_candidates(self._trie, text)

    def is_emoji(self, text: Optional[str]) -> bool:
        """True if the whole string is one emoji, optionally with its skin-tone modifier."""
        if text is None:
            return False

        candidate = self.next_unicode_candidate(text, 0)
        return (candidate is not None
                and candidate.start_index == 0
                and candidate.fitzpatrick_end_index == len(text))

    def contains_emoji(self, text: Optional[str]) -> bool:
        if text is None:
            return False
        return self.next_unicode_candidate(text, 0) is not None

    def is_only_emojis(self, text: Optional[str]) -> bool:
        """True if removing every emoji from the string leaves nothing behind."""
        if text is None:
            return False

        position = 0
        for candidate in self.iter_unicode_candidates(text):
            if candidate.start_index != position:
                return False
            position = candidate.fitzpatrick_end_index
        return position == len(text)

    def __len__(self) -> int:
        return len(self._all)


_build_lock = threading.Lock()


@lru_cache(maxsize=None)
def _build_manager(catalog_path: Optional[str]) -> EmojiManager:
    logger.info(f"Initializing emoji manager from {catalog_path or 'bundled catalog'}")
    return EmojiManager.from_catalog(catalog_path)


def get_manager(catalog_path: Optional[str] = None) -> EmojiManager:
    """
    Process-wide, read-only manager built on first use.

    Later calls with the same catalog path return the same instance, also when
    the first calls race from several threads. A failed build raises
    CatalogError and is retried on the next call.
    """
    # lru_cache alone lets concurrent first calls each run the build
    with _build_lock:
        return _build_manager(catalog_path or None)


# ============================================================================
# MODULE-LEVEL SHORTCUTS (default catalog)
# ============================================================================

def get_for_alias(alias: Optional[str]) -> Optional[Emoji]:
    return get_manager().get_for_alias(alias)


def get_for_tag(tag: Optional[str]) -> Optional[FrozenSet[Emoji]]:
    return get_manager().get_for_tag(tag)


def get_for_category(category: Union[EmojiCategory, str, None]) -> Optional[FrozenSet[Emoji]]:
    return get_manager().get_for_category(category)


def get_by_unicode(unicode: Optional[str]) -> Optional[Emoji]:
    return get_manager().get_by_unicode(unicode)


def get_all() -> List[Emoji]:
    return get_manager().get_all()


def get_all_tags() -> Set[str]:
    return get_manager().get_all_tags()


def classify(sequence: Optional[CodePoints]) -> Matches:
    return get_manager().classify(sequence)


def is_emoji(text: Optional[str]) -> bool:
    return get_manager().is_emoji(text)


def contains_emoji(text: Optional[str]) -> bool:
    return get_manager().contains_emoji(text)


def is_only_emojis(text: Optional[str]) -> bool:
    return get_manager().is_only_emojis(text)
