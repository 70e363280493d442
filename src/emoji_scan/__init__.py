"""Emoji recognition and lookup over a static emoji catalog."""
from .catalog import CatalogError, load_catalog
from .emoji import Emoji, EmojiCategory, Fitzpatrick
from .manager import (
    EmojiManager,
    get_manager,
    get_for_alias,
    get_for_tag,
    get_for_category,
    get_by_unicode,
    get_all,
    get_all_tags,
    classify,
    is_emoji,
    contains_emoji,
    is_only_emojis,
)
from .scanner import UnicodeCandidate, next_unicode_candidate, iter_unicode_candidates
from .trie import EmojiTrie, Matches
from .version import CATALOG_SCHEMA_VERSION

__all__ = [
    'CatalogError', 'load_catalog',
    'Emoji', 'EmojiCategory', 'Fitzpatrick',
    'EmojiManager', 'get_manager', 'get_for_alias', 'get_for_tag', 'get_for_category',
    'get_by_unicode', 'get_all', 'get_all_tags', 'classify', 'is_emoji', 'contains_emoji',
    'is_only_emojis',
    'UnicodeCandidate', 'next_unicode_candidate', 'iter_unicode_candidates',
    'EmojiTrie', 'Matches',
    'CATALOG_SCHEMA_VERSION',
]
