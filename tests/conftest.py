"""Pytest configuration and shared fixtures."""
import sys
import os
import json
import pytest

# Add src and the repo root (main.py, pipeline/) to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from emoji_scan.emoji import Emoji, EmojiCategory
from emoji_scan.manager import EmojiManager


GRINNING = Emoji('\U0001F600', ('grinning',), ('smile', 'happy'), EmojiCategory.SMILEYS, False, 'grinning face')
THUMBSUP = Emoji('\U0001F44D', ('+1', 'thumbsup'), ('approve', 'ok'), EmojiCategory.PEOPLE, True, 'thumbs up')
MAN = Emoji('\U0001F468', ('man',), ('dad',), EmojiCategory.PEOPLE, True, 'man')
TECHNOLOGIST = Emoji('\U0001F468\u200d\U0001F4BB', ('man_technologist',), ('coder',),
                     EmojiCategory.PEOPLE, False, 'man technologist')
FAMILY = Emoji('\U0001F468\u200d\U0001F469\u200d\U0001F466', ('family_man_woman_boy',), ('home', 'dad'),
               EmojiCategory.PEOPLE, False, 'family: man, woman, boy')
FLAG_US = Emoji('\U0001F1FA\U0001F1F8', ('us',), ('flag',), EmojiCategory.FLAGS, False, 'flag: United States')
HASH = Emoji('#\ufe0f\u20e3', ('hash',), ('number',), EmojiCategory.SYMBOLS, False, 'keycap: #')
HEART = Emoji('\u2764\ufe0f', ('heart',), ('love',), EmojiCategory.SMILEYS, False, 'red heart')

SAMPLE_EMOJIS = [GRINNING, THUMBSUP, MAN, TECHNOLOGIST, FAMILY, FLAG_US, HASH, HEART]


def to_entry(emoji: Emoji) -> dict:
    """Catalog JSON entry for an Emoji."""
    return {
        'codepoints': ' '.join(f'{cp:04X}' for cp in emoji.code_points),
        'aliases': list(emoji.aliases),
        'tags': list(emoji.tags),
        'category': emoji.category.name,
        'supports_fitzpatrick': emoji.supports_fitzpatrick,
        'description': emoji.description,
    }


# ============================================================================
# Common test fixtures
# ============================================================================

@pytest.fixture
def sample_emojis():
    """Small catalog with prefix-ambiguous sequences."""
    return list(SAMPLE_EMOJIS)


@pytest.fixture
def manager(sample_emojis):
    """Manager over the sample catalog."""
    return EmojiManager(sample_emojis)


@pytest.fixture
def catalog_document(sample_emojis):
    """Catalog document as stored on disk."""
    return {
        'version': '1.1.0',
        'source': 'tests',
        'count': len(sample_emojis),
        'emojis': [to_entry(emoji) for emoji in sample_emojis],
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_document):
    """Sample catalog written to a temporary file."""
    path = tmp_path / 'emoji-list.json'
    path.write_text(json.dumps(catalog_document, ensure_ascii=False), encoding='utf-8')
    return str(path)
