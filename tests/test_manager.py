"""Unit tests for the emoji manager: index lookups and recognition predicates."""
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from emoji_scan import manager as manager_module
from emoji_scan.catalog import CatalogError
from emoji_scan.emoji import Emoji, EmojiCategory
from emoji_scan.manager import EmojiManager, get_manager, trim_alias
from emoji_scan.trie import Matches

from conftest import GRINNING, THUMBSUP, MAN, TECHNOLOGIST, FAMILY, FLAG_US, HASH, HEART


class TestConstruction:
    """Tests for building the index."""

    def test_empty_catalog_rejected(self):
        """An empty catalog is a fatal initialization error."""
        with pytest.raises(CatalogError):
            EmojiManager([])

    def test_duplicate_sequence_rejected(self):
        """Two records with the same sequence are rejected."""
        twin = Emoji(GRINNING.unicode, ('twin',), (), EmojiCategory.SMILEYS)
        with pytest.raises(CatalogError):
            EmojiManager([GRINNING, twin])

    def test_get_all_sorted_by_length(self, manager):
        """Longest sequences come first."""
        lengths = [len(emoji.unicode) for emoji in manager.get_all()]
        assert lengths == sorted(lengths, reverse=True)
        assert manager.get_all()[0] == FAMILY
        assert len(manager) == 8


class TestAliasLookup:
    """Tests for alias lookups."""

    @pytest.mark.parametrize('alias', [':grinning:', 'grinning:', ':grinning', 'grinning'])
    def test_trim_symmetry(self, manager, alias):
        """Delimited and bare aliases resolve to the same record."""
        assert manager.get_for_alias(alias) == GRINNING

    def test_secondary_alias(self, manager):
        """Every alias of a record resolves to it."""
        assert manager.get_for_alias('thumbsup') == THUMBSUP
        assert manager.get_for_alias(':+1:') == THUMBSUP

    def test_unknown_alias(self, manager):
        """Unknown aliases return None."""
        assert manager.get_for_alias('nope') is None

    def test_none_and_empty(self, manager):
        """None and empty aliases return None, never an error."""
        assert manager.get_for_alias(None) is None
        assert manager.get_for_alias('') is None
        assert manager.get_for_alias(':') is None
        assert manager.get_for_alias('::') is None

    def test_colliding_alias_last_write_wins(self):
        """A later record sharing an alias overwrites the earlier mapping."""
        first = Emoji('\U0001F436', ('pet',), (), EmojiCategory.NATURE)
        second = Emoji('\U0001F431', ('pet',), (), EmojiCategory.NATURE)
        assert EmojiManager([first, second]).get_for_alias('pet') == second

    def test_trim_alias(self):
        """Only one delimiter is stripped on each side."""
        assert trim_alias('::smile::') == ':smile:'
        assert trim_alias('smile') == 'smile'


class TestTagAndCategoryLookup:
    """Tests for tag and category lookups."""

    def test_by_tag(self, manager):
        """Tags map to every record carrying them."""
        assert manager.get_for_tag('dad') == {MAN, FAMILY}
        assert manager.get_for_tag('smile') == {GRINNING}

    def test_unknown_tag(self, manager):
        """Unknown or None tags return None."""
        assert manager.get_for_tag('unknown') is None
        assert manager.get_for_tag(None) is None

    def test_by_category(self, manager):
        """Categories map to their records."""
        assert manager.get_for_category(EmojiCategory.SMILEYS) == {GRINNING, HEART}
        assert manager.get_for_category('FLAGS') == {FLAG_US}

    def test_category_without_records(self, manager):
        """A category with no records, or None, returns None."""
        assert manager.get_for_category(EmojiCategory.FOOD) is None
        assert manager.get_for_category(None) is None
        assert manager.get_for_category('NOT_A_CATEGORY') is None

    def test_all_tags(self, manager):
        """All tags of the catalog are listed."""
        assert manager.get_all_tags() == {'smile', 'happy', 'approve', 'ok', 'dad', 'coder', 'home',
                                          'flag', 'number', 'love'}


class TestRecognition:
    """Tests for classification and the derived predicates."""

    def test_get_by_unicode(self, manager):
        """Exact sequences resolve; prefixes and None do not."""
        assert manager.get_by_unicode(TECHNOLOGIST.unicode) == TECHNOLOGIST
        assert manager.get_by_unicode('\U0001F1FA') is None
        assert manager.get_by_unicode(None) is None

    def test_classify(self, manager):
        """Delegates to the trie."""
        assert manager.classify(HASH.unicode) is Matches.EXACT
        assert manager.classify('#') is Matches.PARTIAL
        assert manager.classify('a') is Matches.NONE
        assert manager.lookup_exact(HEART.unicode) == HEART

    def test_is_emoji(self, manager):
        """Only a single emoji (optionally with its modifier) is an emoji."""
        assert manager.is_emoji(GRINNING.unicode)
        assert manager.is_emoji(TECHNOLOGIST.unicode)
        assert manager.is_emoji('\U0001F44D\U0001F3FF')
        assert not manager.is_emoji('\U0001F600 ')
        assert not manager.is_emoji(' \U0001F600')
        assert not manager.is_emoji('\U0001F600\U0001F600')
        assert not manager.is_emoji('\U0001F600\U0001F3FB')
        assert not manager.is_emoji('')
        assert not manager.is_emoji(None)

    def test_contains_emoji(self, manager):
        """Any occurrence counts."""
        assert manager.contains_emoji('hello \U0001F600 world')
        assert not manager.contains_emoji('hello world')
        assert not manager.contains_emoji(None)

    def test_is_only_emojis(self, manager):
        """Strings made only of emojis (with modifiers) qualify."""
        text = GRINNING.unicode + THUMBSUP.unicode + '\U0001F3FC' + FAMILY.unicode + HASH.unicode
        assert manager.is_only_emojis(text)
        assert not manager.is_only_emojis(text + ' ')
        assert not manager.is_only_emojis('a' + text)
        assert not manager.is_only_emojis('\U0001F600\U0001F3FB')
        assert manager.is_only_emojis('')
        assert not manager.is_only_emojis(None)

    def test_idempotent_removal(self, manager, sample_emojis):
        """Concatenated catalog sequences are consumed entirely."""
        text = ''.join(emoji.unicode for emoji in sample_emojis)
        candidates = list(manager.iter_unicode_candidates(text))
        assert candidates[-1].fitzpatrick_end_index == len(text)
        assert [c.emoji for c in candidates] == sample_emojis
        assert manager.is_only_emojis(text)


class TestDefaultManager:
    """Tests for the process-wide manager over the bundled catalog."""

    def test_same_instance(self):
        """The default manager is built once."""
        assert get_manager() is get_manager()

    def test_concurrent_first_calls_build_once(self, catalog_file, sample_emojis):
        """Threads racing on the first call all get one manager built once."""
        def slow_build(path):
            time.sleep(0.05)
            return EmojiManager(sample_emojis)

        with patch.object(EmojiManager, 'from_catalog', side_effect=slow_build) as build:
            with ThreadPoolExecutor(max_workers=8) as executor:
                managers = list(executor.map(lambda _: get_manager(catalog_file), range(8)))

        assert build.call_count == 1
        assert all(m is managers[0] for m in managers)

    def test_grinning_end_to_end(self):
        """The bundled catalog resolves the grinning face by alias and by scanning."""
        grinning = manager_module.get_for_alias('grinning')
        assert grinning is not None
        assert grinning.unicode == '\U0001F600'
        assert grinning.category is EmojiCategory.SMILEYS

        assert manager_module.is_emoji('\U0001F600')
        assert manager_module.contains_emoji('hello \U0001F600 world')

        candidate = get_manager().next_unicode_candidate('hello \U0001F600 world', 0)
        assert candidate.emoji == grinning
        assert (candidate.start_index, candidate.end_index) == (6, 7)

    @pytest.mark.parametrize('alias', [':smile:', 'smile:', ':smile', 'smile'])
    def test_bundled_alias_trim(self, alias):
        """Alias trimming works against the bundled catalog."""
        assert manager_module.get_for_alias(alias) == manager_module.get_for_alias('smile')

    def test_bundled_uniqueness(self):
        """No two bundled records share a sequence."""
        sequences = [emoji.unicode for emoji in manager_module.get_all()]
        assert len(sequences) == len(set(sequences))

    def test_bundled_null_safety(self):
        """Module-level lookups never fail on None."""
        assert not manager_module.is_emoji(None)
        assert not manager_module.contains_emoji(None)
        assert not manager_module.is_only_emojis(None)
        assert manager_module.get_for_alias(None) is None
        assert manager_module.get_for_alias('') is None
        assert manager_module.get_for_tag(None) is None
        assert manager_module.get_for_category(None) is None
        assert manager_module.get_by_unicode(None) is None

    def test_bundled_prefix_sequences(self):
        """Heart and heart-on-fire share a prefix; the longer one wins when present."""
        heart = manager_module.get_for_alias('heart')
        on_fire = manager_module.get_for_alias('heart_on_fire')
        assert on_fire.unicode.startswith(heart.unicode)
        assert manager_module.is_emoji(on_fire.unicode)
        assert manager_module.classify(heart.unicode) is Matches.EXACT
        assert get_manager().next_unicode_candidate(heart.unicode + '!').emoji == heart

    def test_bundled_tags_and_categories(self):
        """Bundled tags and categories are indexed."""
        assert 'flag' in manager_module.get_all_tags()
        flags = manager_module.get_for_category(EmojiCategory.FLAGS)
        assert manager_module.get_for_alias('fr') in flags
        assert manager_module.get_for_alias('us') in manager_module.get_for_tag('flag')
