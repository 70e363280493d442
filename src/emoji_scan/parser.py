"""Text conversions built on top of the candidate scanner."""
import re
from enum import Enum
from typing import Callable, Collection, List, Optional

from .emoji import Emoji, Fitzpatrick
from .manager import EmojiManager, get_manager
from .scanner import UnicodeCandidate

ALIAS_CANDIDATE_PATTERN = re.compile(r':([\w+\-]+)(?:\|(type_1_2|type_[3-6]))?:')


class FitzpatrickAction(Enum):
    """What to do with a skin-tone modifier when converting an emoji."""
    PARSE = 'parse'      # keep it in the converted form (":thumbsup|type_3:")
    REMOVE = 'remove'    # drop it
    IGNORE = 'ignore'    # leave the raw modifier character after the converted form


def _manager(manager: Optional[EmojiManager]) -> EmojiManager:
    return manager if manager is not None else get_manager()


def parse_from_unicode(text: Optional[str], transformer: Callable[[UnicodeCandidate], str],
                       manager: Optional[EmojiManager] = None) -> Optional[str]:
    """
    Replace each emoji occurrence (modifier included) with transformer(candidate).

    Args:
        text: Text to convert
        transformer: Called once per candidate, returns the replacement
        manager: Emoji manager, the process-wide one when omitted

    Returns:
        Converted text
    """
    if not text:
        return text

    parts = []
    position = 0
    for candidate in _manager(manager).iter_unicode_candidates(text):
        parts.append(text[position:candidate.start_index])
        parts.append(transformer(candidate))
        position = candidate.fitzpatrick_end_index
    parts.append(text[position:])
    return ''.join(parts)


def _alias_form(candidate: UnicodeCandidate, action: FitzpatrickAction) -> str:
    alias = candidate.emoji.alias
    if not candidate.has_fitzpatrick or action is FitzpatrickAction.REMOVE:
        return f':{alias}:'
    if action is FitzpatrickAction.PARSE:
        return f':{alias}|{candidate.fitzpatrick_type}:'
    return f':{alias}:{candidate.fitzpatrick_unicode}'


def parse_to_aliases(text: Optional[str], fitzpatrick_action: FitzpatrickAction = FitzpatrickAction.PARSE,
                     manager: Optional[EmojiManager] = None) -> Optional[str]:
    """Replace emojis with their canonical alias, e.g. "I like 🍕" -> "I like :pizza:"."""
    return parse_from_unicode(text, lambda candidate: _alias_form(candidate, fitzpatrick_action), manager)


def _html_form(candidate: UnicodeCandidate, html: str, action: FitzpatrickAction) -> str:
    if action is FitzpatrickAction.IGNORE:
        return html + candidate.fitzpatrick_unicode
    return html


def parse_to_html_decimal(text: Optional[str], fitzpatrick_action: FitzpatrickAction = FitzpatrickAction.PARSE,
                          manager: Optional[EmojiManager] = None) -> Optional[str]:
    """Replace emojis with decimal HTML entities; PARSE drops modifiers like REMOVE."""
    return parse_from_unicode(
        text,
        lambda candidate: _html_form(candidate, candidate.emoji.html_decimal, fitzpatrick_action),
        manager,
    )


def parse_to_html_hexadecimal(text: Optional[str], fitzpatrick_action: FitzpatrickAction = FitzpatrickAction.PARSE,
                              manager: Optional[EmojiManager] = None) -> Optional[str]:
    """Replace emojis with hexadecimal HTML entities; PARSE drops modifiers like REMOVE."""
    return parse_from_unicode(
        text,
        lambda candidate: _html_form(candidate, candidate.emoji.html_hexadecimal, fitzpatrick_action),
        manager,
    )


def parse_to_unicode(text: Optional[str], manager: Optional[EmojiManager] = None) -> Optional[str]:
    """
    Replace aliases and HTML entities with the emoji characters.

    ":smile:" and ":thumbsup|type_3:" are replaced when the alias is known;
    the modifier is only kept for emojis that support one. Unknown aliases
    are left untouched.
    """
    if not text:
        return text

    manager = _manager(manager)

    def replace_alias(match: re.Match) -> str:
        emoji = manager.get_for_alias(match.group(1))
        if emoji is None:
            return match.group(0)
        modifier = Fitzpatrick.from_type(match.group(2))
        if modifier is not None and emoji.supports_fitzpatrick:
            return emoji.unicode + modifier.unicode
        return emoji.unicode

    result = ALIAS_CANDIDATE_PATTERN.sub(replace_alias, text)

    if '&#' in result:
        for emoji in manager.get_all():
            result = result.replace(emoji.html_hexadecimal, emoji.unicode)
            result = result.replace(emoji.html_decimal, emoji.unicode)

    return result


def remove_all_emojis(text: Optional[str], manager: Optional[EmojiManager] = None) -> Optional[str]:
    return parse_from_unicode(text, lambda candidate: '', manager)


def remove_emojis(text: Optional[str], emojis: Collection[Emoji],
                  manager: Optional[EmojiManager] = None) -> Optional[str]:
    """Remove only the given emojis from the text."""
    targets = set(emojis)
    return parse_from_unicode(
        text,
        lambda candidate: '' if candidate.emoji in targets else candidate.text(),
        manager,
    )


def remove_all_emojis_except(text: Optional[str], emojis: Collection[Emoji],
                             manager: Optional[EmojiManager] = None) -> Optional[str]:
    """Remove every emoji from the text except the given ones."""
    kept = set(emojis)
    return parse_from_unicode(
        text,
        lambda candidate: candidate.text() if candidate.emoji in kept else '',
        manager,
    )


def extract_emojis(text: Optional[str], manager: Optional[EmojiManager] = None) -> List[str]:
    """All emoji occurrences in order, each with its modifier if present."""
    if not text:
        return []
    return [candidate.text() for candidate in _manager(manager).iter_unicode_candidates(text)]
