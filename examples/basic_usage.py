#!/usr/bin/env python3
"""Basic usage example for the emoji scanner.

This example demonstrates:
1. How to look up emojis by alias, tag and category
2. How to scan text for emojis
3. How to convert text between emojis and aliases
"""

from emoji_scan import get_manager, EmojiCategory, Matches
from emoji_scan.parser import parse_to_aliases, parse_to_unicode, remove_all_emojis


def lookups():
    """Resolve emojis through the index."""
    manager = get_manager()

    pizza = manager.get_for_alias(':pizza:')
    print(f"Alias ':pizza:' -> {pizza} ({pizza.description})")

    flags = manager.get_for_tag('flag')
    print(f"Tag 'flag' -> {' '.join(sorted(e.unicode for e in flags))}")

    food = manager.get_for_category(EmojiCategory.FOOD)
    print(f"Category FOOD has {len(food)} emojis")
    print()


def scanning():
    """Find emojis in text."""
    manager = get_manager()
    text = 'Ship it \U0001F680 and celebrate \U0001F44D\U0001F3FD\U0001F389'

    print(f"Scanning: {text}")
    for candidate in manager.iter_unicode_candidates(text):
        modifier = f" with {candidate.fitzpatrick_type}" if candidate.has_fitzpatrick else ""
        print(f"  [{candidate.start_index}:{candidate.fitzpatrick_end_index}] "
              f":{candidate.emoji.alias}:{modifier}")

    print(f"Contains emoji: {manager.contains_emoji(text)}")
    print(f"Only emojis: {manager.is_only_emojis(text)}")

    # Prefix classification, useful while a user is still typing
    for partial in ['\U0001F1EB', '\U0001F1EB\U0001F1F7', 'x']:
        result = manager.classify(partial)
        print(f"  classify({partial!r}) -> {result.name}")
        if result is Matches.EXACT:
            print(f"    = :{manager.lookup_exact(partial).alias}:")
    print()


def conversions():
    """Convert between emojis and aliases."""
    text = 'Thanks \U0001F64F\U0001F3FB, see you in \U0001F1EF\U0001F1F5!'
    aliases = parse_to_aliases(text)
    print(f"To aliases: {aliases}")
    print(f"Back to unicode: {parse_to_unicode(aliases)}")
    print(f"Without emojis: {remove_all_emojis(text)}")


if __name__ == "__main__":
    lookups()
    scanning()
    conversions()
