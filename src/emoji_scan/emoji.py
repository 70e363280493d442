"""Emoji record, category and skin-tone modifier definitions."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EmojiCategory(Enum):
    """Closed set of catalog categories."""
    SMILEYS = 'Smileys & Emotion'
    PEOPLE = 'People & Body'
    NATURE = 'Animals & Nature'
    FOOD = 'Food & Drink'
    TRAVEL = 'Travel & Places'
    ACTIVITIES = 'Activities'
    OBJECTS = 'Objects'
    SYMBOLS = 'Symbols'
    FLAGS = 'Flags'

    @classmethod
    def from_name(cls, name: str) -> Optional['EmojiCategory']:
        """Return the category for an enum name such as 'SMILEYS', or None."""
        if not isinstance(name, str):
            return None
        return cls.__members__.get(name.strip().upper())


class Fitzpatrick(Enum):
    """Skin-tone modifiers that may trail an emoji supporting them."""
    TYPE_1_2 = '\U0001F3FB'
    TYPE_3 = '\U0001F3FC'
    TYPE_4 = '\U0001F3FD'
    TYPE_5 = '\U0001F3FE'
    TYPE_6 = '\U0001F3FF'

    @property
    def unicode(self) -> str:
        return self.value

    @property
    def type_name(self) -> str:
        """Lowercase name used in aliases, e.g. 'type_3'."""
        return self.name.lower()

    @classmethod
    def from_unicode(cls, char: Optional[str]) -> Optional['Fitzpatrick']:
        if not char:
            return None
        for modifier in cls:
            if modifier.value == char:
                return modifier
        return None

    @classmethod
    def from_type(cls, type_name: Optional[str]) -> Optional['Fitzpatrick']:
        if not type_name:
            return None
        return cls.__members__.get(type_name.upper())


@dataclass(frozen=True)
class Emoji:
    """
    One catalog entry.

    The `unicode` string is the canonical code-point sequence of the emoji;
    the first alias is the canonical short name.
    """
    unicode: str
    aliases: Tuple[str, ...]
    tags: Tuple[str, ...]
    category: EmojiCategory
    supports_fitzpatrick: bool = False
    description: str = ''

    def __post_init__(self):
        if not self.unicode:
            raise ValueError("Emoji sequence cannot be empty")

    @property
    def code_points(self) -> Tuple[int, ...]:
        return tuple(ord(char) for char in self.unicode)

    @property
    def alias(self) -> str:
        """Canonical alias."""
        return self.aliases[0] if self.aliases else ''

    @property
    def html_decimal(self) -> str:
        return ''.join(f'&#{cp};' for cp in self.code_points)

    @property
    def html_hexadecimal(self) -> str:
        return ''.join(f'&#x{cp:x};' for cp in self.code_points)

    def __str__(self) -> str:
        return self.unicode
