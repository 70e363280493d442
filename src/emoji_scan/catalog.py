"""Loading the static emoji catalog into Emoji records."""
import json
import logging
import os
from typing import Any, Dict, List, Optional

from .emoji import Emoji, EmojiCategory
from .schema import parse_codepoints, schema_validator
from .version import CATALOG_SCHEMA_VERSION, changes_since

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), 'data', 'emoji-list.json')


class CatalogError(Exception):
    """Raised when the emoji catalog cannot be read or is malformed."""
    pass


def build_emoji(entry: Dict[str, Any]) -> Emoji:
    """Build an Emoji from a validated catalog entry."""
    return Emoji(
        unicode=parse_codepoints(entry['codepoints']),
        aliases=tuple(entry['aliases']),
        tags=tuple(entry['tags']),
        category=EmojiCategory.from_name(entry['category']),
        supports_fitzpatrick=bool(entry.get('supports_fitzpatrick') or False),
        description=entry.get('description') or '',
    )


def parse_catalog(data: Dict[str, Any]) -> List[Emoji]:
    """
    Validate a decoded catalog document and turn it into records.

    Args:
        data: Decoded JSON document with an "emojis" list

    Returns:
        Emoji records in catalog order

    Raises:
        CatalogError: If the document or any entry is invalid, or two entries
            share a sequence
    """
    if not isinstance(data, dict) or not isinstance(data.get('emojis'), list):
        raise CatalogError("Catalog document must be an object with an 'emojis' list")

    version = data.get('version')
    if version and version != CATALOG_SCHEMA_VERSION:
        changes = changes_since(str(version))
        if changes is None:
            logger.warning(f"Unknown catalog version {version}, supported version is {CATALOG_SCHEMA_VERSION}")
        else:
            logger.warning(f"Catalog uses older format {version}; missing changes: {'; '.join(changes)}")

    emojis = []
    seen = {}
    for position, entry in enumerate(data['emojis']):
        is_valid, errors = schema_validator.validate_entry(entry)
        if not is_valid:
            details = '; '.join(str(error) for error in errors)
            raise CatalogError(f"Invalid catalog entry #{position}: {details}")

        emoji = build_emoji(entry)
        if emoji.unicode in seen:
            raise CatalogError(
                f"Duplicate sequence {entry['codepoints']!r} for entries #{seen[emoji.unicode]} and #{position}"
            )
        seen[emoji.unicode] = position
        emojis.append(emoji)

    count = data.get('count')
    if count is not None and count != len(emojis):
        logger.warning(f"Catalog declares {count} emojis but contains {len(emojis)}")

    return emojis


def load_catalog(path: Optional[str] = None) -> List[Emoji]:
    """
    Load the emoji catalog from a JSON file.

    Args:
        path: Catalog file; the bundled emoji-list.json when omitted

    Returns:
        Emoji records in catalog order

    Raises:
        CatalogError: If the file is missing, unreadable or malformed
    """
    catalog_file = path or DEFAULT_CATALOG_PATH

    try:
        with open(catalog_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(f"Emoji catalog not available at {catalog_file}: {e}") from e

    emojis = parse_catalog(data)
    logger.info(f"Loaded {len(emojis)} emojis from {catalog_file}")
    return emojis
