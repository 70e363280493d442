"""
Catalog format versions.

The bundled emoji-list.json carries a "version" field. parse_catalog checks it
against CATALOG_CHANGELOG to tell an older known format from an unknown one.
"""

from typing import Dict, List, Optional, Tuple

CATALOG_SCHEMA_VERSION = "1.1.0"

CATALOG_CHANGELOG: Dict[str, str] = {
    "1.1.0": "entries use emoji-test.txt code point notation (\"1F468 200D 1F469\") instead of literal characters",
    "1.0.0": "initial format: aliases, tags, category, supports_fitzpatrick, description",
}


def _version_key(version: str) -> Optional[Tuple[int, ...]]:
    try:
        return tuple(int(part) for part in version.split('.'))
    except ValueError:
        return None


def changes_since(version: str) -> Optional[List[str]]:
    """
    Changelog notes for every known format newer than `version`, oldest first.

    Returns:
        An empty list for the current version, None if `version` is not a
        known catalog format
    """
    if version not in CATALOG_CHANGELOG:
        return None

    since = _version_key(version)
    newer = [v for v in CATALOG_CHANGELOG if _version_key(v) > since]
    return [f"{v}: {CATALOG_CHANGELOG[v]}" for v in sorted(newer, key=_version_key)]
