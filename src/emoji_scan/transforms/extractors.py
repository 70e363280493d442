"""Field extraction utilities for text records."""
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..scanner import UnicodeCandidate

DEFAULT_TEXT_FIELDS = ('title', 'text', 'comment')


def extract_text_fields(record: Dict[str, Any],
                        fields: Iterable[str] = DEFAULT_TEXT_FIELDS) -> List[Tuple[str, str]]:
    """
    Collect the text fields of a record that should be scanned for emojis.

    Values are returned whole; a cut inside a ZWJ sequence would turn the
    emoji into its shorter prefix.

    Args:
        record: Record dictionary
        fields: Names of the fields to collect, in order

    Returns:
        (field name, value) pairs for the non-empty string fields
    """
    return [(name, record[name]) for name in fields
            if isinstance(record.get(name), str) and record[name]]


def candidate_to_dict(candidate: UnicodeCandidate, field: Optional[str] = None) -> Dict[str, Any]:
    """Serializable view of a candidate, with offsets into `field` when given."""
    result = {
        'emoji': candidate.emoji.unicode,
        'alias': candidate.emoji.alias,
        'category': candidate.emoji.category.name,
        'start': candidate.start_index,
        'end': candidate.end_index,
        'fitzpatrick': candidate.fitzpatrick_type,
        'fitzpatrick_end': candidate.fitzpatrick_end_index,
    }
    if field is not None:
        result['field'] = field
    return result


def get_record_id(record: Dict[str, Any]) -> Optional[str]:
    """Best-effort identifier for logging."""
    value = record.get('id')
    return str(value) if value is not None else None
