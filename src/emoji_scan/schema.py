"""Schema definition and validation for emoji catalog entries."""
import logging
import re
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from .emoji import EmojiCategory

logger = logging.getLogger(__name__)

# Schema field definitions for validation
SCHEMA_FIELDS = {
    'codepoints': {'type': 'CODEPOINTS', 'required': True, 'nullable': False},
    'aliases': {'type': 'STRING_LIST', 'required': True, 'nullable': False},
    'tags': {'type': 'STRING_LIST', 'required': True, 'nullable': False},
    'category': {'type': 'CATEGORY', 'required': True, 'nullable': False},
    'supports_fitzpatrick': {'type': 'BOOL', 'required': False, 'nullable': True},
    'description': {'type': 'STRING', 'required': False, 'nullable': True},
}

# Same notation as the first column of unicode.org's emoji-test.txt
CODEPOINTS_PATTERN = re.compile(r'^[0-9A-Fa-f]{1,6}( [0-9A-Fa-f]{1,6})*$')

MAX_CODE_POINT = 0x10FFFF
# Lone surrogates cannot be encoded as UTF-8
SURROGATES = range(0xD800, 0xE000)


@dataclass
class ValidationError:
    """Structured validation error for categorization."""
    category: str
    field: str
    expected_type: str
    actual_value: Any
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'field': self.field,
            'expected_type': self.expected_type,
            'actual_value': str(self.actual_value),
            'message': self.message
        }

    def __str__(self) -> str:
        return f"{self.category}: {self.message}"


def _is_invalid_code_point(code_point: int) -> bool:
    return code_point > MAX_CODE_POINT or code_point in SURROGATES


def parse_codepoints(value: str) -> str:
    """Convert '1F468 200D 1F469' notation into the corresponding string."""
    return ''.join(chr(int(token, 16)) for token in value.split())


class SchemaValidator:
    """Validates catalog entries with error categorization."""

    def __init__(self):
        self.schema_fields = SCHEMA_FIELDS

    def validate_entry(self, entry: Dict[str, Any]) -> tuple[bool, List[ValidationError]]:
        """
        Validate a catalog entry against the schema.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        if not isinstance(entry, dict):
            return False, [ValidationError(
                category='MALFORMED_INPUT',
                field='_root',
                expected_type='DICT',
                actual_value=entry,
                message='Catalog entry is not a JSON object'
            )]

        errors = []

        for field, config in self.schema_fields.items():
            if config['required'] and field not in entry:
                errors.append(ValidationError(
                    category='MISSING_REQUIRED_FIELD',
                    field=field,
                    expected_type=config['type'],
                    actual_value=None,
                    message=f'Required field {field} is missing'
                ))

        for field, value in entry.items():
            if field in self.schema_fields:
                validation_error = self._validate_field(field, value, self.schema_fields[field])
                if validation_error:
                    errors.append(validation_error)

        return len(errors) == 0, errors

    def _validate_field(self, field: str, value: Any, config: Dict[str, Any]) -> Optional[ValidationError]:
        """Validate individual field type and value."""
        if value is None and config.get('nullable', True):
            return None

        expected_type = config['type']

        if expected_type == 'STRING':
            if not isinstance(value, str):
                return self._type_mismatch(field, 'STRING', value)
        elif expected_type == 'BOOL':
            if not isinstance(value, bool):
                return self._type_mismatch(field, 'BOOL', value)
        elif expected_type == 'STRING_LIST':
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                return self._type_mismatch(field, 'STRING_LIST', value)
            if field == 'aliases' and not value:
                return ValidationError(
                    category='INVALID_VALUE',
                    field=field,
                    expected_type=expected_type,
                    actual_value=value,
                    message='An emoji needs at least one alias'
                )
        elif expected_type == 'CATEGORY':
            if not isinstance(value, str):
                return self._type_mismatch(field, 'CATEGORY', value)
            if EmojiCategory.from_name(value) is None:
                return ValidationError(
                    category='INVALID_VALUE',
                    field=field,
                    expected_type=expected_type,
                    actual_value=value,
                    message=f'Unknown category {value!r}'
                )
        elif expected_type == 'CODEPOINTS':
            if not isinstance(value, str):
                return self._type_mismatch(field, 'CODEPOINTS', value)
            if not CODEPOINTS_PATTERN.match(value.strip()) or any(
                    _is_invalid_code_point(int(token, 16)) for token in value.split()):
                return ValidationError(
                    category='INVALID_VALUE',
                    field=field,
                    expected_type=expected_type,
                    actual_value=value,
                    message=f'Invalid code point notation {value!r}'
                )

        return None

    def _type_mismatch(self, field: str, expected_type: str, value: Any) -> ValidationError:
        return ValidationError(
            category='TYPE_MISMATCH',
            field=field,
            expected_type=expected_type,
            actual_value=value,
            message=f'Expected {expected_type.lower()} for {field}, got {type(value).__name__}'
        )


# Global validator instance
schema_validator = SchemaValidator()
