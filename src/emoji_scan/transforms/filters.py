"""Beam DoFns parsing text records and annotating them with emojis."""
import json
import logging
from typing import Any, Dict, Generator, Iterable, Optional

import apache_beam as beam
from apache_beam.pvalue import TaggedOutput

from ..manager import get_manager
from .extractors import DEFAULT_TEXT_FIELDS, candidate_to_dict, extract_text_fields, get_record_id

logger = logging.getLogger(__name__)

EMOJI_EVENTS_TAG = 'emoji_events'


class ParseRecords(beam.DoFn):
    """Turn input lines into record dictionaries."""

    def process(self, element) -> Generator[dict, None, None]:
        """
        Parse a line of input.

        Args:
            element: One line of text, or raw bytes

        Yields:
            The decoded JSON object, or {'text': line} for plain text lines
        """
        try:
            if isinstance(element, bytes):
                element = element.decode('utf-8')
            line = element.rstrip('\r\n')
            if not line.strip():
                return

            if line.lstrip().startswith('{'):
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    record = None
                if isinstance(record, dict):
                    yield record
                    return

            yield {'text': line}
        except UnicodeDecodeError as e:
            logger.error(f"Failed to decode line: {e}")
        except Exception as e:
            logger.error(f"Unexpected error in ParseRecords: {e}")


class EmojiAnnotator(beam.DoFn):
    """Annotate records with the emojis found in their text fields."""

    def __init__(self, catalog_path: Optional[str] = None, fields: Iterable[str] = DEFAULT_TEXT_FIELDS):
        super().__init__()
        self.catalog_path = catalog_path
        self.fields = tuple(fields)
        self.manager = None

    def setup(self):
        self.manager = get_manager(self.catalog_path)

    def process(self, element: Dict[str, Any]):
        """
        Scan a record for emojis.

        Args:
            element: Record dictionary

        Yields:
            The record with 'emojis' and 'only_emojis' added. Each emoji
            names its 'field'; 'start', 'end' and 'fitzpatrick_end' are
            offsets into that field's value. 'only_emojis' holds when at
            least one field has text and every such field is only emojis.
            Side output: one emoji event per record that contains emojis
        """
        if self.manager is None:
            self.setup()

        try:
            values = extract_text_fields(element, self.fields)
        except Exception as e:
            logger.error(f"Failed to extract text fields: {e}")
            yield element
            return

        element = dict(element)
        try:
            candidates = [candidate_to_dict(c, field)
                          for field, text in values
                          for c in self.manager.iter_unicode_candidates(text)]
            element['emojis'] = candidates
            element['only_emojis'] = bool(values) and all(
                self.manager.is_only_emojis(text) for _, text in values)

            if candidates:
                yield TaggedOutput(EMOJI_EVENTS_TAG, self._create_emoji_event(element, candidates))
        except Exception as e:
            logger.error(f"Error scanning record {get_record_id(element)} for emojis: {e}")

        yield element

    def _create_emoji_event(self, element: Dict[str, Any], candidates: list) -> Dict[str, Any]:
        """Summary record for emoji tracking."""
        aliases = [c['alias'] for c in candidates]
        return {
            'record_id': get_record_id(element),
            'emoji_count': len(candidates),
            'aliases': aliases,
            'distinct_aliases': sorted(set(aliases)),
            'categories': sorted({c['category'] for c in candidates}),
            'with_fitzpatrick': sum(1 for c in candidates if c['fitzpatrick']),
        }
