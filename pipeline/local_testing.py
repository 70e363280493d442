"""Local DirectRunner pipeline annotating text or JSONL records with emojis."""
import json
from typing import List, Optional

import apache_beam as beam
from apache_beam.io import ReadFromText, WriteToText
from apache_beam.options.pipeline_options import PipelineOptions

from emoji_scan.transforms.filters import EMOJI_EVENTS_TAG, EmojiAnnotator, ParseRecords
from emoji_scan.utils import get_logger

logger = get_logger(__name__)


def create_sample_lines(max_lines: int = 20) -> List[str]:
    """Create sample input lines, mixing plain text and JSON records."""
    texts = [
        'Good morning \U0001F600',
        'No emoji in this one',
        'Ship it \U0001F680\U0001F389',
        'Thumbs up \U0001F44D\U0001F3FD from the team',
        '\U0001F1EB\U0001F1F7 \U0001F1EF\U0001F1F5',
    ]
    lines = []
    for i in range(max_lines):
        text = texts[i % len(texts)]
        if i % 2:
            lines.append(json.dumps({'id': f'record-{i}', 'text': text}, ensure_ascii=False))
        else:
            lines.append(text)
    return lines


def run_local_pipeline(input_path: Optional[str], output_prefix: str = 'output/annotated',
                       catalog_path: Optional[str] = None, max_lines: int = 20) -> None:
    """
    Annotate each line of a file with its emojis using the DirectRunner.

    Args:
        input_path: Text or JSONL file; sample lines are used when None
        output_prefix: Prefix of the written .jsonl shards
        catalog_path: Emoji catalog to use instead of the bundled one
        max_lines: Number of sample lines when no input file is given
    """
    logger.info(f"Running local emoji pipeline on {input_path or 'sample data'}...")

    options = PipelineOptions(['--runner=DirectRunner'])

    with beam.Pipeline(options=options) as p:
        if input_path:
            lines = p | 'Read Lines' >> ReadFromText(input_path)
        else:
            lines = p | 'Create Sample Data' >> beam.Create(create_sample_lines(max_lines))

        results = (lines
                   | 'Parse Records' >> beam.ParDo(ParseRecords())
                   | 'Annotate Emojis' >> beam.ParDo(EmojiAnnotator(catalog_path))
                   .with_outputs(EMOJI_EVENTS_TAG, main='main'))

        (results.main
         | 'Format Records' >> beam.Map(lambda x: json.dumps(x, ensure_ascii=False, default=str))
         | 'Write Records' >> WriteToText(output_prefix, file_name_suffix='.jsonl'))

        (results[EMOJI_EVENTS_TAG]
         | 'Format Events' >> beam.Map(lambda x: json.dumps(x, ensure_ascii=False, default=str))
         | 'Write Events' >> WriteToText(f'{output_prefix}_{EMOJI_EVENTS_TAG}', file_name_suffix='.jsonl'))

    logger.info(f"✅ Local pipeline completed - check {output_prefix}*.jsonl")
