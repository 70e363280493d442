"""Emoji scanner - command line entry point."""
import argparse
import json
import sys

from pipeline import run_local_pipeline
from emoji_scan.catalog import CatalogError
from emoji_scan.manager import get_manager
from emoji_scan.transforms.extractors import candidate_to_dict
from emoji_scan.utils import validate_config, ConfigError, setup_logging, get_logger

logger = get_logger(__name__)


def run_scan_mode(manager, text: str) -> None:
    """Print every emoji found in the text as JSON."""
    result = {
        'text': text,
        'is_emoji': manager.is_emoji(text),
        'is_only_emojis': manager.is_only_emojis(text),
        'emojis': [candidate_to_dict(c) for c in manager.iter_unicode_candidates(text)],
    }
    print(json.dumps(result, ensure_ascii=False, indent=2))


def run_lookup_mode(manager, alias: str) -> int:
    """Print the emoji registered under an alias."""
    emoji = manager.get_for_alias(alias)
    if emoji is None:
        logger.warning(f"Unknown alias: {alias}")
        return 1

    print(json.dumps({
        'emoji': emoji.unicode,
        'aliases': list(emoji.aliases),
        'tags': list(emoji.tags),
        'category': emoji.category.name,
        'supports_fitzpatrick': emoji.supports_fitzpatrick,
        'description': emoji.description,
    }, ensure_ascii=False, indent=2))
    return 0


def main():
    """Entry point with mode selection."""
    parser = argparse.ArgumentParser(description='Emoji scanner')
    parser.add_argument('mode', choices=['scan', 'lookup', 'pipeline'],
                        help='scan: find emojis in TEXT, lookup: resolve an alias, pipeline: annotate a file')
    parser.add_argument('value', nargs='?', help='Text to scan or alias to look up')
    parser.add_argument('--input', help='Input text/JSONL file (pipeline mode). Default: sample data')
    parser.add_argument('--output', default='output/annotated', help='Output prefix (pipeline mode)')
    parser.add_argument('--max-lines', type=int, default=20, help='Sample lines when no input file is given')
    parser.add_argument('--catalog', help='Emoji catalog JSON file')

    args = parser.parse_args()

    try:
        config = validate_config()
        setup_logging(level=config['log_level'], structured=config['log_structured'])

        catalog_path = args.catalog or config['catalog_path']

        if args.mode == 'pipeline':
            run_local_pipeline(args.input, args.output, catalog_path, args.max_lines)
            return

        if args.value is None:
            parser.error(f"{args.mode} mode requires a value")

        manager = get_manager(catalog_path)
        if args.mode == 'scan':
            run_scan_mode(manager, args.value)
        elif args.mode == 'lookup':
            sys.exit(run_lookup_mode(manager, args.value))

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except CatalogError as e:
        logger.error(f"Catalog error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
