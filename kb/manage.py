#!/usr/bin/env python3
"""
RAG Knowledge Base Parser CLI

Usage:
    python manage.py parse-file PATH        # Print normalized text of a file
    python manage.py detect PATH            # Print the format a file parses as
    python manage.py parse-query "QUERY"    # Print parsed query and projections as JSON

Options for parse-file / detect:
    --base-dir DIR        Sandbox root (default: KNOWLEDGE_BASE_PATH)
    --max-file-size N     Size ceiling in bytes (default: MAX_FILE_SIZE)
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add kb directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config import Config, ParserConfig  # noqa: E402
from errors import RAGError  # noqa: E402


def build_parser_config(args, config: Config) -> ParserConfig:
    """Command-line overrides on top of the environment configuration"""
    return ParserConfig(
        base_dir=Path(args.base_dir) if args.base_dir else config.parser.base_dir,
        max_file_size=args.max_file_size or config.parser.max_file_size,
        max_json_size=config.parser.max_json_size
    )


def cmd_parse_file(args, config: Config):
    """Print the normalized text of a file"""
    from ingestion import DocumentParser

    parser = DocumentParser(build_parser_config(args, config))
    print(parser.parse_file(args.path))
    return 0


def cmd_detect(args, config: Config):
    """Print the format a file would be parsed as"""
    from ingestion import DocumentParser

    parser = DocumentParser(build_parser_config(args, config))
    print(parser.detect_file(args.path).value)
    return 0


def cmd_parse_query(args, config: Config):
    """Print the parsed query with its search projections"""
    from query import parse_query, to_fts_query, to_semantic_query

    parsed = parse_query(args.query)
    output = parsed.to_dict()
    output['semantic_query'] = to_semantic_query(parsed)
    output['fts_query'] = to_fts_query(parsed)
    print(json.dumps(output, indent=2 if args.pretty else None, ensure_ascii=False))
    return 0


def add_sandbox_arguments(p):
    p.add_argument('path', help='File path (absolute, or relative to the base directory)')
    p.add_argument('--base-dir', help='Sandbox root directory')
    p.add_argument('--max-file-size', type=int, help='Maximum file size in bytes')


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='RAG Knowledge Base Parser CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    # parse-file
    p = subparsers.add_parser('parse-file', help='Print normalized text of a file')
    add_sandbox_arguments(p)
    p.set_defaults(func=cmd_parse_file)

    # detect
    p = subparsers.add_parser('detect', help='Print the format a file parses as')
    add_sandbox_arguments(p)
    p.set_defaults(func=cmd_detect)

    # parse-query
    p = subparsers.add_parser('parse-query', help='Parse a search query')
    p.add_argument('query', help='Raw search string')
    p.add_argument('--pretty', action='store_true', help='Indent JSON output')
    p.set_defaults(func=cmd_parse_query)

    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
        logging.basicConfig(
            level=getattr(logging, config.logging.level, logging.INFO),
            format='%(levelname)s %(name)s: %(message)s',
            stream=sys.stderr
        )
        return args.func(args, config)
    except RAGError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
