#!/usr/bin/env python3
"""
Star Realms Log Parser - Main CLI Interface
Extracts the players and the winner from Star Realms game logs
"""

import argparse
import glob
import logging
import os
import sys
from typing import List, Optional

import config
from star_realms_parser import (
    GameLogParseError,
    export_to_json,
    parse_game_file,
    strip_color_tags,
)

logger = logging.getLogger(__name__)


def setup_logging():
    """Log to both the console and the configured log file"""
    # force replaces handlers left by an earlier call
    logging.basicConfig(
        force=True,
        level=getattr(logging, str(getattr(config, 'LOG_LEVEL', 'INFO')).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(getattr(config, 'LOG_FILE', 'parser.log'), encoding='utf-8'),
            logging.StreamHandler()
        ]
    )


def validate_config():
    """Validate that configuration is properly set up"""
    required_attrs = ['RAW_LOGS_DIR', 'PARSED_DATA_DIR', 'LOG_FILE_PATTERN']

    for attr in required_attrs:
        if not hasattr(config, attr):
            logger.error(f"Missing required configuration: {attr}")
            return False

    return True


def find_log_files(paths: List[str]) -> List[str]:
    """Resolve the log files to parse, falling back to every log in RAW_LOGS_DIR"""
    if paths:
        return list(paths)

    pattern = os.path.join(config.RAW_LOGS_DIR, config.LOG_FILE_PATTERN)
    log_files = sorted(glob.glob(pattern))
    if not log_files:
        logger.warning(f"No game logs found matching {pattern}")
    return log_files


def handle_parse(args) -> int:
    """Handle parse command, returns the number of logs that failed"""
    log_files = find_log_files(args.logs)
    output_dir = args.output_dir or config.PARSED_DATA_DIR

    parsed = 0
    failed = 0

    for log_path in log_files:
        try:
            game = parse_game_file(log_path)
        except GameLogParseError as e:
            logger.error(f"Could not parse {log_path}: {e}")
            failed += 1
            continue
        except OSError as e:
            logger.error(f"Could not read {log_path}: {e}")
            failed += 1
            continue

        parsed += 1
        print(log_path)
        print(f"  Players: {', '.join(game.players)}")
        print(f"  Winner: {game.winner}")

        if args.export:
            stem = os.path.splitext(os.path.basename(log_path))[0]
            export_to_json(game, os.path.join(output_dir, f"{stem}.json"))

    logger.info(f"Parse complete: {parsed} parsed, {failed} failed")
    return failed


def handle_clean(args):
    """Handle clean command"""
    with open(args.log, 'r', encoding='utf-8') as f:
        cleaned = strip_color_tags(f.read())

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(cleaned)
        logger.info(f"Wrote cleaned log to {args.output}")
    else:
        print(cleaned, end='')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Star Realms Log Parser',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py parse
  python main.py parse game1.txt game2.txt --export
  python main.py clean game1.txt --output game1_clean.txt
        """
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # parse command
    parse_parser = subparsers.add_parser('parse',
                                         help='Extract players and winner from game logs')
    parse_parser.add_argument('logs', nargs='*',
                              help='Game log files (default: all logs in RAW_LOGS_DIR)')
    parse_parser.add_argument('--export', action='store_true',
                              help='Write a JSON summary per game')
    parse_parser.add_argument('--output-dir',
                              help='Directory for JSON summaries (default: PARSED_DATA_DIR)')

    # clean command
    clean_parser = subparsers.add_parser('clean',
                                         help='Strip color markup from a game log')
    clean_parser.add_argument('log', help='Game log file')
    clean_parser.add_argument('--output', '-o',
                              help='Write the cleaned log here instead of stdout')

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    # Validate configuration
    if not validate_config():
        sys.exit(1)

    # Route to appropriate handler
    try:
        if args.command == 'parse':
            if handle_parse(args):
                sys.exit(1)
        elif args.command == 'clean':
            handle_clean(args)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(1)
    except OSError as e:
        logger.error(f"File error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
