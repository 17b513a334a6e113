#!/usr/bin/env python3
# run_matcher.py
# This file is part of Seqex - Sequence Expression Matching
#
# Command-line interface for matching token files against patterns

import sys
import argparse
from pathlib import Path

from core import MatchSession
from notation import compile_pattern, ParseError
from utils.token_reader import read_tokens, validate_token_file, TokenFormatError
from utils.logger import configure_logging, get_logger


class PatternFileError(Exception):
    """Exception raised when the pattern file is missing, unreadable or empty."""

    pass


def read_pattern_file(filepath: Path) -> str:
    """Read a pattern from file.

    Args:
        filepath: Path to the pattern file

    Returns:
        Pattern text

    Raises:
        PatternFileError: If pattern file is missing, empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError as e:
        raise PatternFileError(f"Pattern file not found: {filepath}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise PatternFileError(f"Error reading pattern file: {e}") from e

    if not content:
        raise PatternFileError("Pattern file is empty")

    return content


def process_matching_session(
    session: MatchSession, token_path: str, stop_on_verdict: bool
) -> int:
    """Feed every token of the file into the session.

    Args:
        session: Initialized match session
        token_path: Path to token file
        stop_on_verdict: Whether to stop once the input is definitely rejected

    Returns:
        Number of tokens processed
    """
    session.feed_all(read_tokens(token_path), stop_when_decided=stop_on_verdict)
    return session.tokens_consumed


def print_final_analysis(session: MatchSession) -> None:
    """Print path-set statistics and the verdict history.

    Args:
        session: Completed match session
    """
    logger = get_logger()
    stats = session.get_performance_stats()

    logger.info(f"\n📊 Tokens processed: {stats['tokens_consumed']}")
    if stats["current_path_count"] is not None:
        logger.info(f"   Live paths: {stats['current_path_count']}")
        logger.info(f"   Peak paths: {stats['peak_path_count']}")

    logger.info("\n📋 Verdict history:")
    for position, verdict in enumerate(session.history):
        logger.info(f"  after {position} token(s): {verdict}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Seqex sequence expression matcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_matcher.py -p pattern.sx -t tokens.csv
  python run_matcher.py -p pattern.sx -t tokens.csv -v
  python run_matcher.py -p pattern.sx -t tokens.csv --debug
  python run_matcher.py -p pattern.sx -t tokens.csv --validate-only

Pattern file format:
  pattern.sx:
    evens = unique & even;
    seq(evens, exactly(3) & text)

Token file format:
  tokens.csv:
    token,type
    2,int
    a,str
        """,
    )

    parser.add_argument(
        "-p", "--pattern", required=True, type=Path, help="Path to pattern file"
    )

    parser.add_argument(
        "-t", "--tokens", required=True, type=Path, help="Path to CSV token file"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log the verdict after every token"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only validate pattern and token file"
    )

    parser.add_argument(
        "--stop-on-verdict",
        action="store_true",
        help="Stop reading tokens once the input is rejected",
    )

    parser.add_argument(
        "--debug-final", action="store_true", help="Print path statistics and verdict history"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the matcher.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        source = read_pattern_file(args.pattern)
        matcher = compile_pattern(source)
        logger.info(f"📋 Pattern loaded: {source}")

        logger.info(f"🔍 Validating token file: {args.tokens}")
        token_count = validate_token_file(str(args.tokens))

        if args.validate_only:
            logger.info(f"✅ Pattern and {token_count} token(s) are valid. Exiting.")
            return 0

        session = MatchSession(matcher, verbose=args.verbose or args.debug)
        session.print_header()
        process_matching_session(session, str(args.tokens), args.stop_on_verdict)
        session.print_final_verdict()

        if args.debug_final:
            print_final_analysis(session)

        return 0

    except TokenFormatError as e:
        logger.error(f"Token file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Pattern error: {e}")
        return 2

    except PatternFileError as e:
        logger.error(f"Pattern file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Matching interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
