#!/usr/bin/env python3
"""
textanalyser CLI - character, word and dictionary statistics for a text file.

Usage:
    textanalyser <file> [-a chars words dictionary|all] [-D dict.txt ...] [flags]
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config, get_default_config_path
from .core.analysis_runner import ANALYSER_KEYS, AnalysisRunner
from .logging_utils import setup_logging
from .utils.display import display_error, display_result_summary

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="textanalyser",
        description="textanalyser - Character, word and dictionary statistics for text files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  textanalyser book.txt                       # Default analysers (chars, words)
  textanalyser book.txt -a words              # Word frequency only
  textanalyser book.txt -a all -D words.txt   # Every analyser, with a dictionary
  textanalyser book.txt -a dictionary -D a.txt b.txt   # Dictionaries are merged
  textanalyser book.txt --summary             # Add word length summary tables
        """
    )

    parser.add_argument(
        "file",
        help="Text file to analyse"
    )

    parser.add_argument(
        "-a", "--analyser",
        nargs="+",
        choices=list(ANALYSER_KEYS) + ["all"],
        metavar="NAME",
        help=f"Analysers to run: {', '.join(ANALYSER_KEYS)} or all (default from config)"
    )

    parser.add_argument(
        "-D", "--dictionary",
        nargs="+",
        metavar="FILE",
        default=[],
        help="Dictionary file(s), one word per line, used by the dictionary analyser"
    )

    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help=f"YAML config file (default: {get_default_config_path()} if present)"
    )

    parser.add_argument(
        "-s", "--summary",
        action="store_true",
        help="Show word count, length and longest/shortest word for each analyser"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def load_config(config_path: Optional[str]) -> Config:
    """Load the config file, falling back to defaults.

    An explicitly given path must exist; the default path is optional.
    """
    if config_path:
        return Config.load(Path(config_path).expanduser())

    default_path = get_default_config_path()
    if default_path.exists():
        return Config.load(default_path)
    return Config.default()


def resolve_analysers(requested: Optional[List[str]], config: Config) -> List[str]:
    """Expand 'all' and drop duplicates, keeping the requested order."""
    keys = requested or config.analysers
    if "all" in keys:
        return list(ANALYSER_KEYS)

    resolved = []
    for key in keys:
        if key not in resolved:
            resolved.append(key)
    return resolved


def handle_analyse(
    file_path: str,
    keys: List[str],
    dictionaries: List[str],
    config: Config,
    show_summary: bool = False
) -> int:
    """Run the analysers and print their reports.

    Returns:
        Exit code
    """
    runner = AnalysisRunner(encoding=config.encoding)

    if "dictionary" in keys:
        dictionary_files = config.dictionaries + dictionaries
        if not dictionary_files:
            logger.warning("Dictionary analyser selected without any dictionary files")
        size = runner.load_dictionaries(dictionary_files)
        logger.info("Loaded %d dictionary words", size)
    elif dictionaries:
        logger.warning(
            "Dictionary files ignored because the dictionary analyser is not selected"
        )

    for i, analyser in enumerate(runner.run_many(keys, file_path)):
        if i > 0:
            sys.stdout.write("\n")
        analyser.generate_report(sys.stdout)
        if show_summary:
            display_result_summary(analyser)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging("DEBUG" if args.verbose else config.log_level)

        keys = resolve_analysers(args.analyser, config)
        return handle_analyse(
            args.file,
            keys,
            args.dictionary,
            config,
            show_summary=args.summary
        )
    except (OSError, ValueError) as e:
        display_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
