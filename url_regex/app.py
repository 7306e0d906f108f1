"""Command line entry point for the regex concatenation tool."""

# Standard library imports
import argparse
import logging
import os
import sys

from url_regex.core.modes import CleanupMode, MatchingMode, PatternConfig
from url_regex.core.pipeline import compute_pattern_for, process_and_copy
from url_regex.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def configure_logging(verbose=False):
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def get_parser():
    """Get argument parser"""
    parser = argparse.ArgumentParser(
        prog="url-regex",
        description="Turn a list of URLs into one alternation regex",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('-c', '--cleanup',
                        choices=[mode.value for mode in CleanupMode],
                        default=CleanupMode.KEEP_FULL.value,
                        help='Leading URL part to strip from every line')
    parser.add_argument('-m', '--matching',
                        choices=[mode.value for mode in MatchingMode],
                        default=MatchingMode.STRICT.value,
                        help='Wildcard (.*) or strict ($) suffix')
    parser.add_argument('-i', '--input', dest='input_file',
                        help="File with one URL per line ('-' for stdin)")
    parser.add_argument('--gui', action='store_true',
                        help='Open the graphical window')
    parser.add_argument('--no-copy', action='store_true',
                        help='Do not copy the result to the clipboard')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('urls', nargs='*',
                        help='URLs to process')
    return parser


def parse_arguments(args=None):
    """Parse command line arguments"""
    parser = get_parser()
    parsed_args = parser.parse_args(args)

    # Validate arguments
    if parsed_args.gui and (parsed_args.urls or parsed_args.input_file):
        parser.error("Cannot combine --gui with URLs or --input")

    if parsed_args.input_file and parsed_args.input_file != '-':
        if not os.path.isfile(parsed_args.input_file):
            parser.error(f"Input file not found: {parsed_args.input_file}")
        if not os.access(parsed_args.input_file, os.R_OK):
            parser.error(f"Cannot read input file: {parsed_args.input_file}")

    return parsed_args


def build_config(args):
    """Turn parsed arguments into a PatternConfig"""
    try:
        return PatternConfig(
            cleanup=CleanupMode(args.cleanup),
            matching=MatchingMode(args.matching),
        )
    except ValueError as e:
        raise ConfigurationError("Invalid mode selection", original_error=e) from e


def read_input(args, stdin=None):
    """Collect raw input text from --input, positional URLs or stdin"""
    stdin = sys.stdin if stdin is None else stdin
    chunks = []
    if args.input_file == '-':
        chunks.append(stdin.read())
    elif args.input_file:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            chunks.append(f.read())
    chunks.extend(args.urls)
    if not chunks:
        chunks.append(stdin.read())
    return "\n".join(chunks)


def wants_gui(args, stdin=None):
    stdin = sys.stdin if stdin is None else stdin
    if args.gui:
        return True
    return not args.urls and not args.input_file and stdin.isatty()


def run_cli(args, stdin=None, stdout=None, stderr=None, writer=None):
    """Process URLs from the command line and print the pattern.

    Returns:
        int: Process exit code
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    config = build_config(args)
    raw_input = read_input(args, stdin)

    if args.no_copy:
        print(compute_pattern_for(raw_input, config), file=stdout)
        return 0

    result = process_and_copy(raw_input, config, writer)
    print(result.pattern, file=stdout)
    print(result.clipboard.message, file=stderr)
    return 0


def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    try:
        if wants_gui(args):
            from url_regex.gui.app import run_gui
            run_gui(build_config(args))
            return 0
        return run_cli(args)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted. Exiting.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
