"""Main entry point for nativebindgen."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application import AbiExtractor, write_document
from .exceptions import NativeBindgenError, ParseFailure
from .infrastructure.config import Config, get_config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract struct layouts, function signatures and constants "
        "from a C/C++ header as a JSON ABI description using libclang",
        epilog="""
Examples:
  # Describe a header (writes clang-c.json and prints it)
  python main.py test.h

  # Extra include directories
  python main.py api.h -I include -I third_party/include

  # Parse as C++ and write elsewhere without echoing
  python main.py api.hpp --clang-arg=-xc++ --clang-arg=-std=c++17 -o out/abi.json --no-stdout

  # Using .env file for configuration
  echo 'HEADER_PATH=include/api.h' > .env
  python main.py
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "header",
        type=Path,
        nargs="?",
        help="Header file to describe (optional if HEADER_PATH is set)",
    )
    parser.add_argument(
        "-I",
        "--include",
        dest="include_paths",
        type=Path,
        action="append",
        default=[],
        metavar="DIR",
        help="Add a directory to the include search path (repeatable)",
    )
    parser.add_argument(
        "--clang-arg",
        dest="clang_args",
        action="append",
        default=[],
        metavar="ARG",
        help="Pass an extra argument to the compiler front-end (repeatable)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output JSON file (default: clang-c.json)",
    )
    parser.add_argument(
        "--no-stdout",
        dest="echo_stdout",
        action="store_false",
        default=None,
        help="Do not print the document to stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for header-to-ABI extraction."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            header_path=args.header,
            output_file=args.output,
            include_paths=args.include_paths,
            extra_args=args.clang_args,
            verbose=args.verbose,
            echo_stdout=args.echo_stdout,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Header: {config.header_path}")
    logger.debug(f"Compiler arguments: {config.clang_args()}")
    logger.debug(f"Output file: {config.output_file}")

    try:
        with AbiExtractor(config.header_path, config.clang_args(), config.libclang_path) as extractor:
            for diagnostic in extractor.diagnostics:
                print(diagnostic, file=sys.stderr)
            document = extractor.extract()
    except ParseFailure as e:
        for diagnostic in e.diagnostics:
            print(diagnostic, file=sys.stderr)
        logger.error(str(e))
        sys.exit(1)
    except NativeBindgenError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    config.ensure_output_dir()
    write_document(
        document,
        config.output_file,
        indent=get_config()["JSON_INDENT"],
        echo=sys.stdout if config.echo_stdout else None,
    )

    sys.exit(0)


if __name__ == "__main__":
    main()
