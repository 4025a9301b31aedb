"""
Command Line Interface for unzpack.

Provides the persist, extract and unpack commands.
"""

import argparse
import sys
from typing import List, Optional

from ._version import __version__
from .cli_helpers import exit_with_error, map_exception_to_exit_code
from .config import UnzpackSettings
from .constants import ExitCodes
from .core import extract, persist, unpack
from .logging_config import configure_logging, get_logger


def _read_source(source: str) -> bytes:
    """Read archive bytes from a file path, or from stdin when `source` is '-'."""
    if source == '-':
        return sys.stdin.buffer.read()
    with open(source, 'rb') as handle:
        return handle.read()


def _fail(exc: Exception, action: str) -> None:
    exit_code = map_exception_to_exit_code(exc)
    if exit_code is None:
        get_logger(__name__).exception("Unexpected failure during %s", action)
        exit_code = ExitCodes.UNEXPECTED_ERROR
    exit_with_error(f"{action} failed: {exc}", exit_code)


class PersistCommand:
    """Handles writing archive bytes to a file."""

    @staticmethod
    def add_parser(subparsers, settings: UnzpackSettings) -> None:
        """Add persist command parser to subparsers."""
        parser = subparsers.add_parser('persist', help='Write archive bytes to a file')
        parser.add_argument('source', help="File holding the archive bytes, or '-' for stdin")
        parser.add_argument('archive', help='Destination archive file')
        parser.set_defaults(func=PersistCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Persist the source bytes."""
        try:
            path = persist(_read_source(args.source), args.archive)
        except Exception as exc:
            _fail(exc, 'persist')
            return
        print(f"Wrote {path}")


class ExtractCommand:
    """Handles extracting an archive file into a directory."""

    @staticmethod
    def add_parser(subparsers, settings: UnzpackSettings) -> None:
        """Add extract command parser to subparsers."""
        parser = subparsers.add_parser('extract', help='Extract an archive into a directory')
        parser.add_argument('archive', help='Archive file to extract (ZIP or tar)')
        parser.add_argument('outdir', help='Output directory, created if missing')
        parser.set_defaults(func=ExtractCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Extract the archive."""
        try:
            result = extract(args.archive, args.outdir, buffer_size=args.settings.copy_buffer_size)
        except Exception as exc:
            _fail(exc, 'extract')
            return
        print(f"Extracted {result.files} files and {result.directories} directories into {result.root}")


class UnpackCommand:
    """Handles persist + extract + cleanup in one step."""

    @staticmethod
    def add_parser(subparsers, settings: UnzpackSettings) -> None:
        """Add unpack command parser to subparsers."""
        parser = subparsers.add_parser(
            'unpack',
            help='Persist archive bytes, extract them and remove the archive file',
        )
        parser.add_argument('source', help="File holding the archive bytes, or '-' for stdin")
        parser.add_argument('archive', help='Intermediate archive file')
        parser.add_argument('outdir', help='Output directory, created if missing')
        removal = parser.add_mutually_exclusive_group()
        removal.add_argument('--keep-archive', dest='keep_archive', action='store_true',
                             help='Do not delete the intermediate archive file')
        removal.add_argument('--remove-archive', dest='keep_archive', action='store_false',
                             help='Delete the intermediate archive file (overrides UNZPACK_KEEP_ARCHIVE)')
        parser.set_defaults(keep_archive=settings.keep_archive, func=UnpackCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Run the full unpack sequence."""
        try:
            result = unpack(
                _read_source(args.source),
                args.archive,
                args.outdir,
                remove_archive=not args.keep_archive,
                buffer_size=args.settings.copy_buffer_size,
            )
        except Exception as exc:
            _fail(exc, 'unpack')
            return
        print(f"Unpacked {result.files} files and {result.directories} directories into {result.root}")


def create_parser(settings: Optional[UnzpackSettings] = None) -> argparse.ArgumentParser:
    """Create the main argument parser."""
    settings = settings or UnzpackSettings.from_env()
    parser = argparse.ArgumentParser(
        prog='unzpack',
        description='Persist archive bytes and extract them onto the file system'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    PersistCommand.add_parser(subparsers, settings)
    ExtractCommand.add_parser(subparsers, settings)
    UnpackCommand.add_parser(subparsers, settings)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    settings = UnzpackSettings.from_env()
    configure_logging(settings.log_level)
    parser = create_parser(settings)

    if args is None:
        args = sys.argv[1:]

    # If no arguments provided, show help
    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    parsed_args.settings = settings

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
