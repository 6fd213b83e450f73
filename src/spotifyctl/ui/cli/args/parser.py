"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any, NoReturn, final, override

from spotifyctl.config.config import Config, ConfigError
from spotifyctl.features.formatting import TOKEN_ARTIST, TOKEN_TITLE
from spotifyctl.platform.logging import setup_logger
from spotifyctl.ui.cli.args.options import PLAYER_METHODS, CLIArgs, PlayerArgs, StatusArgs

PROG: str = "spotifyctl"
HELP_HINT: str = f"Try '{PROG} help' for more information"
COMMANDS: tuple[str, ...] = ("status", *PLAYER_METHODS, "help")
VALUE_OPTIONS: frozenset[str] = frozenset(
    {"--max-artist-length", "--max-title-length", "--max-length", "--format", "--trunc"}
)

# argparse expands %-placeholders in option help
_ARTIST_HELP = TOKEN_ARTIST.replace("%", "%%")
_TITLE_HELP = TOKEN_TITLE.replace("%", "%%")

_DESCRIPTION = """\
Control Spotify over the MPRIS D-Bus interface.

commands:
  play           Play spotify
  pause          Pause spotify
  playpause      Toggle the play/pause state on spotify
  next           Go to the next track on spotify
  previous       Go to the previous track on spotify
  status         Print the status of spotify including the track
                 title and artist name
  help           Show this message
"""

_EPILOG = f"""\
examples:
  {PROG} status --format '{TOKEN_ARTIST}: {TOKEN_TITLE}' \\
      --max-length 30 --max-artist-length 10 \\
      --max-title-length 20 --trunc '...'
  If artist name is 'Eminem' and track title is 'Sing For The Moment',
  the output will be:
  Eminem: Sing For The Moment
  since the total length is not more than 30 characters.

  {PROG} status --format '{TOKEN_ARTIST}: {TOKEN_TITLE}' \\
      --max-length 20 --max-artist-length 10 \\
      --max-title-length 10 --trunc '...'
  With the same track the output will be:
  Eminem: Sing Fo...
  since the untruncated output is longer than 20 characters.

  {PROG} status --format '{TOKEN_ARTIST}: {TOKEN_TITLE}' \\
      --max-title-length 13 --trunc '...'
  With the same track the output will be:
  Eminem: Sing For T...
  since the title limit always applies when no max length is given.
"""


class _CLIParser(argparse.ArgumentParser):
    """``argparse`` parser that reports usage errors with exit status 1."""

    @override
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n{HELP_HINT}\n")


def _positive_int(label: str) -> Callable[[str], int]:
    """Build an argparse ``type`` accepting only positive integers."""

    def _parse(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{label} must be a positive integer!") from None
        if value <= 0:
            raise argparse.ArgumentTypeError(f"{label} must be a positive integer!")
        return value

    return _parse


def _attach_dash_values(args: Sequence[str]) -> list[str]:
    """Join option values starting with '-' to their option as ``--opt=value``.

    argparse would otherwise read ``--trunc -..`` as two options.
    """
    joined: list[str] = []
    index = 0
    while index < len(args):
        arg = args[index]
        if arg in VALUE_OPTIONS and index + 1 < len(args) and args[index + 1].startswith("-"):
            joined.append(f"{arg}={args[index + 1]}")
            index += 2
            continue
        joined.append(arg)
        index += 1
    return joined


def _prefer(cli_value: Any, config_value: Any) -> Any:
    """Command line values win over configuration values."""
    return config_value if cli_value is None else cli_value


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _CLIParser(
            prog=PROG,
            usage=f"{PROG} [ -q ] [options] <command>",
            description=_DESCRIPTION,
            epilog=_EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "command",
            nargs="?",
            choices=COMMANDS,
            metavar="<command>",
            help="One of: " + ", ".join(COMMANDS),
        )
        _ = parser.add_argument(
            "-q",
            dest="quiet",
            action="store_true",
            help="Hide errors",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug information on stderr",
        )
        _ = parser.add_argument(
            "--max-artist-length",
            type=_positive_int("Artist length"),
            metavar="N",
            help=(
                "The maximum length of the artist name to show. If --max-length is "
                "given, this only applies when the output is longer than max-length "
                "(default: no limit)"
            ),
        )
        _ = parser.add_argument(
            "--max-title-length",
            type=_positive_int("Title length"),
            metavar="N",
            help=(
                "The maximum length of the track title to show. If --max-length is "
                "given, this only applies when the output is longer than max-length "
                "(default: no limit)"
            ),
        )
        _ = parser.add_argument(
            "--max-length",
            type=_positive_int("Max length"),
            metavar="N",
            help=(
                "The maximum length of the output of the status command. Works best "
                "as the sum of the max artist and max title lengths (default: no limit)"
            ),
        )
        _ = parser.add_argument(
            "--format",
            dest="template",
            metavar="TEMPLATE",
            help=(
                f"The format to display the status in. The {_ARTIST_HELP} and "
                f"{_TITLE_HELP} tokens are replaced by the artist name and track "
                f"title (default: '{_ARTIST_HELP}: {_TITLE_HELP}')"
            ),
        )
        _ = parser.add_argument(
            "--trunc",
            metavar="MARKER",
            help=(
                "The string that shows a value was cut to its max length. It counts "
                "towards the max lengths and can be blank (default: '...')"
            ),
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments merged with the config file.

        Raises:
            SystemExit: On ``help`` (status 0) and on usage errors (status 1).
        """
        parser = ArgumentParser.create_parser()
        raw_args = sys.argv[1:] if args_list is None else args_list
        parsed_args = parser.parse_args(_attach_dash_values(raw_args))

        command: str | None = parsed_args.command
        if command == "help":
            parser.print_help()
            sys.exit(0)
        if command is None:
            parser.error("No command specified")

        try:
            configuration = Config.load()
        except ConfigError as e:
            parser.error(str(e))

        log_level = logging.DEBUG if parsed_args.verbose else logging.WARNING
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        suppress_errors = bool(parsed_args.quiet) or configuration.suppress_errors

        if command == "status":
            return ArgumentParser._process_status(parsed_args, configuration, suppress_errors)

        return PlayerArgs(
            command=command,
            suppress_errors=suppress_errors,
            verbose=parsed_args.verbose,
            player=configuration.player,
            timeout=configuration.timeout,
        )

    @staticmethod
    def _process_status(
        parsed_args: argparse.Namespace,
        configuration: Config,
        suppress_errors: bool,
    ) -> StatusArgs:
        return StatusArgs(
            command="status",
            suppress_errors=suppress_errors,
            verbose=parsed_args.verbose,
            player=configuration.player,
            timeout=configuration.timeout,
            max_artist_length=_prefer(parsed_args.max_artist_length, configuration.max_artist_length),
            max_title_length=_prefer(parsed_args.max_title_length, configuration.max_title_length),
            max_length=_prefer(parsed_args.max_length, configuration.max_length),
            template=_prefer(parsed_args.template, configuration.format),
            trunc=_prefer(parsed_args.trunc, configuration.trunc),
        )
