"""Command line interface for spotifyctl."""

import sys
from typing import final

from spotifyctl.platform.logging import logger
from spotifyctl.ui.cli.args import ArgumentParser
from spotifyctl.ui.cli.args.options import CLIArgs, StatusArgs
from spotifyctl.ui.cli.commands import CommandExecutor, PlayerCommand, StatusCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            command = CommandProcessor.build_command(args)
            exit_code = command.run()
            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Pick the command object for the parsed arguments."""

        if isinstance(args, StatusArgs):
            return StatusCommand(args)
        return PlayerCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that command processing
        calls ``sys.exit(...)`` on errors and on ``help``, so this return is
        only reached when a command completes successfully.
    """
    CommandProcessor.process_command()
    return 0
