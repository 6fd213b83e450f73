"""src/spotifyctl/ui/cli/commands/executor.py
What: Provide shared wiring for CLI commands that talk to the player.
Why: Reuse client construction and the error reporting policy across commands.
"""

from abc import ABC, abstractmethod

from spotifyctl.features.formatting import TruncationError
from spotifyctl.platform.logging import logger
from spotifyctl.platform.mpris import MprisClient, PlayerError
from spotifyctl.ui.cli.args.options import CLIArgs


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    client: MprisClient

    def __init__(self, args: CLIArgs, client: MprisClient | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            client: Bus client to use; one is built from ``args`` when omitted.
        """
        self.args = args
        self.client = client or MprisClient(player=args.player, timeout=args.timeout)

    @abstractmethod
    def execute(self) -> None:
        """Execute the command.

        Raises:
            PlayerError: If the bus or the player fails.
            TruncationError: If the status line cannot fit the configured limits.
        """
        pass

    def run(self) -> int:
        """Execute the command and turn expected failures into an exit status.

        Returns:
            int: 0 on success, 1 when the command failed.
        """
        try:
            self.execute()
        except (PlayerError, TruncationError) as e:
            self.report_error(str(e))
            return 1
        return 0

    def report_error(self, message: str) -> None:
        """Show ``message`` on stderr unless errors are suppressed.

        Suppressed errors are still logged at debug level.
        """
        if self.args.suppress_errors:
            logger.debug("Suppressed error: %s", message)
            return
        logger.error(message)
