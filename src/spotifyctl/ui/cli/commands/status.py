"""Status command: print the current track as one line."""

from typing import final, override

from spotifyctl.features.formatting import FormatRequest, format_request
from spotifyctl.features.metadata import extract_track_metadata
from spotifyctl.platform.logging import logger
from spotifyctl.platform.mpris import MprisClient
from spotifyctl.ui.cli.args.options import StatusArgs
from spotifyctl.ui.cli.commands.executor import CommandExecutor
from spotifyctl.ui.cli.display.status import StatusDisplay


@final
class StatusCommand(CommandExecutor):
    """Query the player's metadata and print the formatted status line."""

    args: StatusArgs
    display: StatusDisplay

    def __init__(
        self,
        args: StatusArgs,
        client: MprisClient | None = None,
        display: StatusDisplay | None = None,
    ) -> None:
        super().__init__(args, client)
        self.args = args
        self.display = display or StatusDisplay()

    @override
    def execute(self) -> None:
        reply = self.client.get_metadata()
        metadata = extract_track_metadata(reply)
        logger.debug("Decoded metadata: artist=%r title=%r", metadata.artist, metadata.title)

        request = FormatRequest(
            artist=metadata.artist or "",
            title=metadata.title or "",
            max_artist_length=self.args.max_artist_length,
            max_title_length=self.args.max_title_length,
            max_length=self.args.max_length,
            template=self.args.template,
            trunc=self.args.trunc,
        )
        self.display.show_status(format_request(request))
