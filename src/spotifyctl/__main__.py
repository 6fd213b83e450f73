"""Allow ``python -m spotifyctl``."""

from spotifyctl.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
