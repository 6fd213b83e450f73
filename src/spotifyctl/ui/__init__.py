"""User interfaces for spotifyctl."""
