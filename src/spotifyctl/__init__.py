"""spotifyctl - control an MPRIS media player from the command line."""

__version__ = "0.1.0"
