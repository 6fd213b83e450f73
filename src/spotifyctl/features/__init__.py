"""Feature packages: reply decoding and status formatting."""
