"""
Summary: Architecture checks keeping feature code independent of the bus and the CLI.
Why: Decoding and formatting must stay testable without dbus-python or argument parsing.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[2]
FEATURES_DIR: Path = REPO_ROOT / "src" / "spotifyctl" / "features"


def _offending(directory: Path, forbidden: str) -> list[Path]:
    return [
        path
        for path in sorted(directory.rglob("*.py"))
        if forbidden in path.read_text(encoding="utf-8")
    ]


@pytest.mark.parametrize("forbidden", ["spotifyctl.platform.mpris", "spotifyctl.ui", "import dbus"])
def test_features_do_not_import_bus_or_cli(forbidden: str) -> None:
    """Feature packages only see TypedValue trees, never bus objects or CLI args."""

    offending_files = _offending(FEATURES_DIR, forbidden)
    assert offending_files == [], (
        f"Feature modules must not reference {forbidden}; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending_files)}"
    )


@pytest.mark.parametrize("feature", ["metadata", "formatting"])
def test_domain_modules_are_platform_free(feature: str) -> None:
    """Domain modules hold pure value logic and do not even log."""

    offending_files = _offending(FEATURES_DIR / feature / "domain", "spotifyctl.platform")
    assert offending_files == [], (
        "Domain modules must not import platform packages; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending_files)}"
    )
