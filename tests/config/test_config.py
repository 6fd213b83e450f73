"""Tests for loading the TOML configuration."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from spotifyctl.config.config import Config, ConfigError


def _write(config_file: Path, content: str) -> Path:
    config_file.parent.mkdir(parents=True, exist_ok=True)
    _ = config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


def test_missing_file_gives_defaults(isolated_config: Path) -> None:
    config = Config.load()

    assert not isolated_config.exists()
    assert config.format == "%artist%: %title%"
    assert config.trunc == "..."
    assert config.max_artist_length is None
    assert config.max_title_length is None
    assert config.max_length is None
    assert config.suppress_errors is False
    assert config.player == "spotify"
    assert config.timeout == 10.0
    assert config.log_file is None


def test_load_reads_values(isolated_config: Path) -> None:
    _ = _write(
        isolated_config,
        """
        format = "%title% - %artist%"
        trunc = "…"
        max_artist_length = 12
        max_title_length = 20
        max_length = 35
        suppress_errors = true
        player = "spotifyd"
        timeout = 3
        log_file = "~/spotifyctl.log"
        """,
    )

    config = Config.load()

    assert config.format == "%title% - %artist%"
    assert config.trunc == "…"
    assert (config.max_artist_length, config.max_title_length, config.max_length) == (12, 20, 35)
    assert config.suppress_errors is True
    assert config.player == "spotifyd"
    assert config.timeout == 3.0
    assert config.log_file == Path("~/spotifyctl.log").expanduser()


@pytest.mark.parametrize(("flag", "expected"), [("true", "state"), ("false", None)])
def test_log_file_flag_selects_default_location(
    flag: str,
    expected: str | None,
    isolated_config: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    _ = _write(isolated_config, f"log_file = {flag}\n")

    config = Config.load()

    if expected is None:
        assert config.log_file is None
    else:
        assert config.log_file == (tmp_path / expected / "spotifyctl" / "spotifyctl.log").resolve()


def test_load_caches_instance(isolated_config: Path) -> None:
    first = Config.load()
    _ = _write(isolated_config, 'format = "changed"\n')

    assert Config.load() is first


def test_invalid_values_are_ignored_with_warning(isolated_config: Path, mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("spotifyctl.config.config.logger")
    _ = _write(
        isolated_config,
        """
        max_length = 0
        max_title_length = "ten"
        max_artist_length = true
        timeout = -1
        suppress_errors = "yes"
        player = ""
        format = 5
        colour = "green"
        """,
    )

    config = Config.load()

    assert config == Config()
    assert mock_logger.warning.call_count == 8


def test_invalid_toml_raises_config_error(isolated_config: Path) -> None:
    _ = _write(isolated_config, "format = \n")

    with pytest.raises(ConfigError, match="Failed to load configuration"):
        _ = Config.load()


def test_explicit_file_is_not_cached(tmp_path: Path) -> None:
    explicit = _write(tmp_path / "other.toml", "max_length = 5\n")

    assert Config.load(explicit).max_length == 5
    assert Config.load().max_length is None
