"""
Summary: Validate the Summary/Why header schema of feature packages, domain modules and tests.
Why: Feature packages and their tests share one header format; new modules must follow it.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[1]
SUMMARY_PREFIX: str = "Summary: "
WHY_PREFIX: str = "Why: "


def _schema_modules() -> list[Path]:
    features_dir = REPO_ROOT / "src" / "spotifyctl" / "features"
    package_roots = features_dir.glob("*/__init__.py")
    domain_modules = (path for path in features_dir.glob("*/domain/*.py") if path.name != "__init__.py")
    feature_tests = (REPO_ROOT / "tests" / "features").rglob("test_*.py")
    return sorted(
        path.relative_to(REPO_ROOT)
        for path in (*package_roots, *domain_modules, *feature_tests)
    )


def _header_lines(path: Path) -> list[str]:
    """Return the lines of the leading docstring, without the quote lines."""

    lines = [line.rstrip() for line in path.read_text(encoding="utf-8").splitlines()]
    start = next((index for index, line in enumerate(lines) if line.strip()), None)
    assert start is not None, f"{path} must not be empty"
    assert lines[start] == '"""', f"{path} must open its header docstring on its own line"

    end = next((index for index in range(start + 1, len(lines)) if lines[index] == '"""'), None)
    assert end is not None, f"{path} header docstring must close on its own line"
    return lines[start + 1 : end]


def test_schema_covers_every_feature() -> None:
    modules = {path.name for path in _schema_modules()}

    assert "__init__.py" in modules
    assert {"typed_value.py", "cursor.py", "strings.py"} <= modules
    assert {"test_output_formatter.py", "test_metadata_extractor.py"} <= modules


@pytest.mark.parametrize("module_path", _schema_modules(), ids=str)
def test_module_headers_follow_summary_why_schema(module_path: Path) -> None:
    """The header holds exactly a Summary line followed by a Why line."""

    header = _header_lines(REPO_ROOT / module_path)

    assert len(header) == 2, f"{module_path} header must have exactly Summary and Why lines"
    summary_line, why_line = header
    assert summary_line.startswith(SUMMARY_PREFIX), f"{module_path} must start with '{SUMMARY_PREFIX}'"
    assert why_line.startswith(WHY_PREFIX), f"{module_path} must follow with '{WHY_PREFIX}'"
    assert summary_line.removeprefix(SUMMARY_PREFIX).strip(), f"{module_path} summary text cannot be empty"
    assert why_line.removeprefix(WHY_PREFIX).strip(), f"{module_path} why text cannot be empty"
