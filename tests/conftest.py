# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

_FIXTURES_FILE = Path(__file__).parent / "fixtures.toml"


def load_fixtures() -> list[tuple[str, bytes, str | None, list[str]]]:
    """Read ``fixtures.toml`` into (name, sample bytes, hint, expected) tuples."""
    with _FIXTURES_FILE.open("rb") as f:
        config = tomllib.load(f)

    cases = []
    for fixture in config["fixtures"]:
        sample = bytes.fromhex(fixture.get("bom", "")) + fixture["text"].encode(
            fixture["codec"]
        )
        cases.append(
            (fixture["name"], sample, fixture.get("hint"), fixture["expected"])
        )
    return cases


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize fixture tests from the table in ``fixtures.toml``."""
    if "expected_candidates" in metafunc.fixturenames:
        cases = load_fixtures()
        metafunc.parametrize(
            ("sample", "hint", "expected_candidates"),
            [case[1:] for case in cases],
            ids=[case[0] for case in cases],
        )
