"""
Pytest configuration and shared fixtures for i18n-scan tests.

This module provides:
- Fixture paths
- A writable copy of the sample project
- Locale file helpers
"""

import json
import shutil
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
FIXTURES_DIR = TESTS_DIR / "fixtures"
PROJECT_FIXTURE_DIR = FIXTURES_DIR / "project"
CONFIG_FIXTURES_DIR = FIXTURES_DIR / "config"

# Keys referenced by the sample project (node_modules excluded)
PROJECT_KEYS = {
    "home.title",
    "home.welcome",
    "It's ready",
    "nav.home",
    "nav.about",
    "Hello world",
    'errors."quoted"',
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Writable copy of tests/fixtures/project."""
    target = tmp_path / "project"
    shutil.copytree(PROJECT_FIXTURE_DIR, target)
    return target


@pytest.fixture
def project_keys() -> set:
    """Keys referenced by the sample project."""
    return set(PROJECT_KEYS)


@pytest.fixture
def read_locale():
    """Return a helper that loads <dir>/<locale>.json as a dict."""

    def _read(locales_dir: Path, locale: str) -> dict:
        with open(locales_dir / f"{locale}.json", encoding="utf-8") as f:
            return json.load(f)

    return _read
