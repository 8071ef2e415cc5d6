"""Shared test fixtures for ramlspec.

Provides paths to the RAML fixture files and their raw contents. These
fixtures are discovered by pytest and available to all test modules
without explicit imports.
"""

from __future__ import annotations

from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# RAML fixture files
# ---------------------------------------------------------------------------


@pytest.fixture
def mobile_order_path() -> Path:
    """Path to a full RAML document with every extracted field set."""
    return FIXTURES_DIR / "mobile_order.raml"


@pytest.fixture
def mobile_order_text(mobile_order_path: Path) -> str:
    """Raw text of the full mobile order RAML document."""
    return mobile_order_path.read_text(encoding="utf-8")


@pytest.fixture
def minimal_path() -> Path:
    """Path to a RAML document carrying only a title."""
    return FIXTURES_DIR / "minimal.raml"
