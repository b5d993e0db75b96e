"""
Shared test fixtures for ga-events tests.

Table fixtures are written to ``tmp_path`` so no input files need to be
checked in.  ``make_table`` writes raw bytes so tests control line
endings exactly.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample tables
# ---------------------------------------------------------------------------
LOGIN_CSV = (
    "name,event_label,foo\r\n"
    "login,,bar\r\n"
    "tap,click,int\r\n"
)

CHECKOUT_CSV = (
    "name,event_label,screen_class,amount\n"
    "checkout,,CheckoutScreen,\n"
    'pay,"button, primary",CheckoutScreen,double\n'
)


@pytest.fixture()
def make_table(tmp_path):
    """Return a helper that writes ``<dir>/<name>`` and returns its path."""

    def _make(name: str, text: str, directory: Path | None = None) -> Path:
        directory = directory or tmp_path / "ga"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _make


@pytest.fixture()
def ga_dir(tmp_path, make_table) -> Path:
    """An input directory with two tables: ``login`` and ``checkout``."""
    make_table("login.csv", LOGIN_CSV)
    make_table("checkout.csv", CHECKOUT_CSV)
    return tmp_path / "ga"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (full conversion on a temp directory)",
    )
