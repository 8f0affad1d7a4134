"""
Shared test fixtures and path constants for ifx-files tests.

Input file paths are module-level constants so they are easy to find
and update if sample files move or new ones are added.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent.parent / "inputs"

EXAMPLE_IFX = INPUT_DIR / "example.ifx"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against sample input files)",
    )
