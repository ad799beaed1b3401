"""
Global test configuration.
"""

import os

import pytest

RAW_SHOWS = [
    "The Office (2005-2013)",
    "Breaking Bad (2008-2013)",
    "Friends (1994-2004)",
    "The Simpsons, 1989-2021",
    "Game of Thrones (2011)",
]


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_parser_env(request, monkeypatch):
    """Ensure a clean BROADCAST_PERIODS_* environment for each test.

    Escape hatch: @pytest.mark.allow_env_pollution keeps the environment.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("BROADCAST_PERIODS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def raw_shows() -> list[str]:
    """The mixed sample batch: four well-formed shows and one comma-shaped one."""
    return list(RAW_SHOWS)


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "allow_env_pollution: Keep BROADCAST_PERIODS_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
