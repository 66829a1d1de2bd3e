"""Pytest configuration and shared fixtures for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def people_records() -> list[dict[str, object]]:
    """Nested records shared by store and query tests."""
    return [
        {"id": "ada", "name": "Ada", "profile": {"age": 36, "city": "London"}, "tags": ["math"]},
        {"id": "grace", "name": "Grace", "profile": {"age": 85, "city": "Arlington"}},
        {"id": "linus", "name": "Linus", "profile": {"age": 17, "city": "Helsinki"}},
    ]
