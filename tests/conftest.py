"""Pytest configuration for jsbind tests."""

import sys
from pathlib import Path

import pytest

# Add scripts directory to path for jsbind imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'scripts'))

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fixture_source():
    """Read a declaration fixture by file name"""
    def read(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding='utf-8')
    return read
