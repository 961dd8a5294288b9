"""Shared outlines for the test suite."""

import pytest

MIXED = """# Project Plan

## Research
  - Market analysis
    - Competitors
  - User interviews

- ## Build
  - Backend
  - Frontend

## Launch"""


@pytest.fixture
def mixed_outline() -> str:
    """Headings, bullets and a bullet heading, with blank lines between sections."""
    return MIXED
