"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

EMPTY_DRAW = "\\draw[fill,even odd rule,line width=1]  ;"

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M0,0 L10,10 Z"/>
</svg>'''

CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="M0 0 C1 2 3 4 5 6"/>
</svg>'''

NO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
  <rect x="2" y="2" width="4" height="4"/>
</svg>'''

TWO_PATHS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M1 1 L2 2"/>
  <path d="M50 50 L60 60 Z"/>
</svg>'''

NESTED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <!-- grouped -->
  <g id="layer1">
    <rect x="0" y="0" width="5" height="5"/>
    <g><path id="inner" d="M5 5 L6 6"/></g>
  </g>
</svg>'''

RELATIVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M8 14 l4 2 L16 14"/>
</svg>'''

MISSING_D_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path fill="red"/>
</svg>'''

BAD_PATH_DATA_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M 0 0 L foo"/>
</svg>'''

MALFORMED_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0,0 L1,1"'


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def no_path_svg() -> str:
    return NO_PATH_SVG


@pytest.fixture
def lambda_svg_path() -> Path:
    return FIXTURES_DIR / "lambda.svg"
