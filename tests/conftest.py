"""
Pytest fixtures for NeonStag tests
"""

import pytest

from neonstag import NeonOptions

SIMPLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="40" fill="red"/>
</svg>'''

MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="50" viewBox="0 0 100 100">
  <rect x="0" y="0" width="10" height="10" fill="red"/>
  <path d="M0 0 L10 10" stroke="blue" stroke-width="3"/>
  <g>
    <line x1="0" y1="0" x2="5" y2="5" stroke="green" fill="yellow"/>
    <ellipse cx="5" cy="5" rx="2" ry="1"/>
  </g>
  <text x="1" y="1">label</text>
</svg>'''


@pytest.fixture
def options() -> NeonOptions:
    """Default neon options."""
    return NeonOptions()


@pytest.fixture
def simple_svg() -> str:
    """One filled circle."""
    return SIMPLE_SVG


@pytest.fixture
def mixed_svg() -> str:
    """Filled, stroked and unpainted shapes plus a text element."""
    return MIXED_SVG
