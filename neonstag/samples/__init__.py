# NeonStag - Sample Documents
"""
Sample SVG documents for demos and testing.
"""

from __future__ import annotations

from pathlib import Path

# Base path for sample documents
SAMPLES_DIR = Path(__file__).parent
SVG_DIR = SAMPLES_DIR / 'svgs'


def list_samples() -> list[str]:
    """Names of the bundled SVG samples (without extension)."""
    return sorted(path.stem for path in SVG_DIR.glob('*.svg'))


def sample_svg(name: str) -> str:
    """Load a bundled SVG sample by name."""
    path = SVG_DIR / f'{name}.svg'
    if not path.exists():
        raise FileNotFoundError(f"Sample SVG not found: {name}")
    return path.read_text(encoding='utf-8')


def sign() -> str:
    """Stroked and filled shapes on a scaled canvas (viewBox 400 wide, rendered 200px)."""
    return sample_svg('sign')


def star() -> str:
    """Filled star without stroke, plus a stroked line."""
    return sample_svg('star')


__all__ = ['SAMPLES_DIR', 'SVG_DIR', 'list_samples', 'sample_svg', 'sign', 'star']
