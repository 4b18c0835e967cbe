"""
NeonStag - Neon glow effects for SVG documents

Example:
    >>> from neonstag import process, NeonOptions
    >>> result = process(svg_text, NeonOptions(color='#ff00d0', multi_color=True))
    >>> result.svg, result.warnings
"""

__version__ = "0.1.0"

from .exceptions import NeonError, SvgParseError, MissingSvgRootError, UnsupportedFileError
from .options import (
    NeonOptions,
    ExportOptions,
    ProcessResult,
    NeonPreset,
    DEFAULT_OPTIONS,
    NEON_PRESETS,
    OPTION_RANGES,
    get_preset,
)
from .scale import compute_scale
from .filter_graph import (
    GaussianBlur,
    Flood,
    Composite,
    Merge,
    NeonFilter,
    build_filter,
    inner_spread_for,
)
from .transform import clone_and_apply
from .processor import process, parse_svg
from .export import package_export
from .ingest import decode_svg_upload, read_svg_file
from .workspace import NeonWorkspace

__all__ = [
    "__version__",
    # Engine
    "process",
    "parse_svg",
    "compute_scale",
    "build_filter",
    "inner_spread_for",
    "clone_and_apply",
    # Options and results
    "NeonOptions",
    "ExportOptions",
    "ProcessResult",
    "NeonPreset",
    "DEFAULT_OPTIONS",
    "NEON_PRESETS",
    "OPTION_RANGES",
    "get_preset",
    # Filter stages
    "GaussianBlur",
    "Flood",
    "Composite",
    "Merge",
    "NeonFilter",
    # Collaborators
    "package_export",
    "decode_svg_upload",
    "read_svg_file",
    "NeonWorkspace",
    # Errors
    "NeonError",
    "SvgParseError",
    "MissingSvgRootError",
    "UnsupportedFileError",
]
