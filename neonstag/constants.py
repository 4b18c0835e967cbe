"""Shared constants for SVG processing."""

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Shape elements which receive a glow duplicate
SHAPE_TAGS = frozenset({
    "path",
    "line",
    "polyline",
    "polygon",
    "rect",
    "circle",
    "ellipse",
})

# Marker attributes written by the engine so a later run can find its own output
CLONE_MARKER = "data-neon-clone"
FILTER_MARKER = "data-neon-filter"
PROCESSED_MARKER = "data-neon-processed"

FILTER_ID_PREFIX = "neon-glow"
