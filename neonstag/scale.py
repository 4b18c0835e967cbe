"""
Scale estimation for SVG documents.

The blur radii of the glow filter are given in pixels. A document drawn in a
large coordinate system but displayed small would otherwise get a visually
tiny glow, so the radii are multiplied by the ratio of the rendered pixel
width to the viewBox width.
"""

import logging
import math
import re

from lxml.etree import _Element

from .numeric import parse_float, parse_strict

logger = logging.getLogger(__name__)

_VIEWBOX_SEPARATOR = re.compile(r'\s+|,')


def compute_scale(svg: _Element) -> float:
    """
    Compute the geometry-to-pixel scale factor of an <svg> element.

    Returns ``width / viewBox-width``, or 1.0 when the viewBox is missing or
    malformed, the viewBox width is zero or not finite, the width attribute is
    missing or not numeric, or the ratio is not a positive finite number.
    Never raises.

    :param svg: The root <svg> element
    :return: Scale factor
    """
    try:
        view_box = svg.get('viewBox')
        width_attr = svg.get('width')
        if not view_box:
            return 1.0

        parts = [parse_strict(token) for token in _VIEWBOX_SEPARATOR.split(view_box) if token]
        if len(parts) < 4:
            return 1.0
        vb_width = parts[2]
        if not math.isfinite(vb_width) or vb_width == 0:
            return 1.0

        if not width_attr:
            return 1.0
        width_px = parse_float(width_attr)
        if not math.isfinite(width_px):
            return 1.0

        scale = width_px / vb_width
        if not math.isfinite(scale) or scale <= 0:
            logger.debug(f"Ignoring non-positive scale {scale} (width={width_attr!r}, viewBox={view_box!r})")
            return 1.0
        return scale
    except Exception:
        logger.exception("Could not compute scale")
        return 1.0
