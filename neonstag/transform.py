"""
Glow duplicates for shape elements.

Each shape gets a deep copy inserted directly before it. The copy carries the
glow filter and a widened stroke in the glow color, so it renders as a halo
underneath the untouched original.
"""

import copy
import logging
import math
from typing import Optional

from lxml import etree
from lxml.etree import _Element

from .constants import CLONE_MARKER
from .numeric import format_number, parse_float
from .options import NeonOptions

logger = logging.getLogger(__name__)


def _is_set(value: Optional[str]) -> bool:
    """Paint attributes count as unset when absent, empty or 'none'."""
    return bool(value) and value != 'none'


def base_stroke_width(element: _Element) -> float:
    """Stroke width of the element, 1 when absent, zero or not numeric."""
    width = parse_float(element.get('stroke-width'))
    if not math.isfinite(width) or width == 0:
        return 1
    return width


def clone_and_apply(element: _Element, filter_id: str, options: NeonOptions) -> _Element:
    """
    Create the glow duplicate of a shape and insert it before the shape.

    Filled shapes without a stroke become an outline in the glow color.
    Stroked shapes keep their fill and get the glow color as stroke. With
    ``preserve_fill`` disabled the fill of the *original* element is removed.

    :param element: Shape element with a parent
    :param filter_id: ID of the glow filter
    :param options: Effect options
    :return: The inserted duplicate
    """
    clone = copy.deepcopy(element)
    clone.tail = None  # Whitespace after the shape stays with the shape

    has_stroke = _is_set(element.get('stroke'))
    has_fill = _is_set(element.get('fill'))
    stroke_width = format_number(base_stroke_width(element) + options.width)

    clone.set('stroke', options.color)
    clone.set('stroke-width', stroke_width)
    # Filled shapes without a stroke become an outline, unfilled shapes stay unfilled
    if not (has_stroke and has_fill):
        clone.set('fill', 'none')

    if not options.preserve_fill:
        element.set('fill', 'none')

    style = clone.get('style') or ''
    clone.set('style', f'{style};opacity:{format_number(options.opacity)}')
    clone.set('filter', f'url(#{filter_id})')
    clone.set(CLONE_MARKER, 'true')

    element.addprevious(clone)
    logger.debug(f"Added glow duplicate for <{etree.QName(element).localname}> (stroke={has_stroke}, fill={has_fill})")
    return clone
