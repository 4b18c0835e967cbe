"""
Neon glow document pipeline.

``process()`` runs these steps in order on one SVG document:

1. Parse - malformed XML or a missing <svg> element aborts the call
2. Cleanup - remove glow duplicates and filters of an earlier run
3. Diagnose - collect warnings for content that will not glow
4. Install filter - build the glow filter into <defs>
5. Transform - add a glow duplicate before every shape
6. Serialize - return the <svg> element as text

The engine keeps no state between calls. Everything an earlier run added is
found again through marker attributes stored in the document itself, so
processing an already processed document replaces the old glow instead of
stacking a second one on top.
"""

import logging
import re
import uuid
from typing import List

from lxml import etree
from lxml.etree import _Element

from .constants import (
    CLONE_MARKER,
    FILTER_ID_PREFIX,
    FILTER_MARKER,
    PROCESSED_MARKER,
    SHAPE_TAGS,
)
from .exceptions import MissingSvgRootError, SvgParseError
from .filter_graph import build_filter, inner_spread_for, new_element
from .options import NeonOptions, ProcessResult
from .scale import compute_scale
from .transform import clone_and_apply

logger = logging.getLogger(__name__)

IMAGE_WARNING = "Found <image> element(s). Raster images will not be neonified."
STYLE_WARNING = (
    "SVG contains <style> or <link> tags. External or complex CSS may not be fully supported."
)

# Opacity declaration appended to duplicates by an earlier run ("fill-opacity" is left alone)
_INJECTED_OPACITY = re.compile(r'(?<![\w-])opacity:\s*\d*\.?\d*;')


def unique_id(prefix: str = 'id') -> str:
    """Random element ID such as ``neon-glow-3f9a1c2``."""
    return f"{prefix}-{uuid.uuid4().hex[:7]}"


def local_name(element: _Element) -> str:
    """Tag name without namespace ('' for comments and processing instructions)."""
    if not isinstance(element.tag, str):
        return ''
    return etree.QName(element).localname


def _iter_elements(root: _Element, *names: str):
    for element in root.iter():
        if local_name(element) in names:
            yield element


def _remove(element: _Element) -> None:
    """Detach an element, keeping the text that follows it in place."""
    parent = element.getparent()
    if parent is None:
        return
    if element.tail:
        previous = element.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or '') + element.tail
        else:
            parent.text = (parent.text or '') + element.tail
    parent.remove(element)


def _inside_defs(element: _Element) -> bool:
    return any(local_name(ancestor) == 'defs' for ancestor in element.iterancestors())


def parse_svg(svg_text: str) -> _Element:
    """
    Parse SVG text and return its <svg> element.

    :raises SvgParseError: The text is not well-formed XML
    :raises MissingSvgRootError: The document has no <svg> element
    """
    if not svg_text or not svg_text.strip():
        raise SvgParseError("Invalid SVG file: Document is empty")

    # Input is already text: the encoding declaration is ignored. Only <svg> is
    # serialized, so internal entities must be expanded (external ones never are).
    parser = etree.XMLParser(
        encoding='utf-8',
        resolve_entities='internal',
        no_network=True,
        huge_tree=False,
    )
    try:
        root = etree.fromstring(svg_text.encode('utf-8'), parser)
    except etree.XMLSyntaxError as e:
        message = e.msg or str(e) or 'Unknown parsing error'
        raise SvgParseError(f"Invalid SVG file: {message}") from e

    if local_name(root) == 'svg':
        return root
    svg = next(_iter_elements(root, 'svg'), None)
    if svg is None:
        raise MissingSvgRootError("No <svg> root element found.")
    return svg


def remove_previous_run(document: _Element) -> int:
    """
    Undo the glow of an earlier run.

    Removes glow duplicates and glow filters, clears processed flags and strips
    opacity declarations from shape styles.

    :param document: Root element of the parsed document
    :return: Number of removed elements
    """
    generated = [
        element for element in document.iter()
        if isinstance(element.tag, str)
        and (element.get(CLONE_MARKER) is not None or element.get(FILTER_MARKER) is not None)
    ]
    for element in generated:
        _remove(element)

    for element in _iter_elements(document, *SHAPE_TAGS):
        if PROCESSED_MARKER in element.attrib:
            del element.attrib[PROCESSED_MARKER]
        style = element.get('style')
        if style and 'opacity:' in style:
            element.set('style', _INJECTED_OPACITY.sub('', style))

    if generated:
        logger.debug(f"Removed {len(generated)} element(s) of a previous run")
    return len(generated)


def collect_warnings(document: _Element) -> List[str]:
    """Warnings for content the glow cannot handle."""
    warnings = []
    if next(_iter_elements(document, 'image'), None) is not None:
        warnings.append(IMAGE_WARNING)
    has_style = next(_iter_elements(document, 'style'), None) is not None
    has_stylesheet = any(
        (link.get('rel') or '').strip().lower() == 'stylesheet'
        for link in _iter_elements(document, 'link')
    )
    if has_style or has_stylesheet:
        warnings.append(STYLE_WARNING)
    for warning in warnings:
        logger.debug(warning)
    return warnings


def ensure_defs(svg: _Element) -> _Element:
    """Return the first <defs> of the document, creating it as first child of <svg>."""
    defs = next(_iter_elements(svg, 'defs'), None)
    if defs is None:
        defs = new_element(etree.QName(svg).namespace, 'defs')
        svg.insert(0, defs)
    return defs


def install_filter(svg: _Element, options: NeonOptions) -> str:
    """
    Build the glow filter and append it to <defs>.

    :return: ID of the new filter
    """
    defs = ensure_defs(svg)
    scale = compute_scale(svg) if options.scale_aware else 1
    filter_id = unique_id(FILTER_ID_PREFIX)
    outer_spread = options.intensity * scale
    inner_spread = inner_spread_for(options.intensity) * scale

    neon_filter = build_filter(filter_id, options, outer_spread, inner_spread)
    filter_elem = neon_filter.to_element(etree.QName(svg).namespace)
    filter_elem.set(FILTER_MARKER, 'true')
    defs.append(filter_elem)
    logger.debug(f"Installed filter {filter_id} (scale={scale}, layers={neon_filter.merge_layers})")
    return filter_id


def transform_shapes(svg: _Element, filter_id: str, options: NeonOptions) -> int:
    """
    Add a glow duplicate for every shape outside <defs>.

    :return: Number of duplicates created
    """
    # Snapshot first: the duplicates are shapes too
    shapes = list(_iter_elements(svg, *SHAPE_TAGS))
    count = 0
    for shape in shapes:
        if _inside_defs(shape) or shape.get(PROCESSED_MARKER) == 'true':
            continue
        shape.set(PROCESSED_MARKER, 'true')
        clone_and_apply(shape, filter_id, options)
        count += 1
    return count


def process(svg_text: str, options: NeonOptions) -> ProcessResult:
    """
    Add the neon glow to an SVG document.

    :param svg_text: SVG document text
    :param options: Effect options
    :return: ProcessResult with the new document text and warnings
    :raises SvgParseError: The text is not well-formed XML
    :raises MissingSvgRootError: The document has no <svg> element
    """
    svg = parse_svg(svg_text)
    document = svg.getroottree().getroot()

    remove_previous_run(document)
    warnings = collect_warnings(document)
    filter_id = install_filter(svg, options)
    count = transform_shapes(svg, filter_id, options)
    logger.debug(f"Neonified {count} shape(s) with filter {filter_id}")

    text = etree.tostring(svg, encoding='unicode', with_tail=False)
    return ProcessResult(svg=text, warnings=warnings)
