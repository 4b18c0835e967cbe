"""
Export packaging for processed documents.

Wraps a processed SVG in an outer document of a fixed pixel size:

    <svg width="W" height="H" viewBox="0 0 W H">
      <rect .../>                      background color (optional)
      <image href="data:..."/>         raster background (optional)
      <svg width="100%" height="100%" viewBox="...">   processed content
    </svg>

The nested <svg> keeps its own viewBox, so the content is rescaled to the
export size while keeping its aspect ratio.
"""

import base64
import logging
import math
from io import BytesIO
from typing import Optional

from lxml import etree
from lxml.etree import _Element
from PIL import Image, UnidentifiedImageError

from .constants import SVG_NAMESPACE
from .exceptions import UnsupportedFileError
from .numeric import format_number, parse_float
from .options import ExportOptions
from .processor import parse_svg

logger = logging.getLogger(__name__)


def _svg(name: str) -> str:
    return f'{{{SVG_NAMESPACE}}}{name}'


def image_data_url(data: bytes) -> str:
    """
    Encode raster image bytes as a data URL.

    The MIME type is detected from the image content.

    :raises UnsupportedFileError: The bytes are not an image Pillow can identify
    """
    try:
        with Image.open(BytesIO(data)) as img:
            image_format = img.format
    except UnidentifiedImageError as e:
        raise UnsupportedFileError("Background is not a supported raster image.") from e
    mime = Image.MIME.get(image_format, f"image/{image_format.lower()}")
    encoded = base64.b64encode(data).decode('ascii')
    return f"data:{mime};base64,{encoded}"


def content_view_box(svg: _Element) -> Optional[str]:
    """viewBox of the processed content, derived from width/height if missing."""
    view_box = svg.get('viewBox')
    if view_box:
        return view_box
    width = parse_float(svg.get('width'))
    height = parse_float(svg.get('height'))
    if math.isfinite(width) and math.isfinite(height) and width > 0 and height > 0:
        return f"0 0 {format_number(width)} {format_number(height)}"
    return None


def package_export(svg_text: str, options: ExportOptions, background: Optional[bytes] = None) -> str:
    """
    Wrap a processed SVG for download.

    :param svg_text: Processed SVG document
    :param options: Export size and background color
    :param background: Optional raster image drawn behind the content
    :return: Export document text
    :raises SvgParseError: svg_text is not well-formed XML
    :raises MissingSvgRootError: svg_text contains no <svg> element
    :raises UnsupportedFileError: background is not a raster image
    """
    content = parse_svg(svg_text)
    width = format_number(options.width)
    height = format_number(options.height)

    outer = etree.Element(_svg('svg'), nsmap={None: SVG_NAMESPACE})
    outer.set('width', width)
    outer.set('height', height)
    outer.set('viewBox', f"0 0 {width} {height}")

    if options.background_color:
        rect = etree.SubElement(outer, _svg('rect'))
        rect.set('x', '0')
        rect.set('y', '0')
        rect.set('width', width)
        rect.set('height', height)
        rect.set('fill', options.background_color)

    if background:
        image = etree.SubElement(outer, _svg('image'))
        image.set('x', '0')
        image.set('y', '0')
        image.set('width', width)
        image.set('height', height)
        image.set('preserveAspectRatio', 'xMidYMid slice')
        image.set('href', image_data_url(background))

    view_box = content_view_box(content)
    for key in ('x', 'y'):
        content.attrib.pop(key, None)
    content.set('width', '100%')
    content.set('height', '100%')
    if view_box:
        content.set('viewBox', view_box)
    content.set('preserveAspectRatio', 'xMidYMid meet')
    content.tail = None
    outer.append(content)

    logger.debug(f"Packaged export {width}x{height} (background={bool(background)})")
    return etree.tostring(outer, encoding='unicode')
