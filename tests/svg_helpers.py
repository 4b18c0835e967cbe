"""Helpers for inspecting processed SVG output."""

from lxml import etree

SVG_NS = "http://www.w3.org/2000/svg"
NS = {"svg": SVG_NS}


def parse(svg_text: str):
    return etree.fromstring(svg_text.encode("utf-8"))


def clones(root):
    return [el for el in root.iter() if isinstance(el.tag, str) and el.get("data-neon-clone") == "true"]


def filters(root):
    return [el for el in root.iter() if isinstance(el.tag, str) and el.get("data-neon-filter") == "true"]


def originals(root, tag: str):
    return [el for el in root.iter(f"{{{SVG_NS}}}{tag}") if el.get("data-neon-clone") is None]


def local(el) -> str:
    return etree.QName(el).localname
