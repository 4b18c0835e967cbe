"""
Neon glow SVG filter graph.

The glow is a chain of filter primitives feeding one merge, composited bottom
to top:

1. Outer glow: blurred alpha mask, flooded with the glow color
2. Mid glow (multi-color only): tighter blur, flooded with the mid color
3. Inner core: small blur, flooded with the core color, slightly more opaque
4. SourceGraphic: the element itself, unmodified, on top

The merge order defines the visual stacking and must not change.

Each primitive is a typed stage (GaussianBlur, Flood, Composite, Merge) that
knows how to emit its own SVG element.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from lxml import etree
from lxml.etree import _Element

from .constants import SVG_NAMESPACE
from .numeric import format_number, round_half_up
from .options import NeonOptions

SOURCE_ALPHA = 'SourceAlpha'
SOURCE_GRAPHIC = 'SourceGraphic'

# Filter region, relative to the element's bounding box, wide enough for large blurs
FILTER_REGION = {'x': '-50%', 'y': '-50%', 'width': '200%', 'height': '200%'}

MID_SPREAD_FACTOR = 0.6  # Mid glow is tighter than the outer glow
INNER_SPREAD_FACTOR = 0.25
CORE_OPACITY_BOOST = 0.1


def qualified_tag(namespace: Optional[str], name: str) -> str:
    return f'{{{namespace}}}{name}' if namespace else name


def new_element(namespace: Optional[str], name: str) -> _Element:
    """Standalone element; the namespace, if any, is declared as the default namespace."""
    nsmap = {None: namespace} if namespace else None
    return etree.Element(qualified_tag(namespace, name), nsmap=nsmap)


@dataclass
class GaussianBlur:
    """feGaussianBlur stage."""
    input: str
    std_deviation: float
    result: str

    def to_element(self, namespace: Optional[str] = SVG_NAMESPACE) -> _Element:
        elem = new_element(namespace, 'feGaussianBlur')
        elem.set('in', self.input)
        elem.set('stdDeviation', format_number(self.std_deviation))
        elem.set('result', self.result)
        return elem

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'feGaussianBlur', 'in': self.input,
                'stdDeviation': self.std_deviation, 'result': self.result}


@dataclass
class Flood:
    """feFlood stage."""
    color: str
    opacity: float
    result: str

    def to_element(self, namespace: Optional[str] = SVG_NAMESPACE) -> _Element:
        elem = new_element(namespace, 'feFlood')
        elem.set('flood-color', self.color)
        elem.set('flood-opacity', format_number(self.opacity))
        elem.set('result', self.result)
        return elem

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'feFlood', 'flood-color': self.color,
                'flood-opacity': self.opacity, 'result': self.result}


@dataclass
class Composite:
    """feComposite stage."""
    input: str
    input2: str
    operator: str
    result: str

    def to_element(self, namespace: Optional[str] = SVG_NAMESPACE) -> _Element:
        elem = new_element(namespace, 'feComposite')
        elem.set('in', self.input)
        elem.set('in2', self.input2)
        elem.set('operator', self.operator)
        elem.set('result', self.result)
        return elem

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'feComposite', 'in': self.input, 'in2': self.input2,
                'operator': self.operator, 'result': self.result}


@dataclass
class Merge:
    """feMerge stage; ``inputs`` lists the feMergeNode sources bottom to top."""
    inputs: List[str] = field(default_factory=list)

    def to_element(self, namespace: Optional[str] = SVG_NAMESPACE) -> _Element:
        elem = new_element(namespace, 'feMerge')
        for name in self.inputs:
            node = etree.SubElement(elem, qualified_tag(namespace, 'feMergeNode'))
            node.set('in', name)
        return elem

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'feMerge', 'inputs': list(self.inputs)}


FilterStage = Union[GaussianBlur, Flood, Composite, Merge]


@dataclass
class NeonFilter:
    """A complete glow filter: primitive stages followed by the final merge."""
    id: str
    stages: List[FilterStage] = field(default_factory=list)
    merge: Merge = field(default_factory=Merge)

    @property
    def merge_layers(self) -> List[str]:
        """Merge inputs, bottom to top."""
        return list(self.merge.inputs)

    def to_element(self, namespace: Optional[str] = SVG_NAMESPACE) -> _Element:
        """
        Build the <filter> element.

        :param namespace: Namespace of the target document, None for
            documents without an SVG namespace
        """
        elem = new_element(namespace, 'filter')
        elem.set('id', self.id)
        elem.set('filterUnits', 'userSpaceOnUse')
        for key, value in FILTER_REGION.items():
            elem.set(key, value)
        for stage in self.stages:
            elem.append(stage.to_element(namespace))
        elem.append(self.merge.to_element(namespace))
        return elem

    def to_svg(self) -> str:
        """Filter definition as an SVG string."""
        return etree.tostring(self.to_element(), encoding='unicode')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'stages': [stage.to_dict() for stage in self.stages],
            'merge': self.merge.to_dict(),
        }


def _glow_layer(name: str, spread: float, color: str, opacity: float,
                result: str) -> List[FilterStage]:
    """Blur the alpha mask, flood with a color and keep the flood inside the blur."""
    blur_name = f'blur{name}'
    flood_name = f'flood{name}'
    return [
        GaussianBlur(input=SOURCE_ALPHA, std_deviation=spread, result=blur_name),
        Flood(color=color, opacity=opacity, result=flood_name),
        Composite(input=flood_name, input2=blur_name, operator='in', result=result),
    ]


def inner_spread_for(intensity: float) -> int:
    """Unscaled blur spread of the inner core: a quarter of the intensity, at least 1."""
    return max(1, round_half_up(intensity * INNER_SPREAD_FACTOR))


def build_filter(filter_id: str, options: NeonOptions, outer_spread: float,
                 inner_spread: float) -> NeonFilter:
    """
    Build the glow filter graph.

    :param filter_id: Unique ID of the filter element
    :param options: Glow colors and opacity
    :param outer_spread: Blur standard deviation of the outer glow (already scaled)
    :param inner_spread: Blur standard deviation of the inner core (already scaled)
    :return: NeonFilter with 3 merge layers, or 4 with multi-color enabled
    """
    stages: List[FilterStage] = []
    layers: List[str] = []

    stages += _glow_layer('Outer', outer_spread, options.color, options.opacity, 'coloredHaloOuter')
    layers.append('coloredHaloOuter')

    if options.multi_color:
        stages += _glow_layer('Mid', outer_spread * MID_SPREAD_FACTOR, options.mid_color,
                              options.opacity, 'coloredHaloMid')
        layers.append('coloredHaloMid')

    core_opacity = min(1, options.opacity + CORE_OPACITY_BOOST)
    stages += _glow_layer('Inner', inner_spread, options.inner, core_opacity, 'innerCore')
    layers.append('innerCore')

    layers.append(SOURCE_GRAPHIC)
    return NeonFilter(id=filter_id, stages=stages, merge=Merge(inputs=layers))
