"""
Options for the neon glow transformation.

NeonOptions uses Pydantic with camelCase aliases so the JSON form matches the
browser front-end:

    {"color": "#00ffd5", "intensity": 8, "width": 6, "inner": "#ffffff",
     "opacity": 0.85, "preserveFill": true, "scaleAware": true,
     "multiColor": false, "midColor": "#ff00d0"}

Numeric fields are not range-checked. The slider limits in OPTION_RANGES are
UI metadata only; out-of-range values reach the filter graph verbatim.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NeonOptions(BaseModel):
    """
    Parameters of the neon glow effect.

    Example:
        >>> from neonstag import NeonOptions
        >>> options = NeonOptions(color='#ff00d0', intensity=12)
        >>> options.to_dict()['multiColor']
        False
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    color: str = Field(default='#00ffd5', min_length=1)  # Outer glow
    intensity: float = Field(default=8)  # Blur spread
    width: float = Field(default=6)  # Added to the stroke width of the glow duplicate
    inner: str = Field(default='#ffffff', min_length=1)  # Core color
    opacity: float = Field(default=0.85)
    preserve_fill: bool = Field(default=True, alias='preserveFill')
    scale_aware: bool = Field(default=True, alias='scaleAware')
    multi_color: bool = Field(default=False, alias='multiColor')
    mid_color: str = Field(default='#ff00d0', alias='midColor', min_length=1)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a camelCase dictionary."""
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NeonOptions':
        """
        Reconstruct options from a dictionary.

        Accepts both the camelCase form produced by to_dict() and snake_case
        field names. Missing keys fall back to the defaults.
        """
        return cls.model_validate(data)

    def with_changes(self, **changes: Any) -> 'NeonOptions':
        """
        Return a copy with some fields replaced.

        Keys may be field names (``multi_color``) or aliases (``multiColor``).
        """
        aliases = {
            info.alias: name
            for name, info in type(self).model_fields.items()
            if info.alias
        }
        data = self.model_dump()
        for key, value in changes.items():
            data[aliases.get(key, key)] = value
        return type(self).model_validate(data)


class ExportOptions(BaseModel):
    """Target size and background of an exported document."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    width: float = Field(gt=0)
    height: float = Field(gt=0)
    background_color: Optional[str] = Field(default=None, alias='backgroundColor')


@dataclass
class ProcessResult:
    """Result of a neon transformation."""
    svg: str  # Serialized, mutated document
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'svg': self.svg, 'warnings': list(self.warnings)}


@dataclass(frozen=True)
class NeonPreset:
    """Named glow color."""
    name: str
    color: str


DEFAULT_OPTIONS = NeonOptions()

NEON_PRESETS = [
    NeonPreset('Cyan', '#00ffd5'),
    NeonPreset('Magenta', '#ff00d0'),
    NeonPreset('Amber', '#ffbf00'),
    NeonPreset('Lime', '#a6ff00'),
    NeonPreset('Electric Blue', '#00aeff'),
]

# Slider limits of the control panel: (min, max, step)
OPTION_RANGES = {
    'intensity': (1, 30, 1),
    'width': (1, 30, 1),
    'opacity': (0.1, 1.0, 0.05),
}


def get_preset(name: str) -> NeonPreset:
    """Look up a preset by name (case-insensitive)."""
    wanted = name.strip().lower()
    for preset in NEON_PRESETS:
        if preset.name.lower() == wanted:
            return preset
    raise KeyError(f"Unknown preset: {name}")
