from dataclasses import dataclass
from enum import Enum

# Sentinel for a display field the scraper could not extract
NOT_AVAILABLE = 'N/A'

# GSMArena quick search never needs more than this for a picker
MAX_RESULTS = 20


class NotchType(Enum):
    DYNAMIC_ISLAND = 'dynamic-island'
    WIDE = 'wide'
    TEARDROP = 'teardrop'
    PUNCH_HOLE = 'punch-hole'
    PILL = 'pill'
    NONE = 'none'

    @property
    def label(self) -> str:
        return NOTCH_LABELS[self]

    @property
    def description(self) -> str:
        return NOTCH_DESCRIPTIONS[self]

    @classmethod
    def from_value(cls, value):
        """Return the member for a wire value like 'punch-hole', or None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        return {
            'type': self.value,
            'label': self.label,
            'description': self.description,
        }


NOTCH_LABELS = {
    NotchType.DYNAMIC_ISLAND: 'Dynamic Island',
    NotchType.WIDE: 'Wide Notch',
    NotchType.TEARDROP: 'Teardrop',
    NotchType.PUNCH_HOLE: 'Punch Hole',
    NotchType.PILL: 'Pill Cutout',
    NotchType.NONE: 'Full Screen',
}

NOTCH_DESCRIPTIONS = {
    NotchType.DYNAMIC_ISLAND: 'Pill-shaped cutout with interactive features (iPhone 14 Pro+)',
    NotchType.WIDE: 'Wide notch housing Face ID sensors (iPhone X-13)',
    NotchType.TEARDROP: 'Small centered teardrop cutout for front camera',
    NotchType.PUNCH_HOLE: 'Small circular hole-punch cutout for camera',
    NotchType.PILL: 'Elongated pill-shaped cutout for camera and sensors',
    NotchType.NONE: 'Full screen display with no visible cutout',
}


def brand_of(name: str) -> str:
    """First whitespace-delimited token of a device name."""
    parts = name.split()
    return parts[0] if parts else ''


@dataclass(frozen=True)
class SearchCandidate:
    name: str
    brand: str
    identifier: str

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'brand': self.brand,
            'slug': self.identifier,
        }


@dataclass(frozen=True)
class DisplaySpec:
    name: str
    brand: str
    display_size: str = NOT_AVAILABLE
    screen_to_body: str = NOT_AVAILABLE
    resolution: str = NOT_AVAILABLE
    display_type: str = NOT_AVAILABLE

    def missing_fields(self) -> list:
        """Names of display fields that fell back to the N/A sentinel."""
        fields = ['display_size', 'screen_to_body', 'resolution', 'display_type']
        return [f for f in fields if getattr(self, f) == NOT_AVAILABLE]

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'brand': self.brand,
            'displaySize': self.display_size,
            'screenToBody': self.screen_to_body,
            'resolution': self.resolution,
            'displayType': self.display_type,
        }


@dataclass(frozen=True)
class PhoneLookup:
    """A scraped spec together with the notch type detected from its name."""
    spec: DisplaySpec
    notch: NotchType

    def to_dict(self) -> dict:
        data = self.spec.to_dict()
        data['notch'] = self.notch.to_dict()
        return data
