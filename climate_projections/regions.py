"""
Region Tables
Static regional scaling factors and historical temperature anchors.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union


class ProjectionError(Exception):
    """Base class for projection errors."""


class InvalidRegionError(ProjectionError, ValueError):
    """Raised when a value does not name one of the supported regions."""

    def __init__(self, value):
        self.value = value
        expected = ', '.join(region.value for region in Region)
        super().__init__(f"Unknown region: {value!r}. Expected one of: {expected}")


class Region(Enum):
    """Geographic scopes used to scale projection magnitudes."""

    GLOBAL = 'Global'
    NORTH_AMERICA = 'North America'
    EUROPE = 'Europe'
    ASIA = 'Asia'
    AFRICA = 'Africa'
    SOUTH_AMERICA = 'South America'
    OCEANIA = 'Oceania'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union['Region', str]) -> 'Region':
        """
        Resolve a Region from a member, display name or member name.

        Parameters:
        -----------
        value : Region or str
            e.g. ``Region.ASIA``, ``'Asia'`` or ``'ASIA'``

        Returns:
        --------
        Region
            The matching region

        Raises:
        -------
        InvalidRegionError
            If ``value`` matches no region
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for region in cls:
                if value == region.value or value == region.name:
                    return region
        raise InvalidRegionError(value)


@dataclass(frozen=True)
class RegionalFactors:
    """Multipliers applied to the global base projections."""

    temperature: float
    precipitation: float
    sea_level: float
    extreme_events: float

    def __post_init__(self):
        for name in ('temperature', 'precipitation', 'sea_level', 'extreme_events'):
            if getattr(self, name) <= 0:
                raise ValueError(f"Regional factor '{name}' must be positive")


@dataclass(frozen=True)
class HistoricalPoint:
    """Temperature deviation (°C) at an anchor year."""

    year: int
    temperature: float

    def as_dict(self) -> dict:
        return {'year': self.year, 'temperature': self.temperature}


REGIONS: Tuple[Region, ...] = tuple(Region)

REGIONAL_FACTORS: Mapping[Region, RegionalFactors] = MappingProxyType({
    Region.GLOBAL: RegionalFactors(1.0, 1.0, 1.0, 1.0),
    Region.NORTH_AMERICA: RegionalFactors(1.2, 1.3, 0.8, 1.1),
    Region.EUROPE: RegionalFactors(1.1, 1.2, 0.9, 1.2),
    Region.ASIA: RegionalFactors(1.3, 1.4, 1.2, 1.3),
    Region.AFRICA: RegionalFactors(1.4, 0.7, 1.1, 1.4),
    Region.SOUTH_AMERICA: RegionalFactors(1.1, 1.5, 1.0, 1.2),
    Region.OCEANIA: RegionalFactors(1.2, 0.9, 1.3, 1.1),
})

# Anchor years and global mean temperature deviation (°C) at each
ANCHOR_YEARS: Tuple[int, ...] = (1900, 1950, 2000, 2023, 2030, 2040, 2050)
BASE_DEVIATIONS: Tuple[float, ...] = (-0.2, 0.0, 0.5, 1.1, 1.3, 1.4, 1.6)

# Approximate centroids (lat, lon) used to place regions on the globe
REGION_COORDINATES: Mapping[Region, Tuple[float, float]] = MappingProxyType({
    Region.GLOBAL: (0.0, 0.0),
    Region.NORTH_AMERICA: (45.0, -100.0),
    Region.EUROPE: (50.0, 10.0),
    Region.ASIA: (35.0, 90.0),
    Region.AFRICA: (5.0, 20.0),
    Region.SOUTH_AMERICA: (-15.0, -60.0),
    Region.OCEANIA: (-25.0, 135.0),
})

if set(REGIONAL_FACTORS) != set(Region):
    raise RuntimeError("Every region needs exactly one RegionalFactors entry")
if len(ANCHOR_YEARS) != len(BASE_DEVIATIONS):
    raise RuntimeError("Anchor years and base deviations must align")


def get_factors(region: Union[Region, str]) -> RegionalFactors:
    """Look up the scaling factors for a region."""
    return REGIONAL_FACTORS[Region.parse(region)]
