"""
Regional Projection Calculator
Interpolates projected climate change metrics for a region and target year.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List, Optional, Union
import logging
import math

import pandas as pd

from climate_projections.regions import (
    ANCHOR_YEARS,
    BASE_DEVIATIONS,
    REGIONS,
    HistoricalPoint,
    Region,
    get_factors,
)

BASE_YEAR = 2023
TARGET_YEAR = 2050

# Global projected change at the base and target years
TEMPERATURE_BASE = 1.1      # °C
TEMPERATURE_TARGET = 1.6    # °C
PRECIPITATION_TARGET = 5.3  # %
SEA_LEVEL_TARGET = 26.3     # cm
EXTREME_EVENTS_TARGET = 32  # %


def format_one_decimal(value: float) -> str:
    """
    Format a value with exactly one fractional digit.

    Ties on the exact binary value round half away from zero, so
    ``0.25`` becomes ``'0.3'`` and ``-0.25`` becomes ``'-0.3'``.
    """
    if not math.isfinite(value):
        return {math.inf: 'Infinity', -math.inf: '-Infinity'}.get(value, 'NaN')
    if value == 0:
        value = 0.0

    exact = Decimal(value)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the fractional one
        ctx.prec = max(28, exact.adjusted() + 3)
        rounded = exact.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
    return f"{rounded:.1f}"


@dataclass(frozen=True)
class ProjectionMetrics:
    """Projected change by a target year relative to the base year."""

    temperature: str
    precipitation: str
    sea_level: str
    extreme_events: str

    def as_dict(self) -> Dict[str, str]:
        return {
            'temperature': self.temperature,
            'precipitation': self.precipitation,
            'seaLevel': self.sea_level,
            'extremeEvents': self.extreme_events,
        }

    def as_floats(self) -> Dict[str, float]:
        return {
            'temperature': float(self.temperature),
            'precipitation': float(self.precipitation),
            'seaLevel': float(self.sea_level),
            'extremeEvents': float(self.extreme_events),
        }


def compute_metrics(region: Union[Region, str], year: int) -> ProjectionMetrics:
    """
    Compute projected metrics for a region and target year.

    Each metric is a linear interpolation between its global value at
    2023 and at 2050, scaled by the region's factor. Years outside that
    window are extrapolated, not rejected.

    Parameters:
    -----------
    region : Region or str
        Region to project
    year : int
        Target year

    Returns:
    --------
    ProjectionMetrics
        Metrics formatted to one decimal place

    Raises:
    -------
    InvalidRegionError
        If ``region`` is not a known region
    """
    factors = get_factors(region)
    year_diff = year - BASE_YEAR
    span = TARGET_YEAR - BASE_YEAR

    base_temperature = TEMPERATURE_BASE + (year_diff * (TEMPERATURE_TARGET - TEMPERATURE_BASE) / span)
    base_precipitation = year_diff * PRECIPITATION_TARGET / span
    base_sea_level = year_diff * SEA_LEVEL_TARGET / span
    base_extreme_events = year_diff * EXTREME_EVENTS_TARGET / span

    return ProjectionMetrics(
        temperature=format_one_decimal(base_temperature * factors.temperature),
        precipitation=format_one_decimal(base_precipitation * factors.precipitation),
        sea_level=format_one_decimal(base_sea_level * factors.sea_level),
        extreme_events=format_one_decimal(base_extreme_events * factors.extreme_events),
    )


def get_historical_series(region: Union[Region, str]) -> List[HistoricalPoint]:
    """
    Build the historical and projected temperature series for a region.

    Returns a new list of seven points in ascending anchor-year order.
    """
    factor = get_factors(region).temperature
    return [
        HistoricalPoint(year=year, temperature=deviation * factor)
        for year, deviation in zip(ANCHOR_YEARS, BASE_DEVIATIONS)
    ]


class RegionalProjectionCalculator:
    """
    Serves regional projections to the dashboard and CLI.
    """

    def __init__(self, config: Dict, logger: Optional[logging.Logger] = None):
        """
        Initialize projection calculator.

        Parameters:
        -----------
        config : dict
            Configuration dictionary
        logger : logging.Logger, optional
            Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        dashboard_config = config.get('dashboard', {})
        self.year_min = dashboard_config.get('year_min', BASE_YEAR)
        self.year_max = dashboard_config.get('year_max', TARGET_YEAR)

    def compute_metrics(self, region: Union[Region, str], year: int) -> ProjectionMetrics:
        """Compute projected metrics, warning when the year is extrapolated."""
        if not self.year_min <= year <= self.year_max:
            self.logger.warning(
                f"Year {year} outside {self.year_min}-{self.year_max}, extrapolating linearly"
            )

        metrics = compute_metrics(region, year)
        self.logger.debug(f"Projection for {region} in {year}: {metrics.as_dict()}")
        return metrics

    def get_historical_series(self, region: Union[Region, str]) -> List[HistoricalPoint]:
        return get_historical_series(region)

    def historical_frame(self, region: Union[Region, str]) -> pd.DataFrame:
        """
        Historical series as a DataFrame.

        Parameters:
        -----------
        region : Region or str
            Region to build the series for

        Returns:
        --------
        pd.DataFrame
            Columns ``year`` and ``temperature``, plus ``period`` marking
            anchors after the base year as projected
        """
        series = self.get_historical_series(region)
        df = pd.DataFrame([point.as_dict() for point in series])
        df['period'] = ['projected' if y > BASE_YEAR else 'historical' for y in df['year']]
        return df

    def compare_regions(self, year: int) -> pd.DataFrame:
        """
        Projected metrics for every region in a single table.

        Parameters:
        -----------
        year : int
            Target year

        Returns:
        --------
        pd.DataFrame
            One row per region indexed by region name
        """
        rows = []
        for region in REGIONS:
            row = {'region': region.value}
            row.update(self.compute_metrics(region, year).as_floats())
            rows.append(row)

        return pd.DataFrame(rows).set_index('region')

    def summarize(self, region: Union[Region, str], year: int) -> Dict:
        """
        Projection summary for one selection.

        Returns:
        --------
        dict
            region, year, base_year, metrics and history
        """
        region = Region.parse(region)
        metrics = self.compute_metrics(region, year)

        return {
            'region': region.value,
            'year': year,
            'base_year': BASE_YEAR,
            'metrics': metrics.as_dict(),
            'history': [point.as_dict() for point in self.get_historical_series(region)],
        }
