"""
Regional Climate Projections Dashboard

Synthetic climate change projections (temperature, precipitation, sea level
and extreme-event frequency) per region and target year, served through a
Streamlit dashboard and a command-line interface.

Author: Climate Futures Team
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Climate Futures Team"

# Import main components for easy access
from .utils import load_config, setup_logging
from .regions import (
    Region,
    RegionalFactors,
    HistoricalPoint,
    ProjectionError,
    InvalidRegionError,
)
from .projection import (
    ProjectionMetrics,
    RegionalProjectionCalculator,
    compute_metrics,
    get_historical_series,
)
from .impact import ImpactClassifier
from .reports import ProjectionReporter

__all__ = [
    'load_config',
    'setup_logging',
    'Region',
    'RegionalFactors',
    'HistoricalPoint',
    'ProjectionError',
    'InvalidRegionError',
    'ProjectionMetrics',
    'RegionalProjectionCalculator',
    'compute_metrics',
    'get_historical_series',
    'ImpactClassifier',
    'ProjectionReporter',
]
