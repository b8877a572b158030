"""
Projection Reports
Builds exportable summaries of a projection selection.
"""

import json
from datetime import datetime
from typing import Dict, Optional, Union
import logging

import pandas as pd

from climate_projections.impact import ImpactClassifier
from climate_projections.projection import RegionalProjectionCalculator
from climate_projections.regions import Region

METRIC_LABELS = [
    ('temperature', 'Temperature', '°C'),
    ('precipitation', 'Precipitation', '%'),
    ('seaLevel', 'Sea Level Rise', 'cm'),
    ('extremeEvents', 'Extreme Events', '%'),
]


class ProjectionReporter:
    """
    Generates projection summaries as text, JSON or CSV.
    """

    def __init__(self, config: Dict, logger: Optional[logging.Logger] = None):
        """
        Initialize reporter.

        Parameters:
        -----------
        config : dict
            Configuration dictionary
        logger : logging.Logger, optional
            Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.calculator = RegionalProjectionCalculator(config, self.logger)
        self.classifier = ImpactClassifier(config, self.logger)

    def build_summary(self, region: Union[Region, str], year: int) -> Dict:
        """
        Collect metrics, impact level and history for one selection.

        Parameters:
        -----------
        region : Region or str
            Selected region
        year : int
            Selected target year

        Returns:
        --------
        dict
            Summary ready for export
        """
        summary = self.calculator.summarize(region, year)
        impact = self.classifier.classify(summary['metrics']['temperature'])

        summary['impact'] = {'name': impact['name'], 'color': impact['color']}
        summary['generated_at'] = datetime.now().isoformat(timespec='seconds')

        self.logger.info(f"Built projection summary for {summary['region']} in {year}")
        return summary

    def to_json(self, summary: Dict) -> str:
        return json.dumps(summary, indent=2, ensure_ascii=False)

    def to_csv(self, summary: Dict) -> str:
        """
        Flatten a summary into CSV, one row per historical anchor.

        The projected metrics repeat on every row so the file stays a
        single rectangular table.
        """
        df = pd.DataFrame(summary['history'])
        df.insert(0, 'region', summary['region'])
        df = df.rename(columns={'year': 'anchor_year', 'temperature': 'anchor_temperature'})

        df['target_year'] = summary['year']
        for key, value in summary['metrics'].items():
            df[key] = value
        df['impact'] = summary['impact']['name']

        return df.to_csv(index=False)

    def format_text(self, summary: Dict, include_history: bool = False) -> str:
        """
        Format a summary for console output.

        Parameters:
        -----------
        summary : dict
            Summary from ``build_summary``
        include_history : bool
            Append the historical series

        Returns:
        --------
        str
            Formatted report
        """
        report = []

        report.append("=" * 60)
        report.append(f"CLIMATE PROJECTION: {summary['region'].upper()} ({summary['year']})")
        report.append("=" * 60)
        report.append(f"Change relative to {summary['base_year']}")
        report.append("-" * 60)

        for key, label, unit in METRIC_LABELS:
            report.append(f"{label:<16} +{summary['metrics'][key]}{unit}")

        report.append("-" * 60)
        report.append(f"Impact Level: {summary['impact']['name']}")

        if include_history:
            report.append("\nHistorical and Projected Temperature")
            report.append("-" * 60)
            for point in summary['history']:
                report.append(f"{point['year']}  {point['temperature']:+.2f}°C")

        report.append("=" * 60)

        return "\n".join(report)
