"""
Projection Visualization
Charts and metric cards for the projection dashboard.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns
import plotly.graph_objects as go
from typing import Dict, List, Optional, Union
import logging

from climate_projections.impact import ImpactClassifier
from climate_projections.projection import BASE_YEAR, ProjectionMetrics, RegionalProjectionCalculator
from climate_projections.regions import REGION_COORDINATES, REGIONS, Region

# (title, metric key, unit, verb used in the card description)
METRIC_CARDS = [
    ('Temperature', 'temperature', '°C', 'increase'),
    ('Precipitation', 'precipitation', '%', 'change'),
    ('Sea Level Rise', 'seaLevel', 'cm', 'rise'),
    ('Extreme Events', 'extremeEvents', '%', 'increase'),
]


def format_metric_cards(metrics: ProjectionMetrics,
                        region: Union[Region, str],
                        year: int) -> List[Dict[str, str]]:
    """
    Build the four dashboard metric cards.

    Values carry a leading "+" and their unit, e.g. ``+1.6°C``.
    """
    region = Region.parse(region)
    values = metrics.as_dict()

    return [
        {
            'title': title,
            'value': f"+{values[key]}{unit}",
            'description': f"{region.value} {verb} by {year}",
        }
        for title, key, unit, verb in METRIC_CARDS
    ]


class ProjectionVisualizer:
    """
    Handles projection charts.
    """

    def __init__(self, config: Dict, logger: Optional[logging.Logger] = None):
        """
        Initialize visualizer.

        Parameters:
        -----------
        config : dict
            Configuration dictionary
        logger : logging.Logger, optional
            Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.viz_config = config.get('visualization', {})
        self.calculator = RegionalProjectionCalculator(config, self.logger)
        self.classifier = ImpactClassifier(config, self.logger)

        # Set style
        plt.style.use(self.viz_config.get('style', 'seaborn-v0_8-darkgrid'))
        sns.set_palette(self.viz_config.get('color_palette', 'viridis'))

    def plot_historical_series(self, region: Union[Region, str],
                               save_path: Optional[str] = None) -> go.Figure:
        """
        Plot historical and projected temperature deviation.

        Parameters:
        -----------
        region : Region or str
            Region to plot
        save_path : str, optional
            Path to save the figure as HTML

        Returns:
        --------
        go.Figure
            Line chart of the anchor series
        """
        region = Region.parse(region)
        df = self.calculator.historical_frame(region)

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=df['year'],
                y=df['temperature'],
                name=f"{region.value} Temperature Change",
                mode='lines+markers',
                line=dict(color=self.viz_config.get('line_color', '#059669'), width=2),
                marker=dict(size=8)
            )
        )
        fig.add_vline(x=BASE_YEAR, line_dash='dash', line_color='gray')

        fig.update_layout(
            title='Historical and Projected Temperature',
            xaxis_title='Year',
            yaxis_title='Temperature Deviation (°C)',
            showlegend=True,
            template=self.viz_config.get('template', 'plotly_white')
        )

        if save_path:
            fig.write_html(save_path)
            self.logger.info(f"Temperature series saved to {save_path}")

        return fig

    def plot_impact_globe(self, year: int,
                          selected_region: Union[Region, str] = Region.GLOBAL,
                          save_path: Optional[str] = None) -> go.Figure:
        """
        Globe of every region coloured by projected impact level.

        Parameters:
        -----------
        year : int
            Target year
        selected_region : Region or str
            Region drawn highlighted
        save_path : str, optional
            Path to save the figure as HTML

        Returns:
        --------
        go.Figure
            Orthographic scatter_geo figure
        """
        selected_region = Region.parse(selected_region)
        comparison = self.calculator.compare_regions(year)

        lats, lons, colors, sizes, outlines, labels = [], [], [], [], [], []
        for region in REGIONS:
            lat, lon = REGION_COORDINATES[region]
            temperature = comparison.loc[region.value, 'temperature']
            impact = self.classifier.classify(temperature)
            is_selected = region is selected_region

            lats.append(lat)
            lons.append(lon)
            colors.append(impact['color'])
            sizes.append(28 if is_selected else 16)
            outlines.append(3 if is_selected else 1)
            labels.append(f"{region.value}: +{temperature:.1f}°C ({impact['name']})")

        fig = go.Figure(go.Scattergeo(
            lat=lats,
            lon=lons,
            text=labels,
            hoverinfo='text',
            mode='markers',
            marker=dict(
                color=colors,
                size=sizes,
                line=dict(color='black', width=outlines),
                opacity=0.85
            )
        ))

        lat, lon = REGION_COORDINATES[selected_region]
        fig.update_geos(
            projection_type=self.viz_config.get('globe_projection', 'orthographic'),
            projection_rotation=dict(lat=lat, lon=lon),
            showland=True,
            landcolor='#e5ecf6',
            showocean=True,
            oceancolor='#cfe8f3',
            showcountries=True
        )
        fig.update_layout(
            title=f"Projected Climate Impact by {year}",
            height=600,
            margin=dict(l=0, r=0, t=40, b=0),
            template=self.viz_config.get('template', 'plotly_white')
        )

        if save_path:
            fig.write_html(save_path)
            self.logger.info(f"Impact globe saved to {save_path}")

        return fig

    def save_series_png(self, region: Union[Region, str], save_path: str) -> None:
        """
        Save a static chart of the temperature series.

        Parameters:
        -----------
        region : Region or str
            Region to plot
        save_path : str
            Output PNG path
        """
        region = Region.parse(region)
        df = self.calculator.historical_frame(region)
        historical = df[df['period'] == 'historical']
        projected = df[df['year'] >= BASE_YEAR]

        fig, ax = plt.subplots(figsize=(10, 5))

        ax.plot(historical['year'], historical['temperature'], 'o-',
                color=self.viz_config.get('line_color', '#059669'), linewidth=2,
                markersize=7, label='Historical')
        ax.plot(projected['year'], projected['temperature'], 'o--',
                color='darkorange', linewidth=2, markersize=7, label='Projected')
        ax.axhline(y=0, color='gray', linewidth=1)

        ax.set_xlabel('Year', fontsize=12)
        ax.set_ylabel('Temperature Deviation (°C)', fontsize=12)
        ax.set_title(f'{region.value} Temperature Change', fontsize=14, fontweight='bold')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='upper left')

        plt.tight_layout()
        plt.savefig(save_path, dpi=self.viz_config.get('figure_dpi', 300),
                    bbox_inches='tight')
        plt.close(fig)
        self.logger.info(f"Temperature chart saved to {save_path}")
