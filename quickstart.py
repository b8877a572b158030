"""
Quick Start Script for the Climate Projections Dashboard
Prints projections for every region and saves sample charts.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from climate_projections.regions import REGIONS
from climate_projections.reports import ProjectionReporter
from climate_projections.utils import load_config, setup_logging
from climate_projections.visualization import ProjectionVisualizer
import os


def main():
    """Run a short demonstration."""
    print("\n" + "=" * 60)
    print("🌍 REGIONAL CLIMATE PROJECTIONS")
    print("=" * 60)

    config = load_config()
    logger = setup_logging(config)
    year = config.get('dashboard', {}).get('default_year', 2050)

    reporter = ProjectionReporter(config, logger)
    visualizer = ProjectionVisualizer(config, logger)

    os.makedirs('results', exist_ok=True)

    print(f"\n📊 STEP 1: Projections for {year}")
    print("-" * 60)
    for region in REGIONS:
        summary = reporter.build_summary(region, year)
        print(reporter.format_text(summary))

    print("\n📈 STEP 2: Creating charts...")
    print("-" * 60)
    visualizer.save_series_png(REGIONS[0], 'results/global_temperature.png')
    visualizer.plot_historical_series(REGIONS[0], save_path='results/global_temperature.html')
    visualizer.plot_impact_globe(year, save_path='results/impact_globe.html')

    print("\n✅ Charts saved in the 'results' folder")
    print("Start the dashboard with: streamlit run climate_projections/app.py\n")


if __name__ == "__main__":
    main()
