"""
Command-Line Interface
Prints regional climate projections without starting the dashboard.
"""

import argparse
import sys
from typing import List, Optional

from climate_projections.regions import InvalidRegionError, REGIONS, Region
from climate_projections.reports import ProjectionReporter
from climate_projections.utils import load_config, setup_logging
from climate_projections.visualization import ProjectionVisualizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='climate-projections',
        description='Regional climate change projections',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Projection for Asia in 2040
  climate-projections --region Asia --year 2040

  # Include the historical series
  climate-projections --region Europe --history

  # Export as JSON or CSV
  climate-projections --region Africa --year 2030 --format json

  # Compare every region
  climate-projections --compare --year 2050
        """
    )

    parser.add_argument('--region', type=str, default=None,
                        help='Region name (default from config)')
    parser.add_argument('--year', type=int, default=None,
                        help='Target year (default from config)')
    parser.add_argument('--format', choices=['text', 'json', 'csv'], default='text',
                        help='Output format (default: text)')
    parser.add_argument('--history', action='store_true',
                        help='Include the historical temperature series')
    parser.add_argument('--compare', action='store_true',
                        help='Show all regions for the target year')
    parser.add_argument('--plot', type=str, default=None, metavar='PATH',
                        help='Save a PNG chart of the temperature series')
    parser.add_argument('--list-regions', action='store_true',
                        help='List available regions')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to an alternate config.yaml')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_regions:
        for region in REGIONS:
            print(region.value)
        return 0

    config = load_config(args.config)
    logger = setup_logging(config)
    dashboard_config = config.get('dashboard', {})

    try:
        region = Region.parse(args.region or dashboard_config.get('default_region', 'Global'))
    except InvalidRegionError as e:
        parser.error(str(e))

    year = args.year if args.year is not None else dashboard_config.get('default_year', 2050)
    reporter = ProjectionReporter(config, logger)

    if args.compare:
        comparison = reporter.calculator.compare_regions(year)
        if args.format == 'csv':
            print(comparison.to_csv(), end='')
        elif args.format == 'json':
            print(comparison.to_json(orient='index', indent=2))
        else:
            print(f"\nProjected change by {year}\n")
            print(comparison.to_string(float_format=lambda v: f"{v:.1f}"))
        return 0

    summary = reporter.build_summary(region, year)

    if args.format == 'json':
        print(reporter.to_json(summary))
    elif args.format == 'csv':
        print(reporter.to_csv(summary), end='')
    else:
        print(reporter.format_text(summary, include_history=args.history))

    if args.plot:
        visualizer = ProjectionVisualizer(config, logger)
        visualizer.save_series_png(region, args.plot)
        print(f"\n✅ Chart saved to: {args.plot}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
