"""
Tests for reports, visualization and the command-line interface.
"""
import io
import json

import pandas as pd
import pytest

from climate_projections import cli
from climate_projections.projection import compute_metrics
from climate_projections.regions import REGIONS, Region
from climate_projections.reports import ProjectionReporter
from climate_projections.utils import load_config, setup_logging
from climate_projections.visualization import ProjectionVisualizer, format_metric_cards


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def reporter(config):
    """Create a ProjectionReporter instance for testing."""
    return ProjectionReporter(config, setup_logging(config))


@pytest.fixture
def visualizer(config):
    """Create a ProjectionVisualizer instance for testing."""
    return ProjectionVisualizer(config, setup_logging(config))


def test_build_summary(reporter):
    summary = reporter.build_summary('Global', 2050)
    assert summary['region'] == 'Global'
    assert summary['year'] == 2050
    assert summary['metrics']['seaLevel'] == '26.3'
    assert summary['impact']['name'] == 'Moderate Impact'
    assert 'generated_at' in summary


def test_summary_json(reporter):
    summary = reporter.build_summary(Region.AFRICA, 2050)
    data = json.loads(reporter.to_json(summary))
    assert data['metrics']['temperature'] == '2.2'
    assert data['impact']['name'] == 'Severe Impact'
    assert [point['year'] for point in data['history']][0] == 1900


def test_summary_csv(reporter):
    summary = reporter.build_summary(Region.EUROPE, 2030)
    df = pd.read_csv(io.StringIO(reporter.to_csv(summary)))
    assert len(df) == 7
    assert set(['region', 'anchor_year', 'anchor_temperature', 'target_year',
                'temperature', 'precipitation', 'seaLevel', 'extremeEvents', 'impact']) <= set(df.columns)
    assert (df['region'] == 'Europe').all()
    assert (df['target_year'] == 2030).all()


def test_format_text(reporter):
    summary = reporter.build_summary(Region.GLOBAL, 2050)
    text = reporter.format_text(summary)
    assert 'GLOBAL (2050)' in text
    assert '+1.6°C' in text
    assert '+32.0%' in text
    assert '1900' not in text

    with_history = reporter.format_text(summary, include_history=True)
    assert '1900  -0.20°C' in with_history


def test_format_metric_cards():
    cards = format_metric_cards(compute_metrics(Region.GLOBAL, 2050), 'Global', 2050)
    assert [card['value'] for card in cards] == ['+1.6°C', '+5.3%', '+26.3cm', '+32.0%']
    assert cards[0]['description'] == 'Global increase by 2050'
    assert cards[2]['description'] == 'Global rise by 2050'


def test_plot_historical_series(visualizer):
    fig = visualizer.plot_historical_series(Region.OCEANIA)
    assert len(fig.data) == 1
    assert list(fig.data[0].x) == [1900, 1950, 2000, 2023, 2030, 2040, 2050]
    assert fig.data[0].name == 'Oceania Temperature Change'


def test_plot_impact_globe(visualizer):
    fig = visualizer.plot_impact_globe(2050, Region.ASIA)
    markers = fig.data[0]
    assert len(markers.lat) == len(REGIONS)
    asia = [region.value for region in REGIONS].index('Asia')
    assert markers.marker.size[asia] == max(markers.marker.size)
    assert markers.marker.color[asia] == '#e74c3c'


def test_save_series_png(visualizer, tmp_path):
    path = tmp_path / 'series.png'
    visualizer.save_series_png('North America', str(path))
    assert path.exists()
    assert path.stat().st_size > 0


def test_cli_text(capsys):
    assert cli.main(['--region', 'Global', '--year', '2050']) == 0
    out = capsys.readouterr().out
    assert '+1.6°C' in out
    assert '+26.3cm' in out


def test_cli_json(capsys):
    assert cli.main(['--region', 'Asia', '--year', '2036', '--format', 'json']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['metrics']['precipitation'] == '3.6'


def test_cli_compare_csv(capsys):
    assert cli.main(['--compare', '--year', '2050', '--format', 'csv']) == 0
    df = pd.read_csv(io.StringIO(capsys.readouterr().out), index_col='region')
    assert len(df) == len(REGIONS)
    assert df.loc['Global', 'extremeEvents'] == pytest.approx(32.0)


def test_cli_compare_and_single_exports_share_metric_names(capsys):
    metric_names = list(compute_metrics(Region.GLOBAL, 2040).as_dict())

    assert cli.main(['--compare', '--year', '2040', '--format', 'json']) == 0
    compared = json.loads(capsys.readouterr().out)
    assert list(compared['Global']) == metric_names

    assert cli.main(['--region', 'Global', '--year', '2040', '--format', 'csv']) == 0
    single = pd.read_csv(io.StringIO(capsys.readouterr().out))
    assert set(metric_names) <= set(single.columns)


def test_page_settings_follow_dashboard_config():
    from climate_projections.app import page_settings

    settings = page_settings({'dashboard': {'title': 'Regional Outlook', 'page_icon': '🌡️'}})
    assert settings['page_title'] == 'Regional Outlook'
    assert settings['page_icon'] == '🌡️'
    assert page_settings(load_config())['page_icon'] == load_config()['dashboard']['page_icon']


def test_cli_list_regions(capsys):
    assert cli.main(['--list-regions']) == 0
    assert capsys.readouterr().out.splitlines() == [region.value for region in REGIONS]


def test_cli_unknown_region(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--region', 'Atlantis'])
    assert excinfo.value.code == 2
    assert 'Atlantis' in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
