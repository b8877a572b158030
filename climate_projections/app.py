"""
Streamlit Dashboard for Climate Projections
Interactive regional climate change projections.

Run with: streamlit run climate_projections/app.py
"""

import streamlit as st
import sys
from pathlib import Path

# Make the package importable when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from climate_projections.impact import ImpactClassifier
from climate_projections.projection import RegionalProjectionCalculator
from climate_projections.regions import REGIONS, Region
from climate_projections.reports import ProjectionReporter
from climate_projections.utils import load_config, setup_logging
from climate_projections.visualization import ProjectionVisualizer, format_metric_cards


def page_settings(config):
    """Keyword arguments for st.set_page_config taken from the dashboard config."""
    dashboard_config = config.get('dashboard', {})
    return {
        'page_title': dashboard_config.get('title', 'Climate Change Prediction Dashboard'),
        'page_icon': dashboard_config.get('page_icon', '🌍'),
        'layout': 'wide',
        'initial_sidebar_state': 'collapsed',
    }


# Page configuration
st.set_page_config(**page_settings(load_config()))

# Custom CSS
st.markdown("""
<style>
    .impact-card {
        padding: 1rem;
        border-radius: 0.5rem;
        border: 1px solid;
        margin-bottom: 1rem;
    }
    .findings {
        background-color: #eff6ff;
        padding: 1rem;
        border-radius: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def load_system():
    """Load and initialize the projection components."""
    config = load_config()
    logger = setup_logging(config)

    return {
        'config': config,
        'logger': logger,
        'calculator': RegionalProjectionCalculator(config, logger),
        'classifier': ImpactClassifier(config, logger),
        'visualizer': ProjectionVisualizer(config, logger),
        'reporter': ProjectionReporter(config, logger),
    }


@st.cache_data
def cached_metrics(region_name: str, year: int):
    return load_system()['calculator'].compute_metrics(region_name, year)


@st.cache_data
def cached_summary(region_name: str, year: int):
    return load_system()['reporter'].build_summary(region_name, year)


def render_impact_cards(classifier: ImpactClassifier, current_level: str):
    """Render the three impact level cards, marking the current one."""
    columns = st.columns(len(classifier.levels()))

    for column, level in zip(columns, classifier.levels()):
        marker = " ◀ current" if level['name'] == current_level else ""
        with column:
            st.markdown(
                f"<div class='impact-card' style='border-color: {level['color']}'>"
                f"<h4 style='color: {level['color']}'>{level['name']}{marker}</h4>"
                f"<p>{level.get('description', '')}</p></div>",
                unsafe_allow_html=True
            )


def main():
    system = load_system()
    config = system['config']
    dashboard_config = config.get('dashboard', {})
    year_min = dashboard_config.get('year_min', 2023)
    year_max = dashboard_config.get('year_max', 2050)

    # Header
    st.title(dashboard_config.get('title', 'Climate Change Prediction Dashboard'))
    st.markdown(dashboard_config.get('intro', ''))

    # Selection
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Region Selection")
        region_names = [region.value for region in REGIONS]
        default_region = dashboard_config.get('default_region', Region.GLOBAL.value)
        region_name = st.selectbox(
            "Region",
            region_names,
            index=region_names.index(Region.parse(default_region).value)
        )

    with col2:
        st.subheader("Prediction Timeframe")
        year = st.slider(
            "Year",
            min_value=year_min,
            max_value=year_max,
            value=dashboard_config.get('default_year', year_max)
        )

    region = Region.parse(region_name)
    metrics = cached_metrics(region.value, year)

    # Metric cards
    st.markdown("---")
    for column, card in zip(st.columns(4), format_metric_cards(metrics, region, year)):
        with column:
            st.metric(card['title'], card['value'])
            st.caption(card['description'])

    # Temperature series
    st.markdown("---")
    st.subheader("📈 Historical and Projected Temperature")
    st.plotly_chart(
        system['visualizer'].plot_historical_series(region),
        use_container_width=True
    )

    # Globe
    st.subheader("🌍 Global Climate Impact Visualization")
    st.markdown(
        f"Climate impacts for **{region.value}**. Colors indicate temperature changes: "
        f"red (>2°C), orange (1-2°C), and green (<1°C). "
        f"The highlighted marker shows the selected region."
    )
    st.plotly_chart(
        system['visualizer'].plot_impact_globe(year, region),
        use_container_width=True
    )

    # Impact levels
    current_impact = system['classifier'].classify(metrics.temperature)
    render_impact_cards(system['classifier'], current_impact['name'])

    # Analysis panel
    st.markdown("---")
    header_col, confidence_col = st.columns([3, 1])
    with header_col:
        st.subheader("🤖 AI Prediction Analysis")
    with confidence_col:
        st.caption(f"Confidence Level: {dashboard_config.get('confidence_level', 85)}%")

    findings = "".join(f"<li>{item}</li>" for item in dashboard_config.get('key_findings', []))
    st.markdown(
        f"<div class='findings'><h4>Key Findings for {region.value}</h4><ul>{findings}</ul></div>",
        unsafe_allow_html=True
    )

    with st.expander("Regional comparison"):
        comparison = system['calculator'].compare_regions(year)
        st.dataframe(comparison.round(1), use_container_width=True)

    # Export / refresh
    st.markdown("---")
    summary = cached_summary(region.value, year)
    slug = region.value.lower().replace(' ', '_')
    export_col1, export_col2, refresh_col = st.columns(3)

    with export_col1:
        st.download_button(
            "⬇️ Export JSON",
            data=system['reporter'].to_json(summary),
            file_name=f"projection_{slug}_{year}.json",
            mime="application/json"
        )
    with export_col2:
        st.download_button(
            "⬇️ Export CSV",
            data=system['reporter'].to_csv(summary),
            file_name=f"projection_{slug}_{year}.csv",
            mime="text/csv"
        )
    with refresh_col:
        if st.button("🔄 Refresh"):
            cached_metrics.clear()
            cached_summary.clear()
            st.rerun()


if __name__ == "__main__":
    main()
