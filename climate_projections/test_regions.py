"""
Tests for the static region tables and impact classification.
"""
import dataclasses

import pytest

from climate_projections.impact import ImpactClassifier
from climate_projections.regions import (
    ANCHOR_YEARS,
    BASE_DEVIATIONS,
    REGION_COORDINATES,
    REGIONAL_FACTORS,
    InvalidRegionError,
    Region,
    RegionalFactors,
)
from climate_projections.utils import load_config, setup_logging


@pytest.fixture
def classifier():
    """Create an ImpactClassifier instance for testing."""
    config = load_config()
    logger = setup_logging(config)
    return ImpactClassifier(config, logger)


def test_every_region_has_positive_factors():
    assert set(REGIONAL_FACTORS) == set(Region)
    assert len(Region) == 7
    for factors in REGIONAL_FACTORS.values():
        assert min(dataclasses.astuple(factors)) > 0


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        REGIONAL_FACTORS[Region.GLOBAL] = RegionalFactors(2.0, 2.0, 2.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        REGIONAL_FACTORS[Region.GLOBAL].temperature = 2.0


def test_factors_must_be_positive():
    with pytest.raises(ValueError, match='sea_level'):
        RegionalFactors(1.0, 1.0, 0.0, 1.0)


def test_anchor_tables_align():
    assert ANCHOR_YEARS == (1900, 1950, 2000, 2023, 2030, 2040, 2050)
    assert len(BASE_DEVIATIONS) == len(ANCHOR_YEARS)
    assert set(REGION_COORDINATES) == set(Region)


@pytest.mark.parametrize('value', [Region.SOUTH_AMERICA, 'South America', 'SOUTH_AMERICA'])
def test_parse_accepts_member_display_name_and_member_name(value):
    assert Region.parse(value) is Region.SOUTH_AMERICA


@pytest.mark.parametrize('value', ['south america', 'Antarctica', '', None, 3])
def test_parse_rejects_unknown_values(value):
    with pytest.raises(InvalidRegionError) as excinfo:
        Region.parse(value)
    assert repr(value) in str(excinfo.value)
    assert excinfo.value.value == value


def test_region_str_is_display_name():
    assert str(Region.NORTH_AMERICA) == 'North America'


@pytest.mark.parametrize('change, expected', [
    (-0.3, 'Low Impact'),
    (0.9, 'Low Impact'),
    (1.0, 'Moderate Impact'),
    (1.6, 'Moderate Impact'),
    (2.0, 'Moderate Impact'),
    (2.1, 'Severe Impact'),
    ('2.2', 'Severe Impact'),
])
def test_classify(classifier, change, expected):
    assert classifier.classify(change)['name'] == expected


def test_classify_is_monotonic(classifier):
    names = [level['name'] for level in classifier.levels()]
    ranks = [names.index(classifier.classify(x / 10)['name']) for x in range(-10, 40)]
    assert ranks == sorted(ranks)


def test_classifier_defaults_without_config():
    classifier = ImpactClassifier({})
    assert [level['name'] for level in classifier.levels()] == [
        'Low Impact', 'Moderate Impact', 'Severe Impact'
    ]
    assert classifier.classify(2.5)['color'] == '#e74c3c'


def test_classifier_rejects_bounded_first_level():
    config = {'impact': {'levels': [{'name': 'Only', 'min': 0.0, 'color': '#000'}]}}
    with pytest.raises(ValueError):
        ImpactClassifier(config)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
