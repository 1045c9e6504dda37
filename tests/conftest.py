"""Pytest configuration and shared fixtures."""

import pytest

from glass_capacity.models import (
    DEFAULT_CONSTANTS,
    GlobalParameters,
    ProductionTargets,
    default_global_parameters,
    default_plant_configuration,
)
from glass_capacity.production import StationCapacityCalculator


@pytest.fixture
def constants():
    """Documented plant constants."""
    return DEFAULT_CONSTANTS


@pytest.fixture
def baseline_configuration():
    """Station configuration as run on the shop floor."""
    return default_plant_configuration()


@pytest.fixture
def baseline_parameters():
    """Global parameters at their documented defaults (coupled DVH target)."""
    return default_global_parameters()


@pytest.fixture
def fixed_parameters():
    """Requested DVH target of 800 m²/day used as-is, uncapped by the chain."""
    return GlobalParameters(dvh_coupled_to_capacity=False)


@pytest.fixture
def fixed_parameters_factory():
    """Build fixed-policy parameters with overridden targets."""
    def _make(**targets):
        return GlobalParameters(
            dvh_coupled_to_capacity=False,
            targets=ProductionTargets(**targets),
        )
    return _make


@pytest.fixture
def baseline_capacities(baseline_configuration, baseline_parameters):
    """Capacity figures for every station of the baseline plant."""
    return StationCapacityCalculator().calculate_all(
        baseline_configuration, baseline_parameters.edge_conversion
    )
