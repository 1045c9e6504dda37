"""Tests for the DVH chain bottleneck and target policies."""

import pytest

from glass_capacity.analysis import BottleneckSolver
from glass_capacity.models import DvhTargetPolicy, ShiftSystem, StationId
from glass_capacity.production import DemandCalculator, StationCapacityCalculator


@pytest.fixture
def solver():
    return BottleneckSolver()


@pytest.fixture
def baseline_breakdown(solver, baseline_capacities, baseline_parameters):
    non_dvh = DemandCalculator().non_dvh_demand(baseline_parameters, ShiftSystem.SIX_TWO)
    return solver.max_dvh_throughput(baseline_capacities, non_dvh)


class TestChainLimit:
    """Per-group limits of the documented plant."""

    def test_group_limits(self, baseline_breakdown):
        assert baseline_breakdown.limit_for("monolithic_cutting") == pytest.approx((1350 - 248) / 0.8)
        assert baseline_breakdown.limit_for("laminated_cutting") == pytest.approx((1053 - 88) / 1.2)
        assert baseline_breakdown.limit_for("tempering") == pytest.approx((16000 - 4720) / 10.5)
        assert baseline_breakdown.limit_for("dvh_assembly") == pytest.approx(800)

    def test_edge_treatment_limit(self, baseline_breakdown):
        edge_daily_area = (6250 + 1065 / 4.12 + 937.5) / 5
        assert baseline_breakdown.limit_for("edge_treatment") == pytest.approx((edge_daily_area - 232) / 2)

    def test_lamination_limit(self, baseline_breakdown):
        other_load = 148 + 100_000 / 30.31
        assert baseline_breakdown.limit_for("lamination") == pytest.approx((72000 / 17 - other_load) / 1.2)

    def test_edge_treatment_binds(self, baseline_breakdown):
        assert baseline_breakdown.binding_group == "edge_treatment"
        assert baseline_breakdown.chain_limit == pytest.approx(628.5995, abs=1e-3)

    def test_six_constraints(self, baseline_breakdown):
        assert len(baseline_breakdown.constraints) == 6
        assert len(baseline_breakdown.to_dataframe()) == 6

    def test_unknown_group(self, baseline_breakdown):
        with pytest.raises(KeyError):
            baseline_breakdown.limit_for("packing")


class TestOverloadedChain:
    """Spare capacity never goes negative."""

    def test_load_above_capacity_gives_zero_limit(self, solver, baseline_configuration, baseline_parameters):
        config = baseline_configuration.update_station(StationId.JUMBO, rate=10)
        capacities = StationCapacityCalculator().calculate_all(config, baseline_parameters.edge_conversion)
        non_dvh = DemandCalculator().non_dvh_demand(baseline_parameters, ShiftSystem.SIX_TWO)

        breakdown = solver.max_dvh_throughput(capacities, non_dvh)

        assert breakdown.limit_for("monolithic_cutting") == 0
        assert breakdown.chain_limit == 0
        assert breakdown.binding_group == "monolithic_cutting"


class TestEffectiveTarget:
    """Tests for target resolution policies."""

    def test_fixed_ignores_limit(self):
        assert BottleneckSolver.effective_dvh_target(DvhTargetPolicy.FIXED, 800, 628.6) == 800

    def test_coupled_caps_at_floor(self):
        assert BottleneckSolver.effective_dvh_target(DvhTargetPolicy.COUPLED, 800, 628.6) == 628

    def test_coupled_keeps_lower_request(self):
        assert BottleneckSolver.effective_dvh_target(DvhTargetPolicy.COUPLED, 500, 628.6) == 500

    def test_automatic_uses_limit(self):
        assert BottleneckSolver.effective_dvh_target(DvhTargetPolicy.AUTOMATIC, 100, 628.6) == 628

    def test_zero_limit(self):
        assert BottleneckSolver.effective_dvh_target(DvhTargetPolicy.COUPLED, 800, 0.0) == 0
