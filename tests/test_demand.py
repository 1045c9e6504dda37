"""Tests for demand derivation from production targets."""

import pytest

from glass_capacity.models import GlobalParameters, ProductionTargets, ShiftSystem
from glass_capacity.production import DemandCalculator


@pytest.fixture
def calculator():
    return DemandCalculator()


class TestDvhPanes:
    """Tests for DVH pane mix."""

    def test_pane_split(self, calculator):
        panes = calculator.dvh_panes(800)

        assert panes.panes == pytest.approx(1600)
        assert panes.tempered == pytest.approx(560)
        assert panes.laminated == pytest.approx(960)
        assert panes.float_glass == pytest.approx(80)


class TestDemandAtTarget:
    """Demand for the default targets at a DVH target of 800 m²/day."""

    @pytest.fixture
    def demand(self, calculator, baseline_parameters):
        return calculator.calculate(baseline_parameters, 800, ShiftSystem.SIX_TWO)

    def test_monolithic_cutting(self, demand):
        # 128 tempered + 120 special plies + 560 DVH tempered + 80 float
        assert demand.monolithic_cutting.daily == pytest.approx(888)
        assert demand.monolithic_cutting.weekly == pytest.approx(4440)

    def test_waste_factor_only_on_gross(self, demand):
        assert demand.monolithic_cutting.gross_daily == pytest.approx(888 * 1.18)
        assert demand.laminated_cutting.gross_daily == pytest.approx(1048 * 1.30)
        assert demand.laminated_cutting.daily == pytest.approx(1048)

    def test_laminated_cutting(self, demand):
        assert demand.laminated_cutting.daily == pytest.approx(1048)
        assert demand.laminated_cutting.weekly == pytest.approx(5240)

    def test_edge_treatment(self, demand):
        assert demand.edge_treatment.daily == pytest.approx(1832)
        assert demand.edge_treatment.weekly == pytest.approx(9160)

    def test_tempering_in_kg(self, demand):
        # 560 x 15 + 128 x 20 + 120 x 18
        assert demand.tempering.unit == "kg"
        assert demand.tempering.daily == pytest.approx(13120)

    def test_dvh_assembly(self, demand):
        assert demand.dvh_assembly.weekly == pytest.approx(4000)

    def test_lamination_monthly_includes_distribution(self, demand):
        assert demand.lamination.monthly == pytest.approx(1108 * 30.31 + 100_000)
        assert demand.lamination.daily == pytest.approx(1108 + 100_000 / 30.31)

    def test_by_group(self, demand):
        groups = demand.by_group()
        assert set(groups) == {
            "monolithic_cutting",
            "laminated_cutting",
            "edge_treatment",
            "tempering",
            "dvh_assembly",
            "lamination",
        }


class TestSwitches:
    """Tests for policy switches and the demand calendar."""

    def test_special_laminated_routed_to_laminated_cutting(self, calculator):
        params = GlobalParameters(special_laminated_from_monolithic=False)
        demand = calculator.calculate(params, 0, ShiftSystem.SIX_TWO)

        assert demand.monolithic_cutting.daily == pytest.approx(128)
        assert demand.laminated_cutting.daily == pytest.approx(60 + 44 + 44)

    def test_special_laminated_always_tempered_as_plies(self, calculator):
        params = GlobalParameters(special_laminated_from_monolithic=False)
        demand = calculator.calculate(params, 0, ShiftSystem.SIX_TWO)
        assert demand.tempering.daily == pytest.approx(128 * 20 + 120 * 18)

    def test_waste_factors_disabled(self, calculator):
        params = GlobalParameters(apply_waste_factors=False)
        demand = calculator.calculate(params, 800, ShiftSystem.SIX_TWO)
        assert demand.monolithic_cutting.gross_daily == pytest.approx(demand.monolithic_cutting.daily)

    def test_six_two_demand_calendar(self, calculator):
        params = GlobalParameters(demand_calendar=ShiftSystem.SIX_TWO)
        demand = calculator.calculate(params, 800, ShiftSystem.SIX_TWO)
        assert demand.monolithic_cutting.weekly == pytest.approx(888 * 7)

    def test_lamination_days_follow_lamination_line(self, calculator, baseline_parameters):
        demand = calculator.calculate(baseline_parameters, 0, ShiftSystem.FIVE_TWO)
        assert demand.lamination.monthly == pytest.approx(148 * 21.65 + 100_000)


class TestNonDvhDemand:
    """The load DVH must fit around."""

    def test_zero_dvh(self, calculator, baseline_parameters):
        demand = calculator.non_dvh_demand(baseline_parameters, ShiftSystem.SIX_TWO)

        assert demand.dvh.panes == 0
        assert demand.monolithic_cutting.daily == pytest.approx(248)
        assert demand.laminated_cutting.daily == pytest.approx(88)
        assert demand.edge_treatment.daily == pytest.approx(232)
        assert demand.tempering.daily == pytest.approx(4720)
        assert demand.dvh_assembly.daily == 0

    def test_all_targets_zero(self, calculator):
        params = GlobalParameters(
            targets=ProductionTargets(tempered=0, special_laminated=0, polished_laminated=0, cut_laminated=0, dvh=0),
            distribution_volume_per_month=0,
        )
        demand = calculator.calculate(params, 0, ShiftSystem.SIX_TWO)

        for figure in demand.by_group().values():
            assert figure.weekly == 0
