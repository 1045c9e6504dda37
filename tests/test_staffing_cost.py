"""Tests for staffing cost and incremental hires.

Tests:
- StaffingCostCalculator base and overtime cost
- Incremental hires against the baseline crew
- StaffingReport totals and proportions
"""

import pytest

from glass_capacity.costs import StaffingCostCalculator, StaffingReport
from glass_capacity.models import GlobalParameters, ShiftSystem, StationConfig, StationId


SALARY = 2874994.79
OVERTIME_RATE = 10645.0


@pytest.fixture
def calculator():
    return StaffingCostCalculator()


class TestStationCost:
    """Tests for single-station labor cost."""

    def test_base_cost(self, calculator, baseline_parameters):
        config = StationConfig(rate=56.25, shifts_per_day=3, crew_per_shift=2)
        cost = calculator.station_cost(StationId.JUMBO, config, baseline_parameters)

        assert cost.headcount == pytest.approx(6)
        assert cost.base_cost == pytest.approx(6 * SALARY)
        assert cost.overtime_cost == 0

    def test_overtime_cost(self, calculator, baseline_parameters):
        config = StationConfig(rate=56.25, shifts_per_day=3, crew_per_shift=2, overtime_hours_per_week=10)
        cost = calculator.station_cost(StationId.JUMBO, config, baseline_parameters)

        # crew x shifts x hours x weeks/month x rate
        assert cost.overtime_cost == pytest.approx(2 * 3 * 10 * 4.33 * OVERTIME_RATE)
        assert cost.total_cost == pytest.approx(cost.base_cost + cost.overtime_cost)

    def test_six_two_dotation(self, calculator, baseline_parameters):
        config = StationConfig(rate=1, shift_system=ShiftSystem.SIX_TWO, shifts_per_day=3, crew_per_shift=3.5)
        cost = calculator.station_cost(StationId.BOVONE, config, baseline_parameters)
        assert cost.headcount == pytest.approx(14)


class TestIncrementalHires:
    """Tests for hires beyond the baseline crew."""

    def test_baseline_needs_no_hires(self, calculator, baseline_configuration, baseline_parameters):
        hire = calculator.incremental_hire(
            StationId.BOVONE, baseline_configuration[StationId.BOVONE], baseline_parameters
        )
        assert hire.hires == 0
        assert hire.cost == 0

    def test_switch_to_six_two_rounds_up(self, calculator, baseline_parameters):
        config = StationConfig(rate=26.325, shift_system=ShiftSystem.SIX_TWO, shifts_per_day=2, crew_per_shift=2)
        hire = calculator.incremental_hire(StationId.HEGLA_2, config, baseline_parameters)

        assert hire.required_headcount == pytest.approx(16 / 3)
        assert hire.baseline_headcount == pytest.approx(4)
        assert hire.hires == 2
        assert hire.cost == pytest.approx(2 * SALARY)

    def test_shrinkage_is_zero_not_negative(self, calculator, baseline_parameters):
        config = StationConfig(rate=56.25, shifts_per_day=1, crew_per_shift=2)
        hire = calculator.incremental_hire(StationId.JUMBO, config, baseline_parameters)
        assert hire.hires == 0

    def test_extra_crew_member(self, calculator, baseline_parameters):
        config = StationConfig(rate=50, shifts_per_day=2, crew_per_shift=6)
        hire = calculator.incremental_hire(StationId.DVH_ASSEMBLY, config, baseline_parameters)
        assert hire.hires == 1


class TestStaffingReport:
    """Tests for plant-wide totals."""

    def test_baseline_totals(self, calculator, baseline_configuration, baseline_parameters):
        report = calculator.calculate(baseline_configuration, baseline_parameters)

        assert report.total_headcount == pytest.approx(59)
        assert report.total_base_cost == pytest.approx(59 * SALARY)
        assert report.total_overtime_cost == 0
        assert report.total_incremental_hires == 0

    def test_cost_proportions(self, calculator, baseline_configuration, baseline_parameters):
        config = baseline_configuration.update_station(StationId.JUMBO, overtime_hours_per_week=10)
        report = calculator.calculate(config, baseline_parameters)
        proportions = report.get_cost_proportions()

        assert proportions["base"] + proportions["overtime"] == pytest.approx(1.0)
        assert proportions["overtime"] > 0

    def test_empty_report_proportions(self):
        assert StaffingReport().get_cost_proportions() == {"base": 0.0, "overtime": 0.0}

    def test_zero_salary(self, calculator, baseline_configuration):
        params = GlobalParameters(monthly_salary=0, overtime_hourly_rate=0)
        report = calculator.calculate(baseline_configuration, params)
        assert report.total_cost == 0

    def test_dataframe(self, calculator, baseline_configuration, baseline_parameters):
        df = calculator.calculate(baseline_configuration, baseline_parameters).to_dataframe()

        assert len(df) == 9
        assert df['Headcount'].sum() == pytest.approx(59)
