"""Staffing cost calculator.

Calculates monthly labor cost and incremental hires from station
configurations, accounting for:
- Base cost: required headcount at the monthly salary
- Overtime cost: overtime hours worked by every crew member, monthly
- Incremental hires against the historical baseline crew (never negative)
"""

import logging

from ..models.parameters import DEFAULT_CONSTANTS, GlobalParameters, PlantConstants
from ..models.station import PlantConfiguration, StationConfig, StationId
from ..production.capacity import StationCapacityCalculator
from ..utils.numeric import ceil_with_tolerance
from .cost_breakdown import IncrementalHire, StaffingReport, StationCost

logger = logging.getLogger(__name__)


class StaffingCostCalculator:
    """
    Calculates labor cost and incremental hires.

    Example:
        calculator = StaffingCostCalculator()
        report = calculator.calculate(configuration, parameters)
        print(f"Total labor cost: ${report.total_cost:,.2f}")
    """

    def __init__(self, constants: PlantConstants = DEFAULT_CONSTANTS):
        """
        Initialize staffing cost calculator.

        Args:
            constants: Plant constants (dotation factor, weeks per month, baseline crews)
        """
        self.constants = constants
        self._capacity = StationCapacityCalculator(constants)

    def station_cost(self, station_id: StationId, config: StationConfig, parameters: GlobalParameters) -> StationCost:
        """
        Calculate monthly labor cost of one station.

        Args:
            station_id: Station being costed
            config: Station configuration
            parameters: Monthly salary and overtime rate

        Returns:
            StationCost with base and overtime components
        """
        headcount = self._capacity.headcount(config)
        overtime_cost = (
            config.crew_per_shift
            * config.shifts_per_day
            * max(0.0, config.overtime_hours_per_week)
            * self.constants.weeks_per_month
            * parameters.overtime_hourly_rate
        )
        return StationCost(
            station=station_id,
            headcount=headcount,
            base_cost=headcount * parameters.monthly_salary,
            overtime_cost=overtime_cost,
        )

    def incremental_hire(self, station_id: StationId, config: StationConfig, parameters: GlobalParameters) -> IncrementalHire:
        """
        Calculate hires needed beyond the baseline crew.

        Shrinkage versus baseline is reported as zero hires, never negative.
        """
        required = self._capacity.headcount(config)
        baseline_config = self.constants.baseline_crews.get(station_id)
        baseline = self._capacity.headcount(baseline_config) if baseline_config is not None else 0.0
        hires = max(0, ceil_with_tolerance(required - baseline))
        return IncrementalHire(
            station=station_id,
            required_headcount=required,
            baseline_headcount=baseline,
            hires=hires,
            cost=hires * parameters.monthly_salary,
        )

    def calculate(self, configuration: PlantConfiguration, parameters: GlobalParameters) -> StaffingReport:
        """
        Calculate staffing cost and incremental hires for all stations.

        Args:
            configuration: All nine station configurations
            parameters: Monthly salary and overtime rate

        Returns:
            StaffingReport with per-station and total figures
        """
        report = StaffingReport()
        for station_id in StationId:
            config = configuration[station_id]
            report.stations[station_id] = self.station_cost(station_id, config, parameters)
            report.incremental_hires[station_id] = self.incremental_hire(station_id, config, parameters)

        logger.debug(str(report))
        return report
