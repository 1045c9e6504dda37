"""
Station capacity and staffing calculation.

Converts a station's configuration (rate, shift system, shifts, crew,
overtime) into weekly, daily and monthly capacity plus the headcount needed
to staff it. Pure functions of the configuration and the injected
`PlantConstants`; nothing is cached between calls.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import logging

from ..models.station import (
    EDGE_STATIONS,
    PlantConfiguration,
    ShiftSystem,
    StationConfig,
    StationId,
)
from ..models.parameters import DEFAULT_CONSTANTS, EdgeConversionFactors, PlantConstants
from ..utils.numeric import ceil_with_tolerance, safe_divide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapacityFigure:
    """
    Capacity and staffing of one station.

    Attributes:
        station: Station ID
        unit: Native unit of the capacity figures (m2, ml or kg)
        weekly_hours: Scheduled line hours per week (shifts + overtime)
        weekly: Weekly capacity in native unit
        daily: Weekly capacity divided by the station's operating days per week
        monthly: Daily capacity times the station's equivalent days per month
        headcount: Operators required (crew x shifts x dotation factor)
        labor_hours_per_week: Operator hours per week (crew x weekly hours)
        crews_required: Rotating crews needed to cover the shifts (exact)
        requires_fourth_shift: Six-day system on three shifts (advisory only)
        weekly_area: Weekly capacity in m² (edge treatment only)
        daily_area: Daily capacity in m² (edge treatment only)
    """
    station: StationId
    unit: str
    weekly_hours: float
    weekly: float
    daily: float
    monthly: float
    headcount: float
    labor_hours_per_week: float
    crews_required: float
    requires_fourth_shift: bool = False
    weekly_area: Optional[float] = None
    daily_area: Optional[float] = None

    @property
    def crews_suggested(self) -> int:
        """Whole number of crews to roster."""
        return ceil_with_tolerance(self.crews_required)

    @property
    def area_yield_per_hour(self) -> Optional[float]:
        """m² processed per line hour (edge treatment only)."""
        if self.weekly_area is None:
            return None
        return safe_divide(self.weekly_area, self.weekly_hours)

    def __str__(self) -> str:
        return (
            f"{self.station.label}: {self.weekly:,.1f} {self.unit}/week "
            f"({self.daily:,.1f} {self.unit}/day, {self.headcount:.2f} operators)"
        )


class StationCapacityCalculator:
    """
    Calculates capacity figures from station configurations.

    Example:
        calculator = StationCapacityCalculator()
        figure = calculator.calculate(StationId.JUMBO, config)
        print(f"Weekly capacity: {figure.weekly:,.0f} m²")
    """

    def __init__(self, constants: PlantConstants = DEFAULT_CONSTANTS):
        """
        Initialize capacity calculator.

        Args:
            constants: Plant constants (hours per shift, dotation factor, weeks per month)
        """
        self.constants = constants

    def weekly_hours(self, config: StationConfig) -> float:
        """Line hours per week: shifts x hours per shift x operating days + overtime."""
        return (
            config.shifts_per_day * self.constants.hours_per_shift * config.shift_system.days_per_week
            + max(0.0, config.overtime_hours_per_week)
        )

    def headcount(self, config: StationConfig) -> float:
        """Operators required to staff the configuration."""
        return config.crew_per_shift * config.shifts_per_day * self.constants.dotation_factor(config.shift_system)

    def days_per_month(self, system: ShiftSystem) -> float:
        return self.constants.days_per_month(system)

    def calculate(
        self,
        station_id: StationId,
        config: StationConfig,
        ml_per_m2: Optional[float] = None,
    ) -> CapacityFigure:
        """
        Calculate the capacity figure of one station.

        Args:
            station_id: Station being evaluated
            config: Station configuration
            ml_per_m2: Linear meters per m² (edge treatment only); enables the
                area figures

        Returns:
            CapacityFigure for the station
        """
        system = config.shift_system
        days = system.days_per_week
        hours = self.weekly_hours(config)

        weekly = config.rate * hours
        daily = weekly / days
        monthly = daily * self.days_per_month(system)

        weekly_area = None
        daily_area = None
        if ml_per_m2 is not None:
            weekly_area = safe_divide(weekly, ml_per_m2)
            daily_area = weekly_area / days

        figure = CapacityFigure(
            station=station_id,
            unit=station_id.unit,
            weekly_hours=hours,
            weekly=weekly,
            daily=daily,
            monthly=monthly,
            headcount=self.headcount(config),
            labor_hours_per_week=config.crew_per_shift * hours,
            crews_required=self.constants.dotation_factor(system) * config.shifts_per_day,
            requires_fourth_shift=config.requires_fourth_shift,
            weekly_area=weekly_area,
            daily_area=daily_area,
        )
        logger.debug(f"Capacity {figure}")
        return figure

    def calculate_all(
        self,
        configuration: PlantConfiguration,
        edge_conversion: EdgeConversionFactors,
    ) -> Dict[StationId, CapacityFigure]:
        """
        Calculate capacity figures for every station.

        Args:
            configuration: All nine station configurations
            edge_conversion: ml per m² for the edge-treatment sub-lines

        Returns:
            Dictionary mapping station ID to its capacity figure
        """
        figures: Dict[StationId, CapacityFigure] = {}
        for station_id in StationId:
            ml_per_m2 = edge_conversion.for_station(station_id) if station_id in EDGE_STATIONS else None
            figures[station_id] = self.calculate(station_id, configuration[station_id], ml_per_m2)
        return figures
