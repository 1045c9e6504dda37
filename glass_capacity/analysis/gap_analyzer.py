"""
Capacity versus demand gap analysis.

Compares station capacity with demand per station group in its primary
reporting unit and period, and for edge treatment also per sub-line in
both m² and linear meters.

Edge-treatment demand is only known in aggregate (m²). It is apportioned to
the sub-lines in proportion to each sub-line's share of total edge area
capacity, then converted to linear meters with the sub-line's ml per m².
This is a modeling approximation, not a product-routing rule.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

import pandas as pd

from ..constants import GAP_TOLERANCE
from ..models.parameters import EdgeConversionFactors
from ..models.station import EDGE_STATIONS, LAMINATED_CUTTING_STATIONS, StationId
from ..production.capacity import CapacityFigure
from ..production.demand import PlantDemand
from ..utils.numeric import safe_divide

logger = logging.getLogger(__name__)

#: Station groups in reporting order
MONOLITHIC_CUTTING = "monolithic_cutting"
LAMINATED_CUTTING = "laminated_cutting"
EDGE_TREATMENT = "edge_treatment"
TEMPERING = "tempering"
DVH_ASSEMBLY = "dvh_assembly"
LAMINATION = "lamination"

GROUPS = (MONOLITHIC_CUTTING, LAMINATED_CUTTING, EDGE_TREATMENT, TEMPERING, DVH_ASSEMBLY, LAMINATION)


@dataclass(frozen=True)
class GapRecord:
    """
    Capacity versus demand for one station (group) in one unit and period.

    Attributes:
        name: Station group or sub-line name
        unit: m2, ml or kg
        period: 'week' or 'month'
        capacity: Capacity over the period
        demand: Demand over the period
        gap: capacity - demand (negative = deficit)
        shortfall: max(0, demand - capacity)
    """
    name: str
    unit: str
    period: str
    capacity: float
    demand: float
    gap: float
    shortfall: float

    @property
    def demand_within_capacity(self) -> float:
        """Part of demand the capacity covers."""
        return min(self.demand, self.capacity)

    @property
    def excess(self) -> float:
        """Part of demand beyond capacity (equals shortfall)."""
        return max(self.demand - self.capacity, 0.0)

    def needs_adjustment(self, tolerance: float = GAP_TOLERANCE) -> bool:
        return self.gap < -tolerance

    def __str__(self) -> str:
        sign = "+" if self.gap >= 0 else "-"
        return f"{self.name}: {sign}{abs(self.gap):,.1f} {self.unit}/{self.period}"


def gap(name: str, capacity: float, demand: float, unit: str = "m2", period: str = "week") -> GapRecord:
    """Build a gap record: gap = capacity - demand, shortfall = max(0, demand - capacity)."""
    return GapRecord(
        name=name,
        unit=unit,
        period=period,
        capacity=capacity,
        demand=demand,
        gap=capacity - demand,
        shortfall=max(0.0, demand - capacity),
    )


@dataclass
class GapAnalysis:
    """
    Gap records for the whole plant.

    Attributes:
        groups: Primary record per station group
        edge_lines_area: Per edge sub-line records in m²/week
        edge_lines_linear: Per edge sub-line records in ml/week
        edge_total_linear: Aggregate edge record in ml/week
        tolerance: Gap tolerance for needs-adjustment flags
    """
    groups: Dict[str, GapRecord] = field(default_factory=dict)
    edge_lines_area: Dict[StationId, GapRecord] = field(default_factory=dict)
    edge_lines_linear: Dict[StationId, GapRecord] = field(default_factory=dict)
    edge_total_linear: Optional[GapRecord] = None
    tolerance: float = GAP_TOLERANCE

    def __getitem__(self, group: str) -> GapRecord:
        return self.groups[group]

    def needs_adjustment(self, group: str) -> bool:
        """A group needs adjustment iff its primary gap is negative."""
        return self.groups[group].needs_adjustment(self.tolerance)

    @property
    def groups_needing_adjustment(self) -> List[str]:
        return [g for g in GROUPS if g in self.groups and self.needs_adjustment(g)]

    @property
    def any_needs_adjustment(self) -> bool:
        return bool(self.groups_needing_adjustment)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert all records to a DataFrame for display."""
        records = list(self.groups.values())
        records += list(self.edge_lines_linear.values())
        records += list(self.edge_lines_area.values())
        if self.edge_total_linear is not None:
            records.append(self.edge_total_linear)
        return pd.DataFrame([
            {
                'Name': r.name,
                'Unit': r.unit,
                'Period': r.period,
                'Capacity': r.capacity,
                'Demand': r.demand,
                'Demand OK': r.demand_within_capacity,
                'Excess': r.excess,
                'Gap': r.gap,
                'Shortfall': r.shortfall,
            }
            for r in records
        ])


class GapAnalyzer:
    """
    Builds gap records from capacity figures and demand.

    Example:
        analyzer = GapAnalyzer()
        analysis = analyzer.analyze(capacities, demand, parameters.edge_conversion)
        for group in analysis.groups_needing_adjustment:
            print(analysis[group])
    """

    def __init__(self, tolerance: float = GAP_TOLERANCE):
        self.tolerance = tolerance

    def analyze(
        self,
        capacities: Dict[StationId, CapacityFigure],
        demand: PlantDemand,
        edge_conversion: EdgeConversionFactors,
    ) -> GapAnalysis:
        """
        Compare capacity with demand for every station group.

        Args:
            capacities: Capacity figures for all stations
            demand: Demand derived from the effective DVH target
            edge_conversion: ml per m² for the edge-treatment sub-lines

        Returns:
            GapAnalysis with primary and edge sub-line records
        """
        analysis = GapAnalysis(tolerance=self.tolerance)

        edge_area_capacity = sum(capacities[s].weekly_area or 0.0 for s in EDGE_STATIONS)

        analysis.groups = {
            MONOLITHIC_CUTTING: gap(
                MONOLITHIC_CUTTING,
                capacities[StationId.JUMBO].weekly,
                demand.monolithic_cutting.weekly,
            ),
            LAMINATED_CUTTING: gap(
                LAMINATED_CUTTING,
                sum(capacities[s].weekly for s in LAMINATED_CUTTING_STATIONS),
                demand.laminated_cutting.weekly,
            ),
            EDGE_TREATMENT: gap(EDGE_TREATMENT, edge_area_capacity, demand.edge_treatment.weekly),
            TEMPERING: gap(
                TEMPERING,
                capacities[StationId.GLASTON].weekly,
                demand.tempering.weekly,
                unit="kg",
            ),
            DVH_ASSEMBLY: gap(
                DVH_ASSEMBLY,
                capacities[StationId.DVH_ASSEMBLY].weekly,
                demand.dvh_assembly.weekly,
            ),
            LAMINATION: gap(
                LAMINATION,
                capacities[StationId.BOVONE].monthly,
                demand.lamination.monthly,
                period="month",
            ),
        }

        # Edge treatment per sub-line: apportion area demand by capacity share
        total_capacity_ml = 0.0
        total_demand_ml = 0.0
        for station_id in EDGE_STATIONS:
            figure = capacities[station_id]
            line_area = figure.weekly_area or 0.0
            share = safe_divide(line_area, edge_area_capacity)
            area_demand = demand.edge_treatment.weekly * share
            linear_demand = area_demand * edge_conversion.for_station(station_id)

            analysis.edge_lines_area[station_id] = gap(station_id.value, line_area, area_demand)
            analysis.edge_lines_linear[station_id] = gap(station_id.value, figure.weekly, linear_demand, unit="ml")
            total_capacity_ml += figure.weekly
            total_demand_ml += linear_demand

        analysis.edge_total_linear = gap(EDGE_TREATMENT, total_capacity_ml, total_demand_ml, unit="ml")

        for group in analysis.groups_needing_adjustment:
            logger.debug(f"Shortfall {analysis[group]}")
        return analysis
