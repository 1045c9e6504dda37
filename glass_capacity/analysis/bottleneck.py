"""
Chain bottleneck for insulated glass unit (DVH) throughput.

Every m² of DVH consumes capacity at six stations. For each constraining
station group, the spare daily capacity left after non-DVH demand is
converted into an equivalent DVH limit; the chain can sustain no more than
the minimum of those limits.

Consumption ratios (spare capacity per m² of DVH, default mix 35% tempered,
60% laminated, 5% float panes, two panes per unit):
- Monolithic cutting: 0.8 m² (tempered + float panes)
- Laminated cutting: 1.2 m² (laminated panes)
- Tempering: 10.5 kg (tempered panes x 15 kg/m²)
- Edge treatment: 2 m² (every pane)
- Lamination: 1.2 m² (laminated panes)
- DVH assembly: 1 m² (its own daily capacity is a direct bound)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
import math

import pandas as pd

from ..models.parameters import DEFAULT_CONSTANTS, DvhTargetPolicy, PlantConstants
from ..models.station import EDGE_STATIONS, LAMINATED_CUTTING_STATIONS, StationId
from ..production.capacity import CapacityFigure
from ..production.demand import PlantDemand
from ..utils.numeric import safe_divide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BottleneckConstraint:
    """
    DVH limit imposed by one station group.

    Attributes:
        group: Station group name
        unit: Unit of capacity and load figures
        daily_capacity: Daily capacity of the group
        other_load: Daily non-DVH demand on the group
        spare_capacity: max(0, daily_capacity - other_load)
        consumption_ratio: Spare capacity consumed per m² of DVH
        dvh_limit: DVH m²/day the spare capacity supports
    """
    group: str
    unit: str
    daily_capacity: float
    other_load: float
    spare_capacity: float
    consumption_ratio: float
    dvh_limit: float


@dataclass
class BottleneckBreakdown:
    """
    Chain-wide DVH throughput limit with per-group detail.

    Attributes:
        constraints: One entry per constraining station group
        chain_limit: Minimum DVH limit across groups (m²/day, never negative)
    """
    constraints: List[BottleneckConstraint] = field(default_factory=list)
    chain_limit: float = 0.0

    @property
    def binding_group(self) -> Optional[str]:
        """Group whose limit sets the chain limit."""
        if not self.constraints:
            return None
        return min(self.constraints, key=lambda c: c.dvh_limit).group

    def limit_for(self, group: str) -> float:
        for constraint in self.constraints:
            if constraint.group == group:
                return constraint.dvh_limit
        raise KeyError(f"No bottleneck constraint for group '{group}'")

    def to_dataframe(self) -> pd.DataFrame:
        """Convert constraints to a DataFrame for display."""
        return pd.DataFrame([
            {
                'Group': c.group,
                'Unit': c.unit,
                'Daily Capacity': c.daily_capacity,
                'Other Load': c.other_load,
                'Spare': c.spare_capacity,
                'Ratio': c.consumption_ratio,
                'DVH Limit (m2/day)': c.dvh_limit,
            }
            for c in self.constraints
        ])

    def __str__(self) -> str:
        return f"DVH chain limit: {self.chain_limit:,.1f} m²/day (binding: {self.binding_group})"


def monolithic_cutting_daily(capacities: Dict[StationId, CapacityFigure]) -> float:
    return capacities[StationId.JUMBO].daily


def laminated_cutting_daily(capacities: Dict[StationId, CapacityFigure]) -> float:
    """Summed per line so lines on different shift systems are handled correctly."""
    return sum(capacities[s].daily for s in LAMINATED_CUTTING_STATIONS)


def edge_treatment_daily_area(capacities: Dict[StationId, CapacityFigure]) -> float:
    return sum(capacities[s].daily_area or 0.0 for s in EDGE_STATIONS)


class BottleneckSolver:
    """
    Computes the maximum DVH throughput the chain can sustain.

    Example:
        solver = BottleneckSolver()
        breakdown = solver.max_dvh_throughput(capacities, non_dvh_demand)
        target = solver.effective_dvh_target(DvhTargetPolicy.COUPLED, 800, breakdown.chain_limit)
    """

    def __init__(self, constants: PlantConstants = DEFAULT_CONSTANTS):
        """
        Initialize bottleneck solver.

        Args:
            constants: Plant constants (DVH consumption ratios)
        """
        self.constants = constants

    def _constraint(self, group: str, unit: str, capacity: float, load: float, ratio: float) -> BottleneckConstraint:
        spare = max(0.0, capacity - load)
        return BottleneckConstraint(
            group=group,
            unit=unit,
            daily_capacity=capacity,
            other_load=load,
            spare_capacity=spare,
            consumption_ratio=ratio,
            dvh_limit=safe_divide(spare, ratio),
        )

    def max_dvh_throughput(
        self,
        capacities: Dict[StationId, CapacityFigure],
        non_dvh_demand: PlantDemand,
    ) -> BottleneckBreakdown:
        """
        Compute the chain-wide DVH limit.

        Args:
            capacities: Capacity figures for all stations
            non_dvh_demand: Demand with a DVH target of zero

        Returns:
            BottleneckBreakdown with per-group limits and the chain minimum
        """
        k = self.constants
        constraints = [
            self._constraint(
                "monolithic_cutting", "m2",
                monolithic_cutting_daily(capacities),
                non_dvh_demand.monolithic_cutting.daily,
                k.monolithic_cutting_dvh_ratio,
            ),
            self._constraint(
                "laminated_cutting", "m2",
                laminated_cutting_daily(capacities),
                non_dvh_demand.laminated_cutting.daily,
                k.laminated_cutting_dvh_ratio,
            ),
            self._constraint(
                "tempering", "kg",
                capacities[StationId.GLASTON].daily,
                non_dvh_demand.tempering.daily,
                k.tempering_dvh_ratio,
            ),
            self._constraint(
                "edge_treatment", "m2",
                edge_treatment_daily_area(capacities),
                non_dvh_demand.edge_treatment.daily,
                k.edge_treatment_dvh_ratio,
            ),
            self._constraint(
                "lamination", "m2",
                capacities[StationId.BOVONE].daily,
                non_dvh_demand.lamination.daily,
                k.lamination_dvh_ratio,
            ),
            self._constraint(
                "dvh_assembly", "m2",
                capacities[StationId.DVH_ASSEMBLY].daily,
                0.0,
                1.0,
            ),
        ]

        breakdown = BottleneckBreakdown(
            constraints=constraints,
            chain_limit=max(0.0, min(c.dvh_limit for c in constraints)),
        )
        logger.info(str(breakdown))
        return breakdown

    @staticmethod
    def effective_dvh_target(policy: DvhTargetPolicy, requested_target: float, chain_limit: float) -> float:
        """
        Resolve the DVH target used for demand.

        Args:
            policy: FIXED, COUPLED or AUTOMATIC
            requested_target: Requested DVH m²/day
            chain_limit: Chain-wide DVH limit (m²/day)

        Returns:
            Effective DVH m²/day target
        """
        if policy == DvhTargetPolicy.AUTOMATIC:
            return float(math.floor(chain_limit))
        if policy == DvhTargetPolicy.COUPLED:
            return float(min(requested_target, math.floor(chain_limit)))
        return float(requested_target)
