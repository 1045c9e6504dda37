"""Full plant recomputation.

`recompute` is the single entry point for the presentation layer: it maps an
immutable snapshot of station configurations and global parameters to a
complete CapacityReport. Nothing is cached; every figure is re-derived on
each call.

Recompute Steps:
    1. Capacity figures for all nine stations
    2. Non-DVH demand (DVH target of zero)
    3. Chain bottleneck and effective DVH target under the active policy
    4. Demand for the effective DVH target
    5. Gap analysis per station group and edge sub-line
    6. Staffing cost and incremental hires
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import logging

import pandas as pd

from ..analysis.bottleneck import BottleneckBreakdown, BottleneckSolver
from ..analysis.gap_analyzer import GapAnalysis, GapAnalyzer
from ..costs.cost_breakdown import StaffingReport
from ..costs.staffing_cost_calculator import StaffingCostCalculator
from ..models.baseline import default_global_parameters, default_plant_configuration
from ..models.parameters import DEFAULT_CONSTANTS, DvhTargetPolicy, GlobalParameters, PlantConstants
from ..models.station import PlantConfiguration, StationId
from ..production.capacity import CapacityFigure, StationCapacityCalculator
from ..production.demand import DemandCalculator, PlantDemand

logger = logging.getLogger(__name__)


@dataclass
class CapacityReport:
    """Result of one recomputation.

    Attributes:
        configuration: Station configurations the report was computed from
        parameters: Global parameters the report was computed from
        capacities: Capacity figure per station
        bottleneck: Chain DVH limit with per-group breakdown
        dvh_policy: Policy used to resolve the DVH target
        requested_dvh_target: DVH m²/day requested in the parameters
        effective_dvh_target: DVH m²/day the demand was derived from
        demand: Demand per station group
        gaps: Capacity versus demand per station group and edge sub-line
        staffing: Headcount, cost and incremental hires
        advisories: Human-readable notes that do not change any figure
    """
    configuration: PlantConfiguration
    parameters: GlobalParameters
    capacities: Dict[StationId, CapacityFigure]
    bottleneck: BottleneckBreakdown
    dvh_policy: DvhTargetPolicy
    requested_dvh_target: float
    effective_dvh_target: float
    demand: PlantDemand
    gaps: GapAnalysis
    staffing: StaffingReport
    advisories: List[str] = field(default_factory=list)

    @property
    def needs_adjustment(self) -> bool:
        return self.gaps.any_needs_adjustment

    @property
    def total_headcount(self) -> float:
        return self.staffing.total_headcount

    @property
    def total_cost(self) -> float:
        return self.staffing.total_cost

    def capacity_dataframe(self) -> pd.DataFrame:
        """Per-station capacity and staffing figures."""
        return pd.DataFrame([
            {
                'Station': f.station.label,
                'Unit': f.unit,
                'Weekly Hours': f.weekly_hours,
                'Weekly': f.weekly,
                'Daily': f.daily,
                'Monthly': f.monthly,
                'Weekly Area (m2)': f.weekly_area,
                'Headcount': f.headcount,
                'Labor Hours/Week': f.labor_hours_per_week,
                'Crews': f.crews_suggested,
            }
            for f in self.capacities.values()
        ])

    def gaps_dataframe(self) -> pd.DataFrame:
        return self.gaps.to_dataframe()

    def summary(self) -> str:
        lines = [
            f"DVH target: {self.effective_dvh_target:,.0f} m²/day "
            f"(requested {self.requested_dvh_target:,.0f}, policy {self.dvh_policy.value})",
            str(self.bottleneck),
        ]
        for group, record in self.gaps.groups.items():
            flag = " [!]" if self.gaps.needs_adjustment(group) else ""
            lines.append(f"  {record}{flag}")
        lines.append(str(self.staffing))
        lines.extend(f"  Note: {a}" for a in self.advisories)
        return "\n".join(lines)


def _advisories(capacities: Dict[StationId, CapacityFigure]) -> List[str]:
    notes = []
    for figure in capacities.values():
        if figure.requires_fourth_shift:
            notes.append(
                f"{figure.station.label}: 6x2 with 3 shifts requires a 4th rotating shift "
                f"({figure.crews_suggested} crews)"
            )
    return notes


def recompute(
    configuration: PlantConfiguration,
    parameters: GlobalParameters,
    constants: PlantConstants = DEFAULT_CONSTANTS,
) -> CapacityReport:
    """
    Recompute every derived figure of the plant.

    Args:
        configuration: All nine station configurations
        parameters: Targets, switches, economics and edge conversion
        constants: Plant constants (defaults to the documented plant)

    Returns:
        CapacityReport with capacities, bottleneck, demand, gaps and staffing
    """
    capacities = StationCapacityCalculator(constants).calculate_all(configuration, parameters.edge_conversion)

    demand_calculator = DemandCalculator(constants)
    lamination_system = configuration[StationId.BOVONE].shift_system
    non_dvh = demand_calculator.non_dvh_demand(parameters, lamination_system)

    solver = BottleneckSolver(constants)
    bottleneck = solver.max_dvh_throughput(capacities, non_dvh)
    policy = parameters.dvh_target_policy
    target = solver.effective_dvh_target(policy, parameters.targets.dvh, bottleneck.chain_limit)
    logger.info(
        f"Effective DVH target {target:,.0f} m²/day "
        f"(requested {parameters.targets.dvh:,.0f}, policy {policy.value})"
    )

    demand = demand_calculator.calculate(parameters, target, lamination_system)
    gaps = GapAnalyzer(constants.gap_tolerance).analyze(capacities, demand, parameters.edge_conversion)
    staffing = StaffingCostCalculator(constants).calculate(configuration, parameters)

    return CapacityReport(
        configuration=configuration,
        parameters=parameters,
        capacities=capacities,
        bottleneck=bottleneck,
        dvh_policy=policy,
        requested_dvh_target=parameters.targets.dvh,
        effective_dvh_target=target,
        demand=demand,
        gaps=gaps,
        staffing=staffing,
        advisories=_advisories(capacities),
    )


def reset_to_baseline() -> Tuple[PlantConfiguration, GlobalParameters]:
    """Documented default station configurations and global parameters."""
    return default_plant_configuration(), default_global_parameters()
