"""
Demand derivation from daily production targets.

Converts the global daily targets, the DVH pane mix and the policy switches
into per-station demand figures. Daily figures are expressed per demand day;
weekly figures use the global demand calendar, which is independent of each
station's own shift system.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import logging

from ..models.parameters import DEFAULT_CONSTANTS, GlobalParameters, PlantConstants
from ..models.station import ShiftSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemandFigure:
    """
    Demand placed on one station group.

    Attributes:
        group: Reporting group name
        unit: Unit of the figures (m2 or kg)
        daily: Demand per demand day
        weekly: Demand per week (demand calendar)
        monthly: Demand per month
        gross_daily: Waste-inflated consumption per day (cutting only, reporting only)
        gross_weekly: Waste-inflated consumption per week (cutting only, reporting only)
    """
    group: str
    unit: str
    daily: float
    weekly: float
    monthly: float
    gross_daily: Optional[float] = None
    gross_weekly: Optional[float] = None


@dataclass(frozen=True)
class DvhPaneBreakdown:
    """DVH panes per day split by glass type."""
    target: float
    panes: float
    tempered: float
    laminated: float
    float_glass: float


@dataclass(frozen=True)
class PlantDemand:
    """
    Demand on every station group for one effective DVH target.

    Attributes:
        dvh: DVH target and pane breakdown the demand was derived from
        monolithic_cutting: Jumbo cutting demand (m²)
        laminated_cutting: Hegla cutting demand (m², both lines combined)
        edge_treatment: Edge-treatment demand (m², all sub-lines combined)
        tempering: Glaston demand (kg)
        dvh_assembly: DVH assembly demand (m²)
        lamination: Bovone demand (m², monthly figure includes distribution)
    """
    dvh: DvhPaneBreakdown
    monolithic_cutting: DemandFigure
    laminated_cutting: DemandFigure
    edge_treatment: DemandFigure
    tempering: DemandFigure
    dvh_assembly: DemandFigure
    lamination: DemandFigure

    def by_group(self) -> Dict[str, DemandFigure]:
        figures = (
            self.monolithic_cutting,
            self.laminated_cutting,
            self.edge_treatment,
            self.tempering,
            self.dvh_assembly,
            self.lamination,
        )
        return {f.group: f for f in figures}


class DemandCalculator:
    """
    Derives station demand from production targets.

    Example:
        calculator = DemandCalculator()
        demand = calculator.calculate(parameters, effective_dvh_target=628,
                                      lamination_system=ShiftSystem.SIX_TWO)
        print(f"Jumbo demand: {demand.monolithic_cutting.weekly:,.0f} m²/week")
    """

    def __init__(self, constants: PlantConstants = DEFAULT_CONSTANTS):
        """
        Initialize demand calculator.

        Args:
            constants: Plant constants (pane mix, waste factors, kg/m² ratios)
        """
        self.constants = constants

    def dvh_panes(self, effective_dvh_target: float) -> DvhPaneBreakdown:
        """Split the DVH target into panes per glass type."""
        k = self.constants
        panes = effective_dvh_target * k.panes_per_dvh
        return DvhPaneBreakdown(
            target=effective_dvh_target,
            panes=panes,
            tempered=panes * k.dvh_tempered_share,
            laminated=panes * k.dvh_laminated_share,
            float_glass=panes * k.dvh_float_share,
        )

    def calculate(
        self,
        parameters: GlobalParameters,
        effective_dvh_target: float,
        lamination_system: ShiftSystem,
    ) -> PlantDemand:
        """
        Calculate demand on every station group.

        Args:
            parameters: Targets, switches and demand calendar
            effective_dvh_target: DVH m²/day after policy resolution (use 0 for
                the non-DVH load)
            lamination_system: Shift system of the lamination line, which sets
                the days per month of laminated production

        Returns:
            PlantDemand with one DemandFigure per station group
        """
        k = self.constants
        t = parameters.targets
        dvh = self.dvh_panes(effective_dvh_target)

        week_days = parameters.demand_calendar.days_per_week
        month_days = k.days_per_month(parameters.demand_calendar)

        special_from_mono = parameters.special_laminated_from_monolithic
        special_plies = t.special_laminated * k.special_laminated_plies

        # Cutting (net); waste factors only inflate gross consumption
        monolithic = t.tempered + (special_plies if special_from_mono else 0.0) + dvh.tempered + dvh.float_glass
        laminated = (
            (0.0 if special_from_mono else t.special_laminated)
            + t.polished_laminated
            + t.cut_laminated
            + dvh.laminated
        )
        mono_waste = k.monolithic_waste_factor if parameters.apply_waste_factors else 1.0
        lam_waste = k.laminated_waste_factor if parameters.apply_waste_factors else 1.0

        edges = t.tempered + t.special_laminated + t.polished_laminated + dvh.panes

        tempering = (
            dvh.tempered * k.kg_per_m2_dvh_tempered
            + t.tempered * k.kg_per_m2_tempered
            + special_plies * k.kg_per_m2_special_laminated_ply
        )

        # Lamination runs on its own calendar; distribution is a monthly volume
        lamination_month_days = k.days_per_month(lamination_system)
        laminated_production = dvh.laminated + t.polished_laminated + t.cut_laminated + t.special_laminated
        lamination_monthly = laminated_production * lamination_month_days + parameters.distribution_volume_per_month

        demand = PlantDemand(
            dvh=dvh,
            monolithic_cutting=DemandFigure(
                group="monolithic_cutting",
                unit="m2",
                daily=monolithic,
                weekly=monolithic * week_days,
                monthly=monolithic * month_days,
                gross_daily=monolithic * mono_waste,
                gross_weekly=monolithic * mono_waste * week_days,
            ),
            laminated_cutting=DemandFigure(
                group="laminated_cutting",
                unit="m2",
                daily=laminated,
                weekly=laminated * week_days,
                monthly=laminated * month_days,
                gross_daily=laminated * lam_waste,
                gross_weekly=laminated * lam_waste * week_days,
            ),
            edge_treatment=DemandFigure(
                group="edge_treatment",
                unit="m2",
                daily=edges,
                weekly=edges * week_days,
                monthly=edges * month_days,
            ),
            tempering=DemandFigure(
                group="tempering",
                unit="kg",
                daily=tempering,
                weekly=tempering * week_days,
                monthly=tempering * month_days,
            ),
            dvh_assembly=DemandFigure(
                group="dvh_assembly",
                unit="m2",
                daily=effective_dvh_target,
                weekly=effective_dvh_target * week_days,
                monthly=effective_dvh_target * month_days,
            ),
            lamination=DemandFigure(
                group="lamination",
                unit="m2",
                daily=lamination_monthly / lamination_month_days,
                weekly=lamination_monthly / k.weeks_per_month,
                monthly=lamination_monthly,
            ),
        )
        logger.debug(
            f"Demand for DVH target {effective_dvh_target:,.1f} m²/day: "
            f"mono {monolithic:,.1f}, lam {laminated:,.1f}, edges {edges:,.1f} m²/day, "
            f"tempering {tempering:,.1f} kg/day, lamination {lamination_monthly:,.1f} m²/month"
        )
        return demand

    def non_dvh_demand(self, parameters: GlobalParameters, lamination_system: ShiftSystem) -> PlantDemand:
        """Demand from every product except DVH (the load DVH must fit around)."""
        return self.calculate(parameters, effective_dvh_target=0.0, lamination_system=lamination_system)
