"""Global plant parameters and injectable model constants."""

from enum import Enum
from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .station import ShiftSystem, StationConfig, StationId, read_only_mapping
from .. import constants as c


class DvhTargetPolicy(str, Enum):
    """How the effective DVH target relates to the chain capacity limit."""
    FIXED = "fixed"          # requested target, uncapped
    COUPLED = "coupled"      # min(requested, floor(chain limit))
    AUTOMATIC = "automatic"  # floor(chain limit), request ignored


class ProductionTargets(BaseModel):
    """
    Daily production targets by product category (m²/day).

    Attributes:
        tempered: Standalone tempered glass
        special_laminated: Special laminated glass
        polished_laminated: Polished laminated glass
        cut_laminated: Cut-to-size laminated glass
        dvh: Insulated glass units (requested target)
    """
    model_config = ConfigDict(frozen=True)

    tempered: float = Field(default=128.0, ge=0)
    special_laminated: float = Field(default=60.0, ge=0)
    polished_laminated: float = Field(default=44.0, ge=0)
    cut_laminated: float = Field(default=44.0, ge=0)
    dvh: float = Field(default=800.0, ge=0)


class EdgeConversionFactors(BaseModel):
    """Linear meters of edge per m² of glass, per edge-treatment sub-line."""
    model_config = ConfigDict(frozen=True)

    bilateral: float = Field(default=c.ML_PER_M2_BILATERAL, gt=0)
    forel_cnc: float = Field(default=c.ML_PER_M2_FOREL_CNC, gt=0)
    forel_dvh: float = Field(default=c.ML_PER_M2_FOREL_DVH, gt=0)

    def for_station(self, station_id: StationId) -> float:
        return getattr(self, station_id.value)


class GlobalParameters(BaseModel):
    """
    Economic parameters, targets and policy switches shared by all stations.

    Attributes:
        monthly_salary: Monthly salary per operator
        overtime_hourly_rate: Cost of one overtime hour per operator
        targets: Daily production targets
        distribution_volume_per_month: Laminated m² shipped to distribution per month
        apply_waste_factors: Inflate cutting consumption by waste factors (reporting only)
        special_laminated_from_monolithic: Special laminated is cut from monolithic stock
        dvh_coupled_to_capacity: Cap the DVH target at the chain limit
        dvh_follows_capacity: Set the DVH target to the chain limit (overrides coupling)
        demand_calendar: Calendar used to express demand per week/month
        edge_conversion: ml per m² for each edge-treatment sub-line
    """
    model_config = ConfigDict(frozen=True)

    monthly_salary: float = Field(default=2874994.79, ge=0, description="Salary per operator per month")
    overtime_hourly_rate: float = Field(default=10645.0, ge=0, description="Overtime cost per hour")
    targets: ProductionTargets = Field(default_factory=ProductionTargets)
    distribution_volume_per_month: float = Field(default=100_000.0, ge=0)
    apply_waste_factors: bool = True
    special_laminated_from_monolithic: bool = True
    dvh_coupled_to_capacity: bool = True
    dvh_follows_capacity: bool = False
    demand_calendar: ShiftSystem = ShiftSystem.FIVE_TWO
    edge_conversion: EdgeConversionFactors = Field(default_factory=EdgeConversionFactors)

    @property
    def dvh_target_policy(self) -> DvhTargetPolicy:
        if self.dvh_follows_capacity:
            return DvhTargetPolicy.AUTOMATIC
        if self.dvh_coupled_to_capacity:
            return DvhTargetPolicy.COUPLED
        return DvhTargetPolicy.FIXED


def _default_baseline_crews() -> Dict[StationId, StationConfig]:
    """Historical staffing snapshot (rates are irrelevant for headcount)."""
    five, six = ShiftSystem.FIVE_TWO, ShiftSystem.SIX_TWO
    return {
        StationId.JUMBO: StationConfig(rate=0, shift_system=five, shifts_per_day=3, crew_per_shift=2),
        StationId.HEGLA_1: StationConfig(rate=0, shift_system=five, shifts_per_day=3, crew_per_shift=2),
        StationId.HEGLA_2: StationConfig(rate=0, shift_system=five, shifts_per_day=2, crew_per_shift=2),
        StationId.BILATERAL: StationConfig(rate=0, shift_system=five, shifts_per_day=3, crew_per_shift=2),
        StationId.FOREL_CNC: StationConfig(rate=0, shift_system=five, shifts_per_day=1, crew_per_shift=1),
        StationId.FOREL_DVH: StationConfig(rate=0, shift_system=five, shifts_per_day=1, crew_per_shift=3),
        StationId.GLASTON: StationConfig(rate=0, shift_system=five, shifts_per_day=3, crew_per_shift=8 / 3),
        StationId.DVH_ASSEMBLY: StationConfig(rate=0, shift_system=five, shifts_per_day=2, crew_per_shift=5.5),
        StationId.BOVONE: StationConfig(rate=0, shift_system=six, shifts_per_day=3, crew_per_shift=3.5),
    }


class PlantConstants(BaseModel):
    """
    Injectable model constants.

    Defaults reproduce the documented plant; tests and what-if analyses can
    pass alternate mixes, ratios or baseline crews.
    """
    model_config = ConfigDict(frozen=True)

    # Calendar
    hours_per_shift: float = Field(default=c.HOURS_PER_SHIFT, gt=0)
    six_two_dotation_factor: float = Field(default=c.SIX_TWO_DOTATION_FACTOR, gt=0)
    weeks_per_month: float = Field(default=c.WEEKS_PER_MONTH, gt=0)

    # DVH pane mix
    panes_per_dvh: float = Field(default=c.PANES_PER_DVH_UNIT, gt=0)
    dvh_tempered_share: float = Field(default=c.DVH_TEMPERED_SHARE, ge=0, le=1)
    dvh_laminated_share: float = Field(default=c.DVH_LAMINATED_SHARE, ge=0, le=1)
    dvh_float_share: float = Field(default=c.DVH_FLOAT_SHARE, ge=0, le=1)
    special_laminated_plies: float = Field(default=c.SPECIAL_LAMINATED_PLIES, gt=0)

    # Waste factors
    monolithic_waste_factor: float = Field(default=c.MONOLITHIC_WASTE_FACTOR, ge=1)
    laminated_waste_factor: float = Field(default=c.LAMINATED_WASTE_FACTOR, ge=1)

    # Tempering mass
    kg_per_m2_dvh_tempered: float = Field(default=c.KG_PER_M2_DVH_TEMPERED, ge=0)
    kg_per_m2_tempered: float = Field(default=c.KG_PER_M2_TEMPERED, ge=0)
    kg_per_m2_special_laminated_ply: float = Field(default=c.KG_PER_M2_SPECIAL_LAMINATED_PLY, ge=0)

    # Bottleneck consumption ratios
    monolithic_cutting_dvh_ratio: float = Field(default=c.MONOLITHIC_CUTTING_DVH_RATIO, gt=0)
    laminated_cutting_dvh_ratio: float = Field(default=c.LAMINATED_CUTTING_DVH_RATIO, gt=0)
    edge_treatment_dvh_ratio: float = Field(default=c.EDGE_TREATMENT_DVH_RATIO, gt=0)
    lamination_dvh_ratio: float = Field(default=c.LAMINATION_DVH_RATIO, gt=0)

    # Staffing
    baseline_crews: Mapping[StationId, StationConfig] = Field(default_factory=_default_baseline_crews, validate_default=True)

    # Auto-adjust
    max_auto_adjust_iterations: int = Field(default=c.MAX_AUTO_ADJUST_ITERATIONS, ge=0)
    gap_tolerance: float = Field(default=c.GAP_TOLERANCE, ge=0)

    @field_validator('baseline_crews')
    @classmethod
    def freeze_baseline_crews(cls, v):
        return read_only_mapping(v)

    @field_serializer('baseline_crews')
    def dump_baseline_crews(self, v):
        return {k: config.model_dump() for k, config in v.items()}

    @property
    def tempering_dvh_ratio(self) -> float:
        """kg of tempering load per m² of DVH (2 panes x 35% tempered x 15 kg/m²)."""
        return self.panes_per_dvh * self.dvh_tempered_share * self.kg_per_m2_dvh_tempered

    def days_per_month(self, system: ShiftSystem) -> float:
        """Equivalent operating days per month (days per week x weeks per month)."""
        return system.days_per_week * self.weeks_per_month

    def dotation_factor(self, system: ShiftSystem) -> float:
        if system == ShiftSystem.SIX_TWO:
            return self.six_two_dotation_factor
        return 1.0


#: Documented default constants
DEFAULT_CONSTANTS = PlantConstants()
