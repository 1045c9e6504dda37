"""Station configuration data models for the nine production lines."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping
import math

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..constants import (
    DAYS_PER_WEEK_FIVE_TWO,
    DAYS_PER_WEEK_SIX_TWO,
    MAX_SHIFTS_PER_DAY,
    MIN_SHIFTS_PER_DAY,
)


class ShiftSystem(str, Enum):
    """Calendar pattern a line (or the demand calendar) runs on."""
    FIVE_TWO = "5x2"
    SIX_TWO = "6x2"

    @property
    def days_per_week(self) -> int:
        """Operating days per week (5 or 7)."""
        if self == ShiftSystem.SIX_TWO:
            return DAYS_PER_WEEK_SIX_TWO
        return DAYS_PER_WEEK_FIVE_TWO


class StationKind(str, Enum):
    """Process family a station belongs to."""
    CUTTING = "cutting"
    EDGE_TREATMENT = "edge_treatment"
    TEMPERING = "tempering"
    ASSEMBLY = "assembly"
    LAMINATION = "lamination"


class StationId(str, Enum):
    """The nine production stations of the plant."""
    JUMBO = "jumbo"
    HEGLA_1 = "hegla_1"
    HEGLA_2 = "hegla_2"
    BILATERAL = "bilateral"
    FOREL_CNC = "forel_cnc"
    FOREL_DVH = "forel_dvh"
    GLASTON = "glaston"
    DVH_ASSEMBLY = "dvh_assembly"
    BOVONE = "bovone"

    @property
    def kind(self) -> StationKind:
        return _STATION_KINDS[self]

    @property
    def unit(self) -> str:
        """Native throughput unit (m2, ml or kg)."""
        return _KIND_UNITS[self.kind]

    @property
    def label(self) -> str:
        return _STATION_LABELS[self]


_STATION_KINDS: Dict[StationId, StationKind] = {
    StationId.JUMBO: StationKind.CUTTING,
    StationId.HEGLA_1: StationKind.CUTTING,
    StationId.HEGLA_2: StationKind.CUTTING,
    StationId.BILATERAL: StationKind.EDGE_TREATMENT,
    StationId.FOREL_CNC: StationKind.EDGE_TREATMENT,
    StationId.FOREL_DVH: StationKind.EDGE_TREATMENT,
    StationId.GLASTON: StationKind.TEMPERING,
    StationId.DVH_ASSEMBLY: StationKind.ASSEMBLY,
    StationId.BOVONE: StationKind.LAMINATION,
}

_KIND_UNITS: Dict[StationKind, str] = {
    StationKind.CUTTING: "m2",
    StationKind.EDGE_TREATMENT: "ml",
    StationKind.TEMPERING: "kg",
    StationKind.ASSEMBLY: "m2",
    StationKind.LAMINATION: "m2",
}

_STATION_LABELS: Dict[StationId, str] = {
    StationId.JUMBO: "Jumbo",
    StationId.HEGLA_1: "Hegla 1",
    StationId.HEGLA_2: "Hegla 2",
    StationId.BILATERAL: "Bilateral",
    StationId.FOREL_CNC: "Forel CNC",
    StationId.FOREL_DVH: "Forel DVH",
    StationId.GLASTON: "Glaston",
    StationId.DVH_ASSEMBLY: "DVH assembly",
    StationId.BOVONE: "Bovone",
}

#: Edge-treatment sub-lines in reporting order
EDGE_STATIONS = (StationId.BILATERAL, StationId.FOREL_CNC, StationId.FOREL_DVH)

#: Laminated cutting lines in reporting order
LAMINATED_CUTTING_STATIONS = (StationId.HEGLA_1, StationId.HEGLA_2)


def read_only_mapping(values: Mapping) -> Mapping:
    """Copy into a mapping that rejects item assignment."""
    return MappingProxyType(dict(values))


class StationConfig(BaseModel):
    """
    Staffing and throughput configuration of one station.

    Values are clamped on construction: shifts to [1, 3], everything else
    floored at zero. Instances are immutable; edits go through
    `PlantConfiguration.update_station`, which re-validates.

    Attributes:
        rate: Throughput per hour in the station's native unit
        shift_system: Five-day or six-day rotating calendar
        shifts_per_day: Shifts run per operating day (1-3)
        crew_per_shift: Operators per shift (fractional allowed)
        overtime_hours_per_week: Extra line hours per week
    """
    model_config = ConfigDict(frozen=True)

    rate: float = Field(..., description="Throughput per hour (native unit)")
    shift_system: ShiftSystem = Field(default=ShiftSystem.FIVE_TWO, description="Shift calendar")
    shifts_per_day: int = Field(default=1, description="Shifts per operating day (1-3)")
    crew_per_shift: float = Field(default=0.0, description="Operators per shift")
    overtime_hours_per_week: float = Field(default=0.0, description="Overtime line hours per week")

    @field_validator('shifts_per_day', mode='before')
    @classmethod
    def clamp_shifts(cls, v):
        # Half rounds up: 1.5 -> 2, 2.5 -> 3
        return int(max(MIN_SHIFTS_PER_DAY, min(MAX_SHIFTS_PER_DAY, math.floor(float(v) + 0.5))))

    @field_validator('rate', 'crew_per_shift', 'overtime_hours_per_week', mode='before')
    @classmethod
    def floor_at_zero(cls, v):
        return max(0.0, float(v))

    @property
    def requires_fourth_shift(self) -> bool:
        """Six-day rotation on three shifts structurally needs a fourth rotating crew."""
        return self.shift_system == ShiftSystem.SIX_TWO and self.shifts_per_day == MAX_SHIFTS_PER_DAY

    def __str__(self) -> str:
        return (
            f"{self.rate:g}/h, {self.shift_system.value}, {self.shifts_per_day} shifts x "
            f"{self.crew_per_shift:g} crew, +{self.overtime_hours_per_week:g}h OT"
        )


class PlantConfiguration(BaseModel):
    """
    Configuration of all nine stations.

    Attributes:
        stations: Station configuration keyed by station ID (all nine required)
    """
    model_config = ConfigDict(frozen=True)

    stations: Mapping[StationId, StationConfig] = Field(..., description="Per-station configuration")

    @field_validator('stations')
    @classmethod
    def freeze_stations(cls, v):
        return read_only_mapping(v)

    @field_serializer('stations')
    def dump_stations(self, v):
        return {k: config.model_dump() for k, config in v.items()}

    @model_validator(mode='after')
    def check_all_stations_present(self):
        missing = [s.value for s in StationId if s not in self.stations]
        if missing:
            raise ValueError(f"Plant configuration missing stations: {', '.join(missing)}")
        return self

    def __getitem__(self, station_id: StationId) -> StationConfig:
        return self.stations[station_id]

    def with_station(self, station_id: StationId, config: StationConfig) -> "PlantConfiguration":
        """Return a new configuration with one station replaced."""
        stations = dict(self.stations)
        stations[station_id] = config
        return PlantConfiguration(stations=stations)

    def update_station(self, station_id: StationId, **changes) -> "PlantConfiguration":
        """Return a new configuration with fields of one station changed (re-clamped)."""
        current = self.stations[station_id].model_dump()
        current.update(changes)
        return self.with_station(station_id, StationConfig(**current))
