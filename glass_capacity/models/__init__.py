"""Data models for the glass plant capacity model."""

from .station import (
    ShiftSystem,
    StationKind,
    StationId,
    StationConfig,
    PlantConfiguration,
    EDGE_STATIONS,
    LAMINATED_CUTTING_STATIONS,
)
from .parameters import (
    DvhTargetPolicy,
    ProductionTargets,
    EdgeConversionFactors,
    GlobalParameters,
    PlantConstants,
    DEFAULT_CONSTANTS,
)
from .baseline import default_plant_configuration, default_global_parameters

__all__ = [
    # Stations
    "ShiftSystem",
    "StationKind",
    "StationId",
    "StationConfig",
    "PlantConfiguration",
    "EDGE_STATIONS",
    "LAMINATED_CUTTING_STATIONS",
    # Parameters and constants
    "DvhTargetPolicy",
    "ProductionTargets",
    "EdgeConversionFactors",
    "GlobalParameters",
    "PlantConstants",
    "DEFAULT_CONSTANTS",
    # Baseline
    "default_plant_configuration",
    "default_global_parameters",
]
