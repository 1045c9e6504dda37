"""Glass plant capacity and demand reconciliation.

Models nine production stations of a flat-glass processing plant, derives
capacity, demand, the DVH chain bottleneck, staffing cost and per-station
gaps, and closes gaps with a bounded auto-adjust heuristic.

Typical use:
    configuration, parameters = reset_to_baseline()
    report = recompute(configuration, parameters)
    if report.needs_adjustment:
        result = adjust(configuration, parameters)
"""

from .models import (
    DvhTargetPolicy,
    GlobalParameters,
    PlantConfiguration,
    PlantConstants,
    ShiftSystem,
    StationConfig,
    StationId,
    default_global_parameters,
    default_plant_configuration,
)
from .workflows import CapacityReport, recompute, reset_to_baseline
from .optimization import AdjustmentResult, AdjustmentState, AutoAdjustSession, adjust, apply_adjustments

__version__ = "1.0.0"

__all__ = [
    "DvhTargetPolicy",
    "GlobalParameters",
    "PlantConfiguration",
    "PlantConstants",
    "ShiftSystem",
    "StationConfig",
    "StationId",
    "default_global_parameters",
    "default_plant_configuration",
    "CapacityReport",
    "recompute",
    "reset_to_baseline",
    "AdjustmentResult",
    "AdjustmentState",
    "AutoAdjustSession",
    "adjust",
    "apply_adjustments",
]
