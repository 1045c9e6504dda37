"""Staffing cost module.

This module provides labor cost calculation for the plant:
- Required headcount per station (with six-day rotation coverage)
- Base cost (headcount at monthly salary) and monthly overtime cost
- Incremental hires against the historical baseline crew

Key components:
- StationCost, IncrementalHire, StaffingReport: Data models for cost components
- StaffingCostCalculator: Calculate costs from station configurations
"""

from .cost_breakdown import (
    StationCost,
    IncrementalHire,
    StaffingReport,
)
from .staffing_cost_calculator import StaffingCostCalculator

__all__ = [
    "StationCost",
    "IncrementalHire",
    "StaffingReport",
    "StaffingCostCalculator",
]
