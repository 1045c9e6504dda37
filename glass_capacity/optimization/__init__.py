"""Auto-adjust heuristic for closing capacity gaps.

This module provides:
- apply_adjustments: one round of overtime and rate changes from fresh gaps
- AutoAdjustSession: enable-cycle bounded to a fixed number of iterations
- adjust: convenience wrapper running a full bounded session
"""

from .auto_adjust import (
    AdjustmentState,
    StationAdjustment,
    AdjustmentRecord,
    AdjustmentResult,
    AutoAdjustSession,
    apply_adjustments,
    adjust,
)

__all__ = [
    "AdjustmentState",
    "StationAdjustment",
    "AdjustmentRecord",
    "AdjustmentResult",
    "AutoAdjustSession",
    "apply_adjustments",
    "adjust",
]
