"""Analysis module for capacity planning.

This module provides the cross-station analyses:
- Chain bottleneck: maximum DVH throughput the plant can sustain
- DVH target resolution under fixed, coupled and automatic policies
- Capacity versus demand gaps per station group and edge sub-line
"""

from .bottleneck import (
    BottleneckConstraint,
    BottleneckBreakdown,
    BottleneckSolver,
)
from .gap_analyzer import (
    GapRecord,
    GapAnalysis,
    GapAnalyzer,
    gap,
    GROUPS,
)

__all__ = [
    "BottleneckConstraint",
    "BottleneckBreakdown",
    "BottleneckSolver",
    "GapRecord",
    "GapAnalysis",
    "GapAnalyzer",
    "gap",
    "GROUPS",
]
