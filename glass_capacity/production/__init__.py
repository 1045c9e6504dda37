"""Station capacity and demand module.

This module turns station configurations into capacity figures and
production targets into per-station demand:
- Weekly/daily/monthly capacity and required headcount per station
- Demand per station group, including waste-inflated gross consumption
"""

from .capacity import CapacityFigure, StationCapacityCalculator
from .demand import DemandFigure, DvhPaneBreakdown, PlantDemand, DemandCalculator

__all__ = [
    'CapacityFigure',
    'StationCapacityCalculator',
    'DemandFigure',
    'DvhPaneBreakdown',
    'PlantDemand',
    'DemandCalculator',
]
