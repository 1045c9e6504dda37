"""Staffing cost breakdown data models.

Data classes representing headcount, labor cost and incremental hire
figures for analysis and reporting.
"""

from dataclasses import dataclass, field
from typing import Dict

import pandas as pd

from ..models.station import StationId


@dataclass
class StationCost:
    """
    Monthly labor cost of one station.

    Attributes:
        station: Station ID
        headcount: Required operators
        base_cost: headcount x monthly salary
        overtime_cost: crew x shifts x overtime hours x weeks/month x overtime rate
    """
    station: StationId
    headcount: float = 0.0
    base_cost: float = 0.0
    overtime_cost: float = 0.0

    @property
    def total_cost(self) -> float:
        return self.base_cost + self.overtime_cost

    def __str__(self) -> str:
        return (
            f"{self.station.label}: ${self.total_cost:,.2f} "
            f"(base ${self.base_cost:,.2f}, OT ${self.overtime_cost:,.2f}, {self.headcount:.2f} operators)"
        )


@dataclass
class IncrementalHire:
    """
    Hires needed beyond the historical baseline crew.

    Attributes:
        station: Station ID
        required_headcount: Headcount of the current configuration
        baseline_headcount: Headcount of the historical baseline
        hires: max(0, ceil(required - baseline))
        cost: hires x monthly salary
    """
    station: StationId
    required_headcount: float
    baseline_headcount: float
    hires: int = 0
    cost: float = 0.0


@dataclass
class StaffingReport:
    """
    Plant-wide staffing and labor cost.

    Attributes:
        stations: Cost per station
        incremental_hires: Incremental hires per station
    """
    stations: Dict[StationId, StationCost] = field(default_factory=dict)
    incremental_hires: Dict[StationId, IncrementalHire] = field(default_factory=dict)

    @property
    def total_headcount(self) -> float:
        return sum(s.headcount for s in self.stations.values())

    @property
    def total_base_cost(self) -> float:
        return sum(s.base_cost for s in self.stations.values())

    @property
    def total_overtime_cost(self) -> float:
        return sum(s.overtime_cost for s in self.stations.values())

    @property
    def total_cost(self) -> float:
        return self.total_base_cost + self.total_overtime_cost

    @property
    def total_incremental_hires(self) -> int:
        return sum(h.hires for h in self.incremental_hires.values())

    @property
    def total_incremental_cost(self) -> float:
        return sum(h.cost for h in self.incremental_hires.values())

    def get_cost_proportions(self) -> Dict[str, float]:
        """
        Get proportion of base and overtime cost.

        Returns:
            Dictionary mapping component name to proportion (0.0 to 1.0)
        """
        total = self.total_cost
        if total == 0:
            return {"base": 0.0, "overtime": 0.0}
        return {
            "base": self.total_base_cost / total,
            "overtime": self.total_overtime_cost / total,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Convert per-station figures to a DataFrame for display."""
        rows = []
        for station_id, cost in self.stations.items():
            hire = self.incremental_hires.get(station_id)
            rows.append({
                'Station': station_id.label,
                'Headcount': cost.headcount,
                'Base Cost': cost.base_cost,
                'Overtime Cost': cost.overtime_cost,
                'Total Cost': cost.total_cost,
                'Baseline Headcount': hire.baseline_headcount if hire else None,
                'Incremental Hires': hire.hires if hire else 0,
                'Incremental Cost': hire.cost if hire else 0.0,
            })
        return pd.DataFrame(rows)

    def __str__(self) -> str:
        return (
            f"Staffing: {self.total_headcount:.2f} operators, ${self.total_cost:,.2f}/month "
            f"(base ${self.total_base_cost:,.2f}, OT ${self.total_overtime_cost:,.2f}); "
            f"{self.total_incremental_hires} incremental hires (${self.total_incremental_cost:,.2f})"
        )
