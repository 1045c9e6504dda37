"""
Bounded auto-adjust heuristic.

Converts capacity shortfalls into configuration changes:
- Cutting, edge treatment and tempering: add overtime hours per week
  (ceil(shortfall / rate))
- DVH assembly and lamination: raise the throughput rate so the current
  scheduled hours cover capacity + shortfall

Each iteration observes freshly recomputed gaps before deciding to adjust
again, and an enable-cycle stops after a fixed number of iterations even if
gaps remain open (a coupled DVH target moves with capacity, so closing one
gap can open another).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import logging
import math

from ..analysis.gap_analyzer import (
    DVH_ASSEMBLY,
    EDGE_TREATMENT,
    LAMINATED_CUTTING,
    LAMINATION,
    MONOLITHIC_CUTTING,
    TEMPERING,
)
from ..models.parameters import DEFAULT_CONSTANTS, GlobalParameters, PlantConstants
from ..models.station import EDGE_STATIONS, PlantConfiguration, StationId
from ..workflows.recompute import CapacityReport, recompute

logger = logging.getLogger(__name__)


class AdjustmentState(str, Enum):
    """State of an auto-adjust enable-cycle."""
    IDLE = "idle"
    EVALUATING = "evaluating"
    APPLIED = "applied"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class StationAdjustment:
    """
    One configuration change made to close a gap.

    Attributes:
        station: Station changed
        group: Station group whose shortfall triggered the change
        added_overtime_hours: Overtime hours per week added (overtime adjustments)
        previous_rate: Rate before the change (rate adjustments)
        new_rate: Rate after the change (rate adjustments)
        description: Human-readable summary
    """
    station: StationId
    group: str
    description: str
    added_overtime_hours: float = 0.0
    previous_rate: Optional[float] = None
    new_rate: Optional[float] = None

    @property
    def is_rate_change(self) -> bool:
        return self.new_rate is not None


@dataclass
class AdjustmentRecord:
    """Adjustments applied in one iteration."""
    iteration: int
    adjustments: List[StationAdjustment] = field(default_factory=list)
    automatic: bool = True

    @property
    def summary(self) -> str:
        prefix = "[Auto] " if self.automatic else ""
        return prefix + " · ".join(a.description for a in self.adjustments)

    def __str__(self) -> str:
        return self.summary


@dataclass
class AdjustmentResult:
    """
    Outcome of a bounded auto-adjust run.

    Attributes:
        configuration: Configuration after all applied adjustments
        log: One record per iteration that changed the configuration
        iterations: Iterations that applied changes
        state: APPLIED, IDLE (nothing to do) or EXHAUSTED (gaps still open)
        final_report: Recomputed report for the final configuration
    """
    configuration: PlantConfiguration
    log: List[AdjustmentRecord]
    iterations: int
    state: AdjustmentState
    final_report: CapacityReport

    @property
    def adjustments(self) -> List[StationAdjustment]:
        return [a for record in self.log for a in record.adjustments]


def _overtime_hours(shortfall: float, rate: float) -> int:
    return math.ceil(shortfall / rate)


def apply_adjustments(
    report: CapacityReport,
    constants: PlantConstants = DEFAULT_CONSTANTS,
) -> Tuple[PlantConfiguration, List[StationAdjustment]]:
    """
    Apply the minimal closing adjustment for every group with a negative gap.

    Args:
        report: Freshly recomputed report
        constants: Plant constants (weeks per month, gap tolerance)

    Returns:
        Tuple of (updated configuration, adjustments made). The configuration
        is returned unchanged with an empty list when no gap can be closed.
    """
    configuration = report.configuration
    gaps = report.gaps
    adjustments: List[StationAdjustment] = []

    def add_overtime(config_set: PlantConfiguration, station_id: StationId, group: str, hours: float):
        current = config_set[station_id]
        adjustments.append(StationAdjustment(
            station=station_id,
            group=group,
            description=f"{station_id.label} +{hours:g} h/week",
            added_overtime_hours=hours,
        ))
        return config_set.update_station(
            station_id, overtime_hours_per_week=current.overtime_hours_per_week + hours
        )

    def skip(group: str, reason: str) -> None:
        logger.warning(f"Cannot close {group} gap of {gaps[group].shortfall:,.1f}: {reason}")

    if gaps.needs_adjustment(MONOLITHIC_CUTTING):
        shortfall = gaps[MONOLITHIC_CUTTING].shortfall
        rate = configuration[StationId.JUMBO].rate
        if rate > 0:
            configuration = add_overtime(
                configuration, StationId.JUMBO, MONOLITHIC_CUTTING, _overtime_hours(shortfall, rate)
            )
        else:
            skip(MONOLITHIC_CUTTING, "Jumbo rate is zero")

    if gaps.needs_adjustment(LAMINATED_CUTTING):
        shortfall = gaps[LAMINATED_CUTTING].shortfall
        combined_rate = configuration[StationId.HEGLA_1].rate + configuration[StationId.HEGLA_2].rate
        if combined_rate > 0:
            hours = _overtime_hours(shortfall, combined_rate)
            first, second = math.ceil(hours / 2), hours // 2
            configuration = add_overtime(configuration, StationId.HEGLA_1, LAMINATED_CUTTING, first)
            if second > 0:
                configuration = add_overtime(configuration, StationId.HEGLA_2, LAMINATED_CUTTING, second)
        else:
            skip(LAMINATED_CUTTING, "Hegla rates are zero")

    if gaps.needs_adjustment(EDGE_TREATMENT):
        remaining = gaps[EDGE_TREATMENT].shortfall
        conversion = report.parameters.edge_conversion
        yields = sorted(
            ((s, configuration[s].rate / conversion.for_station(s)) for s in EDGE_STATIONS),
            key=lambda item: item[1],
            reverse=True,
        )
        for station_id, area_per_hour in yields:
            if remaining <= 0 or area_per_hour <= 0:
                break
            hours = _overtime_hours(remaining, area_per_hour)
            configuration = add_overtime(configuration, station_id, EDGE_TREATMENT, hours)
            remaining -= hours * area_per_hour
        if remaining == gaps[EDGE_TREATMENT].shortfall:
            skip(EDGE_TREATMENT, "all edge-treatment rates are zero")

    if gaps.needs_adjustment(TEMPERING):
        shortfall = gaps[TEMPERING].shortfall
        rate = configuration[StationId.GLASTON].rate
        if rate > 0:
            configuration = add_overtime(
                configuration, StationId.GLASTON, TEMPERING, _overtime_hours(shortfall, rate)
            )
        else:
            skip(TEMPERING, "Glaston rate is zero")

    if gaps.needs_adjustment(DVH_ASSEMBLY):
        shortfall = gaps[DVH_ASSEMBLY].shortfall
        figure = report.capacities[StationId.DVH_ASSEMBLY]
        if figure.weekly_hours > 0:
            new_rate = (figure.weekly + shortfall) / figure.weekly_hours
            per_day = math.ceil(shortfall / configuration[StationId.DVH_ASSEMBLY].shift_system.days_per_week)
            adjustments.append(StationAdjustment(
                station=StationId.DVH_ASSEMBLY,
                group=DVH_ASSEMBLY,
                description=f"{StationId.DVH_ASSEMBLY.label} +{per_day} m²/day eq. (rate {new_rate:,.2f} m²/h)",
                previous_rate=configuration[StationId.DVH_ASSEMBLY].rate,
                new_rate=new_rate,
            ))
            configuration = configuration.update_station(StationId.DVH_ASSEMBLY, rate=new_rate)
        else:
            skip(DVH_ASSEMBLY, "no scheduled hours")

    if gaps.needs_adjustment(LAMINATION):
        shortfall = gaps[LAMINATION].shortfall
        figure = report.capacities[StationId.BOVONE]
        monthly_hours = figure.weekly_hours * constants.weeks_per_month
        if monthly_hours > 0:
            new_rate = (figure.monthly + shortfall) / monthly_hours
            per_day = math.ceil(shortfall / constants.days_per_month(configuration[StationId.BOVONE].shift_system))
            adjustments.append(StationAdjustment(
                station=StationId.BOVONE,
                group=LAMINATION,
                description=f"{StationId.BOVONE.label} +{per_day} m²/day eq. (rate {new_rate:,.2f} m²/h)",
                previous_rate=configuration[StationId.BOVONE].rate,
                new_rate=new_rate,
            ))
            configuration = configuration.update_station(StationId.BOVONE, rate=new_rate)
        else:
            skip(LAMINATION, "no scheduled hours")

    return configuration, adjustments


class AutoAdjustSession:
    """
    Enable-cycle of the auto-adjust heuristic.

    While enabled, each trigger evaluates fresh gaps and applies at most one
    round of adjustments; after `max_iterations` applied rounds the session is
    exhausted until it is disabled, which resets the counter.

    Example:
        session = AutoAdjustSession()
        session.enable()
        result = session.run(configuration, parameters)
        for record in result.log:
            print(record.summary)
    """

    def __init__(self, constants: PlantConstants = DEFAULT_CONSTANTS, max_iterations: Optional[int] = None):
        """
        Initialize auto-adjust session.

        Args:
            constants: Plant constants (iteration cap, gap tolerance)
            max_iterations: Override of the iteration cap
        """
        self.constants = constants
        self.max_iterations = constants.max_auto_adjust_iterations if max_iterations is None else max_iterations
        self.enabled = False
        self.iterations = 0
        self.state = AdjustmentState.IDLE
        self.log: List[AdjustmentRecord] = []

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        """Disable and reset the iteration counter."""
        self.enabled = False
        self.iterations = 0
        self.state = AdjustmentState.IDLE

    def trigger(self, configuration: PlantConfiguration, parameters: GlobalParameters) -> PlantConfiguration:
        """
        Run one bounded iteration.

        Returns:
            The adjusted configuration, or the same object when nothing was
            applied (disabled, gaps closed, cap reached or gaps unclosable)
        """
        if not self.enabled:
            return configuration

        self.state = AdjustmentState.EVALUATING
        report = recompute(configuration, parameters, self.constants)
        if not report.needs_adjustment:
            self.state = AdjustmentState.APPLIED if self.iterations else AdjustmentState.IDLE
            return configuration

        if self.iterations >= self.max_iterations:
            logger.warning(
                f"Auto-adjust stopped after {self.iterations} iterations; open gaps: "
                f"{', '.join(report.gaps.groups_needing_adjustment)}"
            )
            self.state = AdjustmentState.EXHAUSTED
            return configuration

        adjusted, adjustments = apply_adjustments(report, self.constants)
        if not adjustments:
            self.state = AdjustmentState.EXHAUSTED
            return configuration

        self.iterations += 1
        record = AdjustmentRecord(iteration=self.iterations, adjustments=adjustments)
        self.log.append(record)
        self.state = AdjustmentState.APPLIED
        logger.info(f"Auto-adjust iteration {self.iterations}: {record.summary}")
        return adjusted

    def run(self, configuration: PlantConfiguration, parameters: GlobalParameters) -> AdjustmentResult:
        """Trigger repeatedly until nothing changes, then report the outcome."""
        start = len(self.log)
        while True:
            adjusted = self.trigger(configuration, parameters)
            if adjusted is configuration:
                break
            configuration = adjusted

        return AdjustmentResult(
            configuration=configuration,
            log=self.log[start:],
            iterations=self.iterations,
            state=self.state,
            final_report=recompute(configuration, parameters, self.constants),
        )


def adjust(
    configuration: PlantConfiguration,
    parameters: GlobalParameters,
    max_iterations: Optional[int] = None,
    constants: PlantConstants = DEFAULT_CONSTANTS,
) -> AdjustmentResult:
    """
    Close capacity gaps with at most `max_iterations` rounds of adjustments.

    Args:
        configuration: Starting station configurations
        parameters: Global parameters
        max_iterations: Iteration cap (defaults to constants.max_auto_adjust_iterations)
        constants: Plant constants

    Returns:
        AdjustmentResult with the final configuration and the adjustment log
    """
    session = AutoAdjustSession(constants, max_iterations)
    session.enable()
    return session.run(configuration, parameters)
