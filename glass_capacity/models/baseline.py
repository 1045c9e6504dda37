"""Documented default configuration of the plant."""

from .station import PlantConfiguration, ShiftSystem, StationConfig, StationId
from .parameters import GlobalParameters


def default_plant_configuration() -> PlantConfiguration:
    """
    Station configuration as currently run on the shop floor.

    Rates are per hour in each station's native unit:
    - Cutting lines in m²/h
    - Edge treatment in ml/h (Bilateral 3,500 ml/day over 24h, Forel CNC 213 ml
      per 8h shift, Forel DVH 600 ml per 8h shift)
    - Glaston tempering in kg/h (16,000 kg/day over 24h)
    - DVH assembly in m²/h (800 m²/day over two 8h shifts)
    - Bovone lamination in m²/h (72,000 m² per 17 days over 24h); 14 people on
      three 6x2 shifts gives 14 / (3 x 8/6) = 3.5 per shift
    """
    five, six = ShiftSystem.FIVE_TWO, ShiftSystem.SIX_TWO
    return PlantConfiguration(stations={
        StationId.JUMBO: StationConfig(rate=56.25, shift_system=five, shifts_per_day=3, crew_per_shift=2),
        StationId.HEGLA_1: StationConfig(rate=26.325, shift_system=five, shifts_per_day=3, crew_per_shift=2),
        StationId.HEGLA_2: StationConfig(rate=26.325, shift_system=five, shifts_per_day=2, crew_per_shift=2),
        StationId.BILATERAL: StationConfig(rate=3500 / 24, shift_system=five, shifts_per_day=3, crew_per_shift=2),
        StationId.FOREL_CNC: StationConfig(rate=213 / 8, shift_system=five, shifts_per_day=1, crew_per_shift=1),
        StationId.FOREL_DVH: StationConfig(rate=600 / 8, shift_system=five, shifts_per_day=1, crew_per_shift=3),
        StationId.GLASTON: StationConfig(rate=16000 / 24, shift_system=five, shifts_per_day=3, crew_per_shift=8 / 3),
        StationId.DVH_ASSEMBLY: StationConfig(rate=50, shift_system=five, shifts_per_day=2, crew_per_shift=5.5),
        StationId.BOVONE: StationConfig(rate=(72000 / 17) / 24, shift_system=six, shifts_per_day=3, crew_per_shift=3.5),
    })


def default_global_parameters() -> GlobalParameters:
    """Salary, overtime rate, targets and switches at their documented defaults."""
    return GlobalParameters()
