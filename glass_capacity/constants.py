"""Centralized constants for the glass plant capacity model.

This module contains all hardcoded constants used across the capacity,
demand, bottleneck and staffing calculations, including shift calendars,
the DVH pane mix, waste factors, tempering mass ratios and the historical
baseline crews. Centralizing these values ensures consistency and makes
them easy to update; `PlantConstants` gathers them into an injectable
configuration object.
"""

# ============================================================================
# SHIFT CALENDAR CONSTANTS
# ============================================================================

#: Hours in one production shift
HOURS_PER_SHIFT = 8

#: Operating days per week under the five-day (5x2) system
DAYS_PER_WEEK_FIVE_TWO = 5

#: Operating days per week under the six-day rotating (6x2) system
#: Rotating crews cover all seven calendar days
DAYS_PER_WEEK_SIX_TWO = 7

#: Crew multiplier for the six-day rotating system
#: Seven-day coverage needs more crews than nominal daily shifts
SIX_TWO_DOTATION_FACTOR = 8 / 6

#: Average weeks per month (used for monthly capacity, demand and overtime)
WEEKS_PER_MONTH = 4.33

#: Minimum and maximum shifts per day
MIN_SHIFTS_PER_DAY = 1
MAX_SHIFTS_PER_DAY = 3


# ============================================================================
# PRODUCT MIX CONSTANTS
# ============================================================================

#: Panes consumed by one m² of insulated glass unit (DVH)
PANES_PER_DVH_UNIT = 2

#: Share of DVH panes that are tempered
DVH_TEMPERED_SHARE = 0.35

#: Share of DVH panes that are laminated
DVH_LAMINATED_SHARE = 0.60

#: Share of DVH panes that are untreated float glass
DVH_FLOAT_SHARE = 0.05

#: Special-laminated product consumes two monolithic panes per m²
SPECIAL_LAMINATED_PLIES = 2


# ============================================================================
# WASTE FACTORS (gross consumption reporting only)
# ============================================================================

#: Gross-to-net inflation for monolithic cutting consumption
MONOLITHIC_WASTE_FACTOR = 1.18

#: Gross-to-net inflation for laminated cutting consumption
LAMINATED_WASTE_FACTOR = 1.30


# ============================================================================
# TEMPERING MASS CONSTANTS (kg per m²)
# ============================================================================

#: Mass of a tempered DVH pane
KG_PER_M2_DVH_TEMPERED = 15

#: Mass of standalone tempered product
KG_PER_M2_TEMPERED = 20

#: Mass per ply of special-laminated product
KG_PER_M2_SPECIAL_LAMINATED_PLY = 18


# ============================================================================
# DVH CONSUMPTION RATIOS (spare capacity consumed per m² of DVH)
# ============================================================================

#: Monolithic cutting: 2 panes x (35% tempered + 5% float)
MONOLITHIC_CUTTING_DVH_RATIO = 0.8

#: Laminated cutting: 2 panes x 60% laminated
LAMINATED_CUTTING_DVH_RATIO = 1.2

#: Edge treatment: every DVH pane is edged
EDGE_TREATMENT_DVH_RATIO = 2.0

#: Lamination: 2 panes x 60% laminated
LAMINATION_DVH_RATIO = 1.2


# ============================================================================
# EDGE TREATMENT CONVERSION (linear meters per m²)
# ============================================================================

ML_PER_M2_BILATERAL = 2.8
ML_PER_M2_FOREL_CNC = 4.12
ML_PER_M2_FOREL_DVH = 3.2


# ============================================================================
# AUTO-ADJUST AND TOLERANCES
# ============================================================================

#: Maximum triggered iterations per enable-cycle
MAX_AUTO_ADJUST_ITERATIONS = 3

#: Gaps above -GAP_TOLERANCE do not require adjustment
GAP_TOLERANCE = 1e-6

#: Headcount differences below this are treated as zero before rounding up
HEADCOUNT_TOLERANCE = 1e-9
