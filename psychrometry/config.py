"""
Psychrometry configuration and constants.
"""

# Equality tolerance for each dimension, in canonical sub-units.
TEMPERATURE_TOLERANCE = 200        # µK
PRESSURE_TOLERANCE = 200           # mPa
SPECIFIC_ENTHALPY_TOLERANCE = 200  # mJ/kg

# Minimum acceptable humidity ratio used/returned by any function.
# Any positive value below it is reset to this value.
MIN_HUM_RATIO = 1e-7

# Ratio of the molar mass of water vapor to dry air.
# Reference: ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn. 20
MOLAR_MASS_RATIO_WATER_AIR = 0.621945

# Triple point of water. The saturation pressure correlations switch branch here
# rather than at the freezing point, which removes the discontinuity.
TRIPLE_POINT_WATER_K = 273.16

# Validity window of the ASHRAE saturation pressure correlations
# (-100 to 200 °C, -148 to 392 °F).
SAT_VAP_PRES_TDB_MIN_K = 173.15
SAT_VAP_PRES_TDB_MAX_K = 473.15
