"""
Psychrometric formulas over unit-safe quantities.

Reference: ASHRAE Handbook - Fundamentals (2017) ch. 1.

Every function accepts its temperature and pressure arguments in whatever unit
the caller built them with, converts internally to the unit the correlation's
constants assume, and returns the result in the unit requested through `unit`.
Humidity ratio and relative humidity are plain ratios.

Invalid inputs raise InvalidValueError, inputs outside a correlation's range
raise OutOfRangeError. A function that calls another formula lets that
formula's error through unchanged.
"""

import logging
import math
from typing import Optional

from psychrometry.config import (
    MIN_HUM_RATIO,
    MOLAR_MASS_RATIO_WATER_AIR,
    SAT_VAP_PRES_TDB_MAX_K,
    SAT_VAP_PRES_TDB_MIN_K,
    TRIPLE_POINT_WATER_K,
)
from psychrometry.engine.quantities.pressure import Pressure
from psychrometry.engine.quantities.specific_enthalpy import SpecificEnthalpy
from psychrometry.engine.quantities.temperature import Temperature
from psychrometry.errors import InvalidValueError, OutOfRangeError
from psychrometry.models.units import (
    CELSIUS,
    JOULE_PER_KG,
    KELVIN,
    PASCAL,
    PressureUnit,
    SpecificEnthalpyUnit,
)

logger = logging.getLogger(__name__)

_TDB_MIN = Temperature(SAT_VAP_PRES_TDB_MIN_K, KELVIN)
_TDB_MAX = Temperature(SAT_VAP_PRES_TDB_MAX_K, KELVIN)
_TRIPLE_POINT = Temperature(TRIPLE_POINT_WATER_K, KELVIN)


def _ln_pws_over_ice(t: float) -> float:
    """ln of saturation pressure (Pa) over ice, t in K. ASHRAE eqn. 5."""
    return (
        -5.6745359e03 / t
        + 6.3925247
        - 9.677843e-03 * t
        + 6.2215701e-07 * t ** 2
        + 2.0747825e-09 * t ** 3
        - 9.484024e-13 * t ** 4
        + 4.1635019 * math.log(t)
    )


def _ln_pws_over_water(t: float) -> float:
    """ln of saturation pressure (Pa) over liquid water, t in K. ASHRAE eqn. 6."""
    return (
        -5.8002206e03 / t
        + 1.3914993
        - 4.8640239e-02 * t
        + 4.1764768e-05 * t ** 2
        - 1.4452093e-08 * t ** 3
        + 6.5459673 * math.log(t)
    )


def _bounded_hum_ratio(hum_ratio: float) -> float:
    if hum_ratio < MIN_HUM_RATIO:
        logger.warning(
            "Humidity ratio %g is below the minimum, reset to %g",
            hum_ratio,
            MIN_HUM_RATIO,
        )
        return MIN_HUM_RATIO
    return hum_ratio


def get_sat_vap_pres(
    tdry_bulb: Temperature,
    unit: PressureUnit = PASCAL,
) -> Pressure:
    """
    Saturation vapor pressure at a given dry-bulb temperature.

    ASHRAE defines the two correlations above and below the freezing point,
    which leaves a small discontinuity there. Switching at the triple point of
    water instead makes both branches agree.

    Args:
        tdry_bulb: Dry-bulb temperature, any unit
        unit: Pressure unit of the result

    Returns:
        Saturation vapor pressure

    Raises:
        OutOfRangeError: If tdry_bulb is outside -100 to 200 °C
    """
    below_min = tdry_bulb < _TDB_MIN and tdry_bulb != _TDB_MIN
    above_max = tdry_bulb > _TDB_MAX and tdry_bulb != _TDB_MAX
    if below_min or above_max:
        raise OutOfRangeError(
            f"Dry bulb temperature {tdry_bulb.to_number(KELVIN):.2f} K is outside "
            f"range {SAT_VAP_PRES_TDB_MIN_K} to {SAT_VAP_PRES_TDB_MAX_K} K "
            f"(-100 to 200 °C)"
        )

    t = tdry_bulb.to_number(KELVIN)
    if tdry_bulb <= _TRIPLE_POINT:
        logger.debug("Saturation pressure at %.4f K: over ice", t)
        ln_pws = _ln_pws_over_ice(t)
    else:
        logger.debug("Saturation pressure at %.4f K: over water", t)
        ln_pws = _ln_pws_over_water(t)

    return Pressure(math.exp(ln_pws), PASCAL).to(unit)


def get_moist_air_enthalpy(
    tdry_bulb: Temperature,
    hum_ratio: float,
    unit: SpecificEnthalpyUnit = JOULE_PER_KG,
) -> SpecificEnthalpy:
    """
    Moist air enthalpy from dry-bulb temperature and humidity ratio.
    ASHRAE eqn. 30.

    Args:
        tdry_bulb: Dry-bulb temperature, any unit (may be below freezing)
        hum_ratio: Humidity ratio in kg_w/kg_da (same as lb_w/lb_da)
        unit: Specific enthalpy unit of the result

    Raises:
        InvalidValueError: If hum_ratio is not positive
    """
    if hum_ratio <= 0.0:
        raise InvalidValueError(f"Humidity ratio must be positive, got {hum_ratio}")

    w = _bounded_hum_ratio(hum_ratio)
    t = tdry_bulb.to_number(CELSIUS)
    h = (1.006 * t + w * (2501.0 + 1.86 * t)) * 1000.0
    return SpecificEnthalpy(h, JOULE_PER_KG).to(unit)


def get_vap_pres_from_hum_ratio(
    hum_ratio: float,
    pressure: Pressure,
    unit: Optional[PressureUnit] = None,
) -> Pressure:
    """
    Partial pressure of water vapor from humidity ratio and ambient pressure.
    ASHRAE eqn. 20 solved for pw.

    The result is in the unit of `pressure` unless `unit` is given.

    Raises:
        InvalidValueError: If hum_ratio is not positive
    """
    if hum_ratio <= 0.0:
        raise InvalidValueError(f"Humidity ratio must be positive, got {hum_ratio}")

    w = _bounded_hum_ratio(hum_ratio)
    vap_pres = w / (MOLAR_MASS_RATIO_WATER_AIR + w) * pressure
    if unit is None:
        return vap_pres
    return vap_pres.to(unit)


def get_vap_pres_from_rel_hum(
    tdry_bulb: Temperature,
    rel_hum: float,
    unit: PressureUnit = PASCAL,
) -> Pressure:
    """
    Partial pressure of water vapor from relative humidity and temperature.
    ASHRAE eqn. 12, 22.

    Raises:
        OutOfRangeError: If rel_hum is outside [0, 1], or tdry_bulb is outside
            the saturation pressure range
    """
    if not 0.0 <= rel_hum <= 1.0:
        raise OutOfRangeError(
            f"Relative humidity should be between 0 and 1, got {rel_hum}"
        )
    return rel_hum * get_sat_vap_pres(tdry_bulb, unit)


def get_rel_hum_from_vap_pres(
    tdry_bulb: Temperature,
    vap_pres: Pressure,
) -> float:
    """
    Relative humidity [0-1] from dry-bulb temperature and vapor pressure.
    ASHRAE eqn. 12, 22.

    Raises:
        InvalidValueError: If vap_pres is not positive
        OutOfRangeError: If tdry_bulb is outside the saturation pressure range
    """
    if vap_pres.canonical <= 0:
        raise InvalidValueError(
            f"Partial pressure of water vapor must be positive, got {vap_pres!r}"
        )
    return vap_pres / get_sat_vap_pres(tdry_bulb)


def get_hum_ratio_from_vap_pres(
    vap_pres: Pressure,
    pressure: Pressure,
) -> float:
    """
    Humidity ratio from water vapor pressure and ambient pressure.
    ASHRAE eqn. 20.

    The result never drops below MIN_HUM_RATIO, including when the vapor
    pressure reaches the ambient pressure.

    Raises:
        InvalidValueError: If vap_pres is not positive
    """
    if vap_pres.canonical <= 0:
        raise InvalidValueError(
            f"Partial pressure of water vapor must be positive, got {vap_pres!r}"
        )

    dry_air_pres = pressure - vap_pres
    if dry_air_pres.canonical <= 0:
        logger.warning(
            "Vapor pressure %r is not below ambient pressure %r, "
            "humidity ratio reset to %g",
            vap_pres,
            pressure,
            MIN_HUM_RATIO,
        )
        return MIN_HUM_RATIO

    hum_ratio = MOLAR_MASS_RATIO_WATER_AIR * (vap_pres / dry_air_pres)
    return _bounded_hum_ratio(hum_ratio)


def get_hum_ratio_from_rel_hum(
    tdry_bulb: Temperature,
    rel_hum: float,
    pressure: Pressure,
) -> float:
    """
    Humidity ratio from dry-bulb temperature, relative humidity and ambient
    pressure.

    Raises:
        OutOfRangeError: If rel_hum is outside [0, 1], or tdry_bulb is outside
            the saturation pressure range
        InvalidValueError: If the resulting vapor pressure is zero (rel_hum == 0)
    """
    vap_pres = get_vap_pres_from_rel_hum(tdry_bulb, rel_hum)
    return get_hum_ratio_from_vap_pres(vap_pres, pressure)


def get_moist_air_enthalpy_from_rel_hum(
    tdry_bulb: Temperature,
    rel_hum: float,
    pressure: Pressure,
    unit: SpecificEnthalpyUnit = JOULE_PER_KG,
) -> SpecificEnthalpy:
    """Moist air enthalpy from dry-bulb temperature, relative humidity and
    ambient pressure."""
    hum_ratio = get_hum_ratio_from_rel_hum(tdry_bulb, rel_hum, pressure)
    return get_moist_air_enthalpy(tdry_bulb, hum_ratio, unit)
