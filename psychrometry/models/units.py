"""
Pydantic models for unit descriptors, and the unit catalog.

A descriptor says how one unit maps onto the canonical integer representation
of its dimension:

    canonical = value * scale + offset

Canonical units are micro-kelvin for temperature, milli-pascal for pressure
and milli-joule per kilogram for specific enthalpy.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Unit(BaseModel):
    """Conversion metadata for one concrete unit."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human-readable name, e.g. 'celsius'")
    abbreviation: str = Field(..., description="Short symbol, e.g. '°C'")
    scale: int = Field(
        ...,
        gt=0,
        description="Canonical sub-units per one of this unit",
    )
    offset: int = Field(
        default=0,
        description="Canonical sub-units between absolute zero and this unit's zero",
    )


class LinearUnit(Unit):
    """A unit whose zero coincides with the dimension's zero."""

    offset: Literal[0] = 0


class AffineUnit(Unit):
    """A unit whose zero point may sit anywhere on the canonical scale."""


class TemperatureUnit(AffineUnit):
    """Temperature unit; canonical unit is the micro-kelvin."""


class PressureUnit(LinearUnit):
    """Pressure unit; canonical unit is the milli-pascal."""


class SpecificEnthalpyUnit(LinearUnit):
    """Specific enthalpy unit; canonical unit is the milli-joule per kilogram."""


# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------

KELVIN = TemperatureUnit(name="kelvin", abbreviation="K", scale=1_000_000)
CELSIUS = TemperatureUnit(
    name="celsius", abbreviation="°C", scale=1_000_000, offset=273_150_000
)
FAHRENHEIT = TemperatureUnit(
    name="fahrenheit",
    abbreviation="°F",
    scale=round(1_000_000 / 1.8),
    offset=round(459_670_000 / 1.8),
)

# ---------------------------------------------------------------------------
# Pressure
# ---------------------------------------------------------------------------

PASCAL = PressureUnit(name="pascal", abbreviation="Pa", scale=1_000)
KILOPASCAL = PressureUnit(name="kilopascal", abbreviation="kPa", scale=1_000_000)
ATMOSPHERE = PressureUnit(name="atmosphere", abbreviation="atm", scale=101_325_000)
PSI = PressureUnit(name="pound per square inch", abbreviation="psi", scale=6_894_757)

# ---------------------------------------------------------------------------
# Specific enthalpy
# ---------------------------------------------------------------------------

JOULE_PER_KG = SpecificEnthalpyUnit(
    name="joule per kilogram", abbreviation="J/kg", scale=1_000
)
KILOJOULE_PER_KG = SpecificEnthalpyUnit(
    name="kilojoule per kilogram", abbreviation="kJ/kg", scale=1_000_000
)
BTU_PER_POUND = SpecificEnthalpyUnit(
    name="Btu per pound", abbreviation="Btu/lb", scale=2_326_000
)
