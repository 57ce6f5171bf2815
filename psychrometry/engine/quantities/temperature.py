"""
Temperature quantity.

Temperature is the one affine dimension: its units differ by an offset as well
as a scale, so scaling a temperature is anchored at the zero of the unit it is
expressed in (see `Quantity.__mul__`).
"""

from psychrometry.config import TEMPERATURE_TOLERANCE
from psychrometry.engine.quantities.base import Quantity
from psychrometry.models.units import TemperatureUnit


class Temperature(Quantity[TemperatureUnit]):
    """Temperature stored in micro-kelvin."""

    unit_type = TemperatureUnit
    tolerance = TEMPERATURE_TOLERANCE

    __slots__ = ()
