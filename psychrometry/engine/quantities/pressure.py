"""
Pressure quantity.
"""

from psychrometry.config import PRESSURE_TOLERANCE
from psychrometry.engine.quantities.base import Quantity
from psychrometry.models.units import PressureUnit


class Pressure(Quantity[PressureUnit]):
    """Pressure stored in milli-pascal."""

    unit_type = PressureUnit
    tolerance = PRESSURE_TOLERANCE

    __slots__ = ()
