from psychrometry.config import SPECIFIC_ENTHALPY_TOLERANCE
from psychrometry.engine.quantities.base import Quantity
from psychrometry.models.units import SpecificEnthalpyUnit


class SpecificEnthalpy(Quantity[SpecificEnthalpyUnit]):
    """Specific enthalpy (per unit mass of dry air) stored in milli-joule per kilogram."""

    unit_type = SpecificEnthalpyUnit
    tolerance = SPECIFIC_ENTHALPY_TOLERANCE

    __slots__ = ()
