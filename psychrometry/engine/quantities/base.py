"""
Generic fixed-point quantity shared by every physical dimension.

A quantity owns one integer magnitude in the canonical unit of its dimension
(micro-kelvin, milli-pascal, ...) plus the unit descriptor it is currently
expressed in. The descriptor only governs how plain numbers are read in and
written out; two quantities of the same dimension always share the same
canonical scale, whatever their units.

Scalar arithmetic is anchored at the tagged unit's zero:

    q * n  ->  offset + n * (canonical - offset)
    q / n  ->  offset + (canonical - offset) / n

For linear units the offset is zero and this is a plain scaling of the
magnitude. For temperature it means 10 °C * 2 == 20 °C.

Equality is fuzzy (within `tolerance` canonical sub-units) while ordering is
exact. Two quantities closer than the tolerance compare equal even though one
is strictly less than the other, and equality is not transitive for chains of
values spaced just under the tolerance.
"""

from numbers import Real
from typing import ClassVar, Generic, Optional, TypeVar

from psychrometry.models.units import LinearUnit, Unit

U = TypeVar("U", bound=Unit)


class Quantity(Generic[U]):
    """Base class for dimension-specific quantities. Not used directly."""

    unit_type: ClassVar[type[Unit]] = Unit
    tolerance: ClassVar[int] = 0

    __slots__ = ("_canonical", "_unit")

    def __init__(self, value: Real, unit: U):
        self._check_unit(unit)
        if not isinstance(value, Real):
            raise TypeError(
                f"{type(self).__name__} value must be a real number, "
                f"got {type(value).__name__}"
            )
        self._canonical = round(value * unit.scale + unit.offset)
        self._unit = unit

    @classmethod
    def from_canonical(cls, canonical: int, unit: U):
        """Build a quantity straight from a canonical magnitude."""
        cls._check_unit(unit)
        quantity = cls.__new__(cls)
        quantity._canonical = int(canonical)
        quantity._unit = unit
        return quantity

    @classmethod
    def _check_unit(cls, unit: Unit) -> None:
        if not isinstance(unit, cls.unit_type):
            raise TypeError(
                f"{cls.__name__} expects a {cls.unit_type.__name__}, "
                f"got {unit!r}"
            )

    @classmethod
    def _is_linear(cls) -> bool:
        return issubclass(cls.unit_type, LinearUnit)

    def _same_dimension(self, other) -> bool:
        return isinstance(other, Quantity) and other.unit_type is self.unit_type

    def _new(self, canonical: int):
        return type(self).from_canonical(canonical, self._unit)

    # -----------------------------------------------------------------------
    # Conversion
    # -----------------------------------------------------------------------

    @property
    def canonical(self) -> int:
        return self._canonical

    @property
    def unit(self) -> U:
        return self._unit

    def to_number(self, unit: Optional[U] = None) -> float:
        """Return the magnitude expressed in `unit` (default: the tagged unit)."""
        if unit is None:
            unit = self._unit
        else:
            self._check_unit(unit)
        return (self._canonical - unit.offset) / unit.scale

    def to(self, unit: U):
        """Re-tag with another unit of the same dimension.

        The canonical magnitude is left untouched.
        """
        return type(self).from_canonical(self._canonical, unit)

    def __float__(self) -> float:
        return self.to_number()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.to_number()!r}, "
            f"{self._unit.abbreviation!r})"
        )

    # -----------------------------------------------------------------------
    # Comparison
    # -----------------------------------------------------------------------

    def __eq__(self, other):
        if not self._same_dimension(other):
            return NotImplemented
        return abs(self._canonical - other._canonical) < self.tolerance

    __hash__ = None

    def __lt__(self, other):
        if not self._same_dimension(other):
            return NotImplemented
        return self._canonical < other._canonical

    def __le__(self, other):
        if not self._same_dimension(other):
            return NotImplemented
        return self._canonical <= other._canonical

    def __gt__(self, other):
        if not self._same_dimension(other):
            return NotImplemented
        return self._canonical > other._canonical

    def __ge__(self, other):
        if not self._same_dimension(other):
            return NotImplemented
        return self._canonical >= other._canonical

    # -----------------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------------

    def _combine(self, other: "Quantity", sign: int):
        # Only linear dimensions can be summed; the sum of two temperatures
        # is not a temperature.
        if not self._same_dimension(other) or not self._is_linear():
            return NotImplemented
        return self._new(self._canonical + sign * other._canonical)

    def __add__(self, other):
        if isinstance(other, Quantity):
            return self._combine(other, 1)
        if not isinstance(other, Real):
            return NotImplemented
        return self._new(self._canonical + round(other * self._unit.scale))

    def __radd__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self._new(self._canonical + round(other * self._unit.scale))

    def __sub__(self, other):
        if isinstance(other, Quantity):
            return self._combine(other, -1)
        if not isinstance(other, Real):
            return NotImplemented
        return self._new(self._canonical - round(other * self._unit.scale))

    def __rsub__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        # Value in the tagged unit becomes `other - value`.
        offset = self._unit.offset
        return self._new(round(other * self._unit.scale) - self._canonical + 2 * offset)

    def __neg__(self):
        if not self._is_linear():
            raise TypeError(f"Cannot negate a {type(self).__name__}")
        return self._new(-self._canonical)

    def __mul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        offset = self._unit.offset
        return self._new(round(offset + other * (self._canonical - offset)))

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            if not self._same_dimension(other):
                return NotImplemented
            return self._canonical / other._canonical
        if not isinstance(other, Real):
            return NotImplemented
        offset = self._unit.offset
        return self._new(round(offset + (self._canonical - offset) / other))

    def __rtruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return other / self.to_number()
