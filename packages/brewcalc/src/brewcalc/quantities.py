"""
Validated physical quantities for brewing calculations.

Each quantity kind is its own frozen Pydantic model wrapping a single
float magnitude. Kinds never mix implicitly: adding a Litre to a Kilogram
is a TypeError, and the only cross-kind products are the combinators in
brewcalc.arithmetic.

Construction validates the magnitude (no NaN, no negative values including
-0.0). Arithmetic between quantities builds results without re-validating,
so a subtraction may legitimately produce a negative quantity.
"""

import logging
import math
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from brewcalc.exceptions import ValidationError

logger = logging.getLogger(__name__)


def check_magnitude(value: float) -> float:
    """
    Check that a raw magnitude is usable as a quantity value.

    Args:
        value: Raw magnitude

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If the value is NaN or has its sign bit set
    """
    if math.isnan(value):
        raise ValidationError("NaN value")
    # copysign catches -0.0, which compares equal to 0.0
    if math.copysign(1.0, value) < 0:
        raise ValidationError(f"Expected non-negative value, got: {value}.")
    return value


def _is_scalar(other: Any) -> bool:
    return isinstance(other, (int, float)) and not isinstance(other, bool)


class Quantity(BaseModel):
    """
    Base for all quantity kinds.

    Provides same-kind addition and subtraction and scaling by a plain
    number. Results are built with model_construct and skip validation.
    Abstract: only the concrete kinds below can be instantiated. Input is
    strict, so strings and bools are rejected rather than coerced.
    """

    __abstract__ = True

    model_config = ConfigDict(frozen=True, strict=True)

    value: float = Field(..., description="Magnitude of the quantity")

    @classmethod
    def new(cls, value: float) -> Self:
        """
        Create a quantity from a raw magnitude.

        Args:
            value: Raw magnitude

        Returns:
            A new quantity wrapping the value unchanged

        Raises:
            ValidationError: If the value is not acceptable for this kind
        """
        try:
            return cls(value=value)
        except PydanticValidationError as e:
            error = e.errors()[0]
            cause = error.get("ctx", {}).get("error")
            if error["type"] == "value_error":
                message = str(cause) if cause else error["msg"].removeprefix("Value error, ")
            else:
                message = f"Expected a number, got: {value!r}."
            logger.debug("Rejected %s value %r: %s", cls.__name__, value, message)
            raise ValidationError(message) from e

    def __init__(self, /, **data: Any) -> None:
        if type(self).__dict__.get("__abstract__", False):
            raise TypeError(
                f"{type(self).__name__} is abstract, use a concrete quantity kind"
            )
        super().__init__(**data)

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> Self:
        """Copy the quantity. An updated value goes through validation."""
        if update:
            return type(self).new({**self.__dict__, **update}["value"])
        return super().model_copy(deep=deep)

    def _unchecked(self, value: float) -> Self:
        return type(self).model_construct(value=value)

    def __add__(self, other: Any) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._unchecked(self.value + other.value)

    def __sub__(self, other: Any) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self._unchecked(self.value - other.value)

    def __mul__(self, other: Any) -> Self:
        if not _is_scalar(other):
            return NotImplemented
        return self._unchecked(self.value * other)

    __rmul__ = __mul__

    def __float__(self) -> float:
        return self.value


class NonNegativeQuantity(Quantity):
    """Quantity whose magnitude must be a non-negative number."""

    __abstract__ = True

    @field_validator("value")
    @classmethod
    def _validate_magnitude(cls, v: float) -> float:
        return check_magnitude(v)


class SpecificGravity(NonNegativeQuantity):
    """
    Wort density relative to water.

    Realistic worts sit around 0.9 to 1.2, but only non-negativity
    is enforced.
    """

    @classmethod
    def from_plato(cls, plato: "Plato") -> "SpecificGravity":
        """Convert from degrees Plato."""
        from brewcalc.conversions import plato_to_specific_gravity

        return plato_to_specific_gravity(plato)

    def to_plato(self) -> "Plato":
        """Convert to degrees Plato."""
        from brewcalc.conversions import specific_gravity_to_plato

        return specific_gravity_to_plato(self)


class Plato(NonNegativeQuantity):
    """Sugar concentration in degrees Plato."""

    @classmethod
    def from_specific_gravity(cls, sg: SpecificGravity) -> "Plato":
        """Convert from specific gravity."""
        from brewcalc.conversions import specific_gravity_to_plato

        return specific_gravity_to_plato(sg)

    def to_specific_gravity(self) -> SpecificGravity:
        """Convert to specific gravity."""
        from brewcalc.conversions import plato_to_specific_gravity

        return plato_to_specific_gravity(self)


class Litre(NonNegativeQuantity):
    """Volume in litres."""


class Kilogram(NonNegativeQuantity):
    """Mass in kilograms."""


class AlcoholByVolume(Quantity):
    """
    Alcohol by volume in percent.

    A computed output, so the magnitude is not validated.
    """
