"""
Cross-kind combinators.

Only the pairings listed in ALLOWED_PAIRINGS exist. Each scales a
quantity by a dimensionless gravity factor and returns the same kind it
was given, never a composite kind.
"""

from typing import Callable, TypeVar

from brewcalc.quantities import Kilogram, Litre, Quantity, SpecificGravity

Q = TypeVar("Q", bound=Quantity)


def _check_kind(quantity: Quantity, expected: type[Quantity], name: str) -> None:
    if not isinstance(quantity, expected):
        raise TypeError(
            f"{name} must be {expected.__name__}, got {type(quantity).__name__}"
        )


def multiply_volume_by_gravity(volume: Litre, gravity: SpecificGravity) -> Litre:
    """Scale a volume by a specific gravity."""
    _check_kind(volume, Litre, "volume")
    _check_kind(gravity, SpecificGravity, "gravity")
    return volume * gravity.value


def multiply_mass_by_gravity(mass: Kilogram, gravity: SpecificGravity) -> Kilogram:
    """Scale a mass by a specific gravity."""
    _check_kind(mass, Kilogram, "mass")
    _check_kind(gravity, SpecificGravity, "gravity")
    return mass * gravity.value


ALLOWED_PAIRINGS: dict[tuple[type[Quantity], type[Quantity]], Callable] = {
    (Litre, SpecificGravity): multiply_volume_by_gravity,
    (Kilogram, SpecificGravity): multiply_mass_by_gravity,
}


def scale_by_gravity(quantity: Q, gravity: SpecificGravity) -> Q:
    """
    Scale a quantity by a specific gravity using the matching combinator.

    Args:
        quantity: Quantity to scale (Litre or Kilogram)
        gravity: Dimensionless gravity factor

    Returns:
        A quantity of the same kind as the input

    Raises:
        TypeError: If no combinator exists for the pair of kinds
    """
    combinator = ALLOWED_PAIRINGS.get((type(quantity), type(gravity)))
    if combinator is None:
        raise TypeError(
            f"Cannot scale {type(quantity).__name__} by {type(gravity).__name__}"
        )
    return combinator(quantity, gravity)
