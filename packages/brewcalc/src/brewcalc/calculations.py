"""
Fermentation and mash calculations.
"""

from brewcalc.quantities import AlcoholByVolume, SpecificGravity
from brewcalc.units import Kilograms, Liters

# Unit conversion constant from gravity drop to ABV percent
GRAVITY_TO_ALCOHOL_COEFF = 131.25


def abv_from_gravity_diff(
    original_gravity: SpecificGravity,
    current_gravity: SpecificGravity,
) -> AlcoholByVolume:
    """
    Estimate alcohol by volume from the gravity drop.

    ABV = (OG - CG) * 131.25

    If fermentation is complete the current gravity is the final
    gravity (FG).

    Args:
        original_gravity: Gravity before fermentation (OG)
        current_gravity: Gravity now

    Returns:
        Alcohol by volume in percent
    """
    for name, gravity in (
        ("original_gravity", original_gravity),
        ("current_gravity", current_gravity),
    ):
        if not isinstance(gravity, SpecificGravity):
            raise TypeError(
                f"{name} must be SpecificGravity, got {type(gravity).__name__}"
            )
    gravity_diff = original_gravity - current_gravity
    return AlcoholByVolume.model_construct(
        value=gravity_diff.value * GRAVITY_TO_ALCOHOL_COEFF
    )


def strike_water_volume(grain_weight: Kilograms, mash_thickness: float) -> Liters:
    """
    Strike water volume from grain weight.

    No unit checking: mash_thickness must already be in litres per
    unit of grain_weight.
    """
    return grain_weight * mash_thickness
