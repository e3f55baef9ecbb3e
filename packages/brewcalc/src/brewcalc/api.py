"""
Plain-number function surface for host integrations.

Each function takes and returns floats, validating inputs by building
the matching quantity types at the boundary.
"""

from brewcalc import calculations, conversions
from brewcalc.config import get_config
from brewcalc.ibu import IbuMethod
from brewcalc.ibu import ibu as calculate_ibu
from brewcalc.quantities import Kilogram, Litre, Plato, SpecificGravity


def abv_from_gravity_diff(original_gravity: float, current_gravity: float) -> float:
    """
    Alcohol by volume in percent from original and current gravity.

    Raises:
        ValidationError: If either gravity is NaN or negative
    """
    og = SpecificGravity.new(original_gravity)
    cg = SpecificGravity.new(current_gravity)
    return calculations.abv_from_gravity_diff(og, cg).value


def specific_gravity_to_plato(sg: float) -> float:
    """Convert specific gravity to degrees Plato."""
    return conversions.specific_gravity_to_plato(SpecificGravity.new(sg)).value


def plato_to_specific_gravity(plato: float) -> float:
    """Convert degrees Plato to specific gravity."""
    return conversions.plato_to_specific_gravity(Plato.new(plato)).value


def strike_water_volume(grain_weight: float, mash_thickness: float) -> float:
    """Strike water volume in litres for a grain weight in kilograms."""
    return calculations.strike_water_volume(
        Kilogram.new(grain_weight).value, mash_thickness
    )


def ibu(
    hop_mass: float,
    alpha_acid: float,
    volume: float,
    boil_time: float,
    wort_gravity: float,
    method: IbuMethod | str | None = None,
) -> float:
    """
    IBU for a single hop addition.

    When no method is given the configured default is used
    (BREWCALC_IBU_METHOD, Tinseth unless set).

    Raises:
        ValidationError: If an input is invalid or the method unknown
        IbuMethodNotImplementedError: If the method has no formula
    """
    if method is None:
        method = get_config().ibu_method
    return calculate_ibu(
        method,
        Kilogram.new(hop_mass).value,
        alpha_acid,
        Litre.new(volume).value,
        boil_time,
        SpecificGravity.new(wort_gravity).value,
    )
